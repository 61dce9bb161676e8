# src/agentic_docqa/service.py
"""Request boundary: owns the model client and adapters, runs one graph invocation per question."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from agentic_docqa.combiner.nodes.combine import NO_RESULTS_MESSAGE
from agentic_docqa.config import AgentSettings
from agentic_docqa.errors import UpstreamTimeoutError, error_record
from agentic_docqa.graph import make_agent_graph
from agentic_docqa.guardrails.chain import GuardrailChain
from agentic_docqa.ingest import Corpus
from agentic_docqa.model import get_default_model
from agentic_docqa.retrieval.adapters import RerankerAdapter, WebSearchAdapter
from agentic_docqa.retrieval.hybrid import HybridRetriever
from agentic_docqa.retrieval.query_expander import QueryExpander
from agentic_docqa.retrieval.rerank import CohereReranker
from agentic_docqa.retrieval.web_search import TavilyWebSearch
from agentic_docqa.utils import should_retry

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Sorry, something went wrong while answering your question. Please try again later."

# Upper bound on graph super-steps; real runs need 2 per dispatched step plus planner and combiner
RECURSION_LIMIT = 100


class AgentService:
    def __init__(
        self,
        *,
        llm,
        retriever: HybridRetriever,
        web_search: WebSearchAdapter,
        guardrails: Optional[GuardrailChain] = None,
        settings: Optional[AgentSettings] = None,
    ):
        self.settings = settings or AgentSettings()
        self.llm = llm
        self.graph = make_agent_graph(
            llm,
            retriever=retriever,
            web_search=web_search,
            guardrails=guardrails,
            max_retries=self.settings.max_retries,
            call_timeout=self.settings.call_timeout_s,
        )

    @classmethod
    def from_corpus(
        cls,
        corpus: Corpus,
        *,
        settings: Optional[AgentSettings] = None,
        llm=None,
        reranker: Optional[RerankerAdapter] = None,
        web_search: Optional[WebSearchAdapter] = None,
    ) -> "AgentService":
        settings = settings or AgentSettings.from_env()
        llm = llm or get_default_model(settings)
        reranker = reranker or CohereReranker(api_key=settings.cohere_api_key, model=settings.rerank_model)
        web_search = web_search or TavilyWebSearch(
            api_key=settings.tavily_api_key,
            max_results=settings.web_max_results,
        )

        retriever = HybridRetriever(
            expander=QueryExpander(llm, timeout=settings.call_timeout_s),
            semantic=corpus.semantic,
            lexical=corpus.lexical,
            reranker=reranker,
            timeout=settings.call_timeout_s,
        )
        return cls(llm=llm, retriever=retriever, web_search=web_search, settings=settings)

    async def ask(self, question: str) -> Dict[str, Any]:
        """Answer one question. Unrecoverable failures yield a single generic message."""
        if not question or not question.strip():
            raise ValueError("Missing 'question'")
        question = question.strip()

        try:
            out = await asyncio.wait_for(
                self.graph.ainvoke({"question": question}, config={"recursion_limit": RECURSION_LIMIT}),
                timeout=self.settings.request_timeout_s,
            )
        except asyncio.TimeoutError:
            err = UpstreamTimeoutError(f"Request exceeded {self.settings.request_timeout_s:.1f}s")
            logger.error(f"Request timed out: {err}")
            return {"output": GENERIC_FAILURE_MESSAGE, "errors": [error_record("agent", err, retryable=True)]}
        except Exception as e:
            logger.exception(f"Request failed: {e}")
            return {"output": GENERIC_FAILURE_MESSAGE, "errors": [error_record("agent", e, retryable=should_retry(e))]}

        return {
            "output": out.get("output") or NO_RESULTS_MESSAGE,
            "plan": [s.value for s in out.get("plan") or []],
            "errors": out.get("errors") or [],
        }
