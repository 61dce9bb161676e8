# src/agentic_docqa/steps/nodes/retriever.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.guardrails.parsing import reply_affirms
from agentic_docqa.model import ainvoke_text
from agentic_docqa.retrieval.constants import MIN_CONTEXT_CHARS
from agentic_docqa.retrieval.hybrid import HybridRetriever
from agentic_docqa.state import ConversationState
from agentic_docqa.steps.prompts.retriever import RELEVANCE_PROMPT, RELEVANCE_SYSTEM_PROMPT
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


def make_retriever_node(retriever: HybridRetriever, llm, *, timeout: Optional[float] = None):
    """Retriever step:
    - Empty rerank result: reroute to fallback
    - Too little context, or the relevance judge does not say "yes": force a web search
    - Otherwise: set ``context`` (nothing is appended to outputs)
    """
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", RELEVANCE_SYSTEM_PROMPT),
            ("human", RELEVANCE_PROMPT),
        ]
    )

    @observe
    async def retriever_node(state: ConversationState) -> Dict[str, Any]:
        question = state.get("question", "")
        outcome = await retriever.retrieve(question)

        if outcome.reroute is not None:
            logger.warning(f"Retriever rerouted to {outcome.reroute.value}")
            return {"context": None, "next_step": outcome.reroute}

        context = outcome.context or ""
        if len(context.strip()) < MIN_CONTEXT_CHARS:
            logger.warning(f"Retrieved context too short ({len(context.strip())} chars); forcing web search")
            return {"context": None, "force_web_search": True}

        prompt_val = await prompt.ainvoke({"question": question, "context": context})
        reply = await ainvoke_text(llm, prompt_val, timeout=timeout)
        if not reply_affirms(reply, "yes"):
            logger.warning("Retrieved context judged irrelevant; forcing web search")
            return {"context": None, "force_web_search": True}

        logger.info(f"Retriever produced {len(context)} chars of context")
        return {"context": context}

    return retriever_node
