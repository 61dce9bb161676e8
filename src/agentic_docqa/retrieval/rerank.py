# src/agentic_docqa/retrieval/rerank.py

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import cohere

from agentic_docqa.config import DEFAULT_RERANK_MODEL
from agentic_docqa.retrieval.state import RerankResult

logger = logging.getLogger(__name__)


class CohereReranker:
    """Cross-encoder reranking through the Cohere rerank API.

    Failures propagate: unranked candidates are never returned in place of a ranking.
    """

    def __init__(
        self,
        client: Optional[cohere.AsyncClientV2] = None,
        *,
        api_key: Optional[str] = None,
        model: str = DEFAULT_RERANK_MODEL,
    ):
        self.client = client or cohere.AsyncClientV2(api_key=api_key)
        self.model = model

    async def rerank(self, query: str, documents: Sequence[str]) -> List[RerankResult]:
        if not documents:
            return []

        response = await self.client.rerank(
            model=self.model,
            query=query,
            documents=list(documents),
            top_n=len(documents),
        )
        results = [RerankResult(index=r.index, relevance_score=float(r.relevance_score)) for r in response.results]
        logger.debug(f"Cohere reranked {len(documents)} documents with {self.model}")
        return results
