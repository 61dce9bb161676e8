# src/agentic_docqa/retrieval/hybrid.py

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from agentic_docqa.retrieval.adapters import LexicalSearchAdapter, RerankerAdapter, SemanticSearchAdapter
from agentic_docqa.retrieval.constants import CONTEXT_SEPARATOR, DEFAULT_RERANK_TOP_N, DEFAULT_SOURCE_TOP_K
from agentic_docqa.retrieval.query_expander import QueryExpander
from agentic_docqa.retrieval.state import RerankResult, RetrievalCandidate, RetrievalOutcome
from agentic_docqa.utils import call_with_deadline, gather_or_cancel, observe

logger = logging.getLogger(__name__)


def dedupe_candidates(cands: Sequence[RetrievalCandidate]) -> List[RetrievalCandidate]:
    """Drop candidates whose trimmed content was already seen. First occurrence wins."""
    seen = set()
    unique: List[RetrievalCandidate] = []
    for c in cands:
        key = c.content.strip()
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(c)
    return unique


def select_top(
    cands: Sequence[RetrievalCandidate],
    results: Sequence[RerankResult],
    top_n: int,
) -> List[RetrievalCandidate]:
    """Attach rerank scores and keep the best top_n. Ties keep merge order."""
    scores: Dict[int, float] = {}
    for r in results:
        if not 0 <= r.index < len(cands):
            logger.warning(f"Reranker returned out-of-range index {r.index} for {len(cands)} candidates")
            continue
        scores.setdefault(r.index, r.relevance_score)

    scored = [replace(c, rerank_score=scores[i]) for i, c in enumerate(cands) if i in scores]
    # list.sort is stable, so equal scores stay in merge order
    scored.sort(key=lambda c: c.rerank_score, reverse=True)
    return scored[:top_n]


class HybridRetriever:
    """Query expansion, concurrent vector + lexical search, dedup and cross-encoder rerank."""

    def __init__(
        self,
        *,
        expander: QueryExpander,
        semantic: SemanticSearchAdapter,
        lexical: LexicalSearchAdapter,
        reranker: RerankerAdapter,
        k: int = DEFAULT_SOURCE_TOP_K,
        top_n: int = DEFAULT_RERANK_TOP_N,
        timeout: Optional[float] = None,
    ):
        self.expander = expander
        self.semantic = semantic
        self.lexical = lexical
        self.reranker = reranker
        self.k = k
        self.top_n = top_n
        self.timeout = timeout

    async def _search_variant(self, query: str) -> List[RetrievalCandidate]:
        vector_hits, lexical_hits = await gather_or_cancel(
            call_with_deadline(self.semantic.search(query, self.k), self.timeout, service="vector_search"),
            call_with_deadline(self.lexical.search(query, self.k), self.timeout, service="lexical_search"),
        )

        cands = [
            RetrievalCandidate(content=h.content, score=h.score, source="vector", query=query) for h in vector_hits
        ]

        docs = self.lexical.documents
        for h in lexical_hits:
            if not 0 <= h.doc_index < len(docs):
                logger.warning(f"Lexical hit index {h.doc_index} outside document array of {len(docs)}")
                continue
            cands.append(RetrievalCandidate(content=docs[h.doc_index], score=h.score, source="lexical", query=query))

        return cands

    @observe
    async def retrieve(self, question: str) -> RetrievalOutcome:
        queries = await self.expander.expand(question)

        # gather keeps variant order, so merge order is deterministic
        per_variant = await gather_or_cancel(*(self._search_variant(q) for q in queries))
        merged = [c for group in per_variant for c in group]
        unique = dedupe_candidates(merged)

        logger.info(f"Retrieved {len(merged)} candidates across {len(queries)} queries, {len(unique)} unique")

        if not unique:
            logger.warning("No retrieval candidates; rerouting to fallback")
            return RetrievalOutcome.fallback()

        results = await call_with_deadline(
            self.reranker.rerank(question, [c.content for c in unique]),
            self.timeout,
            service="rerank",
        )
        top = select_top(unique, results, self.top_n)

        if not top:
            logger.warning("Reranker kept no candidates; rerouting to fallback")
            return RetrievalOutcome.fallback()

        logger.info(f"Reranked {len(unique)} candidates to top {len(top)}")
        return RetrievalOutcome(context=CONTEXT_SEPARATOR.join(c.content for c in top))
