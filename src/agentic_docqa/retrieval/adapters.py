# src/agentic_docqa/retrieval/adapters.py

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from agentic_docqa.retrieval.state import LexicalHit, RerankResult, SemanticHit


class SemanticSearchAdapter(Protocol):
    """Nearest-neighbour search over the document collection.

    Example implementation over a langchain vector store:

        class VectorStoreSemanticSource:
            def __init__(self, store):
                self.store = store

            async def search(self, query, k):
                pairs = await self.store.asimilarity_search_with_score(query, k=k)
                return [SemanticHit(content=d.page_content, score=s) for d, s in pairs]
    """

    async def search(self, query: str, k: int) -> List[SemanticHit]:
        """Return up to k hits, best first. Scores are roughly 0-1."""
        raise NotImplementedError


class LexicalSearchAdapter(Protocol):
    """Term-frequency search. Hits index into the adapter's own ``documents``."""

    documents: Sequence[str]

    async def search(self, query: str, k: int) -> List[LexicalHit]:
        raise NotImplementedError


class RerankerAdapter(Protocol):
    """Cross-encoder reranking service.

    Example implementation using a local cross-encoder model:

        from sentence_transformers import CrossEncoder

        class LocalCrossEncoderReranker:
            def __init__(self, model_name="cross-encoder/ms-marco-MiniLM-L-6-v2"):
                self.model = CrossEncoder(model_name)

            async def rerank(self, query, documents):
                scores = self.model.predict([(query, d) for d in documents])
                return [RerankResult(index=i, relevance_score=float(s)) for i, s in enumerate(scores)]
    """

    async def rerank(self, query: str, documents: Sequence[str]) -> List[RerankResult]:
        """Return one result per scored document; ``index`` refers back into ``documents``."""
        raise NotImplementedError


class WebSearchAdapter(Protocol):
    async def search(self, query: str) -> Optional[str]:
        """Return a synthesized answer or concatenated snippets, or None when nothing was found."""
        raise NotImplementedError
