# src/agentic_docqa/retrieval/sources.py
"""Candidate sources: lexical BM25 over an in-process corpus and a langchain vector store."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from langchain_core.documents import Document
from langchain_core.vectorstores import VectorStore
from rank_bm25 import BM25Okapi

from agentic_docqa.retrieval.state import LexicalHit, SemanticHit

logger = logging.getLogger(__name__)

_TOKEN_SPLIT_RE = re.compile(r"\W+")


def tokenize(text: str) -> List[str]:
    return [t for t in _TOKEN_SPLIT_RE.split(text.lower()) if t]


class BM25LexicalSource:
    """BM25 (Okapi) search. ``documents`` is the array hit indices resolve against."""

    def __init__(self, texts: Optional[Iterable[str]] = None):
        self.documents: List[str] = []
        # (index, per-document term sets), swapped together on rebuild
        self._index: Optional[Tuple[BM25Okapi, List[FrozenSet[str]]]] = None
        if texts:
            self.add_texts(texts)

    def add_texts(self, texts: Iterable[str]) -> None:
        added = [t for t in texts if t and t.strip()]
        if not added:
            return
        self.documents.extend(added)
        corpus = [tokenize(d) for d in self.documents]
        # rank_bm25 has no incremental update; rebuild and swap
        self._index = (BM25Okapi(corpus), [frozenset(toks) for toks in corpus])
        logger.info(f"BM25 index rebuilt with {len(self.documents)} documents")

    def _search(self, query: str, k: int) -> List[LexicalHit]:
        index = self._index
        tokens = tokenize(query)
        if index is None or not tokens:
            return []
        bm25, token_sets = index

        # Okapi IDF is zero or negative for terms in half the documents or more,
        # so a match is decided by shared terms, not by score sign
        query_terms = set(tokens)
        matching = [i for i, terms in enumerate(token_sets) if terms & query_terms]
        if not matching:
            return []

        scores = bm25.get_scores(tokens)
        matching.sort(key=lambda i: scores[i], reverse=True)
        return [LexicalHit(doc_index=i, score=float(scores[i])) for i in matching[:k]]

    async def search(self, query: str, k: int) -> List[LexicalHit]:
        return await asyncio.to_thread(self._search, query, k)


class VectorStoreSemanticSource:
    """Semantic search over any langchain ``VectorStore``.

    Uses the store's native similarity score; scores are only compared after rerank.
    """

    def __init__(self, store: VectorStore):
        self.store = store

    async def search(self, query: str, k: int) -> List[SemanticHit]:
        pairs = await self.store.asimilarity_search_with_score(query, k=k)
        return [SemanticHit(content=doc.page_content, score=float(score)) for doc, score in pairs]

    async def add_documents(self, documents: Sequence[Document]) -> List[str]:
        return await self.store.aadd_documents(list(documents))
