# tests/unit/retrieval/conftest.py
"""Shared fixtures for retrieval module unit tests."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

# Disable Langfuse for unit tests
os.environ["LANGFUSE_ENABLED"] = "0"

from agentic_docqa.retrieval.state import LexicalHit, RerankResult, RetrievalCandidate, SemanticHit


@pytest.fixture
def mock_llm():
    """Mock chat model whose ainvoke returns three rewrites."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="rewrite one\nrewrite two\nrewrite three"))
    return llm


@pytest.fixture
def mock_expander():
    """Expander returning the question plus one rewrite."""
    expander = MagicMock()
    expander.expand = AsyncMock(side_effect=lambda q: [q, f"{q} rewritten"])
    return expander


@pytest.fixture
def mock_semantic():
    semantic = MagicMock()
    semantic.search = AsyncMock(
        return_value=[
            SemanticHit(content="Full-time staff get 25 vacation days.", score=0.91),
            SemanticHit(content="Vacation requests go through the HR portal.", score=0.72),
        ]
    )
    return semantic


@pytest.fixture
def mock_lexical():
    lexical = MagicMock()
    lexical.documents = [
        "Full-time staff get 25 vacation days.",
        "Part-time staff accrue vacation pro rata.",
    ]
    lexical.search = AsyncMock(return_value=[LexicalHit(doc_index=1, score=3.2), LexicalHit(doc_index=0, score=1.1)])
    return lexical


@pytest.fixture
def mock_reranker():
    """Reranker that scores documents by position (first document best)."""
    reranker = MagicMock()

    async def _rerank(query, documents):
        n = len(documents)
        return [RerankResult(index=i, relevance_score=(n - i) / n) for i in range(n)]

    reranker.rerank = AsyncMock(side_effect=_rerank)
    return reranker


@pytest.fixture
def make_candidate():
    def _make(content: str, score: float = 0.5, source: str = "vector") -> RetrievalCandidate:
        return RetrievalCandidate(content=content, score=score, source=source)

    return _make
