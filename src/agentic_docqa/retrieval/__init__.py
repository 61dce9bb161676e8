"""Hybrid document retrieval: query expansion, lexical + semantic search, rerank."""

from agentic_docqa.retrieval.hybrid import HybridRetriever
from agentic_docqa.retrieval.query_expander import QueryExpander
from agentic_docqa.retrieval.state import RetrievalCandidate, RetrievalOutcome

__all__ = ["HybridRetriever", "QueryExpander", "RetrievalCandidate", "RetrievalOutcome"]
