# src/agentic_docqa/retrieval/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from agentic_docqa.state import StepName

CandidateSource = Literal["vector", "lexical"]


# -------------------------
# Adapter results
# -------------------------


@dataclass(frozen=True)
class SemanticHit:
    content: str
    score: float


@dataclass(frozen=True)
class LexicalHit:
    doc_index: int
    score: float


@dataclass(frozen=True)
class RerankResult:
    index: int
    relevance_score: float


# -------------------------
# Candidates
# -------------------------


@dataclass
class RetrievalCandidate:
    content: str
    score: float
    source: CandidateSource

    # Set by the reranker; independent of the retrieval score
    rerank_score: Optional[float] = None

    # Provenance
    query: Optional[str] = None


@dataclass(frozen=True)
class RetrievalOutcome:
    """Either a non-empty context or a reroute signal, never both."""

    context: Optional[str] = None
    reroute: Optional[StepName] = None

    @classmethod
    def fallback(cls) -> "RetrievalOutcome":
        return cls(context=None, reroute=StepName.FALLBACK)
