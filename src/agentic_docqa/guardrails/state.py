# src/agentic_docqa/guardrails/state.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class GuardrailCheck(str, Enum):
    FAITHFULNESS = "faithfulness"
    TOXICITY = "toxicity"
    GRADING = "grading"


@dataclass(frozen=True)
class GuardrailVerdict:
    passed: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class GuardrailDecision:
    accepted: bool
    failing_check: Optional[GuardrailCheck] = None
    reason: Optional[str] = None

    @classmethod
    def reject(cls, check: GuardrailCheck, reason: Optional[str]) -> "GuardrailDecision":
        return cls(accepted=False, failing_check=check, reason=reason)

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["failing_check"] = self.failing_check.value if self.failing_check else None
        return out


class GradeModel(BaseModel):
    """Structured reply of the grading check."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    passed: bool = Field(
        ...,
        alias="pass",
        description="true if the answer is relevant, complete, and clear; false otherwise",
    )
    reason: str = Field(..., description="short explanation of why the answer passed or failed")
