# src/agentic_docqa/planner/state.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from agentic_docqa.state import StepName

# Steps that generate from context and need a context step before them
GENERATION_STEPS = frozenset({StepName.ANSWER, StepName.SUMMARY, StepName.COMPARE})
CONTEXT_STEPS = frozenset({StepName.RETRIEVER, StepName.WEBSEARCH})

MAX_PLAN_STEPS = 8


class PlanModel(BaseModel):
    """Structured planner output: an ordered, non-empty list of step names."""

    model_config = ConfigDict(extra="forbid")

    steps: List[StepName] = Field(..., min_length=1)
