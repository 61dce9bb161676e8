# src/agentic_docqa/state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from typing_extensions import TypedDict


class StepName(str, Enum):
    """Closed vocabulary of agent steps a plan may contain."""

    RETRIEVER = "retriever"
    ANSWER = "answer"
    SUMMARY = "summary"
    COMPARE = "compare"
    WEBSEARCH = "websearch"
    FALLBACK = "fallback"


# Graph node names that are not plan steps
STEP_EXECUTOR = "step_executor"
PLANNER = "planner"
COMBINER = "combiner"


@dataclass(frozen=True)
class StepOutput:
    agent: StepName
    content: str


# -------------------------
# Reducers (merge policy per field)
# -------------------------


def append_outputs(existing: Optional[List[StepOutput]], new: Optional[List[StepOutput]]) -> List[StepOutput]:
    if not existing:
        existing = []
    if not new:
        return existing
    return existing + new


# Reducer to append errors across nodes
def add_errors(existing: Optional[List[Dict[str, Any]]], new: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    if not existing:
        existing = []
    if not new:
        return existing
    return existing + new


def add_reports(existing: Optional[List[Dict[str, Any]]], new: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    return (existing or []) + (new or [])


class ConversationState(TypedDict, total=False):
    """Per-request state owned by the step executor.

    Fields without a reducer are overwritten by each partial update; annotated
    fields are append-only.
    """

    # Input
    question: str

    # Grounding text from retrieval or web search
    context: Optional[str]

    # Plan and cursor (step_index never exceeds len(plan))
    plan: Optional[List[StepName]]
    step_index: int
    current_step: Optional[StepName]

    # Reroute requested by a step (only FALLBACK is used)
    next_step: Optional[StepName]

    # Retrieval escape valve: interrupts the plan with a web search
    force_web_search: bool

    # Append-only trace read by the combiner
    outputs: Annotated[List[StepOutput], append_outputs]

    # Guardrail decisions for the answer step
    guardrail_reports: Annotated[List[Dict[str, Any]], add_reports]

    # Final user-facing response
    output: str

    # Shared error channel
    errors: Annotated[List[Dict[str, Any]], add_errors]


def outputs_for(state: ConversationState, agent: StepName) -> List[StepOutput]:
    return [o for o in (state.get("outputs") or []) if o.agent == agent]
