# src/agentic_docqa/executor/routing.py

from __future__ import annotations

from agentic_docqa.state import COMBINER, STEP_EXECUTOR, ConversationState, StepName

# Node name registered for each step
STEP_NODES = {
    StepName.RETRIEVER: "retriever",
    StepName.ANSWER: "answer",
    StepName.SUMMARY: "summary",
    StepName.COMPARE: "compare",
    StepName.WEBSEARCH: "websearch",
    StepName.FALLBACK: "fallback",
}


def route_from_executor(state: ConversationState) -> str:
    step = state.get("current_step")

    if step is None:
        return COMBINER
    if step == StepName.RETRIEVER:
        return STEP_NODES[StepName.RETRIEVER]
    if step == StepName.ANSWER:
        return STEP_NODES[StepName.ANSWER]
    if step == StepName.SUMMARY:
        return STEP_NODES[StepName.SUMMARY]
    if step == StepName.COMPARE:
        return STEP_NODES[StepName.COMPARE]
    if step == StepName.WEBSEARCH:
        return STEP_NODES[StepName.WEBSEARCH]
    if step == StepName.FALLBACK:
        return STEP_NODES[StepName.FALLBACK]
    raise ValueError(f"Unknown step {step!r}")


def route_after_step(state: ConversationState) -> str:
    """Steps that request a reroute jump to fallback; all others return to the executor."""
    if state.get("next_step") == StepName.FALLBACK:
        return STEP_NODES[StepName.FALLBACK]
    return STEP_EXECUTOR
