# src/agentic_docqa/planner/nodes/planner.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from langchain_core.exceptions import OutputParserException
from langchain_core.prompts import ChatPromptTemplate
from pydantic import ValidationError

from agentic_docqa.planner.prompts.planner import PLANNER_PROMPT
from agentic_docqa.planner.state import CONTEXT_STEPS, GENERATION_STEPS, MAX_PLAN_STEPS, PlanModel
from agentic_docqa.state import ConversationState, StepName
from agentic_docqa.utils import call_with_deadline, observe

logger = logging.getLogger(__name__)

FALLBACK_PLAN = [StepName.FALLBACK]


def repair_plan(steps: Sequence[StepName]) -> List[StepName]:
    """Collapse repeated consecutive steps, make sure generation has context, cap the length."""
    plan: List[StepName] = []
    for step in steps:
        if plan and plan[-1] == step:
            continue
        plan.append(step)

    for step in plan:
        if step in CONTEXT_STEPS:
            break
        if step in GENERATION_STEPS:
            logger.warning(f"Plan uses {step.value} before any context step; prepending retriever")
            plan.insert(0, StepName.RETRIEVER)
            break

    if len(plan) > MAX_PLAN_STEPS:
        logger.warning(f"Plan of {len(plan)} steps truncated to {MAX_PLAN_STEPS}")
        plan = plan[:MAX_PLAN_STEPS]

    return plan


class Planner:
    """Maps a question to an ordered plan. Malformed model output degrades to [fallback]."""

    def __init__(self, llm, *, timeout: Optional[float] = None):
        self.timeout = timeout
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", PLANNER_PROMPT),
                ("human", "{question}"),
            ]
        )
        self.model = llm.with_structured_output(PlanModel, method="function_calling")

    async def plan(self, question: str) -> List[StepName]:
        steps, _ = await self.plan_with_error(question)
        return steps

    async def plan_with_error(self, question: str) -> Tuple[List[StepName], Optional[Dict[str, Any]]]:
        """Plan plus the error record of a degraded (fallback) plan, if any."""
        try:
            prompt_val = await self.prompt.ainvoke({"question": question})
            raw = await call_with_deadline(self.model.ainvoke(prompt_val), self.timeout, service="llm")

            # Support both dict and Pydantic object
            if isinstance(raw, PlanModel):
                plan_obj = raw
            elif hasattr(raw, "model_dump"):
                plan_obj = PlanModel.model_validate(raw.model_dump())
            else:
                plan_obj = PlanModel.model_validate(raw)
        except (ValidationError, OutputParserException) as e:
            logger.warning(f"Planner output failed validation; degrading to {[s.value for s in FALLBACK_PLAN]}")
            error = {
                "node": "planner",
                "type": "model_output_parse",
                "message": "Planner structured output failed validation.",
                "retryable": False,
                "details": {"exception_type": type(e).__name__},
            }
            return list(FALLBACK_PLAN), error

        return repair_plan(plan_obj.steps), None


def make_planner_node(planner: Planner):
    """Planner node: emits ``plan`` and resets the step cursor. Does no retrieval or answering."""

    @observe
    async def planner_node(state: ConversationState) -> Dict[str, Any]:
        plan, error = await planner.plan_with_error(state.get("question", ""))
        logger.info(f"Plan: {[s.value for s in plan]}")

        out: Dict[str, Any] = {
            "plan": plan,
            "step_index": 0,
            "current_step": None,
            "next_step": None,
            "force_web_search": False,
        }
        if error:
            out["errors"] = [error]
        return out

    return planner_node
