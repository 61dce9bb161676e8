# src/agentic_docqa/executor/nodes/step_executor.py

from __future__ import annotations

import logging
from typing import Any, Dict

from agentic_docqa.state import ConversationState, StepName

logger = logging.getLogger(__name__)


def step_executor(state: ConversationState) -> Dict[str, Any]:
    """One transition of the plan state machine.

    - force_web_search set: dispatch websearch, plan position unchanged
    - plan exhausted: no current step (routes to the combiner)
    - otherwise: dispatch plan[step_index] and advance the cursor
    """
    plan = list(state.get("plan") or [])
    idx = int(state.get("step_index", 0))

    if state.get("force_web_search"):
        logger.info(f"Plan interrupted at step {idx}: forcing websearch")
        return {"current_step": StepName.WEBSEARCH, "next_step": None}

    if idx >= len(plan):
        logger.info(f"Plan exhausted after {len(plan)} steps")
        return {"current_step": None, "next_step": None, "step_index": len(plan)}

    step = StepName(plan[idx])
    logger.info(f"Dispatching step {idx + 1}/{len(plan)}: {step.value}")
    return {"current_step": step, "next_step": None, "step_index": idx + 1}
