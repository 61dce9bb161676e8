"""Step executor: the state machine that drives plan execution."""

from agentic_docqa.executor.nodes.step_executor import step_executor
from agentic_docqa.executor.routing import STEP_NODES, route_after_step, route_from_executor

__all__ = ["step_executor", "route_from_executor", "route_after_step", "STEP_NODES"]
