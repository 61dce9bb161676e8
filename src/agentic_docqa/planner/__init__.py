"""Planner: decomposes a question into an ordered plan of agent steps."""

from agentic_docqa.planner.nodes.planner import Planner, make_planner_node, repair_plan
from agentic_docqa.planner.state import PlanModel

__all__ = ["Planner", "PlanModel", "make_planner_node", "repair_plan"]
