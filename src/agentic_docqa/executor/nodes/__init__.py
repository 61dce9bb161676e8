"""Executor nodes."""

from agentic_docqa.executor.nodes.step_executor import step_executor

__all__ = ["step_executor"]
