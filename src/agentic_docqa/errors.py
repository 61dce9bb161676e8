# src/agentic_docqa/errors.py
"""Exception types raised by the orchestration core.

Upstream failures propagate out of graph nodes so the node retry policy and the
request boundary (``AgentService.ask``) can deal with them.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class UpstreamCallError(Exception):
    """A language-model, search, rerank or web call failed."""

    def __init__(self, message: str, *, service: Optional[str] = None):
        super().__init__(message)
        self.service = service


class UpstreamTimeoutError(UpstreamCallError):
    """A network call did not complete within its deadline."""


class GuardrailParseError(ValueError):
    """The grading check returned output that does not match its schema."""


def error_record(
    node: str,
    exc: BaseException,
    *,
    retryable: bool,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    if isinstance(exc, UpstreamTimeoutError):
        err_type = "upstream_timeout"
    elif isinstance(exc, GuardrailParseError):
        err_type = "model_output_parse"
    elif isinstance(exc, UpstreamCallError):
        err_type = "upstream_error"
    else:
        err_type = "runtime_error"

    return {
        "node": node,
        "type": err_type,
        "message": str(exc),
        "retryable": retryable,
        "details": {"exception_type": type(exc).__name__, **(details or {})},
    }
