# src/agentic_docqa/utils.py
"""Shared node plumbing: tracing decorator, call deadlines, retry policy."""

import asyncio
import logging
import os
from typing import Awaitable, List, Optional, TypeVar

from langgraph.types import RetryPolicy

from agentic_docqa.errors import UpstreamTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Observability setup: LANGFUSE_ENABLED=0 turns tracing into a no-op
OBSERVE_ENABLED = os.getenv("LANGFUSE_ENABLED", "1") == "1"

if OBSERVE_ENABLED:
    from langfuse import observe
else:

    def observe(fn=None, **kwargs):
        def _wrap(f):
            return f

        return _wrap(fn) if fn else _wrap


# Programming and parse errors are not worth a second attempt
_NON_RETRYABLE = (ValueError, TypeError, LookupError, AttributeError, NotImplementedError)


def should_retry(exc: Exception) -> bool:
    if isinstance(exc, UpstreamTimeoutError):
        return True
    return not isinstance(exc, _NON_RETRYABLE)


def make_retry_policy(max_retries: int) -> RetryPolicy:
    """Bounded retry with exponential backoff and jitter for graph nodes."""
    return RetryPolicy(
        max_attempts=max(1, int(max_retries)),
        initial_interval=0.5,
        backoff_factor=2.0,
        max_interval=8.0,
        jitter=True,
        retry_on=should_retry,
    )


async def call_with_deadline(aw: Awaitable[T], timeout: Optional[float], *, service: str = "upstream") -> T:
    """Await a network call, converting a missed deadline into UpstreamTimeoutError."""
    if timeout is None:
        return await aw
    try:
        return await asyncio.wait_for(aw, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.warning(f"{service} call exceeded {timeout:.1f}s deadline")
        raise UpstreamTimeoutError(f"{service} call timed out after {timeout:.1f}s", service=service) from e


async def gather_or_cancel(*aws: Awaitable[T]) -> List[T]:
    """Like asyncio.gather, but a failure cancels and drains the sibling calls still in flight."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    finally:
        pending = [t for t in tasks if not t.done()]
        for t in pending:
            t.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
