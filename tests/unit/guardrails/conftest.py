# tests/unit/guardrails/conftest.py
"""Shared fixtures for guardrail unit tests."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

# Disable Langfuse for unit tests
os.environ["LANGFUSE_ENABLED"] = "0"

from agentic_docqa.guardrails.state import GuardrailVerdict


@pytest.fixture
def make_llm():
    """Build a mock chat model that replies with the given texts in order."""

    def _make(*replies: str):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=[AIMessage(content=r) for r in replies])
        return llm

    return _make


@pytest.fixture
def passing_check():
    check = MagicMock()
    check.check = AsyncMock(return_value=GuardrailVerdict(passed=True))
    return check


@pytest.fixture
def make_failing_check():
    def _make(reason: str = "failed"):
        check = MagicMock()
        check.check = AsyncMock(return_value=GuardrailVerdict(passed=False, reason=reason))
        return check

    return _make
