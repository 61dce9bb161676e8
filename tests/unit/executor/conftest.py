# tests/unit/executor/conftest.py
"""Shared fixtures for executor and agent graph unit tests."""

import os
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

# Disable Langfuse for unit tests
os.environ["LANGFUSE_ENABLED"] = "0"

from agentic_docqa.guardrails.state import GuardrailVerdict
from agentic_docqa.retrieval.state import RetrievalOutcome

RELEVANT_CONTEXT = (
    "Plan X covers outpatient care with a 20% co-pay.\n\n"
    "Plan Y covers outpatient and dental care with a 10% co-pay."
)


@pytest.fixture
def make_llm():
    """Mock chat model: planner chain returns ``plan``; free-text calls return ``replies`` in order."""

    def _make(plan: List[str], replies: Optional[List[str]] = None):
        llm = MagicMock()
        chain = MagicMock()
        chain.ainvoke = AsyncMock(return_value={"steps": plan})
        llm.with_structured_output = MagicMock(return_value=chain)
        llm.ainvoke = AsyncMock(side_effect=[AIMessage(content=r) for r in (replies or [])])
        return llm

    return _make


@pytest.fixture
def mock_retriever():
    retriever = MagicMock()
    retriever.retrieve = AsyncMock(return_value=RetrievalOutcome(context=RELEVANT_CONTEXT))
    return retriever


@pytest.fixture
def mock_web_search():
    web = MagicMock()
    web.search = AsyncMock(return_value="T: the document describes a 2024 vacation policy overhaul.")
    return web


def _check(passed: bool, reason: Optional[str] = None):
    check = MagicMock()
    check.check = AsyncMock(return_value=GuardrailVerdict(passed=passed, reason=reason))
    return check


@pytest.fixture
def make_check():
    return _check
