# tests/unit/steps/conftest.py
"""Shared fixtures for agent step unit tests."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

# Disable Langfuse for unit tests
os.environ["LANGFUSE_ENABLED"] = "0"

from agentic_docqa.guardrails.state import GuardrailCheck, GuardrailDecision
from agentic_docqa.retrieval.state import RetrievalOutcome

CONTEXT = "Full-time employees accrue 25 days of paid vacation per calendar year."


@pytest.fixture
def context():
    return CONTEXT


@pytest.fixture
def make_llm():
    def _make(*replies: str):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=[AIMessage(content=r) for r in replies])
        return llm

    return _make


@pytest.fixture
def mock_retriever():
    """HybridRetriever stand-in returning a relevant context."""
    retriever = MagicMock()
    retriever.retrieve = AsyncMock(return_value=RetrievalOutcome(context=CONTEXT))
    return retriever


@pytest.fixture
def accepting_guardrails():
    guardrails = MagicMock()
    guardrails.evaluate = AsyncMock(return_value=GuardrailDecision(accepted=True))
    return guardrails


@pytest.fixture
def rejecting_guardrails():
    guardrails = MagicMock()
    guardrails.evaluate = AsyncMock(
        return_value=GuardrailDecision.reject(GuardrailCheck.FAITHFULNESS, "not supported by context")
    )
    return guardrails


@pytest.fixture
def mock_web_search():
    web = MagicMock()
    web.search = AsyncMock(return_value="Web result text about vacation policies.")
    return web
