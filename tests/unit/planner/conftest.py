# tests/unit/planner/conftest.py
"""Shared fixtures for planner module unit tests."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Disable Langfuse for unit tests
os.environ["LANGFUSE_ENABLED"] = "0"


@pytest.fixture
def mock_llm():
    """Mock LLM whose structured-output chain returns a configurable plan."""
    llm = MagicMock()
    chain = MagicMock()
    chain.ainvoke = AsyncMock(return_value={"steps": ["retriever", "answer"]})
    llm.with_structured_output = MagicMock(return_value=chain)
    llm.structured_chain = chain
    return llm
