# tests/unit/service/conftest.py
"""Shared fixtures for service, ingestion and configuration unit tests."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.messages import AIMessage

# Disable Langfuse for unit tests
os.environ["LANGFUSE_ENABLED"] = "0"

from agentic_docqa.config import AgentSettings
from agentic_docqa.retrieval.state import RetrievalOutcome


@pytest.fixture
def settings():
    return AgentSettings(max_retries=1, call_timeout_s=5.0, request_timeout_s=5.0)


@pytest.fixture
def mock_llm():
    llm = MagicMock()
    chain = MagicMock()
    chain.ainvoke = AsyncMock(return_value={"steps": ["retriever", "compare"]})
    llm.with_structured_output = MagicMock(return_value=chain)
    llm.ainvoke = AsyncMock(side_effect=[AIMessage(content="yes"), AIMessage(content="cmp"), AIMessage(content="Final.")])
    return llm


@pytest.fixture
def mock_retriever():
    retriever = MagicMock()
    retriever.retrieve = AsyncMock(return_value=RetrievalOutcome(context="Plan X and plan Y both cover outpatient care."))
    return retriever


@pytest.fixture
def mock_web_search():
    web = MagicMock()
    web.search = AsyncMock(return_value=None)
    return web


@pytest.fixture
def embeddings():
    return DeterministicFakeEmbedding(size=32)
