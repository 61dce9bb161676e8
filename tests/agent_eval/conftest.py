# tests/agent_eval/conftest.py

import os
import uuid
from typing import Optional

import pytest
from dotenv import load_dotenv

# Load .env once for the whole test session
load_dotenv()


def _env(name: str) -> Optional[str]:
    v = os.getenv(name)
    return v.strip() if v and v.strip() else None


@pytest.fixture(scope="session")
def run_id() -> str:
    """Unique id for this pytest run. Override with AGENT_EVAL_RUN_ID for stable paths in CI."""
    return _env("AGENT_EVAL_RUN_ID") or f"pytest-{uuid.uuid4().hex[:10]}"


@pytest.fixture(scope="session")
def live_settings():
    """Production settings; skips unless model, rerank and web search credentials are all configured."""
    missing = [k for k in ("OPENAI_API_KEY", "COHERE_API_KEY", "TAVILY_API_KEY") if not _env(k)]
    if missing:
        pytest.skip(f"Live agent eval needs credentials: {', '.join(missing)}")

    from agentic_docqa.config import AgentSettings

    return AgentSettings.from_env()
