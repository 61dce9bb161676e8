# src/agentic_docqa/config.py
"""Runtime settings read from the environment.

Scripts load ``.env`` with python-dotenv before calling ``AgentSettings.from_env()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MODEL = "gpt-4.1"
DEFAULT_RERANK_MODEL = "rerank-english-v3.0"


def _env(name: str) -> Optional[str]:
    v = os.getenv(name)
    return v.strip() if v and v.strip() else None


def _env_float(name: str, default: float) -> float:
    v = _env(name)
    return float(v) if v is not None else default


def _env_int(name: str, default: int) -> int:
    v = _env(name)
    return int(v) if v is not None else default


@dataclass(frozen=True)
class AgentSettings:
    model: str = DEFAULT_MODEL
    temperature: float = 0.0
    max_tokens: int = 5000

    rerank_model: str = DEFAULT_RERANK_MODEL
    cohere_api_key: Optional[str] = None

    tavily_api_key: Optional[str] = None
    web_max_results: int = 3

    max_retries: int = 2
    call_timeout_s: Optional[float] = 30.0
    request_timeout_s: float = 120.0

    @classmethod
    def from_env(cls) -> "AgentSettings":
        return cls(
            model=_env("AGENTIC_DOCQA_MODEL") or DEFAULT_MODEL,
            temperature=_env_float("AGENTIC_DOCQA_TEMPERATURE", 0.0),
            max_tokens=_env_int("AGENTIC_DOCQA_MAX_TOKENS", 5000),
            rerank_model=_env("AGENTIC_DOCQA_RERANK_MODEL") or DEFAULT_RERANK_MODEL,
            cohere_api_key=_env("COHERE_API_KEY"),
            tavily_api_key=_env("TAVILY_API_KEY"),
            web_max_results=_env_int("AGENTIC_DOCQA_WEB_MAX_RESULTS", 3),
            max_retries=_env_int("AGENTIC_DOCQA_MAX_RETRIES", 2),
            call_timeout_s=_env_float("AGENTIC_DOCQA_CALL_TIMEOUT_S", 30.0),
            request_timeout_s=_env_float("AGENTIC_DOCQA_REQUEST_TIMEOUT_S", 120.0),
        )
