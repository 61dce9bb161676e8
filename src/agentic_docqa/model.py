# src/agentic_docqa/model.py

import logging
from typing import Any, Optional

from langchain.chat_models import init_chat_model

from agentic_docqa.config import AgentSettings
from agentic_docqa.utils import call_with_deadline

logger = logging.getLogger(__name__)


def get_default_model(settings: Optional[AgentSettings] = None):
    settings = settings or AgentSettings.from_env()
    model = init_chat_model(
        model=settings.model,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )
    logger.info(f"Initialized chat model {settings.model}")
    return model


def message_text(message: Any) -> str:
    """Plain text of a chat model reply (string content or a list of content parts)."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return str(content)


async def ainvoke_text(llm, messages, *, timeout: Optional[float] = None) -> str:
    res = await call_with_deadline(llm.ainvoke(messages), timeout, service="llm")
    return message_text(res)
