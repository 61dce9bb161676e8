# src/agentic_docqa/steps/nodes/fallback.py

from __future__ import annotations

import logging
from typing import Any, Dict

from agentic_docqa.state import ConversationState, StepName, StepOutput
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "Sorry, I can only answer questions that are relevant to the indexed documents. "
    'Your question: "{question}" is unsupported.'
)


def fallback_message(question: str) -> str:
    return FALLBACK_MESSAGE.format(question=question)


def make_fallback_node():
    @observe
    async def fallback(state: ConversationState) -> Dict[str, Any]:
        question = state.get("question", "")
        logger.info("Fallback step producing canned refusal")
        return {"outputs": [StepOutput(agent=StepName.FALLBACK, content=fallback_message(question))]}

    return fallback
