# src/agentic_docqa/steps/nodes/compare.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.model import ainvoke_text
from agentic_docqa.state import ConversationState, StepName, StepOutput
from agentic_docqa.steps.prompts.compare import COMPARE_PROMPT, COMPARE_SYSTEM_PROMPT
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


def make_compare_node(llm, *, timeout: Optional[float] = None):
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", COMPARE_SYSTEM_PROMPT),
            ("human", COMPARE_PROMPT),
        ]
    )

    @observe
    async def compare(state: ConversationState) -> Dict[str, Any]:
        context = state.get("context") or ""
        if not context.strip():
            logger.warning("Nothing to compare; rerouting to fallback")
            return {"next_step": StepName.FALLBACK}

        prompt_val = await prompt.ainvoke({"context": context, "question": state.get("question", "")})
        text = await ainvoke_text(llm, prompt_val, timeout=timeout)
        return {"outputs": [StepOutput(agent=StepName.COMPARE, content=text)]}

    return compare
