# src/agentic_docqa/steps/nodes/summary.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.model import ainvoke_text
from agentic_docqa.state import ConversationState, StepName, StepOutput
from agentic_docqa.steps.prompts.summary import SUMMARY_PROMPT, SUMMARY_SYSTEM_PROMPT
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


def make_summary_node(llm, *, timeout: Optional[float] = None):
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", SUMMARY_SYSTEM_PROMPT),
            ("human", SUMMARY_PROMPT),
        ]
    )

    @observe
    async def summary(state: ConversationState) -> Dict[str, Any]:
        context = state.get("context") or ""
        if not context.strip():
            logger.warning("Nothing to summarize; rerouting to fallback")
            return {"next_step": StepName.FALLBACK}

        prompt_val = await prompt.ainvoke({"context": context})
        text = await ainvoke_text(llm, prompt_val, timeout=timeout)
        return {"outputs": [StepOutput(agent=StepName.SUMMARY, content=text)]}

    return summary
