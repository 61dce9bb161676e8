# src/agentic_docqa/guardrails/checks/faithfulness.py

from __future__ import annotations

import logging
from typing import Optional

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.guardrails.parsing import reply_affirms
from agentic_docqa.guardrails.prompts.faithfulness import FAITHFULNESS_PROMPT, FAITHFULNESS_SYSTEM_PROMPT
from agentic_docqa.guardrails.state import GuardrailVerdict
from agentic_docqa.model import ainvoke_text
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


class FaithfulnessCheck:
    """Is every claim in the answer supported by the context? Anything but a clear "yes" fails."""

    def __init__(self, llm, *, timeout: Optional[float] = None):
        self.llm = llm
        self.timeout = timeout
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", FAITHFULNESS_SYSTEM_PROMPT),
                ("human", FAITHFULNESS_PROMPT),
            ]
        )

    @observe
    async def check(self, answer: str, context: str) -> GuardrailVerdict:
        prompt_val = await self.prompt.ainvoke({"answer": answer, "context": context})
        reply = await ainvoke_text(self.llm, prompt_val, timeout=self.timeout)

        if reply_affirms(reply, "yes"):
            return GuardrailVerdict(passed=True)

        logger.info(f"Faithfulness check failed, judge replied {reply.strip()[:40]!r}")
        return GuardrailVerdict(passed=False, reason="Answer is not fully supported by the retrieved context.")
