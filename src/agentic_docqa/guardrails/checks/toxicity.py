# src/agentic_docqa/guardrails/checks/toxicity.py

from __future__ import annotations

import logging
from typing import Optional

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.guardrails.parsing import reply_affirms
from agentic_docqa.guardrails.prompts.toxicity import TOXICITY_PROMPT, TOXICITY_SYSTEM_PROMPT
from agentic_docqa.guardrails.state import GuardrailVerdict
from agentic_docqa.model import ainvoke_text
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


class ToxicityCheck:
    def __init__(self, llm, *, timeout: Optional[float] = None):
        self.llm = llm
        self.timeout = timeout
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", TOXICITY_SYSTEM_PROMPT),
                ("human", TOXICITY_PROMPT),
            ]
        )

    @observe
    async def check(self, answer: str) -> GuardrailVerdict:
        prompt_val = await self.prompt.ainvoke({"answer": answer})
        reply = await ainvoke_text(self.llm, prompt_val, timeout=self.timeout)

        # "unsafe" never leads with "safe"; "not safe" is caught by the negation list
        if reply_affirms(reply, "safe", negatives=("not", "unsafe")):
            return GuardrailVerdict(passed=True)

        logger.info(f"Toxicity check failed, judge replied {reply.strip()[:40]!r}")
        return GuardrailVerdict(passed=False, reason="Answer was flagged as unsafe.")
