# src/agentic_docqa/guardrails/checks/grading.py

from __future__ import annotations

import logging
from typing import Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.errors import GuardrailParseError
from agentic_docqa.guardrails.prompts.grading import GRADING_PROMPT, GRADING_SYSTEM_PROMPT
from agentic_docqa.guardrails.state import GradeModel, GuardrailVerdict
from agentic_docqa.model import ainvoke_text
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


class GradingCheck:
    """Relevance / completeness / clarity grade.

    A reply that does not parse into ``GradeModel`` raises GuardrailParseError; it never passes silently.
    """

    def __init__(self, llm, *, timeout: Optional[float] = None):
        self.llm = llm
        self.timeout = timeout
        self.parser = PydanticOutputParser(pydantic_object=GradeModel)
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", GRADING_SYSTEM_PROMPT),
                ("human", GRADING_PROMPT),
            ]
        )

    @observe
    async def check(self, answer: str, question: str, context: str) -> GuardrailVerdict:
        prompt_val = await self.prompt.ainvoke(
            {
                "answer": answer,
                "question": question,
                "context": context,
                "format_instructions": self.parser.get_format_instructions(),
            }
        )
        reply = await ainvoke_text(self.llm, prompt_val, timeout=self.timeout)

        try:
            grade = self.parser.parse(reply)
        except OutputParserException as e:
            logger.error(f"Grading reply failed to parse: {reply[:200]!r}")
            raise GuardrailParseError(f"Grading output failed validation: {e}") from e

        if not grade.passed:
            logger.info(f"Grading check failed: {grade.reason}")
        return GuardrailVerdict(passed=grade.passed, reason=grade.reason)
