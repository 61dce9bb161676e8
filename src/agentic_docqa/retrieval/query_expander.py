# src/agentic_docqa/retrieval/query_expander.py

from __future__ import annotations

import logging
import re
from typing import List, Optional

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.model import ainvoke_text
from agentic_docqa.retrieval.constants import DEFAULT_EXPANSION_COUNT
from agentic_docqa.retrieval.prompts.query_expander import QUERY_EXPANDER_PROMPT, QUERY_EXPANDER_SYSTEM_PROMPT
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)

_LIST_MARKER_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")


def parse_rewrites(text: str) -> List[str]:
    """One phrasing per non-empty line, with list markers and wrapping quotes removed."""
    rewrites: List[str] = []
    for line in text.splitlines():
        line = _LIST_MARKER_RE.sub("", line).strip().strip('"').strip()
        if line:
            rewrites.append(line)
    return rewrites


class QueryExpander:
    """Turns one question into several phrasings. The original question is always first."""

    def __init__(self, llm, *, count: int = DEFAULT_EXPANSION_COUNT, timeout: Optional[float] = None):
        self.llm = llm
        self.count = count
        self.timeout = timeout
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", QUERY_EXPANDER_SYSTEM_PROMPT),
                ("human", QUERY_EXPANDER_PROMPT),
            ]
        )

    @observe
    async def expand(self, question: str) -> List[str]:
        prompt_val = await self.prompt.ainvoke({"question": question, "count": self.count})
        reply = await ainvoke_text(self.llm, prompt_val, timeout=self.timeout)

        rewrites = parse_rewrites(reply)[: self.count]
        logger.info(f"Expanded question into {len(rewrites)} rewrites")
        logger.debug(f"Rewrites: {rewrites}")

        return [question] + rewrites
