# src/agentic_docqa/combiner/nodes/combine.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.combiner.prompts.combine import COMBINE_INPUT, COMBINE_PROMPT
from agentic_docqa.model import ainvoke_text
from agentic_docqa.state import ConversationState, StepName, StepOutput
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No useful results were found for your question."


def format_outputs(outputs: Sequence[StepOutput]) -> str:
    return "\n\n".join(f"[{o.agent.value}]\n{o.content}" for o in outputs)


class Combiner:
    """Synthesizes accumulated step outputs into one user-facing response."""

    def __init__(self, llm, *, timeout: Optional[float] = None):
        self.llm = llm
        self.timeout = timeout
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", COMBINE_PROMPT),
                ("human", COMBINE_INPUT),
            ]
        )

    async def combine(self, question: str, outputs: Sequence[StepOutput]) -> str:
        if not outputs:
            return NO_RESULTS_MESSAGE

        # A refusal is returned exactly as written
        if all(o.agent == StepName.FALLBACK for o in outputs):
            return outputs[-1].content

        prompt_val = await self.prompt.ainvoke({"question": question, "outputs": format_outputs(outputs)})
        text = (await ainvoke_text(self.llm, prompt_val, timeout=self.timeout)).strip()
        if not text:
            logger.warning("Combiner produced an empty response")
            return NO_RESULTS_MESSAGE
        return text


def make_combiner_node(combiner: Combiner):
    @observe
    async def combine(state: ConversationState) -> Dict[str, Any]:
        outputs = list(state.get("outputs") or [])
        logger.info(f"Combining {len(outputs)} step outputs: {[o.agent.value for o in outputs]}")
        return {"output": await combiner.combine(state.get("question", ""), outputs)}

    return combine
