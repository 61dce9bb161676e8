# src/agentic_docqa/steps/nodes/answer.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate

from agentic_docqa.guardrails.chain import GuardrailChain
from agentic_docqa.model import ainvoke_text
from agentic_docqa.state import ConversationState, StepName, StepOutput, outputs_for
from agentic_docqa.steps.prompts.answer import ANSWER_PROMPT, ANSWER_SYSTEM_PROMPT
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


def effective_context(state: ConversationState) -> str:
    """Latest summary output if one exists, else the raw context."""
    summaries = outputs_for(state, StepName.SUMMARY)
    if summaries:
        return summaries[-1].content
    return state.get("context") or ""


def make_answer_node(llm, guardrails: GuardrailChain, *, timeout: Optional[float] = None):
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", ANSWER_SYSTEM_PROMPT),
            ("human", ANSWER_PROMPT),
        ]
    )

    @observe
    async def answer(state: ConversationState) -> Dict[str, Any]:
        question = state.get("question", "")
        context = effective_context(state)
        if not context.strip():
            logger.warning("No context to ground an answer; rerouting to fallback")
            return {"next_step": StepName.FALLBACK}

        prompt_val = await prompt.ainvoke({"question": question, "context": context})
        text = await ainvoke_text(llm, prompt_val, timeout=timeout)

        # Judge against the source text, not a summary of it
        source = state.get("context") or context
        decision = await guardrails.evaluate(text, question, source)
        report = {"step": StepName.ANSWER.value, **decision.to_dict()}

        if not decision.accepted:
            logger.warning(f"Answer rejected by {decision.failing_check.value} check: {decision.reason}")
            return {"next_step": StepName.FALLBACK, "guardrail_reports": [report]}

        return {
            "outputs": [StepOutput(agent=StepName.ANSWER, content=text)],
            "guardrail_reports": [report],
        }

    return answer
