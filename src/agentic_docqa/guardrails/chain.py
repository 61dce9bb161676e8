# src/agentic_docqa/guardrails/chain.py

from __future__ import annotations

import logging
from typing import Optional

from agentic_docqa.guardrails.checks import FaithfulnessCheck, GradingCheck, ToxicityCheck
from agentic_docqa.guardrails.state import GuardrailCheck, GuardrailDecision
from agentic_docqa.utils import observe

logger = logging.getLogger(__name__)


class GuardrailChain:
    """Faithfulness, then toxicity, then grading. Stops at the first failing check.

    The grading call is the most expensive, so it only runs for answers that
    already passed the two cheap yes/no judgments.
    """

    def __init__(self, *, faithfulness: FaithfulnessCheck, toxicity: ToxicityCheck, grading: GradingCheck):
        self.faithfulness = faithfulness
        self.toxicity = toxicity
        self.grading = grading

    @classmethod
    def from_llm(cls, llm, *, timeout: Optional[float] = None) -> "GuardrailChain":
        return cls(
            faithfulness=FaithfulnessCheck(llm, timeout=timeout),
            toxicity=ToxicityCheck(llm, timeout=timeout),
            grading=GradingCheck(llm, timeout=timeout),
        )

    @observe
    async def evaluate(self, answer: str, question: str, context: str) -> GuardrailDecision:
        verdict = await self.faithfulness.check(answer, context)
        if not verdict.passed:
            return GuardrailDecision.reject(GuardrailCheck.FAITHFULNESS, verdict.reason)

        verdict = await self.toxicity.check(answer)
        if not verdict.passed:
            return GuardrailDecision.reject(GuardrailCheck.TOXICITY, verdict.reason)

        verdict = await self.grading.check(answer, question, context)
        if not verdict.passed:
            return GuardrailDecision.reject(GuardrailCheck.GRADING, verdict.reason)

        logger.info("Answer passed all guardrails")
        return GuardrailDecision(accepted=True)
