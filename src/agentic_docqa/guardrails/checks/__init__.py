"""Individual guardrail judgments."""

from agentic_docqa.guardrails.checks.faithfulness import FaithfulnessCheck
from agentic_docqa.guardrails.checks.grading import GradingCheck
from agentic_docqa.guardrails.checks.toxicity import ToxicityCheck

__all__ = ["FaithfulnessCheck", "ToxicityCheck", "GradingCheck"]
