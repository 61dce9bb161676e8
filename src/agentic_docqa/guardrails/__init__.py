"""Guardrail chain gating every generated answer before it reaches the user."""

from agentic_docqa.guardrails.chain import GuardrailChain
from agentic_docqa.guardrails.state import GuardrailCheck, GuardrailDecision, GuardrailVerdict

__all__ = ["GuardrailChain", "GuardrailCheck", "GuardrailDecision", "GuardrailVerdict"]
