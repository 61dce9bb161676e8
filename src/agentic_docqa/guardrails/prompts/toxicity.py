# src/agentic_docqa/guardrails/prompts/toxicity.py
TOXICITY_SYSTEM_PROMPT = """You are a strict safety filter."""

TOXICITY_PROMPT = """Check the following text for abusive, toxic, hateful, violent, or unsafe language.
If it is clean, reply ONLY with "safe". If it is unsafe, reply ONLY with "unsafe".

Text:
{answer}
"""
