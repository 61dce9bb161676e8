# src/agentic_docqa/guardrails/prompts/faithfulness.py
FAITHFULNESS_SYSTEM_PROMPT = """You are a strict fact-checker. Only check whether the answer is supported or not."""

FAITHFULNESS_PROMPT = """Context:
{context}

Answer:
{answer}

Question: Is every claim in the answer fully supported by the context? Reply only with "yes" or "no".
"""
