# src/agentic_docqa/guardrails/prompts/grading.py
GRADING_SYSTEM_PROMPT = """You are a strict evaluator of answers."""

GRADING_PROMPT = """Question: {question}
Context: {context}
Answer: {answer}

Evaluate this answer for relevance to the question, completeness with respect to the context, and clarity.
Fail answers that dodge the question, omit what the context clearly provides, or are confusing.

{format_instructions}
"""
