# src/agentic_docqa/steps/prompts/compare.py
COMPARE_SYSTEM_PROMPT = """You compare concepts clearly, using only the provided context."""

COMPARE_PROMPT = """Compare based on context:

{context}

Q: {question}

Structure the comparison as:
Similarities:
- ...
Differences:
- ...
Conclusion: one sentence.
If the context lacks information about one side, state that instead of guessing.
"""
