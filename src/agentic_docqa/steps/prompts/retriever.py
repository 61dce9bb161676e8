# src/agentic_docqa/steps/prompts/retriever.py
RELEVANCE_SYSTEM_PROMPT = """You judge whether retrieved text is relevant to a question."""

RELEVANCE_PROMPT = """Question: {question}

Retrieved context:
{context}

Does the retrieved context contain information that helps answer the question?
Reply only with "yes" or "no".
"""
