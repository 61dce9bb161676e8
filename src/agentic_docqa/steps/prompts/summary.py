# src/agentic_docqa/steps/prompts/summary.py
SUMMARY_SYSTEM_PROMPT = """You are a concise summarizer. Only restate what the text says."""

SUMMARY_PROMPT = """Summarize in 1-2 sentences:

{context}
"""
