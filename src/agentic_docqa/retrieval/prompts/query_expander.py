# src/agentic_docqa/retrieval/prompts/query_expander.py
QUERY_EXPANDER_SYSTEM_PROMPT = """You are a query writer for search engines."""

QUERY_EXPANDER_PROMPT = """Rewrite the following question into {count} different phrasings that might match documents better.

Rules:
- Keep each phrasing short.
- Preserve names, numbers and quoted terms exactly.
- Return one phrasing per line. No numbering, no bullets, no commentary.

Question: "{question}"
"""
