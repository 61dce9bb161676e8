"""Agent steps: retriever, answer, summary, compare, websearch, fallback."""
