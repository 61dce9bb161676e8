# src/agentic_docqa/retrieval/constants.py
"""Constants for hybrid retrieval."""

# Per-source nearest-neighbour / lexical hits for each query variant
DEFAULT_SOURCE_TOP_K = 3

# Candidates kept after cross-encoder reranking
DEFAULT_RERANK_TOP_N = 5

# Number of paraphrases requested from the query expander
DEFAULT_EXPANSION_COUNT = 3

# Retrieved context shorter than this is treated as no context
MIN_CONTEXT_CHARS = 20

CONTEXT_SEPARATOR = "\n\n"
