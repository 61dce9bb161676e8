"""Agentic question answering over a private document corpus, using LangGraph.

This package provides an orchestration core with clear separation between:
- Planner: decompose a question into an ordered plan of agent steps
- Executor: step-by-step plan state machine with mid-flight rerouting
- Retrieval: query expansion, hybrid lexical + semantic search, cross-encoder rerank
- Guardrails: faithfulness, toxicity and grading gates on every generated answer
- Combiner: synthesize step outputs into the final response
"""

__version__ = "0.1.0"
