"""Agent step nodes."""

from agentic_docqa.steps.nodes.answer import make_answer_node
from agentic_docqa.steps.nodes.compare import make_compare_node
from agentic_docqa.steps.nodes.fallback import make_fallback_node
from agentic_docqa.steps.nodes.retriever import make_retriever_node
from agentic_docqa.steps.nodes.summary import make_summary_node
from agentic_docqa.steps.nodes.websearch import make_websearch_node

__all__ = [
    "make_retriever_node",
    "make_answer_node",
    "make_summary_node",
    "make_compare_node",
    "make_websearch_node",
    "make_fallback_node",
]
