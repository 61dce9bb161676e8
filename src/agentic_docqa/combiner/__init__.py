"""Combiner: final synthesis over the accumulated step outputs."""

from agentic_docqa.combiner.nodes.combine import NO_RESULTS_MESSAGE, Combiner, make_combiner_node

__all__ = ["Combiner", "make_combiner_node", "NO_RESULTS_MESSAGE"]
