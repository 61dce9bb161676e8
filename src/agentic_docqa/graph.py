# src/agentic_docqa/graph.py
from __future__ import annotations

from typing import Optional

from langgraph.graph import END, START, StateGraph

from agentic_docqa.combiner.nodes.combine import Combiner, make_combiner_node
from agentic_docqa.executor.nodes.step_executor import step_executor
from agentic_docqa.executor.routing import STEP_NODES, route_after_step, route_from_executor
from agentic_docqa.guardrails.chain import GuardrailChain
from agentic_docqa.planner.nodes.planner import Planner, make_planner_node
from agentic_docqa.retrieval.adapters import WebSearchAdapter
from agentic_docqa.retrieval.hybrid import HybridRetriever
from agentic_docqa.state import COMBINER, PLANNER, STEP_EXECUTOR, ConversationState, StepName
from agentic_docqa.steps.nodes import (
    make_answer_node,
    make_compare_node,
    make_fallback_node,
    make_retriever_node,
    make_summary_node,
    make_websearch_node,
)
from agentic_docqa.utils import make_retry_policy


def make_agent_graph(
    llm,
    *,
    retriever: HybridRetriever,
    web_search: WebSearchAdapter,
    guardrails: Optional[GuardrailChain] = None,
    max_retries: int = 2,
    call_timeout: Optional[float] = None,
):
    """Create the agent graph: planner -> step executor loop -> combiner."""
    retry_policy = make_retry_policy(max_retries)
    guardrails = guardrails or GuardrailChain.from_llm(llm, timeout=call_timeout)

    g = StateGraph(ConversationState)

    g.add_node(PLANNER, make_planner_node(Planner(llm, timeout=call_timeout)), retry_policy=retry_policy)
    g.add_node(STEP_EXECUTOR, step_executor)

    g.add_node(
        STEP_NODES[StepName.RETRIEVER],
        make_retriever_node(retriever, llm, timeout=call_timeout),
        retry_policy=retry_policy,
    )
    g.add_node(
        STEP_NODES[StepName.ANSWER],
        make_answer_node(llm, guardrails, timeout=call_timeout),
        retry_policy=retry_policy,
    )
    g.add_node(STEP_NODES[StepName.SUMMARY], make_summary_node(llm, timeout=call_timeout), retry_policy=retry_policy)
    g.add_node(STEP_NODES[StepName.COMPARE], make_compare_node(llm, timeout=call_timeout), retry_policy=retry_policy)
    g.add_node(
        STEP_NODES[StepName.WEBSEARCH],
        make_websearch_node(web_search, timeout=call_timeout),
        retry_policy=retry_policy,
    )
    g.add_node(STEP_NODES[StepName.FALLBACK], make_fallback_node())

    g.add_node(COMBINER, make_combiner_node(Combiner(llm, timeout=call_timeout)), retry_policy=retry_policy)

    g.add_edge(START, PLANNER)
    g.add_edge(PLANNER, STEP_EXECUTOR)

    g.add_conditional_edges(STEP_EXECUTOR, route_from_executor, [*STEP_NODES.values(), COMBINER])

    # Loop back to the executor unless the step asked for fallback
    for step in (StepName.RETRIEVER, StepName.ANSWER, StepName.SUMMARY, StepName.COMPARE, StepName.WEBSEARCH):
        g.add_conditional_edges(
            STEP_NODES[step],
            route_after_step,
            [STEP_NODES[StepName.FALLBACK], STEP_EXECUTOR],
        )

    g.add_edge(STEP_NODES[StepName.FALLBACK], COMBINER)
    g.add_edge(COMBINER, END)

    return g.compile()
