# src/agentic_docqa/steps/nodes/websearch.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from agentic_docqa.retrieval.adapters import WebSearchAdapter
from agentic_docqa.state import ConversationState, StepName, StepOutput
from agentic_docqa.utils import call_with_deadline, observe

logger = logging.getLogger(__name__)


def make_websearch_node(web_search: WebSearchAdapter, *, timeout: Optional[float] = None):
    """Web search as a context source of last resort.

    A forced search (retrieval interrupt) does not resume the plan: it exhausts the
    plan cursor so the executor goes straight to the combiner. A planned search
    appends and lets the plan continue.
    """

    @observe
    async def websearch(state: ConversationState) -> Dict[str, Any]:
        question = state.get("question", "")
        forced = bool(state.get("force_web_search"))

        text = await call_with_deadline(web_search.search(question), timeout, service="web_search")

        update: Dict[str, Any] = {"force_web_search": False}
        if forced:
            update["step_index"] = len(state.get("plan") or [])

        if not text or not text.strip():
            logger.warning("Web search returned nothing; rerouting to fallback")
            update["next_step"] = StepName.FALLBACK
            return update

        logger.info(f"Web search returned {len(text)} chars (forced={forced})")
        update["context"] = text
        update["outputs"] = [StepOutput(agent=StepName.WEBSEARCH, content=text)]
        return update

    return websearch
