# src/agentic_docqa/retrieval/web_search.py

from __future__ import annotations

import logging
from typing import Optional

from tavily import AsyncTavilyClient

logger = logging.getLogger(__name__)


class TavilyWebSearch:
    """Web search of last resort. Prefers Tavily's synthesized answer over raw snippets."""

    def __init__(
        self,
        client: Optional[AsyncTavilyClient] = None,
        *,
        api_key: Optional[str] = None,
        max_results: int = 3,
    ):
        self.client = client or AsyncTavilyClient(api_key=api_key)
        self.max_results = max_results

    async def search(self, query: str) -> Optional[str]:
        results = await self.client.search(query, include_answer="basic", max_results=self.max_results)
        if not results:
            logger.warning("Tavily returned no results")
            return None

        answer = (results.get("answer") or "").strip()
        if answer:
            return answer

        snippets = []
        for r in results.get("results") or []:
            text = (r.get("content") or r.get("snippet") or "").strip()
            if text:
                snippets.append(text)

        if not snippets:
            logger.warning("Tavily results contained no usable content")
            return None
        return "\n\n".join(snippets)
