# tests/unit/retrieval/test_hybrid_retriever.py
"""Unit tests for hybrid retrieval: merge, dedup, rerank selection."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from agentic_docqa.errors import UpstreamTimeoutError
from agentic_docqa.retrieval.constants import CONTEXT_SEPARATOR
from agentic_docqa.retrieval.hybrid import HybridRetriever, dedupe_candidates, select_top
from agentic_docqa.retrieval.state import LexicalHit, RerankResult
from agentic_docqa.state import StepName


def _retriever(expander, semantic, lexical, reranker, **kwargs):
    return HybridRetriever(expander=expander, semantic=semantic, lexical=lexical, reranker=reranker, **kwargs)


class TestDedupeCandidates:
    """Tests for exact-content deduplication."""

    def test_first_occurrence_wins(self, make_candidate):
        cands = [
            make_candidate("alpha", 0.9, "vector"),
            make_candidate("beta", 0.8, "vector"),
            make_candidate("alpha", 4.0, "lexical"),
        ]

        unique = dedupe_candidates(cands)

        assert [c.content for c in unique] == ["alpha", "beta"]
        assert unique[0].source == "vector"

    def test_whitespace_variants_collapse(self, make_candidate):
        unique = dedupe_candidates([make_candidate("alpha"), make_candidate("  alpha\n")])
        assert len(unique) == 1

    def test_empty_content_dropped(self, make_candidate):
        unique = dedupe_candidates([make_candidate(""), make_candidate("   "), make_candidate("x")])
        assert [c.content for c in unique] == ["x"]

    def test_idempotent(self, make_candidate):
        cands = [make_candidate(t) for t in ["a", "b", "a", "c", "b", "d"]]

        once = dedupe_candidates(cands)
        twice = dedupe_candidates(once)

        assert [c.content for c in twice] == [c.content for c in once]


class TestSelectTop:
    """Tests for rerank score attachment and top-N selection."""

    def test_descending_by_rerank_score(self, make_candidate):
        cands = [make_candidate(t) for t in ["a", "b", "c"]]
        results = [
            RerankResult(index=0, relevance_score=0.1),
            RerankResult(index=1, relevance_score=0.9),
            RerankResult(index=2, relevance_score=0.5),
        ]

        top = select_top(cands, results, top_n=5)

        assert [c.content for c in top] == ["b", "c", "a"]
        assert [c.rerank_score for c in top] == [0.9, 0.5, 0.1]

    def test_ties_keep_merge_order(self, make_candidate):
        cands = [make_candidate(t) for t in ["a", "b", "c", "d"]]
        results = [RerankResult(index=i, relevance_score=0.5) for i in (3, 1, 0, 2)]

        top = select_top(cands, results, top_n=5)

        assert [c.content for c in top] == ["a", "b", "c", "d"]

    def test_capped_at_top_n_and_candidate_count(self, make_candidate):
        cands = [make_candidate(str(i)) for i in range(8)]
        results = [RerankResult(index=i, relevance_score=i / 10) for i in range(8)]

        assert len(select_top(cands, results, top_n=5)) == 5
        assert len(select_top(cands[:2], results[:2], top_n=5)) == 2

    def test_out_of_range_index_ignored(self, make_candidate):
        cands = [make_candidate("a")]
        results = [RerankResult(index=3, relevance_score=0.99), RerankResult(index=0, relevance_score=0.2)]

        top = select_top(cands, results, top_n=5)

        assert [c.content for c in top] == ["a"]

    def test_rerank_score_independent_of_retrieval_score(self, make_candidate):
        cands = [make_candidate("a", score=12.5, source="lexical")]
        top = select_top(cands, [RerankResult(index=0, relevance_score=0.3)], top_n=5)

        assert top[0].score == 12.5
        assert top[0].rerank_score == 0.3


class TestHybridRetriever:
    """Tests for HybridRetriever.retrieve."""

    @pytest.mark.asyncio
    async def test_returns_joined_context(self, mock_expander, mock_semantic, mock_lexical, mock_reranker):
        retriever = _retriever(mock_expander, mock_semantic, mock_lexical, mock_reranker)

        outcome = await retriever.retrieve("How many vacation days?")

        assert outcome.reroute is None
        assert outcome.context
        chunks = outcome.context.split(CONTEXT_SEPARATOR)
        # three distinct texts across both sources and both variants
        assert len(chunks) == 3
        assert len(set(chunks)) == 3

    @pytest.mark.asyncio
    async def test_searches_every_variant_in_both_sources(
        self, mock_expander, mock_semantic, mock_lexical, mock_reranker
    ):
        retriever = _retriever(mock_expander, mock_semantic, mock_lexical, mock_reranker, k=3)

        await retriever.retrieve("q")

        assert mock_semantic.search.await_count == 2
        assert mock_lexical.search.await_count == 2
        queried = [c.args[0] for c in mock_semantic.search.await_args_list]
        assert queried == ["q", "q rewritten"]
        assert all(c.args[1] == 3 for c in mock_semantic.search.await_args_list)

    @pytest.mark.asyncio
    async def test_reranks_against_original_question(
        self, mock_expander, mock_semantic, mock_lexical, mock_reranker
    ):
        retriever = _retriever(mock_expander, mock_semantic, mock_lexical, mock_reranker)

        await retriever.retrieve("original question")

        query, documents = mock_reranker.rerank.await_args.args
        assert query == "original question"
        assert len(documents) == len(set(documents))

    @pytest.mark.asyncio
    async def test_no_candidates_reroutes_to_fallback(self, mock_expander, mock_semantic, mock_lexical, mock_reranker):
        mock_semantic.search = AsyncMock(return_value=[])
        mock_lexical.search = AsyncMock(return_value=[])
        retriever = _retriever(mock_expander, mock_semantic, mock_lexical, mock_reranker)

        outcome = await retriever.retrieve("q")

        assert outcome.context is None
        assert outcome.reroute == StepName.FALLBACK
        mock_reranker.rerank.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_rerank_reroutes_to_fallback(self, mock_expander, mock_semantic, mock_lexical, mock_reranker):
        mock_reranker.rerank = AsyncMock(return_value=[])
        retriever = _retriever(mock_expander, mock_semantic, mock_lexical, mock_reranker)

        outcome = await retriever.retrieve("q")

        assert outcome.context is None
        assert outcome.reroute == StepName.FALLBACK

    @pytest.mark.asyncio
    async def test_lexical_hit_outside_documents_skipped(
        self, mock_expander, mock_semantic, mock_lexical, mock_reranker
    ):
        mock_semantic.search = AsyncMock(return_value=[])
        mock_lexical.search = AsyncMock(return_value=[LexicalHit(doc_index=9, score=2.0)])
        retriever = _retriever(mock_expander, mock_semantic, mock_lexical, mock_reranker)

        outcome = await retriever.retrieve("q")

        assert outcome.reroute == StepName.FALLBACK

    @pytest.mark.asyncio
    async def test_sources_run_concurrently(self, mock_expander, mock_lexical, mock_reranker):
        """Both sources for every variant are in flight at the same time."""
        in_flight = 0
        peak = 0

        async def slow_search(query, k):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return []

        semantic = AsyncMock()
        semantic.search = slow_search
        mock_lexical.search = slow_search
        retriever = _retriever(mock_expander, semantic, mock_lexical, mock_reranker)

        await retriever.retrieve("q")

        assert peak == 4

    @pytest.mark.asyncio
    async def test_upstream_failure_propagates(self, mock_expander, mock_semantic, mock_lexical, mock_reranker):
        mock_reranker.rerank = AsyncMock(side_effect=ConnectionError("rerank service down"))
        retriever = _retriever(mock_expander, mock_semantic, mock_lexical, mock_reranker)

        with pytest.raises(ConnectionError):
            await retriever.retrieve("q")

    @pytest.mark.asyncio
    async def test_slow_search_times_out(self, mock_expander, mock_lexical, mock_reranker):
        async def hang(query, k):
            await asyncio.sleep(5)
            return []

        semantic = AsyncMock()
        semantic.search = hang
        retriever = _retriever(mock_expander, semantic, mock_lexical, mock_reranker, timeout=0.01)

        with pytest.raises(UpstreamTimeoutError):
            await retriever.retrieve("q")

    @pytest.mark.asyncio
    async def test_failed_search_cancels_siblings(self, mock_expander, mock_reranker):
        """A failing source stops the searches still in flight instead of leaving them running."""
        cancelled = []

        async def slow_search(query, k):
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                cancelled.append(query)
                raise
            return []

        async def failing_search(query, k):
            raise ConnectionError("bm25 shard down")

        semantic = AsyncMock()
        semantic.search = slow_search
        lexical = AsyncMock()
        lexical.documents = []
        lexical.search = failing_search
        retriever = _retriever(mock_expander, semantic, lexical, mock_reranker)

        with pytest.raises(ConnectionError):
            await retriever.retrieve("q")

        assert sorted(cancelled) == ["q", "q rewritten"]
