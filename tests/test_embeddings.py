"""
Tests for profile embedding text and similarity ranking.
"""

from unittest.mock import AsyncMock

import pytest

from equity_exchange.matching.embeddings import (
    SimilarItem,
    build_startup_embedding_text,
    build_talent_embedding_text,
    find_similar,
    generate_embedding,
)
from equity_exchange.models import Startup, TalentProfile


class TestEmbeddingText:
    """Test passage construction for profiles."""

    def test_startup_text(self, sample_startup):
        text = build_startup_embedding_text(sample_startup)
        assert text == (
            "Acme. Robots for warehouses. "
            "Autonomous picking robots for mid-size warehouses.. "
            "Industry: Robotics. Stage: seed"
        )

    def test_startup_text_skips_empty_fields(self):
        assert build_startup_embedding_text({"name": "Acme", "stage": "seed"}) == "Acme. Stage: seed"

    def test_talent_text(self, sample_talent):
        text = build_talent_embedding_text(TalentProfile.model_validate(sample_talent))
        assert text == (
            "Engineer. Backend engineer with robotics background.. "
            "Skills: Python, ROS, Kubernetes. Category: engineering"
        )

    def test_empty_profiles(self):
        assert build_talent_embedding_text({}) == ""
        assert build_startup_embedding_text(Startup(stage="")) == ""


class TestGenerateEmbedding:
    """Test embedding degradation paths."""

    @pytest.mark.asyncio
    async def test_no_client(self):
        assert await generate_embedding("hello") == []

    @pytest.mark.asyncio
    async def test_blank_text_skips_call(self):
        client = AsyncMock()
        assert await generate_embedding("   ", client) == []
        client.create_embedding.assert_not_called()

    @pytest.mark.asyncio
    async def test_success(self):
        client = AsyncMock()
        client.create_embedding.return_value = [0.1, 0.2]

        assert await generate_embedding("founding engineer", client) == [0.1, 0.2]
        client.create_embedding.assert_awaited_once_with("founding engineer")

    @pytest.mark.asyncio
    async def test_failure_returns_empty(self):
        client = AsyncMock()
        client.create_embedding.side_effect = RuntimeError("timeout")

        assert await generate_embedding("text", client) == []


class TestFindSimilar:
    """Test cosine similarity ranking."""

    def test_ranks_by_similarity(self):
        results = find_similar(
            [1.0, 0.0],
            [("orthogonal", [0.0, 1.0]), ("same", [2.0, 0.0]), ("diagonal", [1.0, 1.0])],
        )

        assert [r.id for r in results] == ["same", "diagonal", "orthogonal"]
        assert results[0].similarity == pytest.approx(1.0)
        assert results[1].similarity == pytest.approx(0.7071, abs=1e-4)
        assert results[2].similarity == pytest.approx(0.0)

    def test_limit(self):
        candidates = [(f"c{i}", [1.0, float(i)]) for i in range(20)]
        assert len(find_similar([1.0, 0.0], candidates, limit=5)) == 5

    def test_skips_unusable_vectors(self):
        results = find_similar(
            [1.0, 0.0],
            [("empty", []), ("zero", [0.0, 0.0]), ("short", [1.0]), ("ok", [0.5, 0.5])],
        )
        assert [r.id for r in results] == ["ok"]

    def test_empty_query(self):
        assert find_similar([], [("a", [1.0])]) == []
        assert find_similar([0.0, 0.0], [("a", [1.0, 0.0])]) == []

    def test_ties_keep_input_order(self):
        results = find_similar([1.0], [("first", [1.0]), ("second", [3.0])])
        assert results == [SimilarItem("first", 1.0), SimilarItem("second", 1.0)]
