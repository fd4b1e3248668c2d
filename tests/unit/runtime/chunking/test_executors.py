"""Unit tests for chunk execution and demultiplexing."""

from __future__ import annotations

import asyncio

import pytest

from graphrest.http.runtime.chunking import ChunkExecutor, ChunkPlan, ChunkPlanner, ChunkPolicy


def key_of(item: dict) -> str:
    return item["owner"]


class TestChunkExecutor:
    """Test ChunkExecutor functionality."""

    @pytest.mark.asyncio
    async def test_order_preserved_when_chunks_finish_out_of_order(self):
        """Per-key results follow request order, not completion order."""
        keys = [f"k{i}" for i in range(60)]
        plans = ChunkPlanner().plan(keys)
        completed: list[int] = []

        async def fetch_chunk(plan: ChunkPlan) -> list[dict]:
            # Later chunks finish first
            await asyncio.sleep(0.01 * (len(plans) - plan.chunk_index))
            completed.append(plan.chunk_index)
            return [{"owner": key, "id": f"item-{key}"} for key in plan.keys]

        result = await ChunkExecutor().execute(plans=plans, fetch_chunk=fetch_chunk, key_of=key_of)

        assert completed == [2, 1, 0]
        assert list(result.items_by_key) == keys
        assert result.items_by_key["k42"] == [{"owner": "k42", "id": "item-k42"}]
        assert result.chunks_used == 3
        assert result.total_items == 60

    @pytest.mark.asyncio
    async def test_one_to_many_join(self):
        """Items sharing a key all land in that key's list, in arrival order."""
        plans = [ChunkPlan(keys=("a", "b", "c"), chunk_index=0)]

        async def fetch_chunk(plan: ChunkPlan) -> list[dict]:
            return [
                {"owner": "a", "id": 1},
                {"owner": "b", "id": 2},
                {"owner": "a", "id": 3},
            ]

        result = await ChunkExecutor().execute(plans=plans, fetch_chunk=fetch_chunk, key_of=key_of)

        assert [item["id"] for item in result.items_by_key["a"]] == [1, 3]
        assert [item["id"] for item in result.items_by_key["b"]] == [2]
        assert result.items_by_key["c"] == []
        assert result.outcome("c") == []

    @pytest.mark.asyncio
    async def test_unrequested_and_null_items_dropped(self):
        """Over-returned items are dropped and nulls are discarded."""
        plans = [ChunkPlan(keys=("a",), chunk_index=0)]

        async def fetch_chunk(plan: ChunkPlan) -> list[dict | None]:
            return [None, {"owner": "a", "id": 1}, {"owner": "zzz", "id": 2}]

        result = await ChunkExecutor().execute(plans=plans, fetch_chunk=fetch_chunk, key_of=key_of)

        assert result.items_by_key == {"a": [{"owner": "a", "id": 1}]}
        assert result.total_items == 2
        assert result.dropped_items == 1

    @pytest.mark.asyncio
    async def test_null_chunk_response(self):
        """A chunk answering None contributes no items."""
        plans = [ChunkPlan(keys=("a",), chunk_index=0)]

        async def fetch_chunk(plan: ChunkPlan) -> None:
            return None

        result = await ChunkExecutor().execute(plans=plans, fetch_chunk=fetch_chunk, key_of=key_of)

        assert result.items_by_key == {"a": []}

    @pytest.mark.asyncio
    async def test_failed_chunk_only_affects_its_keys(self):
        """Keys of a failing chunk get its error; other chunks still resolve."""
        plans = ChunkPlanner(ChunkPolicy(chunk_size=2)).plan(["a", "b", "c", "d"])
        failure = RuntimeError("chunk 0 failed")

        async def fetch_chunk(plan: ChunkPlan) -> list[dict]:
            if plan.chunk_index == 0:
                raise failure
            return [{"owner": key} for key in plan.keys]

        result = await ChunkExecutor().execute(plans=plans, fetch_chunk=fetch_chunk, key_of=key_of)

        assert result.chunks_failed == 1
        assert result.outcome("a") is failure
        assert result.outcome("b") is failure
        assert result.outcome("c") == [{"owner": "c"}]
        assert result.outcome("d") == [{"owner": "d"}]

    @pytest.mark.asyncio
    async def test_item_without_key_is_dropped(self):
        """An item key_of cannot read is dropped without failing any chunk."""
        plans = ChunkPlanner(ChunkPolicy(chunk_size=1)).plan(["a", "b"])

        async def fetch_chunk(plan: ChunkPlan) -> list[dict]:
            if plan.keys == ("a",):
                return [{"owner": "a"}, {"id": 99}, "not-a-mapping"]
            return [{"owner": "b"}]

        result = await ChunkExecutor().execute(plans=plans, fetch_chunk=fetch_chunk, key_of=key_of)

        assert result.chunks_failed == 0
        assert result.outcome("a") == [{"owner": "a"}]
        assert result.outcome("b") == [{"owner": "b"}]
        assert result.total_items == 4
        assert result.dropped_items == 2

    @pytest.mark.asyncio
    async def test_none_key_is_dropped(self):
        """An item whose key reads as None matches no requested key."""
        plans = ChunkPlanner().plan(["a"])

        async def fetch_chunk(plan: ChunkPlan) -> list[dict]:
            return [{"owner": None}, {"owner": "a"}]

        result = await ChunkExecutor().execute(
            plans=plans, fetch_chunk=fetch_chunk, key_of=lambda item: item["owner"]
        )

        assert result.outcome("a") == [{"owner": "a"}]
        assert result.dropped_items == 1
