"""Loader factories for single-path and keyed bulk GETs.

Architecture:
    Both factories return a ``BatchLoader``; they differ in the batch
    function:
    - create_path_loader: one GET per distinct path, fanned out concurrently
    - create_keyed_loader: one bulk GET per chunk of lookup keys, results
      grouped back onto keys (one-to-many)

Design Decisions:
    - Failures never abort a batch: a failing path rejects only itself, a
      failing chunk rejects only its own keys
    - Duplicate keys inside a batch are passed through to the chunk plan
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from .batching import BatchLoader
from .chunking import ChunkExecutor, ChunkPlan, ChunkPlanner, ChunkPolicy, KeyOf

Fetch = Callable[[str], Awaitable[Any]]


class KeyedBatchLoader(BatchLoader[str, Any]):
    """BatchLoader keyed by strings, with a mapping-shaped bulk accessor."""

    async def load_mapping(self, keys: Sequence[str]) -> dict[str, Any]:
        """Load several keys and return ``{key: value}`` in key order."""
        values = await self.load_many(keys)
        return dict(zip(keys, values))


def create_path_loader(
    fetch: Fetch,
    *,
    max_batch_size: int | None = None,
    name: str = "path_loader",
) -> KeyedBatchLoader:
    """Loader that deduplicates GETs by canonical path.

    Args:
        fetch: Performs the GET for one path
        max_batch_size: Most paths fetched per batch (None = unbounded)
        name: Loader name used in log records
    """

    async def load_paths(paths: list[str]) -> list[Any]:
        return await asyncio.gather(*(fetch(path) for path in paths), return_exceptions=True)

    return KeyedBatchLoader(load_paths, max_batch_size=max_batch_size, name=name)


def create_keyed_loader(
    fetch: Fetch,
    path_for: Callable[[list[str]], str],
    key_of: KeyOf,
    *,
    policy: ChunkPolicy | None = None,
    cache: bool = True,
    name: str = "keyed_loader",
) -> KeyedBatchLoader:
    """Loader that resolves each lookup key to the list of items matching it.

    Args:
        fetch: Performs the bulk GET for one chunk path
        path_for: Builds the bulk path for the keys of one chunk
        key_of: Reads the lookup key back off a returned item; items it
            cannot read a key from are dropped
        policy: Chunk size policy (default 25 keys per chunk)
        cache: Memoize per key across windows
        name: Loader name used in log records
    """
    planner = ChunkPlanner(policy, endpoint_id=name)
    executor = ChunkExecutor(endpoint_id=name)

    async def fetch_chunk(plan: ChunkPlan) -> Any:
        return await fetch(path_for(list(plan.keys)))

    async def load_keys(keys: list[str]) -> list[Any]:
        result = await executor.execute(
            plans=planner.plan(keys), fetch_chunk=fetch_chunk, key_of=key_of
        )
        return [result.outcome(key) for key in keys]

    return KeyedBatchLoader(load_keys, cache=cache, name=name)
