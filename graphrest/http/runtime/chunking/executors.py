"""Chunk execution logic for fetching and demultiplexing chunks.

This module provides the ChunkExecutor class that fetches every chunk of a
plan concurrently and maps the combined items back onto the requested keys.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from .definitions import ChunkPlan, ChunkResult, KeyOf
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete


class ChunkExecutor:
    """Executes chunk plans and demultiplexes results by key.

    The executor takes chunk plans, a fetch function and a key function.
    Every item returned by any chunk is appended to the list of the key it
    belongs to, so one key may collect zero, one or many items.
    A key that appears in two chunks of the same plan collects the items of
    both responses.
    """

    def __init__(self, *, endpoint_id: str = "unknown") -> None:
        """Initialize chunk executor.

        Args:
            endpoint_id: Identifier used in log records
        """
        self._endpoint_id = endpoint_id

    async def execute(
        self,
        *,
        plans: list[ChunkPlan],
        fetch_chunk: Callable[[ChunkPlan], Awaitable[Any]],
        key_of: KeyOf,
    ) -> ChunkResult:
        """Execute chunk plans and group results by key.

        Args:
            plans: Chunk plans to execute, typically from ChunkPlanner.plan
            fetch_chunk: Async function returning the items of one chunk
                (a list, possibly containing nulls, or None)
            key_of: Maps a returned item to the lookup key it answers; an
                item it returns None for, or cannot read, counts as dropped

        Returns:
            ChunkResult with per-key items and per-key chunk errors
        """
        started = perf_counter()
        outcomes = await asyncio.gather(
            *(self._fetch(plan, fetch_chunk) for plan in plans), return_exceptions=True
        )

        items_by_key: dict[str, list[Any]] = {}
        for plan in plans:
            for key in plan.keys:
                items_by_key[key] = []

        errors_by_key: dict[str, BaseException] = {}
        chunks_failed = 0
        total_items = 0
        dropped_items = 0

        # gather keeps plan order, so items are flattened in chunk order
        for plan, outcome in zip(plans, outcomes):
            if isinstance(outcome, BaseException):
                chunks_failed += 1
                log_chunk_error(
                    endpoint_id=self._endpoint_id,
                    chunk_index=plan.chunk_index,
                    error_type=type(outcome).__name__,
                    error_message=str(outcome),
                )
                for key in plan.keys:
                    errors_by_key[key] = outcome
                continue

            for item in outcome:
                total_items += 1
                key = self._read_key(key_of, item)
                matches = items_by_key.get(key) if key is not None else None
                if matches is None or key in errors_by_key:
                    dropped_items += 1
                    continue
                matches.append(item)

        result = ChunkResult(
            items_by_key=items_by_key,
            errors_by_key=errors_by_key,
            chunks_used=len(plans),
            chunks_failed=chunks_failed,
            total_items=total_items,
            dropped_items=dropped_items,
        )

        log_chunk_execution_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

        return result

    async def _fetch(
        self, plan: ChunkPlan, fetch_chunk: Callable[[ChunkPlan], Awaitable[Any]]
    ) -> list[Any]:
        chunk_start = perf_counter()
        chunk_data = await fetch_chunk(plan)
        items = self._extract_items(chunk_data)
        log_chunk_completed(
            endpoint_id=self._endpoint_id,
            chunk_index=plan.chunk_index,
            keys=plan.size,
            items_returned=len(items),
            latency_ms=(perf_counter() - chunk_start) * 1000.0,
        )
        return items

    def _read_key(self, key_of: KeyOf, item: Any) -> str | None:
        try:
            return key_of(item)
        except (LookupError, TypeError, AttributeError):
            return None

    def _extract_items(self, chunk_data: Any) -> list[Any]:
        """Extract non-null items from chunk data.

        Args:
            chunk_data: Parsed chunk response (list, single item, or None)

        Returns:
            List of items with nulls discarded
        """
        if chunk_data is None:
            return []
        if isinstance(chunk_data, list):
            return [item for item in chunk_data if item is not None]
        return [chunk_data]
