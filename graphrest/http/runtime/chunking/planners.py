"""Chunk planning logic for splitting lookup keys.

This module provides the ChunkPlanner class that partitions the keys of a
bulk lookup into fixed-size chunks.
"""

from __future__ import annotations

from collections.abc import Sequence

from .definitions import ChunkPlan, ChunkPolicy
from .telemetry import log_chunk_plan


class ChunkPlanner:
    """Plans chunks for bulk keyed requests.

    Chunks partition the keys with no overlap and preserve their relative
    order, both within a chunk and across chunks.
    """

    def __init__(self, policy: ChunkPolicy | None = None, *, endpoint_id: str = "unknown") -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy for the endpoint
            endpoint_id: Identifier used in log records
        """
        self._policy = policy or ChunkPolicy()
        self._endpoint_id = endpoint_id

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    def plan(self, keys: Sequence[str]) -> list[ChunkPlan]:
        """Plan chunks for a set of lookup keys.

        Args:
            keys: Lookup keys in request order (duplicates are kept)

        Returns:
            List of chunk plans; empty if there are no keys
        """
        size = self._policy.chunk_size
        plans = [
            ChunkPlan(keys=tuple(keys[start : start + size]), chunk_index=index)
            for index, start in enumerate(range(0, len(keys), size))
        ]

        log_chunk_plan(
            endpoint_id=self._endpoint_id,
            total_chunks=len(plans),
            total_keys=len(keys),
            chunk_size=size,
        )

        return plans
