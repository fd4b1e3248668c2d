"""Chunking policy and result structures for keyed bulk loads.

This module defines the data structures used to describe how lookup keys
are split into bulk requests and how the combined results are reported.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from ...core.config import DEFAULT_NUM_KEYS_PER_CHUNK

KeyOf = Callable[[Any], Optional[str]]


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for a bulk endpoint.

    Attributes:
        chunk_size: Maximum number of lookup keys per bulk request
    """

    chunk_size: int = DEFAULT_NUM_KEYS_PER_CHUNK

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("ChunkPolicy chunk_size must be positive")


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single chunk.

    Attributes:
        keys: Lookup keys sent in this chunk, in request order
        chunk_index: Zero-based index of this chunk in the overall plan
    """

    keys: tuple[str, ...]
    chunk_index: int = 0

    @property
    def size(self) -> int:
        return len(self.keys)


@dataclass
class ChunkResult:
    """Result of chunked execution.

    Attributes:
        items_by_key: Matched items per requested key, in request order
        errors_by_key: Exception of the failed chunk, for each of its keys
        chunks_used: Number of chunks that were fetched
        chunks_failed: Number of chunks whose fetch raised
        total_items: Items returned by the backend (after dropping nulls)
        dropped_items: Returned items whose key was not requested
    """

    items_by_key: dict[str, list[Any]]
    errors_by_key: dict[str, BaseException] = field(default_factory=dict)
    chunks_used: int = 0
    chunks_failed: int = 0
    total_items: int = 0
    dropped_items: int = 0

    def outcome(self, key: str) -> list[Any] | BaseException:
        """List of matches for ``key``, or the error of the chunk it was in."""
        error = self.errors_by_key.get(key)
        if error is not None:
            return error
        return self.items_by_key.get(key, [])
