"""Chunked bulk loading by lookup key.

Architecture:
    The chunking layer consists of:
    - definitions.py: ChunkPolicy, ChunkPlan and ChunkResult
    - planners.py: Splits lookup keys into fixed-size chunks
    - executors.py: Fetches chunks concurrently and groups items by key
    - telemetry.py: Structured logging

Usage:
    A keyed loader plans the keys of each batch, executes one bulk GET per
    chunk and reads the per-key outcome back from the ChunkResult.
"""

from __future__ import annotations

from .definitions import ChunkPlan, ChunkPolicy, ChunkResult, KeyOf
from .executors import ChunkExecutor
from .planners import ChunkPlanner

__all__ = [
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkExecutor",
    "KeyOf",
]
