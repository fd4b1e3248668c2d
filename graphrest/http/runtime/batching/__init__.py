"""Per-tick request batching.

Architecture:
    - loader.py: BatchLoader, a strawberry DataLoader with shielded loads
    - window.py: BatchWindow, an explicitly flushed front for a loader
    - telemetry.py: Structured logging for dispatched batches
"""

from __future__ import annotations

from .loader import BatchLoader, BatchLoadFn
from .window import BatchWindow

__all__ = [
    "BatchLoader",
    "BatchLoadFn",
    "BatchWindow",
]
