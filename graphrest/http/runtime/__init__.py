"""Runtime: batching, chunking and pagination translation."""

from .batching import BatchLoader, BatchWindow
from .chunking import ChunkExecutor, ChunkPlan, ChunkPlanner, ChunkPolicy, ChunkResult
from .loaders import KeyedBatchLoader, create_keyed_loader, create_path_loader
from .pagination import (
    connection_from_list,
    paged_connection,
    paged_request_args,
    split_pagination_args,
    unpaged_connection,
)

__all__ = [
    "BatchLoader",
    "BatchWindow",
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkExecutor",
    "KeyedBatchLoader",
    "create_path_loader",
    "create_keyed_loader",
    "paged_connection",
    "paged_request_args",
    "unpaged_connection",
    "connection_from_list",
    "split_pagination_args",
]
