"""Data models for connections and classified backend results."""

from .connection import Connection, Edge, PageInfo
from .results import (
    Found,
    Malformed,
    NotFound,
    PageResult,
    PaginatedList,
    classify_collection,
    classify_page,
)

__all__ = [
    "Connection",
    "Edge",
    "PageInfo",
    "Found",
    "NotFound",
    "Malformed",
    "PageResult",
    "PaginatedList",
    "classify_page",
    "classify_collection",
]
