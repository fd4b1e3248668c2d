"""Translation of REST results into forward-only connections.

Two strategies, chosen by what the backend supports:
    - paged.py: backend paginates; cursors come from ``meta.cursors``
    - unpaged.py: backend returns everything; slicing happens here
"""

from __future__ import annotations

from .cursors import cursor_to_offset, get_offset_with_default, offset_to_cursor
from .paged import paged_connection, paged_request_args
from .unpaged import (
    PAGINATION_ARG_KEYS,
    connection_from_list,
    split_pagination_args,
    unpaged_connection,
)

__all__ = [
    "paged_connection",
    "paged_request_args",
    "unpaged_connection",
    "connection_from_list",
    "split_pagination_args",
    "PAGINATION_ARG_KEYS",
    "offset_to_cursor",
    "cursor_to_offset",
    "get_offset_with_default",
]
