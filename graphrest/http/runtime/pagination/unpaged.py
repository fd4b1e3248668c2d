"""Client-side pagination of full collections.

The backend returns the whole collection; slicing to ``first`` items after
``after`` happens here, with Relay array-connection cursors.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.exceptions import ContractViolationError
from ...models.connection import Connection, Edge, PageInfo
from ...models.results import Malformed, classify_collection
from .cursors import get_offset_with_default, offset_to_cursor

PAGINATION_ARG_KEYS = ("after", "first")


def split_pagination_args(args: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split args into (filter args, pagination args)."""
    filters = {key: value for key, value in args.items() if key not in PAGINATION_ARG_KEYS}
    pagination = {key: args[key] for key in PAGINATION_ARG_KEYS if key in args}
    return filters, pagination


def connection_from_list(items: list[Any], args: Mapping[str, Any]) -> Connection:
    """Slice a full list into a forward connection.

    Args:
        items: The complete collection
        args: Pagination args; ``after`` (cursor) and ``first`` (count)

    Raises:
        ValueError: If ``first`` is negative
    """
    after = args.get("after")
    first = args.get("first")

    length = len(items)
    after_offset = get_offset_with_default(after, -1)

    start = max(0, min(after_offset + 1, length))
    end = length
    if first is not None:
        if first < 0:
            raise ValueError("Argument 'first' must be a non-negative integer.")
        end = min(end, start + first)

    edges = [
        Edge(node=node, cursor=offset_to_cursor(start + index))
        for index, node in enumerate(items[start:end])
    ]

    page_info = PageInfo(
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
        has_previous_page=False,
        has_next_page=first is not None and end < length,
    )
    return Connection(edges=edges, page_info=page_info, meta={})


def unpaged_connection(raw: Any, args: Mapping[str, Any]) -> Connection:
    """Build a connection from a full, unpaginated backend collection.

    Raises:
        ContractViolationError: If the backend did not return an array
    """
    result = classify_collection(raw)
    if isinstance(result, Malformed):
        raise ContractViolationError(result.reason)
    _, pagination = split_pagination_args(args)
    return connection_from_list(result.items, pagination)
