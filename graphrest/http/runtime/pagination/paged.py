"""Translation of server-side pages into connections.

The backend paginates: it is asked for ``limit``/``pageSize`` items after
``cursor`` and answers with the items plus ``meta.cursors`` (one per item)
and ``meta.hasNextPage``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.exceptions import ContractViolationError
from ...models.connection import Connection, Edge, PageInfo
from ...models.results import Found, Malformed, NotFound, classify_page
from .unpaged import split_pagination_args


def paged_request_args(args: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite forward connection args into the backend's paging params."""
    filters, pagination = split_pagination_args(args)
    first = pagination.get("first")
    return {
        **filters,
        "cursor": pagination.get("after"),
        "limit": first,
        "pageSize": first,
    }


def paged_connection(raw: Any, *, after: str | None = None) -> Connection | None:
    """Build a connection from a paginated backend result.

    Args:
        raw: Result of the paged GET
        after: Cursor the caller paginated from

    Returns:
        Connection, or None if the backend had nothing at this path

    Raises:
        ContractViolationError: If the result has no ``meta`` or the cursors
            do not line up with the items
    """
    result = classify_page(raw)
    if isinstance(result, NotFound):
        return None
    if isinstance(result, Malformed):
        raise ContractViolationError(result.reason)
    return _from_found(result, after=after)


def _from_found(result: Found, *, after: str | None) -> Connection:
    edges = [Edge(node=item, cursor=cursor) for item, cursor in zip(result.items, result.cursors)]
    # Forward-only; a previous page exists exactly when we were given a cursor
    page_info = PageInfo(
        start_cursor=result.cursors[0] if result.cursors else None,
        end_cursor=result.cursors[-1] if result.cursors else None,
        has_previous_page=bool(after),
        has_next_page=result.has_next_page,
    )
    return Connection(edges=edges, page_info=page_info, meta=result.meta)
