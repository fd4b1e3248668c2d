"""Tagged classification of raw backend results.

Backends hand back loosely shaped JSON. Before any pagination translation the
raw value is classified exactly once into one of:

* ``Found`` - items plus page metadata, with invariants already checked
* ``NotFound`` - the backend had nothing for this path
* ``Malformed`` - the shape breaks an invariant; translation must fail loudly
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union


class PaginatedList(list):
    """A list of items that also carries the backend's page metadata.

    Transports that split a paged response into its items may return one of
    these instead of the ``{"items": ..., "meta": ...}`` mapping.
    """

    def __init__(self, items: Sequence[Any] = (), meta: Mapping[str, Any] | None = None) -> None:
        super().__init__(items)
        self.meta = dict(meta) if meta is not None else None


@dataclass(frozen=True)
class Found:
    """Items returned by the backend.

    Attributes:
        items: Ordered items
        cursors: One cursor per item, same order (empty for collections)
        has_next_page: Backend's verdict on a following page
        meta: Passthrough metadata, without ``cursors``/``hasNextPage``
    """

    items: list[Any]
    cursors: list[str] = field(default_factory=list)
    has_next_page: bool = False
    meta: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Malformed:
    reason: str


PageResult = Union[Found, NotFound, Malformed]


def classify_page(raw: Any) -> PageResult:
    """Classify the result of a server-side paginated GET.

    Args:
        raw: ``None``, a ``PaginatedList`` or a ``{"items", "meta"}`` mapping

    Returns:
        Tagged result; cursor and item counts are guaranteed equal on ``Found``
    """
    if raw is None:
        return NotFound()

    if isinstance(raw, PaginatedList):
        items, meta = list(raw), raw.meta
    elif isinstance(raw, Mapping):
        if "items" not in raw:
            return Malformed("Expected a paginated result with an `items` array")
        items, meta = raw["items"], raw.get("meta")
        if not isinstance(items, list):
            return Malformed(f"Expected `items` to be an array, got: {type(items).__name__}")
    else:
        return Malformed(
            f"Expected a paginated result with a `meta` property, got: {type(raw).__name__}"
        )

    if not isinstance(meta, Mapping):
        return Malformed(
            "Unexpected format. `GET` should return an array of items with a "
            "`meta` property containing an array of cursors and `hasNextPage`"
        )

    meta = dict(meta)
    cursors = meta.pop("cursors", None) or []
    has_next_page = bool(meta.pop("hasNextPage", False))

    if len(cursors) != len(items):
        return Malformed(
            f"Expected one cursor per item, got {len(cursors)} cursors for {len(items)} items"
        )

    return Found(
        items=items,
        cursors=[str(cursor) for cursor in cursors],
        has_next_page=has_next_page,
        meta=meta,
    )


def classify_collection(raw: Any) -> PageResult:
    """Classify the result of an unpaginated collection GET.

    A collection endpoint must always answer with an array, so ``None`` is
    malformed here rather than not-found.
    """
    if not isinstance(raw, list):
        return Malformed(f"Expected `GET` to return an array of items, got: {type(raw).__name__}")
    return Found(items=list(raw))
