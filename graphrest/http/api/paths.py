"""Canonical request paths.

A canonical path is the sole cache key of the path loader, so two argument
mappings that differ only in key order must serialize identically.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlencode

Args = Mapping[str, Any]


class QueryStringCodec:
    """Order-stable query string codec.

    ``stringify`` sorts keys, drops ``None`` values, expands lists into
    repeated keys and renders booleans as ``true``/``false``.
    """

    def parse(self, query: str) -> dict[str, str | list[str]]:
        parsed = parse_qs(query, keep_blank_values=True)
        return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}

    def stringify(self, obj: Args) -> str:
        pairs: list[tuple[str, str]] = []
        for key in sorted(obj):
            value = obj[key]
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                pairs.extend((key, _render(item)) for item in value if item is not None)
            else:
                pairs.append((key, _render(value)))
        return urlencode(pairs)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


DEFAULT_CODEC = QueryStringCodec()


def build_path(path: str, args: Args | None = None, codec: QueryStringCodec = DEFAULT_CODEC) -> str:
    """Merge ``args`` into the query string of ``path``.

    Args:
        path: Path, optionally with an existing query string
        args: Arguments to merge over the existing query (None = leave path as is)
        codec: Query string codec

    Returns:
        ``base`` or ``base?query`` with a deterministic query

    Examples:
        >>> build_path("/x", {"b": 2, "a": 1})
        '/x?a=1&b=2'
        >>> build_path("/x?a=1", {"a": 3})
        '/x?a=3'
    """
    if args is None:
        return path

    base, _, existing = path.partition("?")
    query = codec.parse(existing) if existing else {}
    search = codec.stringify({**query, **args})

    if not search:
        return base
    return f"{base}?{search}"
