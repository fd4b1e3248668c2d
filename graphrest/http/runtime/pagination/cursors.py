"""Offset cursors for client-side array pagination.

Cursors follow the Relay array-connection format so they stay compatible
with clients that already hold cursors from other Relay servers:
``base64("arrayconnection:<offset>")``.
"""

from __future__ import annotations

import base64
import binascii

PREFIX = "arrayconnection:"


def offset_to_cursor(offset: int) -> str:
    """Create the opaque cursor for an offset into an array."""
    return base64.b64encode(f"{PREFIX}{offset}".encode()).decode("ascii")


def cursor_to_offset(cursor: str) -> int | None:
    """Decode a cursor into its offset, or None if it is not an array cursor."""
    try:
        decoded = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return None
    if not decoded.startswith(PREFIX):
        return None
    try:
        return int(decoded[len(PREFIX) :])
    except ValueError:
        return None


def get_offset_with_default(cursor: str | None, default_offset: int) -> int:
    """Offset for ``cursor``, falling back to ``default_offset`` when unusable."""
    if not isinstance(cursor, str):
        return default_offset
    offset = cursor_to_offset(cursor)
    return default_offset if offset is None else offset
