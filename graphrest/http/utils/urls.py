"""URL path helpers."""

from __future__ import annotations


def url_join(*parts: str | None) -> str:
    """Join path segments with single slashes.

    Empty and ``None`` segments are skipped, the result always starts with
    ``/`` and a trailing slash on the final segment is kept.

    Examples:
        >>> url_join("/foo", "5")
        '/foo/5'
        >>> url_join("//foo/baz/", "///bar")
        '/foo/baz/bar'
        >>> url_join("/foo", "bar/")
        '/foo/bar/'
    """
    segments = [part for part in parts if part]
    if not segments:
        return "/"

    trailing = segments[-1].endswith("/")
    stripped = [segment.strip("/") for segment in segments]
    joined = "/".join(segment for segment in stripped if segment)

    if trailing and joined:
        return f"/{joined}/"
    return f"/{joined}"
