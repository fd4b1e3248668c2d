"""Unit tests for url_join."""

from graphrest.http.utils import url_join


class TestUrlJoin:
    """Test url_join path joining."""

    def test_joins_urls(self):
        assert url_join("/foo", "5") == "/foo/5"

    def test_normalizes_leading_slashes(self):
        assert url_join("foo", "bar") == "/foo/bar"
        assert url_join("//foo", "///bar") == "/foo/bar"

    def test_normalizes_connecting_slashes(self):
        assert url_join("foo/", "bar") == "/foo/bar"
        assert url_join("//foo/baz/", "///bar") == "/foo/baz/bar"

    def test_leaves_trailing_slashes(self):
        assert url_join("/foo", "bar/") == "/foo/bar/"

    def test_handles_empty_args(self):
        assert url_join("/foo", None, "/", "5", "", None, "bar") == "/foo/5/bar"

    def test_query_string_kept(self):
        assert url_join("/v1", "/widgets?a=1&b=2") == "/v1/widgets?a=1&b=2"
