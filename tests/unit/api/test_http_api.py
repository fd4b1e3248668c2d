"""Unit tests for the HttpApi resource facade."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from graphrest.http.api import HttpApi
from graphrest.http.core import ContractViolationError, HttpApiOptions, HttpError, HttpMethod

ORIGIN = "https://api.test"


class FakeApi(HttpApi):
    """HttpApi answering from a URL -> response table."""

    def __init__(self, responses: dict[str, Any] | None = None, **kwargs: Any) -> None:
        options = HttpApiOptions(
            origin=ORIGIN,
            api_base="/v1",
            external_origin="https://public.test",
            num_keys_per_chunk=kwargs.pop("num_keys_per_chunk", 25),
        )
        super().__init__(options, **kwargs)
        self.responses = responses or {}
        self.calls: list[tuple[HttpMethod, str, Any]] = []

    async def request(self, method: HttpMethod, url: str, data: Any = None) -> Any:
        self.calls.append((method, url, data))
        response = self.responses.get(url)
        if isinstance(response, Exception):
            raise response
        return response


class TestHttpApiGet:
    """Test batched GETs."""

    @pytest.mark.asyncio
    async def test_equivalent_args_share_one_request(self):
        """Argument order does not defeat deduplication."""
        api = FakeApi({f"{ORIGIN}/v1/widgets?a=1&b=2": {"id": "w"}})

        first, second = await asyncio.gather(
            api.get("/widgets", {"a": 1, "b": 2}),
            api.get("/widgets", {"b": 2, "a": 1}),
        )

        assert first == second == {"id": "w"}
        assert api.calls == [(HttpMethod.GET, f"{ORIGIN}/v1/widgets?a=1&b=2", None)]

    @pytest.mark.asyncio
    async def test_failure_isolated_per_path(self):
        """A failing GET does not affect other GETs of the same window."""
        api = FakeApi(
            {
                f"{ORIGIN}/v1/a": HttpError(500, f"{ORIGIN}/v1/a"),
                f"{ORIGIN}/v1/b": {"id": "b"},
            }
        )

        result_a, result_b = await asyncio.gather(
            api.get("/a"), api.get("/b"), return_exceptions=True
        )

        assert isinstance(result_a, HttpError)
        assert result_b == {"id": "b"}

    @pytest.mark.asyncio
    async def test_not_found_is_none(self):
        api = FakeApi()
        assert await api.get("/missing") is None

    @pytest.mark.asyncio
    async def test_injected_loader_is_shared(self):
        """Facades built with the same loader share its cache."""
        first = FakeApi({f"{ORIGIN}/v1/x": {"id": "x"}})
        second = FakeApi(loader=first.loader)

        await first.get("/x")
        assert await second.get("/x") == {"id": "x"}
        assert second.calls == []

    @pytest.mark.asyncio
    async def test_cancelled_get_leaves_siblings_resolving(self):
        """A caller cancelled mid-flight does not cancel others on the same path."""
        release = asyncio.Event()

        class SlowApi(FakeApi):
            async def request(self, method: HttpMethod, url: str, data: Any = None) -> Any:
                await release.wait()
                return await super().request(method, url, data)

        api = SlowApi({f"{ORIGIN}/v1/widgets/1": {"id": 1}})
        first = asyncio.create_task(api.get("/widgets/1"))
        second = asyncio.create_task(api.get("/widgets/1"))
        await asyncio.sleep(0)
        first.cancel()
        release.set()

        results = await asyncio.gather(first, second, return_exceptions=True)

        assert isinstance(results[0], asyncio.CancelledError)
        assert results[1] == {"id": 1}
        assert await api.get("/widgets/1") == {"id": 1}
        assert len(api.calls) == 1


class TestHttpApiConnections:
    """Test the two connection strategies."""

    @pytest.mark.asyncio
    async def test_paginated_connection_request_and_translation(self):
        """Forward args are sent as cursor/limit/pageSize and translated back."""
        url = f"{ORIGIN}/v1/widgets?cursor=c1&limit=2&pageSize=2&status=open"
        api = FakeApi(
            {
                url: {
                    "items": [{"id": 1}, {"id": 2}],
                    "meta": {"cursors": ["c2", "c3"], "hasNextPage": True, "total": 9},
                }
            }
        )

        connection = await api.get_paginated_connection(
            "/widgets", {"after": "c1", "first": 2, "status": "open"}
        )

        assert api.calls[0][1] == url
        assert connection.nodes == [{"id": 1}, {"id": 2}]
        assert connection.page_info.start_cursor == "c2"
        assert connection.page_info.end_cursor == "c3"
        assert connection.page_info.has_previous_page is True
        assert connection.page_info.has_next_page is True
        assert connection.meta == {"total": 9}

    @pytest.mark.asyncio
    async def test_paginated_connection_not_found(self):
        api = FakeApi()
        assert await api.get_paginated_connection("/widgets", {"first": 2}) is None

    @pytest.mark.asyncio
    async def test_paginated_connection_missing_meta(self):
        api = FakeApi({f"{ORIGIN}/v1/widgets?limit=2&pageSize=2": {"items": []}})

        with pytest.raises(ContractViolationError):
            await api.get_paginated_connection("/widgets", {"first": 2})

    @pytest.mark.asyncio
    async def test_unpaginated_connection_sends_filters_only(self):
        """Pagination args are applied locally, not sent to the backend."""
        items = [{"id": i} for i in range(10)]
        api = FakeApi({f"{ORIGIN}/v1/widgets?status=open": items})

        connection = await api.get_unpaginated_connection(
            "/widgets", {"first": 3, "status": "open"}
        )

        assert [call[1] for call in api.calls] == [f"{ORIGIN}/v1/widgets?status=open"]
        assert len(connection.edges) == 3
        assert connection.page_info.has_next_page is True
        assert connection.meta == {}

    @pytest.mark.asyncio
    async def test_unpaginated_connection_requires_array(self):
        api = FakeApi({f"{ORIGIN}/v1/widgets": {"not": "a list"}})

        with pytest.raises(ContractViolationError):
            await api.get_unpaginated_connection("/widgets", {"first": 3})


class TestHttpApiWrites:
    """Test unbatched write methods."""

    @pytest.mark.asyncio
    async def test_write_methods(self):
        api = FakeApi()

        await api.post("/widgets", {"name": "a"})
        await api.put("/widgets/1", {"name": "b"})
        await api.patch("/widgets/1", {"name": "c"})
        await api.delete("/widgets/1")

        assert api.calls == [
            (HttpMethod.POST, f"{ORIGIN}/v1/widgets", {"name": "a"}),
            (HttpMethod.PUT, f"{ORIGIN}/v1/widgets/1", {"name": "b"}),
            (HttpMethod.PATCH, f"{ORIGIN}/v1/widgets/1", {"name": "c"}),
            (HttpMethod.DELETE, f"{ORIGIN}/v1/widgets/1", None),
        ]

    @pytest.mark.asyncio
    async def test_writes_are_not_deduplicated(self):
        api = FakeApi()

        await asyncio.gather(api.post("/widgets", {}), api.post("/widgets", {}))

        assert len(api.calls) == 2


class TestHttpApiUrls:
    """Test URL helpers."""

    def test_get_url(self):
        api = FakeApi()
        assert api.get_url("widgets", {"b": 1, "a": 2}) == f"{ORIGIN}/v1/widgets?a=2&b=1"

    def test_get_external_url(self):
        api = FakeApi()
        assert api.get_external_url("/widgets/1") == "https://public.test/v1/widgets/1"


class TestHttpApiBulkLoaders:
    """Test keyed bulk loaders created by the facade."""

    @pytest.mark.asyncio
    async def test_arg_loader_groups_by_key(self):
        """create_arg_loader filters by repeated key params and groups results."""
        url = f"{ORIGIN}/v1/comments?postId=1&postId=2&postId=3"
        api = FakeApi(
            {
                url: [
                    {"id": "c1", "postId": 1},
                    {"id": "c2", "postId": 2},
                    {"id": "c3", "postId": 1},
                ]
            }
        )
        loader = api.create_arg_loader("/comments", "postId")

        results = await loader.load_many(["1", "2", "3"])

        assert [call[1] for call in api.calls] == [url]
        assert [[c["id"] for c in comments] for comments in results] == [["c1", "c3"], ["c2"], []]

    @pytest.mark.asyncio
    async def test_loader_uses_configured_chunk_size(self):
        """num_keys_per_chunk bounds the keys of each bulk request."""
        api = FakeApi(num_keys_per_chunk=2)
        loader = api.create_loader(
            lambda keys: api.get_url("/things", {"id": keys}), lambda item: item["id"]
        )

        await loader.load_many(["a", "b", "c"])

        assert [call[1] for call in api.calls] == [
            f"{ORIGIN}/v1/things?id=a&id=b",
            f"{ORIGIN}/v1/things?id=c",
        ]

    @pytest.mark.asyncio
    async def test_arg_loader_drops_items_without_key(self):
        """Items lacking the join key are dropped instead of failing the batch."""
        url = f"{ORIGIN}/v1/things?ownerId=a"
        api = FakeApi({url: [{"ownerId": "a", "id": 1}, {"id": 99}]})
        loader = api.create_arg_loader("/things", "ownerId")

        assert await loader.load("a") == [{"ownerId": "a", "id": 1}]
