"""HTTP API facade backing graph resolvers with a REST backend.

Architecture:
    HttpApi is the caller-facing surface. Reads go through per-instance
    loaders; writes go straight to ``request``:
    - get: single path, deduplicated and batched per tick
    - get_paginated_connection: backend-side paging, cursors from meta
    - get_unpaginated_connection: full collection, sliced client-side
    - create_loader/create_arg_loader: chunked bulk lookups by key
    - post/put/patch/delete: unbatched writes

Design Decisions:
    - Abstract ``request``: the transport is supplied by subclasses
      (see AiohttpApi) or test doubles
    - One instance per inbound request: loader caches never outlive it
    - The path loader can be injected to share it between facades of the
      same request

See Also:
    - BatchLoader: Batching/caching primitive
    - paged_connection/unpaged_connection: Pagination translators
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from ..core.config import HttpApiOptions
from ..core.enums import HttpMethod
from ..models.connection import Connection
from ..runtime.batching import BatchLoader
from ..runtime.chunking import ChunkPolicy, KeyOf
from ..runtime.loaders import KeyedBatchLoader, create_keyed_loader, create_path_loader
from ..runtime.pagination import (
    paged_connection,
    paged_request_args,
    split_pagination_args,
    unpaged_connection,
)
from ..utils.urls import url_join
from .paths import DEFAULT_CODEC, Args, QueryStringCodec, build_path

logger = logging.getLogger(__name__)


class HttpApi(ABC):
    """Resource facade over a REST backend."""

    qs: QueryStringCodec = DEFAULT_CODEC

    def __init__(
        self,
        options: HttpApiOptions,
        *,
        loader: BatchLoader[str, Any] | None = None,
    ) -> None:
        """Initialize facade.

        Args:
            options: Backend location and chunking configuration
            loader: Path loader to reuse (default: a fresh one for this instance)
        """
        self.options = options
        self._loader = loader or create_path_loader(
            self._fetch_path, name=f"{type(self).__name__}.get"
        )

    @property
    def loader(self) -> BatchLoader[str, Any]:
        return self._loader

    @property
    def num_keys_per_chunk(self) -> int:
        return self.options.num_keys_per_chunk

    @abstractmethod
    async def request(self, method: HttpMethod, url: str, data: Any = None) -> Any:
        """Perform one HTTP call.

        Returns:
            Parsed body, or None on an empty response

        Raises:
            TransportError: If the call fails
        """

    async def get(self, path: str, args: Args | None = None) -> Any:
        """GET a path, batched and memoized per canonical path."""
        return await self._loader.load(self.make_path(path, args))

    async def get_paginated_connection(self, path: str, args: Args) -> Connection | None:
        """GET a page from a backend that paginates server-side.

        Raises:
            ContractViolationError: If the backend result lacks ``meta``
        """
        raw = await self.get(path, paged_request_args(args))
        if raw is None:
            logger.debug("paged_connection_not_found", extra={"path": path})
        return paged_connection(raw, after=args.get("after"))

    async def get_unpaginated_connection(self, path: str, args: Args) -> Connection:
        """GET a full collection and paginate it here.

        Raises:
            ContractViolationError: If the backend does not return an array
        """
        filters, _ = split_pagination_args(args)
        raw = await self.get(path, filters)
        connection = unpaged_connection(raw, args)
        logger.debug(
            "unpaged_connection_sliced",
            extra={"path": path, "total": len(raw), "edges": len(connection.edges)},
        )
        return connection

    async def post(self, path: str, data: Any = None) -> Any:
        return await self.request(HttpMethod.POST, self._get_url(path), data)

    async def put(self, path: str, data: Any = None) -> Any:
        return await self.request(HttpMethod.PUT, self._get_url(path), data)

    async def patch(self, path: str, data: Any = None) -> Any:
        return await self.request(HttpMethod.PATCH, self._get_url(path), data)

    async def delete(self, path: str) -> Any:
        return await self.request(HttpMethod.DELETE, self._get_url(path))

    def make_path(self, path: str, args: Args | None = None) -> str:
        return build_path(path, args, self.qs)

    def create_arg_loader(self, path: str, key: str) -> KeyedBatchLoader:
        """Bulk loader filtering ``path`` by ``key=<keys>`` and grouping on ``item[key]``.

        Items without ``key`` match no lookup key and are dropped.
        """
        return self.create_loader(
            lambda keys: self.get_url(path, {key: keys}),
            lambda item: _join_key(item, key),
        )

    def create_loader(
        self,
        get_path: Callable[[list[str]], str],
        get_key: KeyOf,
    ) -> KeyedBatchLoader:
        """Bulk loader resolving each key to the list of items matching it.

        Args:
            get_path: Absolute URL of the bulk GET for one chunk of keys
            get_key: Reads the lookup key off a returned item; items it
                returns None for are dropped
        """
        # Chunk results are cached by the keyed loader, not the path loader
        return create_keyed_loader(
            self._fetch_url,
            get_path,
            get_key,
            policy=ChunkPolicy(chunk_size=self.num_keys_per_chunk),
            name=f"{type(self).__name__}.bulk",
        )

    def get_url(self, path: str, args: Args | None = None) -> str:
        return self._get_url(self.make_path(path, args))

    def get_external_url(self, path: str, args: Args | None = None) -> str:
        return self._get_url(self.make_path(path, args), self.options.external_origin)

    def _get_url(self, path: str, origin: str | None = None) -> str:
        return f"{origin or self.options.origin}{url_join(self.options.api_base, path)}"

    async def _fetch_path(self, path: str) -> Any:
        return await self.request(HttpMethod.GET, self._get_url(path))

    async def _fetch_url(self, url: str) -> Any:
        return await self.request(HttpMethod.GET, url)


def _join_key(item: Any, key: str) -> str | None:
    value = item.get(key) if isinstance(item, Mapping) else None
    return None if value is None else str(value)
