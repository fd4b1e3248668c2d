"""HttpApi backed by the aiohttp HTTPClient."""

from __future__ import annotations

from typing import Any

from ..core.config import HttpApiOptions
from ..core.enums import HttpMethod
from ..runtime.batching import BatchLoader
from ..utils.http import HTTPClient
from .http_api import HttpApi


class AiohttpApi(HttpApi):
    """Concrete facade issuing requests through an ``HTTPClient``.

    The client (and its session) may be shared between the per-request
    facades; only the loaders are scoped to the facade.
    """

    def __init__(
        self,
        options: HttpApiOptions,
        *,
        client: HTTPClient | None = None,
        headers: dict[str, str] | None = None,
        loader: BatchLoader[str, Any] | None = None,
    ) -> None:
        super().__init__(options, loader=loader)
        self._owns_client = client is None
        self._client = client or HTTPClient(timeout=options.timeout)
        self._headers = headers

    async def request(self, method: HttpMethod, url: str, data: Any = None) -> Any:
        return await self._client.request(method, url, data, headers=self._headers)

    async def close(self) -> None:
        """Close the client if this facade created it."""
        if self._owns_client:
            await self._client.close()

    async def __aenter__(self) -> AiohttpApi:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
