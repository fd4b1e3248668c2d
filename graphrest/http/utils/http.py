"""HTTP client helper."""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from ..core.config import DEFAULT_TIMEOUT
from ..core.enums import HttpMethod
from ..core.exceptions import HttpError, TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Performs one call per ``request`` and hands back the decoded JSON body,
    ``None`` for empty responses. Retries are deliberately not attempted here.
    """

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: HttpMethod | str,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Issue a single request.

        Args:
            method: HTTP method
            url: Absolute URL, or a path relative to ``base_url``
            data: JSON-serializable body (ignored for GET/DELETE)
            headers: Extra request headers

        Returns:
            Decoded JSON body, or None if the response has no content

        Raises:
            HttpError: If the backend answers with status >= 400
            TransportError: If the connection itself fails
        """
        method = HttpMethod(method.upper() if isinstance(method, str) else method)
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        kwargs: dict[str, Any] = {"headers": headers}
        if data is not None and method.has_body:
            kwargs["json"] = data

        logger.debug("http_request", extra={"method": method.value, "url": url})

        try:
            async with self.session.request(method.value, url, **kwargs) as response:
                text = await response.text()
                body = _decode_body(text)
                if response.status >= 400:
                    logger.warning(
                        "http_error",
                        extra={"method": method.value, "url": url, "status": response.status},
                    )
                    raise HttpError(response.status, url, body)
                return body
        except aiohttp.ClientError as e:
            raise TransportError(f"{method.value} {url} failed: {e}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _decode_body(text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        # Non-JSON error pages are still useful on HttpError.body
        return text
