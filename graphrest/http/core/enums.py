"""Core enumerations shared across the HTTP layer."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs understood by the transport.

    String enum so members can be handed straight to aiohttp and compared
    against plain strings.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        """Whether requests with this method may carry a JSON body."""
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)
