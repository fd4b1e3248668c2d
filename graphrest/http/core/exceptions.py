"""Custom exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class HttpApiError(Exception):
    """Base exception for all library errors."""

    pass


@dataclass(frozen=True)
class JsonApiError:
    """A single JSON:API error object returned by the backend.

    Attributes:
        status: HTTP status rendered as a string (JSON:API convention)
        code: Application-specific error code
        title: Short summary of the problem
        detail: Explanation specific to this occurrence
        source: Pointer/parameter describing the offending input
    """

    status: str | None = None
    code: str | None = None
    title: str | None = None
    detail: str | None = None
    source: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JsonApiError:
        status = data.get("status")
        return cls(
            status=str(status) if status is not None else None,
            code=data.get("code"),
            title=data.get("title"),
            detail=data.get("detail"),
            source=dict(data.get("source") or {}),
        )


class TransportError(HttpApiError):
    """A fetch against the backend failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpError(TransportError):
    """Backend answered with a non-success status.

    The parsed response body is kept on ``body``; when it follows the
    JSON:API error format the individual errors are exposed on ``errors``.
    """

    def __init__(
        self,
        status_code: int,
        url: str,
        body: Any = None,
        message: str | None = None,
    ) -> None:
        self.url = url
        self.body = body
        self.errors = _parse_json_api_errors(body)
        if message is None:
            message = f"{status_code} response from {url}"
            if self.errors and self.errors[0].detail:
                message = f"{message}: {self.errors[0].detail}"
        super().__init__(message, status_code=status_code)


class ContractViolationError(HttpApiError):
    """Backend response violates a shape the translation layer relies on.

    Raised instead of degrading to an empty result, since continuing would
    corrupt pagination state.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class BatchLoadError(HttpApiError):
    """Batch function broke the one-result-per-key contract."""

    def __init__(self, message: str, expected: int, received: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received


def _parse_json_api_errors(body: Any) -> list[JsonApiError]:
    if not isinstance(body, dict):
        return []
    errors = body.get("errors")
    if not isinstance(errors, list):
        return []
    return [JsonApiError.from_dict(error) for error in errors if isinstance(error, dict)]
