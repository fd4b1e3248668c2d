"""Core components."""

from .config import DEFAULT_NUM_KEYS_PER_CHUNK, DEFAULT_TIMEOUT, HttpApiOptions
from .enums import HttpMethod
from .exceptions import (
    BatchLoadError,
    ContractViolationError,
    HttpApiError,
    HttpError,
    JsonApiError,
    TransportError,
)

__all__ = [
    "HttpApiOptions",
    "DEFAULT_NUM_KEYS_PER_CHUNK",
    "DEFAULT_TIMEOUT",
    "HttpMethod",
    "HttpApiError",
    "TransportError",
    "HttpError",
    "JsonApiError",
    "ContractViolationError",
    "BatchLoadError",
]
