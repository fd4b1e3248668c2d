"""graphrest-http - Serve node/connection graph APIs from plain REST backends."""

from .api import AiohttpApi, HttpApi, QueryStringCodec, build_path
from .core import (
    BatchLoadError,
    ContractViolationError,
    HttpApiError,
    HttpApiOptions,
    HttpError,
    HttpMethod,
    JsonApiError,
    TransportError,
)
from .models import (
    Connection,
    Edge,
    Found,
    Malformed,
    NotFound,
    PageInfo,
    PaginatedList,
    classify_collection,
    classify_page,
)
from .runtime import (
    BatchLoader,
    BatchWindow,
    ChunkPolicy,
    KeyedBatchLoader,
    create_keyed_loader,
    create_path_loader,
    paged_connection,
    unpaged_connection,
)
from .utils import HTTPClient, url_join

__version__ = "0.1.0"

__all__ = [
    # API
    "HttpApi",
    "AiohttpApi",
    "QueryStringCodec",
    "build_path",
    # Config / enums
    "HttpApiOptions",
    "HttpMethod",
    # Exceptions
    "HttpApiError",
    "TransportError",
    "HttpError",
    "JsonApiError",
    "ContractViolationError",
    "BatchLoadError",
    # Models
    "Connection",
    "Edge",
    "PageInfo",
    "PaginatedList",
    "Found",
    "NotFound",
    "Malformed",
    "classify_page",
    "classify_collection",
    # Runtime
    "BatchLoader",
    "BatchWindow",
    "KeyedBatchLoader",
    "ChunkPolicy",
    "create_path_loader",
    "create_keyed_loader",
    "paged_connection",
    "unpaged_connection",
    # Utils
    "HTTPClient",
    "url_join",
]
