"""Caller-facing API: resource facade and canonical paths."""

from .client_api import AiohttpApi
from .http_api import HttpApi
from .paths import DEFAULT_CODEC, Args, QueryStringCodec, build_path

__all__ = [
    "HttpApi",
    "AiohttpApi",
    "QueryStringCodec",
    "DEFAULT_CODEC",
    "Args",
    "build_path",
]
