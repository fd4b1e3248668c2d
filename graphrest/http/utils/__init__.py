"""Utility functions."""

from .http import HTTPClient
from .urls import url_join

__all__ = ["HTTPClient", "url_join"]
