"""Configuration model for HTTP API instances."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_NUM_KEYS_PER_CHUNK = 25
DEFAULT_TIMEOUT = 30.0


class HttpApiOptions(BaseModel):
    """Where the REST backend lives and how hard to hit it.

    ``origin`` is used for requests issued by this process, while
    ``external_origin`` is what gets embedded in URLs handed to clients
    (they differ when the backend is reached through an internal hostname).
    """

    api_base: str = Field(default="")
    origin: str = Field(..., min_length=1)
    external_origin: str | None = None
    num_keys_per_chunk: int = Field(default=DEFAULT_NUM_KEYS_PER_CHUNK, gt=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @model_validator(mode="before")
    @classmethod
    def default_external_origin(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("external_origin") is None:
            data = {**data, "external_origin": data.get("origin")}
        return data

    @field_validator("origin", "external_origin")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Origins are joined with a leading-slash path, so drop trailing ``/``."""
        if v is None:
            return v
        return v.rstrip("/")

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
