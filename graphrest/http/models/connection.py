"""Forward-only cursor connection models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Edge(BaseModel):
    """A node paired with the cursor that points at it."""

    node: Any
    cursor: str

    model_config = ConfigDict(frozen=True)


class PageInfo(BaseModel):
    """Relay-style page information.

    Serializes with camelCase aliases (``startCursor``, ``hasNextPage``, ...)
    so the dumped shape can be handed to a graph schema directly.
    """

    start_cursor: str | None = Field(default=None, alias="startCursor")
    end_cursor: str | None = Field(default=None, alias="endCursor")
    has_previous_page: bool = Field(default=False, alias="hasPreviousPage")
    has_next_page: bool = Field(default=False, alias="hasNextPage")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Connection(BaseModel):
    """Uniform result of both pagination strategies."""

    edges: list[Edge] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")
    meta: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_empty_cursors(self) -> Connection:
        """An empty page cannot point anywhere."""
        if not self.edges and (
            self.page_info.start_cursor is not None or self.page_info.end_cursor is not None
        ):
            raise ValueError("startCursor and endCursor must be null when there are no edges")
        return self

    @property
    def nodes(self) -> list[Any]:
        return [edge.node for edge in self.edges]

    def to_dict(self) -> dict[str, Any]:
        """Dump using the camelCase field names of the graph schema."""
        return self.model_dump(by_alias=True)

    model_config = ConfigDict(frozen=True, populate_by_name=True)
