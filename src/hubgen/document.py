"""OpenAPI document model and the document assembler.

The document is owned by the host: the pipeline only inserts path entries
into it. ``OpenApiDocument.paths`` is insert-only and rejects a second entry
under an existing key with ``DuplicatePathError`` -- the pipeline never
pre-checks uniqueness, it relies on this contract.

Tags:
    hubgen, openapi, document, pydantic

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hubgen.core.errors import DuplicatePathError
from hubgen.core.logging import get_logger
from hubgen.metadata import OperationType
from hubgen.schema import SchemaRepository

logger = get_logger(__name__)

QUERY = "query"


class OpenApiParameter(BaseModel):
    """A documented hub method argument."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    in_: str = Field(default=QUERY, alias="in")
    description: str | None = None
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")


class OpenApiTag(BaseModel):
    name: str


class OpenApiOperation(BaseModel):
    """The single operation of a synthesized path."""

    summary: str | None = None
    description: str | None = None
    tags: list[OpenApiTag] = Field(default_factory=list)
    parameters: list[OpenApiParameter] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.summary is not None:
            result["summary"] = self.summary
        if self.description is not None:
            result["description"] = self.description
        result["tags"] = [tag.name for tag in self.tags]
        result["parameters"] = [
            p.model_dump(by_alias=True, exclude_none=True) for p in self.parameters
        ]
        return result


class OpenApiPathItem(BaseModel):
    operations: dict[OperationType, OpenApiOperation] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {op_type.value: op.to_dict() for op_type, op in self.operations.items()}


class OpenApiInfo(BaseModel):
    title: str = "Hubs"
    version: str = "v1"
    description: str | None = None


class OpenApiDocument(BaseModel):
    """Host-owned OpenAPI document the pipeline inserts path entries into."""

    openapi: str = "3.0.1"
    info: OpenApiInfo = Field(default_factory=OpenApiInfo)
    paths: dict[str, OpenApiPathItem] = Field(default_factory=dict)

    def add_path(self, path: str, item: OpenApiPathItem) -> None:
        """Insert a path entry.

        Raises:
            DuplicatePathError: If ``path`` is already present.
        """
        if path in self.paths:
            raise DuplicatePathError(path)
        self.paths[path] = item

    def to_dict(self, schemas: SchemaRepository | None = None) -> dict[str, Any]:
        """Render as an OpenAPI JSON-compatible dict."""
        result: dict[str, Any] = {
            "openapi": self.openapi,
            "info": self.info.model_dump(exclude_none=True),
            "paths": {path: item.to_dict() for path, item in self.paths.items()},
        }
        if schemas is not None and schemas.schemas:
            result["components"] = {"schemas": schemas.to_dict()}
        return result


def add_operation(
    document: OpenApiDocument,
    *,
    tag: str,
    path: str,
    operation_type: OperationType,
    summary: str | None,
    description: str | None,
    parameters: list[OpenApiParameter],
) -> OpenApiOperation:
    """Build one operation and insert it as a new path entry of ``document``."""
    operation = OpenApiOperation(
        summary=summary,
        description=description,
        tags=[OpenApiTag(name=tag)],
        parameters=parameters,
    )
    document.add_path(path, OpenApiPathItem(operations={operation_type: operation}))
    logger.debug(
        "path_added",
        path=path,
        operation=operation_type.value,
        tag=tag,
        parameters=len(parameters),
    )
    return operation


__all__ = [
    "OpenApiParameter",
    "OpenApiTag",
    "OpenApiOperation",
    "OpenApiPathItem",
    "OpenApiInfo",
    "OpenApiDocument",
    "add_operation",
]
