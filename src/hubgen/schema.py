"""Schema registry and generator for hub argument types.

The pipeline treats schema generation as a capability: look a type up, and
if it is not registered yet, generate (and register) a schema for it. This
module provides that capability on top of pydantic's JSON-schema support.
Hosts with their own registry implement the two protocols below instead.

Named types (pydantic models, dataclasses, TypedDicts, enums) become
components under ``components.schemas`` and are referenced by ``$ref``;
primitives and containers of primitives are returned inline.

Examples:
    >>> repository = SchemaRepository()
    >>> SchemaGenerator().generate_schema(int, repository)
    {'type': 'integer'}
    >>> class Message(BaseModel):
    ...     text: str
    >>> SchemaGenerator().generate_schema(Message, repository)
    {'$ref': '#/components/schemas/Message'}

Tags:
    hubgen, schema, json-schema, pydantic, registry

Doc-Types:
    api-reference
"""

from __future__ import annotations

import dataclasses
import inspect
import typing
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import (
    BaseModel,
    PydanticUndefinedAnnotation,
    PydanticUserError,
    TypeAdapter,
)

from hubgen.core.errors import DocumentError
from hubgen.core.logging import get_logger
from hubgen.core.settings import get_settings

logger = get_logger(__name__)

REF_KEY = "$ref"
DEFS_KEY = "$defs"


@runtime_checkable
class SchemaRegistry(Protocol):
    """Lookup side of the schema capability."""

    def try_lookup_by_type(self, tp: Any) -> dict[str, Any] | None: ...


@runtime_checkable
class SchemaGeneratorProtocol(Protocol):
    """Generation side of the schema capability; registers as a side effect."""

    def generate_schema(self, tp: Any, repository: SchemaRepository) -> dict[str, Any]: ...


def is_reference(schema: dict[str, Any]) -> bool:
    """Check whether a schema is a ``$ref`` pointer."""
    return REF_KEY in schema


class SchemaRepository:
    """Schema components shared by every operation of a document.

    Insert-only: a schema id, once registered, keeps its body.
    """

    def __init__(self, ref_prefix: str | None = None):
        self.ref_prefix = ref_prefix if ref_prefix is not None else get_settings().schema_ref_prefix
        self.schemas: dict[str, dict[str, Any]] = {}
        self._ids_by_type: dict[Any, str] = {}

    def reference(self, schema_id: str) -> dict[str, Any]:
        """Return a ``$ref`` pointer to a component."""
        return {REF_KEY: f"{self.ref_prefix}{schema_id}"}

    def try_lookup_by_type(self, tp: Any) -> dict[str, Any] | None:
        """Return a reference to the component registered for ``tp``, or None."""
        try:
            schema_id = self._ids_by_type.get(tp)
        except TypeError:
            return None
        if schema_id is None:
            return None
        return self.reference(schema_id)

    def add_definition(self, schema_id: str, schema: dict[str, Any]) -> None:
        """Store a component body under ``schema_id``.

        Storing an identical body again is a no-op.

        Raises:
            DocumentError: If ``schema_id`` already holds a different body.
        """
        existing = self.schemas.setdefault(schema_id, schema)
        if existing != schema:
            raise DocumentError(
                f"Schema id {schema_id!r} already holds a different schema"
            ).with_context(schema_id=schema_id)

    def register(self, tp: Any, schema_id: str, schema: dict[str, Any] | None = None) -> dict[str, Any]:
        """Map ``tp`` to component ``schema_id`` and return a reference to it.

        Raises:
            DocumentError: If ``schema_id`` is already mapped to another type.
        """
        for other, other_id in self._ids_by_type.items():
            if other_id == schema_id and other is not tp:
                raise DocumentError(
                    f"Schema id {schema_id!r} is already used by {other!r}"
                ).with_context(schema_id=schema_id)
        if schema is not None:
            self.add_definition(schema_id, schema)
        self._ids_by_type[tp] = schema_id
        return self.reference(schema_id)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return dict(self.schemas)


def is_named_type(tp: Any) -> bool:
    """Check whether ``tp`` is described as a reusable component."""
    if not inspect.isclass(tp):
        return False
    return (
        issubclass(tp, (BaseModel, Enum))
        or dataclasses.is_dataclass(tp)
        or typing.is_typeddict(tp)
    )


class SchemaGenerator:
    """Generate JSON schemas with ``pydantic.TypeAdapter``."""

    def __init__(self, ref_template: str | None = None):
        self.ref_template = ref_template

    def _json_schema(self, tp: Any, repository: SchemaRepository) -> dict[str, Any]:
        ref_template = self.ref_template or f"{repository.ref_prefix}{{model}}"
        return TypeAdapter(tp).json_schema(ref_template=ref_template)

    def generate_schema(self, tp: Any, repository: SchemaRepository) -> dict[str, Any]:
        """Return the schema of ``tp``, registering components as needed."""
        existing = repository.try_lookup_by_type(tp)
        if existing is not None:
            return existing

        try:
            schema = self._json_schema(tp, repository)
        except (PydanticUserError, PydanticUndefinedAnnotation) as e:
            # Unsupported types and unresolved forward references alike.
            logger.warning("schema_generation_unsupported", type=repr(tp), error=str(e))
            if inspect.isclass(tp):
                return repository.register(tp, tp.__name__, {"type": "object", "title": tp.__name__})
            return {}

        for schema_id, definition in schema.pop(DEFS_KEY, {}).items():
            repository.add_definition(schema_id, definition)

        if not is_named_type(tp):
            return schema

        schema_id = tp.__name__
        if is_reference(schema):
            # Self-referencing types come back as a pointer; the body was hoisted.
            return repository.register(tp, schema_id)
        logger.debug("schema_registered", schema_id=schema_id)
        return repository.register(tp, schema_id, schema)


__all__ = [
    "SchemaRegistry",
    "SchemaGeneratorProtocol",
    "SchemaRepository",
    "SchemaGenerator",
    "is_reference",
    "is_named_type",
]
