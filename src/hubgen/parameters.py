"""Parameter mapping -- resolved hub arguments to documented query parameters."""

from __future__ import annotations

from typing import Any

from hubgen.document import QUERY, OpenApiParameter
from hubgen.resolver import HubArgument
from hubgen.schema import REF_KEY, SchemaGeneratorProtocol, SchemaRepository, is_reference


def get_schema(
    tp: Any,
    repository: SchemaRepository,
    generator: SchemaGeneratorProtocol,
) -> dict[str, Any]:
    """Return the registered reference for ``tp``, generating one if needed."""
    schema = repository.try_lookup_by_type(tp)
    if schema is not None:
        return schema
    return generator.generate_schema(tp, repository)


def to_parameter(
    arg: HubArgument,
    repository: SchemaRepository,
    generator: SchemaGeneratorProtocol,
) -> OpenApiParameter:
    """Map one argument; a reference schema is reduced to its bare pointer."""
    schema = get_schema(arg.annotation, repository, generator)
    if is_reference(schema):
        schema = {REF_KEY: schema[REF_KEY]}
    return OpenApiParameter(
        name=arg.name,
        in_=QUERY,
        description=arg.meta.description if arg.meta else None,
        schema_=schema,
    )


def to_parameters(
    args: list[HubArgument],
    repository: SchemaRepository,
    generator: SchemaGeneratorProtocol,
) -> list[OpenApiParameter]:
    return [to_parameter(arg, repository, generator) for arg in args]


__all__ = ["get_schema", "to_parameter", "to_parameters"]
