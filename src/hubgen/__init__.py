"""
hubgen - OpenAPI documentation for real-time hub classes.

Hubs are classes whose methods are invoked remotely over a persistent
bidirectional connection. ``hubgen`` discovers decorated hubs in a set of
modules and adds one OpenAPI path entry per documentable method to a
host-owned document.

Usage::

    from hubgen import DocumentFilterContext, HubDocumentFilter, OpenApiDocument

    document = OpenApiDocument()
    context = DocumentFilterContext("v1")
    HubDocumentFilter([my_app.hubs]).apply(document, context)
    openapi = document.to_dict(context.schema_repository)
"""

__version__ = "0.1.0"

from hubgen.core.errors import (
    ConfigError,
    DuplicatePathError,
    HubgenError,
    NoModulesError,
    UnsupportedDiscoveryModeError,
)
from hubgen.document import OpenApiDocument, OpenApiInfo, OpenApiOperation, OpenApiParameter
from hubgen.filter import DocumentFilterContext, HubDocumentFilter
from hubgen.metadata import (
    Arg,
    ArgMeta,
    AutoDiscover,
    Hidden,
    HubMeta,
    MethodMeta,
    OperationType,
    hidden,
    signalr_hub,
    signalr_method,
)
from hubgen.schema import SchemaGenerator, SchemaRepository

__all__ = [
    "Arg",
    "ArgMeta",
    "AutoDiscover",
    "ConfigError",
    "DocumentFilterContext",
    "DuplicatePathError",
    "Hidden",
    "HubDocumentFilter",
    "HubMeta",
    "HubgenError",
    "MethodMeta",
    "NoModulesError",
    "OpenApiDocument",
    "OpenApiInfo",
    "OpenApiOperation",
    "OpenApiParameter",
    "OperationType",
    "SchemaGenerator",
    "SchemaRepository",
    "UnsupportedDiscoveryModeError",
    "hidden",
    "signalr_hub",
    "signalr_method",
]
