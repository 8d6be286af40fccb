"""Hub document filter -- one scan/resolve/synthesize/assemble pass per document.

Manifesto:
    Real-time hubs deserve the same API documentation as REST endpoints.
    The filter plugs into an OpenAPI generation pass and adds one path entry
    per documentable hub method to the host's document, using the host's
    schema registry so argument types share components with the rest of the
    API.

Architecture:
    ::

        HubDocumentFilter(modules)
              │
              ▼  apply(document, context)
        ┌──────────────┐   ┌────────────────┐   ┌──────────────────┐
        │ HubScanner   │──▶│ resolver       │──▶│ paths            │
        │ (hubs)       │   │ (methods/args) │   │ parameters       │
        └──────────────┘   └────────────────┘   └────────┬─────────┘
                                                          ▼
                                                 document.add_operation

    The pass is synchronous and has no partial-success mode: the first
    configuration error or duplicate path aborts it.

Examples:
    >>> import chat_hubs
    >>> document = OpenApiDocument()
    >>> context = DocumentFilterContext("v1")
    >>> HubDocumentFilter([chat_hubs]).apply(document, context)
    >>> sorted(document.paths)
    ['chat/Chat/SendMessage']

Tags:
    hubgen, openapi, document-filter, pipeline

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from hubgen.core.errors import HubgenError
from hubgen.core.logging import LogContext, get_logger
from hubgen.core.settings import HubgenSettings, get_settings
from hubgen.document import OpenApiDocument, add_operation
from hubgen.metadata import HubMeta, get_method_meta
from hubgen.parameters import to_parameters
from hubgen.paths import get_hub_path, get_method_path, get_tag
from hubgen.resolver import get_hub_methods, get_method_args
from hubgen.scanner import HubScanner
from hubgen.schema import SchemaGenerator, SchemaGeneratorProtocol, SchemaRepository

logger = get_logger(__name__)


@dataclass
class DocumentFilterContext:
    """What the host hands the filter for one document."""

    document_name: str
    schema_repository: SchemaRepository = field(default_factory=SchemaRepository)
    schema_generator: SchemaGeneratorProtocol = field(default_factory=SchemaGenerator)


class HubDocumentFilter:
    """Add documentation for hub classes to an OpenAPI document.

    Args:
        modules: Modules containing hub classes. Duplicates are ignored.
        settings: Placeholder/default configuration; the process-wide
            settings are used when omitted.

    Raises:
        NoModulesError: If no module is provided.
    """

    def __init__(
        self,
        modules: Iterable[ModuleType] | None,
        settings: HubgenSettings | None = None,
    ):
        self.scanner = HubScanner(modules)
        self.settings = settings or get_settings()

    @property
    def modules(self) -> tuple[ModuleType, ...]:
        return self.scanner.modules

    def apply(self, document: OpenApiDocument, context: DocumentFilterContext) -> None:
        """Insert a path entry for every documentable hub method."""
        documented = 0
        with LogContext(document=context.document_name):
            for hub, hub_meta in self.scanner.scan(context.document_name):
                documented += self.process_hub(document, context, hub, hub_meta)
            logger.info(
                "document_filter_applied",
                operations=documented,
                paths=len(document.paths),
            )

    def process_hub(
        self,
        document: OpenApiDocument,
        context: DocumentFilterContext,
        hub: type,
        hub_meta: HubMeta,
    ) -> int:
        """Document every resolved method of one hub; return how many."""
        hub_path = get_hub_path(hub, hub_meta, self.settings)
        tag = get_tag(hub)
        try:
            methods = get_hub_methods(hub, hub_meta)
            for method in methods:
                self.process_method(document, context, hub_meta, hub_path, tag, method)
        except HubgenError as e:
            if e.context.hub is None:
                e.with_context(hub=hub.__qualname__)
            raise
        return len(methods)

    def process_method(
        self,
        document: OpenApiDocument,
        context: DocumentFilterContext,
        hub_meta: HubMeta,
        hub_path: str,
        tag: str,
        method: Callable[..., Any],
    ) -> None:
        method_meta = get_method_meta(method)
        path = get_method_path(hub_path, method, method_meta, self.settings)
        try:
            args = get_method_args(method, hub_meta, method_meta)
            parameters = to_parameters(args, context.schema_repository, context.schema_generator)
        except HubgenError as e:
            raise e.with_context(method=method.__name__, path=path)
        operation_type = (
            method_meta.operation_type
            if method_meta and method_meta.operation_type is not None
            else self.settings.default_operation_type
        )
        add_operation(
            document,
            tag=tag,
            path=path,
            operation_type=operation_type,
            summary=method_meta.summary if method_meta else None,
            description=method_meta.description if method_meta else None,
            parameters=parameters,
        )
        logger.debug("method_documented", tag=tag, method=method.__name__, path=path)


__all__ = ["DocumentFilterContext", "HubDocumentFilter"]
