"""Hub discovery across a set of imported modules.

Manifesto:
    Hubs are found by what they declare, not by where they are registered.
    Scanning module namespaces for decorated classes keeps hub definitions
    free of any import-time coupling to the documentation pipeline.

Tags:
    hubgen, scanner, discovery, modules

Doc-Types:
    api-reference
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Iterator
from types import ModuleType

from hubgen.core.errors import NoModulesError
from hubgen.core.logging import get_logger
from hubgen.metadata import HubMeta, get_hub_meta, is_hidden

logger = get_logger(__name__)


def dedupe_modules(modules: Iterable[ModuleType] | None) -> tuple[ModuleType, ...]:
    """De-duplicate modules by identity, keeping first-occurrence order.

    Raises:
        NoModulesError: If no module is provided.
    """
    unique: dict[int, ModuleType] = {}
    for module in modules or ():
        unique.setdefault(id(module), module)
    if not unique:
        raise NoModulesError()
    return tuple(unique.values())


def should_be_displayed_on_document(meta: HubMeta, document_name: str) -> bool:
    """Check the hub's document-membership filter."""
    return not meta.document_names or document_name in meta.document_names


def _iter_nested_types(cls: type) -> Iterator[type]:
    for obj in list(vars(cls).values()):
        # Aliases of classes defined elsewhere have a foreign qualname.
        if inspect.isclass(obj) and obj.__qualname__ == f"{cls.__qualname__}.{obj.__name__}":
            yield obj
            yield from _iter_nested_types(obj)


def iter_module_types(module: ModuleType) -> Iterator[type]:
    """Yield the classes defined in a module, in namespace order.

    Classes nested in a class body follow their enclosing class, depth first.
    Classes merely imported into the module belong to the module that defines
    them and are not yielded here.
    """
    for obj in list(vars(module).values()):
        if inspect.isclass(obj) and obj.__module__ == module.__name__:
            yield obj
            yield from _iter_nested_types(obj)


class HubScanner:
    """Enumerate hub classes of a set of modules for one document."""

    def __init__(self, modules: Iterable[ModuleType] | None):
        self.modules = dedupe_modules(modules)

    def get_hubs(self) -> list[tuple[type, HubMeta]]:
        """Return every non-hidden class carrying a hub descriptor."""
        hubs: list[tuple[type, HubMeta]] = []
        seen: set[type] = set()
        for module in self.modules:
            for cls in iter_module_types(module):
                if cls in seen:
                    continue
                seen.add(cls)
                meta = get_hub_meta(cls)
                if meta is None:
                    logger.debug("hub_skipped", hub=cls.__qualname__, reason="no_descriptor")
                    continue
                if is_hidden(cls):
                    logger.debug("hub_skipped", hub=cls.__qualname__, reason="hidden")
                    continue
                hubs.append((cls, meta))
        return hubs

    def scan(self, document_name: str) -> Iterator[tuple[type, HubMeta]]:
        """Yield ``(hub, descriptor)`` pairs to document in ``document_name``."""
        for cls, meta in self.get_hubs():
            if not should_be_displayed_on_document(meta, document_name):
                logger.debug(
                    "hub_skipped",
                    hub=cls.__qualname__,
                    reason="document_filtered",
                    document_names=list(meta.document_names),
                )
                continue
            logger.debug("hub_discovered", hub=cls.__qualname__, module=cls.__module__)
            yield cls, meta


__all__ = [
    "HubScanner",
    "dedupe_modules",
    "iter_module_types",
    "should_be_displayed_on_document",
]
