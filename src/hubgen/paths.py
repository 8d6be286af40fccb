"""Path synthesis -- hub and method path segments from descriptor templates.

Each level has exactly one placeholder token (``[Hub]`` for the hub path,
``[Method]`` for the method segment, both configurable). Substitution is plain
string replacement of every occurrence; nothing else in the template is
interpreted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hubgen.core.settings import HubgenSettings, get_settings
from hubgen.metadata import HubMeta, MethodMeta

_HUB_SUFFIX = "Hub"


def is_interface_name(name: str) -> bool:
    """Check whether a class name follows the ``IName`` interface convention."""
    return len(name) > 1 and name[0] == "I" and name[1].isupper()


def get_type_name(cls: type) -> str:
    """Derive the display name of a hub class.

    ``IChatHub`` -> ``Chat``, ``IChat`` -> ``Chat``, ``ChatHub`` -> ``ChatHub``.
    """
    name = cls.__name__
    if not is_interface_name(name):
        return name
    name = name[1:]
    if name.endswith(_HUB_SUFFIX) and len(name) > len(_HUB_SUFFIX):
        name = name[: -len(_HUB_SUFFIX)]
    return name


def get_tag(cls: type) -> str:
    """Tag shared by every operation of a hub."""
    return get_type_name(cls)


def get_hub_path(cls: type, meta: HubMeta, settings: HubgenSettings | None = None) -> str:
    """Substitute the hub placeholder in the hub's path template."""
    settings = settings or get_settings()
    template = meta.path if meta.path is not None else settings.default_hub_path
    return template.replace(settings.hub_name_placeholder, get_type_name(cls))


def get_method_path(
    hub_path: str,
    method: Callable[..., Any],
    meta: MethodMeta | None,
    settings: HubgenSettings | None = None,
) -> str:
    """Append the method segment to the hub path.

    Without a descriptor the segment is the method's own name; with one it is
    the descriptor's name template with the method placeholder substituted.
    """
    if meta is None:
        return f"{hub_path}/{method.__name__}"
    settings = settings or get_settings()
    segment = meta.name.replace(settings.method_name_placeholder, method.__name__)
    return f"{hub_path}/{segment}"


__all__ = [
    "is_interface_name",
    "get_type_name",
    "get_tag",
    "get_hub_path",
    "get_method_path",
]
