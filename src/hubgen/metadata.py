"""Declarative hub metadata -- descriptors attached to hubs, methods and arguments.

A hub is an ordinary class; decorators attach frozen descriptor dataclasses
to it and to its methods without changing their behaviour. Arguments are
described with ``typing.Annotated`` so the description lives next to the
type it documents::

    @signalr_hub("chat/[Hub]", auto_discover=AutoDiscover.NONE)
    class IChatHub:
        @signalr_method(summary="Broadcast a message")
        def SendMessage(self, user: Annotated[str, Arg("Sender")], text: str): ...

        @hidden
        @signalr_method()
        def Debug(self): ...

The pipeline only reads these descriptors; it never mutates them.

Tags:
    hubgen, metadata, decorators, descriptors, annotated

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, TypeVar, get_args, get_origin

T = TypeVar("T")

HUB_META_ATTR = "_signalr_hub_meta"
METHOD_META_ATTR = "_signalr_method_meta"
HIDDEN_ATTR = "_signalr_hidden"

DEFAULT_METHOD_NAME = "[Method]"


class AutoDiscover(str, Enum):
    """Discovery policy: whether members must opt in or are included by default.

    Hub descriptors accept ``NONE``, ``METHODS`` and ``METHODS_AND_ARGS``;
    method descriptors accept ``NONE`` and ``ARGS``.
    """

    NONE = "none"
    METHODS = "methods"
    METHODS_AND_ARGS = "methods_and_args"
    ARGS = "args"


class OperationType(str, Enum):
    """HTTP-like verb a hub method is documented under."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


@dataclass(frozen=True)
class HubMeta:
    """Metadata attached by ``@signalr_hub``."""

    path: str | None = None
    auto_discover: AutoDiscover = AutoDiscover.METHODS_AND_ARGS
    document_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class MethodMeta:
    """Metadata attached by ``@signalr_method``."""

    name: str = DEFAULT_METHOD_NAME
    operation_type: OperationType | None = None
    auto_discover: AutoDiscover = AutoDiscover.ARGS
    summary: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ArgMeta:
    """Argument descriptor, used as ``Annotated[T, Arg("description")]``."""

    description: str | None = None


Arg = ArgMeta


class _HiddenMarker:
    """Singleton marker excluding an argument: ``Annotated[T, Hidden]``."""

    _instance: _HiddenMarker | None = None

    def __new__(cls) -> _HiddenMarker:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Hidden"


Hidden = _HiddenMarker()


# =============================================================================
# Decorators
# =============================================================================


def signalr_hub(
    path: str | None = None,
    *,
    auto_discover: AutoDiscover = AutoDiscover.METHODS_AND_ARGS,
    document_names: Iterable[str] | str = (),
) -> Callable[[type[T]], type[T]]:
    """Mark a class as a documentable hub.

    Parameters
    ----------
    path:
        Path template containing the hub placeholder (``[Hub]`` by default).
        ``None`` uses the configured default template.
    auto_discover:
        Default discovery policy for members without their own descriptor.
    document_names:
        Documents the hub belongs to. Empty means every document.
    """
    names = (document_names,) if isinstance(document_names, str) else tuple(document_names)
    meta = HubMeta(path=path, auto_discover=auto_discover, document_names=names)

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, HUB_META_ATTR, meta)
        return cls

    return decorator


def signalr_method(
    name: str = DEFAULT_METHOD_NAME,
    *,
    operation_type: OperationType | None = None,
    auto_discover: AutoDiscover = AutoDiscover.ARGS,
    summary: str | None = None,
    description: str | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Attach a method descriptor to a hub method.

    ``name`` is a template for the final path segment; the method placeholder
    (``[Method]`` by default) is replaced by the method's own name, so
    ``"[Method]Async"`` and ``"send"`` are both valid.
    """
    meta = MethodMeta(
        name=name,
        operation_type=operation_type,
        auto_discover=auto_discover,
        summary=summary,
        description=description,
    )

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        setattr(fn, METHOD_META_ATTR, meta)
        return fn

    return decorator


def hidden(obj: T) -> T:
    """Exclude a hub class or method, and everything under it, from documentation."""
    setattr(obj, HIDDEN_ATTR, True)
    return obj


# =============================================================================
# Accessors
# =============================================================================


def get_hub_meta(cls: Any) -> HubMeta | None:
    """Return the hub descriptor of a class, or None."""
    meta = getattr(cls, HUB_META_ATTR, None)
    return meta if isinstance(meta, HubMeta) else None


def get_method_meta(fn: Any) -> MethodMeta | None:
    """Return the method descriptor of a function, or None."""
    meta = getattr(fn, METHOD_META_ATTR, None)
    return meta if isinstance(meta, MethodMeta) else None


def is_hidden(obj: Any) -> bool:
    """Check whether a class or function carries the hidden marker."""
    return getattr(obj, HIDDEN_ATTR, False) is True


def _annotated_extras(annotation: Any) -> tuple[Any, ...]:
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[1:]
    return ()


def get_arg_meta(annotation: Any) -> ArgMeta | None:
    """Return the ``Arg`` descriptor carried by an ``Annotated`` type, or None."""
    for extra in _annotated_extras(annotation):
        if isinstance(extra, ArgMeta):
            return extra
    return None


def is_hidden_arg(annotation: Any) -> bool:
    """Check whether an ``Annotated`` type carries the ``Hidden`` marker."""
    return any(extra is Hidden for extra in _annotated_extras(annotation))


def strip_annotated(annotation: Any) -> Any:
    """Return the underlying type of an ``Annotated`` type."""
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[0]
    return annotation


__all__ = [
    "AutoDiscover",
    "OperationType",
    "HubMeta",
    "MethodMeta",
    "ArgMeta",
    "Arg",
    "Hidden",
    "signalr_hub",
    "signalr_method",
    "hidden",
    "get_hub_meta",
    "get_method_meta",
    "is_hidden",
    "get_arg_meta",
    "is_hidden_arg",
    "strip_annotated",
]
