"""Member resolution -- which methods and arguments of a hub are documented.

Discovery is a two-level cascade. The hub's ``auto_discover`` decides which
methods are included and, for methods without their own descriptor, which
arguments are. A method descriptor replaces the hub's argument policy for
that method only. The hidden marker wins over every policy.

The rules are kept as lookup tables rather than nested conditionals so that
each level can be read (and tested) on its own:

==========================  =====================  ======================
level                       mode                   included
==========================  =====================  ======================
hub → methods               NONE                   described methods
hub → methods               METHODS(_AND_ARGS)     all public methods
hub → args (no method meta) NONE, METHODS          described arguments
hub → args (no method meta) METHODS_AND_ARGS       all arguments
method → args               NONE                   described arguments
method → args               ARGS                   all arguments
==========================  =====================  ======================

Any mode missing from the table for its level raises
``UnsupportedDiscoveryModeError``.

Tags:
    hubgen, resolver, discovery, decision-table

Doc-Types:
    api-reference
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hubgen.core.errors import UnsupportedDiscoveryModeError
from hubgen.core.logging import get_logger
from hubgen.metadata import (
    ArgMeta,
    AutoDiscover,
    HubMeta,
    MethodMeta,
    get_arg_meta,
    get_method_meta,
    is_hidden,
    is_hidden_arg,
    strip_annotated,
)

logger = get_logger(__name__)


class Inclusion(str, Enum):
    """Which members a discovery mode lets through."""

    DESCRIBED = "described"  # only members carrying their own descriptor
    ALL = "all"


HUB_METHOD_RULES: dict[AutoDiscover, Inclusion] = {
    AutoDiscover.NONE: Inclusion.DESCRIBED,
    AutoDiscover.METHODS: Inclusion.ALL,
    AutoDiscover.METHODS_AND_ARGS: Inclusion.ALL,
}

HUB_ARG_RULES: dict[AutoDiscover, Inclusion] = {
    AutoDiscover.NONE: Inclusion.DESCRIBED,
    AutoDiscover.METHODS: Inclusion.DESCRIBED,
    AutoDiscover.METHODS_AND_ARGS: Inclusion.ALL,
}

METHOD_ARG_RULES: dict[AutoDiscover, Inclusion] = {
    AutoDiscover.NONE: Inclusion.DESCRIBED,
    AutoDiscover.ARGS: Inclusion.ALL,
}


@dataclass(frozen=True)
class HubArgument:
    """A documentable argument of a hub method."""

    name: str
    annotation: Any
    meta: ArgMeta | None
    hidden: bool = False


def resolve_inclusion(rules: dict[AutoDiscover, Inclusion], mode: Any, *, level: str) -> Inclusion:
    """Look ``mode`` up in a rule table.

    Raises:
        UnsupportedDiscoveryModeError: If the level does not accept ``mode``.
    """
    try:
        return rules[mode]
    except (KeyError, TypeError):
        raise UnsupportedDiscoveryModeError(mode, level=level) from None


def iter_declared_methods(cls: type) -> Iterator[Callable[..., Any]]:
    """Yield the public instance methods declared directly on ``cls``.

    Inherited, static, class and underscore-prefixed methods are not yielded.
    """
    for name, attr in vars(cls).items():
        if name.startswith("_"):
            continue
        if inspect.isfunction(attr):
            yield attr


def get_hub_methods(cls: type, hub_meta: HubMeta) -> list[Callable[..., Any]]:
    """Return the methods of a hub to document, in declaration order."""
    inclusion = resolve_inclusion(HUB_METHOD_RULES, hub_meta.auto_discover, level="hub")
    methods = list(iter_declared_methods(cls))
    if inclusion is Inclusion.DESCRIBED:
        methods = [m for m in methods if get_method_meta(m) is not None]
    return [m for m in methods if not is_hidden(m)]


def _resolve_annotation(method: Callable[..., Any], name: str, annotation: Any) -> Any:
    """Evaluate one postponed annotation in the method's module namespace.

    An annotation that still cannot be evaluated is documented as ``Any``.
    """
    if not isinstance(annotation, str):
        return annotation

    def holder() -> None: ...

    holder.__annotations__ = {name: annotation}
    try:
        return typing.get_type_hints(holder, globalns=method.__globals__, include_extras=True)[name]
    except (NameError, TypeError) as e:
        logger.warning(
            "argument_type_unresolved",
            method=method.__qualname__,
            argument=name,
            error=str(e),
        )
        return Any


def _get_annotations(method: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(method, include_extras=True)
    except (NameError, TypeError) as e:
        logger.warning("type_hints_unresolved", method=method.__qualname__, error=str(e))
    # Resolved per argument.
    raw = dict(getattr(method, "__annotations__", {}))
    raw.pop("return", None)
    return {name: _resolve_annotation(method, name, value) for name, value in raw.items()}


def iter_method_args(method: Callable[..., Any]) -> Iterator[HubArgument]:
    """Yield every argument of a hub method after ``self``, in declaration order.

    Variadic ``*args`` / ``**kwargs`` have no name to document and are skipped.
    """
    hints = _get_annotations(method)
    params = list(inspect.signature(method).parameters.values())[1:]
    for param in params:
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        annotation = hints.get(param.name, param.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = Any
        yield HubArgument(
            name=param.name,
            annotation=strip_annotated(annotation),
            meta=get_arg_meta(annotation),
            hidden=is_hidden_arg(annotation),
        )


def get_arg_inclusion(hub_meta: HubMeta, method_meta: MethodMeta | None) -> Inclusion:
    """Resolve the argument policy for one method.

    A method descriptor, when present, always wins over the hub's mode.
    """
    if method_meta is None:
        return resolve_inclusion(HUB_ARG_RULES, hub_meta.auto_discover, level="hub")
    return resolve_inclusion(METHOD_ARG_RULES, method_meta.auto_discover, level="method")


def get_method_args(
    method: Callable[..., Any],
    hub_meta: HubMeta,
    method_meta: MethodMeta | None,
) -> list[HubArgument]:
    """Return the arguments of a method to document, in declaration order."""
    inclusion = get_arg_inclusion(hub_meta, method_meta)
    args = list(iter_method_args(method))
    if inclusion is Inclusion.DESCRIBED:
        args = [a for a in args if a.meta is not None]
    return [a for a in args if not a.hidden]


__all__ = [
    "Inclusion",
    "HubArgument",
    "HUB_METHOD_RULES",
    "HUB_ARG_RULES",
    "METHOD_ARG_RULES",
    "resolve_inclusion",
    "iter_declared_methods",
    "get_hub_methods",
    "iter_method_args",
    "get_arg_inclusion",
    "get_method_args",
]
