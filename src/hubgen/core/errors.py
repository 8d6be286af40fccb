"""
Structured error types for hubgen.

Every failure a document-generation pass can raise is a ``HubgenError``
subclass carrying a category, structured context (which hub, method,
argument, document or path was being processed) and an optional chained
cause. A pass has no partial-success mode: the first error aborts it and
propagates to the caller unchanged.

Manifesto:
    - **Typed Error Hierarchy:** Configuration, precondition and document
      store failures are distinct types
    - **Rich Context:** Errors carry the entity being processed for logging
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌───────────────────────────────────────────────────────────┐
        │                       HubgenError                          │
        │           (category, context, cause, to_dict)              │
        ├───────────────────────────────────────────────────────────┤
        │                                                            │
        │  ConfigError              ValidationError    DocumentError │
        │  (CONFIG)                 (VALIDATION)       (DOCUMENT)    │
        │       │                        │                  │        │
        │  UnsupportedDiscovery-    NoModulesError     DuplicatePath-│
        │  ModeError                                   Error         │
        └───────────────────────────────────────────────────────────┘

Examples:
    >>> error = UnsupportedDiscoveryModeError("args", level="hub")
    >>> error.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> error.with_context(hub="IChatHub").context.hub
    'IChatHub'

Tags:
    error-handling, exception-hierarchy, error-context, hubgen

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    CONFIG = "CONFIG"             # Unsupported descriptor values
    VALIDATION = "VALIDATION"     # Bad arguments to the public API
    DOCUMENT = "DOCUMENT"         # Document store contract violations
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        hub: Name of the hub class being processed
        method: Name of the hub method being processed
        argument: Name of the method argument being processed
        document: Name of the document being generated
        path: Synthesized path the error relates to
        metadata: Additional key-value pairs
    """

    hub: str | None = None
    method: str | None = None
    argument: str | None = None
    document: str | None = None
    path: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["hub", "method", "argument", "document", "path"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class HubgenError(Exception):
    """
    Base exception for all hubgen errors.

    Subclasses set ``default_category`` so callers can route on category
    without matching concrete types.

    Examples:
        >>> error = HubgenError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'HubgenError'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> HubgenError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ConfigError("Bad mode").with_context(hub="ChatHub")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(HubgenError):
    """
    Descriptor configuration error.

    Aborts the pass; the descriptor must be fixed.
    """

    default_category = ErrorCategory.CONFIG


class UnsupportedDiscoveryModeError(ConfigError):
    """A hub or method declares a discovery mode its level does not accept."""

    def __init__(self, value: Any, *, level: str, message: str | None = None):
        self.value = value
        self.level = level
        super().__init__(message or f"Value {value} not supported")
        self.context.metadata["level"] = level


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(HubgenError):
    """Invalid input to the public API."""

    default_category = ErrorCategory.VALIDATION


class NoModulesError(ValidationError):
    """A document filter was constructed without any module to scan."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "No modules provided")


# =============================================================================
# DOCUMENT ERRORS
# =============================================================================


class DocumentError(HubgenError):
    """The document store rejected an insertion."""

    default_category = ErrorCategory.DOCUMENT


class DuplicatePathError(DocumentError):
    """A path key is already present in the document."""

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(
            message or f"An item with the same key has already been added. Key: {path}",
            context=ErrorContext(path=path),
        )


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "HubgenError",
    "ConfigError",
    "UnsupportedDiscoveryModeError",
    "ValidationError",
    "NoModulesError",
    "DocumentError",
    "DuplicatePathError",
]
