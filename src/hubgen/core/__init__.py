"""hubgen.core -- errors, logging and settings shared by every pipeline stage.

Module Map
----------
    errors.py      Typed error hierarchy (HubgenError, ConfigError, ...)
    logging.py     structlog configuration and context helpers
    settings.py    HubgenSettings (pydantic-settings, ``HUBGEN_`` env prefix)

``settings`` is not re-exported here because it depends on
``hubgen.metadata``; import it from ``hubgen.core.settings``.
"""

from hubgen.core.errors import (
    ConfigError,
    DocumentError,
    DuplicatePathError,
    ErrorCategory,
    ErrorContext,
    HubgenError,
    NoModulesError,
    UnsupportedDiscoveryModeError,
    ValidationError,
)
from hubgen.core.logging import configure_logging, get_logger

__all__ = [
    "ConfigError",
    "DocumentError",
    "DuplicatePathError",
    "ErrorCategory",
    "ErrorContext",
    "HubgenError",
    "NoModulesError",
    "UnsupportedDiscoveryModeError",
    "ValidationError",
    "configure_logging",
    "get_logger",
]
