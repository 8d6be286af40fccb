"""Settings for hubgen document generation.

Placeholder tokens, the default hub path template and the default operation
verb are configuration, not code: hosts that already use different tokens
in their descriptors override them through the environment.

Order of precedence (highest → lowest):
    1. Explicit constructor arguments
    2. Environment variables (``HUBGEN_HUB_NAME_PLACEHOLDER``, etc.)
    3. ``.env`` file
    4. Defaults below

Examples:
    >>> from hubgen.core.settings import HubgenSettings
    >>> HubgenSettings(default_hub_path="/realtime/[Hub]").default_hub_path
    '/realtime/[Hub]'

Tags:
    settings, configuration, pydantic, environment, hubgen

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hubgen.metadata import OperationType


class HubgenSettings(BaseSettings):
    """Settings shared by every stage of a document-generation pass.

    Fields
    ──────
    hub_name_placeholder    : Token replaced by the hub's derived name
    method_name_placeholder : Token replaced by the method's own name
    default_hub_path        : Template used when a hub descriptor has no path
    default_operation_type  : Verb used when a method has no descriptor
    schema_ref_prefix       : Prefix of ``$ref`` pointers to schema components
    log_level               : Default level for ``configure_logging``
    """

    model_config = SettingsConfigDict(
        env_prefix="HUBGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Templates ────────────────────────────────────────────────
    hub_name_placeholder: str = Field(default="[Hub]", min_length=1)
    method_name_placeholder: str = Field(default="[Method]", min_length=1)
    default_hub_path: str = "/hubs/[Hub]"

    # ── Operations ───────────────────────────────────────────────
    default_operation_type: OperationType = OperationType.POST
    schema_ref_prefix: str = "#/components/schemas/"

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> HubgenSettings:
    """Return the process-wide settings instance."""
    return HubgenSettings()


def reset_settings() -> None:
    """Drop the cached settings (for testing)."""
    get_settings.cache_clear()


__all__ = ["HubgenSettings", "get_settings", "reset_settings"]
