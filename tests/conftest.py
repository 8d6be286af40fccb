"""
Shared pytest fixtures and configuration for hubgen tests.

This module provides:
- Settings/log-context cleanup fixtures for test isolation
- A fresh document and filter context per test
- The sample hub modules from ``tests/_support``

Usage:
    Fixtures are auto-discovered by pytest. Simply use them as function
    arguments (pytest injects them automatically).
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Ensure hubgen package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hubgen.core.logging import clear_context
from hubgen.core.settings import reset_settings
from hubgen.document import OpenApiDocument
from hubgen.filter import DocumentFilterContext


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop cached settings and HUBGEN_ env vars around each test.

    Tests that need custom settings set env vars with ``monkeypatch``
    or pass a ``HubgenSettings`` explicitly.
    """
    for key in [k for k in os.environ if k.startswith("HUBGEN_")]:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_log_context() -> Generator[None, None, None]:
    clear_context()
    yield
    clear_context()


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def document() -> OpenApiDocument:
    return OpenApiDocument()


@pytest.fixture
def context() -> DocumentFilterContext:
    return DocumentFilterContext("v1")


@pytest.fixture
def chat_hubs():
    from tests._support import chat_hubs

    return chat_hubs


@pytest.fixture
def mixed_hubs():
    from tests._support import mixed_hubs

    return mixed_hubs
