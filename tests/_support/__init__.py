"""
Test support utilities for hubgen tests.

Sample hub modules live next to this file; each one is a module the
scanner is pointed at, so what a module defines (and imports) matters.
"""

from __future__ import annotations

from typing import Any


def assert_dict_subset(actual: dict, expected: dict, path: str = "") -> None:
    """
    Assert that expected is a subset of actual (recursive).

    Args:
        actual: The full dictionary
        expected: The expected subset
        path: Current path (for error messages)
    """
    for key, expected_value in expected.items():
        current_path = f"{path}.{key}" if path else key

        assert key in actual, f"Missing key at {current_path}"
        actual_value = actual[key]

        if isinstance(expected_value, dict) and isinstance(actual_value, dict):
            assert_dict_subset(actual_value, expected_value, current_path)
        else:
            assert actual_value == expected_value, (
                f"Mismatch at {current_path}: "
                f"expected {expected_value!r}, got {actual_value!r}"
            )


def parameter_names(document: Any, path: str) -> list[str]:
    """Names of the parameters of the single operation at ``path``."""
    (operation,) = document.paths[path].operations.values()
    return [p.name for p in operation.parameters]
