from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared dependency report fixtures used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
_REPORT_HEADER = [
    "",
    "> Task :app:dependencies",
    "",
    "------------------------------------------------------------",
    "Project ':app'",
    "------------------------------------------------------------",
    "",
    "releaseRuntimeClasspath - Resolved configuration for runtime for variant: release",
]

_REPORT_FOOTER = [
    "",
    "(*) - dependencies omitted (listed previously)",
    "",
]


@pytest.fixture
def old_report() -> str:
    """
    Return a realistic 'gradle dependencies' report (before an upgrade).

    Returns:
        str: Raw report text with header, entry block and legend.
    """
    return "\n".join(_REPORT_HEADER + [
        r"+--- com.squareup.okhttp3:okhttp:4.9.0",
        r"|    +--- com.squareup.okio:okio:2.8.0",
        r"|    |    \--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
        r"|    \--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
        r"\--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
    ] + _REPORT_FOOTER)


@pytest.fixture
def new_report() -> str:
    """
    Return the same report after an okio upgrade and a new retrofit library.

    Returns:
        str: Raw report text with header, entry block and legend.
    """
    return "\n".join(_REPORT_HEADER + [
        r"+--- com.squareup.okhttp3:okhttp:4.9.0",
        r"|    +--- com.squareup.okio:okio:2.8.0 -> 2.9.0",
        r"|    |    \--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
        r"|    \--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
        r"+--- com.squareup.retrofit2:retrofit:2.9.0",
        r"|    \--- com.squareup.okhttp3:okhttp:4.9.0 (*)",
        r"\--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
    ] + _REPORT_FOOTER)


@pytest.fixture
def default_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'deptreediff.domain.config'.
    """
    return {
        "mode": "tree",
        "sort_siblings": True,
        "changes_only": False,
        "log_level": "INFO",
        "log_file": "",
    }
