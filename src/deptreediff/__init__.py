from __future__ import annotations

"""
Dependency Tree Diff.

Parses Gradle-style dependency resolution reports and renders flat listings,
flat diffs and structural tree diffs between two reports.
"""

from deptreediff.core.services.diff_service import (
    dependency_flat_changes,
    dependency_tree_diff,
    flat_dependencies,
    parse_forest,
)
from deptreediff.domain.errors import DeptreediffError, ParseError

__version__ = "1.0.0"

__all__ = [
    "dependency_tree_diff",
    "dependency_flat_changes",
    "flat_dependencies",
    "parse_forest",
    "DeptreediffError",
    "ParseError",
    "__version__",
]
