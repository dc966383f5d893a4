from __future__ import annotations

"""
Dependency Diff Service.

Public entry points of the core: text in, text out. Wires the parsing,
analysis and rendering stages for the tree diff, flat listing and flat
diff views.
"""

import logging
from typing import List

from deptreediff.core.analysis.flat_differ import diff_flat_dependencies
from deptreediff.core.analysis.tree_builder import build_tree, sort_forest
from deptreediff.core.analysis.tree_differ import diff_forests
from deptreediff.core.parsing.flat_resolver import get_dependencies_to_version
from deptreediff.core.parsing.path_extractor import find_dependency_paths
from deptreediff.core.rendering.flat_renderer import render_flat, render_flat_diff
from deptreediff.core.rendering.tree_renderer import render_diff_events
from deptreediff.domain.dependency_models import DependencyPath, Forest

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TREE VIEW
# -----------------------------------------------------------------------------

def parse_forest(text: str, *, sort_siblings: bool = True) -> Forest:
    """
    Parse a report into a forest of dependency nodes.

    Args:
        text: Raw dependency report.
        sort_siblings: Canonicalize sibling order by coordinate.

    Raises:
        ParseError: If an entry line is malformed.
    """
    return _forest_from_paths(find_dependency_paths(text), sort_siblings)


def dependency_tree_diff(
        old: str,
        new: str,
        *,
        sort_siblings: bool = True,
        changes_only: bool = False,
) -> str:
    """
    Render the structural diff of two dependency reports.

    Unchanged nodes are shown with their full subtree. With changes_only,
    paths present in both reports are dropped before the trees are built,
    so only the branches that actually changed are rendered.

    Args:
        old: Previous raw report.
        new: Current raw report.
        sort_siblings: Sort siblings by coordinate before merging. Disable
            only for literal parity with reports already emitted in order.
        changes_only: Restrict the diff to differing paths.

    Returns:
        str: Diff in branch notation with '+', '-' or ' ' per line.

    Raises:
        ParseError: If either report contains a malformed entry line.
    """
    old_paths = find_dependency_paths(old)
    new_paths = find_dependency_paths(new)

    if changes_only:
        old_set, new_set = set(old_paths), set(new_paths)
        old_paths = [path for path in old_paths if path not in new_set]
        new_paths = [path for path in new_paths if path not in old_set]
        logger.debug(
            f"Changes only: {len(old_paths)} removed paths, {len(new_paths)} added paths."
        )

    events = diff_forests(
        _forest_from_paths(old_paths, sort_siblings),
        _forest_from_paths(new_paths, sort_siblings),
    )
    return render_diff_events(events)

# -----------------------------------------------------------------------------
# FLAT VIEWS
# -----------------------------------------------------------------------------

def flat_dependencies(text: str) -> str:
    """Render the sorted 'library:version' listing of a report."""
    return render_flat(get_dependencies_to_version(text))


def dependency_flat_changes(old: str, new: str) -> str:
    """
    Render version changes, removed and new libraries between two reports.

    Returns:
        str: Titled sections; empty string when nothing differs.
    """
    diff = diff_flat_dependencies(
        get_dependencies_to_version(old),
        get_dependencies_to_version(new),
    )
    return render_flat_diff(diff)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _forest_from_paths(paths: List[DependencyPath], sort_siblings: bool) -> Forest:
    forest = build_tree(paths)
    return sort_forest(forest) if sort_siblings else forest
