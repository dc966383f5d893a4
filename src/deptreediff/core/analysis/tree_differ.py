from __future__ import annotations

"""
Structural Tree Differ.

Walks two dependency forests level by level with a two-pointer merge and
produces the ordered stream of diff events consumed by the tree renderer.
Sibling lists are expected to be sorted by coordinate.
"""

import logging
from typing import List, Sequence

from deptreediff.domain.constants import MARKER_ADDED, MARKER_REMOVED, MARKER_UNCHANGED
from deptreediff.domain.dependency_models import DependencyNode, DiffEvent

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def diff_forests(old: Sequence[DependencyNode], new: Sequence[DependencyNode]) -> List[DiffEvent]:
    """
    Compare two forests and list the resulting diff lines in render order.

    Args:
        old: Root nodes of the previous report.
        new: Root nodes of the current report.

    Returns:
        List[DiffEvent]: Events in pre-order, depth-first.
    """
    events: List[DiffEvent] = []
    _diff_level(old, new, 0, events)
    logger.debug(f"Tree diff produced {len(events)} events.")
    return events

# -----------------------------------------------------------------------------
# MERGE LOGIC
# -----------------------------------------------------------------------------

def _diff_level(
        old: Sequence[DependencyNode],
        new: Sequence[DependencyNode],
        depth: int,
        events: List[DiffEvent],
) -> None:
    """Merge one pair of sibling lists and recurse into their children."""
    old_last = len(old) - 1
    new_last = len(new) - 1
    old_index = 0
    new_index = 0

    while old_index < len(old) and new_index < len(new):
        old_node = old[old_index]
        new_node = new[new_index]

        if old_node.coordinate == new_node.coordinate:
            if old_node.version == new_node.version:
                last = old_index == old_last and new_index == new_last
                events.append(DiffEvent(MARKER_UNCHANGED, old_node, depth, last))
                _diff_level(old_node.children, new_node.children, depth + 1, events)
            else:
                # Transitive dependencies are only shown when they changed.
                children_changed = old_node.children != new_node.children

                events.append(DiffEvent(MARKER_REMOVED, old_node, depth, old_index == old_last))
                if children_changed:
                    _diff_level(old_node.children, (), depth + 1, events)
                events.append(DiffEvent(MARKER_ADDED, new_node, depth, new_index == new_last))
                if children_changed:
                    _diff_level((), new_node.children, depth + 1, events)
            old_index += 1
            new_index += 1
        elif old_node.coordinate < new_node.coordinate:
            _append_subtree(MARKER_REMOVED, old_node, depth, old_index == old_last, events)
            old_index += 1
        else:
            _append_subtree(MARKER_ADDED, new_node, depth, new_index == new_last, events)
            new_index += 1

    for i in range(old_index, len(old)):
        _append_subtree(MARKER_REMOVED, old[i], depth, i == old_last, events)
    for i in range(new_index, len(new)):
        _append_subtree(MARKER_ADDED, new[i], depth, i == new_last, events)


def _append_subtree(
        marker: str,
        node: DependencyNode,
        depth: int,
        last: bool,
        events: List[DiffEvent],
) -> None:
    """Emit a node and its whole subtree with a single marker."""
    events.append(DiffEvent(marker, node, depth, last))
    for i, child in enumerate(node.children):
        _append_subtree(marker, child, depth + 1, i == len(node.children) - 1, events)
