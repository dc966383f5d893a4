from __future__ import annotations

"""
Dependency Tree Builder.

Folds root-to-leaf paths into a deduplicated forest and canonicalizes
sibling order before structural comparison.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from deptreediff.domain.constants import VERSION_SEPARATOR
from deptreediff.domain.dependency_models import DependencyNode, DependencyPath, Forest

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(paths: Iterable[DependencyPath]) -> Forest:
    """
    Merge paths sharing a prefix into a forest of dependency nodes.

    At each step the current sibling list is searched for a node with the
    same coordinate and version. A match is descended into, otherwise a new
    node is appended. Siblings keep first-seen order.

    Args:
        paths: Root-to-leaf "coordinate:version" token sequences.

    Returns:
        Forest: Immutable root nodes.
    """
    roots: List[_DraftNode] = []
    for path in paths:
        siblings = roots
        for token in path:
            coordinate, _, version = token.rpartition(VERSION_SEPARATOR)
            siblings = _find_or_append(siblings, coordinate, version).children

    forest = tuple(draft.freeze() for draft in roots)
    logger.debug(f"Built dependency forest with {len(forest)} root nodes.")
    return forest


def sort_forest(forest: Forest) -> Forest:
    """
    Return a copy of the forest with siblings sorted at every level.

    Siblings are ordered by coordinate, then version so that conflicting
    branches of the same library keep a stable relative order.
    """
    ordered = sorted(forest, key=lambda node: (node.coordinate, node.version))
    return tuple(
        DependencyNode(node.coordinate, node.version, sort_forest(node.children))
        for node in ordered
    )

# -----------------------------------------------------------------------------
# INTERNAL MODELS AND HELPERS
# -----------------------------------------------------------------------------

@dataclass
class _DraftNode:
    """Mutable node used while paths are being folded."""
    coordinate: str
    version: str
    children: List["_DraftNode"] = field(default_factory=list)

    def freeze(self) -> DependencyNode:
        return DependencyNode(
            self.coordinate,
            self.version,
            tuple(child.freeze() for child in self.children),
        )


def _find_or_append(siblings: List[_DraftNode], coordinate: str, version: str) -> _DraftNode:
    for node in siblings:
        if node.coordinate == coordinate and node.version == version:
            return node
    node = _DraftNode(coordinate, version)
    siblings.append(node)
    return node
