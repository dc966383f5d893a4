from __future__ import annotations

"""
Dependency Tree Data Models.

Provides the immutable structures shared by the parsing, analysis and
rendering layers: resolved dependency nodes, root-to-leaf paths, diff
events and the partitions of a flat diff.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

# -----------------------------------------------------------------------------
# TYPE ALIASES
# -----------------------------------------------------------------------------

# Ordered "coordinate:version" tokens from a root entry down to one node.
DependencyPath = Tuple[str, ...]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DependencyNode:
    """
    A resolved library at one position of the dependency tree.

    Equality is structural: two nodes are equal when coordinate, version
    and the whole children subtree are equal.

    Attributes:
        coordinate: Library identity, e.g. 'com.squareup.okio:okio'.
        version: Resolved version as printed in the report (opaque).
        children: Transitive dependencies in sibling order.
    """
    coordinate: str
    version: str
    children: Tuple["DependencyNode", ...] = ()

    def __str__(self) -> str:
        return f"{self.coordinate}:{self.version}"


Forest = Tuple[DependencyNode, ...]


@dataclass(frozen=True)
class DiffEvent:
    """
    One rendered line of a tree diff.

    Attributes:
        marker: '+', '-' or ' '.
        node: The node shown on the line.
        depth: Zero-based tree level.
        last: Whether the node is the final sibling of its own list.
    """
    marker: str
    node: DependencyNode
    depth: int
    last: bool


@dataclass(frozen=True)
class FlatDiff:
    """
    Partitions of a comparison between two library-to-version mappings.

    Attributes:
        changed: Library -> (old version, new version) for differing values.
        removed: Libraries only present in the old mapping.
        added: Libraries only present in the new mapping.
    """
    changed: Dict[str, Tuple[str, str]] = field(default_factory=dict)
    removed: Dict[str, str] = field(default_factory=dict)
    added: Dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not (self.changed or self.removed or self.added)
