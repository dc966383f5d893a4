from __future__ import annotations

"""
Flat Dependency Differ.

Partitions two library -> version mappings into version changes, removed
libraries and new libraries.
"""

import logging
from typing import Mapping

from deptreediff.domain.dependency_models import FlatDiff

logger = logging.getLogger(__name__)


def diff_flat_dependencies(old: Mapping[str, str], new: Mapping[str, str]) -> FlatDiff:
    """
    Compare two flat mappings key by key.

    Args:
        old: Resolved versions of the previous report.
        new: Resolved versions of the current report.

    Returns:
        FlatDiff: Disjoint changed/removed/added partitions.
    """
    changed = {
        library: (old[library], new[library])
        for library in old.keys() & new.keys()
        if old[library] != new[library]
    }
    removed = {library: old[library] for library in old.keys() - new.keys()}
    added = {library: new[library] for library in new.keys() - old.keys()}

    logger.debug(
        f"Flat diff: {len(changed)} changed, {len(removed)} removed, {len(added)} added."
    )
    return FlatDiff(changed=changed, removed=removed, added=added)
