from __future__ import annotations

"""
Dependency Path Extractor.

Reconstructs the hierarchy of a dependency report from line indentation and
emits every root-to-leaf chain as a path of "coordinate:version" tokens.
"""

import logging
from typing import Dict, Iterable, List

from deptreediff.domain.constants import (
    COORDINATE_DELIMITER,
    INDENT_WIDTH,
    ROOT_ENTRY_PREFIXES,
)
from deptreediff.domain.dependency_models import DependencyPath
from deptreediff.domain.errors import ParseError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def find_dependency_paths(text: str) -> List[DependencyPath]:
    """
    Extract all root-to-leaf dependency paths from a raw report.

    Header lines before the first depth-0 entry are ignored and the block
    ends at the first blank line. Every time an entry is shallower than the
    current branch, the branch is committed as a path and the working stack
    is popped down to the entry's depth.

    Args:
        text: Raw output of the build tool's dependency report.

    Returns:
        List[DependencyPath]: Distinct paths of the first entry block, in
            the order their branches were committed.

    Raises:
        ParseError: If an entry line has no coordinate delimiter.
    """
    # dict keys keep commit order while discarding duplicates
    paths: Dict[DependencyPath, None] = {}
    stack: List[str] = []
    entries = 0

    for line in _dependency_block(text.splitlines()):
        coordinate_start = line.find(COORDINATE_DELIMITER)
        if coordinate_start <= 0:
            raise ParseError(line)

        coordinates = line[coordinate_start + len(COORDINATE_DELIMITER):]
        depth = coordinate_start // INDENT_WIDTH

        if len(stack) > depth:
            paths[tuple(stack)] = None
            del stack[depth:]

        stack.append(coordinates)
        entries += 1

    # The final branch is never followed by a shallower entry.
    if stack:
        paths[tuple(stack)] = None

    logger.debug(f"Extracted {len(paths)} dependency paths from {entries} entries.")
    return list(paths)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _dependency_block(lines: Iterable[str]) -> Iterable[str]:
    """Yield the lines of the first entry block, up to the first blank line."""
    started = False
    for line in lines:
        if not started:
            if not line.startswith(ROOT_ENTRY_PREFIXES):
                continue
            started = True
        if not line:
            return
        yield line
