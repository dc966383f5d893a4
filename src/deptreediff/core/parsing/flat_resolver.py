from __future__ import annotations

"""
Flat Dependency Resolver.

Reduces a dependency report to a mapping of library identity to the version
the build tool finally resolved, regardless of where in the tree it appears.
"""

import logging
from typing import Dict, Optional, Tuple

from deptreediff.domain.constants import (
    COORDINATE_DELIMITER,
    PROJECT_PREFIX,
    VERSION_SEPARATOR,
    VERSION_UPGRADE_DELIMITER,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_dependencies_to_version(text: str) -> Dict[str, str]:
    """
    Build the library -> resolved version mapping of a report.

    Every line is scanned, not only the first entry block. Project module
    entries are skipped. When a library appears several times the last
    occurrence wins.

    Args:
        text: Raw output of the build tool's dependency report.

    Returns:
        Dict[str, str]: Resolved version per library coordinate.
    """
    dependencies: Dict[str, str] = {}
    for line in text.splitlines():
        entry = _parse_entry(line)
        if entry is None:
            continue
        library, version = entry
        dependencies[library] = version

    logger.debug(f"Resolved {len(dependencies)} distinct libraries.")
    return dependencies

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_entry(line: str) -> Optional[Tuple[str, str]]:
    """
    Split one report line into (library, resolved version).

    Returns None for lines that do not describe a library.
    """
    _, delimiter, remainder = line.partition(COORDINATE_DELIMITER)
    if not delimiter or not remainder or remainder.startswith(PROJECT_PREFIX):
        return None

    library, separator, version_raw = remainder.rpartition(VERSION_SEPARATOR)
    if not separator:
        return None

    # "1.0 -> 2.0" resolves to the right-hand side
    _, arrow, upgraded = version_raw.partition(VERSION_UPGRADE_DELIMITER)
    if arrow:
        version_raw = upgraded

    version = version_raw.split(" ", 1)[0]
    return library, version
