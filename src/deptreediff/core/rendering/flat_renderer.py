from __future__ import annotations

"""
Flat Renderers.

Formats library -> version mappings as sorted listings and flat diffs as
titled sections.
"""

from typing import List, Mapping, Tuple

from deptreediff.domain.constants import (
    SECTION_ADDED,
    SECTION_REMOVED,
    SECTION_VERSION_CHANGE,
    VERSION_SEPARATOR,
    VERSION_UPGRADE_DELIMITER,
)
from deptreediff.domain.dependency_models import FlatDiff

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_flat(dependencies: Mapping[str, str]) -> str:
    """Render 'library:version' lines sorted ascending, newline-joined."""
    return "\n".join(sorted(_format_libraries(dependencies)))


def render_flat_diff(diff: FlatDiff) -> str:
    """
    Render a flat diff as up to three titled, blank-line separated sections.

    Empty sections are omitted entirely, so an empty diff renders as ''.

    Args:
        diff: Partitions produced by the flat differ.

    Returns:
        str: The formatted report.
    """
    changed = [
        f"{library}{VERSION_SEPARATOR}{old}{VERSION_UPGRADE_DELIMITER}{new}"
        for library, (old, new) in diff.changed.items()
    ]
    sections: List[Tuple[str, List[str]]] = [
        (SECTION_VERSION_CHANGE, changed),
        (SECTION_REMOVED, _format_libraries(diff.removed)),
        (SECTION_ADDED, _format_libraries(diff.added)),
    ]

    out: List[str] = []
    for title, libraries in sections:
        if not libraries:
            continue
        out.append(f"{title}\n\n")
        out.extend(f"{line}\n" for line in sorted(libraries))
        out.append("\n")
    return "".join(out)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _format_libraries(dependencies: Mapping[str, str]) -> List[str]:
    return [f"{library}{VERSION_SEPARATOR}{version}" for library, version in dependencies.items()]
