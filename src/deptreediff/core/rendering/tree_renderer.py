from __future__ import annotations

"""
Tree Diff Renderer.

Serializes diff events back into the build tool's branch notation, with a
leading unified-diff marker on every line.
"""

from typing import Iterable, List

from deptreediff.domain.constants import (
    BRANCH_GLYPH,
    CONTINUATION_GLYPH,
    COORDINATE_DELIMITER,
    LAST_BRANCH_GLYPH,
    LEVEL_PADDING,
)
from deptreediff.domain.dependency_models import DiffEvent

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_diff_events(events: Iterable[DiffEvent]) -> str:
    """
    Render a pre-order event stream as text.

    Each line reads '<marker><indent><glyph>--- <coordinate>:<version>'.
    The indent of a level is built from the ancestors' last-sibling flags:
    '|' plus padding under a non-last ancestor, blank padding otherwise.

    Args:
        events: Diff events in depth-first order.

    Returns:
        str: Rendered diff, one newline-terminated line per event.
    """
    lines: List[str] = []
    indents: List[str] = [""]

    for event in events:
        indent = indents[event.depth]
        glyph = LAST_BRANCH_GLYPH if event.last else BRANCH_GLYPH
        lines.append(f"{event.marker}{indent}{glyph}{COORDINATE_DELIMITER}{event.node}\n")

        carry = " " if event.last else CONTINUATION_GLYPH
        del indents[event.depth + 1:]
        indents.append(f"{indent}{carry}{LEVEL_PADDING}")

    return "".join(lines)
