from __future__ import annotations

"""
Domain Constants for the Dependency Report Notation.

Centralizes the fixed-width glyphs and delimiters emitted by the build tool
when it prints a resolved dependency tree, along with the section titles of
the flat diff report.
"""

from typing import Tuple

# -----------------------------------------------------------------------------
# REPORT NOTATION
# -----------------------------------------------------------------------------

# Separates the branch glyph from "coordinate:version" on every entry line.
COORDINATE_DELIMITER = "--- "

# Each tree level occupies "|    " or "     " before the branch glyph.
INDENT_WIDTH = 5

# Prefixes that open the first depth-0 entry of the dependency block.
ROOT_ENTRY_PREFIXES: Tuple[str, ...] = ("+--- ", "\\---")

# Marker of a conflict resolution, e.g. "1.0 -> 2.0".
VERSION_UPGRADE_DELIMITER = " -> "

# Remainders starting with this denote project modules, not libraries.
PROJECT_PREFIX = "project "

VERSION_SEPARATOR = ":"

# -----------------------------------------------------------------------------
# RENDERING GLYPHS
# -----------------------------------------------------------------------------

BRANCH_GLYPH = "+"
LAST_BRANCH_GLYPH = "\\"
CONTINUATION_GLYPH = "|"
LEVEL_PADDING = "    "

MARKER_ADDED = "+"
MARKER_REMOVED = "-"
MARKER_UNCHANGED = " "

# -----------------------------------------------------------------------------
# FLAT DIFF SECTIONS
# -----------------------------------------------------------------------------

SECTION_VERSION_CHANGE = "VERSION CHANGE"
SECTION_REMOVED = "REMOVED LIBRARIES"
SECTION_ADDED = "NEW LIBRARIES"
