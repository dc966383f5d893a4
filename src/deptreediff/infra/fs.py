from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Loads dependency reports captured from the build tool and persists rendered
results. Kept outside the core so that parsing and diffing stay pure.
"""

import logging
import os
import sys

from deptreediff.domain.errors import ReportReadError

logger = logging.getLogger(__name__)

# Path token that designates standard input.
STDIN_PATH = "-"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_report(path: str) -> str:
    """
    Read a UTF-8 dependency report from disk, or from stdin for '-'.

    Args:
        path: Report location.

    Returns:
        str: Raw report text.

    Raises:
        ReportReadError: If the report is missing, unreadable or not UTF-8.
    """
    if path == STDIN_PATH:
        logger.debug("Reading report from stdin.")
        return sys.stdin.read()

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReportReadError(path, str(e)) from e

    logger.debug(f"Read report '{path}' ({len(text)} chars).")
    return text


def write_output(path: str, text: str) -> None:
    """
    Persist a rendered result, creating parent directories as needed.

    Args:
        path: Destination file.
        text: Content to write.
    """
    out_dir = os.path.dirname(os.path.abspath(path))
    os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info(f"Result saved to file: {path}")
