from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from deptreediff.domain.config import MODE_FLAT, VALID_MODES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the deptreediff CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="deptreediff",
        description=(
            "Diff two dependency resolution reports as a tree or as flat "
            "version changes, or list the resolved libraries of one report."
        ),
    )

    # --- Reports ---
    p.add_argument(
        "old",
        help="Dependency report to list, or the old report of a diff ('-' for stdin).",
    )
    p.add_argument(
        "new",
        nargs="?",
        default=None,
        help="New report of a diff ('-' for stdin).",
    )

    # --- View Selection ---
    p.add_argument(
        "-m", "--mode",
        choices=VALID_MODES,
        default=None,
        help="Output view: tree diff, flat diff, or flat list of a single report.",
    )
    p.add_argument(
        "--flat",
        action="store_true",
        help="Shortcut for '--mode flat'.",
    )

    # --- Tree Diff Behavior ---
    p.add_argument(
        "--changes-only",
        action="store_true",
        help="Only show branches that differ between the reports.",
    )
    p.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep report order instead of sorting siblings by coordinate.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the result to this file instead of stdout.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file merged over the defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["mode"] = args.mode
    if args.flat:
        overrides["mode"] = MODE_FLAT

    if args.changes_only:
        overrides["changes_only"] = True
    if args.no_sort:
        overrides["sort_siblings"] = False

    overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
