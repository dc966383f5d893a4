from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, JSON config file, CLI overrides), report loading, execution of
the selected view and output of the rendered text.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from deptreediff.core.services.diff_service import (
    dependency_flat_changes,
    dependency_tree_diff,
    flat_dependencies,
)
from deptreediff.core.services.validator import validate_config
from deptreediff.domain.config import DIFF_MODES, MODE_FLAT, MODE_LIST, load_config
from deptreediff.domain.errors import ParseError, ReportReadError
from deptreediff.infra.fs import STDIN_PATH, read_report, write_output
from deptreediff.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from deptreediff.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, stdout is reserved for results)
    bootstrap_logging = LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        log_file=args.log_file,
    )
    configure_logging(bootstrap_logging)

    try:
        return _execute(args, bootstrap_logging)
    finally:
        shutdown_logging()


def _execute(args: argparse.Namespace, bootstrap_logging: LoggingConfig) -> int:
    """Run the configured view once logging is in place."""
    # 3. Resolve configuration hierarchy
    overrides = cli_args.args_to_overrides(args)
    if args.new is None and overrides["mode"] is None:
        overrides["mode"] = MODE_LIST
    raw_conf = _merge_config(load_config(args.config_path or ""), overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # The config file may raise verbosity or add a log file
    effective_logging = LoggingConfig(
        level=clean_conf["log_level"],
        log_file=clean_conf["log_file"] or None,
    )
    if effective_logging != bootstrap_logging:
        configure_logging(effective_logging, force=True)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight arity check
    mode = clean_conf["mode"]
    usage_error = _check_arity(mode, args.old, args.new)
    if usage_error:
        logger.error(usage_error)
        print(f"ERROR: {usage_error}", file=sys.stderr)
        return EXIT_USAGE

    # 5. Execution phase
    try:
        result = _run(mode, clean_conf, args.old, args.new or "")
    except ReportReadError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ParseError as e:
        logger.error(f"Malformed dependency report: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    # 6. Output phase
    if args.output_path:
        try:
            write_output(args.output_path, result)
        except OSError as e:
            logger.error(f"Cannot write result to '{args.output_path}': {e}")
            print(f"ERROR: Cannot write result to '{args.output_path}': {e}", file=sys.stderr)
            return EXIT_USAGE
    else:
        sys.stdout.write(result)
        if result and not result.endswith("\n"):
            sys.stdout.write("\n")

    return EXIT_OK

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run(mode: str, conf: Dict[str, Any], old_path: str, new_path: str = "") -> str:
    """Load the reports and render the requested view."""
    old = read_report(old_path)

    if mode == MODE_LIST:
        logger.info(f"Listing resolved libraries of: {old_path}")
        return flat_dependencies(old)

    new = read_report(new_path)
    logger.info(f"Comparing {old_path} -> {new_path} ({mode} view)")

    if mode == MODE_FLAT:
        return dependency_flat_changes(old, new)

    return dependency_tree_diff(
        old,
        new,
        sort_siblings=conf["sort_siblings"],
        changes_only=conf["changes_only"],
    )


def _check_arity(mode: str, old_path: str, new_path: Optional[str]) -> str:
    """Return an error message when the report arguments do not fit the mode."""
    if mode in DIFF_MODES and new_path is None:
        return f"Mode '{mode}' compares two reports; only one was given."
    if mode == MODE_LIST and new_path is not None:
        return f"Mode '{mode}' takes a single report; two were given."
    if old_path == STDIN_PATH and new_path == STDIN_PATH:
        return "Only one report can be read from stdin."
    return ""

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = ["mode", "sort_siblings", "changes_only", "log_level", "log_file"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
