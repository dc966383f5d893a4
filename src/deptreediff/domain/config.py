from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of the command line tool and
loads optional JSON configuration files merged over those defaults.
"""

import json
import logging
import os
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
MODE_TREE = "tree"
MODE_FLAT = "flat"
MODE_LIST = "list"

VALID_MODES: List[str] = [MODE_TREE, MODE_FLAT, MODE_LIST]

# Modes comparing two reports; the others take a single one.
DIFF_MODES: List[str] = [MODE_TREE, MODE_FLAT]


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Output view
        "mode": MODE_TREE,

        # Tree diff behavior
        "sort_siblings": True,
        "changes_only": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_path: str = "") -> Dict[str, Any]:
    """
    Load a JSON configuration file merged over the defaults.

    A missing path or file yields the defaults. A corrupted file is
    reported and ignored.

    Args:
        config_path: Location of the JSON file.

    Returns:
        Dict[str, Any]: The merged, unvalidated configuration.
    """
    config = get_default_config()

    if not config_path:
        return config

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found: {config_path}. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}'. Using defaults.")
        return config

    config.update(data)
    return config
