from __future__ import annotations

"""
Logging settings for the CLI: the severity names accepted in configuration
files and the small frozen record the controller builds from them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Severity names accepted by the config validator and the CLI
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity name, one of the keys of the level map.
        log_file: Optional rotating log file next to the console output.
        console: Emit records on stderr. Disabled by tests that only inspect files.
    """
    level: str = "INFO"
    log_file: Optional[str] = None
    console: bool = True
