from __future__ import annotations

"""
Logging Settings.

Severity names accepted from config files and flags, the fixed record
formats, and the settings object consumed by configure_logging.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console output stays quiet below this level unless DEBUG is requested
CONSOLE_FLOOR = "WARNING"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging session.

    Attributes:
        level: Severity captured by the log file.
        console_level: Severity shown on stderr. None derives it from level:
            DEBUG stays DEBUG, anything else is raised to at least WARNING.
        console: Whether to log to stderr at all.
        log_file: Optional path of a rotating log file.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files kept.
    """
    level: str = "INFO"
    console_level: Optional[str] = None
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    def resolved_console_level(self) -> str:
        if self.console_level:
            return self.console_level
        level = str(self.level or "").strip().upper()
        if level == "DEBUG":
            return level
        if _LEVEL_MAP.get(level, logging.INFO) > _LEVEL_MAP[CONSOLE_FLOOR]:
            return level
        return CONSOLE_FLOOR
