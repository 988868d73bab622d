from __future__ import annotations

"""
Logging settings for a tree2fs run.

The CLI builds one LoggingConfig from the run configuration: -v/--verbose
picks the console level, --no-color and NO_COLOR switch off ANSI output,
and --log-file adds a rotating diagnostic file.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Used by the CLI when a create or validate run completes cleanly
SUCCESS: int = 25
logging.addLevelName(SUCCESS, "SUCCESS")

# Level names accepted by LoggingConfig.level (case-insensitive)
_LEVEL_MAP: Dict[str, int] = {
    name: logging.getLevelName(name)
    for name in ("DEBUG", "INFO", "SUCCESS", "WARNING", "WARN", "ERROR", "CRITICAL")
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    How the console and the optional log file are wired for one run.

    Attributes:
        level: Console threshold; "DEBUG" also shows skipped files and
            existing directories.
        console: Write symbol-prefixed records to stderr.
        color: Paint the symbols when stderr is a terminal.
        log_file: Path given to --log-file; it always records DEBUG detail.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the log file.
        console_fmt: Message layout behind the console symbol.
        file_fmt: Line layout of the log file.
        datefmt: Timestamp layout of the log file.
    """
    level: str = "INFO"
    console: bool = True
    color: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
