from __future__ import annotations

"""
Logging Configuration Model.

One immutable settings object per process role: the CLI logs to stderr
only, the GUI additionally keeps a rotating file in the user data directory.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by configure_logging().

    Attributes:
        level: Level name ("DEBUG", "INFO", ...). Unknown names mean INFO.
        console: Mirror records to stderr.
        log_file: Rotating log file, or None for no file output.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 512 * 1024
    backup_count: int = 3

    console_fmt: str = CONSOLE_FORMAT
    file_fmt: str = FILE_FORMAT
    datefmt: str = DATE_FORMAT

    @classmethod
    def for_cli(cls, debug: bool = False) -> LoggingConfig:
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=None)

    @classmethod
    def for_gui(cls, log_file: str) -> LoggingConfig:
        return cls(level="INFO", console=True, log_file=log_file)

    @property
    def level_number(self) -> int:
        """Numeric level for `level`, falling back to INFO."""
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
