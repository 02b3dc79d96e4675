from __future__ import annotations

"""
Handler Factories.

Every handler created here carries an ownership mark, so teardown removes
exactly what this application installed and leaves handlers added by
libraries or test runners alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from filesearch.infra.logging.config import LoggingConfig

OWNED_MARK = "_filesearch_owned"


def mark_owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, OWNED_MARK, True)
    return handler


def is_owned(handler: logging.Handler) -> bool:
    return getattr(handler, OWNED_MARK, False) is True


def build_console_handler(cfg: LoggingConfig) -> logging.Handler:
    """stderr handler; stdout stays reserved for search results."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(cfg.level_number)
    handler.setFormatter(logging.Formatter(cfg.console_fmt))
    return mark_owned(handler)


def build_file_handler(cfg: LoggingConfig) -> Optional[logging.Handler]:
    """
    Rotating UTF-8 file handler for `cfg.log_file`.

    Returns:
        Optional[logging.Handler]: None when no file is configured or the
                                   location cannot be opened.
    """
    if not cfg.log_file:
        return None

    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        # Logging is not up yet; stderr is the only channel left
        print(f"WARNING: log file disabled ({cfg.log_file}): {e}", file=sys.stderr)
        return None

    handler.setLevel(cfg.level_number)
    handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return mark_owned(handler)
