from __future__ import annotations

"""
Logging Lifecycle.

The root logger gets a single QueueHandler; a QueueListener thread owns the
real console and file handlers. The traversal worker therefore only pays
for a queue put per record, never for terminal or disk I/O.

configure_logging() is idempotent: the CLI, the GUI and tests may all call
it, and only the first call (or a forced one) installs anything.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from filesearch.infra.fs import get_user_data_dir
from filesearch.infra.logging.config import LoggingConfig
from filesearch.infra.logging.handlers import (
    build_console_handler,
    build_file_handler,
    is_owned,
    mark_owned,
)

_listener: Optional[QueueListener] = None
_atexit_registered = False

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_gui_log_path(file_name: str = "filesearch.log") -> str:
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route all records through a background listener.

    Args:
        cfg: Output settings.
        force: Tear down a previous configuration and apply `cfg`.

    Returns:
        logging.Logger: The root logger.
    """
    global _atexit_registered

    root = logging.getLogger()
    if is_logging_configured() and not force:
        return root

    shutdown_logging()
    root.setLevel(cfg.level_number)

    try:
        outputs = _build_outputs(cfg)
    except ValueError as e:
        # Malformed format strings: keep a plain stderr channel alive
        fallback = mark_owned(logging.StreamHandler())
        fallback.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        root.addHandler(fallback)
        root.warning(f"Logging setup failed ({e}); using emergency console.")
        return root
    if not outputs:
        return root

    records: queue.Queue[logging.LogRecord] = queue.Queue()
    root.addHandler(mark_owned(QueueHandler(records)))
    _start_listener(QueueListener(records, *outputs, respect_handler_level=True))

    if not _atexit_registered:
        atexit.register(shutdown_logging)
        _atexit_registered = True
    return root


def shutdown_logging() -> None:
    """Flush pending records, close outputs and detach our handlers."""
    global _listener

    listener, _listener = _listener, None
    if listener is not None:
        listener.stop()
        for handler in listener.handlers:
            handler.close()

    root = logging.getLogger()
    for handler in [h for h in root.handlers if is_owned(h)]:
        root.removeHandler(handler)
        handler.close()


def is_logging_configured() -> bool:
    return _listener is not None


def active_listener() -> Optional[QueueListener]:
    """The running QueueListener, if any (diagnostics and tests)."""
    return _listener


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_recent_logs(n_lines: int = 100, log_path: Optional[str] = None) -> str:
    """
    Tail of the persistent log file.

    Args:
        n_lines: Maximum number of trailing lines.
        log_path: File to read; defaults to the GUI log.

    Returns:
        str: The lines joined, or a one-line diagnostic.
    """
    path = log_path or get_default_gui_log_path()
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            tail = f.readlines()[-n_lines:]
    except FileNotFoundError:
        return "Log file not found."
    except OSError as e:
        return f"Error retrieving logs: {e}"
    return "".join(tail)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_outputs(cfg: LoggingConfig) -> List[logging.Handler]:
    outputs: List[logging.Handler] = []
    if cfg.console:
        outputs.append(build_console_handler(cfg))
    file_handler = build_file_handler(cfg)
    if file_handler is not None:
        outputs.append(file_handler)
    return outputs


def _start_listener(listener: QueueListener) -> None:
    global _listener
    listener.start()
    _listener = listener
