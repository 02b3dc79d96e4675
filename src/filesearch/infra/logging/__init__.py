from __future__ import annotations

from .config import LoggingConfig
from .core import (
    active_listener,
    configure_logging,
    get_default_gui_log_path,
    get_logger,
    get_recent_logs,
    is_logging_configured,
    shutdown_logging,
)
from .handlers import is_owned

__all__ = [
    "LoggingConfig",
    "active_listener",
    "configure_logging",
    "get_default_gui_log_path",
    "get_logger",
    "get_recent_logs",
    "is_logging_configured",
    "is_owned",
    "shutdown_logging",
]
