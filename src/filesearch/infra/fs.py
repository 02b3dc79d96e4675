from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Where FileSearch keeps its own files (last-search cache, GUI log), and how
user-typed directories are turned into absolute paths.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

APP_DIR_NAME = "SearchApp"
UNIX_APP_DIR_NAME = ".searchapp"
HOME_ENV_VAR = "FILESEARCH_HOME"


def _candidate_data_dir() -> str:
    override = os.environ.get(HOME_ENV_VAR, "").strip()
    if override:
        return override
    if os.name == "nt":
        appdata = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if appdata:
            return os.path.join(appdata, APP_DIR_NAME)
    return os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)


def get_user_data_dir() -> str:
    """
    Absolute per-user directory for FileSearch state, created on demand.

    Resolution order: $FILESEARCH_HOME, then %LOCALAPPDATA%\\SearchApp on
    Windows, then ~/.searchapp.
    """
    path = os.path.abspath(_candidate_data_dir())
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        # Callers handle the failure when they open files inside it
        logger.warning(f"Cannot create data directory {path}: {e}")
    return path


def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Expand `~` and environment variables and make the path absolute.

    Args:
        path: Path as typed by the user; surrounding whitespace is ignored.
        fallback: Used when `path` is blank.

    Returns:
        str: Absolute path, or "" when both inputs are blank.
    """
    raw = (path or "").strip() or (fallback or "").strip()
    if not raw:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(raw)))
