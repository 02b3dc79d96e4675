from __future__ import annotations

"""
Configuration Domain Management.

Holds the runtime configuration defaults and persists the last used root
directory and pattern as a two-line text file in the user data directory.
"""

import logging
import os
from typing import Any, Dict, Optional, Tuple

from filesearch.domain.constants import CACHE_FILE_NAME
from filesearch.domain.search_models import CancellationGranularity, ErrorPolicy
from filesearch.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Search request
        "root_directory": "",
        "pattern": "",

        # Traversal behavior
        "cancellation_granularity": CancellationGranularity.SUBTREE.value,
        "error_policy": ErrorPolicy.STRICT.value,
        "follow_symlinks": False,

        # Interface
        "locale": "en",
    }

# -----------------------------------------------------------------------------
# Persistence Logic (last search cache)
# -----------------------------------------------------------------------------

def get_cache_file_path() -> str:
    return os.path.join(get_user_data_dir(), CACHE_FILE_NAME)


def load_last_search(path: Optional[str] = None) -> Tuple[str, str]:
    """
    Read the last used root directory and pattern.

    A missing cache file is created empty. Any content other than exactly
    two lines is ignored.

    Args:
        path: Cache file location; defaults to get_cache_file_path().

    Returns:
        Tuple[str, str]: (root_directory, pattern), or ("", "").
    """
    path = path or get_cache_file_path()

    try:
        if not os.path.exists(path):
            os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
            with open(path, "w", encoding="utf-8"):
                pass
            logger.debug(f"Created empty cache file at {path}")
            return "", ""

        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        logger.error(f"Failed to read search cache '{path}': {e}")
        return "", ""

    if len(lines) != 2:
        logger.debug(f"Ignoring search cache with {len(lines)} line(s).")
        return "", ""

    return lines[0], lines[1]


def save_last_search(root_directory: str, pattern: str, path: Optional[str] = None) -> bool:
    """
    Persist the root directory and pattern as two lines.

    Returns:
        bool: True when the cache was written.
    """
    path = path or get_cache_file_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{root_directory}\n{pattern}\n")
        logger.debug(f"Search cache saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save search cache: {e}")
        return False

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------

def load_config(cache_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Defaults merged with the cached last search.
    """
    config = get_default_config()
    root_directory, pattern = load_last_search(cache_path)
    if root_directory or pattern:
        config["root_directory"] = root_directory
        config["pattern"] = pattern
    return config
