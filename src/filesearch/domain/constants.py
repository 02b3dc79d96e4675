from __future__ import annotations

"""
Domain Constants.

Provides centralized access to application-wide constants such as
versioning, persisted file names and UI refresh cadences.
"""

APP_NAME = "FileSearch"
APP_VERSION = "1.0.0"

# Persisted state (last used root directory and pattern)
CACHE_FILE_NAME = "cache.txt"

# Glob metacharacters recognised by the directory listing stage
GLOB_METACHARACTERS = ("*", "?", "[")

# GUI cadences (milliseconds)
TIMER_INTERVAL_MS = 1000
POLL_INTERVAL_MS = 100
MAX_EVENTS_PER_POLL = 500

# CLI progress cadence (seconds)
DEFAULT_PROGRESS_INTERVAL = 1.0
