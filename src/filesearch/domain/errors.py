from __future__ import annotations

"""
Domain Exceptions.

Cancellation has no exception type; a cancelled run ends normally with
SearchStatus.CANCELLED.
"""


class FileSearchError(Exception):
    """Base class for all application errors."""


class SearchValidationError(FileSearchError):
    """Raised when a search request is rejected before the search starts."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


class SearchAlreadyRunningError(FileSearchError):
    """Raised when a session is started while its worker is still alive."""
