from __future__ import annotations

"""
Search Domain Data Models.

Defines the request, progress messages and result objects exchanged between
the traversal worker and the interface layers (CLI/GUI). All messages are
immutable so they can cross the worker/consumer thread boundary safely.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class SearchStatus(str, Enum):
    """Terminal state of a search run."""
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class CancellationGranularity(str, Enum):
    """
    Points at which the traversal worker honours a cancellation request.

    SUBTREE checks only after a child directory's whole subtree has been
    walked. DIRECTORY checks before every directory is entered, so at most
    the directory currently being listed is finished after a cancel.
    """
    SUBTREE = "subtree"
    DIRECTORY = "directory"


class ErrorPolicy(str, Enum):
    """Handling of listing errors other than access-denied and vanished."""
    STRICT = "strict"
    LENIENT = "lenient"

# -----------------------------------------------------------------------------
# REQUEST
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchRequest:
    """
    Immutable description of one search.

    Attributes:
        root_directory: Directory where the walk starts.
        pattern: User pattern. Drives both the listing glob and the
                 substring match filter.
    """
    root_directory: str
    pattern: str

# -----------------------------------------------------------------------------
# PROGRESS MESSAGES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryVisitEvent:
    """Fired once per directory entered, before its contents are listed."""
    path: str


@dataclass(frozen=True)
class FileFoundEvent:
    """
    Fired once per file returned by a directory listing.

    Attributes:
        path: Directory joined with the file name.
        matched: Verdict of the substring match filter.
    """
    path: str
    matched: bool = False


@dataclass(frozen=True)
class SearchFinishedEvent:
    """Last message placed on the channel by the worker."""
    status: SearchStatus
    error: str = ""


SearchEvent = Union[DirectoryVisitEvent, FileFoundEvent, SearchFinishedEvent]

# -----------------------------------------------------------------------------
# COUNTERS AND RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CountersSnapshot:
    """
    Point-in-time copy of the running totals.

    Attributes:
        total_checked: Directories visited so far.
        matched_count: Found files whose name contains the pattern.
        found_count: Files returned by directory listings.
    """
    total_checked: int = 0
    matched_count: int = 0
    found_count: int = 0


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a finished search.

    Attributes:
        status: Terminal state.
        request: The request that was executed.
        counters: Final counter values.
        found_files: Found paths in emission order.
        elapsed_seconds: Wall-clock duration of the worker run.
        error: Failure description when status is FAILED.
    """
    status: SearchStatus
    request: SearchRequest
    counters: CountersSnapshot
    found_files: List[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status != SearchStatus.FAILED
