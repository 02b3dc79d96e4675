from __future__ import annotations

"""
Directory Traversal Engine.

Walks a directory tree depth-first in pre-order and reports progress as a
stream of typed events. The walk runs from an explicit work-list instead of
recursion, so stack usage stays flat on deep trees while the emission order
is the same as a recursive pre-order walk.

Per directory the engine:
1. emits a DirectoryVisitEvent and bumps the visited counter,
2. lists the files matching the listing glob and emits one FileFoundEvent
   per file (directory joined with the file name),
3. schedules every immediate subdirectory, unfiltered.
"""

import logging
import os
from typing import Callable, List, Optional, Tuple, Union

from filesearch.core.services.cancellation import CancellationSignal
from filesearch.core.services.counters import SearchCounters
from filesearch.core.services.matcher import matches_listing, to_listing_glob
from filesearch.domain.search_models import (
    CancellationGranularity,
    DirectoryVisitEvent,
    ErrorPolicy,
    FileFoundEvent,
)

logger = logging.getLogger(__name__)

EventEmitter = Callable[[Union[DirectoryVisitEvent, FileFoundEvent]], None]


class _Checkpoint:
    """Work-list marker popped once the subtree pushed above it is done."""

    __slots__ = ()


_CHECKPOINT = _Checkpoint()

# ==============================================================================
# PUBLIC API
# ==============================================================================

def traverse(
        directory: str,
        pattern: str,
        cancel_signal: CancellationSignal,
        emit: EventEmitter,
        counters: Optional[SearchCounters] = None,
        *,
        granularity: CancellationGranularity = CancellationGranularity.SUBTREE,
        error_policy: ErrorPolicy = ErrorPolicy.STRICT,
        follow_symlinks: bool = False,
) -> bool:
    """
    Walk `directory` and emit visit/found events in pre-order.

    With SUBTREE granularity the cancellation signal is only checked after a
    child directory's whole subtree has been walked: a subtree already in
    progress always finishes, and the next sibling is never started. With
    DIRECTORY granularity the signal is checked before every directory.

    Access-denied and vanished directories are skipped; the visit event for
    them has already been emitted and counted. Other OSErrors propagate under
    ErrorPolicy.STRICT and are skipped with a warning under LENIENT.

    Args:
        directory: Root of the walk.
        pattern: Raw user pattern; the listing glob is derived from it.
        cancel_signal: Cooperative cancellation flag.
        emit: Receiver of DirectoryVisitEvent and FileFoundEvent messages.
        counters: Optional running totals to bump on each directory.
        granularity: Cancellation check points.
        error_policy: Handling of unrecognised listing errors.
        follow_symlinks: Descend into symbolic links to directories.

    Returns:
        bool: True if the walk completed, False if it stopped on cancellation.

    Raises:
        OSError: Unrecognised listing failure under ErrorPolicy.STRICT.
    """
    listing_glob = to_listing_glob(pattern)
    check_each_directory = granularity == CancellationGranularity.DIRECTORY
    pending: List[Union[str, _Checkpoint]] = [directory]

    while pending:
        item = pending.pop()

        if isinstance(item, _Checkpoint):
            if cancel_signal.is_requested:
                logger.info("Traversal stopped after completing a subtree (cancelled).")
                return False
            continue

        if check_each_directory and cancel_signal.is_requested:
            logger.info(f"Traversal stopped before entering '{item}' (cancelled).")
            return False

        emit(DirectoryVisitEvent(path=item))
        if counters is not None:
            counters.on_directory_visited()

        listing = _safe_list_directory(item, listing_glob, follow_symlinks, error_policy)
        if listing is None:
            continue

        files, subdirectories = listing
        for file_path in files:
            emit(FileFoundEvent(path=file_path))

        # Reversed push keeps the first subdirectory on top of the work-list
        for sub in reversed(subdirectories):
            if not check_each_directory:
                pending.append(_CHECKPOINT)
            pending.append(sub)

    return True


def list_directory(
        directory: str,
        listing_glob: str,
        follow_symlinks: bool = False,
) -> Tuple[List[str], List[str]]:
    """
    List the direct contents of a directory.

    Args:
        directory: Directory to list.
        listing_glob: Case-sensitive glob applied to file names only.
        follow_symlinks: Treat symbolic links to directories as directories.

    Returns:
        Tuple[List[str], List[str]]: (matching file paths, subdirectory paths),
                                     each sorted by name and joined with
                                     `directory`.
    """
    files: List[str] = []
    subdirectories: List[str] = []

    with os.scandir(directory) as it:
        for entry in it:
            if entry.is_dir():
                # Links to directories are neither descended nor listed as files
                if follow_symlinks or not entry.is_symlink():
                    subdirectories.append(entry.name)
            elif matches_listing(entry.name, listing_glob):
                files.append(entry.name)

    files.sort()
    subdirectories.sort()
    return (
        [os.path.join(directory, name) for name in files],
        [os.path.join(directory, name) for name in subdirectories],
    )

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _safe_list_directory(
        directory: str,
        listing_glob: str,
        follow_symlinks: bool,
        error_policy: ErrorPolicy,
) -> Optional[Tuple[List[str], List[str]]]:
    """Apply the listing error taxonomy. Returns None for skipped directories."""
    try:
        return list_directory(directory, listing_glob, follow_symlinks)
    except PermissionError:
        logger.debug(f"Access denied, skipping: {directory}")
    except (FileNotFoundError, NotADirectoryError):
        logger.debug(f"Directory vanished, skipping: {directory}")
    except OSError as e:
        if error_policy == ErrorPolicy.STRICT:
            logger.error(f"Unrecoverable listing failure at '{directory}': {e}")
            raise
        logger.warning(f"Listing failed, skipping '{directory}': {e}")
    return None
