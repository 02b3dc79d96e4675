from __future__ import annotations

"""
Running Search Counters.

Totals are written by the traversal worker and read concurrently by the
display side. Every access goes through a single lock held only for the
duration of an integer update or copy, so readers never stall the worker.
"""

import threading

from filesearch.domain.search_models import CountersSnapshot


class SearchCounters:
    """
    Directories visited, files found and files matched during one search.

    'total_checked' counts directories, not files, even though the display
    labels it as total files.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total_checked = 0
        self._matched_count = 0
        self._found_count = 0

    def on_directory_visited(self) -> None:
        with self._lock:
            self._total_checked += 1

    def on_file_found(self, matched: bool) -> None:
        """Record one listed file; `matched` is the match filter verdict."""
        with self._lock:
            self._found_count += 1
            if matched:
                self._matched_count += 1

    def snapshot(self) -> CountersSnapshot:
        with self._lock:
            return CountersSnapshot(
                total_checked=self._total_checked,
                matched_count=self._matched_count,
                found_count=self._found_count,
            )

    def reset(self) -> None:
        with self._lock:
            self._total_checked = 0
            self._matched_count = 0
            self._found_count = 0
