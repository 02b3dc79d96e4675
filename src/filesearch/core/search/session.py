from __future__ import annotations

"""
Search Session Orchestrator.

Runs one traversal on a single dedicated background thread and bridges it
to a consumer (CLI loop or GUI event loop) through a FIFO channel of typed
progress messages. The worker applies the match filter and updates the
counters as events are produced; the consumer drains the channel in its own
scheduling context and grows the found-paths tree from it.
"""

import logging
import queue
import threading
import time
from typing import Callable, List, Optional

from filesearch.core.analysis.tree_aggregator import TreeAggregator
from filesearch.core.services.cancellation import CancellationSignal
from filesearch.core.services.counters import SearchCounters
from filesearch.core.services.matcher import is_match
from filesearch.core.services.traversal import traverse
from filesearch.domain.errors import SearchAlreadyRunningError
from filesearch.domain.search_models import (
    CancellationGranularity,
    CountersSnapshot,
    ErrorPolicy,
    FileFoundEvent,
    SearchEvent,
    SearchFinishedEvent,
    SearchRequest,
    SearchResult,
    SearchStatus,
)
from filesearch.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SESSION
# -----------------------------------------------------------------------------

class SearchSession:
    """
    One search run: worker thread, cancellation flag, counters and tree.

    Thread roles:
        worker   -> traverse(), match filter, counters, channel.put()
        consumer -> poll_events(), tree aggregator, found files list
        any      -> cancel(), snapshot(), elapsed_seconds
    """

    def __init__(
            self,
            request: SearchRequest,
            *,
            granularity: CancellationGranularity = CancellationGranularity.SUBTREE,
            error_policy: ErrorPolicy = ErrorPolicy.STRICT,
            follow_symlinks: bool = False,
    ):
        self.request = request
        self.granularity = granularity
        self.error_policy = error_policy
        self.follow_symlinks = follow_symlinks

        self.cancel_signal = CancellationSignal()
        self.counters = SearchCounters()
        self.tree = TreeAggregator()

        self._channel: queue.Queue[SearchEvent] = queue.Queue()
        self._found_lock = threading.Lock()
        self._found_files: List[str] = []
        self._emitted_paths: List[str] = []
        self._thread: Optional[threading.Thread] = None
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None
        self._result: Optional[SearchResult] = None

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """
        Reset state and launch the worker thread.

        Raises:
            SearchAlreadyRunningError: If the worker is still alive.
        """
        if self.is_running:
            raise SearchAlreadyRunningError("A search is already in progress.")

        self.cancel_signal.reset()
        self.counters.reset()
        self.tree.clear()
        with self._found_lock:
            self._found_files.clear()
        self._channel = queue.Queue()
        self._emitted_paths = []
        self._result = None
        self._finished_at = None
        self._started_at = time.monotonic()

        logger.info(
            f"Search started: root='{self.request.root_directory}' "
            f"pattern='{self.request.pattern}' granularity={self.granularity.value}"
        )
        self._thread = threading.Thread(
            target=self._run,
            name="filesearch-worker",
            daemon=True,
        )
        self._thread.start()

    def cancel(self) -> bool:
        """
        Request cooperative cancellation.

        Returns:
            bool: False when cancellation was already requested (no-op).
        """
        return self.cancel_signal.request()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the worker ends.

        Returns:
            bool: True if the worker is no longer running.
        """
        if self._thread is not None:
            self._thread.join(timeout)
        return not self.is_running

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def result(self) -> Optional[SearchResult]:
        return self._result

    # -------------------------------------------------------------------------
    # CONSUMER API
    # -------------------------------------------------------------------------

    def poll_events(
            self,
            max_events: Optional[int] = None,
            on_insert: Optional[Callable[[List[TreeNode]], None]] = None,
    ) -> List[SearchEvent]:
        """
        Drain pending progress messages without blocking.

        Must be called from the consumer context. Found paths are inserted
        into the tree and recorded in emission order before being returned.

        Args:
            max_events: Upper bound on messages drained in this call.
            on_insert: Receives the node chain touched by each found path.

        Returns:
            List[SearchEvent]: Messages in emission order.
        """
        events: List[SearchEvent] = []
        while max_events is None or len(events) < max_events:
            try:
                event = self._channel.get_nowait()
            except queue.Empty:
                break
            if isinstance(event, FileFoundEvent):
                chain = self.tree.insert(event.path)
                if on_insert is not None:
                    on_insert(chain)
                with self._found_lock:
                    self._found_files.append(event.path)
            events.append(event)
        return events

    def snapshot(self) -> CountersSnapshot:
        return self.counters.snapshot()

    @property
    def found_files(self) -> List[str]:
        with self._found_lock:
            return list(self._found_files)

    @property
    def elapsed_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._finished_at if self._finished_at is not None else time.monotonic()
        return end - self._started_at

    # -------------------------------------------------------------------------
    # WORKER
    # -------------------------------------------------------------------------

    def _on_event(self, event: SearchEvent) -> None:
        """Worker-side receipt: apply the match filter, count, forward."""
        if isinstance(event, FileFoundEvent):
            matched = is_match(event.path, self.request.pattern)
            self.counters.on_file_found(matched)
            self._emitted_paths.append(event.path)
            event = FileFoundEvent(path=event.path, matched=matched)
        self._channel.put(event)

    def _run(self) -> None:
        status = SearchStatus.COMPLETED
        error = ""
        try:
            completed = traverse(
                self.request.root_directory,
                self.request.pattern,
                self.cancel_signal,
                self._on_event,
                self.counters,
                granularity=self.granularity,
                error_policy=self.error_policy,
                follow_symlinks=self.follow_symlinks,
            )
            if not completed:
                status = SearchStatus.CANCELLED
        except Exception as e:
            logger.critical(f"Search worker: critical failure detected: {e}", exc_info=True)
            status = SearchStatus.FAILED
            error = str(e)
        finally:
            self._finished_at = time.monotonic()

        counters = self.counters.snapshot()
        self._result = SearchResult(
            status=status,
            request=self.request,
            counters=counters,
            found_files=list(self._emitted_paths),
            elapsed_seconds=self.elapsed_seconds,
            error=error,
        )
        logger.info(
            f"Search {status.value}: directories={counters.total_checked} "
            f"found={counters.found_count} matched={counters.matched_count} "
            f"elapsed={format_elapsed(self.elapsed_seconds)}"
        )
        self._channel.put(SearchFinishedEvent(status=status, error=error))

# -----------------------------------------------------------------------------
# BLOCKING FACADE
# -----------------------------------------------------------------------------

def run_search(
        request: SearchRequest,
        *,
        on_event: Optional[Callable[[SearchEvent], None]] = None,
        on_progress: Optional[Callable[[CountersSnapshot, float], None]] = None,
        progress_interval: float = 1.0,
        granularity: CancellationGranularity = CancellationGranularity.SUBTREE,
        error_policy: ErrorPolicy = ErrorPolicy.STRICT,
        follow_symlinks: bool = False,
        session: Optional[SearchSession] = None,
) -> SearchSession:
    """
    Run a search to completion from the calling thread.

    The caller thread acts as the consumer: it drains the channel, forwards
    each message to `on_event` and reports counter snapshots to
    `on_progress` every `progress_interval` seconds. KeyboardInterrupt
    requests cancellation, waits for the worker to unwind, then re-raises.

    Returns:
        SearchSession: The finished session (tree, found files and result).
    """
    if session is None:
        session = SearchSession(
            request,
            granularity=granularity,
            error_policy=error_policy,
            follow_symlinks=follow_symlinks,
        )
    session.start()

    last_progress = time.monotonic()
    finished = False
    try:
        while not finished:
            for event in session.poll_events():
                if on_event is not None:
                    on_event(event)
                if isinstance(event, SearchFinishedEvent):
                    finished = True

            now = time.monotonic()
            if on_progress is not None and now - last_progress >= progress_interval:
                on_progress(session.snapshot(), session.elapsed_seconds)
                last_progress = now

            if not finished:
                session.wait(0.05)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Waiting for the worker to unwind...")
        session.cancel()
        session.wait()
        session.poll_events()
        raise

    return session


def format_elapsed(seconds: float) -> str:
    """Format a duration as hh:mm:ss."""
    total = int(max(seconds, 0))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
