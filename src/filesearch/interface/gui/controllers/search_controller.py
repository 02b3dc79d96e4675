from __future__ import annotations

"""
Search Controller.

Bridges the search view with the search core. The single action button
toggles: it starts a search when idle and requests cancellation while a
search runs. Progress is pulled from the session channel on the Tk event
loop, so widgets are only touched from the UI thread.
"""

import logging
import tkinter.filedialog as fd
import tkinter.messagebox as mb
from typing import Any, Callable, Dict, List, Optional

from filesearch.core.search.session import SearchSession, format_elapsed
from filesearch.core.services.validator import validate_search_request
from filesearch.domain import constants as const
from filesearch.domain.config import save_last_search
from filesearch.domain.errors import SearchValidationError
from filesearch.domain.search_models import (
    CancellationGranularity,
    DirectoryVisitEvent,
    ErrorPolicy,
    SearchFinishedEvent,
    SearchRequest,
    SearchStatus,
)
from filesearch.domain.tree_models import TreeNode
from filesearch.utils.i18n import i18n

logger = logging.getLogger(__name__)

SessionFactory = Callable[..., SearchSession]


class SearchController:
    """
    Owns the active SearchSession and keeps the view in sync with it.

    Attributes:
        app: Root window (provides after/protocol/destroy).
        view: SearchFrame with the widgets.
        config: Validated session configuration.
    """

    def __init__(
            self,
            app: Any,
            view: Any,
            config: Dict[str, Any],
            session_factory: SessionFactory = SearchSession,
            cache_path: Optional[str] = None,
    ):
        self.app = app
        self.view = view
        self.config = config
        self.session: Optional[SearchSession] = None
        self._session_factory = session_factory
        self._cache_path = cache_path
        # id(TreeNode) -> Treeview item id; nodes live as long as the session tree
        self._items: Dict[int, str] = {}
        self._active = False

    def bind(self) -> None:
        """Attach widget commands and the window close hook."""
        self.view.btn_search.configure(command=self.on_search_clicked)
        self.view.btn_browse.configure(command=self.on_browse_clicked)
        self.app.protocol("WM_DELETE_WINDOW", self.on_close)

    @property
    def is_running(self) -> bool:
        """True from start until the finished message has been consumed."""
        return self._active

    # -------------------------------------------------------------------------
    # USER ACTIONS
    # -------------------------------------------------------------------------

    def on_search_clicked(self) -> None:
        """Start a search, or request cancellation of the running one."""
        if self.is_running:
            if self.session.cancel():
                self.view.btn_search.configure(text=i18n.t("gui.buttons.stopping"), state="disabled")
            return

        try:
            request = validate_search_request(
                self.view.entry_directory.get(),
                self.view.entry_pattern.get(),
            )
        except SearchValidationError as e:
            logger.info(f"Search rejected: {e}")
            # A non-blank directory that failed validation does not exist
            directory_entered = bool(self.view.entry_directory.get().strip())
            if e.field == "root_directory" and directory_entered:
                message = str(e)
            else:
                message = i18n.t("gui.dialogs.missing_input")
            mb.showerror(i18n.t("gui.dialogs.error_title"), message)
            return

        self.start_search(request)

    def on_browse_clicked(self) -> None:
        selected = fd.askdirectory(initialdir=self.view.entry_directory.get() or None)
        if selected:
            self.view.entry_directory.delete(0, "end")
            self.view.entry_directory.insert(0, selected)

    def on_close(self) -> None:
        """Persist the last search, stop the worker and close the window."""
        save_last_search(
            self.view.entry_directory.get(),
            self.view.entry_pattern.get(),
            self._cache_path,
        )
        if self.session is not None and self.session.is_running:
            self.session.cancel()
        self.app.destroy()

    # -------------------------------------------------------------------------
    # SEARCH LIFECYCLE
    # -------------------------------------------------------------------------

    def start_search(self, request: SearchRequest) -> None:
        """Reset the view and launch a new session for `request`."""
        self.view.clear_tree()
        self._items.clear()
        self._update_counter_labels(0, 0)

        self.session = self._session_factory(
            request,
            granularity=CancellationGranularity(self.config.get("cancellation_granularity", "subtree")),
            error_policy=ErrorPolicy(self.config.get("error_policy", "strict")),
            follow_symlinks=bool(self.config.get("follow_symlinks", False)),
        )
        self.session.start()
        self._active = True
        self.view.set_running(True)

        self.app.after(const.POLL_INTERVAL_MS, self.poll)
        self.app.after(const.TIMER_INTERVAL_MS, self.tick)

    def poll(self) -> None:
        """Drain pending progress messages and re-schedule until finished."""
        session = self.session
        if session is None:
            return

        finished: Optional[SearchFinishedEvent] = None
        events = session.poll_events(const.MAX_EVENTS_PER_POLL, on_insert=self._render_chain)
        for event in events:
            if isinstance(event, DirectoryVisitEvent):
                self.view.lbl_current_dir.configure(
                    text=i18n.t("gui.labels.current_directory", path=event.path)
                )
            elif isinstance(event, SearchFinishedEvent):
                finished = event

        snapshot = session.snapshot()
        self._update_counter_labels(snapshot.total_checked, snapshot.matched_count)

        if finished is not None:
            self._on_finished(finished)
        else:
            self.app.after(const.POLL_INTERVAL_MS, self.poll)

    def tick(self) -> None:
        """Refresh the elapsed time label once per timer interval."""
        if self.session is None:
            return
        self.view.lbl_elapsed.configure(
            text=i18n.t("gui.labels.elapsed", elapsed=format_elapsed(self.session.elapsed_seconds))
        )
        if self.is_running:
            self.app.after(const.TIMER_INTERVAL_MS, self.tick)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _render_chain(self, chain: List[TreeNode]) -> None:
        """Mirror newly created nodes of `chain` into the Treeview."""
        parent_item = ""
        for node in chain:
            item = self._items.get(id(node))
            if item is None:
                item = self.view.tree_view.insert(parent_item, "end", text=node.segment)
                self._items[id(node)] = item
            parent_item = item

    def _update_counter_labels(self, total_checked: int, matched_count: int) -> None:
        self.view.lbl_total.configure(text=i18n.t("gui.labels.total_files", count=total_checked))
        self.view.lbl_matched.configure(text=i18n.t("gui.labels.matched_files", count=matched_count))

    def _on_finished(self, event: SearchFinishedEvent) -> None:
        self._active = False
        self.view.set_running(False)
        if self.session is not None:
            self.view.lbl_elapsed.configure(
                text=i18n.t("gui.labels.elapsed", elapsed=format_elapsed(self.session.elapsed_seconds))
            )

        if event.status == SearchStatus.FAILED:
            mb.showerror(
                i18n.t("gui.dialogs.error_title"),
                i18n.t("gui.dialogs.search_failed", error=event.error),
            )
        elif event.status == SearchStatus.CANCELLED:
            logger.info("Search stopped by user signal.")
