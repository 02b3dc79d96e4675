from __future__ import annotations

"""
Unit tests for the GUI SearchController.

The Tk root and the view are replaced by MagicMocks; the session is either
a mock (toggle logic) or a real SearchSession over a temporary tree
(polling and tree mirroring).
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

pytest.importorskip("tkinter")

from filesearch.core.search.session import SearchSession
from filesearch.domain import constants as const
from filesearch.domain.search_models import SearchStatus
from filesearch.interface.gui.controllers import search_controller as controller_mod
from filesearch.interface.gui.controllers.search_controller import SearchController

_DEFAULT_CONF = {
    "cancellation_granularity": "subtree",
    "error_policy": "strict",
    "follow_symlinks": False,
}


@pytest.fixture
def mock_mb(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    mb = MagicMock()
    monkeypatch.setattr(controller_mod, "mb", mb)
    return mb


def _make_view(directory: str = "", pattern: str = "") -> MagicMock:
    view = MagicMock()
    view.entry_directory.get.return_value = directory
    view.entry_pattern.get.return_value = pattern
    inserted = iter(f"I{i:03d}" for i in range(10_000))
    view.tree_view.insert.side_effect = lambda *a, **kw: next(inserted)
    return view


def test_missing_input_shows_dialog(mock_mb: MagicMock) -> None:
    """TC-01: Blank inputs never start a session."""
    factory = MagicMock()
    controller = SearchController(MagicMock(), _make_view("", ""), dict(_DEFAULT_CONF), session_factory=factory)

    controller.on_search_clicked()

    factory.assert_not_called()
    mock_mb.showerror.assert_called_once()
    assert "specify" in mock_mb.showerror.call_args[0][1]


def test_nonexistent_directory_message(mock_mb: MagicMock, tmp_path: Path) -> None:
    """TC-02: A typed but missing directory is reported by path."""
    missing = str(tmp_path / "nope")
    controller = SearchController(MagicMock(), _make_view(missing, "x"), dict(_DEFAULT_CONF))

    controller.on_search_clicked()

    message = mock_mb.showerror.call_args[0][1]
    assert "does not exist" in message
    assert controller.session is None


def test_toggle_cancels_only_once(mock_mb: MagicMock, sample_tree: Path) -> None:
    """TC-03: While running, the button cancels; a second press is a no-op."""
    session = MagicMock()
    session.cancel.side_effect = [True, False]
    factory = MagicMock(return_value=session)
    app = MagicMock()
    view = _make_view(str(sample_tree), "x")

    controller = SearchController(app, view, dict(_DEFAULT_CONF), session_factory=factory)
    controller.on_search_clicked()

    assert controller.is_running
    session.start.assert_called_once()
    view.set_running.assert_called_with(True)
    app.after.assert_any_call(const.POLL_INTERVAL_MS, controller.poll)

    controller.on_search_clicked()
    controller.on_search_clicked()

    assert session.cancel.call_count == 2
    stopping_calls = [
        c for c in view.btn_search.configure.call_args_list if c.kwargs.get("state") == "disabled"
    ]
    assert len(stopping_calls) == 1
    factory.assert_called_once()


def test_poll_mirrors_tree_and_finishes(mock_mb: MagicMock, sample_tree: Path) -> None:
    """
    TC-04: Draining a finished session fills the Treeview once per node and
    returns the view to idle.
    """
    app = MagicMock()
    view = _make_view(str(sample_tree), "x")
    controller = SearchController(app, view, dict(_DEFAULT_CONF))

    controller.on_search_clicked()
    assert isinstance(controller.session, SearchSession)
    assert controller.session.wait(5.0)

    controller.poll()

    assert not controller.is_running
    view.set_running.assert_called_with(False)
    # One Treeview item per distinct tree node
    assert view.tree_view.insert.call_count == controller.session.tree.node_count
    assert controller.session.result.status == SearchStatus.COMPLETED
    view.lbl_matched.configure.assert_called_with(text="Matched files: 2")
    mock_mb.showerror.assert_not_called()


def test_failed_search_shows_error(mock_mb: MagicMock, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """TC-05: A worker failure is surfaced in a dialog."""
    from filesearch.core.search import session as session_mod

    def boom(*args, **kwargs):
        raise OSError("disk on fire")

    monkeypatch.setattr(session_mod, "traverse", boom)
    controller = SearchController(MagicMock(), _make_view(str(sample_tree), "x"), dict(_DEFAULT_CONF))

    controller.on_search_clicked()
    controller.session.wait(5.0)
    controller.poll()

    assert not controller.is_running
    assert "disk on fire" in mock_mb.showerror.call_args[0][1]


def test_close_saves_cache(mock_mb: MagicMock, tmp_path: Path) -> None:
    """TC-06: Closing the window persists the current inputs."""
    cache = tmp_path / "cache.txt"
    app = MagicMock()
    controller = SearchController(
        app, _make_view("/some/dir", "needle"), dict(_DEFAULT_CONF), cache_path=str(cache)
    )

    controller.on_close()

    assert cache.read_text(encoding="utf-8") == "/some/dir\nneedle\n"
    app.destroy.assert_called_once()
