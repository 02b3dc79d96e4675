from __future__ import annotations

"""
Unit tests for the domain data models.
"""

import gc

import pytest

from filesearch.domain.search_models import (
    CountersSnapshot,
    FileFoundEvent,
    SearchRequest,
    SearchResult,
    SearchStatus,
)
from filesearch.domain.tree_models import TreeNode


def test_tree_node_rejects_duplicate_segment() -> None:
    """TC-01: Sibling segments are unique."""
    root = TreeNode("a")
    root.add_child("b")
    with pytest.raises(ValueError):
        root.add_child("b")


def test_tree_node_segments_are_case_sensitive() -> None:
    root = TreeNode("a")
    root.add_child("X.txt")
    root.add_child("x.txt")
    assert [c.segment for c in root.children] == ["X.txt", "x.txt"]


def test_tree_node_parent_is_weak() -> None:
    """TC-02: Children do not keep their parent alive."""
    root = TreeNode("a")
    child = root.add_child("b")
    assert child.parent is root

    del root
    gc.collect()
    assert child.parent is None


def test_tree_node_leaf_and_count() -> None:
    root = TreeNode("a")
    assert root.is_leaf
    b = root.add_child("b")
    b.add_child("c")
    assert not root.is_leaf
    assert root.count() == 3
    assert root.get_child("b") is b
    assert root.get_child("c") is None


def test_events_are_immutable() -> None:
    event = FileFoundEvent(path="/a/x")
    with pytest.raises(AttributeError):
        event.path = "/b"  # type: ignore[misc]
    assert event.matched is False


def test_search_result_ok() -> None:
    """TC-03: Cancelled runs are still 'ok'; only failures are not."""
    request = SearchRequest(root_directory="/a", pattern="x")
    counters = CountersSnapshot()
    assert SearchResult(SearchStatus.COMPLETED, request, counters).ok
    assert SearchResult(SearchStatus.CANCELLED, request, counters).ok
    assert not SearchResult(SearchStatus.FAILED, request, counters, error="boom").ok
