from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies ASCII connectors, insertion-order output, dictionary export and
persistence to disk.
"""

from pathlib import Path

from filesearch.core.analysis.tree_aggregator import TreeAggregator
from filesearch.core.analysis.tree_renderer import render_tree, save_tree, tree_to_dict


def _example_tree() -> TreeAggregator:
    tree = TreeAggregator(sep="/", altsep=None)
    tree.insert("/a/x1.txt")
    tree.insert("/a/b/x2.log")
    tree.insert("/a/b/x3.log")
    return tree


def test_render_tree_connectors() -> None:
    """TC-01: Last children use '└──' and their subtrees are space-indented."""
    lines = render_tree(_example_tree().roots)
    assert lines == [
        "a",
        "├── x1.txt",
        "└── b",
        "    ├── x2.log",
        "    └── x3.log",
    ]


def test_render_tree_vertical_guides() -> None:
    """TC-02: Non-last branches continue with '│' guides."""
    tree = TreeAggregator(sep="/", altsep=None)
    tree.insert("/r/a/one.txt")
    tree.insert("/r/z.txt")

    assert render_tree(tree.roots) == [
        "r",
        "├── a",
        "│   └── one.txt",
        "└── z.txt",
    ]


def test_render_empty_forest() -> None:
    assert render_tree(()) == []


def test_tree_to_dict() -> None:
    """TC-03: Leaves map to None, order preserved."""
    data = tree_to_dict(_example_tree().roots)
    assert data == {"a": {"x1.txt": None, "b": {"x2.log": None, "x3.log": None}}}
    assert list(data["a"].keys()) == ["x1.txt", "b"]


def test_save_tree(tmp_path: Path) -> None:
    """TC-04: Lines are written as UTF-8 with a trailing newline."""
    target = tmp_path / "out" / "tree.txt"
    lines = render_tree(_example_tree().roots)

    assert save_tree(str(target), lines) is True
    assert target.read_text(encoding="utf-8") == "\n".join(lines) + "\n"


def test_save_tree_failure(tmp_path: Path) -> None:
    """TC-05: Writing into a path blocked by a file reports False."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    assert save_tree(str(blocker / "tree.txt"), ["a"]) is False
