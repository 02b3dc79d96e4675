from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory (cache file, logs).
3. Shared filesystem fixtures for traversal tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_data(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the per-application data directory into the test sandbox."""
    home = tmp_path / "_appdata"
    monkeypatch.setenv("FILESEARCH_HOME", str(home))
    return home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Two-level tree with one matching file per level.

    Structure:
    /a
      x1.txt
      /b
        x2.log
    """
    root = tmp_path / "a"
    root.mkdir()
    (root / "x1.txt").write_text("one", encoding="utf-8")
    (root / "b").mkdir()
    (root / "b" / "x2.log").write_text("two", encoding="utf-8")
    return root


@pytest.fixture
def wide_tree(tmp_path: Path) -> Path:
    """
    Tree with three sibling subtrees for cancellation tests.

    Structure:
    /root
      top.txt
      /a
        a.txt
        /deep
          deep.txt
      /b
        b.txt
      /c
        c.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "top.txt").write_text("", encoding="utf-8")
    for name in ("a", "b", "c"):
        (root / name).mkdir()
        (root / name / f"{name}.txt").write_text("", encoding="utf-8")
    (root / "a" / "deep").mkdir()
    (root / "a" / "deep" / "deep.txt").write_text("", encoding="utf-8")
    return root
