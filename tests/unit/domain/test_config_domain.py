from __future__ import annotations

"""
Unit tests for the configuration defaults and the last-search cache.
"""

import os
from pathlib import Path

from filesearch.domain.config import (
    get_cache_file_path,
    get_default_config,
    load_config,
    load_last_search,
    save_last_search,
)


def test_cache_round_trip(tmp_path: Path) -> None:
    """TC-01: Root and pattern are stored as exactly two lines."""
    cache = tmp_path / "cache.txt"
    assert save_last_search("/data/projects", "*.py", str(cache)) is True

    assert cache.read_text(encoding="utf-8") == "/data/projects\n*.py\n"
    assert load_last_search(str(cache)) == ("/data/projects", "*.py")


def test_missing_cache_is_created_empty(tmp_path: Path) -> None:
    """TC-02: First start creates the file and restores nothing."""
    cache = tmp_path / "sub" / "cache.txt"
    assert load_last_search(str(cache)) == ("", "")
    assert cache.exists()
    assert cache.read_text(encoding="utf-8") == ""


def test_malformed_cache_is_ignored(tmp_path: Path) -> None:
    """TC-03: Anything but two lines restores nothing."""
    cache = tmp_path / "cache.txt"
    cache.write_text("only-one-line\n", encoding="utf-8")
    assert load_last_search(str(cache)) == ("", "")

    cache.write_text("a\nb\nc\n", encoding="utf-8")
    assert load_last_search(str(cache)) == ("", "")


def test_default_cache_location(isolated_user_data: Path) -> None:
    """TC-04: The cache lives in the user data directory."""
    assert get_cache_file_path() == os.path.join(str(isolated_user_data), "cache.txt")


def test_load_config_merges_cache(tmp_path: Path) -> None:
    cache = tmp_path / "cache.txt"
    save_last_search("/src", "needle", str(cache))

    config = load_config(str(cache))
    assert config["root_directory"] == "/src"
    assert config["pattern"] == "needle"
    assert config["cancellation_granularity"] == get_default_config()["cancellation_granularity"]
