from __future__ import annotations

"""
Unit tests for the Internationalization (i18n) utility.

Ensures every bundled locale exposes the same keys and that lookups
degrade gracefully.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Set

import pytest

from filesearch.utils.i18n import I18n

LOCALES_DIR = os.path.join(
    os.path.dirname(__file__), "..", "..", "..", "src", "filesearch", "interface", "locales"
)


def _flatten_keys(data: Dict[str, Any], prefix: str = "") -> Set[str]:
    keys: Set[str] = set()
    for k, v in data.items():
        full = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            keys |= _flatten_keys(v, full)
        else:
            keys.add(full)
    return keys


def _load(locale: str) -> Dict[str, Any]:
    with open(os.path.join(LOCALES_DIR, f"{locale}.json"), "r", encoding="utf-8") as f:
        return json.load(f)


def test_locale_key_parity() -> None:
    """TC-01: Every locale defines exactly the English key set."""
    reference = _flatten_keys(_load("en"))
    for locale in I18n().available_locales():
        assert _flatten_keys(_load(locale)) == reference, f"Key mismatch in {locale}"


def test_available_locales() -> None:
    assert {"en", "ru"} <= set(I18n().available_locales())


def test_interpolation() -> None:
    """TC-02: Placeholders are filled from keyword arguments."""
    tr = I18n("en")
    assert tr.t("gui.labels.total_files", count=7) == "Total files: 7"


def test_missing_key_falls_back() -> None:
    tr = I18n("en")
    assert tr.t("does.not.exist") == "does.not.exist"
    assert tr.t("does.not.exist", default="fallback") == "fallback"
    # Non-leaf keys are not strings
    assert tr.t("gui.labels") == "gui.labels"


def test_unknown_locale_falls_back_to_english() -> None:
    """TC-03: A missing locale keeps the language code and resolves from English."""
    tr = I18n("ru")
    tr.load_locale("xx")
    assert tr.is_loaded is False
    assert tr.locale == "ru"
    assert tr.t("gui.buttons.search") == "Search"


def test_missing_translation_uses_english(tmp_path: Path) -> None:
    """TC-04: Keys absent from the active locale render in English."""
    (tmp_path / "en.json").write_text('{"a": {"b": "Hello {name}"}}', encoding="utf-8")
    (tmp_path / "de.json").write_text('{"a": {}}', encoding="utf-8")

    tr = I18n("de", locales_dir=str(tmp_path))
    assert tr.locale == "de"
    assert tr.t("a.b", name="Ada") == "Hello Ada"
    assert tr.available_locales() == ["de", "en"]


@pytest.mark.parametrize("locale", ["en", "ru"])
def test_locales_load(locale: str) -> None:
    tr = I18n(locale)
    assert tr.is_loaded
    assert tr.locale == locale
