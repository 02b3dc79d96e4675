from __future__ import annotations

"""
Internationalization (i18n) Utility.

Interface strings live in nested JSON files under interface/locales, one
per language, and are addressed with dotted keys ("gui.buttons.search").
English is always loaded as the fallback table, so a key missing from the
active locale still renders in English instead of as a raw key.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "interface", "locales")
)


def _read_locale_file(locales_dir: str, locale: str) -> Optional[Dict[str, Any]]:
    path = os.path.join(locales_dir, f"{locale}.json")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"I18n: no locale file for '{locale}' at {path}")
        return None
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"I18n: unreadable locale file {path}: {e}")
        return None
    return data if isinstance(data, dict) else None


def _lookup(table: Dict[str, Any], key: str) -> Optional[str]:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, str) else None


class I18n:
    """
    Translation table for the active interface language.

    Attributes:
        is_loaded: False when the last load_locale() call found no usable file.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self._locales_dir = locales_dir
        self._fallback: Dict[str, Any] = _read_locale_file(locales_dir, DEFAULT_LOCALE) or {}
        self._table: Dict[str, Any] = {}
        self._locale = DEFAULT_LOCALE
        self.is_loaded = False
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        try:
            names = os.listdir(self._locales_dir)
        except OSError:
            return []
        return sorted(os.path.splitext(n)[0] for n in names if n.endswith(".json"))

    def load_locale(self, locale: str) -> None:
        """
        Switch the active language.

        An unknown or broken locale keeps the previous language code but
        empties the active table, so lookups resolve from English.
        """
        table = _read_locale_file(self._locales_dir, locale)
        if table is None:
            self._table = {}
            self.is_loaded = False
            return
        self._table = table
        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: active locale is now '{locale}'")

    def t(self, key: str, default: str = "", **kwargs: Any) -> str:
        """
        Translate `key` and fill its placeholders.

        Args:
            key: Dotted path into the locale file.
            default: Returned when neither table knows the key.
            **kwargs: Values for str.format placeholders.

        Returns:
            str: Active translation, English fallback, `default`, or `key`.
        """
        text = _lookup(self._table, key) or _lookup(self._fallback, key) or default or key
        if not kwargs:
            return text
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: cannot format '{key}': {e}")
            return text


i18n = I18n(DEFAULT_LOCALE)
