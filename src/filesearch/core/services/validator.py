from __future__ import annotations

"""
Configuration and Request Validation Service.

Gatekeeper between the interfaces and the search core. Normalizes the
runtime configuration dictionary and rejects unusable search requests
before any search state is touched.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from filesearch.domain.config import get_default_config
from filesearch.domain.errors import SearchValidationError
from filesearch.domain.search_models import (
    CancellationGranularity,
    ErrorPolicy,
    SearchRequest,
)
from filesearch.infra.fs import normalize_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_search_request(root_directory: Any, pattern: Any) -> SearchRequest:
    """
    Build a SearchRequest from raw user input.

    Args:
        root_directory: Directory entered by the user.
        pattern: Pattern entered by the user.

    Returns:
        SearchRequest: Request with an absolute root directory. The pattern
                       is kept verbatim.

    Raises:
        SearchValidationError: Blank root or pattern, or missing directory.
    """
    root_text = root_directory if isinstance(root_directory, str) else ""
    pattern_text = pattern if isinstance(pattern, str) else ""

    if not root_text.strip():
        raise SearchValidationError("Start directory is required.", field="root_directory")
    if not pattern_text.strip():
        raise SearchValidationError("Search pattern is required.", field="pattern")

    root_abs = normalize_path(root_text)
    if not os.path.isdir(root_abs):
        raise SearchValidationError(
            f"Start directory does not exist: {root_abs}", field="root_directory"
        )

    return SearchRequest(root_directory=root_abs, pattern=pattern_text)


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a runtime configuration dictionary.

    Missing keys are filled from defaults, wrong types are coerced or reset,
    and enum-valued keys are checked against their allowed values.

    Args:
        config: Raw configuration data.
        strict: Raise instead of coercing on invalid values.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized config and warnings.

    Raises:
        TypeError: On invalid types when strict.
        ValueError: On invalid enum values when strict.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for key in ("root_directory", "pattern", "locale"):
        value = merged.get(key)
        if value is None:
            merged[key] = defaults[key]
        elif not isinstance(value, str):
            msg = f"Key '{key}' expected str, got {type(value).__name__}."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Converted to string.")
            merged[key] = str(value)

    follow = merged.get("follow_symlinks")
    if not isinstance(follow, bool):
        msg = f"Key 'follow_symlinks' expected bool, got {type(follow).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Reset to default.")
        merged["follow_symlinks"] = defaults["follow_symlinks"]

    enum_fields = {
        "cancellation_granularity": CancellationGranularity,
        "error_policy": ErrorPolicy,
    }
    for key, enum_cls in enum_fields.items():
        raw = merged.get(key)
        allowed = [member.value for member in enum_cls]
        normalized = raw.value if isinstance(raw, enum_cls) else str(raw).strip().lower()
        if normalized not in allowed:
            msg = f"Key '{key}' has invalid value {raw!r}; allowed: {', '.join(allowed)}."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Reset to default.")
            normalized = defaults[key]
        merged[key] = normalized

    for w in warnings:
        logger.debug(f"Config validation: {w}")

    return merged, warnings
