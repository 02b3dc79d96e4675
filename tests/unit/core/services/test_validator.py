from __future__ import annotations

"""
Unit tests for the Configuration and Request Validation Service.
"""

from pathlib import Path

import pytest

from filesearch.core.services.validator import validate_config, validate_search_request
from filesearch.domain.config import get_default_config
from filesearch.domain.errors import SearchValidationError

# -----------------------------------------------------------------------------
# REQUEST VALIDATION
# -----------------------------------------------------------------------------

def test_valid_request_is_absolute_and_keeps_pattern(sample_tree: Path) -> None:
    """TC-01: Root is normalized; the pattern is preserved verbatim."""
    request = validate_search_request(f"  {sample_tree}  ", " x ")
    assert request.root_directory == str(sample_tree)
    assert request.pattern == " x "


@pytest.mark.parametrize(
    "root, pattern, field",
    [
        ("", "x", "root_directory"),
        ("   ", "x", "root_directory"),
        (None, "x", "root_directory"),
        ("/tmp", "", "pattern"),
        ("/tmp", "   ", "pattern"),
    ],
)
def test_blank_inputs_rejected(root: object, pattern: object, field: str) -> None:
    """TC-02: Blank fields are reported with the offending field name."""
    with pytest.raises(SearchValidationError) as exc_info:
        validate_search_request(root, pattern)
    assert exc_info.value.field == field


def test_missing_directory_rejected(tmp_path: Path) -> None:
    """TC-03: A non-existent root never reaches the worker."""
    missing = tmp_path / "nope"
    with pytest.raises(SearchValidationError, match="does not exist"):
        validate_search_request(str(missing), "x")


def test_file_as_root_rejected(sample_tree: Path) -> None:
    with pytest.raises(SearchValidationError):
        validate_search_request(str(sample_tree / "x1.txt"), "x")

# -----------------------------------------------------------------------------
# CONFIG VALIDATION
# -----------------------------------------------------------------------------

def test_config_defaults_pass_cleanly() -> None:
    conf, warnings = validate_config(get_default_config())
    assert warnings == []
    assert conf == get_default_config()


def test_config_non_dict_falls_back_to_defaults() -> None:
    """TC-04: Non-dict input yields defaults plus a warning."""
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert len(warnings) == 1

    with pytest.raises(TypeError):
        validate_config("bad", strict=True)


def test_config_enum_normalization() -> None:
    """TC-05: Enum-valued keys are case-normalized or reset."""
    conf, warnings = validate_config({
        "cancellation_granularity": " DIRECTORY ",
        "error_policy": "sloppy",
    })
    assert conf["cancellation_granularity"] == "directory"
    assert conf["error_policy"] == "strict"
    assert len(warnings) == 1

    with pytest.raises(ValueError):
        validate_config({"error_policy": "sloppy"}, strict=True)


def test_config_type_coercion() -> None:
    conf, warnings = validate_config({"pattern": 42, "follow_symlinks": "yes", "locale": None})
    assert conf["pattern"] == "42"
    assert conf["follow_symlinks"] is False
    assert conf["locale"] == "en"
    assert len(warnings) == 2
