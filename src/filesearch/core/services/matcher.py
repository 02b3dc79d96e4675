from __future__ import annotations

"""
Pattern Matching Rules.

The search pattern is applied twice: first as a glob while listing each
directory, then as a literal substring against every listed file name.
The two stages are independent: a listed ("found") file is
not necessarily a "matched" one.
"""

import fnmatch
import os

from filesearch.domain.constants import GLOB_METACHARACTERS

# -----------------------------------------------------------------------------
# LISTING STAGE (GLOB)
# -----------------------------------------------------------------------------

def to_listing_glob(pattern: str) -> str:
    """
    Derive the directory-listing glob from a user pattern.

    Patterns that already contain glob metacharacters are used verbatim,
    anything else is wrapped as '*pattern*'.
    """
    if any(ch in pattern for ch in GLOB_METACHARACTERS):
        return pattern
    return f"*{pattern}*"


def matches_listing(file_name: str, listing_glob: str) -> bool:
    """Case-sensitive glob test used by the directory listing stage."""
    return fnmatch.fnmatchcase(file_name, listing_glob)

# -----------------------------------------------------------------------------
# MATCH FILTER (SUBSTRING)
# -----------------------------------------------------------------------------

def is_match(file_path: str, pattern: str) -> bool:
    """
    Check whether the final path segment contains `pattern` literally.

    Case-sensitive, no wildcard interpretation.

    Args:
        file_path: Found path.
        pattern: Raw user pattern.

    Returns:
        bool: True if the file name contains the pattern.
    """
    file_name = os.path.basename(file_path)
    return bool(file_name) and pattern in file_name
