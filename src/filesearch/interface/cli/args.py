from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from filesearch.domain.constants import DEFAULT_PROGRESS_INTERVAL
from filesearch.domain.search_models import CancellationGranularity, ErrorPolicy
from filesearch.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the FileSearch CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="filesearch",
        description=i18n.t("app.description"),
    )

    # --- Search Request ---
    p.add_argument(
        "-d", "--directory",
        dest="root_directory",
        default=None,
        help=i18n.t("cli.args.directory"),
    )
    p.add_argument(
        "-p", "--pattern",
        dest="pattern",
        default=None,
        help=i18n.t("cli.args.pattern"),
    )

    # --- Traversal Behavior ---
    p.add_argument(
        "--fine-cancel",
        action="store_true",
        help=i18n.t("cli.args.fine_cancel"),
    )
    p.add_argument(
        "--lenient",
        action="store_true",
        help=i18n.t("cli.args.lenient"),
    )
    p.add_argument(
        "--follow-symlinks",
        action="store_true",
        help=i18n.t("cli.args.follow_symlinks"),
    )

    # --- Output ---
    p.add_argument("--tree", action="store_true", help=i18n.t("cli.args.tree"))
    p.add_argument(
        "--tree-file",
        dest="tree_file",
        default=None,
        help=i18n.t("cli.args.tree_file"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--progress-interval",
        dest="progress_interval",
        type=float,
        default=DEFAULT_PROGRESS_INTERVAL,
        help=i18n.t("cli.args.progress_interval"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument("--no-cache", action="store_true", help=i18n.t("cli.args.no_cache"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument(
        "--locale",
        dest="locale",
        default=None,
        help=i18n.t("cli.args.locale"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually set are present (None values mean
    "keep the base configuration").
    """
    overrides: Dict[str, Any] = {
        "root_directory": args.root_directory,
        "pattern": args.pattern,
        "locale": args.locale,
    }

    if args.fine_cancel:
        overrides["cancellation_granularity"] = CancellationGranularity.DIRECTORY.value
    if args.lenient:
        overrides["error_policy"] = ErrorPolicy.LENIENT.value
    if args.follow_symlinks:
        overrides["follow_symlinks"] = True

    return overrides
