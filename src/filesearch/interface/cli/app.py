from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, cached last search, CLI overrides), request validation, search
execution with live progress, and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from filesearch.core.analysis.tree_renderer import render_tree, save_tree, tree_to_dict
from filesearch.core.search.session import SearchSession, format_elapsed, run_search
from filesearch.core.services.validator import validate_config, validate_search_request
from filesearch.domain.config import get_default_config, load_config, save_last_search
from filesearch.domain.errors import SearchValidationError
from filesearch.domain.search_models import (
    CancellationGranularity,
    CountersSnapshot,
    ErrorPolicy,
    FileFoundEvent,
    SearchEvent,
    SearchStatus,
)
from filesearch.infra.logging import LoggingConfig, configure_logging, get_logger
from filesearch.interface.cli import args as cli_args
from filesearch.utils.i18n import i18n

logger = get_logger(__name__)

_MERGE_KEYS = (
    "root_directory", "pattern", "locale",
    "cancellation_granularity", "error_policy", "follow_symlinks",
)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on search failure, 2 on invalid input,
             130 when interrupted.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only)
    configure_logging(LoggingConfig.for_cli(debug=args.debug))

    # 3. Configuration hierarchy
    base_conf = get_default_config() if args.no_cache else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if conf["locale"] != i18n.locale:
        i18n.load_locale(conf["locale"])

    # 4. Pre-flight request validation
    try:
        request = validate_search_request(conf["root_directory"], conf["pattern"])
    except SearchValidationError as e:
        msg = i18n.t("cli.errors.invalid_request", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if not args.no_cache:
        save_last_search(request.root_directory, request.pattern)

    # 5. Search execution phase
    stream_paths = not (args.json_output or args.tree)
    on_progress = _print_progress if args.progress_interval > 0 else None

    session = SearchSession(
        request,
        granularity=CancellationGranularity(conf["cancellation_granularity"]),
        error_policy=ErrorPolicy(conf["error_policy"]),
        follow_symlinks=conf["follow_symlinks"],
    )
    try:
        run_search(
            request,
            on_event=_print_found_path if stream_paths else None,
            on_progress=on_progress,
            progress_interval=args.progress_interval or 1.0,
            session=session,
        )
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    result = session.result
    if result is None or result.status == SearchStatus.FAILED:
        error = result.error if result is not None else "worker ended without a result"
        msg = i18n.t("cli.errors.search_failed", error=error)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    lines = render_tree(session.tree.roots)
    if args.tree_file:
        save_tree(args.tree_file, lines)

    if args.json_output:
        print(json.dumps(_result_payload(session), ensure_ascii=False, indent=2))
    else:
        if args.tree:
            print(i18n.t("cli.status.tree_header"))
            for line in lines:
                print(line)
        _print_human_summary(session)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values into `base`."""
    out = dict(base)
    for k in _MERGE_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_found_path(event: SearchEvent) -> None:
    if isinstance(event, FileFoundEvent):
        print(event.path)


def _print_progress(snapshot: CountersSnapshot, elapsed: float) -> None:
    print(
        i18n.t(
            "cli.status.progress",
            checked=snapshot.total_checked,
            matched=snapshot.matched_count,
            elapsed=format_elapsed(elapsed),
        ),
        file=sys.stderr,
    )


def _print_human_summary(session: SearchSession) -> None:
    result = session.result
    if result is None:
        return

    status_key = "cli.status.cancelled" if result.status == SearchStatus.CANCELLED else "cli.status.completed"
    print(i18n.t(status_key))
    print(
        i18n.t(
            "cli.status.summary",
            checked=result.counters.total_checked,
            found=result.counters.found_count,
            matched=result.counters.matched_count,
            elapsed=format_elapsed(result.elapsed_seconds),
        )
    )


def _result_payload(session: SearchSession) -> Dict[str, Any]:
    """JSON-ready view of a finished session."""
    result = session.result
    if result is None:
        return {}
    return {
        "status": result.status.value,
        "root_directory": result.request.root_directory,
        "pattern": result.request.pattern,
        "total_checked": result.counters.total_checked,
        "found_count": result.counters.found_count,
        "matched_count": result.counters.matched_count,
        "elapsed_seconds": round(result.elapsed_seconds, 3),
        "found_files": result.found_files,
        "tree": tree_to_dict(session.tree.roots),
    }

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
