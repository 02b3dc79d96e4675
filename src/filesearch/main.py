from __future__ import annotations

"""
FileSearch entry point.

`filesearch` with arguments runs the command line search; without
arguments it opens the window. Unhandled exceptions from either path are
logged at CRITICAL; the interpreter then exits with status 1.
"""

import logging
import sys
import traceback
from types import TracebackType
from typing import List, Optional, Type

logger = logging.getLogger("filesearch.supervisor")


def _wants_cli(argv: List[str]) -> bool:
    return len(argv) > 1


def _show_fatal_dialog(message: str) -> bool:
    """Best-effort Tk alert; False when no display is available."""
    try:
        import tkinter
        import tkinter.messagebox as mb
    except ImportError:
        return False

    try:
        root = tkinter.Tk()
        root.withdraw()
        mb.showerror("FileSearch", f"FileSearch stopped unexpectedly:\n\n{message}\n\nSee the log file for details.")
        root.destroy()
        return True
    except tkinter.TclError:
        return False


def report_fatal(
        exc_type: Type[BaseException],
        exc: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """
    sys.excepthook replacement.

    KeyboardInterrupt keeps the interpreter's default handling.
    """
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return

    details = "".join(traceback.format_exception(exc_type, exc, tb))
    logger.critical(f"Unhandled {exc_type.__name__}: {exc}\n{details}")

    if _wants_cli(sys.argv) or not _show_fatal_dialog(str(exc)):
        print(details, file=sys.stderr)


def main() -> int:
    sys.excepthook = report_fatal

    if _wants_cli(sys.argv):
        from filesearch.interface.cli.app import main as run_cli
        return run_cli(sys.argv[1:])

    from filesearch.interface.gui.app import main as run_gui
    run_gui()
    return 0


if __name__ == "__main__":
    sys.exit(main())
