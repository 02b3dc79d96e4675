from __future__ import annotations

"""
Main Application Window Factory.
"""

import customtkinter as ctk

from filesearch.domain import constants as const
from filesearch.utils.i18n import i18n

DEFAULT_SIZE = (900, 650)
MIN_SIZE = (600, 400)


def create_main_window(size: tuple = DEFAULT_SIZE) -> ctk.CTk:
    """
    Build the root window, centred on the primary screen.

    The window exposes a single stretchable grid cell that hosts the
    SearchFrame.

    Args:
        size: Initial (width, height) in pixels.

    Returns:
        ctk.CTk: Root window, not yet in its main loop.
    """
    ctk.set_appearance_mode("System")
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(f"{i18n.t('gui.title')} {const.APP_VERSION}")

    width, height = size
    x = max((app.winfo_screenwidth() - width) // 2, 0)
    y = max((app.winfo_screenheight() - height) // 3, 0)
    app.geometry(f"{width}x{height}+{x}+{y}")
    app.minsize(*MIN_SIZE)

    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)
    return app
