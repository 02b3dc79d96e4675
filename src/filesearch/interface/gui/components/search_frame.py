from __future__ import annotations

"""
Search View.

Input row (start directory, pattern, search/stop toggle), live progress
labels and the tree of found paths. The frame holds widgets only; all
behavior is bound by the SearchController.
"""

import tkinter.ttk as ttk
from typing import Any, Dict

import customtkinter as ctk

from filesearch.utils.i18n import i18n

# -----------------------------------------------------------------------------
# SEARCH VIEW CLASS
# -----------------------------------------------------------------------------

class SearchFrame(ctk.CTkFrame):
    """Main content frame of the application."""

    def __init__(self, master: Any, config: Dict[str, Any], **kwargs: Any):
        """
        Build the widget hierarchy.

        Args:
            master: Parent UI container.
            config: Session configuration providing the initial entry values.
        """
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        # --- Request inputs ---
        frame_inputs = ctk.CTkFrame(self)
        frame_inputs.grid(row=0, column=0, sticky="ew", pady=(0, 10))
        frame_inputs.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(frame_inputs, text=i18n.t("gui.labels.start_directory")).grid(
            row=0, column=0, padx=10, pady=(10, 5), sticky="w"
        )
        self.entry_directory = ctk.CTkEntry(frame_inputs, placeholder_text="/path/to/search")
        self.entry_directory.insert(0, config.get("root_directory", ""))
        self.entry_directory.grid(row=0, column=1, padx=10, pady=(10, 5), sticky="ew")

        self.btn_browse = ctk.CTkButton(frame_inputs, text=i18n.t("gui.buttons.browse"), width=90)
        self.btn_browse.grid(row=0, column=2, padx=10, pady=(10, 5))

        ctk.CTkLabel(frame_inputs, text=i18n.t("gui.labels.pattern")).grid(
            row=1, column=0, padx=10, pady=(5, 10), sticky="w"
        )
        self.entry_pattern = ctk.CTkEntry(frame_inputs, placeholder_text="*.txt")
        self.entry_pattern.insert(0, config.get("pattern", ""))
        self.entry_pattern.grid(row=1, column=1, padx=10, pady=(5, 10), sticky="ew")

        self.btn_search = ctk.CTkButton(
            frame_inputs,
            text=i18n.t("gui.buttons.search"),
            width=90,
            font=ctk.CTkFont(weight="bold"),
        )
        self.btn_search.grid(row=1, column=2, padx=10, pady=(5, 10))

        # --- Progress labels ---
        self.lbl_current_dir = ctk.CTkLabel(
            self,
            text=i18n.t("gui.labels.current_directory", path=""),
            anchor="w",
        )
        self.lbl_current_dir.grid(row=1, column=0, sticky="ew", padx=10)

        frame_stats = ctk.CTkFrame(self, fg_color="transparent")
        frame_stats.grid(row=2, column=0, sticky="ew", padx=10, pady=(0, 10))

        self.lbl_total = ctk.CTkLabel(frame_stats, text=i18n.t("gui.labels.total_files", count=0))
        self.lbl_total.pack(side="left", padx=(0, 20))
        self.lbl_matched = ctk.CTkLabel(frame_stats, text=i18n.t("gui.labels.matched_files", count=0))
        self.lbl_matched.pack(side="left", padx=(0, 20))
        self.lbl_elapsed = ctk.CTkLabel(
            frame_stats,
            text=i18n.t("gui.labels.elapsed", elapsed="00:00:00"),
        )
        self.lbl_elapsed.pack(side="right")

        # --- Found paths tree ---
        frame_tree = ctk.CTkFrame(self)
        frame_tree.grid(row=3, column=0, sticky="nsew")
        frame_tree.grid_columnconfigure(0, weight=1)
        frame_tree.grid_rowconfigure(0, weight=1)

        self.tree_view = ttk.Treeview(frame_tree, show="tree", selectmode="browse")
        self.tree_view.grid(row=0, column=0, sticky="nsew")

        scrollbar = ctk.CTkScrollbar(frame_tree, command=self.tree_view.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        self.tree_view.configure(yscrollcommand=scrollbar.set)

    def clear_tree(self) -> None:
        """Remove every item from the found-paths tree view."""
        children = self.tree_view.get_children("")
        if children:
            self.tree_view.delete(*children)

    def set_running(self, running: bool) -> None:
        """Toggle between Search and Stop modes of the action button."""
        key = "gui.buttons.stop" if running else "gui.buttons.search"
        self.btn_search.configure(text=i18n.t(key), state="normal")
        state = "disabled" if running else "normal"
        self.entry_directory.configure(state=state)
        self.entry_pattern.configure(state=state)
        self.btn_browse.configure(state=state)
