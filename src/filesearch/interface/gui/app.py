from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes logging, recovers the last search from the cache, assembles
the window and binds the SearchController before entering the Tk loop.
"""

import logging

from filesearch.core.services.validator import validate_config
from filesearch.domain import config as cfg
from filesearch.domain import constants as const
from filesearch.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_gui_log_path,
)
from filesearch.interface.gui.components.main_window import create_main_window
from filesearch.interface.gui.components.search_frame import SearchFrame
from filesearch.interface.gui.controllers.search_controller import SearchController
from filesearch.utils.i18n import i18n

logger = logging.getLogger(__name__)


def main() -> None:
    """Initialize and launch the Graphical User Interface."""
    # PHASE 1: Diagnostics
    configure_logging(LoggingConfig.for_gui(get_default_gui_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{const.APP_VERSION}")

    # PHASE 2: Persistent state recovery
    config, warnings = validate_config(cfg.load_config())
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")
    if config["locale"] != i18n.locale:
        i18n.load_locale(config["locale"])

    # PHASE 3: View construction
    app = create_main_window()
    view = SearchFrame(app, config)
    view.grid(row=0, column=0, sticky="nsew", padx=20, pady=20)

    # PHASE 4: Controller binding and loop entry
    controller = SearchController(app, view, config)
    controller.bind()

    app.mainloop()
    logger.info("GUI Lifecycle: Closed.")
