from __future__ import annotations

import logging
from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication

from caffeine.di.container import Container
from caffeine.utils.constants import APP_NAME, APP_ORG, LOG_FORMAT

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    # before the container: config loading logs its own warnings
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    container = Container.default()
    logging.getLogger().setLevel(container.settings.log_level)
    logger.debug("Config loaded from %s", getattr(container.config, "loaded_from", None))

    win = container.build_main_window()
    win.show()

    return app.exec()
