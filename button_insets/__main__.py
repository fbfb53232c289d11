"""
Entry point for the Qt-based Button Insets Lab.

Run: python main.py  (or python -m button_insets, or button-insets)
"""
from __future__ import annotations

import logging
import sys

from button_insets.core.observability.logging_config import setup_logging
from button_insets.core.version import get_version_string
from button_insets.ui.infrastructure import (
    AppSettings,
    Container,
    NotificationCenter,
    create_application,
    install_error_boundary,
)
from button_insets.ui.infrastructure.application import run_application
from button_insets.ui.shell import MainWindow
from button_insets.ui.theme.manager import ThemeManager

log = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    log.info("Starting Button Insets Lab %s", get_version_string())
    app = create_application()
    settings = AppSettings()
    theme_manager = ThemeManager(settings)
    theme_manager.set_theme(settings.get_theme())

    container = Container()
    container.theme_manager = theme_manager
    app.aboutToQuit.connect(container.shutdown)

    window = MainWindow(settings, container=container)
    window.show()

    notifications = NotificationCenter(window)
    container.notifications = notifications
    install_error_boundary(notifications)

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
