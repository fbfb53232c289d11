"""
QApplication setup: High DPI, organization and app name for QSettings.
"""

from __future__ import annotations

import sys
from typing import NoReturn

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from button_insets.config import APPLICATION_NAME, ORGANIZATION_NAME
from button_insets.core.version import get_version


def create_application(argv: list[str] | None = None) -> QApplication:
    """Create and configure QApplication. Call before any Qt widgets."""
    existing = QApplication.instance()
    if isinstance(existing, QApplication):
        return existing
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName(APPLICATION_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationVersion(get_version())
    return app


def run_application(app: QApplication) -> NoReturn:
    """Run the event loop. Does not return until app quits."""
    sys.exit(app.exec())
