from __future__ import annotations

import logging

from PySide6.QtWidgets import QMainWindow, QMessageBox

log = logging.getLogger(__name__)


class NotificationCenter:
    """Status-bar messages for the main window; errors also open a message box."""

    def __init__(self, window: QMainWindow) -> None:
        self._window = window

    def _status(self, text: str, *, ms: int = 4500) -> None:
        bar = self._window.statusBar()
        if bar is not None:
            bar.showMessage(text, ms)

    def info(self, message: str) -> None:
        self._status(message)

    def error(self, message: str) -> None:
        self._status(message)
        try:
            QMessageBox.critical(self._window, "Error", message)
        except RuntimeError:
            # Window already deleted by Qt during shutdown.
            log.debug("Error dialog not shown", exc_info=True)
