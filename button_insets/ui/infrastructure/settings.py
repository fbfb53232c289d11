"""
QSettings wrapper: main window geometry and theme. Inset values are not stored.
"""
from __future__ import annotations

from typing import cast

from PySide6.QtCore import QByteArray, QSettings

from button_insets.config import APPLICATION_NAME, ORGANIZATION_NAME


class AppSettings:
    """Window and theme persistence via QSettings (platform-specific path)."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._q = qsettings if qsettings is not None else QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    # --- Main window ---
    def get_main_window_geometry(self) -> QByteArray | None:
        return cast(QByteArray | None, self._q.value("mainWindow/geometry", None, QByteArray))

    def set_main_window_geometry(self, geometry: QByteArray) -> None:
        self._q.setValue("mainWindow/geometry", geometry)

    # --- Theme ---
    def get_theme(self) -> str:
        return str(self._q.value("theme/name", "light", str))  # "dark" | "light"

    def set_theme(self, name: str) -> None:
        self._q.setValue("theme/name", name)

    def sync(self) -> None:
        self._q.sync()
