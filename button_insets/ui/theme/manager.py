"""
ThemeManager: light/dark token sets, runtime switch, QPalette and application stylesheet.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from button_insets.ui.theme.tokens import DARK, LIGHT, Tokens, TokenSet, apply_token_set

if TYPE_CHECKING:
    from button_insets.ui.infrastructure.settings import AppSettings

log = logging.getLogger(__name__)

THEME_DARK = "dark"
THEME_LIGHT = "light"


class ThemeManager(QObject):
    """Applies tokens, palette and global stylesheet; emits theme_changed. Injected via Container."""

    theme_changed = Signal(str)

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings
        self._current: str | None = None

    def get_theme(self) -> str:
        return self._current or THEME_LIGHT

    def set_theme(self, name: str) -> None:
        if name not in (THEME_DARK, THEME_LIGHT):
            name = THEME_LIGHT
        if name == self._current:
            return
        self._current = name
        source = DARK if name == THEME_DARK else LIGHT
        apply_token_set(source)
        self._apply_palette(source)
        self._apply_stylesheet(source)
        if self._settings:
            self._settings.set_theme(name)
            self._settings.sync()
        log.info("Theme set to %s", name)
        self.theme_changed.emit(name)

    def toggle(self) -> None:
        self.set_theme(THEME_LIGHT if self.get_theme() == THEME_DARK else THEME_DARK)

    def tokens(self) -> TokenSet:
        return Tokens

    def _apply_palette(self, t: TokenSet) -> None:
        app = QApplication.instance()
        if not isinstance(app, QApplication):
            return
        pal = QPalette()
        pal.setColor(QPalette.ColorRole.Window, QColor(t.background_main))
        pal.setColor(QPalette.ColorRole.Base, QColor(t.surface))
        pal.setColor(QPalette.ColorRole.Button, QColor(t.surface_hover))
        pal.setColor(QPalette.ColorRole.WindowText, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.ButtonText, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.Text, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.Highlight, QColor(t.primary))
        app.setPalette(pal)

    def _apply_stylesheet(self, t: TokenSet) -> None:
        app = QApplication.instance()
        if not isinstance(app, QApplication):
            return
        app.setStyleSheet(_build_application_stylesheet(t))


def _build_application_stylesheet(t: TokenSet) -> str:
    """Single global stylesheet so every widget follows a theme switch."""
    return f"""
        QWidget, QMainWindow {{
            background-color: {t.background_main};
            color: {t.text_primary};
        }}
        QLabel {{
            color: {t.text_primary};
            background: transparent;
        }}
        #edgeLabel {{
            font-size: 12px;
            color: {t.text_secondary};
        }}
        #edgeValue {{
            font-family: monospace;
        }}
        #categoryTitle {{
            font-weight: 600;
        }}
        QSlider::groove:horizontal {{
            height: 4px;
            background: {t.border};
            border-radius: 2px;
        }}
        QSlider::handle:horizontal {{
            background: {t.primary};
            width: 14px;
            margin: -6px 0;
            border-radius: 7px;
        }}
        #primaryButton {{
            background-color: transparent;
            color: {t.primary};
            border: none;
            font-weight: 600;
            min-height: 50px;
        }}
        #primaryButton:hover {{
            color: {t.primary_hover};
        }}
        #card {{
            background-color: {t.surface};
            border: {t.border_width}px solid {t.border};
            border-radius: {t.radius_lg}px;
        }}
    """
