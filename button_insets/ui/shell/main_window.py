"""
Main window: sample buttons on top, inset editors below, Reset at the bottom.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QByteArray
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QLabel, QMainWindow, QScrollArea, QStatusBar, QVBoxLayout, QWidget

from button_insets.core.insets import EdgeInsets, InsetCategory
from button_insets.core.version import get_version_string
from button_insets.ui.components.buttons import PrimaryButton
from button_insets.ui.infrastructure.di import Container
from button_insets.ui.infrastructure.settings import AppSettings
from button_insets.ui.theme.tokens import Tokens
from button_insets.ui.views.insets.all_insets_view import AllInsetsView
from button_insets.ui.views.preview import ButtonsView

if TYPE_CHECKING:
    from button_insets.ui.infrastructure.tick_scheduler import TickScheduler

log = logging.getLogger(__name__)

STATUS_HINT = "Double-click an edge name to animate it  |  Ctrl+Shift+Space: animate all  |  Ctrl+T: theme"


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings, container: Container | None = None) -> None:
        super().__init__()
        self._settings = settings
        self._container = container if container is not None else Container()
        self.setWindowTitle(f"Button Insets Lab {get_version_string()}")
        self.setMinimumSize(420, 640)
        self.resize(480, 860)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(Tokens.space_lg, 0, Tokens.space_lg, 0)
        layout.setSpacing(Tokens.space_xl)

        self.buttons_view = ButtonsView(central)
        self.all_insets_view = AllInsetsView(
            on_change=self._on_insets_changed,
            scheduler=self.tick_scheduler,
        )
        scroll = QScrollArea(central)
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.all_insets_view)
        self.reset_button = PrimaryButton("Reset", central)
        self.reset_button.clicked.connect(self.reset)

        layout.addWidget(self.buttons_view, 3)
        layout.addWidget(scroll, 7)
        layout.addWidget(self.reset_button)

        status = QStatusBar(self)
        status.showMessage(STATUS_HINT)
        self._ticks_label = QLabel(self)
        status.addPermanentWidget(self._ticks_label)
        self.setStatusBar(status)
        self.tick_scheduler.active_count_changed.connect(self._on_active_ticks_changed)
        self._on_active_ticks_changed(self.tick_scheduler.active_count)

        self._setup_shortcuts()
        self._restore_geometry()

    @property
    def tick_scheduler(self) -> TickScheduler:
        return self._container.tick_scheduler

    def _setup_shortcuts(self) -> None:
        animate_all = QAction(self)
        animate_all.setShortcut(QKeySequence("Ctrl+Shift+Space"))
        animate_all.triggered.connect(self.animate_all)
        self.addAction(animate_all)
        toggle_theme = QAction(self)
        toggle_theme.setShortcut(QKeySequence("Ctrl+T"))
        toggle_theme.triggered.connect(self._toggle_theme)
        self.addAction(toggle_theme)

    def _on_insets_changed(self, category: InsetCategory, insets: EdgeInsets) -> None:
        self.buttons_view.set_insets(insets, category)

    def _on_active_ticks_changed(self, count: int) -> None:
        self._ticks_label.setText(f"Animations: {count}")

    def animate_all(self) -> None:
        self.tick_scheduler.schedule(self.all_insets_view.tick)

    def reset(self) -> None:
        self.all_insets_view.reset()
        self.tick_scheduler.cancel_all()
        if self._container.notifications is not None:
            self._container.notifications.info("Insets reset")

    def _toggle_theme(self) -> None:
        theme_mgr = self._container.theme_manager
        if theme_mgr is not None:
            theme_mgr.toggle()
            self.buttons_view.update()

    def _restore_geometry(self) -> None:
        geom = self._settings.get_main_window_geometry()
        if isinstance(geom, QByteArray) and not geom.isEmpty():
            self.restoreGeometry(geom)

    def _save_geometry(self) -> None:
        self._settings.set_main_window_geometry(self.saveGeometry())
        self._settings.sync()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.tick_scheduler.cancel_all()
        self._save_geometry()
        super().closeEvent(event)
