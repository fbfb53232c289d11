"""
All inset categories stacked vertically; multiplexes their changes into (category, insets).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtWidgets import QVBoxLayout, QWidget

from button_insets.core.insets import EdgeInsets, InsetCategory
from button_insets.ui.infrastructure.tick_scheduler import TickScheduler
from button_insets.ui.theme.tokens import Tokens
from button_insets.ui.views.insets.insets_view import InsetsView

log = logging.getLogger(__name__)


class AllInsetsView(QWidget):
    def __init__(
        self,
        on_change: Callable[[InsetCategory, EdgeInsets], None],
        scheduler: TickScheduler,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_change = on_change
        self._views: dict[InsetCategory, InsetsView] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Tokens.space_lg)
        for category in InsetCategory:
            view = InsetsView(
                category,
                on_change=lambda insets, c=category: self._on_change(c, insets),
                scheduler=scheduler,
                parent=self,
            )
            self._views[category] = view
            layout.addWidget(view)

    def view(self, category: InsetCategory) -> InsetsView:
        return self._views[category]

    def insets(self, category: InsetCategory) -> EdgeInsets:
        return self._views[category].current_insets

    def reset(self) -> None:
        log.info("Resetting all insets")
        for view in self._views.values():
            view.reset()

    def tick(self) -> None:
        for view in self._views.values():
            view.tick()
