"""
Inset category editor: four edge sliders feeding one EdgeInsets value.
"""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWidgets import QHBoxLayout, QWidget

from button_insets.core.insets import EdgeInsets, InsetCategory, InsetEdge, update
from button_insets.ui.components.cards import Card
from button_insets.ui.infrastructure.tick_scheduler import TickScheduler
from button_insets.ui.theme.tokens import Tokens
from button_insets.ui.views.insets.edge_slider import EdgeSliderView

# Row layout of the sliders inside the card
EDGE_ROWS: tuple[tuple[InsetEdge, ...], ...] = (
    (InsetEdge.TOP, InsetEdge.BOTTOM),
    (InsetEdge.LEFT, InsetEdge.RIGHT),
)


class InsetsView(Card):
    """Holds the authoritative insets of one category and reports every change upward."""

    def __init__(
        self,
        category: InsetCategory,
        on_change: Callable[[EdgeInsets], None],
        scheduler: TickScheduler,
        parent: QWidget | None = None,
    ) -> None:
        assert isinstance(category, InsetCategory), f"not an inset category: {category!r}"
        super().__init__(category.display_name, parent)
        self._category = category
        self._on_change = on_change
        self._current = EdgeInsets.zero()
        self._sliders: dict[InsetEdge, EdgeSliderView] = {}

        for edges in EDGE_ROWS:
            row = QWidget(self)
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)
            row_layout.setSpacing(Tokens.space_md)
            for edge in edges:
                slider = EdgeSliderView(
                    edge,
                    on_change=lambda value, e=edge: self.edge_inset(e, value),
                    scheduler=scheduler,
                    parent=row,
                )
                self._sliders[edge] = slider
                row_layout.addWidget(slider)
            row_layout.addStretch(1)
            self.layout().addWidget(row)

    @property
    def category(self) -> InsetCategory:
        return self._category

    @property
    def current_insets(self) -> EdgeInsets:
        return self._current

    def slider(self, edge: InsetEdge) -> EdgeSliderView:
        return self._sliders[edge]

    def edge_inset(self, edge: InsetEdge, value: int) -> None:
        self._current = update(self._current, edge, value)
        self._on_change(self._current)

    def reset(self) -> None:
        for slider in self._sliders.values():
            slider.reset()

    def tick(self) -> None:
        for slider in self._sliders.values():
            slider.tick()
