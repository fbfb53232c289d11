"""
One edge of one inset category: label, slider [-25, 25], numeric readout.

Every value change (drag, set_value, reset, tick) runs through ``_apply`` so the
slider position, the readout and the callback never disagree.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QWidget

from button_insets.config import INSET_MAX, INSET_MIN
from button_insets.core.insets import InsetEdge, clamp_inset_value
from button_insets.ui.components.inputs import DoubleClickLabel, NoWheelSlider
from button_insets.ui.infrastructure.tick_scheduler import TickScheduler
from button_insets.ui.theme.tokens import Tokens

log = logging.getLogger(__name__)


class EdgeSliderView(QWidget):
    def __init__(
        self,
        edge: InsetEdge,
        on_change: Callable[[int], None],
        scheduler: TickScheduler,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._edge = edge
        self._on_change = on_change
        self._scheduler = scheduler
        self._ticking_up = True

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Tokens.space_sm)

        self._label = DoubleClickLabel(edge.display_name, self)
        self._label.setObjectName("edgeLabel")
        self._label.setToolTip("Double-click to animate")
        self._label.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Preferred)
        self._label.double_clicked.connect(self._on_label_double_clicked)

        self._slider = NoWheelSlider(Qt.Orientation.Horizontal, self)
        self._slider.setRange(INSET_MIN, INSET_MAX)
        self._slider.setValue(0)
        self._slider.setFixedWidth(80)
        self._slider.valueChanged.connect(self._apply)

        self._value_label = QLabel("0", self)
        self._value_label.setObjectName("edgeValue")
        self._value_label.setFixedWidth(30)

        layout.addWidget(self._label)
        layout.addWidget(self._slider)
        layout.addWidget(self._value_label)

    @property
    def edge(self) -> InsetEdge:
        return self._edge

    @property
    def ticking_up(self) -> bool:
        return self._ticking_up

    def value(self) -> int:
        return self._slider.value()

    def value_text(self) -> str:
        return self._value_label.text()

    def set_value(self, raw: float) -> None:
        """Programmatic drag: same path as moving the slider by hand."""
        self._apply(raw)

    def reset(self) -> None:
        self._apply(0)

    def tick(self) -> None:
        value = self._slider.value()
        if value >= INSET_MAX:
            self._ticking_up = False
        if value <= INSET_MIN:
            self._ticking_up = True
        self._apply(value + 1 if self._ticking_up else value - 1)

    def start_auto_tick(self) -> None:
        log.debug("Auto-tick started for %s", self._edge.value, extra={"edge": self._edge.value})
        self._scheduler.schedule(self.tick)

    def _on_label_double_clicked(self) -> None:
        self.start_auto_tick()

    def _apply(self, raw: float) -> None:
        value = clamp_inset_value(raw)
        if self._slider.value() != value:
            # valueChanged would re-enter _apply and fire the callback twice.
            was_blocked = self._slider.blockSignals(True)
            try:
                self._slider.setValue(value)
            finally:
                self._slider.blockSignals(was_blocked)
        self._value_label.setText(str(value))
        self._on_change(value)
