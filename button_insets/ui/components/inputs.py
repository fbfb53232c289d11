"""
Input widgets for the inset editors.
NoWheelSlider: scrolling the editor must not nudge sliders under the cursor.
DoubleClickLabel: label that reports double clicks (starts auto-tick).
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent, QWheelEvent
from PySide6.QtWidgets import QLabel, QSlider, QWidget


class NoWheelSlider(QSlider):
    """Slider that ignores the mouse wheel."""

    def __init__(
        self,
        orientation: Qt.Orientation = Qt.Orientation.Horizontal,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(orientation, parent)

    def wheelEvent(self, event: QWheelEvent) -> None:
        event.ignore()


class DoubleClickLabel(QLabel):
    double_clicked = Signal()

    def __init__(self, text: str = "", parent: QWidget | None = None) -> None:
        super().__init__(text, parent)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.double_clicked.emit()
            event.accept()
            return
        super().mouseDoubleClickEvent(event)
