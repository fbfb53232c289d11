"""
Card container for one inset category. Styling from app stylesheet (#card).
"""
from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from button_insets.ui.theme.tokens import Tokens


class Card(QFrame):
    """Frame with surface background, border, radius and an optional title row."""

    def __init__(self, title: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        t = Tokens
        self.setObjectName("card")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(t.card_padding, t.card_padding, t.card_padding, t.card_padding)
        self._layout.setSpacing(t.space_sm)
        self._title: QLabel | None = None
        if title:
            self._title = QLabel(title, self)
            self._title.setObjectName("categoryTitle")
            self._layout.addWidget(self._title)

    def title(self) -> str:
        return self._title.text() if self._title is not None else ""

    def layout(self) -> QVBoxLayout:
        return self._layout
