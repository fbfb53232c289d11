"""
Sample buttons that render content, image and title insets.

Qt buttons have no per-element insets, so InsetButton lays out and paints its
image and title itself:
- content insets shrink the box the image+title pair is centred in and grow
  the size hint;
- image/title insets shrink that element's natural rect and the element is
  centred in what is left, so it moves by half the difference of opposite edges.
"""

from __future__ import annotations

from PySide6.QtCore import QPoint, QRect, QSize, Qt
from PySide6.QtGui import QColor, QFontMetrics, QPainter, QPaintEvent, QPixmap
from PySide6.QtWidgets import QSizePolicy, QVBoxLayout, QWidget

from button_insets.core.insets import EdgeInsets, InsetCategory
from button_insets.ui.theme.tokens import Tokens

IMAGE_SIZE = QSize(24, 24)


def inset_rect(rect: QRect, insets: EdgeInsets) -> QRect:
    return rect.adjusted(insets.left, insets.top, -insets.right, -insets.bottom)


def offset_by_insets(rect: QRect, insets: EdgeInsets) -> QRect:
    """Centre ``rect`` inside ``inset_rect(rect, insets)`` without resizing it."""
    dx = int((insets.left - insets.right) / 2)
    dy = int((insets.top - insets.bottom) / 2)
    return rect.translated(dx, dy)


def layout_button(
    bounds: QRect,
    image_size: QSize,
    title_size: QSize,
    content: EdgeInsets,
    image: EdgeInsets,
    title: EdgeInsets,
) -> tuple[QRect, QRect]:
    """Return (image_rect, title_rect); an empty size yields an empty rect."""
    box = inset_rect(bounds, content)
    center = box.center()
    total_width = image_size.width() + title_size.width()
    left = center.x() - total_width // 2

    image_rect = QRect(
        QPoint(left, center.y() - image_size.height() // 2), image_size
    )
    title_rect = QRect(
        QPoint(left + image_size.width(), center.y() - title_size.height() // 2), title_size
    )
    return offset_by_insets(image_rect, image), offset_by_insets(title_rect, title)


def _sample_pixmap() -> QPixmap:
    pixmap = QPixmap(IMAGE_SIZE)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QColor(Tokens.sample_image))
    painter.drawRoundedRect(pixmap.rect(), 5, 5)
    painter.setBrush(QColor("#ffffff"))
    painter.drawEllipse(pixmap.rect().adjusted(7, 7, -7, -7))
    painter.end()
    return pixmap


class InsetButton(QWidget):
    def __init__(
        self,
        title: str | None = None,
        with_image: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._title = title
        self._pixmap = _sample_pixmap() if with_image else None
        self._insets: dict[InsetCategory, EdgeInsets] = {c: EdgeInsets.zero() for c in InsetCategory}
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def insets(self, category: InsetCategory) -> EdgeInsets:
        return self._insets[category]

    def set_insets(self, category: InsetCategory, insets: EdgeInsets) -> None:
        if self._insets[category] == insets:
            return
        self._insets[category] = insets
        if category is InsetCategory.CONTENT:
            self.updateGeometry()
        self.update()

    def _image_size(self) -> QSize:
        return IMAGE_SIZE if self._pixmap is not None else QSize(0, 0)

    def _title_size(self) -> QSize:
        if not self._title:
            return QSize(0, 0)
        metrics = QFontMetrics(self.font())
        return QSize(metrics.horizontalAdvance(self._title), metrics.height())

    def element_rects(self) -> tuple[QRect, QRect]:
        return layout_button(
            self.rect(),
            self._image_size(),
            self._title_size(),
            self._insets[InsetCategory.CONTENT],
            self._insets[InsetCategory.IMAGE],
            self._insets[InsetCategory.TITLE],
        )

    def sizeHint(self) -> QSize:
        content = self._insets[InsetCategory.CONTENT]
        image, title = self._image_size(), self._title_size()
        width = image.width() + title.width() + content.left + content.right
        height = max(image.height(), title.height()) + content.top + content.bottom
        return QSize(max(width, 0), max(height, 0))

    def minimumSizeHint(self) -> QSize:
        return self.sizeHint()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(Tokens.sample_button))
        image_rect, title_rect = self.element_rects()
        if self._pixmap is not None:
            painter.drawPixmap(image_rect, self._pixmap)
        if self._title:
            painter.setPen(QColor(Tokens.sample_button_text))
            painter.drawText(title_rect, Qt.AlignmentFlag.AlignCenter, self._title)
        painter.end()


class ButtonsView(QWidget):
    """Title-only, image+title and image-only sample buttons, top to bottom."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.text_button = InsetButton(title="Button", parent=self)
        self.both_button = InsetButton(title="Button", with_image=True, parent=self)
        self.image_button = InsetButton(with_image=True, parent=self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, Tokens.space_sm, 0, Tokens.space_sm)
        layout.addWidget(self.text_button, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)
        layout.addWidget(self.both_button, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)
        layout.addWidget(self.image_button, 0, Qt.AlignmentFlag.AlignHCenter)

    def buttons(self) -> tuple[InsetButton, ...]:
        return (self.text_button, self.both_button, self.image_button)

    def set_insets(self, insets: EdgeInsets, category: InsetCategory) -> None:
        for button in self.buttons():
            button.set_insets(category, insets)
