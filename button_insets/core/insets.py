"""Inset state model: edges, categories and the four-field inset value.

Qt-free on purpose so the model can be tested without a display.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from button_insets.config import INSET_MAX, INSET_MIN


class InsetEdge(str, Enum):
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"

    @property
    def display_name(self) -> str:
        return self.value


class InsetCategory(str, Enum):
    """Which button property a quadruple is applied to. Order = display order."""

    CONTENT = "contentEdgeInsets"
    IMAGE = "imageEdgeInsets"
    TITLE = "titleEdgeInsets"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class EdgeInsets:
    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    @classmethod
    def zero(cls) -> EdgeInsets:
        return cls()

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.top, self.left, self.bottom, self.right)


def update(current: EdgeInsets, edge: InsetEdge, value: int) -> EdgeInsets:
    """Return ``current`` with only ``edge`` replaced by ``value``.

    No range check: producers clamp with :func:`clamp_inset_value` first.
    """
    if edge is InsetEdge.TOP:
        return replace(current, top=value)
    if edge is InsetEdge.LEFT:
        return replace(current, left=value)
    if edge is InsetEdge.BOTTOM:
        return replace(current, bottom=value)
    return replace(current, right=value)


def clamp_inset_value(raw: float) -> int:
    """Clamp ``raw`` to [INSET_MIN, INSET_MAX] and round half away from zero.

    NaN maps to 0, the neutral inset.
    """
    raw = float(raw)
    if math.isnan(raw):
        return 0
    clamped = max(float(INSET_MIN), min(float(INSET_MAX), raw))
    return int(math.copysign(math.floor(abs(clamped) + 0.5), clamped))
