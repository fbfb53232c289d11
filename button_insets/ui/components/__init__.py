"""Reusable UI components: card, primary button, slider and label inputs."""

from button_insets.ui.components.buttons import PrimaryButton
from button_insets.ui.components.cards import Card
from button_insets.ui.components.inputs import DoubleClickLabel, NoWheelSlider

__all__ = [
    "Card",
    "PrimaryButton",
    "DoubleClickLabel",
    "NoWheelSlider",
]
