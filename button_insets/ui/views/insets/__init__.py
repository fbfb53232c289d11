"""Inset editors: edge slider, per-category card, all categories."""

from button_insets.ui.views.insets.all_insets_view import AllInsetsView
from button_insets.ui.views.insets.edge_slider import EdgeSliderView
from button_insets.ui.views.insets.insets_view import InsetsView

__all__ = ["AllInsetsView", "EdgeSliderView", "InsetsView"]
