"""
Design tokens: colors, spacing, radius. One TokenSet per theme; the current set
is updated in place by ThemeManager so widgets can read ``Tokens.<name>``.
"""
from __future__ import annotations


class TokenSet:
    __slots__ = (
        "background_main", "surface", "surface_hover",
        "primary", "primary_hover",
        "text_primary", "text_secondary",
        "border",
        "sample_button", "sample_button_text", "sample_image",
        "space_xs", "space_sm", "space_md", "space_lg", "space_xl",
        "radius_sm", "radius_md", "radius_lg",
        "card_padding", "border_width",
    )

    def __init__(
        self,
        *,
        background_main: str = "#f1f5f9",
        surface: str = "#d4d4d8",
        surface_hover: str = "#e4e4e7",
        primary: str = "#2563eb",
        primary_hover: str = "#3b82f6",
        text_primary: str = "#0f172a",
        text_secondary: str = "#52525b",
        border: str = "#a1a1aa",
        sample_button: str = "#ef4444",
        sample_button_text: str = "#ffffff",
        sample_image: str = "#1e3a8a",
        space_xs: int = 4,
        space_sm: int = 8,
        space_md: int = 10,
        space_lg: int = 30,
        space_xl: int = 50,
        radius_sm: int = 4,
        radius_md: int = 8,
        radius_lg: int = 12,
        card_padding: int = 12,
        border_width: int = 1,
    ) -> None:
        self.background_main = background_main
        self.surface = surface
        self.surface_hover = surface_hover
        self.primary = primary
        self.primary_hover = primary_hover
        self.text_primary = text_primary
        self.text_secondary = text_secondary
        self.border = border
        self.sample_button = sample_button
        self.sample_button_text = sample_button_text
        self.sample_image = sample_image
        self.space_xs = space_xs
        self.space_sm = space_sm
        self.space_md = space_md
        self.space_lg = space_lg
        self.space_xl = space_xl
        self.radius_sm = radius_sm
        self.radius_md = radius_md
        self.radius_lg = radius_lg
        self.card_padding = card_padding
        self.border_width = border_width

    def copy_into(self, target: TokenSet) -> None:
        """Copy this set's values into target (mutates target)."""
        for key in self.__slots__:
            setattr(target, key, getattr(self, key))


LIGHT = TokenSet()

DARK = TokenSet(
    background_main="#1a1b26",
    surface="#252736",
    surface_hover="#2d2e3d",
    primary="#3b82f6",
    primary_hover="#60a5fa",
    text_primary="#e2e8f0",
    text_secondary="#94a3b8",
    border="#334155",
    sample_button="#dc2626",
    sample_button_text="#ffffff",
    sample_image="#93c5fd",
)

# Current tokens: mutable, updated by ThemeManager.
Tokens: TokenSet = TokenSet()
LIGHT.copy_into(Tokens)


def apply_token_set(source: TokenSet) -> None:
    source.copy_into(Tokens)
