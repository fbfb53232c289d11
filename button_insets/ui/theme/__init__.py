"""Theme tokens and ThemeManager for Qt UI."""

from button_insets.ui.theme.manager import THEME_DARK, THEME_LIGHT, ThemeManager
from button_insets.ui.theme.tokens import Tokens, TokenSet, apply_token_set

__all__ = [
    "Tokens",
    "TokenSet",
    "apply_token_set",
    "ThemeManager",
    "THEME_DARK",
    "THEME_LIGHT",
]
