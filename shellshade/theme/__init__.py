"""
Theme model, lookup and color conversions.
"""

from .engine import (
    ANSI_NAMES,
    DEFAULT_COLORS,
    AnsiPalette,
    ColorSet,
    ThemeFile,
    lookup_theme,
    slugify,
)
from .codec import InvalidColorError, hex_to_iterm_dict, hex_to_rgb16, rgb16_literal

__all__ = [
    "ANSI_NAMES",
    "DEFAULT_COLORS",
    "AnsiPalette",
    "ColorSet",
    "ThemeFile",
    "lookup_theme",
    "slugify",
    "InvalidColorError",
    "hex_to_iterm_dict",
    "hex_to_rgb16",
    "rgb16_literal",
]
