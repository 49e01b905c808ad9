"""
Hex color conversions for the target config formats.
"""

from __future__ import annotations
import re

_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


class InvalidColorError(ValueError):
    """Raised for anything other than '#' followed by six hex digits."""

    def __init__(self, value):
        super().__init__(f"Invalid color {value!r}, expected #RRGGBB")
        self.value = value


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """Split '#RRGGBB' into 0-255 channel values."""
    if not isinstance(hex_color, str) or not _HEX_RE.fullmatch(hex_color):
        raise InvalidColorError(hex_color)
    return tuple(int(hex_color[i:i + 2], 16) for i in (1, 3, 5))


def hex_to_iterm_dict(hex_color: str) -> dict:
    """iTerm2 color dictionary: 0-1 components, opaque, sRGB."""
    r, g, b = parse_hex(hex_color)
    return {
        "Red Component": r / 255,
        "Green Component": g / 255,
        "Blue Component": b / 255,
        "Alpha Component": 1,
        "Color Space": "sRGB",
    }


def hex_to_rgb16(hex_color: str) -> tuple[int, int, int]:
    """Scale channels to 16 bits (0-65535), as AppleScript colors expect."""
    return tuple(channel * 257 for channel in parse_hex(hex_color))


def rgb16_literal(hex_color: str) -> str:
    """AppleScript color record, e.g. '{65535, 0, 0}'."""
    r, g, b = hex_to_rgb16(hex_color)
    return f"{{{r}, {g}, {b}}}"
