"""
Theme data model and lookup.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Iterable, Optional, Protocol

import yaml

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "Untitled"

# ANSI palette in index order (0-15), as named in storage and most targets
ANSI_NAMES = (
    "black", "red", "green", "yellow",
    "blue", "magenta", "cyan", "white",
    "brightBlack", "brightRed", "brightGreen", "brightYellow",
    "brightBlue", "brightMagenta", "brightCyan", "brightWhite",
)

# Storage key -> fallback hex, consulted once per missing key
DEFAULT_COLORS: dict[str, str] = {
    "background": "#000000",
    "foreground": "#ffffff",
    "cursor": "#ffffff",
    "cursorText": "#000000",
    "selection": "#444444",
    "selectionText": "#ffffff",
    "ansi_black": "#000000",
    "ansi_red": "#ff0000",
    "ansi_green": "#00ff00",
    "ansi_yellow": "#ffff00",
    "ansi_blue": "#0000ff",
    "ansi_magenta": "#ff00ff",
    "ansi_cyan": "#00ffff",
    "ansi_white": "#ffffff",
    "ansi_brightBlack": "#666666",
    "ansi_brightRed": "#ff6666",
    "ansi_brightGreen": "#66ff66",
    "ansi_brightYellow": "#ffff66",
    "ansi_brightBlue": "#6666ff",
    "ansi_brightMagenta": "#ff66ff",
    "ansi_brightCyan": "#66ffff",
    "ansi_brightWhite": "#ffffff",
}

# xterm.js ITheme keys that differ from storage keys
XTERM_KEY_MAP = {
    "cursorAccent": "cursorText",
    "selectionBackground": "selection",
    "selectionForeground": "selectionText",
    **{name: f"ansi_{name}" for name in ANSI_NAMES},
}

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase a theme name and collapse non-alphanumeric runs to '-'."""
    return _SLUG_RE.sub("-", name.lower())


def _snake(name: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "_" + m.group(1).lower(), name)


@dataclass(frozen=True)
class AnsiPalette:
    """The 16 indexed terminal colors."""
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str
    bright_black: str
    bright_red: str
    bright_green: str
    bright_yellow: str
    bright_blue: str
    bright_magenta: str
    bright_cyan: str
    bright_white: str

    def by_index(self) -> list[str]:
        """Colors ordered by ANSI index 0-15."""
        return [getattr(self, f.name) for f in fields(self)]

    def normal(self) -> list[str]:
        return self.by_index()[:8]

    def bright(self) -> list[str]:
        return self.by_index()[8:]


@dataclass(frozen=True)
class ColorSet:
    """Resolved colors for one theme, with every key filled in."""
    background: str
    foreground: str
    cursor: str
    cursor_text: str
    selection: str
    selection_text: str
    ansi: AnsiPalette

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str, str]]) -> ColorSet:
        """
        Build a color set from flat (key, hex) rows.

        Later rows overwrite earlier ones; missing or empty keys take the
        value from DEFAULT_COLORS.
        """
        stored = {key: value for key, value in rows}

        def pick(key: str) -> str:
            return stored.get(key) or DEFAULT_COLORS[key]

        palette = AnsiPalette(**{_snake(name): pick(f"ansi_{name}") for name in ANSI_NAMES})
        return cls(
            background=pick("background"),
            foreground=pick("foreground"),
            cursor=pick("cursor"),
            cursor_text=pick("cursorText"),
            selection=pick("selection"),
            selection_text=pick("selectionText"),
            ansi=palette,
        )


class ThemeSource(Protocol):
    """Read side of theme storage used by the installers."""

    def get_theme_colors(self, theme_id: str) -> dict[str, str]: ...

    def get_theme_name(self, theme_id: str) -> Optional[str]: ...


def lookup_theme(store: ThemeSource, theme_id: str) -> Optional[tuple[str, ColorSet]]:
    """
    Fetch a theme's display name and resolved colors.

    Args:
        store: Theme storage
        theme_id: Theme identifier

    Returns:
        (name, colors), or None if the theme has no color rows
    """
    rows = store.get_theme_colors(theme_id)
    if not rows:
        logger.debug(f"No colors stored for theme {theme_id!r}")
        return None

    name = store.get_theme_name(theme_id) or DEFAULT_THEME_NAME
    return name, ColorSet.from_rows(rows.items())


@dataclass
class ThemeFile:
    """Theme definition as stored in a YAML file."""
    name: str
    terminal_colors: dict
    id: Optional[str] = None

    @property
    def theme_id(self) -> str:
        return self.id or slugify(self.name).strip("-") or slugify(DEFAULT_THEME_NAME)

    @classmethod
    def load(cls, path: Path) -> ThemeFile:
        """Load theme from YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict) or "name" not in data:
            raise ValueError(f"Not a theme file: {path}")
        return cls(
            name=str(data["name"]),
            terminal_colors=dict(data.get("terminal_colors") or {}),
            id=data.get("id"),
        )

    def save(self, path: Path) -> None:
        """Save theme to YAML file."""
        data = {
            'id': self.theme_id,
            'name': self.name,
            'terminal_colors': self.terminal_colors,
        }
        with open(path, 'w', encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def to_rows(self) -> dict[str, str]:
        """Translate terminal_colors into storage keys, dropping unknown keys."""
        rows = {}
        for key, value in self.terminal_colors.items():
            storage_key = key if key in DEFAULT_COLORS else XTERM_KEY_MAP.get(key)
            if storage_key is None:
                logger.debug(f"Ignoring unknown color key {key!r} in theme {self.name}")
                continue
            rows[storage_key] = str(value)
        return rows
