"""
Alacritty installer.

Strips any previous color tables from alacritty.toml and appends the new
ones. Everything else in the file is kept as-is.
"""

from __future__ import annotations
import logging
import os
import re
from pathlib import Path

from ..theme.engine import ColorSet
from .base import BRAND, Installer, InstallResult

logger = logging.getLogger(__name__)

# Each table runs until the next '[' or end of file
_COLOR_SECTION_RES = [
    re.compile(rf"\[colors\.{section}\][\s\S]*?(?=\[|\Z)")
    for section in ("primary", "cursor", "selection", "normal", "bright")
]
_HEADER_RE = re.compile(rf"# {BRAND} Theme:.*\n# Generated by {BRAND}\n*")

ANSI_TOML_KEYS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def config_path(platform: str) -> Path:
    if platform == "win32":
        appdata = os.environ.get("APPDATA")
        root = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return root / "alacritty" / "alacritty.toml"
    if platform == "darwin":
        return Path.home() / ".config" / "alacritty" / "alacritty.toml"
    xdg_config = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg_config) / "alacritty" / "alacritty.toml"


def render_colors(name: str, colors: ColorSet) -> str:
    """TOML color tables preceded by the two-line generated header."""
    lines = [
        f"# {BRAND} Theme: {name}",
        f"# Generated by {BRAND}",
        "",
        "[colors.primary]",
        f'background = "{colors.background}"',
        f'foreground = "{colors.foreground}"',
        "",
        "[colors.cursor]",
        f'text = "{colors.cursor_text}"',
        f'cursor = "{colors.cursor}"',
        "",
        "[colors.selection]",
        f'text = "{colors.selection_text}"',
        f'background = "{colors.selection}"',
        "",
        "[colors.normal]",
    ]
    lines += [f'{key} = "{value}"' for key, value in zip(ANSI_TOML_KEYS, colors.ansi.normal())]
    lines += ["", "[colors.bright]"]
    lines += [f'{key} = "{value}"' for key, value in zip(ANSI_TOML_KEYS, colors.ansi.bright())]
    return "\n".join(lines) + "\n"


def strip_colors(content: str) -> str:
    """Remove generated header and color tables, then trim."""
    for pattern in _COLOR_SECTION_RES:
        content = pattern.sub("", content)
    return _HEADER_RE.sub("", content).strip()


class AlacrittyInstaller(Installer):
    target = "alacritty"

    def install(self, theme_id: str) -> InstallResult:
        found = self._lookup(theme_id)
        if found is None:
            return InstallResult.not_found()
        name, colors = found

        path = config_path(self.platform)
        block = render_colors(name, colors)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            existing = ""
            if path.exists():
                existing = strip_colors(path.read_text(encoding="utf-8"))
            content = f"{existing}\n\n{block}" if existing else block
            path.write_text(content, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to update {path}: {e}")
            return InstallResult.failed(str(path), f"Failed to update Alacritty config: {e}")

        logger.debug(f"Wrote Alacritty colors to {path}")
        return InstallResult.ok(
            str(path),
            f'Theme "{name}" applied to Alacritty! Restart Alacritty to see changes.',
        )
