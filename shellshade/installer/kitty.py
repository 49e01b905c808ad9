"""
Kitty installer.

The theme lives in its own file which is overwritten on every install;
kitty.conf only needs a single include line pointing at it.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path

from ..theme.engine import ColorSet
from .base import BRAND, Installer, InstallResult

logger = logging.getLogger(__name__)

THEME_FILE = "current-theme.conf"
CONFIG_FILE = "kitty.conf"
INCLUDE_STATEMENT = f"include {THEME_FILE}"


def config_dir(platform: str) -> Path:
    if platform == "darwin":
        return Path.home() / ".config" / "kitty"
    xdg_config = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg_config) / "kitty"


def render_theme(name: str, colors: ColorSet) -> str:
    lines = [
        f"# {BRAND} Theme: {name}",
        f"# Generated by {BRAND}",
        "",
        f"foreground {colors.foreground}",
        f"background {colors.background}",
        f"cursor {colors.cursor}",
        f"cursor_text_color {colors.cursor_text}",
        f"selection_foreground {colors.selection_text}",
        f"selection_background {colors.selection}",
        "",
        "# Normal colors",
    ]
    palette = colors.ansi.by_index()
    lines += [f"color{i} {palette[i]}" for i in range(8)]
    lines += ["", "# Bright colors"]
    lines += [f"color{i} {palette[i]}" for i in range(8, 16)]
    return "\n".join(lines) + "\n"


class KittyInstaller(Installer):
    target = "kitty"

    def install(self, theme_id: str) -> InstallResult:
        found = self._lookup(theme_id)
        if found is None:
            return InstallResult.not_found()
        name, colors = found

        directory = config_dir(self.platform)
        theme_path = directory / THEME_FILE
        config_path = directory / CONFIG_FILE

        try:
            directory.mkdir(parents=True, exist_ok=True)
            theme_path.write_text(render_theme(name, colors), encoding="utf-8")

            kitty_conf = config_path.read_text(encoding="utf-8") if config_path.exists() else ""
            if INCLUDE_STATEMENT not in kitty_conf:
                config_path.write_text(f"{INCLUDE_STATEMENT}\n{kitty_conf}", encoding="utf-8")
                logger.debug(f"Added include to {config_path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to update Kitty config in {directory}: {e}")
            return InstallResult.failed(str(theme_path), f"Failed to update Kitty config: {e}")

        return InstallResult.ok(
            str(theme_path),
            f'Theme "{name}" applied to Kitty! Press Ctrl+Shift+F5 to reload or restart Kitty.',
        )
