"""
Windows Terminal installer.

Merges a color scheme into settings.json and makes it the default
profile's scheme. Windows Terminal reloads the file on its own.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Optional

from ..theme.engine import ColorSet
from . import jsonc
from .base import Installer, InstallResult

logger = logging.getLogger(__name__)

# Checked in order, relative to %LOCALAPPDATA%
SETTINGS_CANDIDATES = (
    Path("Packages", "Microsoft.WindowsTerminal_8wekyb3d8bbwe", "LocalState", "settings.json"),
    Path("Packages", "Microsoft.WindowsTerminalPreview_8wekyb3d8bbwe", "LocalState", "settings.json"),
    Path("Microsoft", "Windows Terminal", "settings.json"),
)

NOT_INSTALLED = "Windows Terminal settings not found. Is Windows Terminal installed?"


def local_app_data() -> Path:
    value = os.environ.get("LOCALAPPDATA")
    return Path(value) if value else Path.home() / "AppData" / "Local"


def find_settings_path() -> Optional[Path]:
    """First existing settings.json: stable, then Preview, then unpackaged."""
    root = local_app_data()
    for candidate in SETTINGS_CANDIDATES:
        path = root / candidate
        if path.exists():
            return path
    return None


def build_scheme(name: str, colors: ColorSet) -> dict:
    ansi = colors.ansi
    return {
        "name": name,
        "background": colors.background,
        "foreground": colors.foreground,
        "cursorColor": colors.cursor,
        "selectionBackground": colors.selection,
        "black": ansi.black,
        "red": ansi.red,
        "green": ansi.green,
        "yellow": ansi.yellow,
        "blue": ansi.blue,
        "purple": ansi.magenta,
        "cyan": ansi.cyan,
        "white": ansi.white,
        "brightBlack": ansi.bright_black,
        "brightRed": ansi.bright_red,
        "brightGreen": ansi.bright_green,
        "brightYellow": ansi.bright_yellow,
        "brightBlue": ansi.bright_blue,
        "brightPurple": ansi.bright_magenta,
        "brightCyan": ansi.bright_cyan,
        "brightWhite": ansi.bright_white,
    }


def merge_scheme(settings: dict, scheme: dict) -> dict:
    """
    Replace any scheme with the same name, append the new one and make it
    the default profile's colorScheme. Mutates and returns settings.
    """
    name = scheme["name"]
    schemes = settings.get("schemes") or []
    settings["schemes"] = [s for s in schemes if not (isinstance(s, dict) and s.get("name") == name)]
    settings["schemes"].append(scheme)

    profiles = settings.get("profiles")
    if isinstance(profiles, list):
        # Legacy layout: profiles is the bare list
        profiles = {"defaults": {}, "list": profiles}
    elif not isinstance(profiles, dict):
        profiles = {"defaults": {}}
    if not isinstance(profiles.get("defaults"), dict):
        profiles["defaults"] = {}
    profiles["defaults"]["colorScheme"] = name
    settings["profiles"] = profiles
    return settings


class WindowsTerminalInstaller(Installer):
    target = "windows-terminal"

    def install(self, theme_id: str) -> InstallResult:
        found = self._lookup(theme_id)
        if found is None:
            return InstallResult.not_found()
        name, colors = found

        settings_path = find_settings_path()
        if settings_path is None:
            logger.info(f"No Windows Terminal settings under {local_app_data()}")
            return InstallResult.failed("", NOT_INSTALLED)

        logger.debug(f"Using Windows Terminal settings {settings_path}")

        try:
            content = settings_path.read_text(encoding="utf-8-sig")
            try:
                settings = jsonc.loads(content, settings_path)
            except jsonc.JSONCParseError as e:
                return InstallResult.failed(
                    str(settings_path), f"Failed to parse Windows Terminal settings: {e}"
                )
            if not isinstance(settings, dict):
                return InstallResult.failed(
                    str(settings_path),
                    "Failed to parse Windows Terminal settings: top level is not an object",
                )
            if not isinstance(settings.get("schemes") or [], list):
                return InstallResult.failed(
                    str(settings_path),
                    "Failed to parse Windows Terminal settings: 'schemes' is not a list",
                )

            merge_scheme(settings, build_scheme(name, colors))
            settings_path.write_text(json.dumps(settings, indent=4, ensure_ascii=False), encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to update {settings_path}: {e}")
            return InstallResult.failed(str(settings_path), f"Failed to update Windows Terminal settings: {e}")

        return InstallResult.ok(
            str(settings_path),
            f'Theme "{name}" applied to Windows Terminal! All open windows updated.',
        )
