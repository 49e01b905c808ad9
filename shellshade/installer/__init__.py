"""
Per-emulator theme installers.

Every installer exposes install(theme_id) -> InstallResult and never raises
for theme, I/O, parse or live-apply problems.
"""

from __future__ import annotations
from typing import Dict, Type

from .base import InstallResult, Installer, get_platform, PLATFORMS
from .bridge import OsaScriptBridge, LiveApplyError
from .jsonc import JSONCParseError
from .iterm2 import ITerm2Installer
from .terminal_app import TerminalAppInstaller
from .windows_terminal import WindowsTerminalInstaller
from .alacritty import AlacrittyInstaller
from .kitty import KittyInstaller

INSTALLERS: Dict[str, Type[Installer]] = {
    cls.target: cls
    for cls in (
        ITerm2Installer,
        TerminalAppInstaller,
        WindowsTerminalInstaller,
        AlacrittyInstaller,
        KittyInstaller,
    )
}

__all__ = [
    "INSTALLERS",
    "InstallResult",
    "Installer",
    "get_platform",
    "PLATFORMS",
    "OsaScriptBridge",
    "LiveApplyError",
    "JSONCParseError",
    "ITerm2Installer",
    "TerminalAppInstaller",
    "WindowsTerminalInstaller",
    "AlacrittyInstaller",
    "KittyInstaller",
]
