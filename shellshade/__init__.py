"""
shellshade - export terminal color themes to terminal emulators.

Supported targets:
- iTerm2: Dynamic Profile JSON, live-applied over AppleScript
- Terminal.app: settings set created over AppleScript
- Windows Terminal: scheme merged into settings.json (JSONC tolerant)
- Alacritty: [colors.*] tables in alacritty.toml
- Kitty: current-theme.conf included from kitty.conf
"""

__version__ = "0.1.0"

from .api import ShellShadeAPI
from .installer import INSTALLERS, InstallResult, get_platform
from .store import ThemeStore
from .theme.engine import ColorSet, ThemeFile, lookup_theme

__all__ = [
    "ShellShadeAPI",
    "INSTALLERS",
    "InstallResult",
    "get_platform",
    "ThemeStore",
    "ColorSet",
    "ThemeFile",
    "lookup_theme",
]
