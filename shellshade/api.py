"""
shellshade/api.py

Programmatic entry point: theme storage plus the five installers.
Usable from the CLI, the IPC loop, or a Python shell.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import AppSettings, get_settings
from .installer import INSTALLERS, InstallResult, Installer, OsaScriptBridge, get_platform
from .installer.terminal_app import TerminalAppInstaller
from .store import ThemeStore
from .theme.engine import ColorSet, lookup_theme

logger = logging.getLogger(__name__)


class UnknownTargetError(ValueError):
    """Requested installer target does not exist."""


class ShellShadeAPI:
    """
    Scripting interface for shellshade.

    Usage:
        api = ShellShadeAPI()

        api.seed()                          # Load bundled themes
        api.themes()                        # [(id, name), ...]
        api.install("alacritty", "dracula") # InstallResult
    """

    def __init__(
        self,
        settings: AppSettings = None,
        store: ThemeStore = None,
        bridge: OsaScriptBridge = None,
        platform: str = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or ThemeStore(self.settings.db_path)
        self.bridge = bridge or OsaScriptBridge(self.settings.osascript_command)
        self._platform = platform

    # -------------------------------------------------------------------------
    # Themes
    # -------------------------------------------------------------------------

    def themes(self) -> List[tuple[str, str]]:
        return self.store.list_themes()

    def theme(self, theme_id: str) -> Optional[tuple[str, ColorSet]]:
        return lookup_theme(self.store, theme_id)

    def import_theme(self, path: Path) -> str:
        return self.store.import_theme_file(path)

    def seed(self) -> List[str]:
        return self.store.seed_bundled_themes()

    # -------------------------------------------------------------------------
    # Installing
    # -------------------------------------------------------------------------

    @property
    def targets(self) -> List[str]:
        return list(INSTALLERS)

    def installer(self, target: str) -> Installer:
        try:
            cls = INSTALLERS[target]
        except KeyError:
            raise UnknownTargetError(
                f"Unknown target {target!r}, expected one of: {', '.join(INSTALLERS)}"
            ) from None
        return cls(
            self.store,
            bridge=self.bridge,
            platform=self.platform(),
            live_apply=self.settings.live_apply,
        )

    def install(self, target: str, theme_id: str) -> InstallResult:
        result = self.installer(target).install(theme_id)
        logger.info(f"install {target} {theme_id}: {'ok' if result.success else result.error}")
        return result

    def set_terminal_default(self, theme_id: str) -> InstallResult:
        installer = self.installer(TerminalAppInstaller.target)
        return installer.set_default(theme_id)

    # -------------------------------------------------------------------------
    # System
    # -------------------------------------------------------------------------

    def platform(self) -> str:
        return self._platform or get_platform()

    def detect_installed(self) -> List[Dict[str, Any]]:
        """Themes already present in terminal configs. Not implemented: always empty."""
        return []
