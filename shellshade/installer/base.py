"""
Shared installer shape: result record, platform detection, base class.
"""

from __future__ import annotations
import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..theme.engine import ColorSet, ThemeSource, lookup_theme
from .bridge import OsaScriptBridge

logger = logging.getLogger(__name__)

PLATFORMS = ("darwin", "win32", "linux")

THEME_NOT_FOUND = "Theme not found"

# Product name written into generated config headers
BRAND = "ShellShade"


def get_platform() -> str:
    """Current platform tag: 'darwin', 'win32' or 'linux'."""
    if sys.platform in ("darwin", "win32"):
        return sys.platform
    return "linux"


@dataclass
class InstallResult:
    """Outcome of one install call. Failures are data, never exceptions."""
    success: bool
    path: str
    instructions: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, path: str, instructions: str) -> InstallResult:
        return cls(success=True, path=path, instructions=instructions)

    @classmethod
    def failed(cls, path: str, error: str) -> InstallResult:
        return cls(success=False, path=path, error=error)

    @classmethod
    def not_found(cls) -> InstallResult:
        return cls.failed("", THEME_NOT_FOUND)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape: optional fields are omitted when unset."""
        data: Dict[str, Any] = {"success": self.success, "path": self.path}
        if self.instructions is not None:
            data["instructions"] = self.instructions
        if self.error is not None:
            data["error"] = self.error
        return data

    def __str__(self) -> str:
        if self.success:
            return self.instructions or "Installed"
        return f"Error: {self.error}"


class Installer(ABC):
    """
    Installs a stored theme into one terminal emulator.

    Subclasses implement install(); each owns its path resolution,
    rendering and merge policy.
    """

    #: Short target name used by the CLI and logs
    target: str = ""

    def __init__(
        self,
        store: ThemeSource,
        bridge: OsaScriptBridge = None,
        platform: str = None,
        live_apply: bool = True,
    ):
        self.store = store
        self.bridge = bridge or OsaScriptBridge()
        self.platform = platform or get_platform()
        self.live_apply = live_apply

    def _lookup(self, theme_id: str) -> Optional[tuple[str, ColorSet]]:
        found = lookup_theme(self.store, theme_id)
        if found is None:
            logger.info(f"{self.target}: theme {theme_id!r} not found")
        return found

    @abstractmethod
    def install(self, theme_id: str) -> InstallResult:
        """Render, write and (optionally) live-apply a theme."""
