"""
iTerm2 installer.

Writes a Dynamic Profile (one JSON file per theme) which iTerm2 picks up
automatically, then asks iTerm2 to switch every open session to it.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path

from ..theme.codec import InvalidColorError, hex_to_iterm_dict
from ..theme.engine import ColorSet, slugify
from .base import Installer, InstallResult
from .bridge import LiveApplyError, applescript_string

logger = logging.getLogger(__name__)

DYNAMIC_PROFILES_SUBDIR = Path("Library", "Application Support", "iTerm2", "DynamicProfiles")

APPLY_SCRIPT = """
tell application "iTerm"
  repeat with w in windows
    repeat with t in tabs of w
      repeat with s in sessions of t
        tell s to set profile to "{name}"
      end repeat
    end repeat
  end repeat
end tell
"""


def dynamic_profiles_dir() -> Path:
    return Path.home() / DYNAMIC_PROFILES_SUBDIR


def build_profile(theme_id: str, name: str, colors: ColorSet) -> dict:
    """Dynamic Profile document holding a single profile."""
    profile = {
        "Name": name,
        "Guid": theme_id,
        "Background Color": hex_to_iterm_dict(colors.background),
        "Foreground Color": hex_to_iterm_dict(colors.foreground),
        "Cursor Color": hex_to_iterm_dict(colors.cursor),
        "Cursor Text Color": hex_to_iterm_dict(colors.cursor_text),
        "Selection Color": hex_to_iterm_dict(colors.selection),
        "Selected Text Color": hex_to_iterm_dict(colors.selection_text),
    }
    for index, color in enumerate(colors.ansi.by_index()):
        profile[f"Ansi {index} Color"] = hex_to_iterm_dict(color)
    return {"Profiles": [profile]}


class ITerm2Installer(Installer):
    target = "iterm2"

    def install(self, theme_id: str) -> InstallResult:
        found = self._lookup(theme_id)
        if found is None:
            return InstallResult.not_found()
        name, colors = found

        profile_dir = dynamic_profiles_dir()
        profile_path = profile_dir / f"{slugify(name)}.json"

        try:
            document = build_profile(theme_id, name, colors)
        except InvalidColorError as e:
            return InstallResult.failed(str(profile_path), f"Failed to write profile: {e}")

        try:
            profile_dir.mkdir(parents=True, exist_ok=True)
            profile_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write iTerm2 profile {profile_path}: {e}")
            return InstallResult.failed(str(profile_path), f"Failed to write profile: {e}")

        logger.debug(f"Wrote iTerm2 dynamic profile {profile_path}")

        if self.live_apply:
            try:
                self.bridge.run(APPLY_SCRIPT.format(name=applescript_string(name)))
                return InstallResult.ok(str(profile_path), f'Theme "{name}" applied to iTerm2!')
            except LiveApplyError as e:
                logger.warning(f"iTerm2 live-apply failed: {e}")

        return InstallResult.ok(
            str(profile_path),
            f'Theme "{name}" installed. Open iTerm2 and select it from Profiles menu, '
            f'or restart iTerm2.',
        )
