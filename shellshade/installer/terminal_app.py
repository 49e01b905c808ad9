"""
Terminal.app installer.

Terminal.app keeps its profiles ("settings sets") internally, so everything
happens through AppleScript and there is no file path to report.
"""

from __future__ import annotations
import logging

from ..theme.codec import InvalidColorError, rgb16_literal
from ..theme.engine import ColorSet
from .base import Installer, InstallResult
from .bridge import LiveApplyError, applescript_string

logger = logging.getLogger(__name__)

CREATE_SCRIPT = """
tell application "Terminal"
  if not (exists settings set "{name}") then
    make new settings set with properties {{name:"{name}"}}
  end if

  set targetSettings to settings set "{name}"
  set background color of targetSettings to {background}
  set normal text color of targetSettings to {foreground}
  set cursor color of targetSettings to {cursor}

  -- Set as default and startup profile
  set default settings to targetSettings
  set startup settings to targetSettings
end tell
"""

APPLY_SCRIPT = """
tell application "Terminal"
  set targetSettings to settings set "{name}"
  if (count of windows) > 0 then
    repeat with w in windows
      try
        set current settings of selected tab of w to targetSettings
      end try
    end repeat
  end if
end tell
"""

CREATE_FAILED = "Failed to create Terminal profile. Make sure Terminal.app is running."


def build_create_script(name: str, colors: ColorSet) -> str:
    """Create-or-update the named settings set and make it the default."""
    return CREATE_SCRIPT.format(
        name=applescript_string(name),
        background=rgb16_literal(colors.background),
        foreground=rgb16_literal(colors.foreground),
        cursor=rgb16_literal(colors.cursor),
    )


class TerminalAppInstaller(Installer):
    target = "terminal-app"

    def install(self, theme_id: str) -> InstallResult:
        found = self._lookup(theme_id)
        if found is None:
            return InstallResult.not_found()
        name, colors = found

        try:
            self.bridge.run(build_create_script(name, colors))
        except InvalidColorError as e:
            return InstallResult.failed("", f"Failed to create Terminal profile: {e}")
        except LiveApplyError as e:
            logger.error(f"Terminal.app profile creation failed: {e}")
            return InstallResult.failed("", CREATE_FAILED)

        # Open windows are best-effort; the profile already exists
        applied = False
        if self.live_apply:
            try:
                self.bridge.run(APPLY_SCRIPT.format(name=applescript_string(name)))
                applied = True
            except LiveApplyError as e:
                logger.warning(f"Terminal.app live-apply failed: {e}")

        if applied:
            return InstallResult.ok("", f'Theme "{name}" applied! All open Terminal windows updated.')
        return InstallResult.ok(
            "",
            f'Theme "{name}" saved to Terminal profiles. Select it in Terminal → Settings → Profiles, '
            f'or open a new window.',
        )

    def set_default(self, theme_id: str) -> InstallResult:
        """
        Make the theme Terminal.app's default and startup profile.

        Unlike install(), open windows are left alone and a scripting
        failure is reported as an error.
        """
        found = self._lookup(theme_id)
        if found is None:
            return InstallResult.not_found()
        name, colors = found

        try:
            self.bridge.run(build_create_script(name, colors))
        except (InvalidColorError, LiveApplyError) as e:
            logger.error(f"Terminal.app set-default failed: {e}")
            return InstallResult.failed("", f"Failed to set default: {e}")

        return InstallResult.ok(
            "",
            f'Theme "{name}" is now the default Terminal.app profile! New windows will use this theme.',
        )
