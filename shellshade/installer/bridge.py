"""
Live-apply bridge: runs AppleScript through osascript.

The script travels through a shell, so it is wrapped in single quotes and
every embedded single quote is spliced as '"'"'. Values interpolated into
AppleScript string literals go through applescript_string() first.
"""

from __future__ import annotations
import logging
import subprocess

logger = logging.getLogger(__name__)


class LiveApplyError(Exception):
    """osascript could not be started or exited non-zero."""


def applescript_string(value: str) -> str:
    """Escape a value for use inside an AppleScript "..." literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def shell_single_quote(text: str) -> str:
    """Wrap text in single quotes for a POSIX shell."""
    return "'" + text.replace("'", "'\"'\"'") + "'"


class OsaScriptBridge:
    """
    Synchronous AppleScript runner.

    Usage:
        bridge = OsaScriptBridge()
        bridge.run('tell application "Terminal" to activate')
    """

    def __init__(self, command: str = "osascript"):
        self.command = command

    def build_command(self, script: str) -> str:
        return f"{self.command} -e {shell_single_quote(script)}"

    def run(self, script: str) -> str:
        """
        Run a script to completion.

        Returns:
            The interpreter's stdout

        Raises:
            LiveApplyError: if the interpreter is missing or fails
        """
        command = self.build_command(script)
        logger.debug(f"Running {self.command} ({len(script)} chars of script)")
        try:
            proc = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise LiveApplyError(f"Could not run {self.command}: {e}") from e

        if proc.returncode != 0:
            detail = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
            raise LiveApplyError(f"{self.command} failed: {detail}")
        return proc.stdout
