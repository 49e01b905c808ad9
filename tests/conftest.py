"""Pytest configuration and common fixtures for shellshade tests."""

import pytest

from shellshade.installer.bridge import LiveApplyError
from shellshade.store import ThemeStore

MOCHA_ID = "catppuccin-mocha"
MOCHA_NAME = "Catppuccin Mocha"

MOCHA_COLORS = {
    "background": "#1e1e2e",
    "foreground": "#cdd6f4",
    "cursor": "#f5e0dc",
    "cursorText": "#1e1e2e",
    "selection": "#585b70",
    "selectionText": "#cdd6f4",
    "ansi_black": "#45475a",
    "ansi_red": "#f38ba8",
    "ansi_green": "#a6e3a1",
    "ansi_yellow": "#f9e2af",
    "ansi_blue": "#89b4fa",
    "ansi_magenta": "#f5c2e7",
    "ansi_cyan": "#94e2d5",
    "ansi_white": "#bac2de",
    "ansi_brightBlack": "#585b70",
    "ansi_brightRed": "#f37799",
    "ansi_brightGreen": "#89d88b",
    "ansi_brightYellow": "#ebd391",
    "ansi_brightBlue": "#74a8fc",
    "ansi_brightMagenta": "#f2aede",
    "ansi_brightCyan": "#6bd7ca",
    "ansi_brightWhite": "#a6adc8",
}


class FakeBridge:
    """Records scripts instead of running osascript."""

    def __init__(self, fail_on=(), fail_always=False):
        self.scripts = []
        self.fail_on = set(fail_on)  # 1-based call numbers
        self.fail_always = fail_always

    def run(self, script):
        self.scripts.append(script)
        if self.fail_always or len(self.scripts) in self.fail_on:
            raise LiveApplyError("execution error: Application isn't running. (-600)")
        return ""


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated home directory with no config-root overrides."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    for var in ("XDG_CONFIG_HOME", "APPDATA", "LOCALAPPDATA"):
        monkeypatch.delenv(var, raising=False)
    return home_dir


@pytest.fixture
def store(tmp_path):
    """Theme store holding the Catppuccin Mocha test theme."""
    theme_store = ThemeStore(tmp_path / "db" / "themes.db")
    theme_store.add_theme(MOCHA_ID, MOCHA_NAME, MOCHA_COLORS)
    return theme_store


@pytest.fixture
def bridge():
    return FakeBridge()


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: exercises the CLI or IPC loop end to end")
