"""Tests for the Windows Terminal settings.json installer."""

import json

import pytest

from shellshade.installer.windows_terminal import (
    NOT_INSTALLED,
    SETTINGS_CANDIDATES,
    WindowsTerminalInstaller,
    find_settings_path,
    merge_scheme,
)

from tests.conftest import MOCHA_ID

SETTINGS_JSONC = """// This file was initially generated by Windows Terminal
{
    "$help": "https://aka.ms/terminal-documentation",
    "defaultProfile": "{61c54bbd-c2c6-5271-96e7-009a87ff44bf}",
    /* Profiles */
    "profiles": {
        "defaults": {
            "font": { "face": "Cascadia Mono", },
        },
        "list": [
            { "name": "Windows PowerShell", "commandline": "powershell.exe" }, // builtin
        ],
    },
    "schemes": [
        { "name": "Campbell", "background": "#0C0C0C" },
    ],
}
"""


@pytest.fixture
def local_app_data(tmp_path, monkeypatch):
    root = tmp_path / "Local"
    monkeypatch.setenv("LOCALAPPDATA", str(root))
    return root


@pytest.fixture
def settings_path(local_app_data):
    path = local_app_data / SETTINGS_CANDIDATES[0]
    path.parent.mkdir(parents=True)
    path.write_text(SETTINGS_JSONC, encoding="utf-8")
    return path


def install(store, theme_id=MOCHA_ID):
    return WindowsTerminalInstaller(store, platform="win32").install(theme_id)


class TestFindSettings:

    def _create(self, root, candidate):
        path = root / candidate
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{}")
        return path

    def test_none(self, local_app_data):
        assert find_settings_path() is None

    def test_stable_wins_over_preview(self, local_app_data):
        stable = self._create(local_app_data, SETTINGS_CANDIDATES[0])
        self._create(local_app_data, SETTINGS_CANDIDATES[1])
        assert find_settings_path() == stable

    def test_preview_wins_over_unpackaged(self, local_app_data):
        preview = self._create(local_app_data, SETTINGS_CANDIDATES[1])
        self._create(local_app_data, SETTINGS_CANDIDATES[2])
        assert find_settings_path() == preview

    def test_unpackaged(self, local_app_data):
        unpackaged = self._create(local_app_data, SETTINGS_CANDIDATES[2])
        assert find_settings_path() == unpackaged

    def test_defaults_to_home_appdata(self, home):
        path = self._create(home / "AppData" / "Local", SETTINGS_CANDIDATES[2])
        assert find_settings_path() == path


class TestMergeScheme:

    def test_creates_missing_sections(self):
        settings = merge_scheme({}, {"name": "X"})
        assert settings == {"schemes": [{"name": "X"}], "profiles": {"defaults": {"colorScheme": "X"}}}

    def test_legacy_profile_list(self):
        settings = merge_scheme({"profiles": [{"name": "cmd"}]}, {"name": "X"})
        assert settings["profiles"] == {"defaults": {"colorScheme": "X"}, "list": [{"name": "cmd"}]}


class TestWindowsTerminalInstaller:

    def test_merges_scheme(self, store, settings_path):
        result = install(store)

        assert result.success
        assert result.path == str(settings_path)
        assert "applied to Windows Terminal" in result.instructions

        text = settings_path.read_text(encoding="utf-8")
        assert text.startswith('{\n    "$help"')
        assert "//" not in text.replace("https://", "")

        settings = json.loads(text)
        assert settings["$help"] == "https://aka.ms/terminal-documentation"
        assert settings["profiles"]["defaults"]["colorScheme"] == "Catppuccin Mocha"
        assert settings["profiles"]["defaults"]["font"] == {"face": "Cascadia Mono"}
        assert settings["profiles"]["list"][0]["name"] == "Windows PowerShell"

        names = [s["name"] for s in settings["schemes"]]
        assert names == ["Campbell", "Catppuccin Mocha"]
        scheme = settings["schemes"][1]
        assert scheme["background"] == "#1e1e2e"
        assert scheme["cursorColor"] == "#f5e0dc"
        assert scheme["purple"] == "#f5c2e7"
        assert scheme["brightPurple"] == "#f2aede"

    def test_repeated_installs_do_not_duplicate(self, store, settings_path):
        store.add_theme("other", "Other", {"background": "#101010"})

        install(store)
        install(store, "other")
        install(store)

        settings = json.loads(settings_path.read_text(encoding="utf-8"))
        names = [s["name"] for s in settings["schemes"]]
        assert names.count("Catppuccin Mocha") == 1
        assert names.count("Other") == 1
        assert settings["profiles"]["defaults"]["colorScheme"] == "Catppuccin Mocha"

    def test_not_installed(self, store, local_app_data):
        result = install(store)
        assert result.to_dict() == {"success": False, "path": "", "error": NOT_INSTALLED}

    def test_theme_not_found_checked_first(self, store, local_app_data):
        assert install(store, "missing").error == "Theme not found"

    def test_unparseable_settings(self, store, settings_path):
        settings_path.write_text('{"profiles": ', encoding="utf-8")
        result = install(store)

        assert not result.success
        assert result.path == str(settings_path)
        assert result.error.startswith("Failed to parse Windows Terminal settings:")
        assert str(settings_path) in result.error
        assert settings_path.read_text(encoding="utf-8") == '{"profiles": '

    def test_schemes_not_a_list(self, store, settings_path):
        original = '{"schemes": {"Campbell": {}}}'
        settings_path.write_text(original, encoding="utf-8")
        result = install(store)

        assert not result.success
        assert result.path == str(settings_path)
        assert result.error == "Failed to parse Windows Terminal settings: 'schemes' is not a list"
        assert settings_path.read_text(encoding="utf-8") == original

    def test_null_schemes_replaced(self, store, settings_path):
        settings_path.write_text('{"schemes": null}', encoding="utf-8")
        assert install(store).success

        settings = json.loads(settings_path.read_text(encoding="utf-8"))
        assert [s["name"] for s in settings["schemes"]] == ["Catppuccin Mocha"]

    def test_byte_order_mark(self, store, settings_path):
        settings_path.write_text("\ufeff{}", encoding="utf-8")
        assert install(store).success
