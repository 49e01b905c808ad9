"""Tests for the theme model, defaults and lookup."""

import pytest

from shellshade.theme.engine import (
    ANSI_NAMES,
    DEFAULT_COLORS,
    ColorSet,
    ThemeFile,
    lookup_theme,
    slugify,
)


class DictSource:
    """In-memory stand-in for ThemeStore."""

    def __init__(self, colors=None, names=None):
        self.colors = colors or {}
        self.names = names or {}

    def get_theme_colors(self, theme_id):
        return dict(self.colors.get(theme_id, {}))

    def get_theme_name(self, theme_id):
        return self.names.get(theme_id)


class TestColorSet:

    def test_all_defaults(self):
        colors = ColorSet.from_rows([])
        assert colors.background == "#000000"
        assert colors.foreground == "#ffffff"
        assert colors.cursor == "#ffffff"
        assert colors.cursor_text == "#000000"
        assert colors.selection == "#444444"
        assert colors.selection_text == "#ffffff"
        assert colors.ansi.by_index() == [DEFAULT_COLORS[f"ansi_{n}"] for n in ANSI_NAMES]

    def test_partial_rows_are_filled(self):
        colors = ColorSet.from_rows([("background", "#1e1e2e"), ("ansi_red", "#f38ba8")])
        assert colors.background == "#1e1e2e"
        assert colors.ansi.red == "#f38ba8"
        assert colors.foreground == "#ffffff"
        assert colors.ansi.bright_red == "#ff6666"

    def test_last_write_wins(self):
        colors = ColorSet.from_rows([("background", "#111111"), ("background", "#222222")])
        assert colors.background == "#222222"

    def test_empty_value_falls_back(self):
        assert ColorSet.from_rows([("foreground", "")]).foreground == "#ffffff"

    def test_palette_order(self):
        rows = [(f"ansi_{name}", f"#0000{index:02x}") for index, name in enumerate(ANSI_NAMES)]
        palette = ColorSet.from_rows(rows).ansi
        assert palette.by_index() == [f"#0000{i:02x}" for i in range(16)]
        assert palette.bright_red == "#000009"
        assert palette.normal()[7] == "#000007"
        assert palette.bright()[0] == "#000008"


class TestLookup:

    def test_unknown_theme(self):
        assert lookup_theme(DictSource(), "missing") is None

    def test_name_defaults_to_untitled(self):
        source = DictSource(colors={"t1": {"background": "#101010"}})
        name, colors = lookup_theme(source, "t1")
        assert name == "Untitled"
        assert colors.background == "#101010"

    def test_named_theme(self, store):
        name, colors = lookup_theme(store, "catppuccin-mocha")
        assert name == "Catppuccin Mocha"
        assert colors.foreground == "#cdd6f4"


class TestSlugify:

    def test_example(self):
        assert slugify("My Theme!! 2") == "my-theme-2"

    @pytest.mark.parametrize("name", ["My Theme!! 2", "  Solarized (Dark) ", "a--b", "Ünïcode ☃ theme"])
    def test_idempotent(self, name):
        assert slugify(slugify(name)) == slugify(name)

    def test_runs_collapse_to_one_hyphen(self):
        assert slugify("a !@#$ b") == "a-b"
        assert "--" not in slugify("x -- y __ z")


class TestThemeFile:

    def test_xterm_keys_are_mapped(self, tmp_path):
        path = tmp_path / "t.yaml"
        path.write_text(
            "name: Sample Theme\n"
            "terminal_colors:\n"
            "  background: '#101010'\n"
            "  cursorAccent: '#202020'\n"
            "  selectionBackground: '#303030'\n"
            "  brightRed: '#404040'\n"
            "  ansi_blue: '#505050'\n"
            "  fontFamily: Menlo\n"
        )
        theme = ThemeFile.load(path)
        assert theme.theme_id == "sample-theme"
        assert theme.to_rows() == {
            "background": "#101010",
            "cursorText": "#202020",
            "selection": "#303030",
            "ansi_brightRed": "#404040",
            "ansi_blue": "#505050",
        }

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "saved.yaml"
        ThemeFile(name="Round", terminal_colors={"red": "#ff0000"}, id="round-1").save(path)
        loaded = ThemeFile.load(path)
        assert loaded.theme_id == "round-1"
        assert loaded.to_rows() == {"ansi_red": "#ff0000"}

    def test_rejects_non_theme(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            ThemeFile.load(path)
