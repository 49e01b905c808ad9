"""Tests for hex color conversions."""

import pytest

from shellshade.theme.codec import (
    InvalidColorError,
    hex_to_iterm_dict,
    hex_to_rgb16,
    parse_hex,
    rgb16_literal,
)


class TestParseHex:

    def test_channels(self):
        assert parse_hex("#1e1e2e") == (30, 30, 46)
        assert parse_hex("#FFffFF") == (255, 255, 255)

    @pytest.mark.parametrize("value", ["#fff", "ffffff", "#gggggg", "#1234567", "", " #123456", None])
    def test_malformed_input_is_rejected(self, value):
        with pytest.raises(InvalidColorError):
            parse_hex(value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="#RRGGBB"):
            parse_hex("#abc")


class TestItermDict:

    def test_red(self):
        assert hex_to_iterm_dict("#ff0000") == {
            "Red Component": 1.0,
            "Green Component": 0.0,
            "Blue Component": 0.0,
            "Alpha Component": 1,
            "Color Space": "sRGB",
        }

    def test_fractions(self):
        color = hex_to_iterm_dict("#1e1e2e")
        assert color["Red Component"] == pytest.approx(30 / 255)
        assert color["Blue Component"] == pytest.approx(46 / 255)

    def test_components_in_unit_range(self):
        for value in range(0, 256, 17):
            color = hex_to_iterm_dict(f"#{value:02x}{255 - value:02x}{value:02x}")
            for key in ("Red Component", "Green Component", "Blue Component"):
                assert 0.0 <= color[key] <= 1.0

    def test_deterministic(self):
        assert hex_to_iterm_dict("#89b4fa") == hex_to_iterm_dict("#89b4fa")


class TestRgb16:

    def test_extremes(self):
        assert hex_to_rgb16("#000000") == (0, 0, 0)
        assert hex_to_rgb16("#ffffff") == (65535, 65535, 65535)

    def test_scaling(self):
        assert hex_to_rgb16("#010203") == (257, 514, 771)
        assert hex_to_rgb16("#1e1e2e") == (7710, 7710, 11822)

    def test_every_byte_scales_by_257(self):
        for value in range(256):
            r, g, b = hex_to_rgb16(f"#{value:02x}0000")
            assert r == value * 257
            assert 0 <= r <= 65535

    def test_applescript_literal(self):
        assert rgb16_literal("#ff0000") == "{65535, 0, 0}"

    def test_malformed(self):
        with pytest.raises(InvalidColorError):
            hex_to_rgb16("red")
