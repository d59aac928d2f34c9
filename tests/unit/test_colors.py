"""Tests for color string helpers."""

import pytest

from design_tokens.core.colors import (
    ensure_hash_prefix,
    is_valid_color,
    parse_color,
    rgba_to_hex,
    split_color_pair,
)
from design_tokens.core.errors import ColorParseError


class TestParseColor:
    """Tests for parse_color."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#fff", (255, 255, 255, 1.0)),
            ("#1D4ED8", (29, 78, 216, 1.0)),
            ("#1d4ed8", (29, 78, 216, 1.0)),
            ("rgb(0, 128, 255)", (0, 128, 255, 1.0)),
            ("rgba(0, 0, 0, 0.5)", (0, 0, 0, 0.5)),
            ("rgb(100%, 0%, 0%)", (255, 0, 0, 1.0)),
            ("white", (255, 255, 255, 1.0)),
            ("#white", (255, 255, 255, 1.0)),
            ("transparent", (0, 0, 0, 0.0)),
        ],
    )
    def test_valid_colors(self, value: str, expected: tuple):
        assert parse_color(value) == expected

    def test_hex_with_alpha(self):
        red, green, blue, alpha = parse_color("#00000080")
        assert (red, green, blue) == (0, 0, 0)
        assert alpha == pytest.approx(128 / 255)

    def test_short_hex_with_alpha(self):
        assert parse_color("#f00f") == (255, 0, 0, 1.0)

    @pytest.mark.parametrize(
        "value",
        ["#12345", "#ggg", "nope", "rgba(0, 0, 0)", "rgb(300, 0, 0)", "rgb(0, 0, 0, 2)", ""],
    )
    def test_invalid_colors(self, value: str):
        with pytest.raises(ColorParseError):
            parse_color(value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="Invalid color value"):
            parse_color("#12345")

    def test_is_valid_color(self):
        assert is_valid_color("#ECEFF4")
        assert not is_valid_color("#zzz")


class TestColorHelpers:
    def test_ensure_hash_prefix(self):
        assert ensure_hash_prefix("FF0000") == "#FF0000"
        assert ensure_hash_prefix("#FF0000") == "#FF0000"

    def test_split_color_pair(self):
        assert split_color_pair(" FFFFFF / 000000 ") == ("FFFFFF", "000000")
        assert split_color_pair("FFFFFF") is None
        assert split_color_pair("a/b/c") is None

    def test_rgba_to_hex(self):
        assert rgba_to_hex((29, 78, 216, 1.0)) == "#1D4ED8"
        assert rgba_to_hex((0, 0, 0, 0.5)) == "#00000080"
