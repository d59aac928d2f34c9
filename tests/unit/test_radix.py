"""Tests for Radix theme token translation."""

import pytest

from design_tokens.core.ir import Mode
from design_tokens.core.radix import (
    RADIX_ACCENT_COLORS,
    RADIX_GRAY_COLORS,
    is_numeric_radius,
    parse_scaling_percent,
    radix_accent,
    radix_gray,
    radix_radius_to_pixels,
    radix_scaling_to_float,
)


class TestRadixColors:
    def test_accent_table_covers_both_modes(self):
        assert len(RADIX_ACCENT_COLORS) == 10
        for colors in RADIX_ACCENT_COLORS.values():
            assert set(colors) == {Mode.LIGHT, Mode.DARK}

    def test_gray_table_entries(self):
        assert set(RADIX_GRAY_COLORS) == {"mauve", "slate", "gray", "sage", "olive", "sand"}
        for grays in RADIX_GRAY_COLORS.values():
            for mode in Mode:
                assert set(grays[mode]) == {"bg", "fg", "border"}

    def test_radix_accent(self):
        assert radix_accent("indigo", Mode.LIGHT) == "#6366F1"
        assert radix_accent("indigo", "dark") == "#818CF8"
        assert radix_accent("chartreuse", Mode.DARK) is None

    def test_radix_gray(self):
        assert radix_gray("mauve", Mode.DARK)["bg"] == "#1A1523"
        assert radix_gray("unknown", Mode.DARK) is None


class TestRadiusAndScaling:
    def test_radius_keywords(self):
        assert radix_radius_to_pixels("large") == 16
        assert radix_radius_to_pixels("bogus") == 8

    @pytest.mark.parametrize(
        "value,expected",
        [("105%", 105.0), (" 90 % ", 90.0), ("110.5%", 110.5), ("95", 95.0), ("abc", None)],
    )
    def test_parse_scaling_percent(self, value: str, expected):
        assert parse_scaling_percent(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [("100%", 1.0), ("105%", 1.05), ("50%", 0.5), ("abc", 1.0), ("0%", 1.0), ("1e999%", 1.0)],
    )
    def test_radix_scaling_to_float(self, value: str, expected: float):
        assert radix_scaling_to_float(value) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "value,expected",
        [("12", True), ("-3", True), ("0", True), ("12px", False), ("large", False), ("1.5", False)],
    )
    def test_is_numeric_radius(self, value: str, expected: bool):
        assert is_numeric_radius(value) is expected
