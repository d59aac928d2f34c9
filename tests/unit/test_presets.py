"""
Unit tests for theme presets.
"""

import pytest

from design_tokens.core.ir import Density, DesignTokens, Mode
from design_tokens.core.presets import (
    THEME_COLORS,
    custom_theme,
    default_theme,
    get_theme_preset,
    list_theme_presets,
    midnight_theme,
    nord_theme,
    paper_theme,
    wrapped_theme,
)
from design_tokens.core.resolver import resolve_design_tokens


class TestThemePresets:
    """Tests for preset definitions."""

    def test_list_theme_presets(self):
        """Test listing available theme presets."""
        assert list_theme_presets() == ["default", "midnight", "nord", "paper", "wrapped"]

    def test_every_preset_has_color_table(self):
        for name in list_theme_presets():
            assert name in THEME_COLORS
            assert set(THEME_COLORS[name]) == {Mode.LIGHT, Mode.DARK}

    def test_get_theme_preset_unknown(self):
        """Test getting a nonexistent preset returns None."""
        assert get_theme_preset("solarized") is None

    def test_get_theme_preset_returns_fresh_snapshot(self):
        first = get_theme_preset("nord")
        second = get_theme_preset("nord")
        assert first == second
        assert first is not second

    def test_default_theme(self):
        theme = default_theme()
        assert theme.theme == "default"
        assert theme.color == "#E5E7EB"
        assert theme.background == "#020617"
        assert theme.accent == "#1D4ED8"
        assert theme.radius == 16
        assert theme.padding == 16
        assert theme.density == Density.COMFORTABLE
        assert theme.mode == Mode.DARK

    def test_midnight_theme(self):
        theme = midnight_theme()
        assert theme.theme == "midnight"
        assert (theme.color, theme.background, theme.accent) == ("#E5E7EB", "#020617", "#1D4ED8")
        assert theme.mode == Mode.DARK

    def test_nord_theme(self):
        theme = nord_theme()
        assert theme.theme == "nord"
        assert (theme.color, theme.background, theme.accent) == ("#ECEFF4", "#2E3440", "#5E81AC")
        assert theme.mode == Mode.DARK

    def test_paper_theme_is_light(self):
        theme = paper_theme()
        assert theme.theme == "paper"
        assert (theme.color, theme.background, theme.accent) == ("#1F2937", "#F9FAFB", "#3B82F6")
        assert theme.mode == Mode.LIGHT

    def test_wrapped_theme_radius(self):
        theme = wrapped_theme()
        assert theme.theme == "wrapped"
        assert (theme.color, theme.background, theme.accent) == ("#EC4899", "#020617", "#7B58C9")
        assert theme.radius == 20

    def test_presets_share_default_layout(self):
        for name in list_theme_presets():
            assert get_theme_preset(name).layout == default_theme().layout

    def test_presets_have_no_variants(self):
        for name in list_theme_presets():
            preset = get_theme_preset(name)
            assert preset.color_light == ""
            assert preset.accent_dark == ""


class TestPresetResolution:
    """Resolving a bare theme name reproduces the preset."""

    @pytest.mark.parametrize("name", ["default", "midnight", "nord", "paper", "wrapped"])
    def test_resolve_theme_matches_preset(self, name: str):
        assert resolve_design_tokens({"theme": name}) == get_theme_preset(name)

    def test_custom_theme_resolves_params(self):
        params = {"theme": "nord", "mode": "light", "accent": "FF0000"}
        theme = custom_theme(params)
        assert isinstance(theme, DesignTokens)
        assert theme == resolve_design_tokens(params)
        assert theme.accent == "#FF0000"
