"""
Unit tests for the design token IR types.
"""

import pytest
from pydantic import ValidationError

from design_tokens.core.ir import (
    Density,
    DesignTokens,
    LayoutTokens,
    Mode,
    MotionLevel,
    MotionTokens,
    default_layout_tokens,
)


class TestEnums:
    """Tests for the token enums."""

    def test_mode_values(self):
        assert [m.value for m in Mode] == ["light", "dark"]

    def test_density_values(self):
        assert [d.value for d in Density] == ["compact", "comfortable"]

    def test_motion_level_values(self):
        assert [m.value for m in MotionLevel] == ["none", "subtle", "regular", "loud"]

    def test_str_enum_compares_to_string(self):
        assert Mode.LIGHT == "light"
        assert MotionLevel("loud") is MotionLevel.LOUD


class TestLayoutTokens:
    """Tests for layout constants."""

    def test_default_spacing_scale(self):
        layout = default_layout_tokens()
        assert (layout.space_xs, layout.space_s, layout.space_m) == (4, 8, 16)
        assert (layout.space_l, layout.space_xl, layout.space_2xl) == (20, 24, 32)

    def test_default_card_dimensions(self):
        layout = LayoutTokens()
        assert layout.card_padding_left == 20
        assert layout.card_padding_bottom == 20
        assert layout.card_title_height == 50
        assert layout.card_icon_width == 20
        assert layout.card_icon_spacing == 8
        assert layout.card_header_padding == 10

    def test_default_component_heights_and_grid(self):
        layout = LayoutTokens()
        assert layout.stat_card_height == 70
        assert layout.stat_card_height_trend == 84
        assert layout.trend_graph_min_height == 15
        assert layout.default_grid_gap == 8.0
        assert layout.default_grid_width == 1000.0
        assert layout.default_grid_columns == 3

    def test_layout_is_frozen(self):
        layout = LayoutTokens()
        with pytest.raises(ValidationError):
            layout.space_m = 12


class TestDesignTokens:
    """Tests for the DesignTokens snapshot."""

    def test_defaults(self, default_tokens: DesignTokens):
        tokens = DesignTokens()
        assert tokens == default_tokens
        assert tokens.theme == "default"
        assert tokens.font_family == "system-ui"
        assert tokens.mode == Mode.DARK
        assert tokens.density == Density.COMFORTABLE
        assert tokens.color_light == ""
        assert tokens.radix_scaling == ""

    def test_is_frozen(self):
        tokens = DesignTokens()
        with pytest.raises(ValidationError):
            tokens.color = "#000000"

    def test_light_mode_applies_light_variants(self, variant_tokens: DesignTokens):
        light = variant_tokens.light_mode()
        assert light.mode == Mode.LIGHT
        assert light.color == "#222222"
        assert light.background == "#FAFAFA"
        assert light.accent == "#FF0000"
        # Variants are preserved
        assert light.accent_dark == "#00FF00"

    def test_dark_mode_applies_dark_variants(self, variant_tokens: DesignTokens):
        dark = variant_tokens.light_mode().dark_mode()
        assert dark.mode == Mode.DARK
        assert dark.color == "#EEEEEE"
        assert dark.background == "#111111"
        assert dark.accent == "#00FF00"

    def test_mode_switch_without_variants_only_flips_mode(self, nord_tokens: DesignTokens):
        light = nord_tokens.light_mode()
        assert light.mode == Mode.LIGHT
        assert light.background == nord_tokens.background

    def test_mode_switch_returns_copy(self, variant_tokens: DesignTokens):
        light = variant_tokens.light_mode()
        assert light is not variant_tokens
        assert variant_tokens.mode == Mode.DARK

    def test_variant_lookup(self, variant_tokens: DesignTokens):
        assert variant_tokens.variant("accent", Mode.LIGHT) == "#FF0000"
        assert variant_tokens.variant("background", "dark") == "#111111"

    def test_to_css(self, default_tokens: DesignTokens):
        css = default_tokens.to_css()
        assert css.startswith(":root {")
        assert "--accent: #1D4ED8;" in css


class TestMotionTokens:
    def test_defaults(self):
        motion = MotionTokens()
        assert motion.level == MotionLevel.SUBTLE
        assert motion.durations == {}
        assert motion.amplitudes == {}
