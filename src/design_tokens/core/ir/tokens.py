"""
Design token IR types.

Defines the resolved token snapshot consumed by rendering layers:
colors, corner radius, padding, density and light/dark mode, plus the
layout constants and motion configuration that accompany it.

All models are frozen value snapshots. Mode switching returns a copy.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Mode(StrEnum):
    """Color mode of a resolved token set."""

    LIGHT = "light"
    DARK = "dark"


class Density(StrEnum):
    """Spacing density."""

    COMPACT = "compact"
    COMFORTABLE = "comfortable"


class MotionLevel(StrEnum):
    """Animation intensity level."""

    NONE = "none"
    SUBTLE = "subtle"
    REGULAR = "regular"
    LOUD = "loud"


# =============================================================================
# Layout
# =============================================================================


class LayoutTokens(BaseModel):
    """Spacing and dimension constants (8pt grid)."""

    model_config = ConfigDict(frozen=True)

    # Spacing scale
    space_xs: int = Field(default=4, description="Extra small spacing")
    space_s: int = Field(default=8, description="Small spacing")
    space_m: int = Field(default=16, description="Medium spacing")
    space_l: int = Field(default=20, description="Large spacing")
    space_xl: int = Field(default=24, description="Extra large spacing")
    space_2xl: int = Field(default=32, description="2x extra large spacing")

    # Card dimensions
    card_padding_left: int = Field(default=20, description="Horizontal padding inside cards")
    card_padding_right: int = Field(default=20)
    card_padding_top: int = Field(default=20, description="Vertical padding inside cards")
    card_padding_bottom: int = Field(default=20)
    card_title_height: int = Field(default=50, description="Height reserved for the title area")
    card_icon_width: int = Field(default=20, description="Width of the card icon")
    card_icon_spacing: int = Field(default=8, description="Space between icon and title")
    card_header_padding: int = Field(default=10, description="Padding for header items")

    # Component heights
    stat_card_height: int = Field(default=70, description="Stat card height without trend")
    stat_card_height_trend: int = Field(default=84, description="Stat card height with trend")
    trend_graph_min_height: int = Field(default=15, description="Minimum trend graph height")

    # Grid defaults
    default_grid_gap: float = Field(default=8.0, description="Gap between grid items")
    default_grid_width: float = Field(default=1000.0, description="Grid container width")
    default_grid_columns: int = Field(default=3, description="Number of grid columns")


def default_layout_tokens() -> LayoutTokens:
    """Return the default layout token values."""
    return LayoutTokens()


# =============================================================================
# Design tokens
# =============================================================================


class DesignTokens(BaseModel):
    """
    Resolved visual design configuration.

    Variant fields (``color_light``, ``background_dark``, ...) are empty
    strings when unset. When set, the variant for the active mode is
    already reflected in the matching base field.

    Example:
        DesignTokens(
            theme="nord",
            color="#ECEFF4",
            background="#2E3440",
            accent="#5E81AC",
        )
    """

    model_config = ConfigDict(frozen=True)

    theme: str = Field(default="default", description="Theme name")
    color: str = Field(default="#E5E7EB", description="Primary (foreground) color")
    background: str = Field(default="#020617", description="Background color")
    accent: str = Field(default="#1D4ED8", description="Accent color")
    font_family: str = Field(default="system-ui", description="Font family")
    radius: int = Field(default=16, description="Corner radius in pixels")
    padding: int = Field(default=16, description="Padding in pixels")
    density: Density = Field(default=Density.COMFORTABLE, description="Spacing density")
    mode: Mode = Field(default=Mode.DARK, description="Light or dark mode")

    # Light/dark variants
    color_light: str = ""
    color_dark: str = ""
    background_light: str = ""
    background_dark: str = ""
    accent_light: str = ""
    accent_dark: str = ""

    # Radix UI theme tokens
    radix_accent_color: str = Field(default="", description='Radix accent, e.g. "pink"')
    radix_gray_color: str = Field(default="", description='Radix gray, e.g. "slate"')
    radix_radius: str = Field(default="", description='Radix radius keyword, e.g. "large"')
    radix_scaling: str = Field(default="", description='Radix scaling, e.g. "105%"')

    layout: LayoutTokens = Field(
        default_factory=default_layout_tokens,
        description="Layout constants",
    )

    def light_mode(self) -> DesignTokens:
        """Return a copy with light mode and light variants applied."""
        return self._with_mode(Mode.LIGHT)

    def dark_mode(self) -> DesignTokens:
        """Return a copy with dark mode and dark variants applied."""
        return self._with_mode(Mode.DARK)

    def variant(self, channel: str, mode: Mode | str) -> str:
        """Get the variant value for a channel ("color", "background", "accent")."""
        return str(getattr(self, f"{channel}_{Mode(mode).value}"))

    def to_css(self) -> str:
        """Render the scalar fields as a CSS variable block."""
        from design_tokens.core.css_generator import generate_css

        return generate_css(self)

    def _with_mode(self, mode: Mode) -> DesignTokens:
        update: dict[str, object] = {"mode": mode}
        for channel in ("color", "background", "accent"):
            value = self.variant(channel, mode)
            if value:
                update[channel] = value
        return self.model_copy(update=update)


# =============================================================================
# Motion
# =============================================================================


class MotionTokens(BaseModel):
    """Animation configuration for a motion level."""

    model_config = ConfigDict(frozen=True)

    level: MotionLevel = Field(default=MotionLevel.SUBTLE, description="Animation intensity")
    durations: dict[str, str] = Field(
        default_factory=dict, description="Named CSS durations (fast, normal, slow, stagger)"
    )
    amplitudes: dict[str, float] = Field(
        default_factory=dict, description="Named amplitudes (scaleCard, ledBreathe)"
    )
