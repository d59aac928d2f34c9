"""
Design token resolver.

Resolves the final token set from flat string parameters (typically URL
query parameters). Candidate values are staged first with explicit
light/dark slots, the final mode is decided once, and the staged values
are then projected onto the scalar fields:

1. Default preset (dark mode)
2. Radix theme tokens (accentColor, grayColor, radius, scaling)
3. Named theme, only when no Radix colors were given
4. color / background / accent overrides, including LIGHT/DARK pairs
5. density
6. Final mode: explicit mode, then theme suffix, then the theme's own mode
7. Radix radius keyword
8. Radix scaling
9. Projection: variant for the final mode > theme/Radix color > default

Resolution never raises. Unknown keys and unusable values are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from .colors import ensure_hash_prefix, is_valid_color, split_color_pair
from .ir.tokens import Density, DesignTokens, Mode
from .presets import THEME_COLORS, THEME_NATIVE_MODES, THEME_RADIUS_OVERRIDES, default_theme
from .radix import (
    RADIX_RADIUS_PIXELS,
    is_numeric_radius,
    radix_accent,
    radix_gray,
    radix_radius_to_pixels,
    radix_scaling_to_float,
)

logger = logging.getLogger(__name__)

COLOR_CHANNELS: tuple[str, ...] = ("color", "background", "accent")

_THEME_MODE_SUFFIXES: dict[str, Mode] = {"-light": Mode.LIGHT, "-dark": Mode.DARK}


# =============================================================================
# Staging record
# =============================================================================


@dataclass
class ChannelSlots:
    """Light and dark candidates for one color channel ("" = unset)."""

    light: str = ""
    dark: str = ""

    def get(self, mode: Mode) -> str:
        return self.light if mode == Mode.LIGHT else self.dark

    def set(self, mode: Mode, value: str) -> None:
        if mode == Mode.LIGHT:
            self.light = value
        else:
            self.dark = value


def _channel_map() -> dict[str, ChannelSlots]:
    return {channel: ChannelSlots() for channel in COLOR_CHANNELS}


@dataclass
class TokenStaging:
    """Candidate values collected before the final mode is known."""

    base: DesignTokens = field(default_factory=default_theme)
    theme: str = ""
    theme_mode: Mode | None = None
    theme_radius: int | None = None
    derived: dict[str, ChannelSlots] = field(default_factory=_channel_map)
    variants: dict[str, ChannelSlots] = field(default_factory=_channel_map)
    radius: int | None = None
    density: Density | None = None
    radix_accent_color: str = ""
    radix_gray_color: str = ""
    radix_radius: str = ""
    radix_scaling: str = ""

    def established_mode(self) -> Mode:
        """Mode implied by the defaults and the named theme."""
        return self.theme_mode or self.base.mode

    def project(self, mode: Mode) -> DesignTokens:
        """Collapse staged candidates into a token snapshot for ``mode``."""
        values: dict[str, object] = {
            "mode": mode,
            "density": self.density or self.base.density,
            "radix_accent_color": self.radix_accent_color,
            "radix_gray_color": self.radix_gray_color,
            "radix_radius": self.radix_radius,
            "radix_scaling": self.radix_scaling,
        }
        if self.theme:
            values["theme"] = self.theme

        for channel in COLOR_CHANNELS:
            variants = self.variants[channel]
            values[f"{channel}_light"] = variants.light
            values[f"{channel}_dark"] = variants.dark
            values[channel] = (
                variants.get(mode) or self.derived[channel].get(mode) or getattr(self.base, channel)
            )

        radius = self.base.radius
        if self.radius is not None:
            radius = self.radius
        if self.theme_radius is not None:
            radius = self.theme_radius
        if self.radix_radius:
            radius = radix_radius_to_pixels(self.radix_radius)

        padding = self.base.padding
        if self.radix_scaling:
            scale = radix_scaling_to_float(self.radix_scaling)
            padding = int(padding * scale)
            if radius > 0:
                radius = int(radius * scale)

        values["radius"] = radius
        values["padding"] = padding
        return self.base.model_copy(update=values)


# =============================================================================
# Public API
# =============================================================================


def resolve_design_tokens(params: Mapping[str, str]) -> DesignTokens:
    """
    Resolve design tokens from query parameters.

    Args:
        params: Flat string parameters. Empty values count as absent.

    Returns:
        Fully populated DesignTokens snapshot
    """
    staging = TokenStaging()

    _stage_radix_tokens(staging, params)
    theme = _param(params, "theme")
    if staging.radix_accent_color or staging.radix_gray_color:
        _stage_radix_colors(staging)
        if theme:
            logger.debug(f"Radix colors present, ignoring theme {theme!r}")
    elif theme:
        _stage_theme(staging, theme)

    _stage_color_overrides(staging, params)
    _stage_density(staging, params)

    mode = _resolve_mode(staging, params)
    return staging.project(mode)


def resolve_design_tokens_for_both_modes(
    params: Mapping[str, str],
) -> tuple[DesignTokens, DesignTokens]:
    """
    Resolve light and dark token sets from one parameter set.

    Useful for adaptive output that responds to the viewer's color scheme.

    Returns:
        (light_tokens, dark_tokens)
    """
    light_params = dict(params)
    dark_params = dict(params)

    light_params["mode"] = Mode.LIGHT.value
    dark_params["mode"] = Mode.DARK.value

    theme = _param(params, "theme")
    if theme and split_theme_name(theme)[1] is None:
        light_params["theme"] = f"{theme}-light"
        dark_params["theme"] = f"{theme}-dark"

    for channel in COLOR_CHANNELS:
        value = _param(params, channel)
        if not value:
            continue
        light_params[channel] = _select_color_for_mode(value, Mode.LIGHT)
        dark_params[channel] = _select_color_for_mode(value, Mode.DARK)

    return resolve_design_tokens(light_params), resolve_design_tokens(dark_params)


def split_theme_name(theme: str) -> tuple[str, Mode | None]:
    """
    Split a mode suffix off a theme name.

    Example:
        split_theme_name("nord-light") -> ("nord", Mode.LIGHT)
        split_theme_name("nord") -> ("nord", None)
    """
    for suffix, mode in _THEME_MODE_SUFFIXES.items():
        if theme.endswith(suffix):
            return theme.removesuffix(suffix), mode
    return theme, None


def parse_color_param(value: str) -> tuple[str, str]:
    """
    Parse a color parameter into (light, dark) values.

    Accepts a single color ("1D4ED8") used for both modes, or a
    "LIGHT/DARK" pair. A missing '#' is added. Values that fail color
    parsing are kept as-is.
    """
    pair = split_color_pair(value)
    if pair is None:
        single = _normalize_color(value)
        return single, single
    light, dark = pair
    return _normalize_color(light), _normalize_color(dark)


# =============================================================================
# Stages
# =============================================================================


def _param(params: Mapping[str, str], key: str) -> str:
    return params.get(key) or ""


def _normalize_color(value: str) -> str:
    color = ensure_hash_prefix(value)
    if not is_valid_color(color):
        logger.debug(f"Color {color!r} did not parse, using it as-is")
    return color


def _stage_radix_tokens(staging: TokenStaging, params: Mapping[str, str]) -> None:
    staging.radix_accent_color = _param(params, "accentColor")
    staging.radix_gray_color = _param(params, "grayColor")
    staging.radix_scaling = _param(params, "scaling")

    radius = _param(params, "radius")
    if not radius:
        return
    if is_numeric_radius(radius):
        staging.radius = int(radius)
        return
    if radius not in RADIX_RADIUS_PIXELS:
        logger.debug(f"Unknown radius keyword {radius!r}, using medium")
    staging.radix_radius = radius


def _stage_radix_colors(staging: TokenStaging) -> None:
    accent_name = staging.radix_accent_color
    gray_name = staging.radix_gray_color

    if accent_name and radix_accent(accent_name, Mode.DARK) is None:
        logger.debug(f"Unknown Radix accent color {accent_name!r}")
        accent_name = ""
    if gray_name and radix_gray(gray_name, Mode.DARK) is None:
        logger.debug(f"Unknown Radix gray color {gray_name!r}")
        gray_name = ""

    for mode in Mode:
        if accent_name:
            staging.derived["accent"].set(mode, radix_accent(accent_name, mode) or "")
        if gray_name:
            gray = radix_gray(gray_name, mode) or {}
            staging.derived["background"].set(mode, gray.get("bg", ""))
            staging.derived["color"].set(mode, gray.get("fg", ""))


def _stage_theme(staging: TokenStaging, theme: str) -> None:
    name, suffix_mode = split_theme_name(theme)
    modes = THEME_COLORS.get(name)
    if modes is None:
        logger.debug(f"Unknown theme {name!r}, keeping defaults")
        return

    mode = suffix_mode or THEME_NATIVE_MODES.get(name, staging.base.mode)
    if mode not in modes:
        mode = Mode.DARK

    staging.theme = name
    staging.theme_mode = mode
    staging.theme_radius = THEME_RADIUS_OVERRIDES.get(name)
    for slot_mode in Mode:
        # A suffix pins one triple for every mode
        colors = modes[mode] if suffix_mode else modes.get(slot_mode) or modes[Mode.DARK]
        for channel in COLOR_CHANNELS:
            staging.derived[channel].set(slot_mode, colors[channel])


def _stage_color_overrides(staging: TokenStaging, params: Mapping[str, str]) -> None:
    for channel in COLOR_CHANNELS:
        slots = staging.variants[channel]

        value = _param(params, channel)
        if value:
            slots.light, slots.dark = parse_color_param(value)

        # Deprecated single-mode keys
        for mode in Mode:
            single = _param(params, f"{channel}_{mode.value}")
            if single:
                slots.set(mode, _normalize_color(single))


def _stage_density(staging: TokenStaging, params: Mapping[str, str]) -> None:
    density = _param(params, "density")
    if not density:
        return
    try:
        staging.density = Density(density)
    except ValueError:
        logger.debug(f"Ignoring unknown density {density!r}")


def _resolve_mode(staging: TokenStaging, params: Mapping[str, str]) -> Mode:
    mode = _param(params, "mode")
    if mode in (Mode.LIGHT, Mode.DARK):
        return Mode(mode)
    if mode:
        logger.debug(f"Ignoring unknown mode {mode!r}")

    theme = _param(params, "theme")
    if theme:
        suffix_mode = split_theme_name(theme)[1]
        if suffix_mode is not None:
            return suffix_mode

    return staging.established_mode()


def _select_color_for_mode(value: str, mode: Mode) -> str:
    light, dark = parse_color_param(value)
    return light if mode == Mode.LIGHT else dark
