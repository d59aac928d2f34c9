"""
Parameter sources and linting.

Turns query strings and ``key=value`` arguments into the flat mapping the
resolver consumes, and reports parameters the resolver would ignore.
Linting is advisory; resolution never depends on it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import parse_qsl

from .colors import ensure_hash_prefix, is_valid_color, split_color_pair
from .errors import ParamError
from .ir.tokens import Density, Mode, MotionLevel
from .presets import THEME_COLORS
from .radix import (
    RADIX_ACCENT_COLORS,
    RADIX_GRAY_COLORS,
    RADIX_RADIUS_PIXELS,
    is_numeric_radius,
    parse_scaling_percent,
)
from .resolver import split_theme_name

COLOR_KEYS: tuple[str, ...] = ("color", "background", "accent")

DEPRECATED_COLOR_KEYS: tuple[str, ...] = (
    "color_light",
    "color_dark",
    "background_light",
    "background_dark",
    "accent_light",
    "accent_dark",
)

RECOGNIZED_KEYS: frozenset[str] = frozenset(
    {
        "theme",
        "mode",
        "density",
        *COLOR_KEYS,
        *DEPRECATED_COLOR_KEYS,
        "accentColor",
        "grayColor",
        "radius",
        "scaling",
        "motion",
    }
)


# =============================================================================
# Sources
# =============================================================================


def parse_query_params(query: str) -> dict[str, str]:
    """
    Parse a URL query string into flat parameters.

    The first occurrence of a repeated key wins. A leading '?' is ignored.

    Example:
        parse_query_params("?theme=nord&color=ECEFF4") -> {"theme": "nord", "color": "ECEFF4"}
    """
    params: dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


def parse_param_args(args: Iterable[str]) -> dict[str, str]:
    """
    Parse ``key=value`` arguments into flat parameters.

    Later arguments override earlier ones.

    Raises:
        ParamError: If an argument has no '=' or an empty key
    """
    params: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        key = key.strip()
        if not sep:
            raise ParamError(f"Expected KEY=VALUE, got {arg!r}")
        if not key:
            raise ParamError(f"Empty parameter key in {arg!r}")
        params[key] = value
    return params


# =============================================================================
# Linting
# =============================================================================


class ParamsValidationResult:
    """Result of parameter linting."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_clean(self) -> bool:
        return len(self.warnings) == 0

    def __repr__(self) -> str:
        return f"ParamsValidationResult(warnings={len(self.warnings)})"


def validate_params(params: Mapping[str, str]) -> ParamsValidationResult:
    """
    Report parameters that resolution will ignore or fall back on.

    Args:
        params: Flat parameters as passed to the resolver.

    Returns:
        ParamsValidationResult with one warning per problem.
    """
    result = ParamsValidationResult()

    for key in sorted(params):
        if key not in RECOGNIZED_KEYS:
            result.add_warning(f"Unrecognized parameter '{key}' is ignored")

    theme = params.get("theme") or ""
    if theme:
        name = split_theme_name(theme)[0]
        if name not in THEME_COLORS:
            result.add_warning(f"Unknown theme '{name}'; defaults are used")
        if params.get("accentColor") or params.get("grayColor"):
            result.add_warning("theme is ignored because Radix accentColor/grayColor are set")

    _check_choice(result, params, "mode", [m.value for m in Mode])
    _check_choice(result, params, "density", [d.value for d in Density])
    _check_choice(result, params, "motion", [m.value for m in MotionLevel])
    _check_choice(result, params, "accentColor", list(RADIX_ACCENT_COLORS))
    _check_choice(result, params, "grayColor", list(RADIX_GRAY_COLORS))

    radius = params.get("radius") or ""
    if radius and not is_numeric_radius(radius) and radius not in RADIX_RADIUS_PIXELS:
        result.add_warning(f"Unknown radius keyword '{radius}'; medium (8px) is used")

    scaling = params.get("scaling") or ""
    if scaling and not parse_scaling_percent(scaling):
        result.add_warning(f"Unusable scaling '{scaling}'; 100% is used")

    for key in (*COLOR_KEYS, *DEPRECATED_COLOR_KEYS):
        value = params.get(key) or ""
        if not value:
            continue
        pair = split_color_pair(value) if key in COLOR_KEYS else None
        for half in pair or (value,):
            color = ensure_hash_prefix(half)
            if not is_valid_color(color):
                result.add_warning(f"{key}: '{color}' is not a recognized color; used as-is")

    return result


def _check_choice(
    result: ParamsValidationResult,
    params: Mapping[str, str],
    key: str,
    choices: list[str],
) -> None:
    value = params.get(key) or ""
    if value and value not in choices:
        result.add_warning(f"{key} '{value}' is not one of {', '.join(choices)}; ignored")
