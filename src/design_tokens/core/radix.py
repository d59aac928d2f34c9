"""
Radix UI theme token translation.

Maps the Radix vocabulary (named accent and gray scales, radius keywords,
scaling percentages) to concrete hex colors and pixel values. The color
tables are approximate mappings onto Tailwind-like hex values.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from types import MappingProxyType

from .ir.tokens import Mode

# Accent colors per mode
RADIX_ACCENT_COLORS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "pink": {Mode.LIGHT: "#EC4899", Mode.DARK: "#F472B6"},
        "blue": {Mode.LIGHT: "#3B82F6", Mode.DARK: "#60A5FA"},
        "green": {Mode.LIGHT: "#10B981", Mode.DARK: "#34D399"},
        "purple": {Mode.LIGHT: "#8B5CF6", Mode.DARK: "#A78BFA"},
        "red": {Mode.LIGHT: "#EF4444", Mode.DARK: "#F87171"},
        "orange": {Mode.LIGHT: "#F97316", Mode.DARK: "#FB923C"},
        "yellow": {Mode.LIGHT: "#EAB308", Mode.DARK: "#FCD34D"},
        "cyan": {Mode.LIGHT: "#06B6D4", Mode.DARK: "#22D3EE"},
        "violet": {Mode.LIGHT: "#7C3AED", Mode.DARK: "#8B5CF6"},
        "indigo": {Mode.LIGHT: "#6366F1", Mode.DARK: "#818CF8"},
    }
)

# Gray scales per mode: background, foreground and border
RADIX_GRAY_COLORS: Mapping[str, Mapping[str, Mapping[str, str]]] = MappingProxyType(
    {
        "mauve": {
            Mode.LIGHT: {"bg": "#FDFCFD", "fg": "#1A1523", "border": "#E9E4ED"},
            Mode.DARK: {"bg": "#1A1523", "fg": "#EDE9FE", "border": "#2F2655"},
        },
        "slate": {
            Mode.LIGHT: {"bg": "#FBFCFD", "fg": "#1E293B", "border": "#E2E8F0"},
            Mode.DARK: {"bg": "#0F172A", "fg": "#F1F5F9", "border": "#1E293B"},
        },
        "gray": {
            Mode.LIGHT: {"bg": "#FBFBFB", "fg": "#1C1C1F", "border": "#E4E4E7"},
            Mode.DARK: {"bg": "#111113", "fg": "#E4E4E7", "border": "#2A2A2B"},
        },
        "sage": {
            Mode.LIGHT: {"bg": "#FBFDFC", "fg": "#1C211C", "border": "#E8EDE8"},
            Mode.DARK: {"bg": "#141716", "fg": "#ECEDEC", "border": "#272D27"},
        },
        "olive": {
            Mode.LIGHT: {"bg": "#FCFDFC", "fg": "#1C211C", "border": "#E8EDE8"},
            Mode.DARK: {"bg": "#181B18", "fg": "#ECEDEC", "border": "#2A2E2A"},
        },
        "sand": {
            Mode.LIGHT: {"bg": "#FAF9F6", "fg": "#1C1C1A", "border": "#E8E6E1"},
            Mode.DARK: {"bg": "#161615", "fg": "#E8E6E1", "border": "#282826"},
        },
    }
)

RADIX_RADIUS_PIXELS: Mapping[str, int] = MappingProxyType(
    {
        "none": 0,
        "small": 4,
        "medium": 8,
        "large": 16,
        "full": 9999,
    }
)

# Unrecognized radius keywords fall back to "medium"
DEFAULT_RADIUS_PIXELS = RADIX_RADIUS_PIXELS["medium"]

_LEADING_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_INTEGER_RE = re.compile(r"[-+]?\d+")


def radix_radius_to_pixels(radius: str) -> int:
    """Convert a Radix radius keyword to pixels."""
    return RADIX_RADIUS_PIXELS.get(radius, DEFAULT_RADIUS_PIXELS)


def parse_scaling_percent(scaling: str) -> float | None:
    """
    Parse the numeric portion of a scaling string such as "105%".

    Returns:
        The leading number, or None when there is none
    """
    match = _LEADING_NUMBER_RE.match(scaling.strip().removesuffix("%"))
    if match is None:
        return None
    return float(match.group(0))


def radix_scaling_to_float(scaling: str) -> float:
    """Convert a Radix scaling percentage to a multiplier (1.0 when unusable)."""
    percent = parse_scaling_percent(scaling)
    if not percent or not math.isfinite(percent):
        return 1.0
    return percent / 100.0


def radix_accent(name: str, mode: Mode | str) -> str | None:
    """Accent hex for a Radix accent color name, or None if unknown."""
    colors = RADIX_ACCENT_COLORS.get(name)
    if colors is None:
        return None
    return colors[mode]


def radix_gray(name: str, mode: Mode | str) -> Mapping[str, str] | None:
    """Gray scale entries (bg, fg, border) for a Radix gray name, or None if unknown."""
    grays = RADIX_GRAY_COLORS.get(name)
    if grays is None:
        return None
    return grays[mode]


def is_numeric_radius(radius: str) -> bool:
    """Check whether a radius parameter is a plain integer pixel value."""
    return _INTEGER_RE.fullmatch(radius) is not None
