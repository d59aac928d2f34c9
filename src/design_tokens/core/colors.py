"""
Color string helpers.

Parsing here is informational: the resolver stores color strings as given
(with a leading '#') whether or not they parse.
"""

from __future__ import annotations

import re

from .errors import ColorParseError

RGBA = tuple[int, int, int, float]

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^(rgba?)\(\s*([^)]*)\)$", re.IGNORECASE)

_NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#008000",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "orange": "#FFA500",
    "purple": "#800080",
    "pink": "#FFC0CB",
    "gray": "#808080",
    "grey": "#808080",
    "transparent": "#00000000",
}


def parse_color(value: str) -> RGBA:
    """
    Parse a hex, rgb()/rgba() or named color.

    Args:
        value: Color string such as "#1D4ED8", "#fff", "rgb(0, 0, 0)" or "white"

    Returns:
        (red, green, blue, alpha) with channels 0-255 and alpha 0-1

    Raises:
        ColorParseError: If the string is not a supported color
    """
    text = value.strip()
    named = _NAMED_COLORS.get(text.lower())
    if named:
        text = named

    hex_match = _HEX_RE.match(text)
    if hex_match:
        return _parse_hex_digits(hex_match.group(1))

    func_match = _FUNC_RE.match(text)
    if func_match:
        return _parse_rgb_function(func_match.group(1).lower(), func_match.group(2), value)

    # Query strings drop the '#', so "#white" style inputs are common
    if text.startswith("#") and text[1:].lower() in _NAMED_COLORS:
        return parse_color(text[1:])

    raise ColorParseError(f"Invalid color value {value!r}. Use #RGB, #RRGGBB, rgb() or a color name.")


def is_valid_color(value: str) -> bool:
    """Check whether a color string parses."""
    try:
        parse_color(value)
    except ColorParseError:
        return False
    return True


def ensure_hash_prefix(value: str) -> str:
    """Prepend '#' unless the value already starts with one."""
    if value.startswith("#"):
        return value
    return f"#{value}"


def split_color_pair(value: str) -> tuple[str, str] | None:
    """
    Split a "LIGHT/DARK" value into its trimmed halves.

    Returns:
        (light, dark), or None when the value is not exactly one pair
    """
    parts = value.split("/")
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


def rgba_to_hex(rgba: RGBA) -> str:
    red, green, blue, alpha = rgba
    if alpha >= 1.0:
        return f"#{red:02X}{green:02X}{blue:02X}"
    return f"#{red:02X}{green:02X}{blue:02X}{round(alpha * 255):02X}"


def _parse_hex_digits(digits: str) -> RGBA:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    red = int(digits[0:2], 16)
    green = int(digits[2:4], 16)
    blue = int(digits[4:6], 16)
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return red, green, blue, alpha


def _parse_rgb_function(name: str, body: str, raw: str) -> RGBA:
    parts = [part.strip() for part in body.replace("/", ",").split(",")]
    allowed = (4,) if name == "rgba" else (3, 4)
    if len(parts) not in allowed:
        raise ColorParseError(f"Invalid color value {raw!r}: wrong number of channels")
    try:
        channels = [_parse_channel(part) for part in parts[:3]]
        alpha = _parse_alpha(parts[3]) if len(parts) == 4 else 1.0
    except ValueError as e:
        raise ColorParseError(f"Invalid color value {raw!r}: {e}") from e
    return channels[0], channels[1], channels[2], alpha


def _parse_channel(text: str) -> int:
    if text.endswith("%"):
        value = float(text[:-1]) * 255 / 100
    else:
        value = float(text)
    if not 0 <= value <= 255:
        raise ValueError(f"channel {text} out of range")
    return int(round(value))


def _parse_alpha(text: str) -> float:
    value = float(text[:-1]) / 100 if text.endswith("%") else float(text)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"alpha {text} out of range")
    return value
