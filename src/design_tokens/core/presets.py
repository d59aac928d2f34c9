"""
Theme presets and the named theme color table.

Each preset is a complete token snapshot sharing the default layout.
Factories return a fresh snapshot per call.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from .ir.tokens import DesignTokens, Mode

DEFAULT_THEME_NAME = "default"

# Color triples per theme and mode
THEME_COLORS: Mapping[str, Mapping[str, Mapping[str, str]]] = MappingProxyType(
    {
        "nord": {
            Mode.LIGHT: {"color": "#2E3440", "background": "#ECEFF4", "accent": "#5E81AC"},
            Mode.DARK: {"color": "#ECEFF4", "background": "#2E3440", "accent": "#5E81AC"},
        },
        "midnight": {
            Mode.LIGHT: {"color": "#1F2937", "background": "#F9FAFB", "accent": "#2563EB"},
            Mode.DARK: {"color": "#E5E7EB", "background": "#020617", "accent": "#1D4ED8"},
        },
        "paper": {
            Mode.LIGHT: {"color": "#1F2937", "background": "#F9FAFB", "accent": "#3B82F6"},
            Mode.DARK: {"color": "#E5E7EB", "background": "#1F2937", "accent": "#60A5FA"},
        },
        "wrapped": {
            Mode.LIGHT: {"color": "#1F2937", "background": "#FDF2F8", "accent": "#EC4899"},
            Mode.DARK: {"color": "#EC4899", "background": "#020617", "accent": "#7B58C9"},
        },
        "default": {
            Mode.LIGHT: {"color": "#1F2937", "background": "#FFFFFF", "accent": "#2563EB"},
            Mode.DARK: {"color": "#E5E7EB", "background": "#020617", "accent": "#1D4ED8"},
        },
    }
)

# Mode a bare theme name resolves to
THEME_NATIVE_MODES: Mapping[str, Mode] = MappingProxyType(
    {
        "default": Mode.DARK,
        "midnight": Mode.DARK,
        "nord": Mode.DARK,
        "paper": Mode.LIGHT,
        "wrapped": Mode.DARK,
    }
)

# Themes that change non-color fields
THEME_RADIUS_OVERRIDES: Mapping[str, int] = MappingProxyType({"wrapped": 20})


def _preset(name: str) -> DesignTokens:
    mode = THEME_NATIVE_MODES[name]
    colors = THEME_COLORS[name][mode]
    return DesignTokens(
        theme=name,
        color=colors["color"],
        background=colors["background"],
        accent=colors["accent"],
        radius=THEME_RADIUS_OVERRIDES.get(name, 16),
        mode=mode,
    )


def default_theme() -> DesignTokens:
    """Default tokens (dark mode)."""
    return _preset("default")


def midnight_theme() -> DesignTokens:
    """Midnight theme (dark mode)."""
    return _preset("midnight")


def nord_theme() -> DesignTokens:
    """Nord theme (dark mode)."""
    return _preset("nord")


def paper_theme() -> DesignTokens:
    """Paper theme (light mode)."""
    return _preset("paper")


def wrapped_theme() -> DesignTokens:
    """Wrapped theme (dark mode with a larger corner radius)."""
    return _preset("wrapped")


def custom_theme(params: Mapping[str, str]) -> DesignTokens:
    """Create a theme from query parameters."""
    from .resolver import resolve_design_tokens

    return resolve_design_tokens(params)


_PRESET_FACTORIES: dict[str, Callable[[], DesignTokens]] = {
    "default": default_theme,
    "midnight": midnight_theme,
    "nord": nord_theme,
    "paper": paper_theme,
    "wrapped": wrapped_theme,
}


def get_theme_preset(name: str) -> DesignTokens | None:
    """
    Get a preset by name.

    Returns:
        Fresh DesignTokens snapshot, or None for unknown names
    """
    factory = _PRESET_FACTORIES.get(name)
    if factory is None:
        return None
    return factory()


def list_theme_presets() -> list[str]:
    """List available preset names."""
    return list(_PRESET_FACTORIES)
