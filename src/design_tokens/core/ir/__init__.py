"""
Intermediate representation for resolved design tokens.
"""

from .tokens import (
    Density,
    DesignTokens,
    LayoutTokens,
    Mode,
    MotionLevel,
    MotionTokens,
    default_layout_tokens,
)

__all__ = [
    "Density",
    "DesignTokens",
    "LayoutTokens",
    "Mode",
    "MotionLevel",
    "MotionTokens",
    "default_layout_tokens",
]
