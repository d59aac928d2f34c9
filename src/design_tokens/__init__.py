"""
design-tokens - resolve visual design tokens from presets and query parameters.

Turns flat key/value parameters (theme, colors, Radix theme tokens, motion)
into deterministic color, spacing, radius and motion values for a
rendering layer.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import DesignTokensError, ParamError, TokenSpecError
from .core.ir import DesignTokens, LayoutTokens, MotionTokens
from .core.motion import resolve_motion_tokens
from .core.resolver import resolve_design_tokens, resolve_design_tokens_for_both_modes

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "DesignTokens",
    "LayoutTokens",
    "MotionTokens",
    "resolve_design_tokens",
    "resolve_design_tokens_for_both_modes",
    "resolve_motion_tokens",
    "DesignTokensError",
    "ParamError",
    "TokenSpecError",
]
