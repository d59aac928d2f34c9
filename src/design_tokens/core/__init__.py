"""Core design token functionality: IR, presets, resolution, CSS and DTCG output."""

from . import ir
from .css_generator import (
    generate_adaptive_css,
    generate_css,
    generate_layout_css,
    generate_motion_css,
)
from .dtcg_export import export_dtcg_file, generate_dtcg_tokens
from .errors import (
    ColorParseError,
    DesignTokensError,
    ErrorContext,
    ParamError,
    TokenSpecError,
)
from .motion import resolve_motion_tokens
from .params import parse_param_args, parse_query_params, validate_params
from .presets import (
    custom_theme,
    default_theme,
    get_theme_preset,
    list_theme_presets,
    midnight_theme,
    nord_theme,
    paper_theme,
    wrapped_theme,
)
from .resolver import resolve_design_tokens, resolve_design_tokens_for_both_modes
from .tokenspec_loader import load_token_params, save_token_params, scaffold_tokenspec

__all__ = [
    "ir",
    # Errors
    "DesignTokensError",
    "ColorParseError",
    "ParamError",
    "TokenSpecError",
    "ErrorContext",
    # Resolution
    "resolve_design_tokens",
    "resolve_design_tokens_for_both_modes",
    "resolve_motion_tokens",
    # Presets
    "custom_theme",
    "default_theme",
    "get_theme_preset",
    "list_theme_presets",
    "midnight_theme",
    "nord_theme",
    "paper_theme",
    "wrapped_theme",
    # Output
    "generate_css",
    "generate_adaptive_css",
    "generate_layout_css",
    "generate_motion_css",
    "generate_dtcg_tokens",
    "export_dtcg_file",
    # Parameters
    "parse_param_args",
    "parse_query_params",
    "validate_params",
    "load_token_params",
    "save_token_params",
    "scaffold_tokenspec",
]
