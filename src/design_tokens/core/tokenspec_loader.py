"""
Token parameter file persistence.

Handles reading and writing default token parameters to tokens.yaml.
The file holds the same flat keys the resolver accepts, either at the
top level or under a ``params:`` section:

    params:
      theme: nord
      accent: 5E81AC/88C0D0
      motion: regular

Quote hex colors made only of digits ("000000"), otherwise YAML reads
them as numbers.

Default location: {project_root}/tokens.yaml
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml

from .errors import TokenSpecError, make_tokenspec_error

logger = logging.getLogger(__name__)

TOKENSPEC_FILE = "tokens.yaml"

DEFAULT_PARAMS: dict[str, str] = {
    "theme": "default",
    "density": "comfortable",
    "motion": "subtle",
}


# =============================================================================
# Path helpers
# =============================================================================


def get_tokenspec_path(project_root: Path) -> Path:
    """Get the tokens.yaml file path."""
    return project_root / TOKENSPEC_FILE


def tokenspec_exists(project_root: Path) -> bool:
    """Check if a tokens.yaml exists in the project."""
    return get_tokenspec_path(project_root).exists()


def _resolve_path(path: Path) -> Path:
    if path.is_dir():
        return get_tokenspec_path(path)
    return path


# =============================================================================
# Loading
# =============================================================================


def _coerce_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _parse_token_params(data: Any, path: Path) -> dict[str, str]:
    """Parse flat parameters from raw YAML data with scalar coercion."""
    if not isinstance(data, Mapping):
        raise make_tokenspec_error(
            f"Expected a mapping, got {type(data).__name__}",
            path,
        )

    section: Any = data["params"] if "params" in data else data
    if not isinstance(section, Mapping):
        raise make_tokenspec_error("Expected 'params' to be a mapping", path, key="params")

    params: dict[str, str] = {}
    for key, value in section.items():
        if isinstance(value, (Mapping, list)):
            raise make_tokenspec_error("Parameter values must be scalars", path, key=str(key))
        params[str(key)] = _coerce_scalar(value)
    return params


def load_token_params(path: Path, *, use_defaults: bool = True) -> dict[str, str]:
    """Load token parameters from tokens.yaml.

    Args:
        path: A tokens.yaml file, or a project directory containing one.
        use_defaults: If True, return an empty mapping when the file doesn't exist.

    Returns:
        Flat parameter mapping.

    Raises:
        TokenSpecError: If file doesn't exist (when use_defaults=False) or invalid.
    """
    tokenspec_path = _resolve_path(path)

    if not tokenspec_path.exists():
        if use_defaults:
            logger.debug(f"No {tokenspec_path.name} found, using defaults")
            return {}
        raise TokenSpecError(f"Token file not found: {tokenspec_path}")

    try:
        content = tokenspec_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise TokenSpecError(f"Invalid YAML in {tokenspec_path}: {e}") from e
    except OSError as e:
        raise TokenSpecError(f"Cannot read {tokenspec_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty {tokenspec_path.name} at {tokenspec_path}, using defaults")
            return {}
        raise TokenSpecError(f"Empty or invalid YAML in {tokenspec_path}")

    return _parse_token_params(data, tokenspec_path)


def save_token_params(path: Path, params: Mapping[str, str]) -> Path:
    """Save token parameters to tokens.yaml.

    Args:
        path: A tokens.yaml file, or a project directory to write it into.
        params: Flat parameters to save.

    Returns:
        Path to the saved file.
    """
    tokenspec_path = _resolve_path(path)

    tokenspec_path.write_text(
        yaml.dump(
            {"params": dict(params)},
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved token parameters to {tokenspec_path}")
    return tokenspec_path


# =============================================================================
# Scaffolding
# =============================================================================


def scaffold_tokenspec(
    project_root: Path,
    *,
    params: Mapping[str, str] | None = None,
    overwrite: bool = False,
) -> Path | None:
    """Create a default tokens.yaml file.

    Args:
        project_root: Directory to create the file in.
        params: Parameters to write (defaults to DEFAULT_PARAMS).
        overwrite: If True, overwrite existing file.

    Returns:
        Path to created file, or None if skipped.
    """
    tokenspec_path = get_tokenspec_path(project_root)

    if tokenspec_path.exists() and not overwrite:
        logger.debug(f"Skipping existing token file: {tokenspec_path}")
        return None

    project_root.mkdir(parents=True, exist_ok=True)
    saved = save_token_params(tokenspec_path, params if params is not None else DEFAULT_PARAMS)

    header = f"# Design token parameters (generated {datetime.now(UTC).date().isoformat()})\n"
    saved.write_text(header + saved.read_text(encoding="utf-8"), encoding="utf-8")
    return saved
