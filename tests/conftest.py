"""Shared pytest fixtures for design-tokens tests."""

from pathlib import Path

import pytest

from design_tokens.core.ir import DesignTokens
from design_tokens.core.presets import default_theme, nord_theme


@pytest.fixture
def default_tokens() -> DesignTokens:
    """Return the default token snapshot."""
    return default_theme()


@pytest.fixture
def nord_tokens() -> DesignTokens:
    """Return the nord preset."""
    return nord_theme()


@pytest.fixture
def variant_tokens() -> DesignTokens:
    """Return tokens with light/dark variants on every color channel."""
    return DesignTokens(
        color="#EEEEEE",
        background="#111111",
        accent="#00FF00",
        color_light="#222222",
        color_dark="#EEEEEE",
        background_light="#FAFAFA",
        background_dark="#111111",
        accent_light="#FF0000",
        accent_dark="#00FF00",
    )


@pytest.fixture
def tokens_file(tmp_path: Path) -> Path:
    """Create a tokens.yaml with a params section."""
    path = tmp_path / "tokens.yaml"
    path.write_text(
        """params:
  theme: nord
  accent: 5E81AC/88C0D0
  motion: regular
""",
        encoding="utf-8",
    )
    return path
