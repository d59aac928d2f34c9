"""
Error types for design token parsing and configuration loading.

Token resolution itself never raises: malformed parameters degrade to
defaults. These errors only surface at the edges (color parsing helpers,
CLI argument parsing, and token file loading).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class DesignTokensError(Exception):
    """Base exception for all design token errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ColorParseError(DesignTokensError, ValueError):
    """
    Raised when a color string cannot be parsed.

    Examples:
    - Hex value with the wrong number of digits
    - Non-hex characters after the leading '#'
    - Unknown named color
    """

    pass


class ParamError(DesignTokensError):
    """
    Raised when a parameter source is malformed.

    Examples:
    - CLI argument without a '=' separator
    - Empty parameter key
    """

    pass


class TokenSpecError(DesignTokensError):
    """
    Raised when a token parameter file cannot be loaded.

    Examples:
    - Invalid YAML
    - Top-level value that is not a mapping
    - Nested (non-scalar) parameter value
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside a token parameter file.

    Attributes:
        file: Path to the file being loaded
        key: Optional parameter key the error refers to
    """

    file: Path
    key: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens.yaml [accent]"
        """
        if self.key:
            return f"{self.file} [{self.key}]"
        return str(self.file)


def make_tokenspec_error(
    message: str,
    file: Path,
    key: str | None = None,
) -> TokenSpecError:
    """
    Helper to create a TokenSpecError with file context.

    Args:
        message: Error description
        file: Token file path
        key: Optional offending parameter key

    Returns:
        TokenSpecError with context attached
    """
    return TokenSpecError(message, ErrorContext(file=file, key=key))
