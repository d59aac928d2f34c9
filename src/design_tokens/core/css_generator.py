"""
CSS generator for design tokens.

Generates CSS custom properties from resolved tokens for templating
layers (SVG <style> blocks, HTML pages).
"""

from __future__ import annotations

from .ir.tokens import DesignTokens, LayoutTokens, MotionTokens


def generate_css(tokens: DesignTokens, selector: str = ":root") -> str:
    """
    Generate the CSS variable block for a token set.

    Covers the six scalar fields: color, background, accent, font family,
    radius and padding.

    Args:
        tokens: Resolved design tokens
        selector: Selector wrapping the variables

    Returns:
        CSS string
    """
    lines = [f"{selector} {{"]
    lines.extend(_token_lines(tokens, indent=2))
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_adaptive_css(light: DesignTokens, dark: DesignTokens) -> str:
    """
    Generate CSS that follows the viewer's color scheme.

    Light tokens apply by default; dark tokens apply inside a
    ``prefers-color-scheme: dark`` media query.
    """
    lines = [":root {"]
    lines.extend(_token_lines(light, indent=2))
    lines.append("}")
    lines.append("@media (prefers-color-scheme: dark) {")
    lines.append("  :root {")
    lines.extend(_token_lines(dark, indent=4))
    lines.append("  }")
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_motion_css(motion: MotionTokens, selector: str = ":root") -> str:
    """Generate --motion-* variables for durations and amplitudes."""
    lines = [f"{selector} {{"]
    for name, duration in motion.durations.items():
        lines.append(f"  --motion-{_kebab(name)}: {duration};")
    for name, amplitude in motion.amplitudes.items():
        lines.append(f"  --motion-amplitude-{_kebab(name)}: {amplitude};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_layout_css(layout: LayoutTokens, selector: str = ":root") -> str:
    """Generate --layout-* variables for the layout constants."""
    lines = [f"{selector} {{"]
    for name, value in layout.model_dump().items():
        suffix = "" if name == "default_grid_columns" else "px"
        lines.append(f"  --layout-{name.replace('_', '-')}: {value:g}{suffix};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _token_lines(tokens: DesignTokens, indent: int = 0) -> list[str]:
    prefix = " " * indent
    return [
        f"{prefix}--color: {tokens.color};",
        f"{prefix}--background: {tokens.background};",
        f"{prefix}--accent: {tokens.accent};",
        f"{prefix}--font-family: {tokens.font_family};",
        f"{prefix}--radius: {tokens.radius}px;",
        f"{prefix}--padding: {tokens.padding}px;",
    ]


def _kebab(name: str) -> str:
    """Convert camelCase token names to kebab-case ("scaleCard" -> "scale-card")."""
    chars: list[str] = []
    for ch in name:
        if ch.isupper():
            chars.append("-")
            chars.append(ch.lower())
        else:
            chars.append(ch)
    return "".join(chars)
