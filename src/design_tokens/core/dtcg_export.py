"""
W3C Design Token Community Group (DTCG) tokens.json export.

Generates a DTCG-compliant tokens.json structure from resolved tokens.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .ir.tokens import DesignTokens, Mode, MotionTokens

logger = logging.getLogger(__name__)


def generate_dtcg_tokens(
    tokens: DesignTokens,
    motion: MotionTokens | None = None,
) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens.

    Groups tokens into: color, dimension, fontFamily, and (with motion)
    duration and number.

    Args:
        tokens: Resolved design tokens.
        motion: Optional motion tokens.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    dtcg: dict[str, Any] = {}

    # Color group, with light/dark variants nested when present
    color_group: dict[str, Any] = {}
    for channel in ("color", "background", "accent"):
        color_group[channel] = {"$type": "color", "$value": getattr(tokens, channel)}
        for mode in Mode:
            variant = tokens.variant(channel, mode)
            if variant:
                color_group.setdefault(f"{channel}-variants", {})[mode.value] = {
                    "$type": "color",
                    "$value": variant,
                }
    dtcg["color"] = color_group

    dtcg["fontFamily"] = {
        "body": {"$type": "fontFamily", "$value": tokens.font_family},
    }

    # Dimension group (radius, padding, layout constants)
    dimension_group: dict[str, Any] = {
        "radius": {"$type": "dimension", "$value": f"{tokens.radius}px"},
        "padding": {"$type": "dimension", "$value": f"{tokens.padding}px"},
    }
    for name, value in tokens.layout.model_dump().items():
        if name == "default_grid_columns":
            continue
        dimension_group[name.replace("_", "-")] = {"$type": "dimension", "$value": f"{value:g}px"}
    dtcg["dimension"] = dimension_group

    number_group: dict[str, Any] = {
        "grid-columns": {"$type": "number", "$value": tokens.layout.default_grid_columns},
    }

    if motion is not None:
        dtcg["duration"] = {
            name: {"$type": "duration", "$value": value} for name, value in motion.durations.items()
        }
        for name, amplitude in motion.amplitudes.items():
            number_group[name] = {"$type": "number", "$value": amplitude}

    dtcg["number"] = number_group

    extensions: dict[str, Any] = {
        "theme": tokens.theme,
        "mode": tokens.mode.value,
        "density": tokens.density.value,
    }
    if motion is not None:
        extensions["motion"] = motion.level.value
    dtcg["$extensions"] = {"design-tokens": extensions}

    return dtcg


def export_dtcg_file(
    tokens: DesignTokens,
    output_path: Path,
    motion: MotionTokens | None = None,
) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        tokens: Resolved design tokens.
        output_path: Path to write tokens.json.
        motion: Optional motion tokens.

    Returns:
        Path to the written file.
    """
    dtcg = generate_dtcg_tokens(tokens, motion)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(dtcg, indent=2),
        encoding="utf-8",
    )

    logger.info(f"Wrote DTCG tokens to {output_path}")
    return output_path
