"""
Motion token resolution.

Maps a motion level to fixed animation durations and amplitudes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .ir.tokens import MotionLevel, MotionTokens

logger = logging.getLogger(__name__)

DEFAULT_MOTION_LEVEL = MotionLevel.SUBTLE

# Durations per level (fast, normal, slow, stagger)
MOTION_DURATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        MotionLevel.NONE: {"fast": "0s", "normal": "0s", "slow": "0s", "stagger": "0s"},
        MotionLevel.SUBTLE: {"fast": "1.0s", "normal": "2.4s", "slow": "4.0s", "stagger": "0.12s"},
        MotionLevel.REGULAR: {"fast": "0.7s", "normal": "1.6s", "slow": "2.8s", "stagger": "0.08s"},
        MotionLevel.LOUD: {"fast": "0.5s", "normal": "1.2s", "slow": "2.0s", "stagger": "0.05s"},
    }
)

# Amplitudes per level (card scale pulse, LED breathing).
# "none" stops animation through zero durations and keeps the base amplitudes.
MOTION_AMPLITUDES: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        MotionLevel.NONE: {"scaleCard": 0.03, "ledBreathe": 0.06},
        MotionLevel.SUBTLE: {"scaleCard": 0.02, "ledBreathe": 0.04},
        MotionLevel.REGULAR: {"scaleCard": 0.03, "ledBreathe": 0.06},
        MotionLevel.LOUD: {"scaleCard": 0.05, "ledBreathe": 0.10},
    }
)


def motion_tokens_for_level(level: MotionLevel) -> MotionTokens:
    """Build motion tokens from the fixed table for ``level``."""
    return MotionTokens(
        level=level,
        durations=dict(MOTION_DURATIONS[level]),
        amplitudes=dict(MOTION_AMPLITUDES[level]),
    )


def resolve_motion_tokens(params: Mapping[str, str]) -> MotionTokens:
    """
    Resolve motion tokens from query parameters.

    Only a ``motion`` value of none, subtle, regular or loud changes the
    level; anything else keeps the subtle baseline.
    """
    level = DEFAULT_MOTION_LEVEL
    motion = params.get("motion") or ""
    if motion:
        try:
            level = MotionLevel(motion)
        except ValueError:
            logger.debug(f"Ignoring unknown motion level {motion!r}")
    return motion_tokens_for_level(level)
