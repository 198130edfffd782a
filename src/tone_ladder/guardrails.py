from __future__ import annotations

import logging
from dataclasses import replace
from typing import Literal, Optional

from .config import DEFAULT_CONFIG, EngineConfig, ModeConfig
from .convert import OKLCH, hue_difference

log = logging.getLogger(__name__)

Family = Literal["yellow", "red"]


def guarded_family(
    base_h: float, temperature: float, config: EngineConfig = DEFAULT_CONFIG
) -> Optional[Family]:
    """Family whose highlights need protecting, or None. Cool light only."""
    if temperature >= 0:
        return None
    if config.yellow_family.contains(base_h):
        return "yellow"
    if config.red_family.contains(base_h):
        return "red"
    return None


def apply_guardrails(
    color: OKLCH,
    index: int,
    steps: int,
    family: Optional[Family],
    mode: ModeConfig,
    config: EngineConfig = DEFAULT_CONFIG,
) -> OKLCH:
    """
    Keep the top highlight rungs inside their colour family.

    yellow – hues pushed past the mode's ceiling (toward green) go back to it.
    red    – hues landing in the forbidden band go back to its ceiling.
    Rungs without visible chroma are left alone.
    """
    if family is None or index < steps - config.guarded_highlights:
        return color
    if color.C <= config.visible_chroma:
        return color

    if family == "yellow":
        ceiling = mode.yellow_ceiling
        # only hues that drifted upward past the ceiling, not ones across the wheel
        if 0.0 < hue_difference(ceiling, color.H) < 180.0:
            log.debug("yellow guardrail step %d: H %.2f -> %.2f", index, color.H, ceiling)
            return replace(color, H=ceiling)
    elif family == "red":
        band = config.red_forbidden
        if band.contains(color.H) and band.ceiling is not None:
            log.debug("red guardrail step %d: H %.2f -> %.2f", index, color.H, band.ceiling)
            return replace(color, H=band.ceiling)
    return color


__all__ = ["Family", "apply_guardrails", "guarded_family"]
