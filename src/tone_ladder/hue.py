"""Per-step hue bias toward the colour of the light.

Warm light pulls highlights toward the warm anchor and shadows toward the
cool one; cool light does the reverse. Positions run from -1 (darkest rung)
through 0 (the base) to +1 (lightest rung).
"""

from __future__ import annotations

import math
from dataclasses import replace

from .config import DEFAULT_CONFIG, EngineConfig, HueStability, LightAnchors, ModeConfig
from .convert import OKLCH, normalize_hue, oklch_to_oklab, short_arc_lerp


def temperature_response(t: float, exponent: float = 1.6) -> float:
    """sign(t)·|t|^γ – gentle near neutral, full strength at ±1."""
    if t == 0:
        return 0.0
    return math.copysign(abs(t) ** exponent, t)


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    t = max(0.0, min(1.0, (x - edge0) / (edge1 - edge0)))
    return t * t * (3.0 - 2.0 * t)


def hue_stability_factor(chroma: float, stability: HueStability = HueStability()) -> float:
    """Multiplier for the hue shift: zero at the chroma floor, easing in quadratically up to the reference."""
    if chroma <= stability.chroma_floor:
        return 0.0
    if chroma >= stability.chroma_ref:
        return 1.0
    t = (chroma - stability.chroma_floor) / (stability.chroma_ref - stability.chroma_floor)
    return t * t


def anchor_for(position: float, temperature: float, anchors: LightAnchors) -> float:
    if position > 0:
        return anchors.for_highlights(temperature)
    return anchors.for_shadows(temperature)


def shift_weight(
    position: float,
    temperature: float,
    mode: ModeConfig,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    response = temperature_response(temperature, config.temperature_exponent)
    return abs(position) ** config.position_exponent * abs(response) * mode.max_hue_shift / 90.0


def shifted_hue(
    base_h: float,
    position: float,
    temperature: float,
    chroma: float,
    mode: ModeConfig,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """
    Base hue moved along the shortest arc toward the step's anchor.

    ``chroma`` is the step's target chroma; the shift fades out as it
    approaches the stability floor, where hue stops being visible.
    """
    if temperature == 0 or position == 0:
        return base_h
    anchor = anchor_for(position, temperature, config.anchors)
    w = shift_weight(position, temperature, mode, config)
    w *= hue_stability_factor(chroma, config.stability)
    return short_arc_lerp(base_h, anchor, w)


def converge_highlight(
    color: OKLCH,
    position: float,
    temperature: float,
    mode: ModeConfig,
    config: EngineConfig = DEFAULT_CONFIG,
) -> OKLCH:
    """
    Pull upper highlights toward the light anchor by blending a/b in Oklab.

    The blend weight ramps in over the top of the highlight range, scales
    with |temperature| and with how much chroma the step has, so an
    achromatic step is left alone. Chroma is kept; only the hue moves.
    """
    if position <= 0 or temperature == 0 or color.C <= 0:
        return color
    lo, hi = config.convergence_window
    w = (
        smoothstep(lo, hi, position)
        * abs(temperature) ** config.convergence_temperature_exponent
        * mode.convergence_strength
        * min(1.0, color.C / config.stability.chroma_ref)
    )
    if w <= 0:
        return color

    anchor = config.anchors.for_highlights(temperature)
    current = oklch_to_oklab(color)[1:]
    target = oklch_to_oklab(replace(color, H=anchor))[1:]
    a, b = (1.0 - w) * current + w * target
    if math.hypot(a, b) < 1e-12:
        # exactly opposed vectors at w == 0.5; keep the current hue
        return color
    return replace(color, H=normalize_hue(math.degrees(math.atan2(b, a))))


def neutral_hue(base_h: float, position: float, temperature: float, anchors: LightAnchors) -> float:
    # grey bases have no hue of their own to bias; take the anchor outright
    if temperature == 0 or position == 0:
        return base_h
    return anchor_for(position, temperature, anchors)


__all__ = [
    "anchor_for",
    "converge_highlight",
    "hue_stability_factor",
    "neutral_hue",
    "shift_weight",
    "shifted_hue",
    "smoothstep",
    "temperature_response",
]
