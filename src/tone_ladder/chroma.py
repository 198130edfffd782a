from __future__ import annotations

from math import cos, pi

from .config import DEFAULT_CONFIG, EngineConfig, ModeConfig


def standard_chroma(
    base_c: float,
    position: float,
    mode: ModeConfig,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """
    Chroma scaled from the base: a cosine bump peaking at the midpoint
    (position 0), floored at ``chroma_retention`` of the base, with an extra
    power-curve falloff on the highlight side only.
    """
    raw = 0.5 + 0.5 * cos(position * pi)
    shaped = raw**mode.chroma_curve_exponent
    c = base_c * (mode.chroma_retention + (1.0 - mode.chroma_retention) * shaped)
    if position > 0:
        c *= 1.0 - config.highlight_falloff_depth * position**config.highlight_falloff_exponent
    return c


def neutral_chroma(
    position: float,
    temperature: float,
    mode: ModeConfig,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    # grey bases carry no chroma to scale; the tint is synthesized from zero
    tint = mode.neutral_tint_strength * abs(position) ** mode.neutral_tint_exponent
    return min(config.neutral_chroma_cap, tint * abs(temperature))


def apply_endpoint_floor(
    c: float, index: int, steps: int, temperature: float, mode: ModeConfig
) -> float:
    """Tinted endpoints whenever the light is not neutral."""
    if temperature == 0 or index not in (0, steps - 1):
        return c
    return max(c, mode.endpoint_chroma_floor * abs(temperature))


def stability_chroma(
    base_c: float,
    position: float,
    index: int,
    steps: int,
    temperature: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """
    Chroma the hue-stability damping is judged against: the largest target
    chroma any configured mode gives this rung.

    Every mode sees the same damping at a given rung, so modes differ in hue
    displacement only through ``max_hue_shift``.
    """
    return max(
        apply_endpoint_floor(standard_chroma(base_c, position, m, config), index, steps, temperature, m)
        for m in config.modes.values()
    )


__all__ = ["apply_endpoint_floor", "neutral_chroma", "stability_chroma", "standard_chroma"]
