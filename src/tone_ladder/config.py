"""Static tunables for the ramp engine.

Everything here is immutable and passed into the ramp computation explicitly
through :class:`EngineConfig`; swap a field with ``dataclasses.replace`` to
experiment without touching module state.

The guardrail ceilings and bands are empirically tuned. Changing them changes
the shape of shipped ramps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

Mode = Literal["conservative", "painterly"]

MODES: tuple[Mode, ...] = ("conservative", "painterly")
STEP_COUNTS: tuple[int, ...] = (9, 11)


@dataclass(frozen=True)
class ModeConfig:
    max_hue_shift: float  # degrees at the ramp extremes, full temperature
    chroma_retention: float  # minimum fraction of base chroma kept at extremes
    chroma_curve_exponent: float  # < 1 keeps saturation longer
    convergence_strength: float  # highlight pull toward the light anchor
    neutral_tint_strength: float  # synthesized endpoint chroma for grey bases
    neutral_tint_exponent: float  # > 1 concentrates the tint near endpoints
    endpoint_chroma_floor: float  # × |temperature| at index 0 and steps-1
    yellow_ceiling: float  # highlight hue ceiling for yellow bases in cool light


@dataclass(frozen=True)
class LightAnchors:
    warm: float = 65.0  # amber
    cool: float = 205.0  # sky

    def for_highlights(self, temperature: float) -> float:
        return self.warm if temperature > 0 else self.cool

    def for_shadows(self, temperature: float) -> float:
        return self.cool if temperature > 0 else self.warm


@dataclass(frozen=True)
class GuardrailBand:
    """Hue interval [start, end]; wraps through 0° when start > end."""

    name: str
    start: float
    end: float
    ceiling: float | None = None

    def contains(self, hue: float) -> bool:
        if self.start <= self.end:
            return self.start <= hue <= self.end
        return hue >= self.start or hue <= self.end


@dataclass(frozen=True)
class HueStability:
    chroma_floor: float = 0.012  # at or below: hue frozen
    chroma_ref: float = 0.045  # at or above: full shift


@dataclass(frozen=True)
class EngineConfig:
    modes: Mapping[str, ModeConfig]
    anchors: LightAnchors = field(default_factory=LightAnchors)
    stability: HueStability = field(default_factory=HueStability)

    l_min: float = 0.08
    l_max: float = 0.98
    min_l_step: float = 0.002
    hex_lift_step: float = 0.001  # L nudge when 8-bit rounding collapses two rungs

    temperature_exponent: float = 1.6
    position_exponent: float = 1.1

    convergence_window: tuple[float, float] = (0.6, 1.0)
    convergence_temperature_exponent: float = 0.7

    highlight_falloff_depth: float = 0.45
    highlight_falloff_exponent: float = 2.2

    neutral_threshold: float = 0.03
    neutral_chroma_cap: float = 0.035

    visible_chroma: float = 0.012
    guarded_highlights: int = 3
    yellow_family: GuardrailBand = GuardrailBand("yellow", 60.0, 110.0)
    red_family: GuardrailBand = GuardrailBand("red", 320.0, 50.0)
    red_forbidden: GuardrailBand = GuardrailBand("red-forbidden", 80.0, 200.0, 75.0)

    def mode(self, name: str) -> ModeConfig:
        return self.modes[name]


CONSERVATIVE = ModeConfig(
    max_hue_shift=18.0,
    chroma_retention=0.40,
    chroma_curve_exponent=1.0,
    convergence_strength=0.45,
    neutral_tint_strength=0.022,
    neutral_tint_exponent=1.4,
    endpoint_chroma_floor=0.020,
    yellow_ceiling=110.0,
)

PAINTERLY = ModeConfig(
    max_hue_shift=38.0,
    chroma_retention=0.28,
    chroma_curve_exponent=0.8,
    convergence_strength=0.85,
    neutral_tint_strength=0.035,
    neutral_tint_exponent=1.1,
    endpoint_chroma_floor=0.030,
    yellow_ceiling=115.0,
)

DEFAULT_CONFIG = EngineConfig(
    modes=MappingProxyType({"conservative": CONSERVATIVE, "painterly": PAINTERLY})
)

__all__ = [
    "CONSERVATIVE",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "GuardrailBand",
    "HueStability",
    "LightAnchors",
    "MODES",
    "Mode",
    "ModeConfig",
    "PAINTERLY",
    "STEP_COUNTS",
]
