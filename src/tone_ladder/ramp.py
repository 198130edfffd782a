"""Tonal ladder assembly.

A request is validated and classified once into a :class:`RampPlan`
(standard or near-neutral branch, warm/cool/neutral light, guarded family),
then each rung is produced by the branch's step rule, gamut-clamped, and
settled to 8-bit hex.
The ramp comes out darkest first by construction; it is never re-sorted.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from numbers import Integral, Real
from typing import Callable, Dict, List, Literal, Optional, Tuple

from .chroma import apply_endpoint_floor, neutral_chroma, stability_chroma, standard_chroma
from .config import DEFAULT_CONFIG, STEP_COUNTS, EngineConfig, Mode, ModeConfig
from .convert import OKLCH, Hex, canon_hex, clamp_to_srgb_gamut, hex_to_oklch, oklch_to_hex
from .errors import InvalidArgument
from .guardrails import Family, apply_guardrails, guarded_family
from .hue import converge_highlight, neutral_hue, shifted_hue
from .lightness import lightness_profile

log = logging.getLogger(__name__)

Branch = Literal["standard", "neutral"]
Light = Literal["warm", "cool", "neutral"]


@dataclass(frozen=True)
class RampRequest:
    base_hex: Hex
    temperature: float
    steps: int
    mode: Mode

    @classmethod
    def create(
        cls,
        base_hex: object,
        temperature: object,
        steps: object,
        mode: object,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> RampRequest:
        """Validate raw arguments; raises InvalidColorFormat / InvalidArgument."""
        hex_ = canon_hex(base_hex)

        if isinstance(temperature, bool) or not isinstance(temperature, Real):
            raise InvalidArgument("temperature", temperature, "Expected a number between -1 and +1")
        t = float(temperature)
        if not math.isfinite(t):
            raise InvalidArgument("temperature", temperature, "Expected a finite number")
        if not -1.0 <= t <= 1.0:
            raise InvalidArgument("temperature", temperature, "Expected a number between -1 and +1")

        if isinstance(steps, bool) or not isinstance(steps, Integral) or steps not in STEP_COUNTS:
            raise InvalidArgument("steps", steps, "Expected 9 or 11")

        if not isinstance(mode, str) or mode not in config.modes:
            expected = " or ".join(repr(m) for m in config.modes)
            raise InvalidArgument("mode", mode, f"Expected {expected}")

        return cls(hex_, t, int(steps), mode)  # type: ignore[arg-type]


@dataclass(frozen=True)
class RampPlan:
    request: RampRequest
    base: OKLCH
    mode: ModeConfig
    branch: Branch
    light: Light
    family: Optional[Family]

    @property
    def steps(self) -> int:
        return self.request.steps

    @property
    def temperature(self) -> float:
        return self.request.temperature


@dataclass(frozen=True)
class StepTrace:
    index: int
    position: float
    unclamped: OKLCH
    color: OKLCH

    @property
    def clamped(self) -> bool:
        return self.color.C < self.unclamped.C


def classify(request: RampRequest, config: EngineConfig = DEFAULT_CONFIG) -> RampPlan:
    base = hex_to_oklch(request.base_hex)
    t = request.temperature
    light: Light = "warm" if t > 0 else "cool" if t < 0 else "neutral"
    if base.C <= config.neutral_threshold and t != 0:
        branch: Branch = "neutral"
        family = None
    else:
        branch = "standard"
        family = guarded_family(base.H, t, config)
    plan = RampPlan(request, base, config.mode(request.mode), branch, light, family)
    log.debug(
        "plan %s: branch=%s light=%s family=%s base=%s",
        request.base_hex,
        branch,
        light,
        family,
        base,
    )
    return plan


# --- step rules ------------------------------------------------------------

StepRule = Callable[[RampPlan, int, float, float, EngineConfig], OKLCH]


def _standard_step(plan: RampPlan, i: int, p: float, L: float, config: EngineConfig) -> OKLCH:
    t, mode = plan.temperature, plan.mode
    c = standard_chroma(plan.base.C, p, mode, config)
    c = apply_endpoint_floor(c, i, plan.steps, t, mode)
    damping_c = stability_chroma(plan.base.C, p, i, plan.steps, t, config)
    h = shifted_hue(plan.base.H, p, t, damping_c, mode, config)
    color = converge_highlight(OKLCH(L, c, h), p, t, mode, config)
    return apply_guardrails(color, i, plan.steps, plan.family, mode, config)


def _neutral_step(plan: RampPlan, i: int, p: float, L: float, config: EngineConfig) -> OKLCH:
    t, mode = plan.temperature, plan.mode
    c = neutral_chroma(p, t, mode, config)
    c = apply_endpoint_floor(c, i, plan.steps, t, mode)
    return OKLCH(L, c, neutral_hue(plan.base.H, p, t, config.anchors))


STEP_RULES: Dict[Branch, StepRule] = {
    "standard": _standard_step,
    "neutral": _neutral_step,
}


# --- 8-bit settling ------------------------------------------------------------

Swatch = Tuple[OKLCH, Hex]


def _nudge(color: OKLCH, step: float, accept: Callable[[OKLCH, float], bool]) -> Swatch:
    """Move L by ``step`` (re-clamping chroma) until ``accept(color, hex L)`` holds or L hits 0/1."""
    c = color
    hex_ = oklch_to_hex(c)
    while not accept(c, hex_to_oklch(hex_).L):
        L = min(1.0, max(0.0, c.L + step))
        if L == c.L:
            log.warning("no 8-bit lightness left at L=%.4f H=%.2f", c.L, c.H)
            break
        c = clamp_to_srgb_gamut(replace(c, L=L))
        hex_ = oklch_to_hex(c)
    return c, hex_


def settle_to_hex(colors: List[OKLCH], config: EngineConfig = DEFAULT_CONFIG) -> List[Swatch]:
    """
    Encode a darkest-first ladder as hex so that lightness read back from
    each hex strictly increases.

    Near black and near white neighbouring rungs can round to the same (or a
    darker) 8-bit colour. Such a rung is lifted in small L increments until
    its hex reads lighter than the one below. A downward pass then covers
    the case where the top of the ladder ran out of room below white.
    """
    step = config.hex_lift_step
    out: List[Swatch] = []
    for c in colors:
        if not out:
            out.append((c, oklch_to_hex(c)))
            continue
        below, below_hex = out[-1]
        floor = hex_to_oklch(below_hex).L
        settled = _nudge(c, step, lambda cand, hex_l: cand.L > below.L and hex_l > floor)
        if settled[0] is not c:
            log.debug("lifted rung %d: L %.4f -> %.4f (%s)", len(out), c.L, settled[0].L, settled[1])
        out.append(settled)

    for i in range(len(out) - 2, -1, -1):
        above, above_hex = out[i + 1]
        ceiling = hex_to_oklch(above_hex).L
        out[i] = _nudge(out[i][0], -step, lambda cand, hex_l: cand.L < above.L and hex_l < ceiling)
    return out


@dataclass
class ToneLadder:
    config: EngineConfig = DEFAULT_CONFIG

    def trace(self, request: RampRequest) -> List[StepTrace]:
        plan = classify(request, self.config)
        rule = STEP_RULES[plan.branch]
        steps = request.steps
        mid = steps // 2
        lightness = lightness_profile(steps, plan.base.L, self.config)

        out: List[StepTrace] = []
        for i, L in enumerate(lightness):
            p = (i - mid) / mid
            raw = rule(plan, i, p, L, self.config)
            out.append(StepTrace(i, p, raw, clamp_to_srgb_gamut(raw)))
        return out

    def oklch_ramp(self, request: RampRequest) -> List[OKLCH]:
        return [s.color for s in self.trace(request)]

    def swatches(self, request: RampRequest) -> List[Swatch]:
        return settle_to_hex(self.oklch_ramp(request), self.config)

    def ramp(self, base_hex: Hex, temperature: float, steps: int, mode: Mode) -> List[Hex]:
        request = RampRequest.create(base_hex, temperature, steps, mode, self.config)
        return [hex_ for _, hex_ in self.swatches(request)]


def generate_ramp(
    base_hex: Hex,
    temperature: float,
    steps: int,
    mode: Mode,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[Hex]:
    """Hex ladder for a base colour under light of the given temperature, darkest first."""
    return ToneLadder(config=config).ramp(base_hex, temperature, steps, mode)


__all__ = [
    "RampPlan",
    "RampRequest",
    "STEP_RULES",
    "StepTrace",
    "Swatch",
    "ToneLadder",
    "classify",
    "generate_ramp",
    "settle_to_hex",
]
