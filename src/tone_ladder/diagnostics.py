"""Developer diagnostics for tonal ladders.

None of this is needed to generate a ramp. The helpers re-run the engine
and report hue deltas, gamut clamping, highlight stability and adjacent-step
uniformity so tuning changes can be checked at a glance, e.g.::

    from tone_ladder.diagnostics import compare_modes
    compare_modes("#3366CC", 1, 11, log_table=True).painterly_larger
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import product
from typing import List, Sequence

from coloraide import Color

from .config import DEFAULT_CONFIG, MODES, STEP_COUNTS, EngineConfig
from .convert import OKLCH, hex_to_oklch, hue_difference
from .ramp import RampRequest, StepTrace, ToneLadder

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepHue:
    index: int
    role: str  # "shadow" | "base" | "highlight"
    color: OKLCH
    delta: float  # signed hue delta from the base, degrees


@dataclass(frozen=True)
class HueDeltaReport:
    request: RampRequest
    base: OKLCH
    rows: List[StepHue]

    @property
    def deltas(self) -> List[float]:
        return [r.delta for r in self.rows]

    @property
    def darkest_delta(self) -> float:
        return abs(self.rows[0].delta)

    @property
    def lightest_delta(self) -> float:
        return abs(self.rows[-1].delta)


def hue_deltas(
    base_hex: str,
    temperature: float,
    steps: int,
    mode: str,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
    log_table: bool = False,
) -> HueDeltaReport:
    request = RampRequest.create(base_hex, temperature, steps, mode, config)
    base = hex_to_oklch(request.base_hex)
    ramp = ToneLadder(config).oklch_ramp(request)
    mid = steps // 2

    rows = [
        StepHue(
            i,
            "base" if i == mid else "shadow" if i < mid else "highlight",
            c,
            hue_difference(base.H, c.H),
        )
        for i, c in enumerate(ramp)
    ]
    report = HueDeltaReport(request, base, rows)

    if log_table:
        log.info(
            "%s mode | base %s (H %.1f, C %.3f) | temperature %+.2f | %d steps",
            mode,
            request.base_hex,
            base.H,
            base.C,
            request.temperature,
            steps,
        )
        for r in rows:
            log.info(
                "step %2d: L=%.3f C=%.3f H=%6.1f | dH %+6.1f (%s)",
                r.index,
                r.color.L,
                r.color.C,
                r.color.H,
                r.delta,
                r.role,
            )
        log.info("darkest dH %.1f, lightest dH %.1f", report.darkest_delta, report.lightest_delta)
    return report


@dataclass(frozen=True)
class ModeComparison:
    conservative: HueDeltaReport
    painterly: HueDeltaReport

    @property
    def painterly_larger(self) -> bool:
        return (
            self.painterly.darkest_delta > self.conservative.darkest_delta
            and self.painterly.lightest_delta > self.conservative.lightest_delta
        )


def compare_modes(
    base_hex: str = "#3366CC",
    temperature: float = 1.0,
    steps: int = 11,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
    log_table: bool = False,
) -> ModeComparison:
    result = ModeComparison(
        conservative=hue_deltas(
            base_hex, temperature, steps, "conservative", config=config, log_table=log_table
        ),
        painterly=hue_deltas(
            base_hex, temperature, steps, "painterly", config=config, log_table=log_table
        ),
    )
    if log_table:
        log.info("painterly > conservative: %s", "PASS" if result.painterly_larger else "FAIL")
    return result


def gamut_trace(
    base_hex: str,
    temperature: float = 1.0,
    steps: int = 11,
    mode: str = "painterly",
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[StepTrace]:
    """Pre- and post-clamp colour of every rung."""
    trace = ToneLadder(config).trace(RampRequest.create(base_hex, temperature, steps, mode, config))
    for s in trace:
        log.debug(
            "step %2d: before L=%.3f C=%.4f H=%.1f | after C=%.4f%s",
            s.index,
            s.unclamped.L,
            s.unclamped.C,
            s.unclamped.H,
            s.color.C,
            " (clamped)" if s.clamped else "",
        )
    return trace


@dataclass(frozen=True)
class StabilityIssue:
    temperature: float
    steps: int
    mode: str
    index: int  # upper rung of the pair
    jump: float


@dataclass(frozen=True)
class StabilityReport:
    base_hex: str
    runs: int
    issues: List[StabilityIssue]

    @property
    def ok(self) -> bool:
        return not self.issues


def highlight_stability(
    base_hex: str,
    *,
    temperatures: Sequence[float] = (-0.9, 0.9),
    max_jump: float = 25.0,
    config: EngineConfig = DEFAULT_CONFIG,
) -> StabilityReport:
    """
    Flag hue jumps between adjacent top-3 highlight rungs that both carry
    visible chroma.
    """
    ladder = ToneLadder(config)
    issues: List[StabilityIssue] = []
    runs = 0
    for t, steps, mode in product(temperatures, STEP_COUNTS, MODES):
        ramp = ladder.oklch_ramp(RampRequest.create(base_hex, t, steps, mode, config))
        runs += 1
        top = range(steps - config.guarded_highlights + 1, steps)
        for i in top:
            a, b = ramp[i - 1], ramp[i]
            if min(a.C, b.C) <= config.visible_chroma:
                continue
            jump = abs(hue_difference(a.H, b.H))
            if jump > max_jump:
                issues.append(StabilityIssue(t, steps, mode, i, jump))
                log.warning(
                    "%s t=%+.1f %d steps %s: hue jump %.1f at step %d",
                    base_hex,
                    t,
                    steps,
                    mode,
                    jump,
                    i,
                )
    return StabilityReport(base_hex, runs, issues)


@dataclass(frozen=True)
class UniformityIssue:
    index: int  # position of the *second* colour in the pair
    kind: str  # "not_increasing" | "too_small"
    message: str


@dataclass(frozen=True)
class UniformityReport:
    deltas: List[float]
    lightness: List[float]
    issues: List[UniformityIssue]

    @property
    def ok(self) -> bool:
        return not self.issues


def ramp_uniformity(colors: Sequence[str], *, min_delta: float = 0.02) -> UniformityReport:
    """ΔE_OK between neighbours plus a strictly-increasing lightness check."""
    parsed = [Color(c) for c in colors]
    lightness = [float(c.convert("oklch")["l"]) for c in parsed]
    deltas: List[float] = []
    issues: List[UniformityIssue] = []
    for i in range(1, len(parsed)):
        d = float(parsed[i - 1].delta_e(parsed[i], method="ok"))
        deltas.append(d)
        if lightness[i] <= lightness[i - 1]:
            issues.append(
                UniformityIssue(
                    i,
                    "not_increasing",
                    f"L {lightness[i]:.4f} not above {lightness[i - 1]:.4f}",
                )
            )
        elif d < min_delta:
            issues.append(
                UniformityIssue(i, "too_small", f"dE_OK {d:.4f} below minimum {min_delta}")
            )
    return UniformityReport(deltas, lightness, issues)


__all__ = [
    "HueDeltaReport",
    "ModeComparison",
    "StabilityReport",
    "UniformityReport",
    "compare_modes",
    "gamut_trace",
    "highlight_stability",
    "hue_deltas",
    "ramp_uniformity",
]
