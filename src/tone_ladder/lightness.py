from __future__ import annotations

from typing import List

from .config import DEFAULT_CONFIG, EngineConfig


def lightness_profile(
    steps: int, base_l: float, config: EngineConfig = DEFAULT_CONFIG
) -> List[float]:
    """
    Lightness for each rung, darkest first.

    Rungs are evenly spaced over [l_min, l_max] and shifted so the midpoint
    rung (steps // 2) sits on the base lightness. Rungs pushed past a bound
    are compressed linearly between the base and that bound, by their
    distance from the midpoint. A final pass forces a strict increase of at
    least ``min_l_step`` per rung.
    """
    lo, hi = config.l_min, config.l_max
    mid = steps // 2
    base = max(lo, min(hi, base_l))

    even = [lo + (hi - lo) * i / (steps - 1) for i in range(steps)]
    offset = base - even[mid]

    out: List[float] = []
    for i, v in enumerate(even):
        adjusted = base if i == mid else v + offset
        if adjusted < lo:
            adjusted = base - (base - lo) * (mid - i) / mid
        elif adjusted > hi:
            adjusted = base + (hi - base) * (i - mid) / (steps - 1 - mid)
        out.append(max(lo, min(hi, adjusted)))

    for i in range(1, steps):
        if out[i] < out[i - 1] + config.min_l_step:
            out[i] = out[i - 1] + config.min_l_step
    return out


__all__ = ["lightness_profile"]
