from dataclasses import replace

import numpy as np
import pytest

from tone_ladder.config import DEFAULT_CONFIG
from tone_ladder.lightness import lightness_profile


@pytest.mark.parametrize("steps", [9, 11])
@pytest.mark.parametrize("base_l", np.linspace(0.0, 1.0, 21))
def test_strictly_increasing_with_minimum_step(steps, base_l):
    profile = lightness_profile(steps, float(base_l))
    assert len(profile) == steps
    diffs = np.diff(profile)
    assert np.all(diffs >= DEFAULT_CONFIG.min_l_step - 1e-12)


@pytest.mark.parametrize("steps", [9, 11])
def test_midpoint_lands_on_base(steps):
    profile = lightness_profile(steps, 0.574)
    assert profile[steps // 2] == pytest.approx(0.574, abs=1e-12)
    assert profile[0] >= 0.08
    assert profile[-1] <= 0.98


def test_uncompressed_rungs_are_evenly_spaced():
    profile = lightness_profile(9, 0.53)
    assert np.allclose(np.diff(profile), 0.1125)
    assert profile[0] == pytest.approx(0.08)
    assert profile[-1] == pytest.approx(0.98)


def test_overflowing_rungs_compress_toward_base():
    base = 0.9
    profile = lightness_profile(9, base)
    highlights = profile[5:]
    # linear between base and the upper bound, by distance from the midpoint
    assert np.allclose(highlights, [base + (0.98 - base) * d / 4 for d in range(1, 5)])
    assert profile[-1] == pytest.approx(0.98)
    # shadow side is offset, not compressed
    assert profile[3] == pytest.approx(base - 0.1125)


def test_underflowing_rungs_compress_toward_base():
    base = 0.2
    profile = lightness_profile(11, base)
    assert profile[0] == pytest.approx(0.08)
    assert np.allclose(profile[:4], [base - (base - 0.08) * d / 5 for d in range(5, 1, -1)])
    # step 4 sits below compressed step 3 after the offset; the walk lifts it
    assert profile[4] == pytest.approx(profile[3] + 0.002)
    assert profile[5] == pytest.approx(base)


def test_base_outside_bounds_is_clamped():
    dark = lightness_profile(9, 0.0)
    light = lightness_profile(9, 1.0)
    assert dark[0] == pytest.approx(0.08)
    assert light[4] == pytest.approx(0.98)


def test_custom_bounds():
    config = replace(DEFAULT_CONFIG, l_min=0.1, l_max=0.9)
    profile = lightness_profile(9, 0.5, config)
    assert profile[0] == pytest.approx(0.1)
    assert profile[-1] == pytest.approx(0.9)
