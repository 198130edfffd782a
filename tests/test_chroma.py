from dataclasses import replace

import numpy as np
import pytest

from tone_ladder.chroma import apply_endpoint_floor, neutral_chroma, stability_chroma, standard_chroma
from tone_ladder.config import CONSERVATIVE, DEFAULT_CONFIG, PAINTERLY


@pytest.mark.parametrize("mode", [CONSERVATIVE, PAINTERLY])
def test_standard_peaks_at_midpoint(mode):
    base = 0.2
    assert standard_chroma(base, 0.0, mode) == pytest.approx(base)
    assert standard_chroma(base, -1.0, mode) == pytest.approx(base * mode.chroma_retention)
    shadows = [standard_chroma(base, p, mode) for p in np.linspace(-1, 0, 11)]
    assert np.all(np.diff(shadows) > 0)


@pytest.mark.parametrize("mode", [CONSERVATIVE, PAINTERLY])
def test_highlights_fall_off_harder_than_shadows(mode):
    base = 0.2
    for p in (0.25, 0.5, 0.75, 1.0):
        assert standard_chroma(base, p, mode) < standard_chroma(base, -p, mode)
    assert standard_chroma(base, 1.0, mode) == pytest.approx(base * mode.chroma_retention * 0.55)


def test_flatter_exponent_retains_more_of_the_curve():
    # same retention floor, only the exponent differs
    flat = replace(CONSERVATIVE, chroma_curve_exponent=0.8)
    assert standard_chroma(0.2, -0.5, flat) > standard_chroma(0.2, -0.5, CONSERVATIVE)


@pytest.mark.parametrize("mode", [CONSERVATIVE, PAINTERLY])
def test_neutral_tint_rises_from_zero(mode):
    assert neutral_chroma(0.0, 1.0, mode) == 0.0
    assert neutral_chroma(1.0, 1.0, mode) == pytest.approx(mode.neutral_tint_strength)
    assert neutral_chroma(-1.0, -1.0, mode) == pytest.approx(mode.neutral_tint_strength)
    assert neutral_chroma(1.0, 0.5, mode) == pytest.approx(mode.neutral_tint_strength * 0.5)
    ramp = [neutral_chroma(p, 1.0, mode) for p in np.linspace(0, 1, 6)]
    assert np.all(np.diff(ramp) > 0)


def test_neutral_tint_is_capped():
    strong = replace(PAINTERLY, neutral_tint_strength=0.1)
    assert neutral_chroma(1.0, 1.0, strong) == pytest.approx(0.035)


def test_endpoint_floor_scales_with_temperature():
    assert apply_endpoint_floor(0.0, 0, 9, 0.5, PAINTERLY) == pytest.approx(0.015)
    assert apply_endpoint_floor(0.0, 8, 9, -1.0, CONSERVATIVE) == pytest.approx(0.020)
    assert apply_endpoint_floor(0.1, 0, 9, 1.0, PAINTERLY) == 0.1


def test_endpoint_floor_skips_inner_steps_and_neutral_light():
    assert apply_endpoint_floor(0.0, 1, 9, 1.0, PAINTERLY) == 0.0
    assert apply_endpoint_floor(0.0, 8, 11, 1.0, PAINTERLY) == 0.0
    assert apply_endpoint_floor(0.0, 0, 9, 0.0, PAINTERLY) == 0.0


def test_stability_chroma_is_the_most_retentive_mode():
    # shadow end: conservative keeps 0.40 of the base, painterly 0.28
    assert stability_chroma(0.2, -1.0, 0, 9, 0.6) == pytest.approx(0.2 * 0.40)
    assert stability_chroma(0.2, 1.0, 8, 9, 0.6) == pytest.approx(0.2 * 0.40 * 0.55)
    # endpoint floors win when the base is dull
    assert stability_chroma(0.031, -1.0, 0, 9, -1.0) == pytest.approx(0.030)


def test_stability_chroma_with_single_mode():
    config = replace(DEFAULT_CONFIG, modes={"painterly": PAINTERLY})
    assert stability_chroma(0.2, -1.0, 0, 9, 0.6, config) == pytest.approx(0.2 * 0.28)
