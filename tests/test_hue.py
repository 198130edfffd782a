import pytest

from tone_ladder.config import CONSERVATIVE, DEFAULT_CONFIG, PAINTERLY
from tone_ladder.convert import OKLCH, hue_difference
from tone_ladder.hue import (
    converge_highlight,
    hue_stability_factor,
    neutral_hue,
    shift_weight,
    shifted_hue,
    smoothstep,
    temperature_response,
)

ANCHORS = DEFAULT_CONFIG.anchors


def test_temperature_response_curve():
    assert temperature_response(0.0) == 0.0
    assert temperature_response(1.0) == pytest.approx(1.0)
    assert temperature_response(-1.0) == pytest.approx(-1.0)
    assert temperature_response(0.5) == pytest.approx(0.5**1.6)
    assert temperature_response(-0.3) == pytest.approx(-temperature_response(0.3))
    # gentle near neutral
    assert abs(temperature_response(0.2)) < 0.2


def test_smoothstep():
    assert smoothstep(0.6, 1.0, 0.5) == 0.0
    assert smoothstep(0.6, 1.0, 0.8) == pytest.approx(0.5)
    assert smoothstep(0.6, 1.0, 1.2) == 1.0


def test_hue_stability_factor():
    assert hue_stability_factor(0.0) == 0.0
    assert hue_stability_factor(0.012) == 0.0
    assert hue_stability_factor(0.0285) == pytest.approx(0.25)
    assert hue_stability_factor(0.045) == 1.0
    assert hue_stability_factor(0.3) == 1.0


def test_no_shift_without_temperature_or_at_midpoint():
    assert shifted_hue(262.0, 1.0, 0.0, 0.2, PAINTERLY) == 262.0
    assert shifted_hue(262.0, 0.0, 1.0, 0.2, PAINTERLY) == 262.0


def test_hue_frozen_below_chroma_floor():
    assert shifted_hue(262.0, 1.0, 1.0, 0.01, PAINTERLY) == pytest.approx(262.0)


def test_warm_light_pushes_highlights_warm_and_shadows_cool():
    w = 38.0 / 90.0
    high = shifted_hue(262.0, 1.0, 1.0, 0.2, PAINTERLY)
    low = shifted_hue(262.0, -1.0, 1.0, 0.2, PAINTERLY)
    assert hue_difference(262.0, high) == pytest.approx(w * hue_difference(262.0, ANCHORS.warm))
    assert hue_difference(262.0, low) == pytest.approx(w * hue_difference(262.0, ANCHORS.cool))


def test_cool_light_flips_anchors():
    high = shifted_hue(262.0, 1.0, -1.0, 0.2, PAINTERLY)
    low = shifted_hue(262.0, -1.0, -1.0, 0.2, PAINTERLY)
    assert hue_difference(262.0, high) < 0  # toward 205
    assert hue_difference(262.0, low) > 0  # toward 65


def test_partial_chroma_damps_quadratically():
    full = hue_difference(262.0, shifted_hue(262.0, 1.0, 1.0, 0.2, PAINTERLY))
    damped = hue_difference(262.0, shifted_hue(262.0, 1.0, 1.0, 0.0285, PAINTERLY))
    assert damped == pytest.approx(full * 0.25)


def test_painterly_weight_exceeds_conservative():
    for p in (-1.0, -0.5, 0.5, 1.0):
        assert shift_weight(p, 0.6, PAINTERLY) > shift_weight(p, 0.6, CONSERVATIVE)


def test_convergence_only_on_upper_highlights():
    c = OKLCH(0.9, 0.05, 262.0)
    assert converge_highlight(c, -1.0, 1.0, PAINTERLY) is c
    assert converge_highlight(c, 0.5, 1.0, PAINTERLY) is c
    assert converge_highlight(c, 1.0, 0.0, PAINTERLY) is c
    grey = OKLCH(0.9, 0.0, 262.0)
    assert converge_highlight(grey, 1.0, 1.0, PAINTERLY) is grey


def test_convergence_moves_hue_toward_anchor_and_keeps_chroma():
    c = OKLCH(0.9, 0.05, 262.0)
    out = converge_highlight(c, 1.0, 1.0, PAINTERLY)
    assert out.L == c.L
    assert out.C == c.C
    assert abs(hue_difference(out.H, ANCHORS.warm)) < abs(hue_difference(c.H, ANCHORS.warm))
    # same direction as the arc toward the anchor
    assert hue_difference(c.H, out.H) > 0


def test_convergence_fades_with_chroma():
    strong = converge_highlight(OKLCH(0.9, 0.05, 262.0), 1.0, 1.0, PAINTERLY)
    weak = converge_highlight(OKLCH(0.9, 0.005, 262.0), 1.0, 1.0, PAINTERLY)
    assert hue_difference(262.0, weak.H) < hue_difference(262.0, strong.H)


def test_neutral_hue_takes_anchor():
    assert neutral_hue(0.0, 1.0, 1.0, ANCHORS) == ANCHORS.warm
    assert neutral_hue(0.0, -1.0, 1.0, ANCHORS) == ANCHORS.cool
    assert neutral_hue(0.0, 0.5, -0.2, ANCHORS) == ANCHORS.cool
    assert neutral_hue(0.0, -0.5, -0.2, ANCHORS) == ANCHORS.warm
    assert neutral_hue(12.0, 0.0, 1.0, ANCHORS) == 12.0
