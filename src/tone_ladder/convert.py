# convert.py – hex ↔ OKLab ↔ OKLCH with sRGB gamut clamping
#   - IEC 61966-2-1 transfer functions from colour-science
#   - Oklab matrices (© Björn Ottosson, MIT licence)
#   - chroma-only binary search for the sRGB gamut boundary

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace

import numpy as np
from colour.models import eotf_inverse_sRGB, eotf_sRGB

from .errors import InvalidColorFormat

log = logging.getLogger(__name__)

Hex = str

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")

# --- constants ---------------------------------------------------------------
GAMUT_EPS = 1e-4  # linear-light tolerance for the in-gamut test
GAMUT_ITERS = 20  # bisection steps → chroma error < C / 2**20

# linear sRGB → LMS
_M1 = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
# LMS^(1/3) → Oklab
_M2 = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
# Oklab → LMS^(1/3)
_M2_INV = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)
# LMS → linear sRGB
_M1_INV = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)


@dataclass(frozen=True)
class OKLCH:
    """A point in OKLCH: lightness 0–1, chroma ≥ 0, hue in degrees [0, 360)."""

    L: float
    C: float
    H: float


# --- hue arithmetic ------------------------------------------------------------


def normalize_hue(h: float) -> float:
    h = float(h) % 360.0
    # -1e-17 % 360.0 == 360.0 in IEEE arithmetic
    return 0.0 if h >= 360.0 else h


def hue_difference(h1: float, h2: float) -> float:
    """Signed shortest-arc delta from h1 to h2, in (-180, 180]."""
    d = normalize_hue(h2 - h1)
    return d - 360.0 if d > 180.0 else d


def short_arc_lerp(h1: float, h2: float, t: float) -> float:
    return normalize_hue(h1 + t * hue_difference(h1, h2))


# --- hex ---------------------------------------------------------------------


def canon_hex(value: object) -> Hex:
    """Normalize to '#RRGGBB'; accept exactly 6 hex digits, '#' optional."""
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    m = _HEX_RE.match(value.strip())
    if m is None:
        raise InvalidColorFormat(value)
    return "#" + m.group(1).upper()


def hex_to_srgb(hex_str: Hex) -> np.ndarray:
    raw = canon_hex(hex_str)[1:]
    return np.array([int(raw[i : i + 2], 16) for i in (0, 2, 4)], np.float64) / 255.0


def srgb_to_hex(rgb: np.ndarray) -> Hex:
    u8 = np.round(np.clip(rgb, 0.0, 1.0) * 255.0).astype(int)
    return f"#{u8[0]:02X}{u8[1]:02X}{u8[2]:02X}"


# --- Oklab / OKLCH -------------------------------------------------------------


def linear_to_oklab(rgb_lin: np.ndarray) -> np.ndarray:
    lms = _M1 @ np.asarray(rgb_lin, np.float64)
    return _M2 @ np.cbrt(lms)


def oklab_to_linear(lab: np.ndarray) -> np.ndarray:
    lms_ = _M2_INV @ np.asarray(lab, np.float64)
    return _M1_INV @ (lms_**3)


def oklab_to_oklch(lab: np.ndarray) -> OKLCH:
    L, a, b = (float(v) for v in lab)
    return OKLCH(L, math.hypot(a, b), normalize_hue(math.degrees(math.atan2(b, a))))


def oklch_to_oklab(c: OKLCH) -> np.ndarray:
    h = math.radians(c.H)
    return np.array([c.L, c.C * math.cos(h), c.C * math.sin(h)], np.float64)


def hex_to_oklch(hex_str: Hex) -> OKLCH:
    """Parse a 6-digit hex color into OKLCH (raises InvalidColorFormat)."""
    return oklab_to_oklch(linear_to_oklab(eotf_sRGB(hex_to_srgb(hex_str))))


def oklch_to_hex(c: OKLCH) -> Hex:
    """Inverse of hex_to_oklch; out-of-range channels are clipped, not mapped."""
    rgb_lin = np.clip(oklab_to_linear(oklch_to_oklab(c)), 0.0, 1.0)
    return srgb_to_hex(eotf_inverse_sRGB(rgb_lin))


# --- gamut ---------------------------------------------------------------------


def in_srgb_gamut(c: OKLCH, eps: float = GAMUT_EPS) -> bool:
    rgb = oklab_to_linear(oklch_to_oklab(c))
    return bool(np.all((rgb >= -eps) & (rgb <= 1.0 + eps)))


def clamp_to_srgb_gamut(c: OKLCH, iters: int = GAMUT_ITERS) -> OKLCH:
    """
    Largest in-gamut chroma at fixed L and H, by bisection on [0, c.C].
    Lightness and hue are never touched.
    """
    if in_srgb_gamut(c):
        return c
    lo, hi = 0.0, c.C
    for _ in range(iters):
        mid = 0.5 * (lo + hi)
        if in_srgb_gamut(replace(c, C=mid)):
            lo = mid
        else:
            hi = mid
    log.debug("gamut clamp L=%.4f H=%.2f C %.4f -> %.4f", c.L, c.H, c.C, lo)
    return replace(c, C=lo)


__all__ = [
    "OKLCH",
    "canon_hex",
    "clamp_to_srgb_gamut",
    "hex_to_oklch",
    "hue_difference",
    "in_srgb_gamut",
    "normalize_hue",
    "oklch_to_hex",
    "short_arc_lerp",
]
