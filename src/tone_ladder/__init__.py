"""Hue-shifting tonal ladders in OKLCH."""

from .config import DEFAULT_CONFIG, EngineConfig, ModeConfig
from .convert import OKLCH, clamp_to_srgb_gamut, hex_to_oklch, oklch_to_hex
from .errors import InvalidArgument, InvalidColorFormat, ToneLadderError
from .ramp import RampRequest, ToneLadder, generate_ramp

DEFAULTS = {
    "base_hex": "#2F6FED",
    "temperature": 0.6,
    "steps": 9,
    "mode": "painterly",
}

__all__ = [
    "DEFAULTS",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "InvalidArgument",
    "InvalidColorFormat",
    "ModeConfig",
    "OKLCH",
    "RampRequest",
    "ToneLadder",
    "ToneLadderError",
    "clamp_to_srgb_gamut",
    "generate_ramp",
    "hex_to_oklch",
    "oklch_to_hex",
]
