from __future__ import annotations

import re
from typing import Literal, Sequence

from .convert import canon_hex
from .errors import InvalidArgument

ExportFormat = Literal["short", "long"]

_PREFIXES = {"short": "--", "long": "--color-"}


def label_slug(label: str) -> str:
    """'  Ocean Blue!! ' → 'ocean-blue'."""
    s = re.sub(r"\s+", "-", label.lower())
    s = re.sub(r"[^a-z0-9-]", "", s)
    s = re.sub(r"-+", "-", s)
    return s.strip("-")


def token_prefix(label: str, base_hex: str, temperature: float, mode: str, steps: int) -> str:
    """Slug of the label, or a factual name built from the settings when blank."""
    slug = label_slug(label or "")
    if slug:
        return slug
    light = "w" if temperature > 0 else "c" if temperature < 0 else "n"
    return f"{canon_hex(base_hex)[1:].lower()}-{light}{round(abs(temperature) * 100)}-{mode[:1]}{steps}"


def css_variables(ramp: Sequence[str], prefix: str, fmt: str = "short") -> str:
    if fmt not in _PREFIXES:
        raise InvalidArgument("format", fmt, "Expected 'short' or 'long'")
    lead = _PREFIXES[fmt]
    return "\n".join(f"{lead}{prefix}-{i}: {hex_};" for i, hex_ in enumerate(ramp))


__all__ = ["ExportFormat", "css_variables", "label_slug", "token_prefix"]
