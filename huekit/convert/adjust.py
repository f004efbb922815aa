# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color adjustments: lighten, darken, (de)saturate, mix.

Lightness and saturation shifts are done in HSL, mixing is a linear
interpolation of encoded sRGB. Every function returns a new color in the
space of its (first) input, so an OKLCH color stays OKLCH.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from huekit.convert import cylindrical as cyl
from huekit.convert.engine import from_srgb, to_srgb
from huekit.errors import InvalidComponentRange
from huekit.metrics.wcag import relative_luminance
from huekit.schema.color import CanonicalColor


def _check_amount(name: str, amount: float) -> float:
    if not math.isfinite(amount) or not 0.0 <= amount <= 1.0:
        raise InvalidComponentRange(name, amount, (0.0, 1.0))
    return float(amount)


def _shift_hsl(color: CanonicalColor, index: int, delta: float) -> CanonicalColor:
    hsl = cyl.srgb_to_hsl(np.clip(to_srgb(color), 0.0, 1.0))
    hsl[index] = min(1.0, max(0.0, hsl[index] + delta))
    return from_srgb(cyl.hsl_to_srgb(hsl), color.space, color.alpha)


def lighten(color: CanonicalColor, amount: float = 0.1) -> CanonicalColor:
    """Raise HSL lightness by ``amount`` (0-1, i.e. 0.1 = 10 points)."""
    return _shift_hsl(color, 2, _check_amount("amount", amount))


def darken(color: CanonicalColor, amount: float = 0.1) -> CanonicalColor:
    """Lower HSL lightness by ``amount`` (0-1)."""
    return _shift_hsl(color, 2, -_check_amount("amount", amount))


def saturate(color: CanonicalColor, amount: float = 0.1) -> CanonicalColor:
    """Raise HSL saturation by ``amount`` (0-1)."""
    return _shift_hsl(color, 1, _check_amount("amount", amount))


def desaturate(color: CanonicalColor, amount: float = 0.1) -> CanonicalColor:
    """Lower HSL saturation by ``amount`` (0-1)."""
    return _shift_hsl(color, 1, -_check_amount("amount", amount))


def mix(a: CanonicalColor, b: CanonicalColor, weight: float = 0.5) -> CanonicalColor:
    """
    Blend two colors in sRGB.

    Args:
        a: First color; the result uses its space
        b: Second color
        weight: Share of ``b`` in the result (0 = all a, 1 = all b)

    Alpha is interpolated too when either color carries one.
    """
    w = _check_amount("weight", weight)
    srgb = to_srgb(a) * (1.0 - w) + to_srgb(b) * w

    alpha: Optional[float] = None
    if a.alpha is not None or b.alpha is not None:
        alpha = a.opacity * (1.0 - w) + b.opacity * w

    return from_srgb(srgb, a.space, alpha)


def is_dark(color: CanonicalColor) -> bool:
    """True if relative luminance is below 0.5."""
    return relative_luminance(color) < 0.5


__all__ = [
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "mix",
    "is_dark",
]
