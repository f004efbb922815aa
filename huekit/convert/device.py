# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Device-oriented models: naive CMYK and correlated color temperature.

CMYK here is the device-independent "naive" conversion, with no ICC
profile or ink limits:

    k = 1 - max(r, g, b)
    c = (1 - r - k) / (1 - k)      (0 when k == 1)

Color temperature uses Tanner Helland's curve fit (Kelvin → sRGB) and
McCamy's cubic approximation (sRGB → Kelvin).
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huekit.convert.rounding import round_half_away
from huekit.errors import InvalidComponentRange


# =============================================================================
# CMYK
# =============================================================================


def srgb_to_cmyk(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    sRGB [0,1] → CMYK fractions [0,1].

    Pure black (k == 1) maps to c = m = y = 0, never NaN.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    k = 1.0 - np.max(rgb, axis=-1)
    ink = 1.0 - k
    black = ink <= 0.0
    safe = np.where(black, 1.0, ink)[..., None]
    cmy = np.where(black[..., None], 0.0, (1.0 - rgb - k[..., None]) / safe)
    return np.concatenate([cmy, k[..., None]], axis=-1)


def cmyk_to_srgb(cmyk: ArrayLike) -> NDArray[np.float64]:
    """CMYK fractions [0,1] → sRGB [0,1]."""
    cmyk = np.asarray(cmyk, dtype=np.float64)
    k = cmyk[..., 3:4]
    return (1.0 - cmyk[..., :3]) * (1.0 - k)


# =============================================================================
# Color temperature
# =============================================================================

KELVIN_MIN = 1000.0
KELVIN_MAX = 40000.0


def kelvin_to_rgb(kelvin: float) -> tuple[int, int, int]:
    """
    Approximate the sRGB color of a black body at ``kelvin``.

    Args:
        kelvin: Temperature in Kelvin, 1000..40000

    Returns:
        (r, g, b) on the 0-255 scale

    Raises:
        InvalidComponentRange: if kelvin is not finite or out of range.
    """
    if not math.isfinite(kelvin) or not KELVIN_MIN <= kelvin <= KELVIN_MAX:
        raise InvalidComponentRange("kelvin", kelvin, (KELVIN_MIN, KELVIN_MAX))

    temp = kelvin / 100.0

    if temp <= 66.0:
        r = 255.0
        g = 99.4708025861 * math.log(temp) - 161.1195681661
    else:
        r = 329.698727446 * math.pow(temp - 60.0, -0.1332047592)
        g = 288.1221695283 * math.pow(temp - 60.0, -0.0755148492)

    if temp >= 66.0:
        b = 255.0
    elif temp <= 19.0:
        b = 0.0
    else:
        b = 138.5177312231 * math.log(temp - 10.0) - 305.0447927307

    r, g, b = (int(round_half_away(min(255.0, max(0.0, v)), 0)) for v in (r, g, b))
    return r, g, b


def rgb_to_kelvin(r: float, g: float, b: float) -> Optional[int]:
    """
    Estimate the correlated color temperature of an sRGB color.

    Uses channel proportions as chromaticity and McCamy's formula; the
    result is clamped to 1000..40000 K. Returns None for black, which
    has no chromaticity, and for the singular point of the fit.
    """
    total = r + g + b
    if total == 0:
        return None

    x = r / total
    y = g / total
    if y == 0.1858:
        return None
    n = (x - 0.3320) / (0.1858 - y)
    kelvin = 449.0 * n ** 3 + 3525.0 * n ** 2 + 6823.3 * n + 5520.33

    return int(round_half_away(min(KELVIN_MAX, max(KELVIN_MIN, kelvin)), 0))


__all__ = [
    "srgb_to_cmyk",
    "cmyk_to_srgb",
    "kelvin_to_rgb",
    "rgb_to_kelvin",
    "KELVIN_MIN",
    "KELVIN_MAX",
]
