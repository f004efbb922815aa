# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Pairwise conversion functions on plain numbers.

These are the scalar counterparts of the engine for callers that work
with bare tuples instead of CanonicalColor values:

    rgb_to_hsl(255, 0, 0)        → (0.0, 100.0, 50.0)
    hsl_to_rgb(0, 100, 50)       → (255, 0, 0)
    rgb_to_lab(255, 255, 255)    → (100.0, 0.0, 0.0)

Conventions:
    - RGB is on the 0-255 scale; out-of-range channels are clamped
    - HSL/HSV/HSI/HWB/CMYK use degrees and percent
    - XYZ uses Y(white) = 1
    - With ``precision=0`` RGB results are ints, otherwise floats
    - Rounding is half away from zero
    - NaN or infinite input raises InvalidComponentRange
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from huekit.convert import colorspace as cs
from huekit.convert import cylindrical as cyl
from huekit.convert import device
from huekit.convert.rounding import round_half_away
from huekit.errors import InvalidColorSyntax, InvalidComponentRange
from huekit.schema.color import RGBA

logger = logging.getLogger(__name__)

Number = Union[int, float]


# =============================================================================
# Helpers
# =============================================================================


def _finite(names: str, values: tuple[Number, ...]) -> None:
    for name, v in zip(names.split(), values):
        try:
            ok = math.isfinite(v)
        except TypeError:
            ok = False
        if not ok:
            raise InvalidComponentRange(name, v)


def _clamp(name: str, value: float, lo: float, hi: float) -> float:
    if value < lo or value > hi:
        logger.debug("clamping %s=%r to %g..%g", name, value, lo, hi)
        return min(hi, max(lo, value))
    return float(value)


def _rgb_in(r: Number, g: Number, b: Number) -> NDArray[np.float64]:
    _finite("red green blue", (r, g, b))
    return np.array([
        _clamp("red", r, 0, 255),
        _clamp("green", g, 0, 255),
        _clamp("blue", b, 0, 255),
    ]) / 255.0


def _rgb_out(srgb: NDArray[np.float64], precision: int) -> tuple:
    values = np.clip(srgb, 0.0, 1.0) * 255.0
    if precision == 0:
        return tuple(int(round_half_away(v, 0)) for v in values)
    return tuple(round_half_away(v, precision) for v in values)


def _out(values, precision: int, hue: Optional[int] = None) -> tuple[float, ...]:
    out = [round_half_away(float(v), precision) for v in values]
    if hue is not None and out[hue] >= 360.0:
        out[hue] -= 360.0
    return tuple(out)


def _pct_in(names: str, h: Number, *rest: Number) -> NDArray[np.float64]:
    """(hue, percent, percent) → kernel units (degrees, fraction, fraction)."""
    _finite(names, (h, *rest))
    labels = names.split()[1:]
    fractions = [_clamp(n, v, 0, 100) / 100.0 for n, v in zip(labels, rest)]
    return np.array([h % 360.0, *fractions])


_PCT3 = np.array([1.0, 100.0, 100.0])


# =============================================================================
# RGB ↔ HSL / HSV / HSI / HWB
# =============================================================================


def rgb_to_hsl(r: Number, g: Number, b: Number, precision: int = 1) -> tuple[float, float, float]:
    """RGB (0-255) → HSL (degrees, %, %)."""
    return _out(cyl.srgb_to_hsl(_rgb_in(r, g, b)) * _PCT3, precision, hue=0)


def hsl_to_rgb(h: Number, s: Number, l: Number, precision: int = 0) -> tuple:
    """HSL (degrees, %, %) → RGB (0-255). Hue wraps; s and l clamp."""
    return _rgb_out(cyl.hsl_to_srgb(_pct_in("hue saturation lightness", h, s, l)), precision)


def rgb_to_hsv(r: Number, g: Number, b: Number, precision: int = 1) -> tuple[float, float, float]:
    """RGB (0-255) → HSV (degrees, %, %)."""
    return _out(cyl.srgb_to_hsv(_rgb_in(r, g, b)) * _PCT3, precision, hue=0)


def hsv_to_rgb(h: Number, s: Number, v: Number, precision: int = 0) -> tuple:
    return _rgb_out(cyl.hsv_to_srgb(_pct_in("hue saturation value", h, s, v)), precision)


def rgb_to_hsi(r: Number, g: Number, b: Number, precision: int = 1) -> tuple[float, float, float]:
    """RGB (0-255) → HSI (degrees, %, %)."""
    return _out(cyl.srgb_to_hsi(_rgb_in(r, g, b)) * _PCT3, precision, hue=0)


def hsi_to_rgb(h: Number, s: Number, i: Number, precision: int = 0) -> tuple:
    return _rgb_out(cyl.hsi_to_srgb(_pct_in("hue saturation intensity", h, s, i)), precision)


def rgb_to_hwb(r: Number, g: Number, b: Number, precision: int = 1) -> tuple[float, float, float]:
    """RGB (0-255) → HWB (degrees, %, %)."""
    return _out(cyl.srgb_to_hwb(_rgb_in(r, g, b)) * _PCT3, precision, hue=0)


def hwb_to_rgb(h: Number, w: Number, b: Number, precision: int = 0) -> tuple:
    return _rgb_out(cyl.hwb_to_srgb(_pct_in("hue whiteness blackness", h, w, b)), precision)


# =============================================================================
# RGB ↔ CMYK
# =============================================================================


def rgb_to_cmyk(
    r: Number, g: Number, b: Number, precision: int = 1,
) -> tuple[float, float, float, float]:
    """
    RGB (0-255) → CMYK (%).

    Black is (0, 0, 0, 100), never NaN.
    """
    return _out(device.srgb_to_cmyk(_rgb_in(r, g, b)) * 100.0, precision)


def cmyk_to_rgb(c: Number, m: Number, y: Number, k: Number, precision: int = 0) -> tuple:
    """CMYK (%) → RGB (0-255)."""
    names = "cyan magenta yellow black"
    _finite(names, (c, m, y, k))
    cmyk = np.array([_clamp(n, v, 0, 100) for n, v in zip(names.split(), (c, m, y, k))]) / 100.0
    return _rgb_out(device.cmyk_to_srgb(cmyk), precision)


# =============================================================================
# RGB ↔ XYZ ↔ Lab ↔ LCH
# =============================================================================


def rgb_to_xyz(r: Number, g: Number, b: Number, precision: int = 5) -> tuple[float, float, float]:
    """RGB (0-255) → CIE XYZ (D65), Y(white) = 1."""
    return _out(cs.srgb_to_xyz(_rgb_in(r, g, b)), precision)


def xyz_to_rgb(x: Number, y: Number, z: Number, precision: int = 0) -> tuple:
    """CIE XYZ (D65) → RGB (0-255), clipped to the sRGB gamut."""
    _finite("x y z", (x, y, z))
    return _rgb_out(cs.xyz_to_srgb([x, y, z]), precision)


def xyz_to_lab(x: Number, y: Number, z: Number, precision: int = 2) -> tuple[float, float, float]:
    """CIE XYZ (D65) → CIELAB."""
    _finite("x y z", (x, y, z))
    return _out(cs.xyz_to_lab([x, y, z]), precision)


def lab_to_xyz(L: Number, a: Number, b: Number, precision: int = 5) -> tuple[float, float, float]:
    """CIELAB → CIE XYZ (D65)."""
    _finite("lightness a b", (L, a, b))
    return _out(cs.lab_to_xyz([L, a, b]), precision)


def lab_to_lch(L: Number, a: Number, b: Number, precision: int = 2) -> tuple[float, float, float]:
    _finite("lightness a b", (L, a, b))
    return _out(cs.lab_to_lch([L, a, b]), precision, hue=2)


def lch_to_lab(L: Number, C: Number, H: Number, precision: int = 2) -> tuple[float, float, float]:
    _finite("lightness chroma hue", (L, C, H))
    return _out(cs.lch_to_lab([L, C, H % 360.0]), precision)


def rgb_to_lab(r: Number, g: Number, b: Number, precision: int = 2) -> tuple[float, float, float]:
    """RGB (0-255) → CIELAB (D65). White is (100, 0, 0)."""
    return _out(cs.srgb_to_lab(_rgb_in(r, g, b)), precision)


def lab_to_rgb(L: Number, a: Number, b: Number, precision: int = 0) -> tuple:
    _finite("lightness a b", (L, a, b))
    return _rgb_out(cs.lab_to_srgb([L, a, b]), precision)


def rgb_to_lch(r: Number, g: Number, b: Number, precision: int = 2) -> tuple[float, float, float]:
    return _out(cs.lab_to_lch(cs.srgb_to_lab(_rgb_in(r, g, b))), precision, hue=2)


def lch_to_rgb(L: Number, C: Number, H: Number, precision: int = 0) -> tuple:
    _finite("lightness chroma hue", (L, C, H))
    return _rgb_out(cs.lab_to_srgb(cs.lch_to_lab([L, C, H % 360.0])), precision)


# =============================================================================
# RGB ↔ OKLab ↔ OKLCH
# =============================================================================


def rgb_to_oklab(r: Number, g: Number, b: Number, precision: int = 4) -> tuple[float, float, float]:
    return _out(cs.srgb_to_oklab(_rgb_in(r, g, b)), precision)


def oklab_to_rgb(L: Number, a: Number, b: Number, precision: int = 0) -> tuple:
    _finite("lightness a b", (L, a, b))
    return _rgb_out(cs.oklab_to_srgb([L, a, b]), precision)


def rgb_to_oklch(r: Number, g: Number, b: Number, precision: int = 4) -> tuple[float, float, float]:
    return _out(cs.srgb_to_oklch(_rgb_in(r, g, b)), precision, hue=2)


def oklch_to_rgb(L: Number, C: Number, H: Number, precision: int = 0) -> tuple:
    _finite("lightness chroma hue", (L, C, H))
    return _rgb_out(cs.oklch_to_srgb([L, C, H % 360.0]), precision)


def oklab_to_oklch(L: Number, a: Number, b: Number, precision: int = 4) -> tuple[float, float, float]:
    _finite("lightness a b", (L, a, b))
    return _out(cs.oklab_to_oklch([L, a, b]), precision, hue=2)


def oklch_to_oklab(L: Number, C: Number, H: Number, precision: int = 4) -> tuple[float, float, float]:
    _finite("lightness chroma hue", (L, C, H))
    return _out(cs.oklch_to_oklab([L, C, H % 360.0]), precision)


# =============================================================================
# Hex
# =============================================================================

_HEX_DIGITS = frozenset("0123456789abcdef")


def hex_to_rgb(hex_color: str, include_alpha: bool = True) -> RGBA:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional).

    Alpha is rounded to 3 decimals; it is None for 3/6-digit forms or
    when ``include_alpha`` is False.

    Raises:
        InvalidColorSyntax: if the string is not a hex color.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorSyntax(hex_color, "expected a string")
    digits = hex_color.strip().lower()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in (3, 4, 6, 8) or not set(digits) <= _HEX_DIGITS:
        raise InvalidColorSyntax(hex_color, "expected 3, 4, 6 or 8 hex digits")

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha: Optional[float] = None
    if len(digits) == 8 and include_alpha:
        alpha = round_half_away(int(digits[6:8], 16) / 255.0, 3)
    return RGBA(r, g, b, alpha)


def rgb_to_hex(
    r: Number,
    g: Number,
    b: Number,
    alpha: Optional[float] = None,
    uppercase: bool = False,
) -> str:
    """
    RGB (0-255) → ``#rrggbb``, or ``#rrggbbaa`` when ``alpha`` is given.

    Channels are clamped and rounded.
    """
    _finite("red green blue", (r, g, b))
    channels = [int(round_half_away(_clamp(n, v, 0, 255), 0))
                for n, v in zip(("red", "green", "blue"), (r, g, b))]
    if alpha is not None:
        _finite("alpha", (alpha,))
        channels.append(int(round_half_away(_clamp("alpha", alpha, 0, 1) * 255.0, 0)))
    text = "#" + "".join(f"{c:02x}" for c in channels)
    return text.upper() if uppercase else text


def hex_to_hsl(hex_color: str, precision: int = 1) -> tuple[float, float, float]:
    r, g, b, _ = hex_to_rgb(hex_color)
    return rgb_to_hsl(r, g, b, precision)


def hsl_to_hex(h: Number, s: Number, l: Number, uppercase: bool = False) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l), uppercase=uppercase)


def hex_to_hsv(hex_color: str, precision: int = 1) -> tuple[float, float, float]:
    r, g, b, _ = hex_to_rgb(hex_color)
    return rgb_to_hsv(r, g, b, precision)


def hsv_to_hex(h: Number, s: Number, v: Number, uppercase: bool = False) -> str:
    return rgb_to_hex(*hsv_to_rgb(h, s, v), uppercase=uppercase)


# Color temperature lives with the other device helpers
kelvin_to_rgb = device.kelvin_to_rgb


def rgb_to_kelvin(r: Number, g: Number, b: Number) -> Optional[int]:
    """Approximate correlated color temperature of an RGB (0-255) color."""
    rgb = _rgb_in(r, g, b) * 255.0
    return device.rgb_to_kelvin(*rgb)
