# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Conversion engine: any ColorSpace → any ColorSpace.

Every conversion routes through encoded sRGB in [0, 1] (the hub):

    source --_TO_SRGB--> hub --(clip for device targets)--> _FROM_SRGB --> target

The hub is kept unclipped so that CIE and OK targets see out-of-gamut
values unchanged. Device targets (rgb, hsl, hsv, hsi, hwb, cmyk) have a
closed gamut and are clipped to it. Wide-gamut targets apply their own
gamut policy in ``huekit.gamut.wide``.

Usage:
    from huekit.convert.engine import convert
    convert(red, ColorSpace.HSL)          # CanonicalColor(HSL, (0.0, 100.0, 50.0))
    convert(red, "oklch", precision=6)
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Union

import numpy as np
from numpy.typing import NDArray

from huekit.convert import colorspace as cs
from huekit.convert import cylindrical as cyl
from huekit.convert import device
from huekit.convert.rounding import round_half_away
from huekit.errors import ColorError, InvalidComponentRange
from huekit.gamut.wide import from_wide_gamut, to_wide_gamut
from huekit.schema.color import (
    PRECISION_DEFAULTS,
    SPACE_INFO,
    CanonicalColor,
    ColorSpace,
)

logger = logging.getLogger(__name__)

Kernel = Callable[[NDArray[np.float64]], NDArray[np.float64]]

# Per-component multiplier between kernel units and native units
_PCT3 = np.array([1.0, 100.0, 100.0])
_PCT4 = np.full(4, 100.0)


def _from_wide(space: ColorSpace) -> Kernel:
    return lambda v: cs.linear_to_srgb(from_wide_gamut(v, space))


def _to_wide(space: ColorSpace) -> Kernel:
    return lambda v: to_wide_gamut(cs.srgb_to_linear(v), space)


# =============================================================================
# Dispatch tables
# =============================================================================


_TO_SRGB: dict[ColorSpace, Kernel] = {
    ColorSpace.RGB: lambda v: v,
    ColorSpace.HSL: lambda v: cyl.hsl_to_srgb(v / _PCT3),
    ColorSpace.HSV: lambda v: cyl.hsv_to_srgb(v / _PCT3),
    ColorSpace.HSI: lambda v: cyl.hsi_to_srgb(v / _PCT3),
    ColorSpace.HWB: lambda v: cyl.hwb_to_srgb(v / _PCT3),
    ColorSpace.CMYK: lambda v: device.cmyk_to_srgb(v / _PCT4),
    ColorSpace.XYZ_D65: cs.xyz_to_srgb,
    ColorSpace.XYZ_D50: lambda v: cs.xyz_to_srgb(cs.xyz_d50_to_d65(v)),
    ColorSpace.LAB: cs.lab_to_srgb,
    ColorSpace.LCH: lambda v: cs.lab_to_srgb(cs.lch_to_lab(v)),
    ColorSpace.OKLAB: cs.oklab_to_srgb,
    ColorSpace.OKLCH: cs.oklch_to_srgb,
    ColorSpace.DISPLAY_P3: _from_wide(ColorSpace.DISPLAY_P3),
    ColorSpace.REC2020: _from_wide(ColorSpace.REC2020),
    ColorSpace.PROPHOTO_RGB: _from_wide(ColorSpace.PROPHOTO_RGB),
    ColorSpace.A98_RGB: _from_wide(ColorSpace.A98_RGB),
}

_FROM_SRGB: dict[ColorSpace, Kernel] = {
    ColorSpace.RGB: lambda v: v,
    ColorSpace.HSL: lambda v: cyl.srgb_to_hsl(v) * _PCT3,
    ColorSpace.HSV: lambda v: cyl.srgb_to_hsv(v) * _PCT3,
    ColorSpace.HSI: lambda v: cyl.srgb_to_hsi(v) * _PCT3,
    ColorSpace.HWB: lambda v: cyl.srgb_to_hwb(v) * _PCT3,
    ColorSpace.CMYK: lambda v: device.srgb_to_cmyk(v) * _PCT4,
    ColorSpace.XYZ_D65: cs.srgb_to_xyz,
    ColorSpace.XYZ_D50: lambda v: cs.xyz_d65_to_d50(cs.srgb_to_xyz(v)),
    ColorSpace.LAB: cs.srgb_to_lab,
    ColorSpace.LCH: lambda v: cs.lab_to_lch(cs.srgb_to_lab(v)),
    ColorSpace.OKLAB: cs.srgb_to_oklab,
    ColorSpace.OKLCH: cs.srgb_to_oklch,
    ColorSpace.DISPLAY_P3: _to_wide(ColorSpace.DISPLAY_P3),
    ColorSpace.REC2020: _to_wide(ColorSpace.REC2020),
    ColorSpace.PROPHOTO_RGB: _to_wide(ColorSpace.PROPHOTO_RGB),
    ColorSpace.A98_RGB: _to_wide(ColorSpace.A98_RGB),
}

_missing = set(ColorSpace) - (_TO_SRGB.keys() & _FROM_SRGB.keys())
if _missing:
    raise RuntimeError(f"conversion tables incomplete: {sorted(s.value for s in _missing)}")
del _missing

DEVICE_SPACES = frozenset({
    ColorSpace.RGB,
    ColorSpace.HSL,
    ColorSpace.HSV,
    ColorSpace.HSI,
    ColorSpace.HWB,
    ColorSpace.CMYK,
})


# =============================================================================
# Public API
# =============================================================================


def to_srgb(color: CanonicalColor) -> NDArray[np.float64]:
    """
    Encoded sRGB components of ``color`` as a float array, unclipped and
    unrounded. This is the hub value every conversion passes through.
    """
    native = np.asarray(color.components, dtype=np.float64)
    return _TO_SRGB[color.space](native)


def from_srgb(
    srgb: NDArray[np.float64],
    target: Union[ColorSpace, str],
    alpha: Optional[float] = None,
    precision: Optional[int] = None,
) -> CanonicalColor:
    """Build a ``target`` color from hub sRGB values (see ``convert``)."""
    target = ColorSpace.coerce(target)
    srgb = np.asarray(srgb, dtype=np.float64)
    # Clipping would turn inf into a valid channel
    for name, v in zip(SPACE_INFO[ColorSpace.RGB].channels, srgb):
        if not np.isfinite(v):
            raise InvalidComponentRange(name, float(v))
    if target in DEVICE_SPACES:
        srgb = np.clip(srgb, 0.0, 1.0)

    values = _FROM_SRGB[target](srgb)

    channels = SPACE_INFO[target].channels
    for name, v in zip(channels, values):
        if not np.isfinite(v):
            raise InvalidComponentRange(name, float(v))

    digits = PRECISION_DEFAULTS[target] if precision is None else precision
    if digits < 0:
        raise InvalidComponentRange("precision", digits, (0, None))
    if target is ColorSpace.RGB:
        # RGB rounds on the 0-255 display scale
        comps = tuple(round_half_away(float(v) * 255.0, digits) / 255.0 for v in values)
    else:
        comps = tuple(round_half_away(float(v), digits) for v in values)

    return CanonicalColor(target, comps, alpha)


def convert(
    color: CanonicalColor,
    target: Union[ColorSpace, str],
    precision: Optional[int] = None,
) -> CanonicalColor:
    """
    Convert ``color`` to ``target``.

    Args:
        color: Source color in any space
        target: Target space (member or name like ``"oklch"``)
        precision: Digits after the decimal point; defaults per space
            (``PRECISION_DEFAULTS``). RGB rounds on the 0-255 scale.

    Returns:
        New CanonicalColor in ``target``; alpha is carried over unchanged.

    Raises:
        UnsupportedColorSpace: unknown target.
        InvalidComponentRange: the result is not finite, or precision < 0.
    """
    target = ColorSpace.coerce(target)
    with np.errstate(all="ignore"):
        hub = to_srgb(color)
        return from_srgb(hub, target, color.alpha, precision)


def try_convert(
    color: CanonicalColor,
    target: Union[ColorSpace, str],
    precision: Optional[int] = None,
) -> Optional[CanonicalColor]:
    """Permissive ``convert``: returns None instead of raising."""
    try:
        return convert(color, target, precision)
    except ColorError as e:
        logger.debug("conversion to %r failed: %s", target, e)
        return None


def convert_many(
    colors: Iterable[Union[CanonicalColor, str]],
    target: Union[ColorSpace, str],
    precision: Optional[int] = None,
) -> list[CanonicalColor]:
    """
    Convert a batch of colors, skipping any that fail.

    Strings are parsed leniently first; unparseable entries are skipped.
    """
    from huekit.parse.parser import try_parse

    out = []
    for item in colors:
        color = try_parse(item) if isinstance(item, str) else item
        if color is None:
            continue
        converted = try_convert(color, target, precision)
        if converted is not None:
            out.append(converted)
    return out


def all_formats(color: CanonicalColor, precision: Optional[int] = None) -> dict[str, str]:
    """
    Render ``color`` in every supported space.

    Returns:
        Mapping of ``"hex"`` and each space's identifier to a CSS string,
        e.g. ``{"hex": "#ff0000", "rgb": "rgb(255 0 0)", "hsl": ...}``
    """
    from huekit.serializers.css import to_css, to_hex

    formats = {"hex": to_hex(color)}
    for space in ColorSpace:
        converted = try_convert(color, space, precision)
        if converted is not None:
            formats[space.value] = to_css(converted, precision=precision)
    return formats


__all__ = [
    "convert",
    "try_convert",
    "convert_many",
    "all_formats",
    "to_srgb",
    "from_srgb",
    "DEVICE_SPACES",
]
