# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Cylindrical sRGB models: HSL, HSV, HWB and HSI.

All kernels take and return arrays of shape (..., 3):
    - sRGB channels as fractions [0, 1]
    - hue in degrees [0, 360)
    - saturation / lightness / value / whiteness / blackness / intensity
      as fractions [0, 1]

Achromatic colors get hue 0 and saturation 0.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _split(values: ArrayLike) -> tuple[NDArray[np.float64], ...]:
    arr = np.asarray(values, dtype=np.float64)
    return arr[..., 0], arr[..., 1], arr[..., 2]


def _hue(r, g, b, cmax, delta) -> NDArray[np.float64]:
    """Hexagonal hue shared by HSL, HSV and HWB."""
    chromatic = delta > 0.0
    d = np.where(chromatic, delta, 1.0)
    h = np.where(
        cmax == r,
        ((g - b) / d) % 6.0,
        np.where(cmax == g, (b - r) / d + 2.0, (r - g) / d + 4.0),
    )
    h = np.where(chromatic, h * 60.0, 0.0) % 360.0
    return h


# =============================================================================
# HSL
# =============================================================================


def srgb_to_hsl(rgb: ArrayLike) -> NDArray[np.float64]:
    r, g, b = _split(rgb)
    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)
    delta = cmax - cmin

    l = (cmax + cmin) / 2.0
    denom = 1.0 - np.abs(2.0 * l - 1.0)
    s = np.where((delta > 0.0) & (denom > 0.0), delta / np.where(denom > 0.0, denom, 1.0), 0.0)

    return np.stack([_hue(r, g, b, cmax, delta), s, l], axis=-1)


def hsl_to_srgb(hsl: ArrayLike) -> NDArray[np.float64]:
    h, s, l = _split(hsl)
    a = s * np.minimum(l, 1.0 - l)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + h / 30.0) % 12.0
        return l - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))

    return np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)


# =============================================================================
# HSV
# =============================================================================


def srgb_to_hsv(rgb: ArrayLike) -> NDArray[np.float64]:
    r, g, b = _split(rgb)
    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)
    delta = cmax - cmin

    s = np.where(cmax > 0.0, delta / np.where(cmax > 0.0, cmax, 1.0), 0.0)

    return np.stack([_hue(r, g, b, cmax, delta), s, cmax], axis=-1)


def hsv_to_srgb(hsv: ArrayLike) -> NDArray[np.float64]:
    h, s, v = _split(hsv)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + h / 60.0) % 6.0
        return v - v * s * np.maximum(0.0, np.minimum(np.minimum(k, 4.0 - k), 1.0))

    return np.stack([channel(5.0), channel(3.0), channel(1.0)], axis=-1)


# =============================================================================
# HWB
# =============================================================================


def srgb_to_hwb(rgb: ArrayLike) -> NDArray[np.float64]:
    r, g, b = _split(rgb)
    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)

    return np.stack([_hue(r, g, b, cmax, cmax - cmin), cmin, 1.0 - cmax], axis=-1)


def hwb_to_srgb(hwb: ArrayLike) -> NDArray[np.float64]:
    """
    HWB → sRGB.

    When whiteness + blackness >= 1 the result is the gray
    w / (w + b), as CSS Color 4 normalises it.
    """
    h, w, bk = _split(hwb)
    total = w + bk
    saturated = total >= 1.0
    safe_total = np.where(saturated, total, 1.0)
    w = np.where(saturated, w / safe_total, w)
    bk = np.where(saturated, bk / safe_total, bk)

    rgb = hsl_to_srgb(np.stack([h, np.ones_like(h), np.full_like(h, 0.5)], axis=-1))
    rgb = rgb * (1.0 - w - bk)[..., None] + w[..., None]
    return rgb


# =============================================================================
# HSI
# =============================================================================


def srgb_to_hsi(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    sRGB → HSI (Gonzalez & Woods geometric hue).

    Intensity is the channel mean; saturation is 1 - min/intensity.
    """
    r, g, b = _split(rgb)
    i = (r + g + b) / 3.0
    cmin = np.minimum(np.minimum(r, g), b)
    s = np.where(i > 0.0, 1.0 - cmin / np.where(i > 0.0, i, 1.0), 0.0)

    num = 0.5 * ((r - g) + (r - b))
    den = np.sqrt((r - g) ** 2 + (r - b) * (g - b))
    valid = (s > 0.0) & (den > 0.0)
    theta = np.degrees(np.arccos(np.clip(num / np.where(den > 0.0, den, 1.0), -1.0, 1.0)))
    h = np.where(b > g, 360.0 - theta, theta)
    h = np.where(valid, h, 0.0) % 360.0

    return np.stack([h, s, i], axis=-1)


def hsi_to_srgb(hsi: ArrayLike) -> NDArray[np.float64]:
    """HSI → sRGB using the 120° sector formulas."""
    h, s, i = _split(hsi)
    h = h % 360.0
    sector = np.floor(h / 120.0).astype(np.int64) % 3
    rel = np.radians(h - sector * 120.0)

    low = i * (1.0 - s)
    high = i * (1.0 + s * np.cos(rel) / np.cos(np.pi / 3.0 - rel))
    rest = 3.0 * i - (low + high)

    # sector 0: (high, rest, low); 1: (low, high, rest); 2: (rest, low, high)
    r = np.choose(sector, [high, low, rest])
    g = np.choose(sector, [rest, high, low])
    b = np.choose(sector, [low, rest, high])
    return np.stack([r, g, b], axis=-1)


__all__ = [
    "srgb_to_hsl",
    "hsl_to_srgb",
    "srgb_to_hsv",
    "hsv_to_srgb",
    "srgb_to_hwb",
    "hwb_to_srgb",
    "srgb_to_hsi",
    "hsi_to_srgb",
]
