# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (ΔE).

Both metrics are Euclidean distances, measured in rectangular spaces
(hue is angular, so distances are never taken in LCH/OKLCH directly):

    delta_e_ok   OKLab, 0-1 scale
                 ≈ 0.02 barely perceptible, ≈ 0.04 noticeable, 0.08+ clearly different
    delta_e_76   CIELAB (CIE76), 0-100 scale
                 ≈ 2.3 just noticeable difference
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huekit.convert import colorspace as cs
from huekit.convert.engine import to_srgb
from huekit.schema.color import CanonicalColor


def delta_e_ok(a: CanonicalColor, b: CanonicalColor) -> float:
    """ΔE in OKLab between two colors in any space (unclipped)."""
    delta = cs.srgb_to_oklab(to_srgb(a)) - cs.srgb_to_oklab(to_srgb(b))
    return float(np.sqrt(np.sum(delta ** 2)))


def delta_e_76(a: CanonicalColor, b: CanonicalColor) -> float:
    """CIE76 ΔE*ab between two colors in any space (unclipped)."""
    delta = cs.srgb_to_lab(to_srgb(a)) - cs.srgb_to_lab(to_srgb(b))
    return float(np.sqrt(np.sum(delta ** 2)))


def delta_e_oklch_batch(colors1: ArrayLike, colors2: ArrayLike) -> NDArray[np.float64]:
    """
    Vectorized ΔE for arrays of OKLCH colors.

    Args:
        colors1: Array of shape (N, 3) with OKLCH values (L, C, H in degrees)
        colors2: Array of shape (N, 3) with OKLCH values

    Returns:
        Array of shape (N,) with ΔE values
    """
    delta = cs.oklch_to_oklab(colors1) - cs.oklch_to_oklab(colors2)
    return np.sqrt(np.sum(delta ** 2, axis=-1))


__all__ = [
    "delta_e_ok",
    "delta_e_76",
    "delta_e_oklch_batch",
]
