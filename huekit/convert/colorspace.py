# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Colorimetric conversion kernels.

Conversion chains:
    sRGB → Linear RGB → XYZ (D65) → CIELAB → LCH
                      ↘ XYZ (D50)  (Bradford)
    sRGB → Linear RGB → OKLab → OKLCH

References:
- sRGB matrices: Bruce Lindbloom, http://www.brucelindbloom.com/
- CIELAB: CIE 15:2004
- OKLab: https://bottosson.github.io/posts/oklab/

Kernels work on arrays of shape (..., 3) and never clip; gamut handling
is the caller's decision. XYZ is scaled so that Y(white) = 1.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huekit.convert.transfer import SRGB


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    return SRGB.decode(srgb)


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Values outside [0,1] stay outside.
    """
    return SRGB.encode(linear)


# =============================================================================
# Linear RGB ↔ XYZ
# =============================================================================

# Reference whites, normalised to Y = 1
WHITE_POINTS = {
    "D50": np.array([0.96422, 1.0, 0.82521], dtype=np.float64),
    "D65": np.array([0.95047, 1.0, 1.08883], dtype=np.float64),
}

# Linear sRGB to XYZ (D65)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# Published inverse; keeps white at (1, 1, 1) to 1e-7
XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)

# Bradford chromatic adaptation D65 → D50
BRADFORD_D65_TO_D50 = np.array([
    [1.0479298208405488, 0.022946793341019088, -0.05019222954313557],
    [0.029627815688159344, 0.990434484573249, -0.01707382502938514],
    [-0.009243058152591178, 0.015055144896577895, 0.7521316354461029],
], dtype=np.float64)

BRADFORD_D50_TO_D65 = np.linalg.inv(BRADFORD_D65_TO_D50)


def linear_srgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear sRGB to CIE XYZ (D65).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values, Y(white) = 1
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, SRGB_TO_XYZ)


def xyz_to_linear_srgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65) to linear sRGB. Inverse of linear_srgb_to_xyz."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, XYZ_TO_SRGB)


def xyz_d65_to_d50(xyz: ArrayLike) -> NDArray[np.float64]:
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, BRADFORD_D65_TO_D50)


def xyz_d50_to_d65(xyz: ArrayLike) -> NDArray[np.float64]:
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, BRADFORD_D50_TO_D65)


# =============================================================================
# XYZ ↔ CIELAB
# =============================================================================

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def xyz_to_lab(xyz: ArrayLike, white: str = "D65") -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIELAB.

    Args:
        xyz: Array of shape (..., 3) with XYZ values
        white: Reference white the XYZ values are relative to

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100] for real colors
    """
    xyz = np.asarray(xyz, dtype=np.float64) / WHITE_POINTS[white]
    f = np.where(
        xyz > _EPSILON,
        np.cbrt(xyz),
        (_KAPPA * xyz + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: ArrayLike, white: str = "D65") -> NDArray[np.float64]:
    """Convert CIELAB to CIE XYZ. Inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    x = np.where(fx ** 3 > _EPSILON, fx ** 3, (116.0 * fx - 16.0) / _KAPPA)
    y = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    z = np.where(fz ** 3 > _EPSILON, fz ** 3, (116.0 * fz - 16.0) / _KAPPA)

    return np.stack([x, y, z], axis=-1) * WHITE_POINTS[white]


# =============================================================================
# Rectangular ↔ Cylindrical (shared by LCH and OKLCH)
# =============================================================================


def lab_to_lch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert (L, a, b) to cylindrical (L, C, H).

    Works for both CIELAB and OKLab.

    Returns:
        Array of shape (..., 3) with (L, C, H), H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: ArrayLike) -> NDArray[np.float64]:
    """Convert cylindrical (L, C, H in degrees) to (L, a, b)."""
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear sRGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # cbrt keeps the sign for out-of-gamut input
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """Convert OKLab to linear sRGB. Inverse of linear_rgb_to_oklab."""
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# Convenience chains from encoded sRGB
# =============================================================================


def srgb_to_xyz(srgb: ArrayLike) -> NDArray[np.float64]:
    return linear_srgb_to_xyz(srgb_to_linear(srgb))


def xyz_to_srgb(xyz: ArrayLike) -> NDArray[np.float64]:
    return linear_to_srgb(xyz_to_linear_srgb(xyz))


def srgb_to_lab(srgb: ArrayLike) -> NDArray[np.float64]:
    """sRGB [0,1] → CIELAB (D65)."""
    return xyz_to_lab(srgb_to_xyz(srgb))


def lab_to_srgb(lab: ArrayLike) -> NDArray[np.float64]:
    """CIELAB (D65) → sRGB, unclipped."""
    return xyz_to_srgb(lab_to_xyz(lab))


def srgb_to_oklab(srgb: ArrayLike) -> NDArray[np.float64]:
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklab_to_srgb(lab: ArrayLike) -> NDArray[np.float64]:
    return linear_to_srgb(oklab_to_linear_rgb(lab))


def srgb_to_oklch(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.4 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    return lab_to_lch(srgb_to_oklab(srgb))


def oklch_to_srgb(lch: ArrayLike) -> NDArray[np.float64]:
    """OKLCH → sRGB, unclipped."""
    return oklab_to_srgb(lch_to_lab(lch))


# OKLab and CIELAB share the same cylindrical form
oklab_to_oklch = lab_to_lch
oklch_to_oklab = lch_to_lab
