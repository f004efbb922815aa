# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color conversion.

Layers, bottom to top:
    transfer, colorspace, cylindrical, device   numpy kernels on (..., 3) arrays
    direct                                      scalar pairwise functions (0-255 RGB)
    engine                                      CanonicalColor → any ColorSpace
    adjust                                      lighten / darken / mix ...
"""

from huekit.convert.direct import (
    cmyk_to_rgb,
    hex_to_rgb,
    hsi_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    kelvin_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lab_to_xyz,
    lch_to_lab,
    lch_to_rgb,
    oklab_to_oklch,
    oklab_to_rgb,
    oklch_to_oklab,
    oklch_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsi,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_kelvin,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_oklch,
    rgb_to_xyz,
    xyz_to_lab,
    xyz_to_rgb,
)
from huekit.convert.engine import all_formats, convert, convert_many, try_convert

__all__ = [
    # Engine
    "convert",
    "try_convert",
    "convert_many",
    "all_formats",
    # Direct functions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hsi",
    "hsi_to_rgb",
    "rgb_to_hwb",
    "hwb_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "lab_to_lch",
    "lch_to_lab",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_lch",
    "lch_to_rgb",
    "rgb_to_oklab",
    "oklab_to_rgb",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_kelvin",
    "kelvin_to_rgb",
]
