# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Huekit -- color parsing, conversion and accessibility metrics.

Parses CSS color strings into tagged, immutable color values, converts
them between sixteen color spaces, and measures WCAG contrast.

Quick start::

    from huekit import parse, contrast_ratio

    red = parse("#ff0000")
    red.to("oklch").to_css()          # "oklch(0.628 0.2577 29.2339)"
    contrast_ratio(red, parse("white"))
"""

from __future__ import annotations

__version__ = "1.0.0"

from huekit.convert import all_formats, convert, convert_many, try_convert
from huekit.convert.adjust import darken, desaturate, is_dark, lighten, mix, saturate
from huekit.errors import (
    ColorError,
    InvalidColorSyntax,
    InvalidComponentRange,
    NoAccessibleColorFound,
    UnsupportedColorSpace,
)
from huekit.gamut import TransferFunction, apply_transfer, from_wide_gamut, to_wide_gamut
from huekit.metrics import (
    Direction,
    WcagLevel,
    contrast_ratio,
    contrast_report,
    delta_e_ok,
    find_accessible_color,
    relative_luminance,
    wcag_level,
)
from huekit.parse import (
    get_color_format,
    is_valid_css_color,
    parse,
    parse_multiple,
    parse_to_rgb,
    try_parse,
)
from huekit.schema import CanonicalColor, ColorSpace, RGBA
from huekit.serializers import format_css, to_css, to_hex

__all__ = [
    # Core types
    "CanonicalColor",
    "ColorSpace",
    "RGBA",
    # Parsing
    "parse",
    "try_parse",
    "parse_to_rgb",
    "parse_multiple",
    "is_valid_css_color",
    "get_color_format",
    # Conversion
    "convert",
    "try_convert",
    "convert_many",
    "all_formats",
    # Formatting
    "to_css",
    "to_hex",
    "format_css",
    # Adjustments
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "mix",
    "is_dark",
    # Gamut / HDR
    "to_wide_gamut",
    "from_wide_gamut",
    "TransferFunction",
    "apply_transfer",
    # Metrics
    "relative_luminance",
    "contrast_ratio",
    "contrast_report",
    "wcag_level",
    "WcagLevel",
    "find_accessible_color",
    "Direction",
    "delta_e_ok",
    # Errors
    "ColorError",
    "InvalidColorSyntax",
    "InvalidComponentRange",
    "UnsupportedColorSpace",
    "NoAccessibleColorFound",
    # Version
    "__version__",
]
