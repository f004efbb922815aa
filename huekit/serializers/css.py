# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
CSS serializer.

Formats a CanonicalColor as the CSS string for its own space; the output
parses back to the same color (within rounding).

Example::

    rgb(255 0 0)                  rgb(255 0 0 / 0.5)
    hsl(210 50% 40%)              hwb(210 20% 60%)
    lab(53.24% 80.09 67.2)        lch(53.24% 104.55 40)
    oklab(0.628 0.2249 0.1258)    oklch(0.628 0.2577 29.23)
    color(display-p3 0.9175 0.2003 0.1386)
    color(xyz-d65 0.41246 0.21267 0.01933)
    device-cmyk(0% 100% 100% 0%)
    hsv(0 100% 100%)              hsi(0 100% 33.3%)   (non-CSS extensions)
"""

from __future__ import annotations

from typing import Optional, Union

from huekit.serializers.base import CssSyntax, format_number
from huekit.schema.color import PRECISION_DEFAULTS, SPACE_INFO, CanonicalColor, ColorSpace


# Function name and per-component unit suffix for each space
_LAYOUT: dict[ColorSpace, tuple[str, tuple[str, ...]]] = {
    ColorSpace.RGB: ("rgb", ("", "", "")),
    ColorSpace.HSL: ("hsl", ("", "%", "%")),
    ColorSpace.HSV: ("hsv", ("", "%", "%")),
    ColorSpace.HSI: ("hsi", ("", "%", "%")),
    ColorSpace.HWB: ("hwb", ("", "%", "%")),
    ColorSpace.CMYK: ("device-cmyk", ("%", "%", "%", "%")),
    ColorSpace.LAB: ("lab", ("%", "", "")),
    ColorSpace.LCH: ("lch", ("%", "", "")),
    ColorSpace.OKLAB: ("oklab", ("", "", "")),
    ColorSpace.OKLCH: ("oklch", ("", "", "")),
}

# Spaces written with the generic color() function
_COLOR_FUNCTION = {
    ColorSpace.XYZ_D65: "xyz-d65",
    ColorSpace.XYZ_D50: "xyz-d50",
    ColorSpace.DISPLAY_P3: "display-p3",
    ColorSpace.REC2020: "rec2020",
    ColorSpace.PROPHOTO_RGB: "prophoto-rgb",
    ColorSpace.A98_RGB: "a98-rgb",
}

ALPHA_PRECISION = 3

# a/b are written inside the same window the parser clamps to
_CLAMPED = frozenset({ColorSpace.LAB, ColorSpace.OKLAB})


def _components(color: CanonicalColor, precision: int) -> list[str]:
    values = list(color.components)
    if color.space is ColorSpace.RGB:
        values = [v * 255.0 for v in values]
    elif color.space in _CLAMPED:
        ranges = SPACE_INFO[color.space].ranges
        values[1:] = [min(hi, max(lo, v)) for v, (lo, hi) in zip(values[1:], ranges[1:])]

    hue = color.space.hue_index
    out = []
    for i, v in enumerate(values):
        text = format_number(v, precision)
        if i == hue and float(text) >= 360.0:
            text = format_number(float(text) - 360.0, precision)
        out.append(text)
    return out


def to_css(
    color: CanonicalColor,
    precision: Optional[int] = None,
    syntax: CssSyntax = CssSyntax.MODERN,
) -> str:
    """
    Format a color as a CSS string in its own space.

    Args:
        color: Color to format
        precision: Digits after the decimal point (defaults per space,
            RGB counts on the 0-255 scale)
        syntax: MODERN space-separated, or LEGACY comma syntax with
            rgba()/hsla() for rgb and hsl colors

    Returns:
        CSS color string; alpha appears only when present and below 1
    """
    digits = PRECISION_DEFAULTS[color.space] if precision is None else precision
    parts = _components(color, digits)
    alpha = None
    if color.alpha is not None and color.alpha < 1.0:
        alpha = format_number(color.alpha, ALPHA_PRECISION)

    if color.space in _COLOR_FUNCTION:
        body = " ".join([_COLOR_FUNCTION[color.space], *parts])
        return f"color({body})" if alpha is None else f"color({body} / {alpha})"

    name, units = _LAYOUT[color.space]
    parts = [p + u for p, u in zip(parts, units)]

    if syntax is CssSyntax.LEGACY and color.space in (ColorSpace.RGB, ColorSpace.HSL):
        if alpha is None:
            return f"{name}({', '.join(parts)})"
        return f"{name}a({', '.join([*parts, alpha])})"

    body = " ".join(parts)
    return f"{name}({body})" if alpha is None else f"{name}({body} / {alpha})"


def to_hex(
    color: CanonicalColor,
    uppercase: bool = False,
    include_alpha: bool = True,
) -> str:
    """
    Hex string for a color in any space (clipped to sRGB).

    ``#rrggbbaa`` is used only when the color has alpha below 1 and
    ``include_alpha`` is set.
    """
    from huekit.convert.direct import rgb_to_hex

    r, g, b, a = color.rgb255()
    if not include_alpha or a is None or a >= 1.0:
        a = None
    return rgb_to_hex(r, g, b, a, uppercase=uppercase)


def format_css(
    color: Union[CanonicalColor, str],
    target: Optional[Union[ColorSpace, str]] = None,
    precision: Optional[int] = None,
    syntax: CssSyntax = CssSyntax.MODERN,
) -> str:
    """
    Convert (optionally) and format in one step.

    Example:
        format_css("#ff0000", "hsl")      # "hsl(0 100% 50%)"
        format_css(color, "oklch", 3)
    """
    if isinstance(color, str):
        from huekit.parse.parser import parse
        color = parse(color)
    if target is not None:
        color = color.to(target, precision)
    return to_css(color, precision=precision, syntax=syntax)


__all__ = [
    "to_css",
    "to_hex",
    "format_css",
    "CssSyntax",
]
