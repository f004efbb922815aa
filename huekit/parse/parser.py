# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
CSS color string parser.

Supported syntaxes:
    #rgb  #rgba  #rrggbb  #rrggbbaa
    rgb() rgba() hsl() hsla() hwb()
    lab() lch() oklab() oklch()
    color(<space> c1 c2 c3 [/ alpha])
    device-cmyk(c m y k [/ alpha])
    hsv() hsva() hsi()               (non-CSS extensions, mirror the formatter)
    named colors, transparent

Matching order: function name before ``(``, then hex, then names.
Components may be separated by commas or whitespace; alpha is either
after ``/`` or the extra trailing component. ``none`` reads as 0.

Range policy:
    strict=False  out-of-range components are clamped (DEBUG log record)
    strict=True   out-of-range components raise InvalidComponentRange
Hue is never out of range; it wraps into [0, 360).

Usage:
    parse("#ff0000")                   # CanonicalColor(RGB, (1.0, 0.0, 0.0))
    parse("hsl(120deg 100% 50% / .5)")
    try_parse("nope")                  # None
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

from huekit.convert.direct import hex_to_rgb
from huekit.errors import ColorError, InvalidColorSyntax, InvalidComponentRange
from huekit.parse.named import NAMED_COLORS
from huekit.schema.color import RGBA, CanonicalColor, ColorSpace

logger = logging.getLogger(__name__)

_FUNCTION_RE = re.compile(r"^([a-z][a-z0-9-]*)\s*\((.*)\)$", re.DOTALL)
_TOKEN_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)([a-z%]*)$")
_SEPARATOR_RE = re.compile(r"[\s,]+")

# Hue units to degrees
_ANGLE_UNITS = {
    "": 1.0,
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}


# =============================================================================
# Tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class _Token:
    value: float
    unit: str = ""


class _Context:
    """Per-call state: the original text (for errors) and the range policy."""

    __slots__ = ("text", "strict")

    def __init__(self, text: str, strict: bool) -> None:
        self.text = text
        self.strict = strict

    def error(self, reason: str) -> InvalidColorSyntax:
        return InvalidColorSyntax(self.text, reason)

    def token(self, raw: str) -> _Token:
        if raw == "none":
            return _Token(0.0)
        m = _TOKEN_RE.match(raw)
        if not m:
            raise self.error(f"not a number: {raw!r}")
        value = float(m.group(1))
        if not math.isfinite(value):
            raise self.error(f"not a finite number: {raw!r}")
        return _Token(value, m.group(2))

    def fit(
        self,
        name: str,
        value: float,
        lo: Optional[float],
        hi: Optional[float],
    ) -> float:
        """Clamp ``value`` into [lo, hi] or, in strict mode, reject it."""
        below = lo is not None and value < lo
        above = hi is not None and value > hi
        if not (below or above):
            return value
        if self.strict:
            raise InvalidComponentRange(name, value, (lo, hi))
        clamped = lo if below else hi
        logger.debug("clamping %s=%r to %r in %r", name, value, clamped, self.text)
        return clamped

    # -- component readers ---------------------------------------------------

    def number(
        self,
        tok: _Token,
        name: str,
        percent_ref: float,
        lo: Optional[float],
        hi: Optional[float],
    ) -> float:
        """A plain number, or a percentage of ``percent_ref``."""
        if tok.unit == "%":
            value = tok.value * percent_ref / 100.0
        elif tok.unit == "":
            value = tok.value
        else:
            raise self.error(f"unexpected unit {tok.unit!r} for {name}")
        return self.fit(name, value, lo, hi)

    def hue(self, tok: _Token) -> float:
        # Unknown units read as degrees
        return tok.value * _ANGLE_UNITS.get(tok.unit, 1.0)

    def alpha(self, tok: Optional[_Token]) -> Optional[float]:
        if tok is None:
            return None
        return self.number(tok, "alpha", 1.0, 0.0, 1.0)

    def split(self, body: str, count: int) -> tuple[list[_Token], Optional[_Token]]:
        """
        Split a function body into ``count`` components and optional alpha.

        Accepts ``a, b, c, d``, ``a b c / d`` and mixtures of both.
        """
        main, slash, rest = body.partition("/")
        raw = [t for t in _SEPARATOR_RE.split(main.strip()) if t]
        alpha_raw: Optional[str] = None
        if slash:
            alpha_parts = [t for t in _SEPARATOR_RE.split(rest.strip()) if t]
            if len(alpha_parts) != 1:
                raise self.error("expected a single alpha value after '/'")
            alpha_raw = alpha_parts[0]
        elif len(raw) == count + 1:
            alpha_raw = raw.pop()

        if len(raw) != count:
            raise self.error(f"expected {count} components, got {len(raw)}")

        tokens = [self.token(t) for t in raw]
        return tokens, None if alpha_raw is None else self.token(alpha_raw)


# =============================================================================
# Function parsers
# =============================================================================


def _rgb(ctx: _Context, body: str) -> CanonicalColor:
    tokens, alpha = ctx.split(body, 3)
    names = ("red", "green", "blue")
    values = tuple(ctx.number(t, n, 255.0, 0.0, 255.0) / 255.0 for t, n in zip(tokens, names))
    return CanonicalColor(ColorSpace.RGB, values, ctx.alpha(alpha))


def _cylindrical(space: ColorSpace, names: tuple[str, str]) -> Callable[[_Context, str], CanonicalColor]:
    def parse_cylindrical(ctx: _Context, body: str) -> CanonicalColor:
        (h, a, b), alpha = ctx.split(body, 3)
        # Bare numbers and percentages both mean percent here
        values = (
            ctx.hue(h),
            ctx.number(a, names[0], 100.0, 0.0, 100.0),
            ctx.number(b, names[1], 100.0, 0.0, 100.0),
        )
        return CanonicalColor(space, values, ctx.alpha(alpha))
    return parse_cylindrical


def _lab(ctx: _Context, body: str) -> CanonicalColor:
    (L, a, b), alpha = ctx.split(body, 3)
    values = (
        ctx.number(L, "lightness", 100.0, 0.0, 100.0),
        ctx.number(a, "a", 125.0, -128.0, 128.0),
        ctx.number(b, "b", 125.0, -128.0, 128.0),
    )
    return CanonicalColor(ColorSpace.LAB, values, ctx.alpha(alpha))


def _lch(ctx: _Context, body: str) -> CanonicalColor:
    (L, C, H), alpha = ctx.split(body, 3)
    values = (
        ctx.number(L, "lightness", 100.0, 0.0, 100.0),
        ctx.number(C, "chroma", 150.0, 0.0, None),
        ctx.hue(H),
    )
    return CanonicalColor(ColorSpace.LCH, values, ctx.alpha(alpha))


def _oklab(ctx: _Context, body: str) -> CanonicalColor:
    (L, a, b), alpha = ctx.split(body, 3)
    values = (
        ctx.number(L, "lightness", 1.0, 0.0, 1.0),
        ctx.number(a, "a", 0.4, -0.4, 0.4),
        ctx.number(b, "b", 0.4, -0.4, 0.4),
    )
    return CanonicalColor(ColorSpace.OKLAB, values, ctx.alpha(alpha))


def _oklch(ctx: _Context, body: str) -> CanonicalColor:
    (L, C, H), alpha = ctx.split(body, 3)
    values = (
        ctx.number(L, "lightness", 1.0, 0.0, 1.0),
        ctx.number(C, "chroma", 0.4, 0.0, None),
        ctx.hue(H),
    )
    return CanonicalColor(ColorSpace.OKLCH, values, ctx.alpha(alpha))


# Identifiers accepted as the first argument of color()
_COLOR_FUNCTION_SPACES = {
    "srgb": ColorSpace.RGB,
    "display-p3": ColorSpace.DISPLAY_P3,
    "rec2020": ColorSpace.REC2020,
    "prophoto-rgb": ColorSpace.PROPHOTO_RGB,
    "a98-rgb": ColorSpace.A98_RGB,
    "xyz": ColorSpace.XYZ_D65,
    "xyz-d65": ColorSpace.XYZ_D65,
    "xyz-d50": ColorSpace.XYZ_D50,
}


def _color(ctx: _Context, body: str) -> CanonicalColor:
    head, *rest = _SEPARATOR_RE.split(body.strip(), maxsplit=1)
    space = _COLOR_FUNCTION_SPACES.get(head)
    if space is None:
        raise ctx.error(f"unsupported color() space {head!r}")

    tokens, alpha = ctx.split(rest[0] if rest else "", 3)
    unbounded = space in (ColorSpace.XYZ_D65, ColorSpace.XYZ_D50)
    lo, hi = (None, None) if unbounded else (0.0, 1.0)
    names = ("x", "y", "z") if unbounded else ("red", "green", "blue")
    values = tuple(ctx.number(t, n, 1.0, lo, hi) for t, n in zip(tokens, names))
    return CanonicalColor(space, values, ctx.alpha(alpha))


def _device_cmyk(ctx: _Context, body: str) -> CanonicalColor:
    tokens, alpha = ctx.split(body, 4)
    values = []
    for tok, name in zip(tokens, ("cyan", "magenta", "yellow", "black")):
        # Numbers are 0-1, percentages are stored as-is
        pct = tok.value if tok.unit == "%" else ctx.number(tok, name, 1.0, None, None) * 100.0
        values.append(ctx.fit(name, pct, 0.0, 100.0))
    return CanonicalColor(ColorSpace.CMYK, tuple(values), ctx.alpha(alpha))


_FUNCTIONS: dict[str, Callable[[_Context, str], CanonicalColor]] = {
    "rgb": _rgb,
    "rgba": _rgb,
    "hsl": _cylindrical(ColorSpace.HSL, ("saturation", "lightness")),
    "hsla": _cylindrical(ColorSpace.HSL, ("saturation", "lightness")),
    "hwb": _cylindrical(ColorSpace.HWB, ("whiteness", "blackness")),
    "hsv": _cylindrical(ColorSpace.HSV, ("saturation", "value")),
    "hsva": _cylindrical(ColorSpace.HSV, ("saturation", "value")),
    "hsi": _cylindrical(ColorSpace.HSI, ("saturation", "intensity")),
    "lab": _lab,
    "lch": _lch,
    "oklab": _oklab,
    "oklch": _oklch,
    "color": _color,
    "device-cmyk": _device_cmyk,
}

# Syntax family reported by get_color_format, per function name
_FAMILIES = {
    "rgba": "rgb",
    "hsla": "hsl",
    "hsva": "hsv",
}

# Families that are not CSS syntax
_EXTENSIONS = frozenset({"hsv", "hsi"})


# =============================================================================
# Public API
# =============================================================================


def _classify(s: str) -> Optional[str]:
    m = _FUNCTION_RE.match(s)
    if m:
        name = m.group(1)
        return _FAMILIES.get(name, name) if name in _FUNCTIONS else None
    if s.startswith("#"):
        return "hex"
    if s == "transparent":
        return "transparent"
    if s in NAMED_COLORS:
        return "named"
    return None


@lru_cache(maxsize=1024)
def _parse(text: str, strict: bool) -> CanonicalColor:
    s = text.strip().lower()
    if not s:
        raise InvalidColorSyntax(text, "empty string")
    ctx = _Context(text, strict)

    m = _FUNCTION_RE.match(s)
    if m:
        name, body = m.group(1), m.group(2)
        parser = _FUNCTIONS.get(name)
        if parser is None:
            raise ctx.error(f"unknown color function {name!r}")
        return parser(ctx, body)

    if s.startswith("#"):
        r, g, b, a = hex_to_rgb(s)
        return CanonicalColor.from_rgb255(r, g, b, a)

    if s == "transparent":
        return CanonicalColor(ColorSpace.RGB, (0.0, 0.0, 0.0), 0.0)

    rgb = NAMED_COLORS.get(s)
    if rgb is not None:
        return CanonicalColor.from_rgb255(*rgb)

    raise ctx.error("unrecognized color")


def parse(text: str, *, strict: bool = False) -> CanonicalColor:
    """
    Parse a CSS color string.

    Args:
        text: Color string (case and surrounding whitespace are ignored)
        strict: Reject out-of-range components instead of clamping

    Returns:
        CanonicalColor in the space the syntax names (hex and names give RGB)

    Raises:
        InvalidColorSyntax: the string matches no supported syntax.
        InvalidComponentRange: strict mode and a component is out of range.
        UnsupportedColorSpace: malformed component count for the space.
    """
    if not isinstance(text, str):
        raise InvalidColorSyntax(text, "expected a string")
    return _parse(text, strict)


def try_parse(text: str, *, strict: bool = False) -> Optional[CanonicalColor]:
    """Permissive ``parse``: returns None instead of raising."""
    try:
        return parse(text, strict=strict)
    except ColorError as e:
        logger.debug("could not parse %r: %s", text, e)
        return None


def parse_to_rgb(text: str) -> Optional[RGBA]:
    """
    Parse any supported color and return 0-255 sRGB, or None.

    Colors outside the sRGB gamut are clipped.
    """
    color = try_parse(text)
    if color is None:
        return None
    try:
        return color.rgb255()
    except ColorError as e:
        logger.debug("could not map %r to sRGB: %s", text, e)
        return None


def is_valid_css_color(text: str) -> bool:
    """True if ``text`` is a parseable CSS color (extensions like hsv() excluded)."""
    if not isinstance(text, str):
        return False
    family = _classify(text.strip().lower())
    return family is not None and family not in _EXTENSIONS and try_parse(text) is not None


def get_color_format(text: str) -> Optional[str]:
    """
    Syntax family of a parseable color string.

    Returns one of ``"hex"``, ``"rgb"``, ``"hsl"``, ``"hwb"``, ``"hsv"``,
    ``"hsi"``, ``"lab"``, ``"lch"``, ``"oklab"``, ``"oklch"``, ``"color"``,
    ``"device-cmyk"``, ``"named"``, ``"transparent"``; None if the string
    does not parse.
    """
    if not isinstance(text, str) or try_parse(text) is None:
        return None
    return _classify(text.strip().lower())


def _split_top_level(text: str) -> list[str]:
    parts, depth, start = [], 0, 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch in ",;" and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


def parse_multiple(text: str, *, strict: bool = False) -> list[CanonicalColor]:
    """
    Parse a list of colors separated by ``,`` or ``;``.

    Separators inside function parentheses are ignored, so
    ``"rgb(1, 2, 3), #fff; red"`` yields three colors. Entries that do not
    parse are skipped.
    """
    if not isinstance(text, str):
        return []
    colors = []
    for part in _split_top_level(text):
        if not part.strip():
            continue
        color = try_parse(part, strict=strict)
        if color is not None:
            colors.append(color)
    return colors


def supported_formats() -> list[str]:
    """Names of every syntax family ``parse`` accepts."""
    families = {_FAMILIES.get(name, name) for name in _FUNCTIONS}
    return sorted(families) + ["hex", "named", "transparent"]


__all__ = [
    "parse",
    "try_parse",
    "parse_to_rgb",
    "is_valid_css_color",
    "get_color_format",
    "parse_multiple",
    "supported_formats",
]
