# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
CanonicalColor: the value type every huekit component consumes and produces.

Design principles:
- Immutable: frozen dataclasses, every conversion returns a new value
- Tagged: a numeric tuple is meaningless without its color space
- Native ranges: components are stored in each space's own units

Native component ranges:
    rgb, display-p3, rec2020,
    prophoto-rgb, a98-rgb   r, g, b in 0..1 (encoded)
    hsl / hsv / hsi / hwb   hue in degrees [0, 360), the rest in percent
    cmyk                    c, m, y, k in percent
    xyz-d50 / xyz-d65       X, Y, Z with Y(white) = 1
    lab / lch               L in 0..100, a/b or C unbounded, H in degrees
    oklab / oklch           L in 0..1, a/b or C unbounded, H in degrees

Hue components wrap into [0, 360) on construction; they are never rejected.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, NamedTuple, Optional, Union

from huekit.errors import InvalidComponentRange, UnsupportedColorSpace


# =============================================================================
# Color Spaces
# =============================================================================


class ColorSpace(Enum):
    """
    Closed enumeration of supported color spaces.

    Values are the identifiers CSS uses for the same spaces, so
    ``ColorSpace("display-p3")`` works for ``color(display-p3 ...)``.
    """
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HSI = "hsi"
    HWB = "hwb"
    CMYK = "cmyk"
    XYZ_D50 = "xyz-d50"
    XYZ_D65 = "xyz-d65"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    DISPLAY_P3 = "display-p3"
    REC2020 = "rec2020"
    PROPHOTO_RGB = "prophoto-rgb"
    A98_RGB = "a98-rgb"

    @classmethod
    def coerce(cls, value: Union[ColorSpace, str]) -> ColorSpace:
        """
        Resolve a member or a (case-insensitive) name to a ColorSpace.

        Raises:
            UnsupportedColorSpace: if the name is not a known space.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = _SPACE_ALIASES.get(key, key)
            try:
                return cls(key)
            except ValueError:
                pass
        raise UnsupportedColorSpace(value)

    @property
    def component_count(self) -> int:
        return 4 if self is ColorSpace.CMYK else 3

    @property
    def hue_index(self) -> Optional[int]:
        """Index of the hue component, or None for spaces without hue."""
        return _HUE_INDEX.get(self)

    @property
    def is_wide_gamut(self) -> bool:
        return self in _WIDE_GAMUT


_SPACE_ALIASES = {
    "srgb": "rgb",
    "rgba": "rgb",
    "hsla": "hsl",
    "xyz": "xyz-d65",
    "p3": "display-p3",
    "rec-2020": "rec2020",
    "prophoto": "prophoto-rgb",
    "a98": "a98-rgb",
    "adobe-rgb": "a98-rgb",
}

_HUE_INDEX = {
    ColorSpace.HSL: 0,
    ColorSpace.HSV: 0,
    ColorSpace.HSI: 0,
    ColorSpace.HWB: 0,
    ColorSpace.LCH: 2,
    ColorSpace.OKLCH: 2,
}

_WIDE_GAMUT = frozenset({
    ColorSpace.DISPLAY_P3,
    ColorSpace.REC2020,
    ColorSpace.PROPHOTO_RGB,
    ColorSpace.A98_RGB,
})


# Default rounding (digits after the decimal point) per target space.
# RGB-encoded spaces round on the 0-255 display scale.
PRECISION_DEFAULTS = MappingProxyType({
    ColorSpace.RGB: 0,
    ColorSpace.HSL: 1,
    ColorSpace.HSV: 1,
    ColorSpace.HSI: 1,
    ColorSpace.HWB: 1,
    ColorSpace.CMYK: 1,
    ColorSpace.XYZ_D50: 5,
    ColorSpace.XYZ_D65: 5,
    ColorSpace.LAB: 2,
    ColorSpace.LCH: 2,
    ColorSpace.OKLAB: 4,
    ColorSpace.OKLCH: 4,
    ColorSpace.DISPLAY_P3: 4,
    ColorSpace.REC2020: 4,
    ColorSpace.PROPHOTO_RGB: 4,
    ColorSpace.A98_RGB: 4,
})


# =============================================================================
# Space Metadata
# =============================================================================


@dataclass(frozen=True, slots=True)
class SpaceInfo:
    """
    Descriptive metadata for a color space.

    Attributes:
        name: Short display name
        full_name: Expanded channel names
        kind: additive, cylindrical, subtractive, linear, perceptual,
            cylindrical-perceptual or wide-gamut
        channels: Channel names in component order
        ranges: Nominal (min, max) per channel; None means unbounded
    """
    name: str
    full_name: str
    kind: str
    channels: tuple[str, ...]
    ranges: tuple[tuple[Optional[float], Optional[float]], ...]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "full_name": self.full_name,
            "kind": self.kind,
            "channels": list(self.channels),
            "ranges": {ch: list(r) for ch, r in zip(self.channels, self.ranges)},
        }


_UNIT = (0.0, 1.0)
_PCT = (0.0, 100.0)
_HUE = (0.0, 360.0)

SPACE_INFO = MappingProxyType({
    ColorSpace.RGB: SpaceInfo(
        "sRGB", "Red, Green, Blue", "additive",
        ("red", "green", "blue"), (_UNIT, _UNIT, _UNIT),
    ),
    ColorSpace.HSL: SpaceInfo(
        "HSL", "Hue, Saturation, Lightness", "cylindrical",
        ("hue", "saturation", "lightness"), (_HUE, _PCT, _PCT),
    ),
    ColorSpace.HSV: SpaceInfo(
        "HSV", "Hue, Saturation, Value", "cylindrical",
        ("hue", "saturation", "value"), (_HUE, _PCT, _PCT),
    ),
    ColorSpace.HSI: SpaceInfo(
        "HSI", "Hue, Saturation, Intensity", "cylindrical",
        ("hue", "saturation", "intensity"), (_HUE, _PCT, _PCT),
    ),
    ColorSpace.HWB: SpaceInfo(
        "HWB", "Hue, Whiteness, Blackness", "cylindrical",
        ("hue", "whiteness", "blackness"), (_HUE, _PCT, _PCT),
    ),
    ColorSpace.CMYK: SpaceInfo(
        "CMYK", "Cyan, Magenta, Yellow, Black", "subtractive",
        ("cyan", "magenta", "yellow", "black"), (_PCT, _PCT, _PCT, _PCT),
    ),
    ColorSpace.XYZ_D50: SpaceInfo(
        "CIE XYZ D50", "X, Y, Z tristimulus values (D50)", "linear",
        ("x", "y", "z"), ((None, None),) * 3,
    ),
    ColorSpace.XYZ_D65: SpaceInfo(
        "CIE XYZ D65", "X, Y, Z tristimulus values (D65)", "linear",
        ("x", "y", "z"), ((None, None),) * 3,
    ),
    ColorSpace.LAB: SpaceInfo(
        "CIELAB", "Lightness, a*, b*", "perceptual",
        ("lightness", "a", "b"), (_PCT, (-128.0, 128.0), (-128.0, 128.0)),
    ),
    ColorSpace.LCH: SpaceInfo(
        "LCH", "Lightness, Chroma, Hue", "cylindrical-perceptual",
        ("lightness", "chroma", "hue"), (_PCT, (0.0, None), _HUE),
    ),
    ColorSpace.OKLAB: SpaceInfo(
        "OKLab", "Lightness, a, b", "perceptual",
        ("lightness", "a", "b"), (_UNIT, (-0.4, 0.4), (-0.4, 0.4)),
    ),
    ColorSpace.OKLCH: SpaceInfo(
        "OKLCH", "Lightness, Chroma, Hue", "cylindrical-perceptual",
        ("lightness", "chroma", "hue"), (_UNIT, (0.0, None), _HUE),
    ),
    ColorSpace.DISPLAY_P3: SpaceInfo(
        "Display P3", "Red, Green, Blue (DCI-P3, D65)", "wide-gamut",
        ("red", "green", "blue"), (_UNIT, _UNIT, _UNIT),
    ),
    ColorSpace.REC2020: SpaceInfo(
        "Rec. 2020", "Red, Green, Blue (ITU-R BT.2020)", "wide-gamut",
        ("red", "green", "blue"), (_UNIT, _UNIT, _UNIT),
    ),
    ColorSpace.PROPHOTO_RGB: SpaceInfo(
        "ProPhoto RGB", "Red, Green, Blue (ROMM, D50)", "wide-gamut",
        ("red", "green", "blue"), (_UNIT, _UNIT, _UNIT),
    ),
    ColorSpace.A98_RGB: SpaceInfo(
        "Adobe RGB (1998)", "Red, Green, Blue (Adobe 1998)", "wide-gamut",
        ("red", "green", "blue"), (_UNIT, _UNIT, _UNIT),
    ),
})


# =============================================================================
# Core Value Types
# =============================================================================


class RGBA(NamedTuple):
    """An sRGB color on the 0-255 integer scale, with optional alpha (0-1)."""
    r: int
    g: int
    b: int
    a: Optional[float] = None


def _wrap_hue(h: float) -> float:
    h = h % 360.0
    # Tiny negative inputs wrap to exactly 360.0 in floating point.
    return 0.0 if h >= 360.0 else h


@dataclass(frozen=True, slots=True)
class CanonicalColor:
    """
    A color value tagged with its color space.

    Attributes:
        space: The color space the components are expressed in
        components: Component values in the space's native range
            (3 values, 4 for CMYK)
        alpha: Opacity in [0, 1], or None when the source had no alpha

    Usage:
        red = CanonicalColor(ColorSpace.RGB, (1.0, 0.0, 0.0))
        red.to(ColorSpace.HSL)      # CanonicalColor(HSL, (0.0, 100.0, 50.0))
        red.to_css()                # "rgb(255 0 0)"
    """
    space: ColorSpace
    components: tuple[float, ...]
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate component count, finiteness and alpha; wrap hue."""
        space = ColorSpace.coerce(self.space)
        object.__setattr__(self, "space", space)

        try:
            values = [float(v) for v in self.components]
        except (TypeError, ValueError) as e:
            raise UnsupportedColorSpace(
                space.value, f"components must be numbers, got {self.components!r}"
            ) from e

        if len(values) != space.component_count:
            raise UnsupportedColorSpace(
                space.value,
                f"expected {space.component_count} components, got {len(values)}",
            )

        channels = SPACE_INFO[space].channels
        for name, v in zip(channels, values):
            if not math.isfinite(v):
                raise InvalidComponentRange(name, v)

        hue_index = space.hue_index
        if hue_index is not None:
            values[hue_index] = _wrap_hue(values[hue_index])

        object.__setattr__(self, "components", tuple(values))

        if self.alpha is not None:
            alpha = float(self.alpha)
            if not math.isfinite(alpha) or not 0.0 <= alpha <= 1.0:
                raise InvalidComponentRange("alpha", self.alpha, (0.0, 1.0))
            object.__setattr__(self, "alpha", alpha)

    @classmethod
    def from_rgb255(
        cls,
        r: float,
        g: float,
        b: float,
        alpha: Optional[float] = None,
    ) -> CanonicalColor:
        """Build an sRGB color from 0-255 channel values."""
        return cls(ColorSpace.RGB, (r / 255.0, g / 255.0, b / 255.0), alpha)

    @property
    def opacity(self) -> float:
        """Alpha with the implicit default applied (1.0 when absent)."""
        return 1.0 if self.alpha is None else self.alpha

    @property
    def hex(self) -> str:
        """Hex string like ``"#ff0000"`` (``"#ff000080"`` with alpha < 1)."""
        from huekit.serializers.css import to_hex
        return to_hex(self)

    def to(self, target: Union[ColorSpace, str], precision: Optional[int] = None) -> CanonicalColor:
        """Convert to another space. See ``huekit.convert.engine.convert``."""
        from huekit.convert.engine import convert
        return convert(self, target, precision)

    def to_css(self, precision: Optional[int] = None) -> str:
        """Format as a CSS color string in this color's own space."""
        from huekit.serializers.css import to_css
        return to_css(self, precision=precision)

    def rgb255(self) -> RGBA:
        """sRGB channels on the 0-255 integer scale (converts if needed)."""
        rgb = self if self.space is ColorSpace.RGB else self.to(ColorSpace.RGB)
        from huekit.convert.rounding import round_half_away
        r, g, b = (
            int(round_half_away(min(1.0, max(0.0, v)) * 255.0, 0))
            for v in rgb.components
        )
        return RGBA(r, g, b, self.alpha)

    def with_alpha(self, alpha: Optional[float]) -> CanonicalColor:
        """Return a copy with a different alpha."""
        return replace(self, alpha=alpha)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d: dict[str, Any] = {
            "space": self.space.value,
            "components": list(self.components),
        }
        if self.alpha is not None:
            d["alpha"] = self.alpha
        return d

    @classmethod
    def from_dict(cls, data: dict) -> CanonicalColor:
        """Deserialize from dictionary."""
        return cls(
            space=ColorSpace.coerce(data["space"]),
            components=tuple(data["components"]),
            alpha=data.get("alpha"),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> CanonicalColor:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


def space_info(space: Union[ColorSpace, str]) -> SpaceInfo:
    """Look up metadata for a color space."""
    return SPACE_INFO[ColorSpace.coerce(space)]
