# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
WCAG 2.x accessibility metrics.

    relative_luminance   BT.709 weighted linear sRGB, 0 (black) .. 1 (white)
    contrast_ratio       (L_light + 0.05) / (L_dark + 0.05), 1 .. 21
    wcag_level           FAIL / AA_LARGE / AA / AAA_LARGE / AAA
    find_accessible_color
                         bounded lightness search for a color reaching a
                         target contrast against a background

Colors may be given as CanonicalColor (any space) or as 0-255 ``(r, g, b)``
sequences; both are clipped to the sRGB gamut first.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

import numpy as np

from huekit.convert import cylindrical as cyl
from huekit.convert.colorspace import srgb_to_linear
from huekit.convert.engine import to_srgb
from huekit.convert.rounding import round_half_away, round_half_away_array
from huekit.errors import InvalidComponentRange, NoAccessibleColorFound
from huekit.schema.color import CanonicalColor

logger = logging.getLogger(__name__)

ColorLike = Union[CanonicalColor, Sequence[float]]

# ITU-R BT.709 luma coefficients
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)
_WEIGHT_SUM = math.fsum(LUMINANCE_WEIGHTS)

MIN_CONTRAST = 1.0
MAX_CONTRAST = 21.0


# =============================================================================
# Luminance and contrast
# =============================================================================


def _srgb(color: ColorLike) -> np.ndarray:
    if isinstance(color, CanonicalColor):
        srgb = to_srgb(color)
    else:
        values = [float(v) for v in color]
        if len(values) not in (3, 4):
            raise InvalidComponentRange("rgb", color)
        srgb = np.array(values[:3]) / 255.0
    if not np.all(np.isfinite(srgb)):
        raise InvalidComponentRange("rgb", color)
    return np.clip(srgb, 0.0, 1.0)


def relative_luminance(color: ColorLike) -> float:
    """
    WCAG relative luminance.

    The weighted sum is normalised by the sum of the weights so that
    white is exactly 1.0 and black exactly 0.0.
    """
    return _luminance(_srgb(color))


def _luminance(srgb: np.ndarray) -> float:
    linear = srgb_to_linear(srgb)
    total = math.fsum(w * float(c) for w, c in zip(LUMINANCE_WEIGHTS, linear))
    return total / _WEIGHT_SUM


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    """
    WCAG contrast ratio between two colors, symmetric and in [1, 21].

    Example:
        contrast_ratio((0, 0, 0), (255, 255, 255))   # 21.0
    """
    la = relative_luminance(a)
    lb = relative_luminance(b)
    return _ratio(la, lb)


def _ratio(la: float, lb: float) -> float:
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


# =============================================================================
# WCAG levels
# =============================================================================


class WcagLevel(Enum):
    """Highest WCAG conformance tier a contrast ratio reaches."""
    FAIL = "Fail"
    AA_LARGE = "AA Large"
    AA = "AA"
    AAA_LARGE = "AAA Large"
    AAA = "AAA"


# Minimum ratios per tier
AA_LARGE_RATIO = 3.0
AA_RATIO = 4.5
AAA_LARGE_RATIO = 4.5
AAA_RATIO = 7.0


def wcag_level(ratio: float, large_text: bool = False) -> WcagLevel:
    """
    Classify a contrast ratio.

    Normal text: AAA >= 7, AA >= 4.5, AA_LARGE >= 3 (passes only for
    large text), else FAIL. Large text: AAA_LARGE >= 4.5, AA_LARGE >= 3,
    else FAIL.
    """
    if large_text:
        if ratio >= AAA_LARGE_RATIO:
            return WcagLevel.AAA_LARGE
        if ratio >= AA_LARGE_RATIO:
            return WcagLevel.AA_LARGE
        return WcagLevel.FAIL

    if ratio >= AAA_RATIO:
        return WcagLevel.AAA
    if ratio >= AA_RATIO:
        return WcagLevel.AA
    if ratio >= AA_LARGE_RATIO:
        return WcagLevel.AA_LARGE
    return WcagLevel.FAIL


@dataclass(frozen=True, slots=True)
class ContrastReport:
    """
    Contrast between two colors with pass/fail per WCAG criterion.

    Attributes:
        ratio: Contrast ratio, 1..21
        level: Tier for normal text
        large_level: Tier for large text (>= 18pt, or 14pt bold)
    """
    ratio: float
    level: WcagLevel
    large_level: WcagLevel

    @property
    def passes_aa(self) -> bool:
        return self.ratio >= AA_RATIO

    @property
    def passes_aa_large(self) -> bool:
        return self.ratio >= AA_LARGE_RATIO

    @property
    def passes_aaa(self) -> bool:
        return self.ratio >= AAA_RATIO

    @property
    def passes_aaa_large(self) -> bool:
        return self.ratio >= AAA_LARGE_RATIO

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ratio": round_half_away(self.ratio, 2),
            "level": self.level.value,
            "large_level": self.large_level.value,
            "levels": {
                "AA-Large": self.passes_aa_large,
                "AA": self.passes_aa,
                "AAA-Large": self.passes_aaa_large,
                "AAA": self.passes_aaa,
            },
        }


def contrast_report(a: ColorLike, b: ColorLike) -> ContrastReport:
    """Contrast ratio of two colors plus their WCAG classification."""
    ratio = contrast_ratio(a, b)
    return ContrastReport(
        ratio=ratio,
        level=wcag_level(ratio),
        large_level=wcag_level(ratio, large_text=True),
    )


# =============================================================================
# Accessible color search
# =============================================================================


class Direction(Enum):
    """Which side of the background the search moves toward."""
    LIGHTER = "lighter"
    DARKER = "darker"


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """
    Configuration for ``find_accessible_color``.

    Attributes:
        max_iterations: Number of lightness candidates evaluated; the last
            one is always the extreme (white or black)
    """
    max_iterations: int = 50

    def __post_init__(self) -> None:
        if self.max_iterations < 2:
            raise ValueError(f"max_iterations must be >= 2, got {self.max_iterations}")


def find_accessible_color(
    background: ColorLike,
    target_ratio: float,
    direction: Union[Direction, str] = Direction.DARKER,
    config: SearchConfig = SearchConfig(),
) -> CanonicalColor:
    """
    Find a color that reaches ``target_ratio`` against ``background``.

    The candidate keeps the background's HSL hue and saturation. The
    target luminance is solved from the ratio and mapped to a starting
    lightness with ``lightness ≈ sqrt(luminance) * 100``; lightness then
    moves monotonically toward 100 (lighter) or 0 (darker), evaluating
    the actual rounded 0-255 color at each step.

    Args:
        background: Background color
        target_ratio: Required contrast, 1..21
        direction: Search for a lighter or a darker foreground
        config: Search bounds

    Returns:
        The first candidate meeting the target, as an RGB CanonicalColor

    Raises:
        InvalidComponentRange: target_ratio is not within 1..21, or an
            unknown direction.
        NoAccessibleColorFound: the ratio cannot be reached in
            ``direction`` (e.g. 7:1 lighter than light gray).
    """
    if not math.isfinite(target_ratio) or not MIN_CONTRAST <= target_ratio <= MAX_CONTRAST:
        raise InvalidComponentRange("target_ratio", target_ratio, (MIN_CONTRAST, MAX_CONTRAST))
    try:
        direction = Direction(direction)
    except ValueError:
        raise InvalidComponentRange("direction", direction) from None
    lighter = direction is Direction.LIGHTER

    bg_srgb = _srgb(background)
    bg_lum = _luminance(bg_srgb)
    hue, sat, bg_light = cyl.srgb_to_hsl(bg_srgb)

    extreme_lum = 1.0 if lighter else 0.0
    if lighter:
        target_lum = target_ratio * (bg_lum + 0.05) - 0.05
        reachable = target_lum <= 1.0 + 1e-12
    else:
        target_lum = (bg_lum + 0.05) / target_ratio - 0.05
        reachable = target_lum >= -1e-12
    if not reachable:
        raise NoAccessibleColorFound(target_ratio, direction.value, _ratio(bg_lum, extreme_lum))

    start = math.sqrt(min(1.0, max(0.0, target_lum)))
    # Never start on the wrong side of the background
    start = max(start, bg_light) if lighter else min(start, bg_light)
    end = 1.0 if lighter else 0.0
    step = (end - start) / (config.max_iterations - 1)

    best = 1.0
    for i in range(config.max_iterations):
        light = end if i == config.max_iterations - 1 else start + step * i
        srgb = cyl.hsl_to_srgb(np.array([hue, sat, light]))
        rgb = [int(v) for v in round_half_away_array(np.clip(srgb, 0.0, 1.0) * 255.0)]
        ratio = _ratio(relative_luminance(rgb), bg_lum)
        if ratio >= target_ratio:
            return CanonicalColor.from_rgb255(*rgb)
        best = max(best, ratio)

    logger.debug(
        "accessible search exhausted after %d steps (target %.2f, best %.2f)",
        config.max_iterations, target_ratio, best,
    )
    raise NoAccessibleColorFound(target_ratio, direction.value, best)


__all__ = [
    "relative_luminance",
    "contrast_ratio",
    "WcagLevel",
    "wcag_level",
    "ContrastReport",
    "contrast_report",
    "Direction",
    "SearchConfig",
    "find_accessible_color",
    "LUMINANCE_WEIGHTS",
]
