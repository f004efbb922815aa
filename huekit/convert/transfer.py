# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Transfer curves (a.k.a. "gamma") for RGB-encoded spaces.

Each RGB space pairs a set of primaries with a curve that maps linear light
to encoded values. All the curves used here share one shape:

    encode(v) = slope * v                          if v <= linear_cutoff
              = scale * v ** (1/gamma) - (scale-1) otherwise

Pure power curves (ProPhoto, Adobe RGB) have no linear segment.
Curves are odd-extended (sign preserving) so out-of-gamut negative
values survive a decode/encode round trip instead of turning into NaN.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True, slots=True)
class TransferCurve:
    """
    Piecewise power curve with an optional linear toe.

    Attributes:
        gamma: Exponent used on decode (encode uses 1/gamma)
        scale: Multiplier of the power segment (1.0 for pure power)
        slope: Slope of the linear segment (0.0 for pure power)
        linear_cutoff: Linear-light value where the segments meet
        encoded_cutoff: Encoded value where the segments meet
        strict_cutoff: Use ``<`` instead of ``<=`` at the boundary
    """
    gamma: float
    scale: float = 1.0
    slope: float = 0.0
    linear_cutoff: float = 0.0
    encoded_cutoff: float = 0.0
    strict_cutoff: bool = False

    def encode(self, linear: ArrayLike) -> NDArray[np.float64]:
        """Linear light → encoded values."""
        linear = np.asarray(linear, dtype=np.float64)
        mag = np.abs(linear)
        power = self.scale * np.power(mag, 1.0 / self.gamma) - (self.scale - 1.0)
        if self.slope:
            toe = mag < self.linear_cutoff if self.strict_cutoff else mag <= self.linear_cutoff
            power = np.where(toe, mag * self.slope, power)
        return np.copysign(power, linear)

    def decode(self, encoded: ArrayLike) -> NDArray[np.float64]:
        """Encoded values → linear light."""
        encoded = np.asarray(encoded, dtype=np.float64)
        mag = np.abs(encoded)
        power = np.power((mag + (self.scale - 1.0)) / self.scale, self.gamma)
        if self.slope:
            toe = mag < self.encoded_cutoff if self.strict_cutoff else mag <= self.encoded_cutoff
            power = np.where(toe, mag / self.slope, power)
        return np.copysign(power, encoded)


# IEC 61966-2-1
SRGB = TransferCurve(
    gamma=2.4,
    scale=1.055,
    slope=12.92,
    linear_cutoff=0.0031308,
    encoded_cutoff=0.04045,
)

# ITU-R BT.2020
_REC2020_ALPHA = 1.09929682680944
_REC2020_BETA = 0.018053968510807

REC2020 = TransferCurve(
    gamma=1.0 / 0.45,
    scale=_REC2020_ALPHA,
    slope=4.5,
    linear_cutoff=_REC2020_BETA,
    encoded_cutoff=4.5 * _REC2020_BETA,
    strict_cutoff=True,
)

# ROMM RGB uses a linear toe below 1/512 on encode; at 8/16-bit depths the
# pure power form is indistinguishable and keeps the curve invertible.
PROPHOTO = TransferCurve(gamma=1.8)

# Adobe RGB (1998), rounded to 2.2 (the exact value is 563/256)
A98 = TransferCurve(gamma=2.2)

# Display P3 shares the sRGB curve
DISPLAY_P3 = SRGB


__all__ = [
    "TransferCurve",
    "SRGB",
    "DISPLAY_P3",
    "REC2020",
    "PROPHOTO",
    "A98",
]
