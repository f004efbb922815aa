# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Wide-gamut RGB spaces: Display P3, Rec. 2020, ProPhoto RGB, Adobe RGB (1998).

Each space is a GamutProfile: primaries (as an RGB → XYZ matrix), a
reference white, a transfer curve and a headroom factor. Conversions
reuse the sRGB pipeline of ``huekit.convert``:

    linear sRGB → XYZ (D65) [→ Bradford → D50] → target linear → encode

so no transfer curve or matrix is defined twice.

Gamut policy:
    extended=False  encoded values are clipped to [0, 1]
    extended=True   encoded values are multiplied by the profile's
                    headroom and left unclipped; such values are not
                    displayable without further gamut mapping
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huekit.convert import transfer
from huekit.convert.colorspace import (
    BRADFORD_D50_TO_D65,
    BRADFORD_D65_TO_D50,
    SRGB_TO_XYZ,
    XYZ_TO_SRGB,
)
from huekit.convert.transfer import TransferCurve
from huekit.errors import UnsupportedColorSpace
from huekit.schema.color import ColorSpace


@dataclass(frozen=True, eq=False)
class GamutProfile:
    """
    Definition of an RGB-encoded wide-gamut space.

    Attributes:
        space: ColorSpace member this profile implements
        to_xyz: Linear RGB → XYZ matrix relative to ``white``
        white: Reference white name ("D65" or "D50")
        curve: Transfer curve between linear and encoded values
        headroom: Multiplier applied in extended mode
        from_linear_srgb: Derived linear sRGB → linear target matrix
        to_linear_srgb: Derived inverse of ``from_linear_srgb``
    """
    space: ColorSpace
    to_xyz: NDArray[np.float64]
    white: str
    curve: TransferCurve
    headroom: float
    from_linear_srgb: NDArray[np.float64] = field(init=False, repr=False)
    to_linear_srgb: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.headroom < 1.0:
            raise ValueError(f"headroom must be >= 1, got {self.headroom}")

        srgb_to_xyz = SRGB_TO_XYZ
        xyz_to_srgb = XYZ_TO_SRGB
        if self.white == "D50":
            srgb_to_xyz = BRADFORD_D65_TO_D50 @ SRGB_TO_XYZ
            xyz_to_srgb = XYZ_TO_SRGB @ BRADFORD_D50_TO_D65
        elif self.white != "D65":
            raise ValueError(f"white must be D65 or D50, got {self.white!r}")

        object.__setattr__(self, "from_linear_srgb", np.linalg.inv(self.to_xyz) @ srgb_to_xyz)
        object.__setattr__(self, "to_linear_srgb", xyz_to_srgb @ self.to_xyz)

    def encode(self, linear_rgb: ArrayLike, extended: bool = False) -> NDArray[np.float64]:
        """Linear sRGB → encoded values in this space."""
        linear_rgb = np.asarray(linear_rgb, dtype=np.float64)
        linear = np.einsum('...j,ij->...i', linear_rgb, self.from_linear_srgb)
        encoded = self.curve.encode(linear)
        if extended:
            return encoded * self.headroom
        return np.clip(encoded, 0.0, 1.0)

    def decode(self, encoded: ArrayLike, extended: bool = False) -> NDArray[np.float64]:
        """Encoded values in this space → linear sRGB (unclipped)."""
        encoded = np.asarray(encoded, dtype=np.float64)
        if extended:
            encoded = encoded / self.headroom
        linear = self.curve.decode(encoded)
        return np.einsum('...j,ij->...i', linear, self.to_linear_srgb)


def _matrix(rows) -> NDArray[np.float64]:
    m = np.array(rows, dtype=np.float64)
    m.setflags(write=False)
    return m


# RGB → XYZ matrices as published in CSS Color Module Level 4
PROFILES = MappingProxyType({
    ColorSpace.DISPLAY_P3: GamutProfile(
        space=ColorSpace.DISPLAY_P3,
        to_xyz=_matrix([
            [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
            [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
            [0.0, 0.04511338185890264, 1.043944368900976],
        ]),
        white="D65",
        curve=transfer.DISPLAY_P3,
        headroom=1.1,
    ),
    ColorSpace.REC2020: GamutProfile(
        space=ColorSpace.REC2020,
        to_xyz=_matrix([
            [0.6369580483012914, 0.14461690358620832, 0.1688809751641721],
            [0.2627002120112671, 0.6779980715188708, 0.05930171646986196],
            [0.0, 0.028072693049087428, 1.060985057710791],
        ]),
        white="D65",
        curve=transfer.REC2020,
        headroom=1.2,
    ),
    ColorSpace.PROPHOTO_RGB: GamutProfile(
        space=ColorSpace.PROPHOTO_RGB,
        to_xyz=_matrix([
            [0.7977604896723027, 0.13518583717574031, 0.0313493495815248],
            [0.2880711282292934, 0.7118432178101014, 0.00008565396060525902],
            [0.0, 0.0, 0.8251046025104601],
        ]),
        white="D50",
        curve=transfer.PROPHOTO,
        headroom=1.3,
    ),
    ColorSpace.A98_RGB: GamutProfile(
        space=ColorSpace.A98_RGB,
        to_xyz=_matrix([
            [0.5766690429101305, 0.1855582379065463, 0.1882286462349947],
            [0.29734497525053605, 0.6273635662554661, 0.07529145849399788],
            [0.02703136138641234, 0.07068885253582723, 0.9913375368376388],
        ]),
        white="D65",
        curve=transfer.A98,
        headroom=1.15,
    ),
})


def get_profile(space: Union[ColorSpace, str]) -> GamutProfile:
    """
    Look up the profile for a wide-gamut space.

    Raises:
        UnsupportedColorSpace: if ``space`` is not a wide-gamut space.
    """
    space = ColorSpace.coerce(space)
    try:
        return PROFILES[space]
    except KeyError:
        raise UnsupportedColorSpace(space.value, "not a wide-gamut space") from None


def to_wide_gamut(
    linear_rgb: ArrayLike,
    target: Union[ColorSpace, str],
    extended: bool = False,
) -> NDArray[np.float64]:
    """
    Convert linear sRGB to encoded values in a wide-gamut space.

    Args:
        linear_rgb: Array of shape (..., 3) with linear sRGB values
        target: Display P3, Rec. 2020, ProPhoto RGB or Adobe RGB
        extended: Scale by the profile headroom instead of clipping

    Returns:
        Array of shape (..., 3) with encoded target values
    """
    return get_profile(target).encode(linear_rgb, extended)


def from_wide_gamut(
    encoded: ArrayLike,
    source: Union[ColorSpace, str],
    extended: bool = False,
) -> NDArray[np.float64]:
    """
    Inverse of ``to_wide_gamut``: encoded wide-gamut values → linear sRGB.

    The result is unclipped; wide-gamut colors outside sRGB come back with
    components below 0 or above 1.
    """
    return get_profile(source).decode(encoded, extended)


__all__ = [
    "GamutProfile",
    "PROFILES",
    "get_profile",
    "to_wide_gamut",
    "from_wide_gamut",
]
