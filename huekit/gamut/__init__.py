# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Wide-gamut RGB spaces and HDR transfer functions.

Wide-gamut profiles reuse the sRGB matrices and transfer curves from
``huekit.convert``; HDR encodings (PQ, HLG) are pure functions of
``(luminance, scale_nits)``.
"""

from huekit.gamut.hdr import (
    TransferFunction,
    apply_transfer,
    decode_transfer,
)
from huekit.gamut.wide import (
    PROFILES,
    GamutProfile,
    from_wide_gamut,
    get_profile,
    to_wide_gamut,
)

__all__ = [
    # Wide gamut
    "GamutProfile",
    "PROFILES",
    "get_profile",
    "to_wide_gamut",
    "from_wide_gamut",
    # HDR
    "TransferFunction",
    "apply_transfer",
    "decode_transfer",
]
