# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
A color is always a (space, components, alpha) triple; conversions
produce new values and never mutate their input.
"""

from huekit.schema.color import (
    PRECISION_DEFAULTS,
    RGBA,
    SPACE_INFO,
    CanonicalColor,
    ColorSpace,
    SpaceInfo,
    space_info,
)

__all__ = [
    # Core types
    "ColorSpace",
    "CanonicalColor",
    "RGBA",
    # Metadata
    "SpaceInfo",
    "SPACE_INFO",
    "space_info",
    "PRECISION_DEFAULTS",
]
