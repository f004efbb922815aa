# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum

from huekit.convert.rounding import round_half_away


class CssSyntax(Enum):
    """CSS function syntax for rgb() and hsl() output."""

    MODERN = "modern"  # rgb(255 0 0 / 0.5)
    LEGACY = "legacy"  # rgba(255, 0, 0, 0.5)


def format_number(value: float, precision: int) -> str:
    """Round half away from zero and drop trailing zeros; never prints -0."""
    rounded = round_half_away(value, precision)
    if precision <= 0:
        return str(int(rounded))
    text = f"{rounded:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
