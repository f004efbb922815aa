# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Half-away-from-zero rounding.

Python's ``round`` rounds half to even (``round(0.5) == 0``), which makes
``rgb(127.5 ...)`` and ``50.05%`` land on surprising values. Every public
number huekit produces goes through ``round_half_away`` instead.

The scalar version rounds on the shortest decimal repr of the float, so
``round_half_away(1.005, 2) == 1.01`` even though the binary value of
1.005 is slightly below it.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np
from numpy.typing import ArrayLike, NDArray


def round_half_away(value: float, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` decimals, ties away from zero."""
    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the requested decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    # + 0.0 turns -0.0 into 0.0
    return float(rounded) + 0.0


def round_half_away_array(values: ArrayLike, digits: int = 0) -> NDArray[np.float64]:
    """Vectorised variant of ``round_half_away`` (binary, not decimal, ties)."""
    values = np.asarray(values, dtype=np.float64)
    factor = 10.0 ** digits
    return np.sign(values) * np.floor(np.abs(values) * factor + 0.5) / factor + 0.0
