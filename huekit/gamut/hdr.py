# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
HDR transfer functions (ITU-R BT.2100).

    PQ   SMPTE ST 2084 perceptual quantizer, absolute, 0..10 000 nits
    HLG  Hybrid Log-Gamma, relative, 100-nit reference white = signal 1.0

Input is scene luminance relative to a reference white; ``scale_nits`` is
how many nits that reference white represents, so the absolute light is
``luminance * scale_nits``. There is no implicit global white level.

Signals are clipped to [0, 1].
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huekit.errors import InvalidComponentRange, UnsupportedColorSpace


class TransferFunction(Enum):
    """HDR (and plain linear) signal encodings, named as in CSS."""
    PQ = "rec2100-pq"
    HLG = "rec2100-hlg"
    LINEAR = "linear"


# SMPTE ST 2084 constants
PQ_MAX_NITS = 10000.0
_M1 = 2610.0 / 16384.0
_M2 = 2523.0 / 4096.0 * 128.0
_C1 = 3424.0 / 4096.0
_C2 = 2413.0 / 4096.0 * 32.0
_C3 = 2392.0 / 4096.0 * 32.0

# BT.2100 HLG constants
HLG_REFERENCE_NITS = 100.0
_HLG_A = 0.17883277
_HLG_B = 1.0 - 4.0 * _HLG_A
_HLG_C = 0.5 - _HLG_A * math.log(4.0 * _HLG_A)


# =============================================================================
# Kernels (normalised signal domain)
# =============================================================================


def pq_encode(y: ArrayLike) -> NDArray[np.float64]:
    """Normalised linear light (1.0 = 10 000 nits) → PQ signal."""
    y = np.clip(np.asarray(y, dtype=np.float64), 0.0, 1.0)
    ym1 = np.power(y, _M1)
    return np.power((_C1 + _C2 * ym1) / (1.0 + _C3 * ym1), _M2)


def pq_decode(signal: ArrayLike) -> NDArray[np.float64]:
    """PQ signal → normalised linear light (1.0 = 10 000 nits)."""
    signal = np.clip(np.asarray(signal, dtype=np.float64), 0.0, 1.0)
    p = np.power(signal, 1.0 / _M2)
    return np.power(np.maximum(p - _C1, 0.0) / (_C2 - _C3 * p), 1.0 / _M1)


def hlg_encode(e: ArrayLike) -> NDArray[np.float64]:
    """Normalised scene light E in [0, 1] → HLG signal (OETF)."""
    e = np.clip(np.asarray(e, dtype=np.float64), 0.0, 1.0)
    # Keep the log argument positive on the branch np.where discards
    log_arg = np.maximum(12.0 * e - _HLG_B, 1e-12)
    return np.where(
        e <= 1.0 / 12.0,
        np.sqrt(3.0 * e),
        _HLG_A * np.log(log_arg) + _HLG_C,
    )


def hlg_decode(signal: ArrayLike) -> NDArray[np.float64]:
    """HLG signal → normalised scene light E (inverse OETF)."""
    signal = np.clip(np.asarray(signal, dtype=np.float64), 0.0, 1.0)
    return np.where(
        signal <= 0.5,
        signal ** 2 / 3.0,
        (np.exp((signal - _HLG_C) / _HLG_A) + _HLG_B) / 12.0,
    )


# =============================================================================
# Public API
# =============================================================================


def _check(value: ArrayLike, scale_nits: float, name: str) -> NDArray[np.float64]:
    arr = np.asarray(value, dtype=np.float64)
    if not np.all(np.isfinite(arr)):
        raise InvalidComponentRange(name, value)
    if not math.isfinite(scale_nits) or scale_nits <= 0.0:
        raise InvalidComponentRange("scale_nits", scale_nits, (0.0, None))
    return arr


def _function(function: Union[TransferFunction, str]) -> TransferFunction:
    try:
        return TransferFunction(function)
    except ValueError:
        raise UnsupportedColorSpace(function, "unknown transfer function") from None


def _scalar_or_array(result: NDArray[np.float64]) -> Union[float, NDArray[np.float64]]:
    return float(result) if result.ndim == 0 else result


def apply_transfer(
    luminance: ArrayLike,
    scale_nits: float = 100.0,
    function: TransferFunction = TransferFunction.PQ,
) -> Union[float, NDArray[np.float64]]:
    """
    Encode relative scene luminance as an HDR signal.

    Args:
        luminance: Luminance relative to reference white (1.0 = white)
        scale_nits: Nits represented by a luminance of 1.0
        function: PQ, HLG or LINEAR

    Returns:
        Signal in [0, 1]; a float for scalar input

    Raises:
        InvalidComponentRange: non-finite luminance or scale_nits <= 0.
        UnsupportedColorSpace: unknown transfer function.

    Example:
        apply_transfer(1.0, 100, TransferFunction.PQ)   # ≈ 0.508
        apply_transfer(1.0, 100, TransferFunction.HLG)  # 1.0
    """
    lum = _check(luminance, scale_nits, "luminance")
    nits = lum * scale_nits
    function = _function(function)

    if function is TransferFunction.PQ:
        signal = pq_encode(nits / PQ_MAX_NITS)
    elif function is TransferFunction.HLG:
        signal = hlg_encode(nits / HLG_REFERENCE_NITS)
    else:
        signal = np.clip(nits / HLG_REFERENCE_NITS, 0.0, 1.0)
    return _scalar_or_array(signal)


def decode_transfer(
    signal: ArrayLike,
    scale_nits: float = 100.0,
    function: TransferFunction = TransferFunction.PQ,
) -> Union[float, NDArray[np.float64]]:
    """Inverse of ``apply_transfer`` for signals that were not clipped."""
    sig = _check(signal, scale_nits, "signal")
    function = _function(function)

    if function is TransferFunction.PQ:
        nits = pq_decode(sig) * PQ_MAX_NITS
    elif function is TransferFunction.HLG:
        nits = hlg_decode(sig) * HLG_REFERENCE_NITS
    else:
        nits = np.clip(sig, 0.0, 1.0) * HLG_REFERENCE_NITS
    return _scalar_or_array(nits / scale_nits)


__all__ = [
    "TransferFunction",
    "apply_transfer",
    "decode_transfer",
    "pq_encode",
    "pq_decode",
    "hlg_encode",
    "hlg_decode",
    "PQ_MAX_NITS",
    "HLG_REFERENCE_NITS",
]
