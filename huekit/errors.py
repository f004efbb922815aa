# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Error taxonomy for huekit.

Every error derives from ``ColorError``, which is itself a ``ValueError``,
so callers that already guard colour input with ``except ValueError``
keep working.

    ColorError
    ├── InvalidColorSyntax      string matches no known grammar
    ├── InvalidComponentRange   numeric value outside a space's domain
    ├── UnsupportedColorSpace   unknown space or wrong component count
    └── NoAccessibleColorFound  bounded contrast search exhausted
"""

from __future__ import annotations

from typing import Optional


class ColorError(ValueError):
    """Base class for all huekit errors."""


class InvalidColorSyntax(ColorError):
    """The input string does not match any supported color syntax."""

    def __init__(self, text: object, reason: Optional[str] = None) -> None:
        self.text = text
        self.reason = reason
        message = f"Invalid color syntax: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidComponentRange(ColorError):
    """A numeric component is NaN, infinite, or outside its domain."""

    def __init__(
        self,
        component: str,
        value: object,
        bounds: Optional[tuple[Optional[float], Optional[float]]] = None,
    ) -> None:
        self.component = component
        self.value = value
        self.bounds = bounds
        message = f"{component} out of range: {value!r}"
        if bounds is not None:
            lo, hi = bounds
            lo_s = "-inf" if lo is None else f"{lo:g}"
            hi_s = "inf" if hi is None else f"{hi:g}"
            message = f"{message} (expected {lo_s}..{hi_s})"
        super().__init__(message)


class UnsupportedColorSpace(ColorError):
    """A color space identifier is unknown or its components are malformed."""

    def __init__(self, space: object, reason: Optional[str] = None) -> None:
        self.space = space
        message = f"Unsupported color space: {space!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoAccessibleColorFound(ColorError):
    """No color reaching the requested contrast ratio exists in the search range."""

    def __init__(self, target_ratio: float, direction: str, best_ratio: float) -> None:
        self.target_ratio = target_ratio
        self.direction = direction
        self.best_ratio = best_ratio
        super().__init__(
            f"No {direction} color reaches contrast {target_ratio:g}:1 "
            f"(best found {best_ratio:.2f}:1)"
        )
