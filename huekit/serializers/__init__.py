# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Serializers for CanonicalColor output.

CSS strings round-trip through ``huekit.parse``; structured output
(dict / JSON) lives on CanonicalColor itself.
"""

from huekit.serializers.base import CssSyntax, format_number
from huekit.serializers.css import format_css, to_css, to_hex

__all__ = [
    "CssSyntax",
    "format_number",
    "to_css",
    "to_hex",
    "format_css",
]
