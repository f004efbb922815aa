# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
String → CanonicalColor parsing.
"""

from huekit.parse.named import NAMED_COLORS
from huekit.parse.parser import (
    get_color_format,
    is_valid_css_color,
    parse,
    parse_multiple,
    parse_to_rgb,
    supported_formats,
    try_parse,
)

__all__ = [
    "parse",
    "try_parse",
    "parse_to_rgb",
    "is_valid_css_color",
    "get_color_format",
    "parse_multiple",
    "supported_formats",
    "NAMED_COLORS",
]
