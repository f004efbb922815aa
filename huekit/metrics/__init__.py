# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Perceptual metrics: WCAG luminance/contrast and color difference.
"""

from huekit.metrics.difference import delta_e_76, delta_e_ok, delta_e_oklch_batch
from huekit.metrics.wcag import (
    ContrastReport,
    Direction,
    SearchConfig,
    WcagLevel,
    contrast_ratio,
    contrast_report,
    find_accessible_color,
    relative_luminance,
    wcag_level,
)

__all__ = [
    # WCAG
    "relative_luminance",
    "contrast_ratio",
    "WcagLevel",
    "wcag_level",
    "ContrastReport",
    "contrast_report",
    "Direction",
    "SearchConfig",
    "find_accessible_color",
    # Difference
    "delta_e_ok",
    "delta_e_76",
    "delta_e_oklch_batch",
]
