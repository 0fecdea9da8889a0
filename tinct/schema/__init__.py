# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

Channel records are immutable (frozen dataclasses). The canonical mutable
color type lives in ``tinct.color``.
"""

from tinct.schema.color_types import (
    ALPHA_INCAPABLE_FORMATS,
    INVALID,
    WCAG2_THRESHOLDS,
    ChannelRecord,
    ColorFormat,
    HSLColor,
    HSVColor,
    ParsedColor,
    PercentageRGBColor,
    ResolvedColor,
    RGBColor,
    WCAG2Options,
)

__all__ = [
    # Formats
    "ColorFormat",
    "ALPHA_INCAPABLE_FORMATS",
    # Parser records
    "ParsedColor",
    "ResolvedColor",
    "INVALID",
    # Channel records
    "RGBColor",
    "PercentageRGBColor",
    "HSLColor",
    "HSVColor",
    "ChannelRecord",
    # Readability options
    "WCAG2Options",
    "WCAG2_THRESHOLDS",
]
