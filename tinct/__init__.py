# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Color parsing, conversion and manipulation.

Parses CSS-like color strings and structured channel records into a single
RGBA value, converts between RGB, HSL, HSV, hex and named colors, derives
related colors and checks WCAG2 readability.

Quick start::

    from tinct import Color, readability

    c = Color("hsl(210, 60%, 40%)")
    c.to_hex_string()          # "#2966a3"
    c.lighten(20).to_string()  # in place, returns c
    c.triad()                  # three Colors 120 degrees apart
    readability("#fff", c)     # contrast ratio
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.color import Color, equals, from_ratio, mix, random
from tinct.convert.names import HEX_NAMES, NAMES
from tinct.ops import (
    contrast_ratios,
    is_readable,
    most_readable,
    readability,
)
from tinct.schema import (
    ColorFormat,
    HSLColor,
    HSVColor,
    PercentageRGBColor,
    RGBColor,
    WCAG2Options,
)

__all__ = [
    # Core API
    "Color",
    "from_ratio",
    "equals",
    "random",
    "mix",
    # Readability
    "readability",
    "is_readable",
    "most_readable",
    "contrast_ratios",
    # Named colors
    "NAMES",
    "HEX_NAMES",
    # Types (commonly needed)
    "ColorFormat",
    "RGBColor",
    "PercentageRGBColor",
    "HSLColor",
    "HSVColor",
    "WCAG2Options",
    # Version
    "__version__",
]
