# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Operators on Color values.

1. Manipulation -- lighten, darken, brighten, saturate, desaturate,
   greyscale, spin (each returns a new Color)
2. Combination  -- complement, analogous, monochromatic, polyad, triad,
   tetrad, splitcomplement (each returns related Colors)
3. Readability  -- WCAG2 contrast ratio, pass/fail and best-candidate search
"""

from tinct.ops.combine import (
    analogous,
    complement,
    monochromatic,
    polyad,
    splitcomplement,
    tetrad,
    triad,
)
from tinct.ops.modify import (
    brighten,
    darken,
    desaturate,
    greyscale,
    lighten,
    saturate,
    spin,
)
from tinct.ops.readability import (
    contrast_ratios,
    is_readable,
    most_readable,
    readability,
)

__all__ = [
    # Manipulation
    "lighten",
    "darken",
    "brighten",
    "saturate",
    "desaturate",
    "greyscale",
    "spin",
    # Combination
    "complement",
    "analogous",
    "monochromatic",
    "polyad",
    "triad",
    "tetrad",
    "splitcomplement",
    # Readability
    "readability",
    "is_readable",
    "most_readable",
    "contrast_ratios",
]
