# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Conversion core for Tinct.

Unit normalization, color space maths, the named-color table and the
permissive string parser. Everything here is a pure function of its input.
"""

from tinct.convert.colorspace import (
    hsl_to_rgb,
    hsv_to_rgb,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgba_to_argb_hex,
    rgba_to_hex,
)
from tinct.convert.names import HEX_NAMES, NAMES
from tinct.convert.parse import input_to_rgb, string_input_to_object
from tinct.convert.units import bound01, bound_alpha, clamp01, convert_to_percentage

__all__ = [
    # Units
    "bound01",
    "bound_alpha",
    "clamp01",
    "convert_to_percentage",
    # Color spaces
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hex",
    "rgba_to_hex",
    "rgba_to_argb_hex",
    "relative_luminance",
    # Named colors
    "NAMES",
    "HEX_NAMES",
    # Parsing
    "string_input_to_object",
    "input_to_rgb",
]
