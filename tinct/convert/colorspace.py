# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion graph: raw tokens → unit RGB ↔ HSL / HSV, RGB(A) → hex

Scalar conversions work on single colors:
- Inputs are raw tokens (numbers or percentage strings), normalized through
  ``bound01`` before any maths
- HSL / HSV hue is returned in turns [0, 1); callers multiply by 360
- RGB output is on the 0-255 scale, unrounded

Luminance helpers are vectorized NumPy and accept arrays of shape (..., 3).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from tinct.convert.units import bound01, round_half_up


# =============================================================================
# RGB ↔ RGB
# =============================================================================


def rgb_to_rgb(r, g, b) -> tuple[float, float, float]:
    """
    Normalize raw RGB tokens onto the 0-255 scale.

    Accepts numbers in [0, 255] or percentage strings ("50%").
    """
    return (
        bound01(r, 255) * 255,
        bound01(g, 255) * 255,
        bound01(b, 255) * 255,
    )


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def _hue_turns(r: float, g: float, b: float, max_c: float, d: float) -> float:
    """Hue in turns from whichever channel is the maximum."""
    if max_c == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6


def rgb_to_hsl(r, g, b) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: Channels on the 0-255 scale (or percentage strings)

    Returns:
        (h, s, l) with h in turns [0, 1) and s, l in [0, 1]
    """
    r = bound01(r, 255)
    g = bound01(g, 255)
    b = bound01(b, 255)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, l  # achromatic

    d = max_c - min_c
    s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
    return _hue_turns(r, g, b, max_c, d), s, l


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s, l) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees (or percentage string)
        s, l: Saturation / lightness as numbers on 0-100 or percentage strings

    Returns:
        (r, g, b) on the 0-255 scale
    """
    h = bound01(h, 360)
    s = bound01(s, 100)
    l = bound01(l, 100)

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return r * 255, g * 255, b * 255


# =============================================================================
# RGB ↔ HSV
# =============================================================================


def rgb_to_hsv(r, g, b) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Returns:
        (h, s, v) with h in turns [0, 1) and s, v in [0, 1]
    """
    r = bound01(r, 255)
    g = bound01(g, 255)
    b = bound01(b, 255)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    v = max_c
    d = max_c - min_c
    s = 0.0 if max_c == 0 else d / max_c

    if max_c == min_c:
        return 0.0, s, v  # achromatic

    return _hue_turns(r, g, b, max_c, d), s, v


def hsv_to_rgb(h, s, v) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Sector-based: six candidate triples indexed by floor(h * 6) mod 6,
    interpolated by the fractional remainder.

    Returns:
        (r, g, b) on the 0-255 scale
    """
    h = bound01(h, 360) * 6
    s = bound01(s, 100)
    v = bound01(v, 100)

    if math.isnan(h):
        return math.nan, math.nan, math.nan

    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    sector = i % 6

    r = (v, q, p, p, t, v)[sector]
    g = (t, v, v, q, p, p)[sector]
    b = (p, p, t, v, v, q)[sector]

    return r * 255, g * 255, b * 255


# =============================================================================
# RGB(A) → Hex
# =============================================================================


def _pad2(c: str) -> str:
    return c if len(c) > 1 else "0" + c


def _channel_hex(c: float) -> str:
    return _pad2(format(round_half_up(c), "x"))


def decimal_to_hex(d: float) -> str:
    """Encode alpha [0, 1] as a two-digit hex byte."""
    return _pad2(format(round_half_up(float(d) * 255), "x"))


def hex_to_decimal(h: str) -> float:
    """Decode a hex byte into alpha [0, 1]."""
    return int(h, 16) / 255


def _shorthand(pairs: list[str]) -> str | None:
    """Collapse to one nibble per channel when every pair repeats its digit."""
    if all(pair[0] == pair[1] for pair in pairs):
        return "".join(pair[0] for pair in pairs)
    return None


def rgb_to_hex(r: float, g: float, b: float, allow_3_char: bool = False) -> str:
    """
    Convert RGB to a hex string without "#".

    Args:
        r, g, b: Channels on the 0-255 scale
        allow_3_char: Emit "f00" instead of "ff0000" when possible

    Returns:
        6-digit (or 3-digit) lowercase hex string
    """
    pairs = [_channel_hex(r), _channel_hex(g), _channel_hex(b)]
    if allow_3_char:
        short = _shorthand(pairs)
        if short is not None:
            return short
    return "".join(pairs)


def rgba_to_hex(
    r: float, g: float, b: float, a: float, allow_4_char: bool = False
) -> str:
    """Convert RGBA to an 8-digit (or 4-digit) hex string without "#"."""
    pairs = [_channel_hex(r), _channel_hex(g), _channel_hex(b), decimal_to_hex(a)]
    if allow_4_char:
        short = _shorthand(pairs)
        if short is not None:
            return short
    return "".join(pairs)


def rgba_to_argb_hex(r: float, g: float, b: float, a: float) -> str:
    """Convert RGBA to alpha-first "AARRGGBB" hex (legacy gradient filters)."""
    return "".join([decimal_to_hex(a), _channel_hex(r), _channel_hex(g), _channel_hex(b)])


# =============================================================================
# Relative Luminance (WCAG2)
# =============================================================================

# WCAG2 transfer threshold (differs slightly from the sRGB standard's 0.04045)
WCAG_LINEAR_THRESHOLD = 0.03928


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Gamma-decode sRGB values [0,1] to linear light.

    Piecewise curve:
    - For values <= 0.03928: value / 12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= WCAG_LINEAR_THRESHOLD,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def relative_luminance(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Relative luminance of 0-255 RGB colors.

    Args:
        rgb: Array of shape (..., 3) with channels on the 0-255 scale

    Returns:
        Array of shape (...) with luminance in [0, 1]
    """
    linear = srgb_to_linear(np.asarray(rgb, dtype=np.float64) / 255)
    return (
        0.2126 * linear[..., 0]
        + 0.7152 * linear[..., 1]
        + 0.0722 * linear[..., 2]
    )
