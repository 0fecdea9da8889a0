# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Manipulation operators.

Each operator reads a color, adjusts one component and returns a new Color;
the input is never modified. ``Color.lighten`` and friends wrap these and
write the result back into the receiver.

- lighten / darken:       HSL lightness ± amount%
- saturate / desaturate:  HSL saturation ± amount%
- greyscale:              desaturate by 100
- brighten:               RGB channels pushed by round(255 * amount%)
- spin:                   hue rotated by amount degrees
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from tinct.color import Color
from tinct.convert.units import clamp01, round_half_up


DEFAULT_AMOUNT = 10


def _amount(amount: Optional[float]) -> float:
    return DEFAULT_AMOUNT if amount is None else amount


def lighten(color: Any, amount: Optional[float] = None) -> Color:
    """Raise HSL lightness by ``amount`` percent (default 10)."""
    hsl = Color(color).to_hsl()
    return Color(replace(hsl, l=clamp01(hsl.l + _amount(amount) / 100)))


def darken(color: Any, amount: Optional[float] = None) -> Color:
    """Lower HSL lightness by ``amount`` percent (default 10)."""
    hsl = Color(color).to_hsl()
    return Color(replace(hsl, l=clamp01(hsl.l - _amount(amount) / 100)))


def saturate(color: Any, amount: Optional[float] = None) -> Color:
    """Raise HSL saturation by ``amount`` percent (default 10)."""
    hsl = Color(color).to_hsl()
    return Color(replace(hsl, s=clamp01(hsl.s + _amount(amount) / 100)))


def desaturate(color: Any, amount: Optional[float] = None) -> Color:
    """Lower HSL saturation by ``amount`` percent (default 10)."""
    hsl = Color(color).to_hsl()
    return Color(replace(hsl, s=clamp01(hsl.s - _amount(amount) / 100)))


def greyscale(color: Any) -> Color:
    """Fully desaturated copy."""
    return desaturate(color, 100)


def brighten(color: Any, amount: Optional[float] = None) -> Color:
    """
    Push every RGB channel up by ``round(255 * amount / 100)``.

    Works in RGB rather than HSL, so hue and lightness are not preserved.
    Negative amounts darken. Channels clamp to [0, 255].
    """
    rgb = Color(color).to_rgb()
    step = round_half_up(255 * -(_amount(amount) / 100))

    def push(channel: int) -> int:
        return max(0, min(255, channel - step))

    return Color(replace(rgb, r=push(rgb.r), g=push(rgb.g), b=push(rgb.b)))


def spin(color: Any, amount: Optional[float] = None) -> Color:
    """Rotate hue by ``amount`` degrees (default 0), wrapping into [0, 360)."""
    hsl = Color(color).to_hsl()
    hue = (hsl.h + (amount or 0)) % 360
    return Color(replace(hsl, h=hue))
