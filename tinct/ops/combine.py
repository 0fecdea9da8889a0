# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Combination generators.

Produce ordered lists of colors related to a base color by hue (or, for
monochromatic, by HSV value). Where a list starts with the base color, that
entry is the base Color object itself, not a copy.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Optional

from tinct.color import Color
from tinct.schema import HSLColor, HSVColor


def complement(color: Any) -> Color:
    """Color opposite on the hue wheel (+180 degrees)."""
    hsl = Color(color).to_hsl()
    return Color(HSLColor(h=(hsl.h + 180) % 360, s=hsl.s, l=hsl.l, a=hsl.a))


def polyad(color: Any, number: Any) -> list[Color]:
    """
    ``number`` colors evenly spaced around the hue wheel.

    The base color comes first, followed by hue offsets of
    ``k * 360 / number`` degrees for k = 1 .. number - 1.

    Raises:
        ValueError: If ``number`` is not a positive number
    """
    if (
        isinstance(number, bool)
        or not isinstance(number, Real)
        or math.isnan(number)
        or number <= 0
    ):
        raise ValueError("Argument to polyad must be a positive number")

    hsl = Color(color).to_hsl()
    result = [Color(color)]
    step = 360 / number
    for i in range(1, math.ceil(number)):
        result.append(
            Color(HSLColor(h=(hsl.h + i * step) % 360, s=hsl.s, l=hsl.l, a=hsl.a))
        )
    return result


def triad(color: Any) -> list[Color]:
    """Three colors 120 degrees apart."""
    return polyad(color, 3)


def tetrad(color: Any) -> list[Color]:
    """Four colors 90 degrees apart."""
    return polyad(color, 4)


def splitcomplement(color: Any) -> list[Color]:
    """Base color plus hues at +72 and +216 degrees."""
    hsl = Color(color).to_hsl()
    h = hsl.h
    return [
        Color(color),
        Color(HSLColor(h=(h + 72) % 360, s=hsl.s, l=hsl.l, a=hsl.a)),
        Color(HSLColor(h=(h + 216) % 360, s=hsl.s, l=hsl.l, a=hsl.a)),
    ]


def analogous(
    color: Any,
    results: Optional[int] = None,
    slices: Optional[int] = None,
) -> list[Color]:
    """
    Neighbouring hues.

    The wheel is cut into ``slices`` parts. The walk starts half a fan
    (``results`` parts) below the base hue and steps forward one part at a
    time, so the fan is not centred on the base color even though the start
    offset suggests it.

    Args:
        color: Base color (returned first, unmodified)
        results: Number of colors to return (default 6)
        slices: Number of parts the hue wheel is cut into (default 30)
    """
    results = results or 6
    slices = slices or 30

    hsl = Color(color).to_hsl()
    part = 360 / slices
    ret = [Color(color)]

    hue = (hsl.h - (int(part * results) >> 1) + 720) % 360
    for _ in range(results - 1):
        hue = (hue + part) % 360
        ret.append(Color(HSLColor(h=hue, s=hsl.s, l=hsl.l, a=hsl.a)))
    return ret


def monochromatic(color: Any, results: Optional[int] = None) -> list[Color]:
    """
    Same hue and saturation, HSV value stepped by ``1 / results``.

    Value starts at the base color's and wraps past 1 back through 0. Output
    colors are always opaque.
    """
    results = results or 6
    hsv = Color(color).to_hsv()
    h, s, v = hsv.h, hsv.s, hsv.v
    modification = 1 / results

    ret = []
    for _ in range(results):
        ret.append(Color(HSVColor(h=h, s=s, v=v, a=1)))
        v = (v + modification) % 1
    return ret
