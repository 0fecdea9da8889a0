# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Unit normalization.

Raw channel tokens arrive as numbers, numeric strings or percentage strings
("50%"). Everything here maps them onto canonical ranges:

- Channels:   clamped into [0, max]
- Hue:        wrapped modulo 360
- Alpha:      anything invalid or out of range becomes 1

The percentage path truncates ``n * max`` to an integer before dividing by
100, so "33.333%" of 255 reads as 84.99.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any


HUE_MAX = 360

_FLOAT_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_float(value: Any) -> float:
    """
    Read the leading number of ``value``.

    Numbers pass through; strings are read up to the first character that
    cannot continue a decimal literal, so ``"50%"`` gives 50.0 and
    ``"  .5deg"`` gives 0.5. Returns NaN when there is no leading number.
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    m = _FLOAT_PREFIX_RE.match(str(value).lstrip())
    if not m:
        return math.nan
    token = m.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    return math.floor(x + 0.5)


def format_number(x: float) -> str:
    """
    Shortest decimal rendering of ``x``.

    Integral values lose their ".0" and small magnitudes stay in positional
    notation (0.00005, not 5e-05).
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == int(x) and abs(x) < 1e21:
        return str(int(x))
    text = repr(x)
    if "e" not in text:
        return text
    if 1e-6 <= abs(x) < 1:
        text = format(Decimal(text), "f")
    else:
        mantissa, exponent = text.split("e")
        exp = int(exponent)
        text = f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    return text


def is_one_point_zero(n: Any) -> bool:
    """True for strings such as "1.0" that spell exactly one with a decimal point."""
    return isinstance(n, str) and "." in n and parse_float(n) == 1


def is_percentage(n: Any) -> bool:
    """True for percentage-tagged strings."""
    return isinstance(n, str) and "%" in n


def bound01(n: Any, max_value: float) -> float:
    """
    Map a raw token onto [0, 1] given the channel's full-scale value.

    Args:
        n: Number, numeric string or percentage string
        max_value: Full scale (255 for RGB, 100 for s/l/v, 360 for hue)

    Returns:
        Fraction of full scale. NaN when ``n`` carries no number.
    """
    if is_one_point_zero(n):
        n = "100%"

    process_percent = is_percentage(n)
    value = parse_float(n)
    if math.isnan(value):
        return math.nan

    if max_value == HUE_MAX and not process_percent:
        value = value % HUE_MAX
    else:
        value = min(max_value, max(0.0, value))

    if process_percent:
        value = int(value * max_value) / 100

    if abs(value - max_value) < 0.000001:
        return 1.0

    return (value % max_value) / float(max_value)


def bound_alpha(a: Any) -> float:
    """Alpha in [0, 1]; NaN or out-of-range input becomes 1."""
    value = parse_float(a)
    if math.isnan(value) or value < 0 or value > 1:
        return 1.0
    return value


def clamp01(val: float) -> float:
    """Clamp into [0, 1]."""
    return min(1.0, max(0.0, val))


def convert_to_percentage(n: Any) -> Any:
    """
    Rewrite fractional input as a percentage string.

    Values whose numeric reading is <= 1 become ``"<n*100>%"``; anything else
    (including values already above 1) is returned unchanged.
    """
    value = parse_float(n)
    if value <= 1:
        return format_number(value * 100) + "%"
    return n
