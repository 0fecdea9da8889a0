# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Permissive color parsing and input resolution.

Recognized string forms (case-insensitive, surrounding whitespace ignored):

    red, transparent                       named colors
    rgb(255, 0, 0)   rgba(255 0 0 .5)      RGB, integer or percentage units
    hsl(0, 100%, 50%)  hsla(...)           HSL
    hsv(0, 100%, 100%)  hsva(...)          HSV
    #ff0000ff  #ff0000  #f00f  #f00        hex, "#" optional

Function forms are deliberately looser than CSS: components may be separated
by commas and/or whitespace and the closing parenthesis is optional.

Structured input (mappings or channel records) is resolved by checking which
channel triple is present: r/g/b first, then h/s/v, then h/s/l.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Any, Optional

from tinct.convert.colorspace import hex_to_decimal, hsl_to_rgb, hsv_to_rgb, rgb_to_rgb
from tinct.convert.names import name_to_hex
from tinct.convert.units import bound_alpha, convert_to_percentage
from tinct.schema import INVALID, ColorFormat, ParsedColor, ResolvedColor

logger = logging.getLogger(__name__)


# =============================================================================
# Matchers
# =============================================================================

_CSS_INTEGER = r"[-\+]?\d+%?"
_CSS_NUMBER = r"[-\+]?\d*\.\d+%?"
_CSS_UNIT = rf"(?:{_CSS_NUMBER})|(?:{_CSS_INTEGER})"

_PERMISSIVE_MATCH3 = (
    rf"[\s|\(]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})\s*\)?"
)
_PERMISSIVE_MATCH4 = (
    rf"[\s|\(]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})"
    rf"[,|\s]+({_CSS_UNIT})\s*\)?"
)

CSS_UNIT_RE = re.compile(_CSS_UNIT)

# (keyword, channel names) in the order they are tried
_FUNCTION_MATCHERS = (
    (re.compile("rgb" + _PERMISSIVE_MATCH3), ("r", "g", "b")),
    (re.compile("rgba" + _PERMISSIVE_MATCH4), ("r", "g", "b", "a")),
    (re.compile("hsl" + _PERMISSIVE_MATCH3), ("h", "s", "l")),
    (re.compile("hsla" + _PERMISSIVE_MATCH4), ("h", "s", "l", "a")),
    (re.compile("hsv" + _PERMISSIVE_MATCH3), ("h", "s", "v")),
    (re.compile("hsva" + _PERMISSIVE_MATCH4), ("h", "s", "v", "a")),
)

_HEX8_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$")
_HEX6_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$")
_HEX4_RE = re.compile(r"^#?([0-9a-f])([0-9a-f])([0-9a-f])([0-9a-f])$")
_HEX3_RE = re.compile(r"^#?([0-9a-f])([0-9a-f])([0-9a-f])$")


def is_valid_css_unit(value: Any) -> bool:
    """True if the text of ``value`` contains a CSS number or percentage."""
    if value is None or isinstance(value, bool):
        return False
    return CSS_UNIT_RE.search(str(value)) is not None


# =============================================================================
# String Parsing
# =============================================================================


def string_input_to_object(color: str) -> Optional[ParsedColor]:
    """
    Parse a color string into a loosely typed record.

    Args:
        color: Any supported color string

    Returns:
        ParsedColor with raw channel tokens, or None if nothing matched
    """
    color = color.strip().lower()
    named = False
    hex_digits = name_to_hex(color)
    if hex_digits:
        color = hex_digits
        named = True
    elif color == "transparent":
        return {"r": 0, "g": 0, "b": 0, "a": 0, "format": ColorFormat.NAME.value}

    for pattern, channels in _FUNCTION_MATCHERS:
        m = pattern.search(color)
        if m:
            return dict(zip(channels, m.groups()))  # type: ignore[return-value]

    m = _HEX8_RE.match(color)
    if m:
        return {
            "r": int(m.group(1), 16),
            "g": int(m.group(2), 16),
            "b": int(m.group(3), 16),
            "a": hex_to_decimal(m.group(4)),
            "format": "name" if named else "hex8",
        }

    m = _HEX6_RE.match(color)
    if m:
        return {
            "r": int(m.group(1), 16),
            "g": int(m.group(2), 16),
            "b": int(m.group(3), 16),
            "format": "name" if named else "hex",
        }

    m = _HEX4_RE.match(color)
    if m:
        return {
            "r": int(m.group(1) * 2, 16),
            "g": int(m.group(2) * 2, 16),
            "b": int(m.group(3) * 2, 16),
            "a": hex_to_decimal(m.group(4) * 2),
            "format": "name" if named else "hex8",
        }

    m = _HEX3_RE.match(color)
    if m:
        return {
            "r": int(m.group(1) * 2, 16),
            "g": int(m.group(2) * 2, 16),
            "b": int(m.group(3) * 2, 16),
            "format": "name" if named else "hex",
        }

    return None


# =============================================================================
# Input Resolution
# =============================================================================


def _as_mapping(value: Any) -> Optional[Mapping]:
    """View structured input as a mapping (channel records expose to_dict)."""
    if isinstance(value, Mapping):
        return value
    if is_dataclass(value) and hasattr(value, "to_dict"):
        return value.to_dict()
    return None


def _has_units(record: Mapping, *keys: str) -> bool:
    return all(is_valid_css_unit(record.get(k)) for k in keys)


def _clamp_channel(c: float) -> float:
    if math.isnan(c):
        return 0
    return min(255, max(c, 0))


def input_to_rgb(color: Any) -> ResolvedColor:
    """
    Resolve any constructor input to normalized RGBA.

    Args:
        color: Color string, mapping / channel record with r,g,b or h,s,v or
            h,s,l keys (plus optional a), or anything else (unrecognized)

    Returns:
        ResolvedColor; ``ok`` is False and RGBA is opaque black when the
        input could not be recognized
    """
    if isinstance(color, str):
        parsed = string_input_to_object(color)
        if parsed is None:
            logger.debug("Unrecognized color string %r", color)
            return INVALID
        color = parsed

    record = _as_mapping(color)
    if record is None:
        logger.debug("Unsupported color input type %s", type(color).__name__)
        return INVALID

    if _has_units(record, "r", "g", "b"):
        r, g, b = rgb_to_rgb(record["r"], record["g"], record["b"])
        fmt = record.get("format") or ("prgb" if str(record["r"]).endswith("%") else "rgb")
    elif _has_units(record, "h", "s", "v"):
        s = convert_to_percentage(record["s"])
        v = convert_to_percentage(record["v"])
        r, g, b = hsv_to_rgb(record["h"], s, v)
        fmt = ColorFormat.HSV.value
    elif _has_units(record, "h", "s", "l"):
        s = convert_to_percentage(record["s"])
        l = convert_to_percentage(record["l"])
        r, g, b = hsl_to_rgb(record["h"], s, l)
        fmt = ColorFormat.HSL.value
    else:
        logger.debug("Color record has no complete channel triple: %r", dict(record))
        return INVALID

    return ResolvedColor(
        r=_clamp_channel(r),
        g=_clamp_channel(g),
        b=_clamp_channel(b),
        a=bound_alpha(record.get("a", 1)),
        format=fmt,
        ok=True,
    )
