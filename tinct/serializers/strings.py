# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
CSS-style string serializers.

Every serializer emits the plain form for opaque colors and the alpha form
(``rgba``, ``hsla``, ``hsva``) otherwise, using the color's alpha rounded to
two decimals. Channel values are rounded half-up.

Example output::

    rgb(255, 0, 0)            rgba(255, 0, 0, 0.5)
    rgb(100%, 0%, 0%)         rgba(100%, 0%, 0%, 0.5)
    hsl(0, 100%, 50%)         hsla(0, 100%, 50%, 0.5)
    hsv(0, 100%, 100%)        hsva(0, 100%, 100%, 0.5)
    #ff0000  #f00             #ff000080
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional, Union

from tinct.convert.colorspace import rgb_to_hex, rgb_to_hsl, rgb_to_hsv, rgba_to_hex
from tinct.convert.names import hex_to_name
from tinct.convert.units import bound01, format_number, round_half_up
from tinct.schema import ALPHA_INCAPABLE_FORMATS, ColorFormat

if TYPE_CHECKING:
    from tinct.color import Color


def _percent(channel: float) -> int:
    return round_half_up(bound01(channel, 255) * 100)


def to_rgb_string(color: Color) -> str:
    """Serialize as ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``."""
    r = round_half_up(color.r)
    g = round_half_up(color.g)
    b = round_half_up(color.b)
    if color.alpha == 1:
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {format_number(color.rounded_alpha)})"


def to_percentage_rgb_string(color: Color) -> str:
    """Serialize as ``rgb(r%, g%, b%)`` / ``rgba(r%, g%, b%, a)``."""
    r, g, b = _percent(color.r), _percent(color.g), _percent(color.b)
    if color.alpha == 1:
        return f"rgb({r}%, {g}%, {b}%)"
    return f"rgba({r}%, {g}%, {b}%, {format_number(color.rounded_alpha)})"


def to_hsl_string(color: Color) -> str:
    """Serialize as ``hsl(h, s%, l%)`` / ``hsla(h, s%, l%, a)``."""
    h, s, l = rgb_to_hsl(color.r, color.g, color.b)
    h = round_half_up(h * 360)
    s = round_half_up(s * 100)
    l = round_half_up(l * 100)
    if color.alpha == 1:
        return f"hsl({h}, {s}%, {l}%)"
    return f"hsla({h}, {s}%, {l}%, {format_number(color.rounded_alpha)})"


def to_hsv_string(color: Color) -> str:
    """Serialize as ``hsv(h, s%, v%)`` / ``hsva(h, s%, v%, a)``."""
    h, s, v = rgb_to_hsv(color.r, color.g, color.b)
    h = round_half_up(h * 360)
    s = round_half_up(s * 100)
    v = round_half_up(v * 100)
    if color.alpha == 1:
        return f"hsv({h}, {s}%, {v}%)"
    return f"hsva({h}, {s}%, {v}%, {format_number(color.rounded_alpha)})"


def to_hex_string(color: Color, allow_3_char: bool = False) -> str:
    """Serialize as ``#rrggbb`` (or ``#rgb`` when allowed and possible)."""
    return "#" + rgb_to_hex(color.r, color.g, color.b, allow_3_char)


def to_hex8_string(color: Color, allow_4_char: bool = False) -> str:
    """Serialize as ``#rrggbbaa`` (or ``#rgba`` when allowed and possible)."""
    return "#" + rgba_to_hex(color.r, color.g, color.b, color.alpha, allow_4_char)


def to_name(color: Color) -> Union[str, Literal[False]]:
    """
    Color keyword for an opaque color.

    The shortest hex form is looked up first, then the six-digit form
    (rebeccapurple is stored as "663399").

    Returns:
        "transparent" for alpha 0, False for any other translucent color or
        when no keyword has exactly this value
    """
    if color.alpha == 0:
        return "transparent"
    if color.alpha < 1:
        return False
    return (
        hex_to_name(rgb_to_hex(color.r, color.g, color.b, True))
        or hex_to_name(rgb_to_hex(color.r, color.g, color.b))
        or False
    )


def to_string(color: Color, format: Optional[str] = None) -> str:
    """
    Serialize in the requested format, or the color's own format.

    When no format is given and the color's own format cannot show a
    fractional alpha (hex variants, name), the rgba() form is used instead.
    Unknown formats, and names that do not resolve, fall back to ``#rrggbb``.

    Args:
        color: Color to serialize
        format: One of rgb, prgb, hex, hex3, hex4, hex6, hex8, name, hsl, hsv

    Returns:
        Serialized color string
    """
    format_set = bool(format)
    fmt = format or color.format
    if isinstance(fmt, ColorFormat):
        fmt = fmt.value

    has_alpha = 0 <= color.alpha < 1
    if not format_set and has_alpha and fmt in ALPHA_INCAPABLE_FORMATS:
        if fmt == ColorFormat.NAME.value and color.alpha == 0:
            return to_name(color)  # type: ignore[return-value]
        return to_rgb_string(color)

    formatted: Union[str, Literal[False]] = False
    if fmt == "rgb":
        formatted = to_rgb_string(color)
    elif fmt == "prgb":
        formatted = to_percentage_rgb_string(color)
    elif fmt in ("hex", "hex6"):
        formatted = to_hex_string(color)
    elif fmt == "hex3":
        formatted = to_hex_string(color, allow_3_char=True)
    elif fmt == "hex4":
        formatted = to_hex8_string(color, allow_4_char=True)
    elif fmt == "hex8":
        formatted = to_hex8_string(color)
    elif fmt == "name":
        formatted = to_name(color)
    elif fmt == "hsl":
        formatted = to_hsl_string(color)
    elif fmt == "hsv":
        formatted = to_hsv_string(color)

    return formatted or to_hex_string(color)
