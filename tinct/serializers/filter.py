# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Legacy gradient filter serializer.

Formats a color (or a pair of colors) as an old-IE
``DXImageTransform.Microsoft.gradient`` filter value, which takes alpha-first
``#AARRGGBB`` hex.

Example::

    progid:DXImageTransform.Microsoft.gradient(startColorstr=#80ff0000,endColorstr=#ff0000ff)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from tinct.convert.colorspace import rgba_to_argb_hex

if TYPE_CHECKING:
    from tinct.color import Color


def _argb(color: Color) -> str:
    return "#" + rgba_to_argb_hex(color.r, color.g, color.b, color.alpha)


def to_filter(color: Color, second_color: Optional[Any] = None) -> str:
    """
    Serialize as a two-stop gradient filter string.

    Args:
        color: Start color; its ``gradient_type`` flag adds the
            ``GradientType = 1`` (horizontal) prefix
        second_color: Optional end color (any constructor input). The start
            color is repeated when omitted.

    Returns:
        ``progid:DXImageTransform.Microsoft.gradient(...)`` string
    """
    from tinct.color import Color

    start = _argb(color)
    end = start
    gradient_type = "GradientType = 1, " if color.gradient_type else ""

    if second_color:
        end = _argb(Color(second_color))

    return (
        "progid:DXImageTransform.Microsoft.gradient("
        f"{gradient_type}startColorstr={start},endColorstr={end})"
    )
