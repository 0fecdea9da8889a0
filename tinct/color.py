# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The canonical color value.

A Color is built once from any supported input (string, mapping, channel
record or another Color) and stores resolved RGBA, the original input, a
default output format and a validity flag.

Mutation is limited to:
- ``set_alpha``
- the in-place manipulation methods (``lighten``, ``darken``, ``spin``, ...),
  which overwrite this color with the result of the matching pure operator
  in ``tinct.ops.modify``

Everything else (accessors, serializers, combination generators) leaves the
color untouched. A Color carries no locks; clone before sharing one between
threads that mutate it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Any, Literal, Optional, Union

import numpy as np

from tinct.convert.colorspace import relative_luminance, rgb_to_hex, rgb_to_hsl, rgb_to_hsv, rgba_to_hex
from tinct.convert.parse import input_to_rgb
from tinct.convert.units import bound01, bound_alpha, convert_to_percentage, round_half_up
from tinct.schema import ColorFormat, HSLColor, HSVColor, PercentageRGBColor, RGBColor
from tinct.serializers import strings


class Color:
    """
    An RGBA color parsed from heterogeneous input.

    Construction never raises: unrecognized input produces opaque black with
    ``is_valid`` False. Passing an existing Color returns that same object.

    Attributes:
        r, g, b: Channels in [0, 255]. A channel below 1 is rounded at
            construction; larger values keep their fractional part.
        alpha: Alpha in [0, 1]
        rounded_alpha: Alpha rounded to two decimals (used in output strings)
        format: Default output format for ``to_string``
        original_input: The input exactly as supplied
        gradient_type: Only affects ``to_filter``
        is_valid: True if the input was recognized

    Example:
        >>> Color("red").to_hex_string()
        '#ff0000'
        >>> Color("rgba(0, 0, 0, 0.5)").to_rgb_string()
        'rgba(0, 0, 0, 0.5)'
        >>> Color({"h": 0, "s": 1, "l": 0.5}).to_hex_string()
        '#ff0000'
    """

    __slots__ = (
        "_original_input",
        "_r",
        "_g",
        "_b",
        "_a",
        "_round_a",
        "_format",
        "_gradient_type",
        "_ok",
    )

    def __new__(
        cls,
        color: Any = None,
        *,
        format: Optional[Union[str, ColorFormat]] = None,
        gradient_type: bool = False,
    ) -> Color:
        if isinstance(color, Color):
            return color
        if not color:
            color = ""

        rgb = input_to_rgb(color)
        self = super().__new__(cls)
        self._original_input = color
        self._r = rgb.r
        self._g = rgb.g
        self._b = rgb.b
        self._a = rgb.a
        self._round_a = round_half_up(100 * self._a) / 100
        if isinstance(format, ColorFormat):
            format = format.value
        self._format = format or rgb.format or ColorFormat.RGB.value
        self._gradient_type = gradient_type

        # Sub-unit channels are snapped; everything else keeps its precision
        if self._r < 1:
            self._r = round_half_up(self._r)
        if self._g < 1:
            self._g = round_half_up(self._g)
        if self._b < 1:
            self._b = round_half_up(self._b)

        self._ok = rgb.ok
        return self

    # ------------------ READ-ONLY PROPERTIES ------------------

    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def alpha(self) -> float:
        return self._a

    @property
    def rounded_alpha(self) -> float:
        return self._round_a

    @property
    def format(self) -> str:
        return self._format

    @property
    def original_input(self) -> Any:
        return self._original_input

    @property
    def gradient_type(self) -> bool:
        return self._gradient_type

    @property
    def is_valid(self) -> bool:
        """True if the input was recognized as a color."""
        return self._ok

    @property
    def brightness(self) -> float:
        """Perceived brightness (0-255) from the rounded channels."""
        rgb = self.to_rgb()
        return (rgb.r * 299 + rgb.g * 587 + rgb.b * 114) / 1000

    @property
    def is_dark(self) -> bool:
        return self.brightness < 128

    @property
    def is_light(self) -> bool:
        return not self.is_dark

    @property
    def luminance(self) -> float:
        """WCAG2 relative luminance [0, 1]."""
        rgb = self.to_rgb()
        return float(relative_luminance(np.array([rgb.r, rgb.g, rgb.b])))

    # ------------------ MUTATION ------------------

    def set_alpha(self, value: Any) -> Color:
        """Set alpha in place (invalid values become 1). Returns self."""
        self._a = bound_alpha(value)
        self._round_a = round_half_up(100 * self._a) / 100
        return self

    # ------------------ CHANNEL RECORDS ------------------

    def to_rgb(self) -> RGBColor:
        """RGB with channels rounded to integers; alpha unrounded."""
        return RGBColor(
            r=round_half_up(self._r),
            g=round_half_up(self._g),
            b=round_half_up(self._b),
            a=self._a,
        )

    def to_percentage_rgb(self) -> PercentageRGBColor:
        """RGB as whole-number percentage strings."""
        return PercentageRGBColor(
            r=f"{round_half_up(bound01(self._r, 255) * 100)}%",
            g=f"{round_half_up(bound01(self._g, 255) * 100)}%",
            b=f"{round_half_up(bound01(self._b, 255) * 100)}%",
            a=self._a,
        )

    def to_hsl(self) -> HSLColor:
        """HSL with hue in degrees [0, 360)."""
        h, s, l = rgb_to_hsl(self._r, self._g, self._b)
        return HSLColor(h=h * 360, s=s, l=l, a=self._a)

    def to_hsv(self) -> HSVColor:
        """HSV with hue in degrees [0, 360)."""
        h, s, v = rgb_to_hsv(self._r, self._g, self._b)
        return HSVColor(h=h * 360, s=s, v=v, a=self._a)

    # ------------------ SERIALIZERS ------------------

    def to_hex(self, allow_3_char: bool = False) -> str:
        return rgb_to_hex(self._r, self._g, self._b, allow_3_char)

    def to_hex_string(self, allow_3_char: bool = False) -> str:
        return strings.to_hex_string(self, allow_3_char)

    def to_hex8(self, allow_4_char: bool = False) -> str:
        return rgba_to_hex(self._r, self._g, self._b, self._a, allow_4_char)

    def to_hex8_string(self, allow_4_char: bool = False) -> str:
        return strings.to_hex8_string(self, allow_4_char)

    def to_rgb_string(self) -> str:
        return strings.to_rgb_string(self)

    def to_percentage_rgb_string(self) -> str:
        return strings.to_percentage_rgb_string(self)

    def to_hsl_string(self) -> str:
        return strings.to_hsl_string(self)

    def to_hsv_string(self) -> str:
        return strings.to_hsv_string(self)

    def to_name(self) -> Union[str, Literal[False]]:
        return strings.to_name(self)

    def to_filter(self, second_color: Any = None) -> str:
        from tinct.serializers.filter import to_filter
        return to_filter(self, second_color)

    def to_string(self, format: Optional[Union[str, ColorFormat]] = None) -> str:
        return strings.to_string(self, format)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Color({self.to_string()!r})"

    def clone(self) -> Color:
        """Independent copy, re-parsed from ``to_string()``."""
        return Color(self.to_string())

    # ------------------ IN-PLACE MODIFICATION ------------------

    def _apply_modification(self, result: Color) -> Color:
        self._r = result._r
        self._g = result._g
        self._b = result._b
        self.set_alpha(result._a)
        return self

    def lighten(self, amount: Optional[float] = None) -> Color:
        from tinct.ops import modify
        return self._apply_modification(modify.lighten(self, amount))

    def brighten(self, amount: Optional[float] = None) -> Color:
        from tinct.ops import modify
        return self._apply_modification(modify.brighten(self, amount))

    def darken(self, amount: Optional[float] = None) -> Color:
        from tinct.ops import modify
        return self._apply_modification(modify.darken(self, amount))

    def desaturate(self, amount: Optional[float] = None) -> Color:
        from tinct.ops import modify
        return self._apply_modification(modify.desaturate(self, amount))

    def saturate(self, amount: Optional[float] = None) -> Color:
        from tinct.ops import modify
        return self._apply_modification(modify.saturate(self, amount))

    def greyscale(self) -> Color:
        from tinct.ops import modify
        return self._apply_modification(modify.greyscale(self))

    def spin(self, amount: Optional[float] = None) -> Color:
        from tinct.ops import modify
        return self._apply_modification(modify.spin(self, amount))

    # ------------------ COMBINATIONS ------------------

    def analogous(self, results: Optional[int] = None, slices: Optional[int] = None) -> list[Color]:
        from tinct.ops import combine
        return combine.analogous(self, results, slices)

    def complement(self) -> Color:
        from tinct.ops import combine
        return combine.complement(self)

    def monochromatic(self, results: Optional[int] = None) -> list[Color]:
        from tinct.ops import combine
        return combine.monochromatic(self, results)

    def splitcomplement(self) -> list[Color]:
        from tinct.ops import combine
        return combine.splitcomplement(self)

    def triad(self) -> list[Color]:
        from tinct.ops import combine
        return combine.polyad(self, 3)

    def tetrad(self) -> list[Color]:
        from tinct.ops import combine
        return combine.polyad(self, 4)

    def polyad(self, number: float) -> list[Color]:
        from tinct.ops import combine
        return combine.polyad(self, number)


# =============================================================================
# Static Helpers
# =============================================================================


def from_ratio(
    color: Any,
    *,
    format: Optional[Union[str, ColorFormat]] = None,
    gradient_type: bool = False,
) -> Color:
    """
    Build a Color from fractional channel values.

    Every non-alpha field whose value is <= 1 is read as a ratio of full
    scale, so ``{"r": 1, "g": 0, "b": 0}`` is red. Strings and Colors are
    passed straight to the constructor.
    """
    record = None
    if isinstance(color, Mapping):
        record = color
    elif is_dataclass(color) and hasattr(color, "to_dict"):
        record = color.to_dict()

    if record is not None:
        color = {
            key: value if key == "a" else convert_to_percentage(value)
            for key, value in record.items()
        }

    return Color(color, format=format, gradient_type=gradient_type)


def equals(color1: Any, color2: Any) -> bool:
    """True if both inputs serialize to the same rgb()/rgba() string."""
    if not color1 or not color2:
        return False
    return Color(color1).to_rgb_string() == Color(color2).to_rgb_string()


def random(seed: Optional[int] = None) -> Color:
    """
    Uniformly random opaque color.

    Args:
        seed: Random seed for reproducibility (None for fresh entropy)
    """
    rng = np.random.default_rng(seed)
    r, g, b = rng.random(3)
    return from_ratio({"r": float(r), "g": float(g), "b": float(b), "a": 1})


def mix(color1: Any, color2: Any, amount: Optional[float] = None) -> Color:
    """
    Linear interpolation between two colors, alpha included.

    Args:
        color1, color2: Any constructor input
        amount: Percentage of ``color2`` in the result (default 50; 0 is
            honored and yields ``color1``)
    """
    amount = 50 if amount is None else amount

    rgb1 = Color(color1).to_rgb()
    rgb2 = Color(color2).to_rgb()
    p = amount / 100

    return Color({
        "r": (rgb2.r - rgb1.r) * p + rgb1.r,
        "g": (rgb2.g - rgb1.g) * p + rgb1.g,
        "b": (rgb2.b - rgb1.b) * p + rgb1.b,
        "a": (rgb2.a - rgb1.a) * p + rgb1.a,
    })
