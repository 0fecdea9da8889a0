# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Record types for color values.

Design principles:
- Channel records are immutable (frozen dataclasses); derive new ones with
  ``dataclasses.replace``
- The parsed record is a loose mapping: absent keys are meaningful
- Output formats are a closed, case-sensitive keyword set

Channel ranges:
- RGB: r, g, b in [0, 255], a in [0, 1]
- HSL / HSV: h in degrees [0, 360), s, l, v in [0, 1], a in [0, 1]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict, Union


# =============================================================================
# Output Formats
# =============================================================================


class ColorFormat(str, Enum):
    """String serialization selector.

    Members compare equal to their plain string values, so either
    ``ColorFormat.HEX`` or ``"hex"`` may be passed wherever a format is
    accepted.
    """

    RGB = "rgb"
    PRGB = "prgb"
    HEX = "hex"
    HEX3 = "hex3"
    HEX4 = "hex4"
    HEX6 = "hex6"
    HEX8 = "hex8"
    NAME = "name"
    HSL = "hsl"
    HSV = "hsv"


# Default formats that give way to rgba() output for translucent colors
# (plain string values)
ALPHA_INCAPABLE_FORMATS = frozenset(
    f.value
    for f in (
        ColorFormat.HEX,
        ColorFormat.HEX3,
        ColorFormat.HEX4,
        ColorFormat.HEX6,
        ColorFormat.HEX8,
        ColorFormat.NAME,
    )
)


# =============================================================================
# Parser Records
# =============================================================================

Unit = Union[int, float, str]


class ParsedColor(TypedDict, total=False):
    """
    Intermediate record produced by the string parser.

    Every key is optional. Values are bare numbers or percentage-tagged
    strings (``"50%"``) exactly as they appeared in the input. There is no
    validity flag: input resolution decides validity from which channel
    triple is present.
    """
    r: Unit
    g: Unit
    b: Unit
    h: Unit
    s: Unit
    l: Unit
    v: Unit
    a: Unit
    format: str


@dataclass(frozen=True, slots=True)
class ResolvedColor:
    """
    Fully normalized RGBA produced from any constructor input.

    Attributes:
        r, g, b: Channels clamped into [0, 255]
        a: Alpha bounded into [0, 1]
        format: Format inferred from the input ("rgb", "prgb", "hex", ...)
        ok: True if the input was recognized
    """
    r: float
    g: float
    b: float
    a: float
    format: str
    ok: bool


INVALID = ResolvedColor(r=0, g=0, b=0, a=1, format="rgb", ok=False)


# =============================================================================
# Channel Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """Red, green, blue in [0, 255] plus alpha."""
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class PercentageRGBColor:
    """RGB channels as percentage strings (``"50%"``) plus alpha."""
    r: str
    g: str
    b: str
    a: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> PercentageRGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    Hue, saturation, lightness plus alpha.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 1]
        l: Lightness [0, 1]
        a: Alpha [0, 1]
    """
    h: float
    s: float
    l: float
    a: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"], a=data.get("a", 1.0))


@dataclass(frozen=True, slots=True)
class HSVColor:
    """
    Hue, saturation, value plus alpha.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 1]
        v: Value [0, 1]
        a: Alpha [0, 1]
    """
    h: float
    s: float
    v: float
    a: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "v": self.v, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> HSVColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], v=data["v"], a=data.get("a", 1.0))


ChannelRecord = Union[RGBColor, PercentageRGBColor, HSLColor, HSVColor]


# =============================================================================
# WCAG2 Options
# =============================================================================

WCAG2_LEVELS = ("AA", "AAA")
WCAG2_SIZES = ("small", "large")

# Minimum contrast ratio per (level, size)
WCAG2_THRESHOLDS = {
    ("AA", "small"): 4.5,
    ("AAA", "large"): 4.5,
    ("AA", "large"): 3.0,
    ("AAA", "small"): 7.0,
}


@dataclass(frozen=True, slots=True)
class WCAG2Options:
    """
    Readability requirement: conformance level and text size.

    Attributes:
        level: "AA" or "AAA"
        size: "small" or "large"
    """
    level: str = "AA"
    size: str = "small"

    @classmethod
    def normalize(cls, level: str | None = None, size: str | None = None) -> WCAG2Options:
        """Build options, silently falling back to AA / small for bad values."""
        level = (level or "AA").upper()
        size = (size or "small").lower()
        if level not in WCAG2_LEVELS:
            level = "AA"
        if size not in WCAG2_SIZES:
            size = "small"
        return cls(level=level, size=size)

    @property
    def threshold(self) -> float | None:
        """Minimum passing contrast ratio, None for an unknown combination."""
        return WCAG2_THRESHOLDS.get((self.level, self.size))
