# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for schema types and dictionary conversion."""

import dataclasses

import pytest

from tinct.schema import (
    ALPHA_INCAPABLE_FORMATS,
    INVALID,
    ColorFormat,
    HSLColor,
    HSVColor,
    PercentageRGBColor,
    RGBColor,
)


class TestColorFormat:

    def test_members_equal_strings(self):
        assert ColorFormat.HEX == "hex"
        assert ColorFormat("hsv") is ColorFormat.HSV

    def test_alpha_incapable(self):
        assert ALPHA_INCAPABLE_FORMATS == {"hex", "hex3", "hex4", "hex6", "hex8", "name"}
        assert "rgb" not in ALPHA_INCAPABLE_FORMATS


class TestChannelRecords:

    def test_default_alpha(self):
        assert RGBColor(r=1, g=2, b=3).a == 1.0
        assert HSLColor(h=0, s=0, l=0).a == 1.0

    def test_frozen(self):
        c = RGBColor(r=1, g=2, b=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 5

    def test_replace(self):
        c = HSLColor(h=10, s=0.5, l=0.5)
        assert dataclasses.replace(c, h=20) == HSLColor(h=20, s=0.5, l=0.5)

    @pytest.mark.parametrize("record", [
        RGBColor(r=255, g=0, b=0, a=0.5),
        PercentageRGBColor(r="100%", g="0%", b="0%"),
        HSLColor(h=120, s=1, l=0.25),
        HSVColor(h=240, s=0.5, v=1, a=0),
    ])
    def test_to_dict_roundtrip(self, record):
        assert type(record).from_dict(record.to_dict()) == record

    def test_from_dict_without_alpha(self):
        assert HSVColor.from_dict({"h": 0, "s": 1, "v": 1}).a == 1.0


class TestInvalid:

    def test_opaque_black(self):
        assert (INVALID.r, INVALID.g, INVALID.b, INVALID.a) == (0, 0, 0, 1)
        assert INVALID.format == "rgb"
        assert not INVALID.ok
