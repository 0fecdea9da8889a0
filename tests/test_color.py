# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for the Color value and module-level helpers."""

import pytest

from tinct import (
    Color,
    ColorFormat,
    HSLColor,
    HSVColor,
    PercentageRGBColor,
    RGBColor,
    equals,
    from_ratio,
    mix,
    random,
)


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:

    def test_equivalent_spellings(self):
        expected = Color("red").to_rgb_string()
        assert Color("#f00").to_rgb_string() == expected
        assert Color("#ff0000").to_rgb_string() == expected
        assert Color("rgb(255, 0, 0)").to_rgb_string() == expected
        assert Color({"r": 255, "g": 0, "b": 0}).to_rgb_string() == expected

    def test_hsl_mapping(self):
        assert Color({"h": 0, "s": 1, "l": 0.5}).to_hex_string() == "#ff0000"

    def test_hsl_string(self):
        assert Color("hsl(210, 60%, 40%)").to_hex_string() == "#2966a3"

    def test_hue_wraps(self):
        assert Color({"h": 400, "s": 1, "l": 0.5}).to_hsl().h == pytest.approx(40, abs=0.5)

    def test_channel_record(self):
        assert Color(RGBColor(r=0, g=0, b=255)).to_hex_string() == "#0000ff"
        assert Color(HSVColor(h=120, s=1, v=1)).to_hex_string() == "#00ff00"

    def test_identity_passthrough(self):
        c = Color("red")
        assert Color(c) is c
        assert Color(c, format="hsl") is c

    def test_original_input_kept(self):
        record = {"r": 1, "g": 2, "b": 3}
        assert Color(record).original_input is record
        assert Color("  RED ").original_input == "  RED "

    def test_sub_unit_channels_round(self):
        c = Color({"r": 0.4, "g": 0.6, "b": 100.4})
        assert c.r == 0
        assert c.g == 1
        assert c.b == pytest.approx(100.4)

    def test_rgba_string(self):
        c = Color("rgba(0,0,0,0.5)")
        assert c.alpha == 0.5
        assert c.to_rgb_string() == "rgba(0, 0, 0, 0.5)"


class TestInvalid:

    @pytest.mark.parametrize("value", ["not-a-color", "", None, 42, {"r": 1}, [1, 2, 3]])
    def test_invalid_is_opaque_black(self, value):
        c = Color(value)
        assert not c.is_valid
        assert (c.r, c.g, c.b, c.alpha) == (0, 0, 0, 1)
        assert c.format == "rgb"

    def test_no_argument(self):
        c = Color()
        assert not c.is_valid
        assert c.original_input == ""


class TestFormat:

    @pytest.mark.parametrize("value,expected", [
        ("red", "name"),
        ("#f00", "hex"),
        ("#ff0000", "hex"),
        ("#f00f", "hex8"),
        ("#ff0000ff", "hex8"),
        ("rgb(255, 0, 0)", "rgb"),
        ("rgb(100%, 0%, 0%)", "prgb"),
        ("hsl(0, 100%, 50%)", "hsl"),
        ("hsv(0, 100%, 100%)", "hsv"),
    ])
    def test_inferred(self, value, expected):
        assert Color(value).format == expected

    def test_explicit(self):
        c = Color("red", format="hsl")
        assert c.format == "hsl"
        assert c.to_string() == "hsl(0, 100%, 50%)"

    def test_enum_accepted(self):
        assert Color("red", format=ColorFormat.HEX8).format == "hex8"


# =============================================================================
# Accessors
# =============================================================================


class TestAccessors:

    def test_to_rgb(self):
        assert Color("red").to_rgb() == RGBColor(r=255, g=0, b=0, a=1)

    def test_to_rgb_rounds_channels(self):
        assert Color({"r": 127.5, "g": 0, "b": 0}).to_rgb().r == 128

    def test_to_percentage_rgb(self):
        assert Color("red").to_percentage_rgb() == PercentageRGBColor(r="100%", g="0%", b="0%", a=1)

    def test_to_hsl(self):
        assert Color("red").to_hsl() == HSLColor(h=0, s=1, l=0.5, a=1)

    def test_to_hsv(self):
        assert Color("red").to_hsv() == HSVColor(h=0, s=1, v=1, a=1)

    def test_hsl_hue_in_degrees(self):
        assert Color("blue").to_hsl().h == pytest.approx(240)

    def test_brightness(self):
        assert Color("white").brightness == 255
        assert Color("black").brightness == 0

    def test_dark_and_light(self):
        assert Color("black").is_dark
        assert not Color("black").is_light
        assert Color("white").is_light
        assert Color("yellow").is_light
        assert Color("navy").is_dark

    def test_luminance(self):
        assert Color("white").luminance == pytest.approx(1.0)
        assert Color("black").luminance == 0.0
        assert Color("red").luminance == pytest.approx(0.2126)


class TestSetAlpha:

    def test_returns_self(self):
        c = Color("red")
        assert c.set_alpha(0.5) is c
        assert c.alpha == 0.5

    def test_invalid_becomes_opaque(self):
        assert Color("red").set_alpha(2).alpha == 1
        assert Color("red").set_alpha("x").alpha == 1
        assert Color("red").set_alpha(-0.1).alpha == 1

    def test_rounded_alpha(self):
        c = Color("red").set_alpha(0.123)
        assert c.rounded_alpha == 0.12
        assert c.to_rgb_string() == "rgba(255, 0, 0, 0.12)"


class TestClone:

    def test_independent(self):
        c = Color("red")
        copy = c.clone()
        assert copy is not c
        assert copy.to_string() == c.to_string()
        copy.set_alpha(0.5)
        assert c.alpha == 1

    def test_keeps_translucency(self):
        c = Color("rgba(255, 0, 0, 0.5)")
        assert c.clone().alpha == 0.5


class TestDunder:

    def test_str(self):
        assert str(Color("red")) == "red"
        assert str(Color("#00f")) == "#0000ff"

    def test_repr(self):
        assert repr(Color("red")) == "Color('red')"


# =============================================================================
# Static Helpers
# =============================================================================


class TestFromRatio:

    def test_unit_channels(self):
        assert from_ratio({"r": 1, "g": 0, "b": 0}).to_hex_string() == "#ff0000"

    def test_half(self):
        assert from_ratio({"r": 0.5, "g": 0.5, "b": 0.5}).to_hex_string() == "#808080"

    def test_alpha_untouched(self):
        assert from_ratio({"r": 1, "g": 1, "b": 1, "a": 0.5}).alpha == 0.5

    def test_hsl_ratio(self):
        assert from_ratio({"h": 0, "s": 1, "l": 0.5}).to_hex_string() == "#ff0000"

    def test_string_passthrough(self):
        assert from_ratio("red").to_hex_string() == "#ff0000"

    def test_format_option(self):
        assert from_ratio({"r": 1, "g": 0, "b": 0}, format="hex").to_string() == "#ff0000"


class TestEquals:

    def test_equal(self):
        assert equals("red", "#f00")
        assert equals("red", {"r": 255, "g": 0, "b": 0})

    def test_not_equal(self):
        assert not equals("red", "blue")
        assert not equals("red", "rgba(255, 0, 0, 0.5)")

    def test_missing(self):
        assert not equals(None, "red")
        assert not equals("red", "")


class TestRandom:

    def test_valid_and_opaque(self):
        c = random()
        assert c.is_valid
        assert c.alpha == 1

    def test_seeded(self):
        assert random(seed=1).to_hex_string() == random(seed=1).to_hex_string()

    def test_channels_in_range(self):
        for seed in range(10):
            rgb = random(seed=seed).to_rgb()
            assert 0 <= rgb.r <= 255
            assert 0 <= rgb.g <= 255
            assert 0 <= rgb.b <= 255


class TestMix:

    def test_endpoints(self):
        assert mix("red", "blue", 0).to_rgb_string() == "rgb(255, 0, 0)"
        assert mix("red", "blue", 100).to_rgb_string() == "rgb(0, 0, 255)"

    def test_default_midpoint(self):
        assert mix("red", "blue").to_rgb_string() == "rgb(128, 0, 128)"

    def test_alpha_interpolated(self):
        assert mix("rgba(0, 0, 0, 0)", "black").alpha == 0.5

    def test_inputs_untouched(self):
        red = Color("red")
        mix(red, "blue", 30)
        assert red.to_hex_string() == "#ff0000"
