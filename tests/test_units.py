# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for unit normalization (bound01, alpha, percentages)."""

import math

import pytest

from tinct.convert.units import (
    bound01,
    bound_alpha,
    clamp01,
    convert_to_percentage,
    format_number,
    is_one_point_zero,
    is_percentage,
    parse_float,
    round_half_up,
)


class TestParseFloat:

    def test_number_passthrough(self):
        assert parse_float(12) == 12.0
        assert parse_float(0.25) == 0.25

    def test_percentage_prefix(self):
        assert parse_float("50%") == 50.0

    def test_leading_dot(self):
        assert parse_float(".5") == 0.5

    def test_signed(self):
        assert parse_float("-10") == -10.0
        assert parse_float("+3.5") == 3.5

    def test_exponent(self):
        assert parse_float("1e2") == 100.0

    def test_no_number_is_nan(self):
        assert math.isnan(parse_float("abc"))
        assert math.isnan(parse_float(None))
        assert math.isnan(parse_float(True))


class TestRoundHalfUp:

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128

    def test_negative_halves_round_towards_positive(self):
        assert round_half_up(-0.5) == 0
        assert round_half_up(-25.5) == -25


class TestFormatNumber:

    def test_integral_floats_drop_fraction(self):
        assert format_number(1.0) == "1"
        assert format_number(0.0) == "0"
        assert format_number(100.0) == "100"

    def test_fractions(self):
        assert format_number(0.5) == "0.5"
        assert format_number(0.07) == "0.07"

    def test_float_noise_is_kept(self):
        assert format_number(7.000000000000001) == "7.000000000000001"

    def test_small_values_stay_positional(self):
        assert format_number(0.00005) == "0.00005"


class TestBound01:

    def test_full_scale_snaps_to_one(self):
        assert bound01(255, 255) == 1.0
        assert bound01(100, 100) == 1.0

    def test_zero(self):
        assert bound01(0, 255) == 0.0

    def test_plain_fraction(self):
        assert bound01(51, 255) == pytest.approx(0.2)

    def test_percentage(self):
        assert bound01("50%", 100) == 0.5
        assert bound01("50%", 255) == pytest.approx(0.5)

    def test_percentage_truncates(self):
        # 33.333 * 255 = 8499.915 is truncated to 8499 before dividing by 100
        assert bound01("33.333%", 255) == pytest.approx(84.99 / 255)

    def test_one_point_zero_means_full(self):
        assert bound01("1.0", 255) == 1.0
        assert bound01("1.0", 100) == 1.0

    def test_integer_one_is_not_full(self):
        assert bound01(1, 255) == pytest.approx(1 / 255)

    def test_channel_clamps(self):
        assert bound01(300, 255) == 1.0
        assert bound01(-5, 255) == 0.0

    def test_percentage_clamps(self):
        assert bound01("150%", 100) == 1.0

    def test_hue_wraps(self):
        assert bound01(400, 360) == pytest.approx(40 / 360)
        assert bound01(-30, 360) == pytest.approx(330 / 360)

    def test_no_number_is_nan(self):
        assert math.isnan(bound01("abc", 255))


class TestPredicates:

    def test_is_one_point_zero(self):
        assert is_one_point_zero("1.0")
        assert is_one_point_zero("1.00")
        assert not is_one_point_zero("1")
        assert not is_one_point_zero(1.0)

    def test_is_percentage(self):
        assert is_percentage("50%")
        assert not is_percentage("50")
        assert not is_percentage(50)


class TestBoundAlpha:

    def test_valid(self):
        assert bound_alpha(0.5) == 0.5
        assert bound_alpha("0.25") == 0.25
        assert bound_alpha(0) == 0.0

    def test_out_of_range_resets(self):
        assert bound_alpha(2) == 1.0
        assert bound_alpha(-1) == 1.0

    def test_garbage_resets(self):
        assert bound_alpha("x") == 1.0
        assert bound_alpha(None) == 1.0


class TestClamp01:

    def test_clamps(self):
        assert clamp01(1.5) == 1.0
        assert clamp01(-0.5) == 0.0
        assert clamp01(0.3) == 0.3


class TestConvertToPercentage:

    def test_fraction(self):
        assert convert_to_percentage(0.5) == "50%"

    def test_one(self):
        assert convert_to_percentage(1) == "100%"

    def test_zero(self):
        assert convert_to_percentage(0) == "0%"

    def test_small_fraction_has_no_decimal_point(self):
        assert convert_to_percentage(0.01) == "1%"

    def test_above_one_unchanged(self):
        assert convert_to_percentage(50) == 50
        assert convert_to_percentage("50%") == "50%"
