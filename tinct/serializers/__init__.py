# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Serializers for Color values.

Each serializer formats a Color for one output syntax. Serializers never
modify the color they format.
"""

from tinct.serializers.filter import to_filter
from tinct.serializers.strings import (
    to_hex8_string,
    to_hex_string,
    to_hsl_string,
    to_hsv_string,
    to_name,
    to_percentage_rgb_string,
    to_rgb_string,
    to_string,
)

__all__ = [
    "to_rgb_string",
    "to_percentage_rgb_string",
    "to_hsl_string",
    "to_hsv_string",
    "to_hex_string",
    "to_hex8_string",
    "to_name",
    "to_string",
    "to_filter",
]
