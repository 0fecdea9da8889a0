# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
WCAG2 contrast and readability.

Contrast ratio between two colors with relative luminances L1 >= L2:

    (L1 + 0.05) / (L2 + 0.05)

ranging from 1 (identical) to 21 (black on white). Pass thresholds:

    level  size    minimum
    AA     small   4.5
    AA     large   3.0
    AAA    small   7.0
    AAA    large   4.5

References:
- https://www.w3.org/TR/WCAG20/#contrast-ratiodef
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np
from numpy.typing import NDArray

from tinct.color import Color
from tinct.convert.colorspace import relative_luminance
from tinct.schema import WCAG2Options

logger = logging.getLogger(__name__)


FALLBACK_COLORS = ("#fff", "#000")


def readability(color1: Any, color2: Any) -> float:
    """Contrast ratio between two colors (symmetric, 1 to 21)."""
    l1 = Color(color1).luminance
    l2 = Color(color2).luminance
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def is_readable(
    color1: Any,
    color2: Any,
    *,
    level: Optional[str] = "AA",
    size: Optional[str] = "small",
) -> bool:
    """
    True if the pair meets the WCAG2 contrast minimum.

    Args:
        color1, color2: Any constructor input
        level: "AA" (default) or "AAA"; anything else is treated as "AA"
        size: "small" (default) or "large"; anything else is treated as "small"
    """
    options = WCAG2Options.normalize(level, size)
    threshold = options.threshold
    if threshold is None:
        return False
    return readability(color1, color2) >= threshold


def contrast_ratios(base: Any, candidates: Sequence[Any]) -> NDArray[np.float64]:
    """
    Contrast ratio of every candidate against ``base``.

    Args:
        base: Any constructor input
        candidates: Sequence of constructor inputs

    Returns:
        Array of shape (len(candidates),)
    """
    base_luminance = Color(base).luminance
    if len(candidates) == 0:
        return np.zeros(0, dtype=np.float64)

    rgb = np.array(
        [[c.r, c.g, c.b] for c in (Color(x).to_rgb() for x in candidates)],
        dtype=np.float64,
    )
    luminance = relative_luminance(rgb)
    lighter = np.maximum(luminance, base_luminance)
    darker = np.minimum(luminance, base_luminance)
    return (lighter + 0.05) / (darker + 0.05)


def most_readable(
    base: Any,
    candidates: Sequence[Any],
    *,
    level: Optional[str] = "AA",
    size: Optional[str] = "small",
    include_fallback_colors: bool = False,
) -> Optional[Color]:
    """
    Candidate with the highest contrast against ``base``.

    Ties go to the earliest candidate. If the winner fails the WCAG2 check
    and ``include_fallback_colors`` is set, the search is repeated once over
    white and black.

    Args:
        base: Background (or foreground) color
        candidates: Colors to choose from
        level: WCAG2 level for the pass check ("AA" / "AAA")
        size: Text size for the pass check ("small" / "large")
        include_fallback_colors: Retry with white / black on failure

    Returns:
        The chosen Color, or None when ``candidates`` is empty and no
        fallback was requested
    """
    best: Optional[Color] = None
    scores = contrast_ratios(base, candidates)
    if len(scores) > 0:
        best = Color(candidates[int(np.argmax(scores))])

    if (best is not None and is_readable(base, best, level=level, size=size)) or not include_fallback_colors:
        return best

    logger.debug(
        "No candidate readable against %r at %s/%s, falling back to %s",
        base, level, size, FALLBACK_COLORS,
    )
    return most_readable(
        base,
        FALLBACK_COLORS,
        level=level,
        size=size,
        include_fallback_colors=False,
    )
