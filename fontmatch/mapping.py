"""Piecewise-linear conversions between normalized trait values and CSS properties."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence

from .properties import Stretch, Weight

# Normalized weight values that correspond to CSS weights 100, 200, ..., 900.
FONT_WEIGHT_MAPPING: tuple[float, ...] = (
    -0.7,
    -0.5,
    -0.23,
    0.0,
    0.2,
    0.3,
    0.4,
    0.6,
    0.8,
)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def piecewise_linear_lookup(index: float, mapping: Sequence[float]) -> float:
    """Interpolate ``mapping`` at a fractional ``index``.

    Raises IndexError if ``index`` lies outside the mapping.
    """
    if math.isnan(index) or index < 0:
        raise IndexError(f"index {index} is outside the mapping")
    lower = math.floor(index)
    upper = math.ceil(index)
    if upper >= len(mapping):
        raise IndexError(f"index {index} is outside the mapping")
    return _lerp(mapping[lower], mapping[upper], index - lower)


def piecewise_linear_find_index(query_value: float, mapping: Sequence[float]) -> float:
    """Return the fractional index at which ``query_value`` falls in a sorted ``mapping``.

    Values below the first entry give 0; values above the last give the
    mapping's length.
    """
    if math.isnan(query_value):
        return float(len(mapping))
    upper_index = bisect.bisect_left(mapping, query_value)
    if upper_index < len(mapping) and mapping[upper_index] == query_value:
        return float(upper_index)
    if upper_index == 0 or upper_index >= len(mapping):
        return float(upper_index)
    lower_index = upper_index - 1
    lower_value, upper_value = mapping[lower_index], mapping[upper_index]
    t = (query_value - lower_value) / (upper_value - lower_value)
    return lower_index + t


def core_text_to_css_font_weight(core_text_weight: float) -> Weight:
    """Convert a normalized weight in about [-1, 1] to a CSS weight."""
    index = piecewise_linear_find_index(core_text_weight, FONT_WEIGHT_MAPPING)
    return Weight(index * 100.0 + 100.0)


def core_text_width_to_css_stretchiness(core_text_width: float) -> Stretch:
    """Convert a normalized width in about [-1, 1] to a CSS stretch value."""
    index = min(max((core_text_width + 0.4) * 10.0, 0.0), 8.0)
    return Stretch(piecewise_linear_lookup(index, Stretch.MAPPING))