"""Metrics that apply to an entire font."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import RectF


@dataclass
class Metrics:
    """Font-wide metrics, in font units; mostly from the OpenType OS/2 table.

    ``descent`` is normally negative, matching ``sTypoDescender``.
    """

    units_per_em: int
    ascent: float
    descent: float
    line_gap: float
    underline_position: float
    underline_thickness: float
    cap_height: float
    x_height: float
    bounding_box: RectF = field(default_factory=RectF)