"""Properties that select a font within a family: style, weight and stretch."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


class Style(enum.Enum):
    """Allows italic or oblique faces to be selected."""

    NORMAL = "Normal"
    ITALIC = "Italic"
    OBLIQUE = "Oblique"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Weight:
    """Stroke thickness, from 100.0 to 900.0 with 400.0 as normal."""

    value: float = 400.0

    THIN: ClassVar[Weight]
    EXTRA_LIGHT: ClassVar[Weight]
    LIGHT: ClassVar[Weight]
    NORMAL: ClassVar[Weight]
    MEDIUM: ClassVar[Weight]
    SEMIBOLD: ClassVar[Weight]
    BOLD: ClassVar[Weight]
    EXTRA_BOLD: ClassVar[Weight]
    BLACK: ClassVar[Weight]


Weight.THIN = Weight(100.0)
Weight.EXTRA_LIGHT = Weight(200.0)
Weight.LIGHT = Weight(300.0)
Weight.NORMAL = Weight(400.0)
Weight.MEDIUM = Weight(500.0)
Weight.SEMIBOLD = Weight(600.0)
Weight.BOLD = Weight(700.0)
Weight.EXTRA_BOLD = Weight(800.0)
Weight.BLACK = Weight(900.0)


@dataclass(frozen=True, order=True)
class Stretch:
    """Width as a fraction of normal, from 0.5 to 2.0 with 1.0 as normal."""

    value: float = 1.0

    ULTRA_CONDENSED: ClassVar[Stretch]
    EXTRA_CONDENSED: ClassVar[Stretch]
    CONDENSED: ClassVar[Stretch]
    SEMI_CONDENSED: ClassVar[Stretch]
    NORMAL: ClassVar[Stretch]
    SEMI_EXPANDED: ClassVar[Stretch]
    EXPANDED: ClassVar[Stretch]
    EXTRA_EXPANDED: ClassVar[Stretch]
    ULTRA_EXPANDED: ClassVar[Stretch]
    # Maps OS/2 usWidthClass values 1..9 (as indices 0..8) to stretch values.
    MAPPING: ClassVar[tuple[float, ...]]


Stretch.ULTRA_CONDENSED = Stretch(0.5)
Stretch.EXTRA_CONDENSED = Stretch(0.625)
Stretch.CONDENSED = Stretch(0.75)
Stretch.SEMI_CONDENSED = Stretch(0.875)
Stretch.NORMAL = Stretch(1.0)
Stretch.SEMI_EXPANDED = Stretch(1.125)
Stretch.EXPANDED = Stretch(1.25)
Stretch.EXTRA_EXPANDED = Stretch(1.5)
Stretch.ULTRA_EXPANDED = Stretch(2.0)
Stretch.MAPPING = (
    Stretch.ULTRA_CONDENSED.value,
    Stretch.EXTRA_CONDENSED.value,
    Stretch.CONDENSED.value,
    Stretch.SEMI_CONDENSED.value,
    Stretch.NORMAL.value,
    Stretch.SEMI_EXPANDED.value,
    Stretch.EXPANDED.value,
    Stretch.EXTRA_EXPANDED.value,
    Stretch.ULTRA_EXPANDED.value,
)


@dataclass
class Properties:
    """Style, weight and stretch of a font; defaults are all normal."""

    style: Style = Style.NORMAL
    weight: Weight = field(default_factory=lambda: Weight.NORMAL)
    stretch: Stretch = field(default_factory=lambda: Stretch.NORMAL)