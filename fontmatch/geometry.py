"""Small 2D geometry primitives used by outlines and metrics."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Vector2F:
    """A 2D vector or point with float components."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2F:
        return Vector2F(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector2F:
        return self.scale(factor)

    __rmul__ = __mul__

    def scale(self, factor: float) -> Vector2F:
        """Return this vector multiplied by a scalar."""
        return Vector2F(self.x * factor, self.y * factor)

    def lerp(self, other: Vector2F, t: float) -> Vector2F:
        """Linearly interpolate from this vector towards ``other`` by ``t``."""
        return self + (other - self).scale(t)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def round(self) -> Vector2F:
        """Round each component to the nearest integer, halves away from zero."""
        return Vector2F(_round_half_away(self.x), _round_half_away(self.y))


@dataclass(frozen=True)
class LineSegment2F:
    """A line segment between two points."""

    start: Vector2F
    end: Vector2F

    def midpoint(self) -> Vector2F:
        """Return the point halfway between the two ends."""
        return self.start.lerp(self.end, 0.5)

    def scale(self, factor: float) -> LineSegment2F:
        """Return the segment with both end points multiplied by a scalar."""
        return LineSegment2F(self.start.scale(factor), self.end.scale(factor))

    def __mul__(self, factor: float) -> LineSegment2F:
        return self.scale(factor)


@dataclass(frozen=True)
class RectF:
    """An axis-aligned rectangle given by its origin and size."""

    origin: Vector2F = Vector2F()
    size: Vector2F = Vector2F()

    @staticmethod
    def from_points(origin: Vector2F, lower_right: Vector2F) -> RectF:
        """Build a rectangle spanning two corner points."""
        return RectF(origin, lower_right - origin)

    @property
    def lower_right(self) -> Vector2F:
        return self.origin + self.size

    def scale(self, factor: float) -> RectF:
        """Return the rectangle with origin and size multiplied by a scalar."""
        return RectF(self.origin.scale(factor), self.size.scale(factor))

    def __mul__(self, factor: float) -> RectF:
        return self.scale(factor)