"""Bézier glyph outlines and the sink interface that receives them."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .geometry import LineSegment2F, Vector2F


class OutlineSink(ABC):
    """Receives Bézier path drawing commands."""

    @abstractmethod
    def move_to(self, to: Vector2F) -> None:
        """Move the pen to a point."""

    @abstractmethod
    def line_to(self, to: Vector2F) -> None:
        """Draw a line to a point."""

    @abstractmethod
    def quadratic_curve_to(self, ctrl: Vector2F, to: Vector2F) -> None:
        """Draw a quadratic Bézier curve to a point."""

    @abstractmethod
    def cubic_curve_to(self, ctrl: LineSegment2F, to: Vector2F) -> None:
        """Draw a cubic Bézier curve to a point."""

    @abstractmethod
    def close(self) -> None:
        """Close the current path."""


class PointFlags(enum.Flag):
    """What kind of point a contour position is; no flags means on-curve."""

    CONTROL_POINT_0 = 0x01
    CONTROL_POINT_1 = 0x02


ON_CURVE = PointFlags(0)


@dataclass
class Contour:
    """A single subpath: parallel lists of positions and point flags."""

    positions: list[Vector2F] = field(default_factory=list)
    flags: list[PointFlags] = field(default_factory=list)

    def push(self, position: Vector2F, flags: PointFlags) -> None:
        """Append a point with the given flags."""
        self.positions.append(position)
        self.flags.append(flags)

    def copy_to(self, sink: OutlineSink) -> None:
        """Replay this contour as drawing commands into ``sink``."""
        if len(self.positions) != len(self.flags):
            raise ValueError("contour positions and flags differ in length")
        if not self.positions:
            return
        sink.move_to(self.positions[0])

        points = iter(zip(self.positions[1:], self.flags[1:]))
        for position_0, flags_0 in points:
            if not flags_0:
                sink.line_to(position_0)
                continue
            try:
                position_1, flags_1 = next(points)
                if not flags_1:
                    sink.quadratic_curve_to(position_0, position_1)
                    continue
                position_2, flags_2 = next(points)
            except StopIteration:
                raise ValueError("Invalid outline!") from None
            if flags_2:
                raise ValueError("Invalid outline!")
            sink.cubic_curve_to(LineSegment2F(position_0, position_1), position_2)

        sink.close()


@dataclass
class Outline:
    """A glyph outline made of contours."""

    contours: list[Contour] = field(default_factory=list)

    def copy_to(self, sink: OutlineSink) -> None:
        """Replay every contour into ``sink``."""
        for contour in self.contours:
            contour.copy_to(sink)


class OutlineBuilder(OutlineSink):
    """Accumulates drawing commands into an :class:`Outline`."""

    def __init__(self) -> None:
        self._outline = Outline()
        self._current = Contour()

    @property
    def outline(self) -> Outline:
        """The outline built so far, from closed contours only."""
        return self._outline

    def move_to(self, to: Vector2F) -> None:
        self._current.push(to, ON_CURVE)

    def line_to(self, to: Vector2F) -> None:
        self._current.push(to, ON_CURVE)

    def quadratic_curve_to(self, ctrl: Vector2F, to: Vector2F) -> None:
        self._current.push(ctrl, PointFlags.CONTROL_POINT_0)
        self._current.push(to, ON_CURVE)

    def cubic_curve_to(self, ctrl: LineSegment2F, to: Vector2F) -> None:
        self._current.push(ctrl.start, PointFlags.CONTROL_POINT_0)
        self._current.push(ctrl.end, PointFlags.CONTROL_POINT_1)
        self._current.push(to, ON_CURVE)

    def close(self) -> None:
        self._outline.contours.append(self._current)
        self._current = Contour()

    def take_outline(self) -> Outline:
        """Return the built outline and reset the builder.

        Raises ValueError if a contour was started but not closed.
        """
        if self._current.positions:
            raise ValueError("cannot take outline while a contour is open")
        self._current = Contour()
        outline, self._outline = self._outline, Outline()
        return outline