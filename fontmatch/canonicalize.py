"""Turns y-down path callbacks into outlines, recovering degree-elevated quadratics."""

from __future__ import annotations

from .geometry import LineSegment2F, Vector2F
from .outline import Outline, OutlineBuilder

# Largest distance, in font units, at which a cubic is still taken for a quadratic.
ERROR_BOUND = 0.0001


class OutlineCanonicalizer:
    """Receives path commands with a y-down axis and builds a y-up :class:`Outline`.

    Cubic curves that are degree-elevated quadratics are stored as quadratics,
    with the control point snapped to the nearest half unit.
    """

    def __init__(self) -> None:
        self._builder = OutlineBuilder()
        self._last_position = Vector2F()

    def move_to(self, to_x: float, to_y: float) -> None:
        """Start a new contour at a point."""
        to = Vector2F(to_x, -to_y)
        self._last_position = to
        self._builder.move_to(to)

    def line_to(self, to_x: float, to_y: float) -> None:
        """Draw a line to a point."""
        to = Vector2F(to_x, -to_y)
        self._last_position = to
        self._builder.line_to(to)

    def curve_to(
        self,
        ctrl0_x: float,
        ctrl0_y: float,
        ctrl1_x: float,
        ctrl1_y: float,
        to_x: float,
        to_y: float,
    ) -> None:
        """Draw a cubic curve, or a quadratic if the cubic is an elevated one."""
        ctrl = LineSegment2F(Vector2F(ctrl0_x, -ctrl0_y), Vector2F(ctrl1_x, -ctrl1_y))
        to = Vector2F(to_x, -to_y)

        # Distance between the cubic and its best quadratic approximation
        # (Sederberg § 2.6, "Distance Between Two Bézier Curves").
        approx_ctrl = LineSegment2F(
            (ctrl.start.scale(3.0) - self._last_position).scale(0.5),
            (ctrl.end.scale(3.0) - to).scale(0.5),
        )
        delta_ctrl = (approx_ctrl.end - approx_ctrl.start).scale(2.0)
        max_error = delta_ctrl.length() / 6.0

        if max_error < ERROR_BOUND:
            snapped = approx_ctrl.midpoint().scale(2.0).round().scale(0.5)
            self._builder.quadratic_curve_to(snapped, to)
        else:
            self._builder.cubic_curve_to(ctrl, to)

        self._last_position = to

    def close(self) -> None:
        """Close the current contour."""
        self._builder.close()

    def take_outline(self) -> Outline:
        """Return the outline built so far and reset.

        Raises ValueError if a contour is still open.
        """
        return self._builder.take_outline()