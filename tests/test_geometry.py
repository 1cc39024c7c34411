import pytest

from fontmatch.geometry import LineSegment2F, RectF, Vector2F


def test_lerp_endpoints():
    a = Vector2F(1.0, 2.0)
    b = Vector2F(7.0, -4.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_length_of_axis_vector_matches_component():
    assert Vector2F(0.0, -6.5).length() == 6.5
    assert Vector2F(2.0, 0.0).length() == 2.0


def test_length_is_scale_invariant():
    v = Vector2F(3.0, 4.0)
    assert v.scale(2.0).length() == pytest.approx(2.0 * v.length())


def test_round_halves_away_from_zero():
    assert Vector2F(0.5, -0.5).round() == Vector2F(1.0, -1.0)
    assert Vector2F(2.4, -2.4).round() == Vector2F(2.0, -2.0)


def test_scale_and_operator_agree():
    v = Vector2F(1.5, -2.0)
    assert v.scale(3.0) == v * 3.0 == 3.0 * v


def test_segment_midpoint_is_half_lerp():
    seg = LineSegment2F(Vector2F(0.0, 0.0), Vector2F(4.0, 8.0))
    assert seg.midpoint() == seg.start.lerp(seg.end, 0.5)


def test_segment_scale_scales_both_ends():
    seg = LineSegment2F(Vector2F(1.0, 2.0), Vector2F(3.0, 4.0))
    scaled = seg.scale(2.0)
    assert scaled.start == seg.start.scale(2.0)
    assert scaled.end == seg.end.scale(2.0)


def test_rect_from_points_round_trip():
    origin = Vector2F(-10.0, -20.0)
    lower_right = Vector2F(30.0, 40.0)
    rect = RectF.from_points(origin, lower_right)
    assert rect.origin == origin
    assert rect.lower_right == lower_right


def test_rect_scale():
    rect = RectF(Vector2F(1.0, 2.0), Vector2F(3.0, 4.0))
    scaled = rect.scale(0.5)
    assert scaled.origin == rect.origin.scale(0.5)
    assert scaled.size == rect.size.scale(0.5)