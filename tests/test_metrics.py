from dataclasses import replace

from fontmatch.geometry import RectF, Vector2F
from fontmatch.metrics import Metrics


def _sample():
    return Metrics(
        units_per_em=2048,
        ascent=1854.0,
        descent=-434.0,
        line_gap=67.0,
        underline_position=-217.0,
        underline_thickness=150.0,
        cap_height=1467.0,
        x_height=1062.0,
        bounding_box=RectF.from_points(Vector2F(-1361.0, -665.0), Vector2F(4096.0, 2060.0)),
    )


def test_fields_round_trip():
    m = _sample()
    assert m.units_per_em == 2048
    assert m.descent == -434.0
    assert m.bounding_box.lower_right == Vector2F(4096.0, 2060.0)


def test_replace_changes_only_one_field():
    m = _sample()
    changed = replace(m, line_gap=0.0)
    assert changed.line_gap == 0.0
    assert replace(changed, line_gap=m.line_gap) == m


def test_default_bounding_box_is_empty():
    m = Metrics(1000, 800.0, -200.0, 0.0, -100.0, 50.0, 700.0, 500.0)
    assert m.bounding_box == RectF(Vector2F(), Vector2F())