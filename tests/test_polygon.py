import math

import pytest

from zombielab.polygon import MAX_POSITIONS, Polygon, PolygonFullError


def _triangle():
    pg = Polygon()
    pg.add_point(100, 100, 800, 600)
    pg.add_point(700, 150, 800, 600)
    pg.add_point(400, 500, 800, 600)
    return pg


def test_add_point_maps_window_corners():
    pg = Polygon()
    pg.add_point(0, 0, 800, 600)
    pg.add_point(800, 600, 800, 600)
    assert pg.points[0] == pytest.approx((-1.0, 1.0))
    assert pg.points[1] == pytest.approx((1.0, -1.0))


def test_add_point_returns_stored_point():
    pg = Polygon()
    point = pg.add_point(123, 45, 640, 480)
    assert pg.points == [point]


def test_add_point_rejects_bad_size():
    with pytest.raises(ValueError):
        Polygon().add_point(1, 1, 0, 600)


def test_close_repeats_first_point():
    pg = _triangle()
    pg.close()
    assert len(pg) == 4
    assert pg.points[-1] == pg.points[0]


def test_close_empty_raises():
    with pytest.raises(ValueError):
        Polygon().close()


def test_full_polygon_raises():
    pg = Polygon()
    for i in range(MAX_POSITIONS):
        pg.add_point(i, i, 800, 600)
    assert len(pg) == MAX_POSITIONS
    with pytest.raises(PolygonFullError):
        pg.add_point(1, 1, 800, 600)
    with pytest.raises(PolygonFullError):
        pg.close()


def test_clear_empties():
    pg = _triangle()
    pg.clear()
    assert pg.points == []


def test_update_center_empty_is_origin():
    pg = Polygon(center_x=0.5, center_y=0.25)
    assert pg.update_center() == (0.0, 0.0)


def test_update_center_follows_move():
    pg = _triangle()
    before = pg.update_center()
    pg.move(0.2, -0.1)
    after = pg.update_center()
    assert after[0] == pytest.approx(before[0] + 0.2)
    assert after[1] == pytest.approx(before[1] - 0.1)


def test_move_round_trip():
    pg = _triangle()
    original = list(pg.points)
    pg.move(0.3, 0.4)
    pg.move(-0.3, -0.4)
    for got, want in zip(pg.points, original):
        assert got == pytest.approx(want)


def test_rotate_keeps_distance_to_center():
    pg = _triangle()
    cx, cy = pg.update_center()
    before = [math.hypot(x - cx, y - cy) for x, y in pg.points]
    pg.rotate()
    after = [math.hypot(x - cx, y - cy) for x, y in pg.points]
    assert after == pytest.approx(before, rel=1e-6)
    assert pg.center == (cx, cy)


def test_rotate_turns_five_degrees():
    pg = _triangle()
    cx, cy = pg.update_center()
    x0, y0 = pg.points[0]
    pg.rotate()
    x1, y1 = pg.points[0]
    turned = math.atan2(y1 - cy, x1 - cx) - math.atan2(y0 - cy, x0 - cx)
    assert math.degrees(turned) % 360 == pytest.approx(5.0, abs=1e-4)


def test_full_turn_returns_to_start():
    pg = _triangle()
    pg.update_center()
    original = list(pg.points)
    for _ in range(72):
        pg.rotate()
    for got, want in zip(pg.points, original):
        assert got == pytest.approx(want, abs=1e-4)