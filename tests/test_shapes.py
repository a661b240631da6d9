import math

import pytest

from zombielab.shapes import (
    AIRPLANE,
    BUTTERFLY,
    CAKE,
    CAR2,
    HAT,
    STAR,
    SWORD,
    DrawMode,
    Part,
    Shape,
    apply,
    compose,
    identity,
    rotate,
    scale,
    translate,
)

ALL_SHAPES = [AIRPLANE, CAR2, HAT, CAKE, SWORD, STAR, BUTTERFLY]


@pytest.mark.parametrize(
    "shape,count",
    [(AIRPLANE, 33), (CAR2, 38), (HAT, 16), (CAKE, 20), (SWORD, 27), (STAR, 11), (BUTTERFLY, 11)],
)
def test_vertex_counts_match_draw_ranges(shape, count):
    assert shape.vertex_count() == count


def test_airplane_center_is_a_point_part():
    center = AIRPLANE.transformed(identity())["center"]
    assert center.mode is DrawMode.POINTS
    assert center.vertices[0] == pytest.approx((0.0, 0.0))
    assert len(center.vertices) == 1
    assert center.point_size == 5.0


def test_sword_tip_vertex():
    tip = SWORD.transformed(identity())["head2"].vertices[1]
    assert tip == pytest.approx((0.0, 19.46))


def test_sword_tip_vertex_after_translation():
    tip = SWORD.transformed(translate(10.0, -5.0))["head2"].vertices[1]
    assert tip == pytest.approx((10.0, 14.46))


def test_unknown_part_raises_key_error():
    moved = HAT.transformed(translate(1.0, 1.0))
    assert moved["leaf"].vertices[0] == pytest.approx((4.0, 21.0))
    assert "brim" not in [part.name for part in moved]
    with pytest.raises(KeyError):
        moved["brim"]


def test_part_rejects_empty_vertices():
    with pytest.raises(ValueError):
        Part("empty", (), (0.0, 0.0, 0.0))


def test_part_rejects_colour_out_of_range():
    with pytest.raises(ValueError):
        Part("bad", ((0.0, 0.0),), (2.0, 0.0, 0.0))


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_colours_in_unit_range(shape):
    moved = shape.transformed(identity())
    colours = [c for part in moved for c in part.color]
    assert colours
    assert min(colours) >= 0.0
    assert max(colours) <= 1.0


def test_identity_leaves_points():
    assert apply(identity(), (3.5, -2.0)) == (3.5, -2.0)


def test_translate_and_inverse_round_trip():
    m = compose(translate(-7.0, 4.0), translate(7.0, -4.0))
    assert apply(m, (1.25, 9.0)) == pytest.approx((1.25, 9.0), abs=1e-6)


def test_translate_moves_point():
    assert apply(translate(10.0, -5.0), (1.0, 1.0)) == (11.0, -4.0)


def test_full_turn_returns_point():
    assert apply(rotate(360.0), (12.0, -3.0)) == pytest.approx((12.0, -3.0), abs=1e-5)


def test_quarter_turn_maps_x_axis_to_y_axis():
    assert apply(rotate(90.0), (40.0, 0.0)) == pytest.approx((0.0, 40.0), abs=1e-5)


def test_rotation_preserves_length():
    p = apply(rotate(37.0), (3.0, 4.0))
    assert math.isclose(math.hypot(*p), 5.0, rel_tol=1e-9)


def test_rotation_and_inverse_round_trip():
    m = compose(rotate(-65.0), rotate(65.0))
    assert apply(m, (40.0, 0.0)) == pytest.approx((40.0, 0.0), abs=1e-6)


def test_scale_multiplies_coordinates():
    assert apply(scale(2.0, 3.0), (1.5, -2.0)) == (3.0, -6.0)


def test_compose_applies_rightmost_first():
    a, b, c = translate(5.0, 1.0), rotate(30.0), scale(2.0, 0.5)
    p = (4.0, -6.0)
    expected = apply(a, apply(b, apply(c, p)))
    assert apply(compose(a, b, c), p) == pytest.approx(expected, abs=1e-6)


def test_compose_scale_then_translate_order():
    m = compose(translate(10.0, 0.0), scale(2.0, 2.0))
    assert apply(m, (1.0, 1.0)) == pytest.approx((12.0, 2.0), abs=1e-9)


def test_compose_without_arguments_is_identity():
    assert compose() == identity()


def test_transformed_keeps_structure():
    moved = CAR2.transformed(compose(translate(100.0, 50.0), scale(1.5, 1.5)))
    assert moved.vertex_count() == CAR2.vertex_count()
    assert [p.name for p in moved] == [p.name for p in CAR2]
    assert [p.color for p in moved] == [p.color for p in CAR2]


def test_transformed_maps_each_vertex():
    m = compose(translate(-3.0, 2.0), rotate(45.0))
    moved = SWORD.transformed(m)
    pairs = [
        (v, w)
        for orig, new in zip(SWORD, moved)
        for v, w in zip(orig.vertices, new.vertices)
    ]
    assert len(pairs) == SWORD.vertex_count()
    for v, w in pairs:
        assert w == pytest.approx(apply(m, v), abs=1e-6)


def test_transformed_does_not_modify_original():
    before = HAT["leaf"].vertices
    moved = HAT.transformed(translate(1.0, 1.0))
    assert HAT["leaf"].vertices == before
    assert moved["leaf"].vertices[0] == pytest.approx((4.0, 21.0))


def test_shape_built_from_parts():
    shape = Shape("tri", (Part("t", ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)), (0.5, 0.5, 0.5)),))
    assert shape.vertex_count() == 3
    assert shape["t"].mode is DrawMode.FAN