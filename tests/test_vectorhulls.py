import math

import pytest

from obvtools.vectorhulls import (
    Vec2,
    angle_to_x,
    convex_hull,
    convex_hull_orientation,
    get_intersection,
    minimum_bounding_box,
    rotate_point,
    rotate_vector,
    tighten_hull,
)

SQUARE = [Vec2(0, 0), Vec2(4, 0), Vec2(4, 2), Vec2(0, 2)]


def rounded(points):
    return sorted((round(p.x, 6) + 0.0, round(p.y, 6) + 0.0) for p in points)


def test_rotate_point_round_trip():
    point, origin = Vec2(3.0, -1.5), Vec2(1.0, 2.0)
    back = rotate_point(rotate_point(point, origin, 0.7), origin, -0.7)
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_rotate_point_keeps_distance_to_origin():
    point, origin = Vec2(5.0, 1.0), Vec2(2.0, 2.0)
    moved = rotate_point(point, origin, 1.2)
    assert math.dist((moved.x, moved.y), (origin.x, origin.y)) == pytest.approx(
        math.dist((point.x, point.y), (origin.x, origin.y))
    )


def test_rotate_vector_matches_rotation_around_zero():
    vector = Vec2(2.0, 3.0)
    a = rotate_vector(vector, 0.4)
    b = rotate_point(vector, Vec2(), 0.4)
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(b.y)


def test_angle_to_x_diagonal():
    assert angle_to_x(Vec2(0, 0), Vec2(1, 1)) == pytest.approx(math.pi / 4)


def test_orientation_values():
    assert convex_hull_orientation(Vec2(0, 0), Vec2(1, 1), Vec2(2, 2)) == 0
    assert convex_hull_orientation(Vec2(0, 0), Vec2(0, 1), Vec2(1, 1)) == 1
    assert convex_hull_orientation(Vec2(0, 0), Vec2(1, 1), Vec2(0, 1)) == 2


def test_convex_hull_drops_inner_point():
    points = SQUARE + [Vec2(2, 1)]
    hull = convex_hull(points)
    assert set(hull) == set(SQUARE)
    assert len(hull) == 4


def test_convex_hull_needs_three_points():
    assert convex_hull([Vec2(0, 0), Vec2(1, 1)]) == []


def test_tighten_hull_removes_colinear_point():
    hull = [Vec2(0, 0), Vec2(1, 0), Vec2(2, 0), Vec2(2, 2), Vec2(0, 2)]
    assert tighten_hull(hull, 0.01) == [Vec2(0, 0), Vec2(2, 0), Vec2(2, 2), Vec2(0, 2)]


def test_tighten_hull_keeps_square():
    assert tighten_hull(SQUARE, 0.01) == SQUARE


def test_bounding_box_of_rectangle_is_itself():
    box = minimum_bounding_box(SQUARE, 0.0)
    assert rounded(box) == rounded(SQUARE)


def test_bounding_box_padding_grows_extent():
    pad = 1.5
    plain = minimum_bounding_box(SQUARE, 0.0)
    padded = minimum_bounding_box(SQUARE, pad)
    width = lambda box: max(p.x for p in box) - min(p.x for p in box)
    height = lambda box: max(p.y for p in box) - min(p.y for p in box)
    assert width(padded) == pytest.approx(width(plain) + 2 * pad)
    assert height(padded) == pytest.approx(height(plain) + 2 * pad)


def test_bounding_box_contains_hull():
    hull = convex_hull([Vec2(1, 1), Vec2(5, 2), Vec2(4, 6), Vec2(0, 4), Vec2(2, 3)])
    box = minimum_bounding_box(hull, 0.0)
    for point in hull:
        assert min(p.x for p in box) - 1e-6 <= point.x <= max(p.x for p in box) + 1e-6
        assert min(p.y for p in box) - 1e-6 <= point.y <= max(p.y for p in box) + 1e-6


def test_intersection_of_crossing_segments():
    cross = get_intersection(Vec2(0, 0), Vec2(2, 2), Vec2(0, 2), Vec2(2, 0))
    assert cross == Vec2(1.0, 1.0)


def test_no_intersection_for_disjoint_segments():
    assert get_intersection(Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), Vec2(1, 2)) is None


def test_no_intersection_for_parallel_segments():
    assert get_intersection(Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), Vec2(1, 1)) is None