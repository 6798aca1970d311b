import pytest
import numpy as np

from geometry import EPS, CoordinateKind, Point, distance_squared, grid_cell, make_point, orient, points_equal


@pytest.mark.parametrize("a, b, c, sign", [
    (Point(0, 0), Point(1, 0), Point(0, 1), 1),
    (Point(0, 0), Point(0, 1), Point(1, 0), -1),
    (Point(0, 0), Point(1, 1), Point(3, 3), 0),
    (Point(-1, -1), Point(2, 0), Point(5, 1), 0),
])
def test_orient_sign(a, b, c, sign):
    assert np.sign(orient(a, b, c)) == sign


def test_orient_magnitude():
    assert orient(Point(0, 0), Point(4, 0), Point(0, 3)) == 12
    assert orient(Point(0, 0), Point(0, 3), Point(4, 0)) == -12


def test_orient_does_not_overflow():
    big = 2**62
    a = make_point(np.array([0, 0], dtype=np.int64), CoordinateKind.INTEGER)
    b = make_point(np.array([big, 0], dtype=np.int64), CoordinateKind.INTEGER)
    c = make_point(np.array([0, big], dtype=np.int64), CoordinateKind.INTEGER)
    assert orient(a, b, c) == big * big


def test_distance_squared():
    assert distance_squared(Point(1, 1), Point(4, 5)) == 25
    assert distance_squared(Point(2, 2), Point(2, 2)) == 0


def test_points_equal_integer_is_exact():
    assert points_equal(Point(1, 2), Point(1, 2), CoordinateKind.INTEGER)
    assert not points_equal(Point(1, 2), Point(1, 3), CoordinateKind.INTEGER)


def test_points_equal_float_uses_eps():
    p = Point(1.0, 2.0)
    assert points_equal(p, Point(1.0 + EPS / 2, 2.0 - EPS / 2), CoordinateKind.FLOAT)
    assert not points_equal(p, Point(1.0 + 1e-9, 2.0), CoordinateKind.FLOAT)


def test_make_point_accepts_point_like():
    assert make_point((1, 2), CoordinateKind.INTEGER) == Point(1, 2)
    assert make_point(Point(1.0, 2.0), CoordinateKind.INTEGER) == Point(1, 2)
    p = make_point([1, 2], CoordinateKind.FLOAT)
    assert type(p.x) is float and p == Point(1.0, 2.0)


def test_make_point_rejects_fractional_integers():
    with pytest.raises(ValueError):
        make_point((1.5, 2), CoordinateKind.INTEGER)


def test_point_unpacks():
    x, y = Point(3, 4)
    assert (x, y) == (3, 4)


def test_grid_cell_neighbours_within_eps():
    cx, cy = grid_cell(Point(1.0, -1.0))
    nx, ny = grid_cell(Point(1.0 + EPS, -1.0 - EPS))
    assert abs(cx - nx) <= 1 and abs(cy - ny) <= 1


@pytest.mark.parametrize("value", [1e300, -1e300, 1.7e308, -1.7e308])
def test_grid_cell_huge_coordinates(value):
    assert grid_cell(Point(value, 0.0)) == grid_cell(Point(value, 0.0))
    assert grid_cell(Point(value, 0.0))[0] == int(value)
