import pytest
import numpy as np

from geometry import (
    EXCLUDE_BY_POINT,
    EXCLUDE_BY_X,
    Line,
    Point,
    convex_hull_andrew,
    cross,
    orientation,
    right_subset,
    shoelace_area,
)


@pytest.mark.parametrize("point, sign", [
    (Point(2, 3), 1),
    (Point(2, 0), 0),
    (Point(7, 0), 0),
    (Point(2, -3), -1),
])
def test_orientation_sign(point, sign):
    line = Line(Point(0, 0), Point(4, 0))
    assert np.sign(orientation(line, point)) == sign


def test_orientation_formula():
    line = Line(Point(1, 2), Point(4, 6))
    p = Point(-1, 5)
    assert orientation(line, p) == (4 - 1) * (5 - 2) - (6 - 2) * (-1 - 1)
    assert orientation(line, p) == cross(line.start, line.end, p)


def test_reversed_line_flips_side():
    line = Line(Point(0, 0), Point(4, 0))
    p = Point(1, 1)
    assert line.reversed() == Line(Point(4, 0), Point(0, 0))
    assert orientation(line, p) == -orientation(line.reversed(), p)


def test_right_subset_keeps_input_order():
    line = Line(Point(0, 0), Point(4, 0))
    points = [Point(3, 1), Point(1, -1), Point(2, 5), Point(1, 1)]
    assert right_subset(points, line) == [Point(3, 1), Point(2, 5), Point(1, 1)]


def test_right_subset_excludes_endpoints():
    line = Line(Point(0, 0), Point(4, 0))
    points = [Point(0, 0), Point(4, 0), Point(0, 3), Point(4, 1), Point(2, 1)]
    assert right_subset(points, line, EXCLUDE_BY_POINT) == [Point(0, 3), Point(4, 1), Point(2, 1)]
    # x-only filter also drops (0, 3) and (4, 1)
    assert right_subset(points, line, EXCLUDE_BY_X) == [Point(2, 1)]


def test_shoelace_area_square():
    clockwise = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
    assert shoelace_area(clockwise) == 4
    assert shoelace_area(clockwise[::-1]) == -4


def test_shoelace_area_degenerate():
    assert shoelace_area([]) == 0
    assert shoelace_area([Point(1, 1)]) == 0
    assert shoelace_area([Point(0, 0), Point(2, 0)]) == 0


def test_shoelace_area_matches_reference():
    np.random.seed(0)
    angles = np.sort(np.random.rand(50) * 2 * np.pi)[::-1]
    polygon = [Point(np.cos(a), np.sin(a)) for a in angles]
    xs = np.array([p.x for p in polygon])
    ys = np.array([p.y for p in polygon])
    reference = 0.5 * np.abs(np.dot(xs, np.roll(ys, 1)) - np.dot(ys, np.roll(xs, 1)))
    assert np.isclose(shoelace_area(polygon), reference)


def test_convex_hull_andrew():
    points = [Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 1), Point(0, 2)]
    assert sorted(convex_hull_andrew(points)) == [Point(0, 0), Point(0, 2), Point(2, 0), Point(2, 2)]


def test_point_ordering():
    assert sorted([Point(1, 0), Point(0, 5), Point(0, 1)]) == [Point(0, 1), Point(0, 5), Point(1, 0)]
    assert Point(1.0, 2.0) == Point(1, 2)
    assert len({Point(1, 2), Point(1.0, 2.0)}) == 1
