import numpy as np

from dataclasses import dataclass


EXCLUDE_BY_POINT = "point"
EXCLUDE_BY_X = "x"
EXCLUSION_MODES = (EXCLUDE_BY_POINT, EXCLUDE_BY_X)


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """
    Directed line from start to end.
    Orientation matters: swapping the endpoints flips which side is right.
    """
    start: Point
    end: Point

    def reversed(self) -> "Line":
        return Line(self.end, self.start)


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orientation(line: Line, point: Point) -> float:
    """
    Twice the signed area of the triangle (start, end, point).
    Positive if the point lies right of the directed line,
    zero if it is collinear, negative if it lies left.
    """
    return cross(line.start, line.end, point)


def is_endpoint(line: Line, point: Point, exclusion: str = EXCLUDE_BY_POINT) -> bool:
    if exclusion == EXCLUDE_BY_X:
        # x-only comparison, also drops non-endpoints sharing an endpoint's x
        return point.x == line.start.x or point.x == line.end.x
    return point == line.start or point == line.end


def right_subset(points: list[Point], line: Line, exclusion: str = EXCLUDE_BY_POINT) -> list[Point]:
    """
    Points strictly right of the directed line, in input order.
    Endpoints of the line are filtered out according to `exclusion`.
    """
    return [
        p for p in points
        if not is_endpoint(line, p, exclusion) and orientation(line, p) > 0
    ]


def shoelace_area(points: list[Point]) -> float:
    """
    Signed area of the closed polygon through `points` (shoelace formula).
    Each vertex is paired with the previous one, the first with the last.
    Clockwise polygons give a positive value.
    """
    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    xs_prev = np.roll(xs, 1)
    ys_prev = np.roll(ys, 1)
    return float(np.sum((xs_prev + xs) * (ys_prev - ys)) / 2)


def convex_hull_andrew(points: list[Point]) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Collinear boundary points are dropped. Time complexity: O(n*log(n)).
    """
    points = sorted(set(points))
    if len(points) <= 2:
        return points

    lower = []  # lower hull
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []  # upper hull
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]
