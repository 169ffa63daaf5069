import math

from typing import Iterable

from config import HullConfig
from errors import InsufficientPointsError, MalformedInputError
from geometry import EXCLUDE_BY_POINT, Line, Point, orientation, right_subset, shoelace_area
from logger import logger
from point_source import load_points


def farthest_point(points: list[Point], line: Line) -> Point:
    """
    Point with the largest orientation value relative to the line.
    On ties the first one encountered wins.
    """
    best = points[0]
    best_distance = orientation(line, best)
    for p in points[1:]:
        distance = orientation(line, p)
        if distance > best_distance:
            best, best_distance = p, distance
    return best


def find_hull(hull: list[Point], candidates: list[Point], line: Line, exclusion: str = EXCLUDE_BY_POINT):
    """
    Insert into `hull` every hull vertex lying right of `line`.
    `line.start` must already be in `hull`; new vertices go right after it.

    Uses an explicit stack instead of recursion. Sub-lines are visited in the
    same order as the recursive formulation: (start -> farthest) fully before
    (farthest -> end).
    """
    stack = [(candidates, line)]
    while stack:
        pool, current = stack.pop()
        outside = right_subset(pool, current, exclusion)
        if not outside:
            continue

        point = farthest_point(outside, current)
        hull.insert(hull.index(current.start) + 1, point)

        # points inside the triangle cannot be outside the finer boundary,
        # so both halves only search `outside`
        stack.append((outside, Line(point, current.end)))
        stack.append((outside, Line(current.start, point)))


def extreme_points(points: list[Point]) -> tuple[Point, Point]:
    """
    Points with minimal and maximal x. The first one encountered wins on ties.
    """
    a = b = points[0]
    for p in points[1:]:
        if p.x < a.x:
            a = p
        if p.x > b.x:
            b = p
    return a, b


def build_hull(points: list[Point], exclusion: str = EXCLUDE_BY_POINT) -> list[Point]:
    """
    QuickHull driver. Returns hull vertices in clockwise order,
    starting at the point with minimal x.
    """
    n_distinct = len(set(points))
    if n_distinct < 3:
        raise InsufficientPointsError(n_distinct)

    a, b = extreme_points(points)
    if a == b:
        # every point shares one x, the hull is the vertical segment between
        # the lowest and highest point
        a = min(points, key=lambda p: p.y)
        b = max(points, key=lambda p: p.y)
    logger.debug(f'QuickHull: {len(points)} points, extremes {a} and {b}')

    ab = Line(a, b)
    ba = ab.reversed()
    subset_right = right_subset(points, ab, exclusion)
    subset_left = right_subset(points, ba, exclusion)

    hull = [a, b]
    find_hull(hull, subset_right, ab, exclusion)
    find_hull(hull, subset_left, ba, exclusion)

    logger.debug(f'QuickHull: {len(hull)} hull vertices')
    return hull


class QuickHull:
    def __init__(self, config: HullConfig | None = None):
        self.config = config or HullConfig()

    def compute_hull(self, points: list[Point]) -> list[Point]:
        return build_hull(points, exclusion=self.config.exclusion)


def _format_number(value: float) -> str:
    return f'{value:.15g}'


class HullResult:
    """
    Input points together with their convex hull and its area.
    """
    def __init__(self, points: list[Point], hull: list[Point]):
        self._points = tuple(points)
        self._hull = tuple(hull)
        self._area = shoelace_area(hull)

    def all_points(self) -> list[Point]:
        return list(self._points)

    def hull(self) -> list[Point]:
        """
        Hull vertices, clockwise, starting at the point with minimal x.
        """
        return list(self._hull)

    def area(self) -> float:
        return self._area

    @property
    def is_degenerate(self) -> bool:
        """
        True if the hull collapsed to a segment (collinear input).
        """
        return len(self._hull) <= 2 or self._area == 0

    def describe(self) -> str:
        lines = ['ALL POINTS:', '']
        lines += [f'X:{_format_number(p.x)} Y:{_format_number(p.y)}' for p in self._points]
        lines += ['', '', 'CONVEX HULL:', '']
        lines += [f'X:{_format_number(p.x)} Y:{_format_number(p.y)}' for p in self._hull]
        lines += ['', '', f'Area:  {_format_number(self._area)}']
        return '\n'.join(lines)

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return f'HullResult(n_points={len(self._points)}, hull={list(self._hull)}, area={self._area})'


def _to_point(item, index: int) -> Point:
    if isinstance(item, Point):
        point = item
    else:
        point = _pair_to_point(item, index)
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise MalformedInputError(f'point #{index} has a non-finite coordinate: {point}')
    return point


def _pair_to_point(item, index: int) -> Point:
    try:
        x, y = item
        point = Point(float(x), float(y))
    except (TypeError, ValueError):
        raise MalformedInputError(f'point #{index} is not an (x, y) pair: {item!r}') from None
    return point


def construct(points: Iterable, config: HullConfig | None = None) -> HullResult:
    """
    Build the convex hull of (x, y) pairs or Points.
    """
    all_points = [_to_point(item, i) for i, item in enumerate(points)]
    hull = QuickHull(config).compute_hull(all_points)
    return HullResult(all_points, hull)


def construct_from_source(source, config: HullConfig | None = None) -> HullResult:
    """
    Build the convex hull of points read from a path, a text stream
    or an iterable of "X Y" lines.
    """
    return construct(load_points(source), config)
