import math
import os

from typing import Iterable, TextIO

from errors import MalformedInputError
from geometry import Point


def _parse_line(line: str, line_number: int) -> Point:
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedInputError(
            f'expected two coordinates "X Y", got {len(tokens)} token(s)', line_number, line
        )
    try:
        x, y = map(float, tokens)
    except ValueError:
        raise MalformedInputError(f'non-numeric coordinate in {line.strip()!r}', line_number, line) from None
    if not (math.isfinite(x) and math.isfinite(y)):
        raise MalformedInputError(f'non-finite coordinate in {line.strip()!r}', line_number, line)
    return Point(x, y)


def _count_header(line: str) -> int | None:
    tokens = line.split()
    if len(tokens) != 1:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def parse_points(lines: Iterable[str]) -> list[Point]:
    """
    Parse points from lines of the form "X Y".
    Blank lines are skipped. The first non-blank line may hold a single
    integer, the number of points that follow.
    """
    points = []
    expected = None
    seen_content = False
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if not seen_content:
            seen_content = True
            expected = _count_header(line)
            if expected is not None:
                if expected < 0:
                    raise MalformedInputError(f'negative point count {expected}', line_number, line)
                continue
        points.append(_parse_line(line, line_number))

    if expected is not None and expected != len(points):
        raise MalformedInputError(f'header announces {expected} points, found {len(points)}')
    return points


def read_points(path: str | os.PathLike) -> list[Point]:
    with open(path, 'r', encoding='utf-8') as f:
        return parse_points(f)


def load_points(source: str | os.PathLike | TextIO | Iterable[str]) -> list[Point]:
    """
    Load points from a file path, an open text stream or an iterable of lines.
    """
    if isinstance(source, (str, os.PathLike)):
        return read_points(source)
    return parse_points(source)
