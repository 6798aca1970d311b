import math

from dataclasses import dataclass
from enum import Enum


EPS = 1e-12


class CoordinateKind(Enum):
    INTEGER = "integer"
    FLOAT = "float"


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


def make_point(p, kind: CoordinateKind) -> Point:
    """
    Convert a point-like object (Point, object with x/y or a 2-sequence)
    into a Point with coordinates in the widened domain of `kind`:
    python int for INTEGER (no overflow), python float for FLOAT.
    """
    if hasattr(p, "x") and hasattr(p, "y"):
        x, y = p.x, p.y
    else:
        x, y = p

    if kind is CoordinateKind.FLOAT:
        return Point(float(x), float(y))

    xi, yi = int(x), int(y)
    if xi != x or yi != y:
        raise ValueError(f"Point ({x}, {y}) has non-integral coordinates")
    return Point(xi, yi)


def orient(a: Point, b: Point, c: Point):
    """
    Cross product of segments ab and ac.
    Positive for a counter-clockwise turn a -> b -> c,
    negative for a clockwise one, zero when the points are collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def distance_squared(a: Point, b: Point):
    dx = b.x - a.x
    dy = b.y - a.y
    return dx * dx + dy * dy


def points_equal(a: Point, b: Point, kind: CoordinateKind = CoordinateKind.INTEGER) -> bool:
    if kind is CoordinateKind.INTEGER:
        return a.x == b.x and a.y == b.y
    return abs(a.x - b.x) <= EPS and abs(a.y - b.y) <= EPS


def _cell(c: float) -> int:
    q = c / EPS
    if math.isinf(q):
        # doubles this large are integral and further apart than EPS, so equal means identical
        return int(c)
    return math.floor(q)


def grid_cell(p: Point) -> tuple[int, int]:
    """
    Cell of an EPS-sized grid containing p.
    Points equal within EPS always fall into the same or adjacent cells.
    Cells are only candidate buckets, unequal points may share one.
    """
    return _cell(p.x), _cell(p.y)
