import logging

from typing import Iterable, TextIO

import numpy as np

from geometry import CoordinateKind, Point

logger = logging.getLogger(__name__)


DEMO_POINTS = [
    Point(3, 7), Point(5, 4), Point(9, 21), Point(6, 14), Point(0, 20), Point(2, 0),
    Point(-5, 10), Point(10, 8), Point(0, 2), Point(0, 0), Point(4, 0),
]

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


class PointFormatError(ValueError):
    pass


def _parse_number(token: str, kind: CoordinateKind, line_no: int):
    try:
        if kind is CoordinateKind.INTEGER:
            return int(token)
        return float(token)
    except ValueError:
        raise PointFormatError(
            f"Line {line_no}: expected {kind.value} coordinate, got {token!r}"
        ) from None


def read_points(stream: TextIO, kind: CoordinateKind = CoordinateKind.INTEGER) -> list[Point]:
    """
    Read points in the "count, then `x y` per line" format.
    Blank lines are skipped.
    """
    lines = (
        (line_no, line.strip())
        for line_no, line in enumerate(stream, start=1)
        if line.strip()
    )

    header = next(lines, None)
    if header is None:
        raise PointFormatError("Input is empty, expected a point count")

    line_no, text = header
    try:
        n = int(text)
    except ValueError:
        raise PointFormatError(f"Line {line_no}: expected a point count, got {text!r}") from None
    if n < 0:
        raise PointFormatError(f"Line {line_no}: point count must be non-negative, got {n}")

    points = []
    for line_no, text in lines:
        if len(points) == n:
            logger.warning("Ignoring content after %d declared points (line %d)", n, line_no)
            break
        tokens = text.split()
        if len(tokens) != 2:
            raise PointFormatError(f"Line {line_no}: expected 'x y', got {text!r}")
        x, y = (_parse_number(t, kind, line_no) for t in tokens)
        points.append(Point(x, y))

    if len(points) < n:
        raise PointFormatError(f"Expected {n} points, got {len(points)}")

    logger.info("Read %d points", n)
    return points


def _format_number(value) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


def write_points(stream: TextIO, points: Iterable[Point]):
    points = list(points)
    stream.write(f"{len(points)}\n")
    for p in points:
        stream.write(f"{_format_number(p.x)} {_format_number(p.y)}\n")


def generate_random_points(
    n: int,
    distribution: str = "uniform",
    seed: int | None = 42,
    kind: CoordinateKind = CoordinateKind.FLOAT,
) -> list[Point]:
    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        xs = rng.uniform(0, 1000, n)
        ys = rng.uniform(0, 1000, n)
    elif distribution == "circle":
        angle = rng.uniform(0, 2 * np.pi, n)
        r = 500 * np.sqrt(rng.uniform(0, 1, n))
        xs = 500 + r * np.cos(angle)
        ys = 500 + r * np.sin(angle)
    elif distribution == "gaussian":
        xs = rng.normal(500, 150, n)
        ys = rng.normal(500, 150, n)
    elif distribution == "clusters":
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = rng.integers(0, n_clusters, n)
        xs = rng.normal(centers[labels, 0], 50)
        ys = rng.normal(centers[labels, 1], 50)
    else:
        raise ValueError(f"Unknown distribution {distribution!r}, expected one of {DISTRIBUTIONS}")

    if kind is CoordinateKind.INTEGER:
        return [Point(int(x), int(y)) for x, y in zip(np.rint(xs), np.rint(ys))]
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
