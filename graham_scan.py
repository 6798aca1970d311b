import logging

from enum import Enum
from typing import Iterable

from bounded_stack import BoundedStack
from geometry import (
    CoordinateKind,
    Point,
    distance_squared,
    grid_cell,
    make_point,
    orient,
    points_equal,
)
from stable_sort import merge_sort

logger = logging.getLogger(__name__)


class CollinearityPolicy(Enum):
    KEEP_EXTREME_ONLY = "extreme"
    KEEP_ALL_ON_EDGES = "all"


class GrahamScan:
    def __init__(
        self,
        policy: CollinearityPolicy = CollinearityPolicy.KEEP_EXTREME_ONLY,
        kind: CoordinateKind = CoordinateKind.INTEGER,
    ):
        self._policy = policy
        self._kind = kind
        self.points: list[Point] = []
        self.hull: list[Point] = []

    @property
    def policy(self) -> CollinearityPolicy:
        return self._policy

    @property
    def kind(self) -> CoordinateKind:
        return self._kind

    def set_points(self, points: Iterable):
        """
        Replace the held input with an owned copy of `points`.
        Geometry is not checked here, only coordinates are converted to the builder's kind.
        """
        self.points = [make_point(p, self._kind) for p in points]

    def data(self) -> list[Point]:
        return list(self.hull)

    def size(self) -> int:
        return len(self.hull)

    def build(self):
        """
        Compute the convex hull of the held points with Graham's scan.
        The hull starts at the anchor (lowest y, then lowest x) and goes counter-clockwise.

        Time complexity: O(n*log(n))
        """
        points = self.dedup(self.points)
        logger.debug(
            "Building hull of %d points (%d duplicates removed), policy=%s",
            len(points), len(self.points) - len(points), self._policy.name,
        )

        if len(points) <= 1:
            self.hull = points
            return

        self.move_anchor_to_front(points)
        anchor = points[0]
        rest = points[1:]

        def less(a: Point, b: Point) -> bool:
            o = orient(anchor, a, b)
            if o != 0:
                return o > 0
            return distance_squared(anchor, a) < distance_squared(anchor, b)

        merge_sort(rest, less)
        logger.debug("Points sorted by angle around %s: %s", anchor, rest)
        rest = self.prune_collinear(anchor, rest)
        logger.debug("Anchor %s, %d points left after pruning", anchor, len(rest))

        if len(rest) == 1:
            self.hull = [anchor, rest[0]]
            return

        self.hull = self.scan(anchor, rest)
        logger.debug("Hull has %d vertices", len(self.hull))

    def dedup(self, points: list[Point]) -> list[Point]:
        """
        Remove duplicate points keeping the first occurrence of each.
        """
        if self._kind is CoordinateKind.INTEGER:
            seen = set()
            unique = []
            for p in points:
                if p not in seen:
                    seen.add(p)
                    unique.append(p)
            return unique

        # epsilon equality is not transitive, so compare against kept points in neighbouring cells
        cells: dict[tuple[int, int], list[Point]] = {}
        unique = []
        for p in points:
            cx, cy = grid_cell(p)
            duplicate = any(
                points_equal(p, q, self._kind)
                for dx in (-1, 0, 1)
                for dy in (-1, 0, 1)
                for q in cells.get((cx + dx, cy + dy), ())
            )
            if not duplicate:
                cells.setdefault((cx, cy), []).append(p)
                unique.append(p)
        return unique

    @staticmethod
    def move_anchor_to_front(points: list[Point]):
        start = 0
        for i, p in enumerate(points):
            cur = points[start]
            if p.y < cur.y or p.y == cur.y and p.x < cur.x:
                start = i
        points[0], points[start] = points[start], points[0]

    def prune_collinear(self, anchor: Point, rest: list[Point]) -> list[Point]:
        """
        Handle runs of points lying on one ray from the anchor.
        Assumes `rest` is sorted by angle, nearer points first within a run.

        KEEP_EXTREME_ONLY keeps only the farthest point of every run.
        KEEP_ALL_ON_EDGES keeps the runs (the scan drops interior ones) but reverses
        the last run, so the closing edge is walked from its far end back to the anchor.
        In both cases fully collinear input collapses to its farthest point.
        """
        if orient(anchor, rest[0], rest[-1]) == 0:
            return [rest[-1]]

        if self._policy is CollinearityPolicy.KEEP_EXTREME_ONLY:
            return [
                p for i, p in enumerate(rest)
                if i + 1 == len(rest) or orient(anchor, p, rest[i + 1]) != 0
            ]

        last_run = len(rest) - 1
        while last_run > 0 and orient(anchor, rest[last_run - 1], rest[-1]) == 0:
            last_run -= 1
        return rest[:last_run] + rest[last_run:][::-1]

    def scan(self, anchor: Point, rest: list[Point]) -> list[Point]:
        strict = self._policy is CollinearityPolicy.KEEP_ALL_ON_EDGES

        stack: BoundedStack[Point] = BoundedStack()
        stack.push(anchor)
        stack.push(rest[0])
        trace = logger.isEnabledFor(logging.DEBUG)
        if trace:
            logger.debug("Scan starts with stack %s", stack.to_list())
        for p in rest[1:]:
            while stack.size() >= 2:
                turn = orient(stack.second_from_top(), stack.top(), p)
                if turn < 0 or turn == 0 and not strict:
                    popped = stack.pop()
                    if trace:
                        logger.debug("Popped %s, stack %s", popped, stack.to_list())
                else:
                    break
            stack.push(p)
            if trace:
                logger.debug("Pushed %s, stack %s", p, stack.to_list())

        hull = stack.to_list()
        stack.clear()
        return hull


def convex_hull(
    points: Iterable,
    policy: CollinearityPolicy = CollinearityPolicy.KEEP_EXTREME_ONLY,
    kind: CoordinateKind = CoordinateKind.INTEGER,
) -> list[Point]:
    builder = GrahamScan(policy=policy, kind=kind)
    builder.set_points(points)
    builder.build()
    return builder.data()
