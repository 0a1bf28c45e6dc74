"""Planar vector geometry, segment intersection and polygon queries."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import NamedTuple

EPS = 1e-9


class Point(NamedTuple):
    x: float
    y: float


PointLike = Sequence[float]


def _pt(p: PointLike) -> Point:
    return p if isinstance(p, Point) else Point(p[0], p[1])


def _sub(a: PointLike, b: PointLike) -> Point:
    return Point(a[0] - b[0], a[1] - b[1])


def dot(a: PointLike, b: PointLike) -> float:
    """Dot product."""
    return a[0] * b[0] + a[1] * b[1]


def cross(a: PointLike, b: PointLike) -> float:
    """Z component of the cross product."""
    return a[0] * b[1] - a[1] * b[0]


def norm(a: PointLike) -> float:
    """Squared length."""
    return a[0] * a[0] + a[1] * a[1]


def dist2(a: PointLike, b: PointLike) -> float:
    """Squared distance."""
    return norm(_sub(a, b))


def dist(a: PointLike, b: PointLike) -> float:
    """Euclidean distance."""
    return math.sqrt(dist2(a, b))


def ccw(a: PointLike, b: PointLike, c: PointLike) -> int:
    """1 for a left turn a→b→c, -1 for a right turn, 0 when collinear."""
    res = cross(_sub(b, a), _sub(c, b))
    return (res > EPS) - (res < -EPS)


def is_on_line(a: PointLike, b: PointLike, p: PointLike) -> bool:
    """Whether ``p`` lies on segment ``ab``."""
    a, b, p = _pt(a), _pt(b), _pt(p)
    return ccw(a, b, p) == 0 and min(a, b) <= p <= max(a, b)


def is_cross(s1: PointLike, e1: PointLike, s2: PointLike, e2: PointLike) -> int:
    """-1 for a proper crossing, 1 for touching or overlap, 0 for no contact."""
    ab = ccw(s1, e1, s2) * ccw(s1, e1, e2)
    cd = ccw(s2, e2, s1) * ccw(s2, e2, e1)
    if ab < 0 and cd < 0:
        return -1
    if ab == 0 and cd == 0:
        s1, e1 = sorted((_pt(s1), _pt(e1)))
        s2, e2 = sorted((_pt(s2), _pt(e2)))
        return int(s2 <= e1 and s1 <= e2)
    return int(ab <= 0 and cd <= 0)


def where_cross(s1: PointLike, e1: PointLike, s2: PointLike, e2: PointLike) -> Point | None:
    """Intersection point of the two lines, or None when they are parallel."""
    d1, d2 = _sub(e1, s1), _sub(e2, s2)
    det = cross(d1, d2)
    if abs(det) < EPS:
        return None
    t = cross(_sub(s2, s1), d2) / det
    return Point(s1[0] + d1[0] * t, s1[1] + d1[1] * t)


@dataclass
class Polygon:
    """A polygon given by its vertices in order."""

    dots: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.dots = [_pt(p) for p in self.dots]

    def build_convex_hull(self) -> None:
        """Replace the vertices by their convex hull, counter-clockwise."""
        if len(self.dots) < 3:
            return
        pivot = min(self.dots)
        rest = list(self.dots)
        rest.remove(pivot)

        def order(a: Point, b: Point) -> int:
            turn = ccw(pivot, a, b)
            if turn:
                return -1 if turn > 0 else 1
            da, db = dist2(pivot, a), dist2(pivot, b)
            return (da > db) - (da < db)

        rest.sort(key=cmp_to_key(order))
        hull: list[Point] = []
        for p in [pivot, *rest]:
            while len(hull) >= 2 and ccw(hull[-2], hull[-1], p) <= 0:
                hull.pop()
            hull.append(p)
        self.dots = hull

    def point_in_polygon(self, p: PointLike) -> int:
        """1 inside, 0 outside, -1 on the boundary (ray casting)."""
        p = _pt(p)
        ray = Point(1e9, p.y + 1)
        crossings = 0
        for a, b in self.make_lines():
            if is_on_line(a, b, p):
                return -1
            if is_cross(p, ray, a, b) == -1:
                crossings += 1
        return crossings % 2

    def point_in_convex(self, p: PointLike) -> int:
        """1 inside, 0 outside, -1 on the boundary of a counter-clockwise hull."""
        dots = self.dots
        if len(dots) < 3:
            return 0
        first, second, last = dots[0], dots[1], dots[-1]
        if ccw(first, second, p) < 0 or ccw(first, last, p) > 0:
            return 0
        if ccw(first, second, p) == 0:
            return -1 if is_on_line(first, second, p) else 0
        if ccw(first, last, p) == 0:
            return -1 if is_on_line(first, last, p) else 0
        lo, hi = 1, len(dots) - 1
        while lo + 1 < hi:
            mid = (lo + hi) // 2
            if ccw(first, dots[mid], p) > 0:
                lo = mid
            else:
                hi = mid
        pos = ccw(dots[lo], dots[hi], p)
        return -1 if pos == 0 else int(pos > 0)

    def contain(self, other: Polygon) -> bool:
        """Whether every vertex of ``other`` lies in this convex polygon."""
        return all(self.point_in_convex(p) for p in other.dots)

    def rotating_calipers(self) -> float:
        """Diameter of this convex polygon."""
        dots = self.dots
        n = len(dots)
        if n < 2:
            return 0.0
        j = 1
        best = 0.0
        for a, b in self.make_lines():
            while cross(_sub(b, a), _sub(dots[(j + 1) % n], dots[j])) > 0:
                j = (j + 1) % n
            best = max(best, dist(a, dots[j]))
        return best

    def area(self) -> float:
        """Enclosed area by the shoelace formula."""
        return abs(sum(cross(a, b) for a, b in self.make_lines())) / 2.0

    def make_lines(self) -> list[tuple[Point, Point]]:
        """The edges as (start, end) pairs, closing back to the first vertex."""
        return list(zip(self.dots, self.dots[1:] + self.dots[:1]))