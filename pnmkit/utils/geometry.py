"""Leaf-node geometry helpers for the rasterizer. No grid imports."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence, Union


class Point(NamedTuple):
    x: int
    y: int


PointLike = Union[Point, Sequence[int]]


def as_point(p: PointLike) -> Point:
    x, y = p
    return Point(int(x), int(y))


def as_points(points: Iterable[PointLike]) -> list[Point]:
    return [as_point(p) for p in points]


def bbox(points: Sequence[Point]) -> tuple[int, int, int, int]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def edges(points: Sequence[Point]) -> list[tuple[Point, Point]]:
    """Consecutive vertex pairs, closing last → first."""
    n = len(points)
    return [(points[i], points[(i + 1) % n]) for i in range(n)]


def inverse_slope(p: Point, q: Point) -> float:
    """dx/dy along p → q; 0.0 for horizontal edges, whose scan loop never advances."""
    dy = q.y - p.y
    if dy == 0:
        return 0.0
    return (q.x - p.x) / dy


def rectangle_corners(origin: Point, width: int, height: int) -> list[Point]:
    """Corners clockwise from origin: origin, +width, +width+height, +height."""
    x, y = origin
    return [Point(x, y), Point(x + width, y), Point(x + width, y + height), Point(x, y + height)]
