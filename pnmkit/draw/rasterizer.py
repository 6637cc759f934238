"""Hard-edged rasterization of lines and shapes onto a Grid.

Every operation takes the target grid, integer geometry and a fill value
of the grid's sample kind. Writes outside the grid are clipped silently.
Filled rectangles, triangles and polygons also stroke their outline, so a
filled shape always covers the pixels of its outlined twin.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from pnmkit.core.grid import Grid, Sample
from pnmkit.utils.geometry import (
    Point,
    PointLike,
    as_point,
    as_points,
    bbox,
    edges,
    inverse_slope,
    rectangle_corners,
)


# ── Lines and outlines ──


def draw_line(grid: Grid, p1: PointLike, p2: PointLike, value: Sample) -> None:
    """DDA line: steps = max(|dx|, |dy|), coordinates truncated at every step."""
    _line(grid, as_point(p1), as_point(p2), grid.normalize(value))


def draw_rectangle(grid: Grid, origin: PointLike, width: int, height: int, value: Sample) -> None:
    corners = rectangle_corners(as_point(origin), width, height)
    _outline(grid, corners, grid.normalize(value))


def draw_triangle(grid: Grid, p1: PointLike, p2: PointLike, p3: PointLike, value: Sample) -> None:
    _outline(grid, as_points([p1, p2, p3]), grid.normalize(value))


def draw_polygon(grid: Grid, points: Iterable[PointLike], value: Sample) -> None:
    """Connect each vertex to the next, wrapping last → first."""
    _outline(grid, as_points(points), grid.normalize(value))


def draw_circle(grid: Grid, center: PointLike, radius: int, value: Sample) -> None:
    """Disc predicate dx² + dy² ≤ r², identical to fill_circle."""
    _disc(grid, as_point(center), radius, grid.normalize(value))


# ── Filled shapes ──


def fill_rectangle(grid: Grid, origin: PointLike, width: int, height: int, value: Sample) -> None:
    """Every cell of the block anchored at origin, up to and including its outline.

    The outline runs through origin + (width, height), so the filled block is
    (|width| + 1) × (|height| + 1) cells: a 2×2 rectangle sets 9 cells and a
    0×0 rectangle sets the origin alone.
    """
    x, y = as_point(origin)
    x0, x1 = sorted((x, x + width))
    y0, y1 = sorted((y, y + height))
    value = grid.normalize(value)

    x0, x1 = max(x0, 0), min(x1, grid.width - 1)
    y0, y1 = max(y0, 0), min(y1, grid.height - 1)
    if x0 <= x1 and y0 <= y1:
        grid.data[y0 : y1 + 1, x0 : x1 + 1] = value


def fill_circle(grid: Grid, center: PointLike, radius: int, value: Sample) -> None:
    _disc(grid, as_point(center), radius, grid.normalize(value))


def fill_triangle(grid: Grid, p1: PointLike, p2: PointLike, p3: PointLike, value: Sample) -> None:
    """Two-pass scan conversion: top → middle vertex, then middle → bottom.

    Two edge intercepts advance by their dx/dy every row; each row fills
    [min, max] of the truncated intercepts.
    """
    vertices = as_points([p1, p2, p3])
    value = grid.normalize(value)
    top, mid, bottom = sorted(vertices, key=lambda p: p.y)

    long_slope = inverse_slope(top, bottom)
    x_long = _scan(grid, top.y, mid.y, float(top.x), inverse_slope(top, mid), float(top.x), long_slope, value)
    _scan(grid, mid.y + 1, bottom.y, float(mid.x), inverse_slope(mid, bottom), x_long, long_slope, value)

    _outline(grid, vertices, value)


def fill_polygon(grid: Grid, points: Iterable[PointLike], value: Sample) -> None:
    """Single-intercept scanline fill.

    Each non-horizontal edge records its x-intercept on every row it spans;
    a later edge overwrites an earlier one on the same row. Each recorded
    row is then filled from its intercept to the bounding box's right edge.
    Concave shapes, or rows crossed by several edges, are not filled
    correctly.
    """
    vertices = as_points(points)
    if not vertices:
        return
    value = grid.normalize(value)
    _, _, max_x, _ = bbox(vertices)

    intercepts: dict[int, int] = {}
    for p, q in edges(vertices):
        if p.y == q.y:
            continue
        lo, hi = sorted((p.y, q.y))
        for y in range(max(lo, 0), min(hi, grid.height - 1) + 1):
            intercepts[y] = int(p.x + (y - p.y) * (q.x - p.x) / (q.y - p.y))

    for y, x in intercepts.items():
        _span(grid, y, x, max_x, value)

    _outline(grid, vertices, value)


# ── Internals (value already normalized) ──


def _plot(grid: Grid, x: int, y: int, value: Sample) -> None:
    if 0 <= x < grid.width and 0 <= y < grid.height:
        grid.data[y, x] = value


def _line(grid: Grid, p1: Point, p2: Point, value: Sample) -> None:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        _plot(grid, p1.x, p1.y, value)
        return

    x_step = dx / steps
    y_step = dy / steps

    # The major axis moves exactly ±1 per step, so the steps that land on the
    # grid along it form one contiguous range.
    if abs(dx) >= abs(dy):
        start, size, sign = p1.x, grid.width, 1 if dx > 0 else -1
    else:
        start, size, sign = p1.y, grid.height, 1 if dy > 0 else -1
    if sign > 0:
        first, last = -start, size - 1 - start
    else:
        first, last = start - (size - 1), start
    first = max(first, 0)
    last = min(last, steps - 1)

    if first <= last:
        x = p1.x + first * x_step if first else float(p1.x)
        y = p1.y + first * y_step if first else float(p1.y)
        for _ in range(first, last + 1):
            _plot(grid, int(x), int(y), value)
            x += x_step
            y += y_step
    # Last sample is the endpoint itself, free of accumulated float error.
    _plot(grid, p2.x, p2.y, value)


def _outline(grid: Grid, vertices: list[Point], value: Sample) -> None:
    if len(vertices) == 1:
        _plot(grid, vertices[0].x, vertices[0].y, value)
        return
    for p, q in edges(vertices):
        _line(grid, p, q, value)


def _scan(
    grid: Grid,
    y_from: int,
    y_to: int,
    xa: float,
    slope_a: float,
    xb: float,
    slope_b: float,
    value: Sample,
) -> float:
    """Fill rows y_from..y_to between two advancing intercepts. Returns the final xb.

    Rows above the grid are stepped over in one jump; scanning stops at the
    bottom edge.
    """
    if y_from < 0:
        skipped = min(-y_from, max(y_to - y_from + 1, 0))
        xa += slope_a * skipped
        xb += slope_b * skipped
        y_from += skipped
    for y in range(y_from, min(y_to, grid.height - 1) + 1):
        _span(grid, y, xa, xb, value)
        xa += slope_a
        xb += slope_b
    return xb


def _span(grid: Grid, y: int, xa: float, xb: float, value: Sample) -> None:
    """Fill row y over [int(min), int(max)] inclusive, clipped."""
    if not 0 <= y < grid.height:
        return
    lo = max(int(min(xa, xb)), 0)
    hi = min(int(max(xa, xb)), grid.width - 1)
    if lo <= hi:
        grid.data[y, lo : hi + 1] = value


def _disc(grid: Grid, center: Point, radius: int, value: Sample) -> None:
    # Only the part of the bounding square that lies on the grid.
    x_offsets = np.arange(max(-radius, -center.x), min(radius, grid.width - 1 - center.x) + 1)
    y_offsets = np.arange(max(-radius, -center.y), min(radius, grid.height - 1 - center.y) + 1)
    if x_offsets.size == 0 or y_offsets.size == 0:
        return
    dx, dy = np.meshgrid(x_offsets, y_offsets)
    inside = dx * dx + dy * dy <= radius * radius
    grid.data[center.y + dy[inside], center.x + dx[inside]] = value
