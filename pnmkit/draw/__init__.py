"""Geometric rasterizer."""

from pnmkit.draw.rasterizer import (
    draw_circle,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_triangle,
    fill_circle,
    fill_polygon,
    fill_rectangle,
    fill_triangle,
)

__all__ = [
    "draw_line",
    "draw_rectangle",
    "fill_rectangle",
    "draw_circle",
    "fill_circle",
    "draw_triangle",
    "fill_triangle",
    "draw_polygon",
    "fill_polygon",
]
