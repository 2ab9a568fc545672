from __future__ import annotations
"""
Polar rasterizer: walks radial and angular ranges around a center and writes
the resulting pixels to a Canvas. Every function returns the number of
in-bounds writes; points that fall off the canvas are dropped by the Canvas.
"""
import math
from typing import Iterable, Tuple

import numpy as np

from canvas import Canvas
from config import Color, LINE_COLOR
from labels import draw_string
from layout import TWO_PI, to_pixels


def draw_radial_fill(canvas: Canvas, center: Tuple[int, int], max_radius: float, color: Color) -> int:
    """Set every pixel within `max_radius` of `center` (inclusive)."""
    if max_radius < 0:
        return 0
    cx, cy = center
    ys, xs = np.mgrid[0:canvas.height, 0:canvas.width]
    d2 = (xs - cx) ** 2 + (ys - cy) ** 2
    mask = d2 <= float(max_radius) ** 2
    return canvas.set_many(xs[mask], ys[mask], color)


def spoke_points(center: Tuple[int, int], angle: float, max_radius: float, step: float = 0.1):
    cx, cy = center
    radii = np.arange(0.0, float(max_radius), float(step))
    xs = to_pixels(cx + math.cos(angle) * radii)
    ys = to_pixels(cy + math.sin(angle) * radii)
    return xs, ys


def draw_spoke_line(
    canvas: Canvas,
    center: Tuple[int, int],
    angle: float,
    max_radius: float,
    color: Color,
    step: float = 0.1,
) -> int:
    xs, ys = spoke_points(center, angle, max_radius, step)
    return canvas.set_many(xs, ys, color)


def ring_points(center: Tuple[int, int], radius: float, arc_spacing: float = 0.5):
    """Points of a circle outline sampled over [0, 2π) at most `arc_spacing` px apart."""
    if radius <= 0:
        return np.zeros(0, dtype=np.int64), np.zeros(0, dtype=np.int64)
    cx, cy = center
    n = max(8, int(math.ceil(TWO_PI * radius / float(arc_spacing))))
    theta = np.arange(n) * (TWO_PI / n)
    xs = to_pixels(cx + np.cos(theta) * radius)
    ys = to_pixels(cy + np.sin(theta) * radius)
    return xs, ys


def draw_ring_outline(
    canvas: Canvas,
    center: Tuple[int, int],
    ring_radii: Iterable[float],
    color: Color,
    arc_spacing: float = 0.5,
) -> int:
    written = 0
    for rr in ring_radii:
        xs, ys = ring_points(center, float(rr), arc_spacing)
        written += canvas.set_many(xs, ys, color)
    return written


def draw_label(canvas: Canvas, anchor: Tuple[int, int], text: str, color: Color = LINE_COLOR) -> int:
    return draw_string(canvas, anchor[0], anchor[1], text, color)
