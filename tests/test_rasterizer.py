"""Tests for rasterizer.py polar drawing primitives."""
import math
import numpy as np
import pytest
from canvas import Canvas
from config import BACKGROUND, FILL_COLOR, LINE_COLOR
from layout import spoke_angle
from rasterizer import (
    draw_radial_fill, draw_spoke_line, draw_ring_outline, draw_label,
    spoke_points, ring_points,
)

CENTER = (127, 127)


# --- draw_radial_fill ---

def test_fill_covers_disk_inclusive(blank):
    draw_radial_fill(blank, CENTER, 102.0, FILL_COLOR)
    assert blank.get(127, 127) == FILL_COLOR
    assert blank.get(229, 127) == FILL_COLOR
    assert blank.get(127, 25) == FILL_COLOR
    assert blank.get(230, 127) == BACKGROUND
    assert blank.get(0, 0) == BACKGROUND


def test_fill_every_pixel_within_radius(blank):
    draw_radial_fill(blank, CENTER, 40.0, FILL_COLOR)
    ys, xs = np.mgrid[0:blank.height, 0:blank.width]
    inside = (xs - 127) ** 2 + (ys - 127) ** 2 <= 40 ** 2
    filled = np.all(blank.pixels == np.array(FILL_COLOR, dtype=np.uint8), axis=-1)
    assert np.array_equal(inside, filled)


def test_fill_clipped_at_edges():
    c = Canvas(20, 20)
    n = draw_radial_fill(c, (0, 0), 100.0, FILL_COLOR)
    assert n == 400
    assert c.count(FILL_COLOR) == 400


# --- draw_spoke_line ---

def test_spoke_points_truncate():
    xs, ys = spoke_points(CENTER, 0.0, 102.0)
    assert xs[0] == 127 and ys[0] == 127
    assert xs.max() == 228
    assert set(ys.tolist()) == {127}


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_spoke_reaches_radius(n):
    for i in range(n):
        xs, ys = spoke_points(CENTER, spoke_angle(i, n), 102.0)
        d = np.hypot(xs - 127, ys - 127)
        assert abs(d.max() - 102.0) <= 1.5


def test_spoke_line_drawn_in_line_color(blank):
    draw_spoke_line(blank, CENTER, math.pi / 2, 102.0, LINE_COLOR)
    assert blank.get(127, 127) == LINE_COLOR
    assert blank.get(127, 200) == LINE_COLOR
    assert blank.get(127, 100) == BACKGROUND


def test_spoke_line_idempotent(blank):
    once = blank.copy()
    draw_spoke_line(once, CENTER, 1.1, 102.0, LINE_COLOR)
    twice = blank.copy()
    draw_spoke_line(twice, CENTER, 1.1, 102.0, LINE_COLOR)
    draw_spoke_line(twice, CENTER, 1.1, 102.0, LINE_COLOR)
    assert np.array_equal(once.pixels, twice.pixels)


def test_spoke_line_off_canvas_clipped():
    c = Canvas(50, 50)
    n = draw_spoke_line(c, (25, 25), 0.0, 200.0, LINE_COLOR)
    assert 0 < n < 2000
    assert c.get(49, 25) == LINE_COLOR


# --- draw_ring_outline ---

def test_ring_points_on_circle():
    xs, ys = ring_points(CENTER, 20.0)
    d = np.hypot(xs - 127, ys - 127)
    assert d.min() >= 18.5
    assert d.max() <= 21.5


def test_ring_points_continuous():
    xs, ys = ring_points(CENTER, 100.0)
    dx = np.abs(np.diff(np.append(xs, xs[0])))
    dy = np.abs(np.diff(np.append(ys, ys[0])))
    assert dx.max() <= 1
    assert dy.max() <= 1


def test_ring_radius_zero_draws_nothing(blank):
    assert draw_ring_outline(blank, CENTER, [0], LINE_COLOR) == 0
    assert blank.count(LINE_COLOR) == 0


def test_ring_outline_multiple(blank):
    draw_ring_outline(blank, CENTER, [0, 20, 40], LINE_COLOR)
    assert blank.get(147, 127) == LINE_COLOR
    assert blank.get(167, 127) == LINE_COLOR
    assert blank.get(157, 127) == BACKGROUND


def test_ring_outside_canvas_clipped(blank):
    n = draw_ring_outline(blank, CENTER, [150], LINE_COLOR)
    xs, ys = ring_points(CENTER, 150.0)
    assert n < len(xs)
    assert blank.count(LINE_COLOR) > 0


# --- draw_label ---

def test_label_drawn_right_and_below_anchor(blank):
    n = draw_label(blank, (20, 30), "Hello Go")
    assert n > 0
    ys, xs = np.nonzero(np.all(blank.pixels == np.array(LINE_COLOR, dtype=np.uint8), axis=-1))
    assert xs.min() >= 20
    assert ys.min() >= 30
