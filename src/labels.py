from __future__ import annotations
"""
Label rendering with Pillow's built-in fixed-width bitmap font. Glyphs are
rasterised into a temporary 1-channel mask and copied onto the canvas pixel by
pixel, so labels near the edge are clipped like any other write.
"""
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from canvas import Canvas
from config import LINE_COLOR, Color


def default_font() -> ImageFont.ImageFont:
    return ImageFont.load_default_imagefont()


def text_mask(text: str, font=None) -> np.ndarray:
    """Return a boolean (h, w) mask of the glyph pixels for `text`, top-left at (0, 0)."""
    if not text:
        return np.zeros((0, 0), dtype=bool)
    font = font or default_font()
    _left, _top, right, bottom = font.getbbox(text)
    if right <= 0 or bottom <= 0:
        return np.zeros((0, 0), dtype=bool)
    mask = Image.new('L', (int(right), int(bottom)), 0)
    ImageDraw.Draw(mask).text((0, 0), text, fill=255, font=font)
    return np.asarray(mask) >= 128


def draw_string(canvas: Canvas, x: int, y: int, text: str, color: Color = LINE_COLOR, font=None) -> int:
    """Draw `text` with its top-left at (x, y). Returns the number of pixels written."""
    mask = text_mask(text, font)
    if mask.size == 0:
        return 0
    ys, xs = np.nonzero(mask)
    return canvas.set_many(xs + int(x), ys + int(y), color)
