from __future__ import annotations
"""
Canvas: fixed-size RGBA pixel buffer backed by a numpy array of shape
(height, width, 4). Origin is top-left. Writes outside the buffer are dropped.
"""
from typing import Tuple

import numpy as np
from PIL import Image

from config import BACKGROUND, Color


class Canvas:
    def __init__(self, width: int, height: int, background: Color = BACKGROUND):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.empty((self.height, self.width, 4), dtype=np.uint8)
        self.pixels[:, :] = background

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return (min_x, min_y, max_x, max_y); max values are exclusive."""
        return (0, 0, self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, color: Color) -> bool:
        if not self.contains(x, y):
            return False
        self.pixels[y, x] = color
        return True

    def set_many(self, xs, ys, color: Color) -> int:
        """Set every (xs[i], ys[i]) in bounds to `color`. Returns the number of in-bounds points."""
        xs = np.asarray(xs, dtype=np.int64).ravel()
        ys = np.asarray(ys, dtype=np.int64).ravel()
        if xs.shape != ys.shape:
            raise ValueError("xs and ys must have the same length")
        mask = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        self.pixels[ys[mask], xs[mask]] = color
        return int(np.count_nonzero(mask))

    def get(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return tuple(int(v) for v in self.pixels[y, x])

    def count(self, color: Color) -> int:
        return int(np.count_nonzero(np.all(self.pixels == np.asarray(color, dtype=np.uint8), axis=-1)))

    def copy(self) -> Canvas:
        out = Canvas.__new__(Canvas)
        out.width = self.width
        out.height = self.height
        out.pixels = self.pixels.copy()
        return out

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    @classmethod
    def from_image(cls, img: Image.Image) -> Canvas:
        arr = np.asarray(img.convert('RGBA'), dtype=np.uint8)
        out = cls.__new__(cls)
        out.height, out.width = int(arr.shape[0]), int(arr.shape[1])
        out.pixels = arr.copy()
        return out

    def __repr__(self):
        return f"Canvas({self.width}x{self.height})"
