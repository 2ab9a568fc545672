from __future__ import annotations
"""
Layout planning for radial diagrams: spoke angles, label anchors and ring radii.

Angles follow image coordinates (y grows downward), so sin() gives the vertical
offset and an angle of 3π/2 points straight up. Float positions are converted
to pixels by truncation toward zero (`to_pixel`), never by rounding.
"""
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from config import RenderConfig

TWO_PI = 2.0 * math.pi


class InvalidLayout(ValueError):
    pass


class Spoke(NamedTuple):
    index: int
    angle: float
    anchor: Tuple[int, int]
    label: str


class Layout(NamedTuple):
    center: Tuple[int, int]
    radius: float
    spokes: List[Spoke]
    rings: List[int]


class SectorMetrics(NamedTuple):
    radius: float
    divisions: float
    area: float
    arc: float
    theta: float


def to_pixel(v: float) -> int:
    return math.trunc(v)


def to_pixels(arr) -> np.ndarray:
    return np.trunc(np.asarray(arr, dtype=np.float64)).astype(np.int64)


def rotation_offset(total: int) -> float:
    return TWO_PI - TWO_PI / total - math.pi / 2.0


def spoke_angle(index: int, total: int) -> float:
    """Angle in radians of spoke `index` (0-based) out of `total`.

    Spoke 0 points up; the rest follow clockwise on screen, 2π/total apart.
    """
    if total < 1:
        raise InvalidLayout(f"spoke count must be >= 1, got {total}")
    if not 0 <= index < total:
        raise InvalidLayout(f"spoke index {index} out of range for {total} spokes")
    angle = TWO_PI / total * (index + 1) + rotation_offset(total)
    return angle % TWO_PI


def spoke_angles(total: int) -> List[float]:
    if total < 1:
        raise InvalidLayout(f"spoke count must be >= 1, got {total}")
    return [spoke_angle(i, total) for i in range(total)]


def anchor(angle: float, radius: float, center: Tuple[int, int]) -> Tuple[int, int]:
    cx, cy = center
    return (to_pixel(cx + math.cos(angle) * radius), to_pixel(cy + math.sin(angle) * radius))


def ring_radii(r: float, divisions: int) -> List[int]:
    """Radii 0, m, 2m, ... below ceil(r), with m = int(r) // divisions."""
    if isinstance(divisions, bool) or int(divisions) != divisions or divisions < 1:
        raise InvalidLayout(f"ring divisions must be a positive integer, got {divisions}")
    if r <= 0:
        raise InvalidLayout(f"radius must be positive, got {r}")
    m = int(r) // int(divisions)
    if m == 0:
        raise InvalidLayout(f"radius {r} too small for {divisions} ring divisions")
    return list(range(0, int(math.ceil(r)), m))


def plan_spokes(
    total: int,
    radius: float,
    center: Tuple[int, int],
    labels: Optional[Sequence[str]] = None,
) -> List[Spoke]:
    if labels is not None and len(labels) != total:
        raise InvalidLayout(f"{len(labels)} labels given for {total} spokes")
    out = []
    for i, angle in enumerate(spoke_angles(total)):
        text = labels[i] if labels is not None else "%f" % (i + 1)
        out.append(Spoke(i, angle, anchor(angle, radius, center), text))
    return out


def check_radius(config: RenderConfig) -> float:
    """Return the configured radius, which must lie in (0, width/2)."""
    r = config.radius
    half = config.width / 2.0
    if not 0 < r < half:
        raise InvalidLayout(f"radius {r} must lie in (0, {half}) for width {config.width}")
    return r


def plan_layout(
    config: RenderConfig,
    total: Optional[int] = None,
    labels: Optional[Sequence[str]] = None,
) -> Layout:
    """Validate geometry and plan spokes and rings. `total=None` plans rings only."""
    r = check_radius(config)
    rings = ring_radii(r, config.divisions)
    spokes = plan_spokes(total, r, config.center, labels) if total is not None else []
    return Layout(config.center, r, spokes, rings)


def sector_metrics(r: float, divisions: float) -> SectorMetrics:
    """Area, arc length and central angle of one of `divisions` equal sectors of a circle."""
    if r <= 0 or divisions <= 0:
        raise InvalidLayout(f"radius and divisions must be positive, got r={r}, div={divisions}")
    area = math.pi * r * r / divisions
    arc = 2 * math.pi * r / divisions
    return SectorMetrics(float(r), float(divisions), area, arc, arc / r)
