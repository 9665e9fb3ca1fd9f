from __future__ import annotations
from typing import List, Sequence, Tuple, Any
import numpy as np

from .core.types import value_at

# Nominal slider domain of ``radar_radius`` and the fraction of the usable
# radius it maps onto.
RADAR_SLIDER_MIN = 60.0
RADAR_SLIDER_MAX = 150.0
RADAR_FRACTION_MIN = 0.40
RADAR_FRACTION_SPAN = 0.45

START_ANGLE = -np.pi / 2

Point = Tuple[float, float]


def scaled_radar_radius(max_usable_radius: float, radar_radius: float) -> float:
    """Map the ``radar_radius`` slider to pixels.

    60 -> 40% and 150 -> 85% of ``max_usable_radius``. Values outside the
    slider domain extrapolate along the same line so out-of-range sliders
    still render proportionally instead of saturating.
    """
    t = (float(radar_radius) - RADAR_SLIDER_MIN) / (RADAR_SLIDER_MAX - RADAR_SLIDER_MIN)
    return float(max_usable_radius) * (RADAR_FRACTION_MIN + t * RADAR_FRACTION_SPAN)


def point_angles(n: int) -> np.ndarray:
    """Angle of each axis: first at the top, clockwise with increasing index."""
    if n <= 0:
        return np.zeros(0, dtype=float)
    return START_ANGLE + np.arange(n, dtype=float) * (2 * np.pi / n)


def _polar(center: Point, radii: Any, angles: np.ndarray) -> List[Point]:
    cx, cy = center
    xs = cx + np.cos(angles) * radii
    ys = cy + np.sin(angles) * radii
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def grid_ring(center: Point, n: int, radius: float) -> List[Point]:
    """Closed outline of one ring: N+1 vertices, the last equal to the first."""
    if n <= 0:
        return []
    idx = np.arange(n + 1) % n
    return _polar(center, float(radius), point_angles(n)[idx])


def grid_rings(center: Point, n: int, scaled_radius: float, levels: int) -> List[List[Point]]:
    return [
        grid_ring(center, n, scaled_radius / levels * level)
        for level in range(1, int(levels) + 1)
    ]


def axis_spokes(center: Point, n: int, scaled_radius: float) -> List[Tuple[Point, Point]]:
    rim = _polar(center, float(scaled_radius), point_angles(n))
    return [((float(center[0]), float(center[1])), p) for p in rim]


def data_radii(data: Sequence[Any] | None, n: int, max_value: float, scaled_radius: float) -> np.ndarray:
    """Distance of each data vertex from the center.

    Values are normalized by ``max_value`` without clamping: values above the
    maximum overshoot the grid and negative values point the other way.
    ``max_value <= 0`` is not guarded and yields inf/nan.
    """
    values = np.asarray([value_at(data, i) for i in range(n)], dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        normalized = values / np.float64(max_value)
    return normalized * scaled_radius


def data_polygon(
    center: Point,
    data: Sequence[Any] | None,
    n: int,
    max_value: float,
    scaled_radius: float,
) -> List[Point]:
    return _polar(center, data_radii(data, n, max_value, scaled_radius), point_angles(n))
