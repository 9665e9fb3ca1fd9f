from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Any

# Space kept around the radar for label text.
LABEL_TEXT_PADDING = 90.0
MIN_USABLE_RADIUS = 50.0
FALLBACK_DISPLAY_SIZE = 400.0
MIN_DISPLAY_SIZE = 10.0

DEFAULT_FONT_FAMILY = '"Segoe UI", Tahoma, Geneva, Verdana, sans-serif'


@dataclass
class ChartConfig:
    """Options for one radar chart.

    ``label_height``/``label_width`` are the vertical/horizontal radii (px) of
    the oval the labels sit on. ``radar_radius`` is a slider value with a
    nominal domain of [60, 150]; it is mapped onto the usable surface radius
    by :func:`radarchart.geometry.scaled_radar_radius`.
    """
    labels: List[str] = field(default_factory=list)
    data: List[float] = field(default_factory=list)
    max_value: float = 10.0

    line_color: Any = "#00ffff"
    fill_color: Any = "rgba(0, 255, 255, 0.2)"
    grid_color: Any = "rgba(255, 255, 255, 0.1)"
    label_color: Any = "#bbb"
    point_colors: Optional[List[Any]] = None

    label_height: float = 160.0
    label_width: float = 120.0
    label_font_size: float = 11.0
    label_font_family: str = DEFAULT_FONT_FAMILY
    radar_radius: float = 120.0

    grid_levels: int = 5
    point_radius: float = 4.0
    line_width: float = 2.0


@dataclass
class SurfaceState:
    device_pixel_ratio: float = 1.0
    size: float = 0.0
    center: Tuple[float, float] = (0.0, 0.0)
    max_usable_radius: float = MIN_USABLE_RADIUS

    @classmethod
    def for_size(cls, size: float, dpr: float) -> "SurfaceState":
        return cls(
            device_pixel_ratio=float(dpr),
            size=float(size),
            center=(size / 2.0, size / 2.0),
            max_usable_radius=max(MIN_USABLE_RADIUS, size / 2.0 - LABEL_TEXT_PADDING),
        )


@dataclass
class LabelPlacement:
    text: str
    x: float
    y: float
    align: str


def value_at(data: Sequence[Any] | None, i: int, default: float = 0.0) -> float:
    """Value at index ``i``; ``default`` for absent, ``None`` or NaN entries."""
    if data is None or i < 0 or i >= len(data):
        return default
    v = data[i]
    if v is None:
        return default
    v = float(v)
    if math.isnan(v):
        return default
    return v
