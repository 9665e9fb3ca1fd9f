from __future__ import annotations
from typing import Any, List, Sequence, Tuple
import math

from .core.types import (
    ChartConfig,
    SurfaceState,
    FALLBACK_DISPLAY_SIZE,
    MIN_DISPLAY_SIZE,
)
from .geometry import (
    scaled_radar_radius,
    grid_rings,
    axis_spokes,
    data_polygon,
)
from .config import build_config_from_dict
from .labels import label_placements
from .surface.base import DrawingSurface

POINT_BORDER_COLOR = "#fff"
POINT_BORDER_WIDTH = 1
GRID_LINE_WIDTH = 1

Point = Tuple[float, float]


class RadarChartRenderer:
    """Paints a radar chart onto a :class:`DrawingSurface`.

    Every mutation redraws the whole chart: grid rings, axis spokes, the data
    polygon with its points, then the labels. ``radar_radius`` only drives the
    first three stages; ``label_width``, ``label_height`` and
    ``label_font_size`` only drive the labels.

    The host calls :meth:`resize` whenever the surface's display box changes.
    """

    def __init__(self, surface: DrawingSurface, config: ChartConfig | None = None,
                 debug: bool = False, **options: Any) -> None:
        if config is not None and options:
            raise ValueError(f"Pass either a ChartConfig or chart options, not both: {sorted(options)}")
        self.surface = surface
        self.config = config or (build_config_from_dict(options) if options else ChartConfig())
        self.debug = bool(debug)
        self.state = SurfaceState(device_pixel_ratio=float(surface.device_pixel_ratio or 1.0))
        self.resize()

    # -- surface manager ---------------------------------------------------
    def resize(self) -> bool:
        """Recompute layout from the surface's display box.

        Returns False and keeps the previous state when the box is smaller
        than ``MIN_DISPLAY_SIZE`` (layout not ready yet).
        """
        width, height = self.surface.display_size()
        width = width or FALLBACK_DISPLAY_SIZE
        height = height or FALLBACK_DISPLAY_SIZE
        size = min(float(width), float(height))
        if size < MIN_DISPLAY_SIZE:
            if self.debug:
                print(f"[Radar] resize skipped: display size {size:.1f}px")
            return False

        dpr = float(self.surface.device_pixel_ratio or 1.0)
        backing = int(round(size * dpr))
        self.surface.set_backing_size(backing, backing)
        self.state = SurfaceState.for_size(size, dpr)
        if self.debug:
            print(f"[Radar] resize size={size:.1f} dpr={dpr:g} backing={backing}px "
                  f"max_radius={self.state.max_usable_radius:.1f}")
        return True

    # -- geometry ----------------------------------------------------------
    def compute_scaled_radar_radius(self) -> float:
        return scaled_radar_radius(self.state.max_usable_radius, self.config.radar_radius)

    def grid_geometry(self) -> List[List[Point]]:
        return grid_rings(self.state.center, len(self.config.labels),
                          self.compute_scaled_radar_radius(), self.config.grid_levels)

    def axis_geometry(self) -> List[Tuple[Point, Point]]:
        return axis_spokes(self.state.center, len(self.config.labels), self.compute_scaled_radar_radius())

    def data_geometry(self) -> List[Point]:
        cfg = self.config
        return data_polygon(self.state.center, cfg.data, len(cfg.labels), cfg.max_value,
                            self.compute_scaled_radar_radius())

    def label_geometry(self):
        cfg = self.config
        return label_placements(self.state.center, cfg.labels, cfg.label_width, cfg.label_height)

    # -- setters -----------------------------------------------------------
    def set_data(self, data: Sequence[float]) -> None:
        self.config.data = list(data)
        self.draw()

    def set_label_height(self, value: float) -> None:
        self.config.label_height = value
        self.draw()

    def set_label_width(self, value: float) -> None:
        self.config.label_width = value
        self.draw()

    def set_label_font_size(self, value: float) -> None:
        self.config.label_font_size = value
        self.draw()

    def set_radar_radius(self, value: float) -> None:
        self.config.radar_radius = value
        self.draw()

    # -- paint pipeline ----------------------------------------------------
    def draw(self) -> None:
        n = len(self.config.labels)
        if n == 0:
            return
        s = self.surface
        dpr = self.state.device_pixel_ratio
        s.set_transform(dpr, 0, 0, dpr, 0, 0)
        s.clear_rect(0, 0, self.state.size, self.state.size)

        self._draw_grid(s)
        self._draw_axis_lines(s)
        self._draw_data_polygon(s)
        self._draw_labels(s)
        if self.debug:
            print(f"[Radar] draw n={n} levels={self.config.grid_levels} "
                  f"radar_radius={self.compute_scaled_radar_radius():.2f}px")

    def _trace(self, s: DrawingSurface, points: Sequence[Point]) -> None:
        s.begin_path()
        for i, (x, y) in enumerate(points):
            if i == 0:
                s.move_to(x, y)
            else:
                s.line_to(x, y)
        s.close_path()

    def _draw_grid(self, s: DrawingSurface) -> None:
        for ring in self.grid_geometry():
            self._trace(s, ring)
            s.stroke(self.config.grid_color, GRID_LINE_WIDTH)

    def _draw_axis_lines(self, s: DrawingSurface) -> None:
        for (x0, y0), (x1, y1) in self.axis_geometry():
            s.begin_path()
            s.move_to(x0, y0)
            s.line_to(x1, y1)
            s.stroke(self.config.grid_color, GRID_LINE_WIDTH)

    def _draw_data_polygon(self, s: DrawingSurface) -> None:
        cfg = self.config
        if not cfg.data:
            return
        points = self.data_geometry()

        self._trace(s, points)
        s.fill(cfg.fill_color)
        self._trace(s, points)
        s.stroke(cfg.line_color, cfg.line_width)

        for i, (x, y) in enumerate(points):
            s.begin_path()
            s.arc(x, y, cfg.point_radius, 0, 2 * math.pi)
            s.fill(self._point_color(i))
            s.stroke(POINT_BORDER_COLOR, POINT_BORDER_WIDTH)

    def _point_color(self, i: int) -> Any:
        colors = self.config.point_colors
        if colors and i < len(colors) and colors[i]:
            return colors[i]
        return self.config.line_color

    def _draw_labels(self, s: DrawingSurface) -> None:
        cfg = self.config
        for p in self.label_geometry():
            s.fill_text(
                p.text, p.x, p.y,
                color=cfg.label_color,
                font_size=cfg.label_font_size,
                font_family=cfg.label_font_family,
                align=p.align,
                baseline="middle",
            )
