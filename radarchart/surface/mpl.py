from __future__ import annotations
from typing import Any, List, Optional, Tuple
import numpy as np

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.font_manager import fontManager
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from ..colors import to_rgba
from .base import DrawingSurface, register_surface

# Logical (CSS) pixels per inch.
LOGICAL_DPI = 96.0

_GENERIC_FAMILIES = {"serif", "sans-serif", "cursive", "fantasy", "monospace"}
_VALIGN = {"middle": "center", "top": "top", "bottom": "bottom", "alphabetic": "baseline"}


def font_families(css_stack: str) -> List[str]:
    """Turn a CSS font stack into the families matplotlib can resolve."""
    known = {f.name for f in fontManager.ttflist}
    out = []
    for raw in css_stack.split(","):
        name = raw.strip().strip("'\"")
        if name and (name in known or name in _GENERIC_FAMILIES):
            out.append(name)
    return out or ["sans-serif"]


@register_surface("matplotlib")
class MatplotlibSurface(DrawingSurface):
    """Agg-backed matplotlib figure with a canvas-like drawing API.

    The figure is a single frameless axes covering the whole backing store.
    Axis limits follow the current transform, so user-space coordinates land
    on the right device pixels. Each primitive becomes its own artist with an
    increasing z-order, which keeps the painter's order of the calls.
    """

    def __init__(
        self,
        width: Optional[float] = 400.0,
        height: Optional[float] = 400.0,
        device_pixel_ratio: float = 1.0,
        background: Any = None,
        **kwargs: Any,
    ) -> None:
        self.width = width
        self.height = height
        self.device_pixel_ratio = float(device_pixel_ratio)
        self.background = background
        self.figure = Figure()
        self.canvas = FigureCanvasAgg(self.figure)
        self.ax = None
        self._backing = (0, 0)
        self._transform = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
        self._verts: List[Tuple[float, float]] = []
        self._codes: List[int] = []
        self._subpath_start: Optional[Tuple[float, float]] = None
        self._zorder = 0
        self.set_backing_size(300, 150)

    # -- host side ---------------------------------------------------------
    def set_display_size(self, width: Optional[float], height: Optional[float]) -> None:
        self.width = width
        self.height = height

    def display_size(self) -> Tuple[Optional[float], Optional[float]]:
        return self.width, self.height

    @property
    def backing_size(self) -> Tuple[int, int]:
        return self._backing

    def set_backing_size(self, width: int, height: int) -> None:
        dpi = LOGICAL_DPI * self.device_pixel_ratio
        self.figure.clear()
        self.figure.set_dpi(dpi)
        # Agg truncates the pixel size, nudge past float error.
        self.figure.set_size_inches((int(width) + 0.01) / dpi, (int(height) + 0.01) / dpi)
        if self.background is not None:
            self.figure.patch.set_facecolor(to_rgba(self.background))
        else:
            self.figure.patch.set_alpha(0.0)
        self.ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.ax.set_axis_off()
        self.ax.patch.set_visible(False)
        self._backing = (int(width), int(height))
        self._zorder = 0
        self.set_transform(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
        self.begin_path()

    def set_transform(self, a, b, c, d, e, f) -> None:
        if b != 0 or c != 0:
            raise ValueError("MatplotlibSurface supports scale and translation only")
        self._transform = (float(a), 0.0, 0.0, float(d), float(e), float(f))
        w, h = self._backing
        self.ax.set_xlim(-e / a, (w - e) / a)
        # Device y grows downwards.
        self.ax.set_ylim((h - f) / d, -f / d)

    def _points(self, user_px: float) -> float:
        """Length in user-space pixels -> typographic points."""
        return float(user_px) * self._transform[3] * 72.0 / self.figure.dpi

    def _next_z(self) -> int:
        self._zorder += 1
        return self._zorder

    # -- primitives --------------------------------------------------------
    def clear_rect(self, x, y, width, height) -> None:
        """Drop every artist whose painted extent touches the rectangle.

        Extents are compared in display space, so text reaching into the
        rectangle from an anchor outside it is cleared too. Artists that
        cannot paint anything (non-finite or wholly off the figure) go as well.
        """
        renderer = self.canvas.get_renderer()
        corners = self.ax.transData.transform([(x, y), (x + width, y + height)])
        rx0, rx1 = sorted(corners[:, 0])
        ry0, ry1 = sorted(corners[:, 1])
        fig = self.figure.bbox
        for artist in list(self.ax.patches) + list(self.ax.texts):
            ext = artist.get_window_extent(renderer)
            if not np.isfinite(ext.extents).all():
                artist.remove()
                continue
            off_figure = ext.x1 < fig.x0 or ext.x0 > fig.x1 or ext.y1 < fig.y0 or ext.y0 > fig.y1
            hit = ext.x1 >= rx0 and ext.x0 <= rx1 and ext.y1 >= ry0 and ext.y0 <= ry1
            if hit or off_figure:
                artist.remove()

    def begin_path(self) -> None:
        self._verts = []
        self._codes = []
        self._subpath_start = None

    def move_to(self, x, y) -> None:
        self._verts.append((float(x), float(y)))
        self._codes.append(Path.MOVETO)
        self._subpath_start = (float(x), float(y))

    def line_to(self, x, y) -> None:
        if self._subpath_start is None:
            self.move_to(x, y)
            return
        self._verts.append((float(x), float(y)))
        self._codes.append(Path.LINETO)

    def close_path(self) -> None:
        if self._subpath_start is None:
            return
        self._verts.append(self._subpath_start)
        self._codes.append(Path.CLOSEPOLY)

    def arc(self, x, y, radius, start_angle, end_angle) -> None:
        unit = Path.arc(np.degrees(start_angle), np.degrees(end_angle))
        verts = unit.vertices * float(radius) + np.array([float(x), float(y)])
        codes = list(unit.codes)
        if self._subpath_start is None:
            self._subpath_start = (float(verts[0][0]), float(verts[0][1]))
        else:
            codes[0] = Path.LINETO
        self._verts.extend((float(vx), float(vy)) for vx, vy in verts)
        self._codes.extend(codes)

    def _current_path(self) -> Optional[Path]:
        if not self._verts:
            return None
        return Path(np.asarray(self._verts, dtype=float), list(self._codes))

    def fill(self, color) -> None:
        path = self._current_path()
        if path is None:
            return
        self.ax.add_patch(PathPatch(
            path, facecolor=to_rgba(color), edgecolor="none", linewidth=0,
            zorder=self._next_z(),
        ))

    def stroke(self, color, width) -> None:
        path = self._current_path()
        if path is None:
            return
        self.ax.add_patch(PathPatch(
            path, fill=False, edgecolor=to_rgba(color), linewidth=self._points(width),
            zorder=self._next_z(),
        ))

    def fill_text(self, text, x, y, *, color, font_size, font_family, align="left", baseline="middle") -> None:
        self.ax.text(
            float(x), float(y), text,
            color=to_rgba(color),
            fontsize=self._points(font_size),
            family=font_families(font_family),
            ha=align,
            va=_VALIGN.get(baseline, "center"),
            zorder=self._next_z(),
        )

    # -- output ------------------------------------------------------------
    def to_array(self) -> np.ndarray:
        """RGBA pixels of the backing store, shape ``(height, width, 4)``."""
        self.canvas.draw()
        return np.asarray(self.canvas.buffer_rgba())

    def save(self, path: str) -> None:
        self.figure.savefig(path, dpi=self.figure.dpi, transparent=self.background is None)
