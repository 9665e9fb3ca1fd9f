from __future__ import annotations
from typing import Any, Optional, Tuple

from ..core.registry import SURFACE


class DrawingSurface:
    """Abstract drawing surface handed to the renderer by its host.

    Implementations expose the display box in logical pixels, a backing store
    whose pixel resolution is set independently of the display size, an affine
    transform that can be reset, and canvas-style path/fill/stroke/text
    primitives. Coordinates passed to the primitives are in user space, i.e.
    after the current transform is applied.
    """

    device_pixel_ratio: float = 1.0

    def display_size(self) -> Tuple[Optional[float], Optional[float]]:
        raise NotImplementedError

    def set_backing_size(self, width: int, height: int) -> None:
        raise NotImplementedError

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        raise NotImplementedError

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        raise NotImplementedError

    def begin_path(self) -> None:
        raise NotImplementedError

    def move_to(self, x: float, y: float) -> None:
        raise NotImplementedError

    def line_to(self, x: float, y: float) -> None:
        raise NotImplementedError

    def close_path(self) -> None:
        raise NotImplementedError

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        raise NotImplementedError

    def fill(self, color: Any) -> None:
        raise NotImplementedError

    def stroke(self, color: Any, width: float) -> None:
        raise NotImplementedError

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        color: Any,
        font_size: float,
        font_family: str,
        align: str = "left",
        baseline: str = "middle",
    ) -> None:
        raise NotImplementedError


def register_surface(name: str):
    return SURFACE.register(name)
