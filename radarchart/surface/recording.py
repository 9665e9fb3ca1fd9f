from __future__ import annotations
from typing import Any, List, Optional, Tuple

from .base import DrawingSurface, register_surface


@register_surface("recording")
class RecordingSurface(DrawingSurface):
    """Surface that keeps every drawing call as an ``(op, *args)`` tuple.

    Used for tests and headless inspection of what a draw pass issues.
    ``width``/``height`` of ``None`` mimic a host whose layout has no box yet.
    """

    def __init__(
        self,
        width: Optional[float] = 400.0,
        height: Optional[float] = 400.0,
        device_pixel_ratio: float = 1.0,
        **kwargs: Any,
    ) -> None:
        self.width = width
        self.height = height
        self.device_pixel_ratio = float(device_pixel_ratio)
        self.backing_size: Tuple[int, int] = (0, 0)
        self.ops: List[tuple] = []

    def set_display_size(self, width: Optional[float], height: Optional[float]) -> None:
        self.width = width
        self.height = height

    def display_size(self) -> Tuple[Optional[float], Optional[float]]:
        return self.width, self.height

    def set_backing_size(self, width: int, height: int) -> None:
        # Resizing the backing store drops whatever was drawn.
        self.backing_size = (int(width), int(height))
        self.ops = []

    def set_transform(self, a, b, c, d, e, f) -> None:
        self.ops.append(("set_transform", a, b, c, d, e, f))

    def clear_rect(self, x, y, width, height) -> None:
        self.ops.append(("clear_rect", x, y, width, height))

    def begin_path(self) -> None:
        self.ops.append(("begin_path",))

    def move_to(self, x, y) -> None:
        self.ops.append(("move_to", x, y))

    def line_to(self, x, y) -> None:
        self.ops.append(("line_to", x, y))

    def close_path(self) -> None:
        self.ops.append(("close_path",))

    def arc(self, x, y, radius, start_angle, end_angle) -> None:
        self.ops.append(("arc", x, y, radius, start_angle, end_angle))

    def fill(self, color) -> None:
        self.ops.append(("fill", color))

    def stroke(self, color, width) -> None:
        self.ops.append(("stroke", color, width))

    def fill_text(self, text, x, y, *, color, font_size, font_family, align="left", baseline="middle") -> None:
        self.ops.append(("fill_text", text, x, y, color, font_size, font_family, align, baseline))

    # -- inspection helpers -------------------------------------------------
    def reset(self) -> None:
        self.ops = []

    def count(self, op: str) -> int:
        return sum(1 for o in self.ops if o[0] == op)

    def of(self, op: str) -> List[tuple]:
        return [o for o in self.ops if o[0] == op]
