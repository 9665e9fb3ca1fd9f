from __future__ import annotations
import re
from typing import Any, Tuple

from matplotlib import colors as mcolors

_CSS_RGB = re.compile(
    r"^\s*rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)\s*$",
    re.IGNORECASE,
)


def to_rgba(color: Any) -> Tuple[float, float, float, float]:
    """Convert a CSS colour (``#rgb``, ``#rrggbb``, ``rgb()``, ``rgba()``,
    named) or any matplotlib colour spec to an RGBA tuple in [0, 1]."""
    if isinstance(color, str):
        m = _CSS_RGB.match(color)
        if m is not None:
            r, g, b, a = m.groups()
            channels = [min(255.0, float(v)) / 255.0 for v in (r, g, b)]
            alpha = 1.0 if a is None else min(1.0, float(a))
            return (channels[0], channels[1], channels[2], alpha)
    return mcolors.to_rgba(color)
