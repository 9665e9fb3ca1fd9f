from __future__ import annotations
from typing import List, Sequence, Tuple
import numpy as np

from .core.types import LabelPlacement
from .geometry import point_angles

# Below this |cos(angle)| a label counts as top/bottom and is centered.
CENTER_ALIGN_COS = 0.1


def label_align(angle: float) -> str:
    """Text alignment that makes the label grow away from the chart center."""
    c = float(np.cos(angle))
    if abs(c) < CENTER_ALIGN_COS:
        return "center"
    if c > 0:
        return "left"
    return "right"


def label_placements(
    center: Tuple[float, float],
    labels: Sequence[str],
    label_width: float,
    label_height: float,
) -> List[LabelPlacement]:
    """Place labels on an oval with horizontal radius ``label_width`` and
    vertical radius ``label_height``.

    Only the two label radii are used; the radar size never moves a label.
    """
    n = len(labels)
    cx, cy = center
    out: List[LabelPlacement] = []
    for i, angle in enumerate(point_angles(n)):
        out.append(LabelPlacement(
            text=str(labels[i] or ""),
            x=float(cx + np.cos(angle) * label_width),
            y=float(cy + np.sin(angle) * label_height),
            align=label_align(angle),
        ))
    return out
