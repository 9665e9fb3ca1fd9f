from __future__ import annotations
# Public surface of radarchart.surface
from .base import DrawingSurface, register_surface

# Import built-in surfaces so their registration executes on package import
from .recording import RecordingSurface  # noqa: F401
from .mpl import MatplotlibSurface  # noqa: F401
