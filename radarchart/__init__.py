from .config import build_config_from_dict, build_config_from_yaml
from .core.types import ChartConfig, SurfaceState
from .renderer import RadarChartRenderer
from .surface import DrawingSurface, RecordingSurface, MatplotlibSurface

__all__ = [
    "ChartConfig",
    "SurfaceState",
    "RadarChartRenderer",
    "DrawingSurface",
    "RecordingSurface",
    "MatplotlibSurface",
    "build_config_from_dict",
    "build_config_from_yaml",
]
