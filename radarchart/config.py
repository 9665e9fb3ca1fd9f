from __future__ import annotations
from dataclasses import fields
from typing import Any, Dict

import yaml

from .core.types import ChartConfig

# Option names used by browser-side callers.
_CAMEL_CASE = {
    "maxValue": "max_value",
    "lineColor": "line_color",
    "fillColor": "fill_color",
    "gridColor": "grid_color",
    "labelColor": "label_color",
    "pointColors": "point_colors",
    "labelHeight": "label_height",
    "labelWidth": "label_width",
    "labelFontSize": "label_font_size",
    "labelFontFamily": "label_font_family",
    "radarRadius": "radar_radius",
    "gridLevels": "grid_levels",
    "pointRadius": "point_radius",
    "lineWidth": "line_width",
}

_FLOAT_FIELDS = (
    "max_value", "label_height", "label_width", "label_font_size",
    "radar_radius", "point_radius", "line_width",
)


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Chart config must be a mapping, got {type(cfg).__name__}: {path}")
    return cfg


def build_config_from_dict(cfg: Dict[str, Any]) -> ChartConfig:
    """Merge caller options over the :class:`ChartConfig` defaults.

    Accepts snake_case field names and their camelCase aliases. ``None``
    values keep the default. Unknown keys raise ``ValueError``.
    """
    known = {f.name for f in fields(ChartConfig)}
    kwargs: Dict[str, Any] = {}
    for key, value in (cfg or {}).items():
        name = _CAMEL_CASE.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown chart option: {key}")
        if value is None:
            continue
        kwargs[name] = value

    try:
        for name in _FLOAT_FIELDS:
            if name in kwargs:
                kwargs[name] = float(kwargs[name])
        if "grid_levels" in kwargs:
            kwargs["grid_levels"] = int(kwargs["grid_levels"])
        if "labels" in kwargs:
            kwargs["labels"] = [str(x) for x in kwargs["labels"]]
        if "data" in kwargs:
            kwargs["data"] = [None if x is None else float(x) for x in kwargs["data"]]
        if "point_colors" in kwargs:
            kwargs["point_colors"] = list(kwargs["point_colors"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid chart option value: {e}") from e

    if kwargs.get("grid_levels", 1) < 1:
        raise ValueError("grid_levels must be >= 1")
    return ChartConfig(**kwargs)


def build_config_from_yaml(path: str) -> ChartConfig:
    cfg = _load_yaml(path)
    return build_config_from_dict(cfg)
