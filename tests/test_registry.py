import pytest

from radarchart.core.registry import Registry, SURFACE
from radarchart.surface import RecordingSurface, MatplotlibSurface


def test_builtin_surfaces_registered():
    assert {"matplotlib", "recording"} <= set(SURFACE.available())
    assert SURFACE.get("Recording") is RecordingSurface
    assert SURFACE.get("matplotlib") is MatplotlibSurface


def test_create_passes_options():
    s = SURFACE.create("recording", width=120, height=80, device_pixel_ratio=2.0)
    assert s.display_size() == (120, 80)
    assert s.device_pixel_ratio == 2.0


def test_duplicate_and_missing_names():
    reg = Registry("widget")
    reg.register("a")(object)
    with pytest.raises(ValueError, match="Duplicate widget name"):
        reg.register("A")(object)
    with pytest.raises(KeyError, match="Unknown widget 'b'; available: a"):
        reg.get("b")


def test_missing_surface_names_kind():
    with pytest.raises(KeyError, match="Unknown surface 'svg'"):
        SURFACE.get("svg")
