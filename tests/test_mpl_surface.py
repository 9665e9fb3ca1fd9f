import numpy as np
import pytest

from radarchart.colors import to_rgba
from radarchart.core.types import ChartConfig
from radarchart.renderer import RadarChartRenderer
from radarchart.surface import MatplotlibSurface
from radarchart.surface.mpl import font_families


def _chart(dpr=2.0, **kwargs):
    s = MatplotlibSurface(400, 400, device_pixel_ratio=dpr, background="#000")
    cfg = ChartConfig(labels=["A", "B", "C", "D", "E"], data=[8, 6, 7, 5, 9], **kwargs)
    return RadarChartRenderer(s, cfg), s


def test_backing_store_follows_device_pixel_ratio():
    chart, s = _chart()
    assert s.backing_size == (800, 800)
    chart.draw()
    assert s.to_array().shape == (800, 800, 4)


def test_transform_maps_logical_pixels():
    chart, s = _chart()
    chart.draw()
    assert s.ax.get_xlim() == pytest.approx((0.0, 400.0))
    assert s.ax.get_ylim() == pytest.approx((400.0, 0.0))


def test_draw_paints_pixels():
    chart, s = _chart(line_color="#ff0000", fill_color="#ff0000")
    chart.draw()
    arr = s.to_array()
    # center of the chart lies inside the filled data polygon
    r, g, b, a = arr[400, 400]
    assert r > 200 and g < 60 and b < 60
    # corners stay background
    assert tuple(arr[2, 2][:3]) == (0, 0, 0)


def test_redraw_replaces_previous_artists():
    chart, s = _chart()
    chart.draw()
    n_patches, n_texts = len(s.ax.patches), len(s.ax.texts)
    chart.set_radar_radius(90)
    assert (len(s.ax.patches), len(s.ax.texts)) == (n_patches, n_texts)
    # 5 rings + 5 spokes + fill + outline + 5 points * (fill, border)
    assert n_patches == 5 + 5 + 2 + 10
    assert n_texts == 5


def test_text_alignment_and_font_size():
    chart, s = _chart(dpr=1.0, label_font_size=12)
    chart.draw()
    texts = s.ax.texts
    assert [t.get_text() for t in texts] == ["A", "B", "C", "D", "E"]
    assert texts[0].get_horizontalalignment() == "center"
    assert texts[1].get_horizontalalignment() == "left"
    assert texts[4].get_horizontalalignment() == "right"
    assert texts[0].get_verticalalignment() == "center"
    assert texts[0].get_fontsize() == pytest.approx(9.0)


def test_save_png(tmp_path):
    chart, s = _chart()
    chart.draw()
    out = tmp_path / "radar.png"
    s.save(str(out))
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_rotation_transform_rejected():
    s = MatplotlibSurface(100, 100)
    with pytest.raises(ValueError, match="scale and translation"):
        s.set_transform(1, 0.5, 0, 1, 0, 0)


def test_css_colors():
    assert to_rgba("rgba(0, 255, 255, 0.2)") == pytest.approx((0.0, 1.0, 1.0, 0.2))
    assert to_rgba("rgb(255, 0, 0)") == pytest.approx((1.0, 0.0, 0.0, 1.0))
    assert to_rgba("#bbb") == pytest.approx((187 / 255, 187 / 255, 187 / 255, 1.0))
    assert to_rgba("#fff") == pytest.approx((1.0, 1.0, 1.0, 1.0))
    with pytest.raises(ValueError):
        to_rgba("not-a-colour")


def test_font_families_keep_resolvable_names():
    fams = font_families('"Segoe UI", Tahoma, Geneva, Verdana, sans-serif')
    assert fams[-1] == "sans-serif"
    assert font_families("NoSuchFontAnywhere") == ["sans-serif"]


def test_moved_label_is_cleared_even_when_anchored_off_surface():
    s = MatplotlibSurface(330, 330, device_pixel_ratio=1.0, background="#000")
    cfg = ChartConfig(labels=["A", "B", "C", "D"], data=[5, 5, 5, 5],
                      label_height=170, label_font_size=30)
    chart = RadarChartRenderer(s, cfg)
    chart.draw()
    # top label anchored at y = -5, its glyphs reach into the surface
    assert s.to_array()[0:6, 140:190, :3].max() > 0
    for height in (100, 170, 100, 170, 100):
        chart.set_label_height(height)
    assert len(s.ax.texts) == 4
    assert s.to_array()[0:6, 140:190, :3].max() == 0


def test_non_finite_shapes_do_not_pile_up():
    chart, s = _chart(max_value=0.0)
    chart.draw()
    first = len(s.ax.patches)
    for _ in range(3):
        chart.draw()
    assert len(s.ax.patches) == first
    assert len(s.ax.texts) == 5


def test_line_to_without_current_point_starts_subpath():
    from matplotlib.path import Path

    s = MatplotlibSurface(100, 100)
    s.line_to(10, 10)
    s.line_to(20, 20)
    s.close_path()
    s.stroke("#fff", 1)
    (patch,) = s.ax.patches
    assert list(patch.get_path().codes) == [Path.MOVETO, Path.LINETO, Path.CLOSEPOLY]
