import math
import pytest

from radarchart.labels import label_align, label_placements


def test_align_top_and_bottom_centered():
    assert label_align(-math.pi / 2) == "center"
    assert label_align(math.pi / 2) == "center"
    assert label_align(math.acos(0.05)) == "center"


def test_align_grows_away_from_center():
    assert label_align(0.0) == "left"
    assert label_align(math.acos(0.2)) == "left"
    assert label_align(math.pi) == "right"
    assert label_align(math.acos(-0.2)) == "right"


def test_placements_on_oval():
    out = label_placements((200.0, 200.0), ["A", "B", "C", "D"], label_width=120, label_height=160)
    assert [p.text for p in out] == ["A", "B", "C", "D"]
    assert (out[0].x, out[0].y) == pytest.approx((200.0, 40.0))
    assert (out[1].x, out[1].y) == pytest.approx((320.0, 200.0))
    assert (out[2].x, out[2].y) == pytest.approx((200.0, 360.0))
    assert (out[3].x, out[3].y) == pytest.approx((80.0, 200.0))
    assert [p.align for p in out] == ["center", "left", "center", "right"]


def test_empty_label_text():
    out = label_placements((0.0, 0.0), ["", None], label_width=10, label_height=10)
    assert [p.text for p in out] == ["", ""]
