from __future__ import annotations

import pytest

from engine.ui.slider import CHANGE_EPSILON, INTERACTION_MARGIN, Rect, Slider, SliderStyle


def _slider(value: float = 50.0, lo: float = 0.0, hi: float = 100.0) -> Slider:
    # トラック中心 y=42、操作領域は y ∈ [30, 54]
    return Slider("Param", value, lo, hi, Rect(20.0, 40.0, 200.0, 4.0))


def _drag(s: Slider, *xs: float, y: float = 42.0) -> list[bool]:
    """押下した状態でポインタを順に動かし、各フレームの変化判定を返す。"""
    return [s.update((x, y), True) for x in xs]


def test_drag_to_track_ends_and_middle() -> None:
    s = _slider()
    _drag(s, 20.0)
    assert s.value == 0.0
    _drag(s, 220.0)
    assert s.value == 100.0
    _drag(s, 120.0)
    assert s.value == pytest.approx(50.0)


def test_drag_beyond_the_track_clamps() -> None:
    s = _slider(lo=10.0, hi=700.0, value=200.0)
    _drag(s, 100.0, -500.0)
    assert s.value == 10.0
    _drag(s, 5000.0)
    assert s.value == 700.0


def test_endpoints_are_exact_for_awkward_ranges() -> None:
    s = _slider(lo=0.1, hi=12.0, value=4.0)
    assert s.value_at(220.0) == 12.0
    assert s.value_at(20.0) == 0.1


def test_drag_keeps_following_outside_the_region_until_release() -> None:
    s = _slider()
    assert s.update((70.0, 42.0), True)
    assert s.dragging
    # ポインタが操作領域から大きく外れても追従
    s.update((170.0, 400.0), True)
    assert s.value == pytest.approx(75.0)
    s.update((170.0, 400.0), False)
    assert not s.dragging
    # 離した後の移動は無視
    assert not s.update((20.0, 400.0), False)
    assert s.value == pytest.approx(75.0)


def test_held_pointer_entering_the_region_starts_a_drag() -> None:
    s = _slider()
    y_out = 42.0 + 2.0 + INTERACTION_MARGIN + 1.0
    # 領域外での押下は何もしない
    assert not s.update((120.0, y_out), True)
    assert not s.dragging
    assert s.value == 50.0
    # 押したまま領域内に入ってきたら追従を始める
    assert s.update((70.0, 42.0), True)
    assert s.dragging
    assert s.value == pytest.approx(25.0)


def test_hover_without_press_never_drags() -> None:
    s = _slider()
    assert not s.update((70.0, 42.0), False)
    assert not s.dragging
    assert s.value == 50.0


def test_press_within_vertical_margin_starts_a_drag() -> None:
    s = _slider()
    assert s.hit_test(120.0, 40.0 - INTERACTION_MARGIN)
    assert s.update((70.0, 40.0 - INTERACTION_MARGIN), True)
    assert s.value == pytest.approx(25.0)


def test_holding_still_reports_no_change() -> None:
    s = _slider()
    assert _drag(s, 70.0, 70.0, 70.0) == [True, False, False]


def test_change_below_relative_epsilon_is_ignored() -> None:
    s = _slider(value=0.0, lo=0.0, hi=1e6)
    assert s.epsilon == pytest.approx(CHANGE_EPSILON * 1e6)
    _drag(s, 20.0)
    # 幅 200px で 1e6 のレンジ → 1e-12 px は 5e-9 相当、許容誤差 1e-3 未満
    assert _drag(s, 20.0 + 1e-12) == [False]


def test_invalid_construction_raises() -> None:
    with pytest.raises(ValueError):
        _slider(value=5.0, lo=10.0, hi=10.0)
    with pytest.raises(ValueError):
        _slider(value=5.0, lo=10.0, hi=0.0)
    with pytest.raises(ValueError):
        _slider(value=200.0)
    with pytest.raises(ValueError):
        Slider("w", 0.0, 0.0, 1.0, Rect(0.0, 0.0, 0.0, 4.0))


def test_draw_emits_label_track_marker_and_value(canvas) -> None:
    style = SliderStyle()
    s = _slider(value=25.0)
    s.draw(canvas)
    kinds = [c[0] for c in canvas.calls]
    assert kinds == ["text", "line", "circle", "text"]

    _, label, label_pos, size, color = canvas.calls[0]
    assert label == "Param"
    assert label_pos == (20.0, 42.0 - style.label_gap)
    assert size == style.font_size and color == style.text_color

    _, start, end, thickness, _ = canvas.calls[1]
    assert start == (20.0, 42.0) and end == (220.0, 42.0)
    assert thickness == style.track_thickness

    _, center, radius, marker_color = canvas.calls[2]
    assert center == (70.0, 42.0)
    assert radius == style.marker_radius and marker_color == (230, 41, 55, 255)

    assert canvas.calls[3][1] == "25.00"
    assert canvas.calls[3][2][0] == 220.0 + style.value_gap
