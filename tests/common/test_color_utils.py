from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from api.sketch_runner.utils import resolve_colors
from engine.runtime.loop import FramePalette
from engine.ui.slider import SliderStyle
from util.color import normalize_color, parse_hex_color_str, to_u8_rgba

DEFAULT_YAML = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#E62937", (230, 41, 55, 255)),
        ("#505050", (80, 80, 80, 255)),
        ("e62937", (230, 41, 55, 255)),
        ("0xE6293780", (230, 41, 55, 128)),
        ("  #ffffff00 ", (255, 255, 255, 0)),
    ],
)
def test_hex_strings_to_u8(text: str, expected: tuple[int, int, int, int]) -> None:
    assert to_u8_rgba(text) == expected


def test_rgb_hex_gets_opaque_alpha() -> None:
    # 6 桁は不透明、8 桁は末尾 2 桁がアルファ
    assert parse_hex_color_str("#000000")[3] == 1.0
    assert parse_hex_color_str("#00000000")[3] == 0.0


@pytest.mark.parametrize("text", ["#E629", "#E6293", "#E62937801", "#GG0000", ""])
def test_malformed_hex_is_rejected(text: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str(text)


@pytest.mark.parametrize(
    "value, expected",
    [
        # 全要素が 0–1 なら 0–1 扱い
        ((1, 1, 1), (255, 255, 255, 255)),
        ((0.0, 0.5, 1.0, 0.25), (0, 128, 255, 64)),
        # 1 つでも 0–1 を外れれば 0–255 扱い（丸め + クランプ）
        ((0, 128, 255), (0, 128, 255, 255)),
        ((2, 0.5, 0), (2, 0, 0, 255)),
        ([300, -5, 10.4, 128], (255, 0, 10, 128)),
    ],
)
def test_sequence_scale_rules(value: object, expected: tuple[int, int, int, int]) -> None:
    assert to_u8_rgba(value) == expected


@pytest.mark.parametrize("value", [(1, 2), (1, 2, 3, 4, 5), ("a", "b", "c"), 0xFFFFFF, None])
def test_unsupported_color_values_raise(value: object) -> None:
    with pytest.raises(ValueError):
        normalize_color(value)


def test_default_yaml_canvas_matches_builtin_colors() -> None:
    canvas_cfg = yaml.safe_load(DEFAULT_YAML.read_text(encoding="utf-8"))["canvas"]
    colors = resolve_colors(canvas_cfg)
    assert colors.palette == FramePalette()
    assert colors.slider_style == SliderStyle()


def test_canvas_colors_reach_palette_and_slider_style() -> None:
    colors = resolve_colors(
        {
            "background_color": "#10203040",
            "fill_color": (0.0, 0.0, 1.0),
            "marker_color": [0, 255, 0],
            "text_color": "#808080",
        }
    )
    assert colors.palette.background == (16, 32, 48, 64)
    assert colors.palette.fill == (0, 0, 255, 255)
    assert colors.palette.line == FramePalette().line
    assert colors.slider_style.marker_color == (0, 255, 0, 255)
    # トラック色の既定は文字色
    assert colors.slider_style.text_color == (128, 128, 128, 255)
    assert colors.slider_style.track_color == (128, 128, 128, 255)


def test_explicit_track_color_overrides_text_color() -> None:
    colors = resolve_colors({"text_color": "#808080", "track_color": "#FF0000"})
    assert colors.slider_style.track_color == (255, 0, 0, 255)
    assert colors.slider_style.text_color == (128, 128, 128, 255)
