"""
どこで: `engine.runtime.state`。
何を: スライダー集合 `SliderSet`・曲線パラメータ `CurveParams`・ループ状態 `AppState` を定義する。
なぜ: フレームループが所有する状態を 1 つの値にまとめ、モジュール変数に散らばらせないため。

所有関係:
- `AppState` は起動時に 1 度だけ生成され、描画ループ（`SquircleLoop`）が単独で所有・更新する。
- 第 1 象限バッファ `quarter` は丸ごと再生成される（部分更新なし）。レンダラは読み取りのみ。
- 形状生成関数は `generator` として外から注入する（engine は shapes を直接参照しない）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

import numpy as np

from engine.render.quadrant import RotationTransform
from engine.ui.slider import Rect, Slider, SliderStyle

# (semi_major, semi_minor, exponent, step_count) -> (step_count + 1, 2)
QuarterGenerator = Callable[[float, float, float, int], np.ndarray]

# 頂点の再計算が必要になるスライダー（thickness/rotation は含まない）
GEOMETRY_KEYS: tuple[str, ...] = ("semi_major", "semi_minor", "exponent", "steps")

# レイアウト（左上原点）
SLIDER_LEFT = 20.0
SLIDER_TOP = 40.0
SLIDER_SPACING = 40.0
TRACK_WIDTH = 200.0
TRACK_HEIGHT = 4.0


@dataclass(frozen=True)
class SliderSpec:
    """スライダー 1 本の初期値/範囲。"""

    key: str
    label: str
    initial: float
    min: float
    max: float


def default_slider_specs(window_width: float) -> tuple[SliderSpec, ...]:
    """既定のスライダー構成を返す。半径の初期値はウィンドウ幅の 1/4（範囲内に丸める）。"""
    radius = max(10.0, min(700.0, float(window_width) / 4.0))
    return (
        SliderSpec("semi_major", "Semi-major axis (r_a)", radius, 10.0, 700.0),
        SliderSpec("semi_minor", "Semi-minor axis (r_b)", radius, 10.0, 700.0),
        SliderSpec("exponent", "Roundedness (n)", 4.0, 0.1, 12.0),
        SliderSpec("thickness", "Thickness", 2.0, 0.1, 40.0),
        SliderSpec("steps", "Steps", 85.0, 1.0, 100.0),
        SliderSpec("rotation", "Rotation (deg)", 0.0, 0.0, 360.0),
    )


@dataclass(frozen=True)
class CurveParams:
    """1 フレームぶんの曲線パラメータ（各値はスライダー 1 本に対応）。"""

    semi_major: float
    semi_minor: float
    exponent: float
    step_count: int
    rotation_degrees: float
    thickness: float

    @property
    def geometry(self) -> tuple[float, float, float, int]:
        """頂点計算に使う値だけの組（再生成の要否判定に使う）。"""
        return (self.semi_major, self.semi_minor, self.exponent, self.step_count)


@dataclass
class SliderSet:
    semi_major: Slider
    semi_minor: Slider
    exponent: Slider
    thickness: Slider
    steps: Slider
    rotation: Slider

    @classmethod
    def from_specs(
        cls, specs: tuple[SliderSpec, ...], *, style: SliderStyle | None = None
    ) -> "SliderSet":
        st = style or SliderStyle()
        sliders: dict[str, Slider] = {}
        for row, spec in enumerate(specs):
            track_y = SLIDER_TOP + row * SLIDER_SPACING
            sliders[spec.key] = Slider(
                label=spec.label,
                value=spec.initial,
                min=spec.min,
                max=spec.max,
                bounds=Rect(SLIDER_LEFT, track_y - TRACK_HEIGHT / 2.0, TRACK_WIDTH, TRACK_HEIGHT),
                style=st,
            )
        return cls(**sliders)

    def items(self) -> Iterator[tuple[str, Slider]]:
        """描画/入力の順序（上から）で (キー, スライダー) を返す。"""
        yield "semi_major", self.semi_major
        yield "semi_minor", self.semi_minor
        yield "exponent", self.exponent
        yield "thickness", self.thickness
        yield "steps", self.steps
        yield "rotation", self.rotation

    def params(self) -> CurveParams:
        return CurveParams(
            semi_major=self.semi_major.value,
            semi_minor=self.semi_minor.value,
            exponent=self.exponent.value,
            step_count=max(1, int(round(self.steps.value))),
            rotation_degrees=self.rotation.value,
            thickness=self.thickness.value,
        )


@dataclass
class AppState:
    """描画ループが所有する状態。"""

    sliders: SliderSet
    generator: QuarterGenerator
    fill_mode: bool = False
    quarter: np.ndarray | None = None
    rotation: RotationTransform | None = None
    regenerations: int = 0
    frames: int = 0
    _params: CurveParams | None = field(default=None, repr=False)
    # 現在の quarter を生成したときの幾何パラメータ
    _built: tuple[float, float, float, int] | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        window_width: float,
        generator: QuarterGenerator,
        *,
        style: SliderStyle | None = None,
    ) -> "AppState":
        sliders = SliderSet.from_specs(default_slider_specs(window_width), style=style)
        return cls(sliders=sliders, generator=generator)

    @property
    def geometry_stale(self) -> bool:
        return self.quarter is None

    @property
    def params(self) -> CurveParams:
        """直近の `update_frame` で読んだパラメータ（未実行ならスライダーから読む）。"""
        return self._params if self._params is not None else self.sliders.params()

    def needs_regeneration(self, params: CurveParams) -> bool:
        """バッファ未生成、または幾何パラメータが生成時から変わっていれば True。

        Steps はスライダー値を丸めた `step_count` で比較するため、同じ整数内のドラッグでは再生成しない。
        """
        return self.quarter is None or self._built != params.geometry

    def read_params(self) -> CurveParams:
        """スライダーの現在値を読み、このフレームのパラメータとして保持する。"""
        self._params = self.sliders.params()
        return self._params

    def regenerate(self, params: CurveParams) -> None:
        """第 1 象限バッファを丸ごと作り直す。"""
        self.quarter = self.generator(
            params.semi_major, params.semi_minor, params.exponent, params.step_count
        )
        self._built = params.geometry
        self.regenerations += 1


__all__ = [
    "GEOMETRY_KEYS",
    "QuarterGenerator",
    "SliderSpec",
    "default_slider_specs",
    "CurveParams",
    "SliderSet",
    "AppState",
]
