"""
どこで: `engine.runtime.loop`。
何を: 1 フレームの更新（入力消費 → 再計算判定 → 回転更新）と描画（背景 → 曲線 → スライダー）。
なぜ: 「このフレームの描画に使うバッファは常にこのフレームのスライダー値と一致する」を保ちつつ、
      頂点の再計算コストを必要なフレームだけで払うため。

状態遷移（フレーム内）:
- STALE: バッファ未生成、または GEOMETRY_KEYS のいずれかが変化し、幾何パラメータが生成時と異なる
         （Steps は丸めた整数で比較）。
- FRESH: 同フレーム内で再生成した直後。thickness/rotation の変化では STALE にならない。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from common.types import RGBA8, Vec2
from engine.core.input_state import InputState
from engine.core.tickable import Tickable
from engine.render.quadrant import RotationTransform, render_quadrants
from engine.render.strokes import make_draw_op
from engine.render.types import Canvas
from engine.ui.hud.fields import MODE, REGEN, SEGMENTS, STEPS

from .state import GEOMETRY_KEYS, AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FramePalette:
    """背景/線/塗りの色（0–255 RGBA）。"""

    background: RGBA8 = (80, 80, 80, 255)
    line: RGBA8 = (255, 255, 255, 255)
    fill: RGBA8 = (255, 255, 255, 255)


@dataclass(frozen=True)
class FrameUpdate:
    """`update_frame` の結果。テスト/HUD から参照する。"""

    changed: tuple[str, ...]
    regenerated: bool
    rotated: bool
    toggled: bool


def update_frame(state: AppState, inputs: InputState) -> FrameUpdate:
    """入力を消費して状態を 1 フレーム進める。"""
    pointer = inputs.pointer
    changed = tuple(key for key, s in state.sliders.items() if s.update(pointer, inputs.pressed))

    toggled = False
    while inputs.consume_toggle():
        state.fill_mode = not state.fill_mode
        toggled = not toggled
    if toggled:
        logger.info("fill mode %s", "ON" if state.fill_mode else "OFF")

    params = state.read_params()

    regenerated = False
    if state.geometry_stale or (
        any(key in GEOMETRY_KEYS for key in changed) and state.needs_regeneration(params)
    ):
        state.regenerate(params)
        regenerated = True
        logger.debug(
            "regenerated quarter buffer: a=%.2f b=%.2f n=%.3f steps=%d",
            params.semi_major,
            params.semi_minor,
            params.exponent,
            params.step_count,
        )

    rotated = False
    if state.rotation is None or "rotation" in changed:
        state.rotation = RotationTransform.from_degrees(params.rotation_degrees)
        rotated = True

    state.frames += 1
    return FrameUpdate(changed=changed, regenerated=regenerated, rotated=rotated, toggled=toggled)


def draw_frame(state: AppState, canvas: Canvas, center: Vec2, palette: FramePalette) -> int:
    """背景クリア → 曲線（輪郭/塗り） → スライダーの順に描き、曲線の描画呼び出し数を返す。"""
    if state.quarter is None or state.rotation is None:
        raise RuntimeError("draw_frame() called before update_frame()")
    canvas.clear(palette.background)
    draw_op = make_draw_op(
        state.fill_mode,
        canvas,
        center=center,
        thickness=state.params.thickness,
        outline_color=palette.line,
        fill_color=palette.fill,
    )
    segments = render_quadrants(center, state.quarter, state.rotation, draw_op)
    for _key, slider in state.sliders.items():
        slider.draw(canvas)
    return segments


class SquircleLoop(Tickable):
    """`FrameClock` から駆動される描画ループ本体。"""

    def __init__(
        self,
        state: AppState,
        inputs: InputState,
        canvas: Canvas,
        center: Callable[[], Vec2],
        palette: FramePalette | None = None,
        on_toggle: Callable[[bool], None] | None = None,
    ):
        self.state = state
        self.inputs = inputs
        self.canvas = canvas
        self._center = center
        self.palette = palette or FramePalette()
        self._on_toggle = on_toggle
        self.last_update: FrameUpdate | None = None
        self.last_segments = 0

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        self.last_update = update_frame(self.state, self.inputs)
        if self.last_update.toggled and self._on_toggle is not None:
            self._on_toggle(self.state.fill_mode)

    # -------- draw --------
    def draw(self) -> None:
        if self.state.quarter is None:
            # 初回の tick 前に on_draw が来た場合でも同じフレームで生成してから描く
            self.tick(0.0)
        self.last_segments = draw_frame(self.state, self.canvas, self._center(), self.palette)

    # -------- HUD --------
    def stats(self) -> dict[str, str]:
        """HUD 向けのループ統計（表示用文字列）。"""
        return {
            MODE: "FILL" if self.state.fill_mode else "OUTLINE",
            STEPS: str(self.state.params.step_count),
            SEGMENTS: str(self.last_segments),
            REGEN: str(self.state.regenerations),
        }


__all__ = ["FramePalette", "FrameUpdate", "update_frame", "draw_frame", "SquircleLoop"]
