"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア）と描画コールバック登録、マウス/キー入力の `InputState` への反映を提供。
なぜ: フレームループ/スライダーから GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    inputs = InputState()
    win = RenderWindow(1280, 800, inputs=inputs, caption="Squircle (superellipse) drawer")

    def draw_scene():
        ...

    win.add_draw_callback(draw_scene)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor
from pyglet.window import key, mouse

from .input_state import InputState

# 塗り/輪郭の切り替えキー
TOGGLE_FILL_KEY = key.F


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        inputs: InputState,
        caption: str = "Squircle (superellipse) drawer",
        bg_color: tuple[float, float, float, float] = (0.31, 0.31, 0.31, 1.0),
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            inputs: マウス/キー入力の書き込み先。
            caption: ウィンドウタイトル。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # 線描画を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        try:
            super().__init__(width=width, height=height, caption=caption, config=config)
        except pyglet.window.NoSuchConfigException:
            # MSAA 非対応環境では既定コンフィグで開く
            super().__init__(width=width, height=height, caption=caption)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self.inputs = inputs

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    # ---- input ----
    def _to_top_left(self, x: float, y: float) -> tuple[float, float]:
        return float(x), float(self.height) - float(y)

    def on_mouse_motion(self, x, y, dx, dy):  # noqa: ANN001
        self.inputs.move_pointer(*self._to_top_left(x, y))

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):  # noqa: ANN001
        self.inputs.move_pointer(*self._to_top_left(x, y))

    def on_mouse_press(self, x, y, button, modifiers):  # noqa: ANN001
        self.inputs.move_pointer(*self._to_top_left(x, y))
        if button == mouse.LEFT:
            self.inputs.set_pressed(True)

    def on_mouse_release(self, x, y, button, modifiers):  # noqa: ANN001
        self.inputs.move_pointer(*self._to_top_left(x, y))
        if button == mouse.LEFT:
            self.inputs.set_pressed(False)

    def on_key_press(self, symbol, modifiers):  # noqa: ANN001
        if symbol == TOGGLE_FILL_KEY:
            self.inputs.request_toggle()
            return pyglet.event.EVENT_HANDLED
        # ESC は既定ハンドラ（ウィンドウを閉じる）に任せる
        return super().on_key_press(symbol, modifiers)

    # ---- helpers ----
    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)

    def set_background_color(self, rgba: tuple[float, float, float, float]) -> None:
        """背景色 RGBA(0–1) を更新する。次フレームから反映。"""
        r, g, b, a = rgba
        self._bg_color = (float(r), float(g), float(b), float(a))
