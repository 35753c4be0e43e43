"""
どこで: `engine.render.pyglet_canvas`。
何を: `Canvas` Protocol の pyglet 実装。図形は 1 フレーム分を Batch に積み、文字は `LabelPool` で
      フレーム間で使い回し、`flush()` でまとめて描く。
なぜ: 曲線/スライダー/HUD の描画命令を pyglet の shapes/Label へ写像し、左上原点の座標系を
      pyglet の左下原点へ一箇所で変換するため。

使用例:
    canvas = PygletCanvas(window)

    def draw_scene():
        canvas.begin_frame()
        canvas.line((0, 0), (100, 100), 2.0, (255, 255, 255, 255))
        canvas.flush()
"""

from __future__ import annotations

from typing import Any

import pyglet
from pyglet.gl import glClearColor

from common.types import RGBA8, Vec2

from .label_pool import LabelPool


class PygletCanvas:
    """pyglet の Batch を用いた即時描画風のキャンバス。"""

    def __init__(self, window: Any):
        self._window = window
        self._batch = pyglet.graphics.Batch()
        # Batch は頂点リストへの参照しか持たないため、図形オブジェクトをフレーム末まで保持する
        self._items: list[Any] = []
        # ラベルは専用 Batch に常駐させ、図形の上に描く
        self._text_batch = pyglet.graphics.Batch()
        self._labels = LabelPool(self._make_label)

    def _make_label(self, text: str, x: float, y: float, font_size: float, color: RGBA8) -> Any:
        return pyglet.text.Label(
            text,
            x=x,
            y=y,
            anchor_x="left",
            anchor_y="baseline",
            font_size=font_size,
            color=color,
            batch=self._text_batch,
        )

    # ---- frame lifecycle ----
    def begin_frame(self) -> None:
        """前フレームの図形を破棄し、新しい Batch を用意する（ラベルは保持）。"""
        self._items.clear()
        self._batch = pyglet.graphics.Batch()
        self._labels.begin_frame()

    def flush(self) -> None:
        """積んだ図形 → ラベルの順に描画する。"""
        self._labels.end_frame()
        self._batch.draw()
        self._text_batch.draw()

    @property
    def item_count(self) -> int:
        return len(self._items) + len(self._labels)

    # ---- helpers ----
    def _flip(self, point: Vec2) -> tuple[float, float]:
        # 左上原点（Y 下向き）→ pyglet の左下原点（Y 上向き）
        return float(point[0]), float(self._window.height) - float(point[1])

    # ---- Canvas ----
    def clear(self, color: RGBA8) -> None:
        r, g, b, a = color
        glClearColor(r / 255.0, g / 255.0, b / 255.0, a / 255.0)
        self._window.clear()

    def line(self, start: Vec2, end: Vec2, thickness: float, color: RGBA8) -> None:
        x1, y1 = self._flip(start)
        x2, y2 = self._flip(end)
        # 第 5 引数（太さ）は pyglet 2.0 では width、2.1 以降は thickness という名前のため位置引数で渡す
        self._items.append(
            pyglet.shapes.Line(x1, y1, x2, y2, float(thickness), color=color, batch=self._batch)
        )

    def triangle(self, a: Vec2, b: Vec2, c: Vec2, color: RGBA8) -> None:
        ax, ay = self._flip(a)
        bx, by = self._flip(b)
        cx, cy = self._flip(c)
        self._items.append(
            pyglet.shapes.Triangle(ax, ay, bx, by, cx, cy, color=color, batch=self._batch)
        )

    def circle(self, center: Vec2, radius: float, color: RGBA8) -> None:
        x, y = self._flip(center)
        self._items.append(pyglet.shapes.Circle(x, y, float(radius), color=color, batch=self._batch))

    def text(self, text: str, position: Vec2, font_size: float, color: RGBA8) -> None:
        x, y = self._flip(position)
        self._labels.place(text, x, y, font_size, color)


__all__ = ["PygletCanvas"]
