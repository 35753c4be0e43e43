"""
どこで: `engine.render` 型定義。
何を: 描画面 `Canvas` Protocol（線/三角形/円/文字/背景クリア）と画面座標の約束事。
なぜ: 曲線描画とスライダーをウィンドウ実装（pyglet）から切り離し、記録用ダミーで検証できるようにするため。

座標系:
- 原点は描画面の左上、Y は下向き。ピクセル単位。
- pyglet の左下原点への変換は実装側（`PygletCanvas`）で行う。
"""

from __future__ import annotations

from typing import Protocol

from common.types import RGBA8, Vec2


class Canvas(Protocol):
    """1 フレーム分の描画命令を受け取る面。"""

    def clear(self, color: RGBA8) -> None:
        """背景を単色で塗りつぶす。"""

    def line(self, start: Vec2, end: Vec2, thickness: float, color: RGBA8) -> None: ...

    def triangle(self, a: Vec2, b: Vec2, c: Vec2, color: RGBA8) -> None: ...

    def circle(self, center: Vec2, radius: float, color: RGBA8) -> None: ...

    def text(self, text: str, position: Vec2, font_size: float, color: RGBA8) -> None:
        """`position` は文字列のベースライン左端。"""


__all__ = ["Canvas", "RGBA8", "Vec2"]
