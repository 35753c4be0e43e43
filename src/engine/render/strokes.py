"""
どこで: `engine.render.strokes`。
何を: 象限レンダラが使う描画操作 2 種（輪郭線 `OutlineStroke` / 中心基準の扇形塗り `FillFan`）。
なぜ: 輪郭/塗りの切り替えを明示的な戦略オブジェクトで表し、走査ロジックを共通化するため。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.types import RGBA8, Vec2

from .types import Canvas


@dataclass
class OutlineStroke:
    """連続 2 点を太さ付きの線分で結ぶ。"""

    canvas: Canvas
    thickness: float
    color: RGBA8

    def segment(self, prev: Vec2, curr: Vec2) -> None:
        self.canvas.line(prev, curr, self.thickness, self.color)


@dataclass
class FillFan:
    """中心を第 3 頂点とする三角形で塗る（トライアングルファン）。"""

    canvas: Canvas
    center: Vec2
    color: RGBA8

    def segment(self, prev: Vec2, curr: Vec2) -> None:
        self.canvas.triangle(self.center, prev, curr, self.color)


def make_draw_op(
    fill_mode: bool,
    canvas: Canvas,
    *,
    center: Vec2,
    thickness: float,
    outline_color: RGBA8,
    fill_color: RGBA8,
) -> OutlineStroke | FillFan:
    """塗りモードに応じた描画操作を返す。"""
    if fill_mode:
        return FillFan(canvas=canvas, center=center, color=fill_color)
    return OutlineStroke(canvas=canvas, thickness=float(thickness), color=outline_color)


__all__ = ["OutlineStroke", "FillFan", "make_draw_op"]
