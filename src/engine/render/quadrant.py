"""
どこで: `engine.render.quadrant`。
何を: 第 1 象限の頂点列を 4 象限へ鏡映 → 回転 → 平行移動し、連続 2 点ごとに描画操作へ渡す。
なぜ: 曲線形状の計算（shapes）と描画スタイル（輪郭/塗り）を分離し、1/4 の頂点だけで全周を描くため。

走査順:
- 符号表 `QUADRANT_SIGNS` の順に 4 象限を処理する。
- 各象限で index 0 を最初の「前の点」とし、以後 (i-1, i) の組を `draw_op.segment` へ渡す。
- 呼び出し回数は常に `4 * step_count`。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol

import numpy as np

from common.types import Vec2

# (sign_x, sign_y): 第 1 → 第 2 → 第 3 → 第 4 象限
QUADRANT_SIGNS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (-1, -1), (1, -1))


class DrawOp(Protocol):
    """変換済みの 2 点を受け取り描画する操作。"""

    def segment(self, prev: Vec2, curr: Vec2) -> None: ...


@dataclass(frozen=True)
class RotationTransform:
    """2D 回転行列を `(sin θ, cos θ)` で保持する。"""

    sin: float
    cos: float

    @classmethod
    def identity(cls) -> "RotationTransform":
        return cls(sin=0.0, cos=1.0)

    @classmethod
    def from_degrees(cls, degrees: float) -> "RotationTransform":
        if float(degrees) == 0.0:
            return cls.identity()
        theta = math.radians(float(degrees))
        return cls(sin=math.sin(theta), cos=math.cos(theta))

    def apply(self, x: float, y: float) -> Vec2:
        return (self.cos * x - self.sin * y, self.sin * x + self.cos * y)


def mirrored_quadrants(quarter: np.ndarray) -> Iterator[np.ndarray]:
    """回転前の 4 象限ぶんの鏡映コピーを符号表の順に返す。"""
    for sx, sy in QUADRANT_SIGNS:
        yield quarter * np.array([sx, sy], dtype=quarter.dtype)


def render_quadrants(
    center: Vec2,
    quarter: np.ndarray,
    rotation: RotationTransform,
    draw_op: DrawOp,
) -> int:
    """全周を描画し、`draw_op.segment` の呼び出し回数を返す。

    Parameters
    ----------
    center : Vec2
        平行移動先（画面上の曲線中心）。
    quarter : np.ndarray
        形状 `(step_count + 1, 2)` の第 1 象限頂点列。読み取りのみ。
    rotation : RotationTransform
        鏡映後に適用する回転。
    draw_op : DrawOp
        輪郭/塗りいずれかの描画操作。
    """
    if quarter.ndim != 2 or quarter.shape[1] != 2 or quarter.shape[0] < 2:
        raise ValueError(f"quarter buffer must have shape (N>=2, 2), got {quarter.shape}")
    cx, cy = float(center[0]), float(center[1])
    calls = 0
    for mirrored in mirrored_quadrants(quarter):
        # 回転 + 平行移動をまとめて行う（行ベクトル × 転置回転行列）
        xs = mirrored[:, 0]
        ys = mirrored[:, 1]
        px = rotation.cos * xs - rotation.sin * ys + cx
        py = rotation.sin * xs + rotation.cos * ys + cy
        prev: Vec2 = (float(px[0]), float(py[0]))
        for i in range(1, mirrored.shape[0]):
            curr: Vec2 = (float(px[i]), float(py[i]))
            draw_op.segment(prev, curr)
            prev = curr
            calls += 1
    return calls


__all__ = [
    "QUADRANT_SIGNS",
    "DrawOp",
    "RotationTransform",
    "mirrored_quadrants",
    "render_quadrants",
]
