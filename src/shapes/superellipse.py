"""
どこで: `shapes.superellipse`。
何を: スーパー楕円（squircle）の第 1 象限ぶんの頂点列を媒介変数表示で生成する。
なぜ: 4 回対称性を使えば 1/4 だけ計算すれば十分で、ミラー/回転/平行移動は描画側に任せられるため。

媒介変数表示（t ∈ [0, π/2]）:

    x(t) = a * cos(t)^(2/n)
    y(t) = b * sin(t)^(2/n)

- index 0 は厳密に `(a, 0)`、index `steps` は厳密に `(0, b)` に固定する
  （`0^(2/n)` と境界付近の浮動小数誤差で象限間に隙間が出ないように）。
- 内部点は第 1 象限内なので sin/cos は非負。符号補正は行わない。
"""

from __future__ import annotations

import math

import numpy as np


def _validate(semi_major: float, semi_minor: float, exponent: float, step_count: int) -> None:
    if not semi_major > 0.0 or not semi_minor > 0.0:
        raise ValueError(
            f"semi axes must be > 0, got semi_major={semi_major}, semi_minor={semi_minor}"
        )
    if not exponent > 0.0:
        raise ValueError(f"exponent must be > 0, got {exponent}")
    if step_count < 1:
        raise ValueError(f"step_count must be >= 1, got {step_count}")


def quarter_superellipse(
    semi_major: float,
    semi_minor: float,
    exponent: float,
    step_count: int,
) -> np.ndarray:
    """第 1 象限の境界点列を返す。

    Parameters
    ----------
    semi_major : float
        X 軸方向の半径 `a`（> 0）。
    semi_minor : float
        Y 軸方向の半径 `b`（> 0）。
    exponent : float
        丸み指数 `n`（> 0）。2 で楕円、大きいほど長方形に近づく。
    step_count : int
        `[0, π/2]` の分割数（>= 1）。

    Returns
    -------
    np.ndarray
        形状 `(step_count + 1, 2)` の float64 配列。`(a, 0)` から `(0, b)` まで。

    Raises
    ------
    ValueError
        半径/指数が非正、または `step_count < 1` の場合。
    """
    a = float(semi_major)
    b = float(semi_minor)
    n = float(exponent)
    steps = int(step_count)
    _validate(a, b, n, steps)

    power = 2.0 / n
    t = (math.pi / 2.0) * np.arange(steps + 1, dtype=np.float64) / steps
    cos_t = np.cos(t)
    sin_t = np.sin(t)

    out = np.empty((steps + 1, 2), dtype=np.float64)
    # 内部点のみ冪乗式で評価（端点は下で上書き）
    out[1:steps, 0] = a * np.power(cos_t[1:steps], power)
    out[1:steps, 1] = b * np.power(sin_t[1:steps], power)
    out[0] = (a, 0.0)
    out[steps] = (0.0, b)
    return out


def superellipse_outline(
    semi_major: float,
    semi_minor: float,
    exponent: float,
    step_count: int,
) -> np.ndarray:
    """4 象限を連結した閉じた外周ポリラインを返す（`4 * step_count + 1` 点）。

    第 1 象限 → 第 2 → 第 3 → 第 4 の順に、数学座標系で反時計回りに辿る。
    先頭と末尾は同じ点 `(a, 0)`。
    """
    q = quarter_superellipse(semi_major, semi_minor, exponent, step_count)
    mirror_x = q[::-1] * np.array([-1.0, 1.0])
    mirror_xy = q * np.array([-1.0, -1.0])
    mirror_y = q[::-1] * np.array([1.0, -1.0])
    # 象限の継ぎ目で点が重複しないよう各象限の先頭を落とす
    return np.concatenate([q, mirror_x[1:], mirror_xy[1:], mirror_y[1:]], axis=0)


__all__ = ["quarter_superellipse", "superellipse_outline"]
