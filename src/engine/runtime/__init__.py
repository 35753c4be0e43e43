"""
どこで: `engine.runtime` サブパッケージ。
何を: 描画ループの状態（AppState）と 1 フレーム分の更新/描画（dirty フラグ付き頂点キャッシュ）を提供。
なぜ: 入力→再計算判定→描画の順序を 1 箇所に集約し、再計算を必要なフレームだけに限定するため。
"""

from .loop import FramePalette, FrameUpdate, SquircleLoop, draw_frame, update_frame
from .state import GEOMETRY_KEYS, AppState, CurveParams, SliderSet, SliderSpec

__all__ = [
    "GEOMETRY_KEYS",
    "AppState",
    "CurveParams",
    "SliderSet",
    "SliderSpec",
    "FramePalette",
    "FrameUpdate",
    "SquircleLoop",
    "draw_frame",
    "update_frame",
]
