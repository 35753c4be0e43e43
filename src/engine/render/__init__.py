"""
どこで: `engine.render` サブパッケージ。
何を: 描画面 Protocol・象限レンダラ・輪郭/塗りの描画操作を提供（pyglet 実装は `pyglet_canvas`）。
なぜ: 曲線の走査と描画バックエンドの責務を分離し、ウィンドウ無しでも検証できるようにするため。
"""

from .label_pool import LabelPool
from .quadrant import QUADRANT_SIGNS, RotationTransform, mirrored_quadrants, render_quadrants
from .strokes import FillFan, OutlineStroke, make_draw_op
from .types import Canvas

__all__ = [
    "Canvas",
    "LabelPool",
    "QUADRANT_SIGNS",
    "RotationTransform",
    "mirrored_quadrants",
    "render_quadrants",
    "OutlineStroke",
    "FillFan",
    "make_draw_op",
]
