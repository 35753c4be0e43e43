"""
どこで: `engine.ui` サブパッケージ。
何を: 画面上のスライダー・HUD（メトリクス計測とオーバーレイ）を提供。
なぜ: 入力ウィジェットと補助表示を曲線描画から分離するため。
"""

from .slider import INTERACTION_MARGIN, Rect, Slider, SliderStyle

__all__ = ["INTERACTION_MARGIN", "Rect", "Slider", "SliderStyle"]
