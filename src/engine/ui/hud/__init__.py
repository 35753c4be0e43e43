"""
どこで: `engine.ui.hud` パッケージ。
何を: HUD 表示の設定・項目定義・計測（MetricSampler）・描画（OverlayHUD）を提供する。
なぜ: 実行時の状態を画面上で確認でき、かつ無効時はコストを払わないようにするため。
"""

from __future__ import annotations

from .config import HUDConfig
from .fields import CPU, FPS, MEM, MODE, REGEN, SEGMENTS, STEPS
from .overlay import OverlayHUD
from .sampler import MetricSampler

__all__ = [
    "HUDConfig",
    "MetricSampler",
    "OverlayHUD",
    "FPS",
    "MODE",
    "STEPS",
    "SEGMENTS",
    "REGEN",
    "CPU",
    "MEM",
]
