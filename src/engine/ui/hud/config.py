"""
どこで: `engine.ui.hud.config`。
何を: HUD 表示の設定（有効/無効や表示項目、順序、サンプリング周期、配置）を定義する。
なぜ: HUD の表示を宣言的に制御し、オーバーヘッドを必要に応じて抑制するため。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Sequence

from .fields import CPU, FPS, MEM, MODE, REGEN, SEGMENTS, STEPS


@dataclass(frozen=True)
class HUDConfig:
    """HUD の表示設定。

    Parameters
    ----------
    enabled : bool
        HUD 全体の有効/無効。
    show_fps : bool
        実効 FPS 表示の有無。
    show_curve_stats : bool
        描画モード/分割数/描画セグメント数/再生成回数の表示の有無。
    show_cpu_mem : bool
        CPU/MEM 表示の有無（未使用時は psutil 呼び出しを抑止）。
    order : list[str] | None
        表示順（None なら既定順）。
    sample_interval : float
        MetricSampler のサンプリング周期（秒）。
    font_size : float
        テキストサイズ（pt）。
    line_height : float
        行間（px）。
    message_timeout : float
        一時メッセージの表示秒数。
    """

    enabled: bool = True
    show_fps: bool = True
    show_curve_stats: bool = True
    show_cpu_mem: bool = True
    order: Sequence[str] | None = None
    sample_interval: float = 0.5
    font_size: float = 9.0
    line_height: float = 16.0
    message_timeout: float = 2.0

    @classmethod
    def from_mapping(cls, section: Mapping[str, Any], *, enabled: bool | None = None) -> "HUDConfig":
        """設定ファイルの `hud` セクションから生成する（未知キー/型不一致は既定値）。"""
        kwargs: dict[str, Any] = {}
        for name in ("enabled", "show_fps", "show_curve_stats", "show_cpu_mem"):
            raw = section.get(name)
            if isinstance(raw, bool):
                kwargs[name] = raw
        for name in ("sample_interval", "font_size", "line_height", "message_timeout"):
            raw = section.get(name)
            if isinstance(raw, (int, float)) and not isinstance(raw, bool) and raw > 0:
                kwargs[name] = float(raw)
        order = section.get("order")
        if isinstance(order, list) and all(isinstance(k, str) for k in order):
            kwargs["order"] = tuple(order)
        if enabled is not None:
            kwargs["enabled"] = bool(enabled)
        return replace(cls(), **kwargs)

    def resolved_order(self) -> list[str]:
        """有効フラグに基づく既定順を返す（`order` 指定時はそれを優先）。"""
        if self.order is not None:
            return list(self.order)
        keys: list[str] = []
        if self.show_fps:
            keys.append(FPS)
        if self.show_curve_stats:
            keys.extend([MODE, STEPS, SEGMENTS, REGEN])
        if self.show_cpu_mem:
            keys.extend([CPU, MEM])
        return keys


__all__ = ["HUDConfig"]
