"""
どこで: `engine.ui.hud` の計測サブモジュール。
何を: 描画ループの統計（モード/分割数/セグメント数/再生成回数）と、プロセスの CPU/MEM、
      実効 FPS を一定間隔でサンプリングし、HUD 描画向けに文字列辞書として保持する。
なぜ: 実行時の簡易メトリクスを低コストに観測し、dirty フラグが効いているかを目視できるようにするため。
"""

from __future__ import annotations

import logging
import os
import time
from typing import Callable, Mapping, Optional

from ...core.tickable import Tickable
from .config import HUDConfig
from .fields import CPU, FPS, MEM

logger = logging.getLogger(__name__)

StatsProvider = Callable[[], Mapping[str, str]]


class MetricSampler(Tickable):
    """FPS・ループ統計・CPU・MEM を一定間隔でサンプリングし dict に保持する。

    - `data`: HUD のテキスト表示用にフォーマット済みの文字列を保持。
    - `values`: 生値（FPS[Hz], CPU[%], MEM[bytes]）。
    """

    def __init__(
        self,
        config: HUDConfig | None = None,
        *,
        stats_provider: StatsProvider | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._config = config or HUDConfig()
        self._interval = float(self._config.sample_interval)
        self._stats_provider = stats_provider
        self._clock = clock
        # psutil は必要時のみ遅延 import
        self._proc: Optional["psutil.Process"] = None  # type: ignore[name-defined]  # noqa: F821
        if self._config.show_cpu_mem:
            try:
                import psutil

                self._proc = psutil.Process(os.getpid())
            except Exception as e:  # psutil 未導入/権限不足は CPU/MEM 非表示で継続
                logger.debug("psutil unavailable: %s", e)
                self._proc = None
        # 前回サンプリング時刻とフレーム数（実効FPS算出に使用）
        self._last = 0.0
        self._frames = 0
        self.data: dict[str, str] = {}
        self.values: dict[str, float] = {}

    def set_stats_provider(self, provider: StatsProvider) -> None:
        """描画ループの統計（MODE/STEPS/...）を返すプロバイダを登録する。"""
        self._stats_provider = provider

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        self._frames += 1
        now = self._clock()
        if self._last > 0.0 and now - self._last < self._interval:
            return
        elapsed = now - self._last if self._last > 0.0 else 0.0
        self._last = now

        # 実効FPS: 前回サンプル以降の tick 数 / 経過秒
        if self._config.show_fps:
            fps = (self._frames / elapsed) if elapsed > 0.0 else 0.0
            self.data[FPS] = f"{fps:4.1f}"
            self.values[FPS] = float(fps)
        self._frames = 0

        if self._config.show_curve_stats and self._stats_provider is not None:
            self.data.update(self._stats_provider())

        if self._config.show_cpu_mem and self._proc is not None:
            cpu_p = float(self._proc.cpu_percent(0.0))
            rss = float(self._proc.memory_info().rss)
            self.data[CPU] = f"{cpu_p:4.1f}%"
            self.data[MEM] = self._human(rss)
            self.values[CPU] = cpu_p
            self.values[MEM] = rss

    # -------- helpers --------
    @staticmethod
    def _human(n: float) -> str:
        for u in "B KB MB GB TB".split():
            if n < 1024:
                return f"{n:4.1f}{u}"
            n /= 1024
        return f"{n:4.1f}PB"


__all__ = ["MetricSampler", "StatsProvider"]
