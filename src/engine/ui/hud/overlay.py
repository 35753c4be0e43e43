"""
どこで: `engine.ui.hud` の HUD 表示モジュール。
何を: MetricSampler のキー/値ペアと一時メッセージを Canvas のテキストとしてオーバーレイ描画する。
なぜ: 実行時メトリクスやモード切替を即座に可視化し、操作のフィードバックを高めるため。
"""

from __future__ import annotations

import time
from typing import Callable, Literal

from common.types import RGBA8
from engine.render.types import Canvas

from ...core.tickable import Tickable
from .config import HUDConfig
from .sampler import MetricSampler

Level = Literal["info", "warn", "error"]

_LEVEL_COLORS: dict[str, RGBA8] = {
    "info": (255, 255, 255, 230),
    "warn": (230, 160, 40, 240),
    "error": (230, 60, 60, 240),
}


class OverlayHUD(Tickable):
    """MetricSampler が溜めた文字列を左下に、一時メッセージをスライダー群の下に描画する。"""

    def __init__(
        self,
        sampler: MetricSampler,
        *,
        height: Callable[[], float],
        config: HUDConfig | None = None,
        color: RGBA8 = (230, 230, 230, 200),
        message_origin: tuple[float, float] = (20.0, 290.0),
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sampler = sampler
        self._height = height
        self._config = config or HUDConfig()
        self._color = color
        self._message_origin = message_origin
        self._clock = clock
        self._lines: list[str] = []
        self._messages: list[tuple[str, float, Level]] = []

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        data = self.sampler.data
        self._lines = [f"{k} : {data[k]}" for k in self._config.resolved_order() if k in data]
        # メッセージの有効期限を掃除
        now = self._clock()
        self._messages = [m for m in self._messages if m[1] > now]

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def messages(self) -> list[str]:
        return [m[0] for m in self._messages]

    # -------- draw --------
    def draw(self, canvas: Canvas) -> None:
        if not self._config.enabled:
            return
        size = self._config.font_size
        step = self._config.line_height
        # 下から積み上げる（最初の行が最上段）
        y = float(self._height()) - 10.0 - step * (len(self._lines) - 1)
        for text in self._lines:
            canvas.text(text, (10.0, y), size, self._color)
            y += step
        mx, my = self._message_origin
        for text, _expire, level in self._messages:
            canvas.text(text, (mx, my), size + 2, _LEVEL_COLORS[level])
            my += step + 4

    # ---- public helpers ----
    def show_message(self, text: str, level: Level = "info", timeout_sec: float | None = None) -> None:
        timeout = self._config.message_timeout if timeout_sec is None else timeout_sec
        expire = self._clock() + max(0.1, float(timeout))
        self._messages.append((text, expire, level))


__all__ = ["OverlayHUD"]
