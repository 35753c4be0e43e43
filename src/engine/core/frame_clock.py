"""
どこで: `engine.core.frame_clock`。
何を: 登録順に `Tickable.tick(dt)` を呼び、呼び出し回数を数える FrameClock。
なぜ: 描画ループ → サンプラ → オーバーレイの更新順を 1 か所で固定し、
      pyglet の `schedule_interval` に渡すコールバックを 1 つにまとめるため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """`Tickable` 列を固定順序で駆動する。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self.frame_count = 0

    def tick(self, dt: float | None = None) -> None:
        # pyglet.clock は dt を渡す。直接呼ばれた場合（テスト等）は自前で測る
        now = time.perf_counter()
        if dt is None:
            dt = now - self._last_time
        self._last_time = now
        for item in self._tickables:
            item.tick(dt)
        self.frame_count += 1


__all__ = ["FrameClock"]
