"""
どこで: `engine.core.tickable`。
何を: `FrameClock` から毎フレーム呼ばれる `tick(dt)` の Protocol。
なぜ: 描画ループ・HUD サンプラ・HUD オーバーレイを同じ列に並べて順に進めるため。
"""

from typing import Protocol


class Tickable(Protocol):
    """`FrameClock` に登録できるオブジェクト。"""

    def tick(self, dt: float) -> None:
        """前回呼び出しからの経過秒 `dt` を受け取り 1 フレーム進める。"""
