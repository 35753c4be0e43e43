"""
どこで: `engine.core.input_state`。
何を: ポインタ位置・ボタン押下状態・塗り切替キーの押下イベントを保持する入力スナップショット。
なぜ: ウィンドウのイベントハンドラ（書き込み側）とフレームループ（読み取り側）を疎結合にするため。

補足:
- 座標は左上原点・Y 下向き（`engine.render.types` と同じ約束）。
- 塗り切替はエッジトリガ。押下ごとに 1 回だけ `consume_toggle()` が True を返す。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.types import Vec2


@dataclass
class InputState:
    pointer_x: float = 0.0
    pointer_y: float = 0.0
    pressed: bool = False
    _toggle_pending: int = 0

    @property
    def pointer(self) -> Vec2:
        return (self.pointer_x, self.pointer_y)

    def move_pointer(self, x: float, y: float) -> None:
        self.pointer_x = float(x)
        self.pointer_y = float(y)

    def set_pressed(self, pressed: bool) -> None:
        self.pressed = bool(pressed)

    def request_toggle(self) -> None:
        self._toggle_pending += 1

    def consume_toggle(self) -> bool:
        """保留中の切替要求を 1 件取り出す（無ければ False）。"""
        if self._toggle_pending <= 0:
            return False
        self._toggle_pending -= 1
        return True


__all__ = ["InputState"]
