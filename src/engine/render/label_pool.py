"""
どこで: `engine.render.label_pool`。
何を: テキストラベルをフレーム間で再利用するプール。呼び出し順（スロット）ごとに 1 つのラベルを保持し、
      文字列/位置/サイズ/色が変わったときだけ属性を書き換える。
なぜ: ラベルのレイアウト生成は描画で最も重い処理のため、毎フレーム作り直さずに済ませるため。

ラベル生成関数は外から渡す（pyglet 実装では `pyglet.text.Label` を部分適用したもの）。
"""

from __future__ import annotations

from typing import Any, Callable

from common.types import RGBA8

# (text, x, y, font_size, color) -> ラベル
LabelFactory = Callable[[str, float, float, float, RGBA8], Any]


class LabelPool:
    """スロット番号でラベルを使い回す。"""

    def __init__(self, factory: LabelFactory):
        self._factory = factory
        self._labels: list[Any] = []
        self._used = 0
        self.created = 0

    def begin_frame(self) -> None:
        self._used = 0

    def place(self, text: str, x: float, y: float, font_size: float, color: RGBA8) -> Any:
        """このフレームの次のスロットにラベルを配置して返す。"""
        if self._used < len(self._labels):
            label = self._labels[self._used]
            if label.text != text:
                label.text = text
            if label.font_size != font_size:
                label.font_size = font_size
            if tuple(label.color) != tuple(color):
                label.color = color
            if label.x != x:
                label.x = x
            if label.y != y:
                label.y = y
        else:
            label = self._factory(text, x, y, font_size, color)
            self._labels.append(label)
            self.created += 1
        self._used += 1
        return label

    def end_frame(self) -> None:
        """このフレームで使われなかったスロットを破棄する。"""
        for label in self._labels[self._used :]:
            label.delete()
        del self._labels[self._used :]

    def __len__(self) -> int:
        return len(self._labels)


__all__ = ["LabelFactory", "LabelPool"]
