"""
どこで: `common` パッケージ。
何を: 型エイリアス・環境変数ヘルパ・設定・ロギングなど依存の少ない共通基盤。
なぜ: shapes/engine/api のどこからでも参照できる最内層を分離し、依存の向きを単純化するため。
"""

from .types import RGBA8, Vec2

__all__ = [
    "RGBA8",
    "Vec2",
]
