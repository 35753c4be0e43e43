"""
どこで: `shapes` パッケージ。
何を: 形状生成（純関数）を提供する。現状はスーパー楕円の象限生成のみ。
なぜ: 頂点計算を描画/入力から切り離し、単体で検証できるようにするため。
"""

from .superellipse import quarter_superellipse, superellipse_outline

__all__ = [
    "quarter_superellipse",
    "superellipse_outline",
]
