"""
どこで: `api` 入口（高レベル公開 API）。
何を: スクワクル描画ランナー `run_squircle`（別名 `run`）を再輸出する。
なぜ: 利用者が `from api import run` の 1 行で起動できるようにするため。

Usage:
    from api import run

    run(width=1280, height=800, fps=60)
"""

from .sketch import main as main
from .sketch import run_squircle as run
from .sketch import run_squircle as run_squircle

__all__ = [
    "run_squircle",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    "main",  # コマンドラインエントリ
]

# バージョン情報
__version__ = "2026.10"
