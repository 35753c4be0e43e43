"""
内部ヘルパ群（API 非公開）。

どこで: `api.sketch_runner`
何を: `run_squircle` が使う設定解決（FPS/寸法/配色/HUD）の純粋関数。
なぜ: ランナー本体をウィンドウ結線だけに保ち、解決ロジックをウィンドウ無しで検証するため。
"""

from __future__ import annotations

__all__: list[str] = []
