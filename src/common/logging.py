"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- ランナー側で設定が無い場合に、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
- 既定レベルは `common.settings`（`SQR_LOG_LEVEL`）から解決する。
"""

from __future__ import annotations

import logging

from . import settings as _settings


def resolve_level(level: int | str | None = None) -> int:
    """レベル指定（名前/数値/None）を `logging` の数値レベルへ解決する。"""
    if level is None:
        level = _settings.get().LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 上位のランナーから呼び出す想定
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["resolve_level", "setup_default_logging"]
