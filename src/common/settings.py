"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class _Settings:
    # ロギング
    LOG_LEVEL: str = "INFO"

    # ランナー（None なら設定ファイル → 既定 60 の順で解決）
    FPS: int | None = None

    # HUD
    SHOW_HUD: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `SQR_LOG_LEVEL`: ログレベル名（不正値は INFO）。
    - `SQR_FPS`: 描画レート（1 未満は 1 に丸め）。
    - `SQR_SHOW_HUD`: HUD の有効/無効。
    """
    _settings.LOG_LEVEL = env_str("SQR_LOG_LEVEL", "INFO", choices=_LOG_LEVELS).upper()
    _settings.FPS = env_int("SQR_FPS", None, min_value=1)
    _settings.SHOW_HUD = env_bool("SQR_SHOW_HUD", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
