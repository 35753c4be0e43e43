"""共通フィクスチャ。

- 乱数シード固定
- 記録用 Canvas / 入力スナップショット / 既定状態
- 環境変数由来の設定を既定値へ戻す
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from _utils.dummies import RecordingCanvas
from common import settings
from engine.core.input_state import InputState
from engine.runtime.state import AppState
from shapes.superellipse import quarter_superellipse

_ENV_KEYS = ("SQR_LOG_LEVEL", "SQR_FPS", "SQR_SHOW_HUD")


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """テスト間で `SQR_*` 環境変数の影響を持ち越さない。"""
    for name in _ENV_KEYS:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    for name in _ENV_KEYS:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()


@pytest.fixture()
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture()
def inputs() -> InputState:
    return InputState()


@pytest.fixture()
def state() -> AppState:
    """幅 800px 相当の既定スライダー構成（半径初期値 200）。"""
    return AppState.create(800, quarter_superellipse)
