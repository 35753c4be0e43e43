from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_int, env_str
from common.logging import resolve_level, setup_default_logging


def test_env_int_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQR_TEST_INT", " 42 ")
    assert env_int("SQR_TEST_INT", 1) == 42
    monkeypatch.setenv("SQR_TEST_INT", "abc")
    assert env_int("SQR_TEST_INT", 1) == 1
    monkeypatch.setenv("SQR_TEST_INT", "-5")
    assert env_int("SQR_TEST_INT", None, min_value=1) == 1
    monkeypatch.delenv("SQR_TEST_INT")
    assert env_int("SQR_TEST_INT") is None


@pytest.mark.parametrize(
    "raw,expected", [("1", True), ("on", True), ("YES", True), ("0", False), ("off", False), ("??", True)]
)
def test_env_bool_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("SQR_TEST_BOOL", raw)
    assert env_bool("SQR_TEST_BOOL", True) is expected


def test_env_str_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQR_TEST_STR", "debug")
    assert env_str("SQR_TEST_STR", "INFO", choices={"INFO", "DEBUG"}) == "debug"
    monkeypatch.setenv("SQR_TEST_STR", "verbose")
    assert env_str("SQR_TEST_STR", "INFO", choices={"INFO", "DEBUG"}) == "INFO"


def test_settings_defaults() -> None:
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.FPS is None
    assert s.SHOW_HUD is True


def test_settings_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQR_LOG_LEVEL", "debug")
    monkeypatch.setenv("SQR_FPS", "0")
    monkeypatch.setenv("SQR_SHOW_HUD", "false")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.FPS == 1
    assert s.SHOW_HUD is False
    assert resolve_level() == logging.DEBUG


def test_resolve_level_variants() -> None:
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level("nope") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_setup_default_logging_is_noop_with_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [sentinel])
    setup_default_logging("DEBUG")
    assert root.handlers == [sentinel]
