from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_float, env_int, env_str
from common.logging import resolve_level


@pytest.fixture(autouse=True)
def _restore_settings():
    yield
    settings.reload_from_env()


def test_env_int(monkeypatch) -> None:
    monkeypatch.setenv("FS_TEST_INT", "5")
    assert env_int("FS_TEST_INT", 1) == 5
    assert env_int("FS_TEST_INT", 1, min_value=10) == 10
    monkeypatch.setenv("FS_TEST_INT", "x")
    assert env_int("FS_TEST_INT", 1) == 1
    monkeypatch.delenv("FS_TEST_INT")
    assert env_int("FS_TEST_INT", None) is None


def test_env_float_bool_str(monkeypatch) -> None:
    monkeypatch.setenv("FS_TEST_F", "0.25")
    assert env_float("FS_TEST_F") == pytest.approx(0.25)
    monkeypatch.setenv("FS_TEST_B", "off")
    assert env_bool("FS_TEST_B", True) is False
    monkeypatch.setenv("FS_TEST_B", "1")
    assert env_bool("FS_TEST_B") is True
    monkeypatch.setenv("FS_TEST_B", "maybe")
    assert env_bool("FS_TEST_B", True) is True
    monkeypatch.setenv("FS_TEST_S", "  hello ")
    assert env_str("FS_TEST_S") == "hello"
    monkeypatch.setenv("FS_TEST_S", "   ")
    assert env_str("FS_TEST_S", "d") == "d"


def test_reload_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FS_SEED", "42")
    monkeypatch.setenv("FS_LOG_LEVEL", "debug")
    monkeypatch.setenv("FS_HUD_ENABLED", "0")
    monkeypatch.setenv("FS_CIRCLE_SEGMENTS", "3")
    settings.reload_from_env()
    s = settings.get()
    assert s.SEED == 42
    assert s.LOG_LEVEL == "DEBUG"
    assert s.HUD_ENABLED is False
    assert s.CIRCLE_SEGMENTS == settings.MIN_CIRCLE_SEGMENTS


def test_defaults_without_env(monkeypatch) -> None:
    for name in ("FS_SEED", "FS_LOG_LEVEL", "FS_HUD_ENABLED", "FS_CIRCLE_SEGMENTS"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    s = settings.get()
    assert s.SEED is None
    assert s.LOG_LEVEL == "INFO"
    assert s.HUD_ENABLED is True
    assert s.CIRCLE_SEGMENTS == 48


def test_resolve_level(monkeypatch) -> None:
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(logging.DEBUG) == logging.DEBUG
    assert resolve_level("nonsense") == logging.INFO
    monkeypatch.setenv("FS_LOG_LEVEL", "ERROR")
    settings.reload_from_env()
    assert resolve_level(None) == logging.ERROR
