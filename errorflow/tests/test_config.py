from __future__ import annotations

import pytest

from errorflow.shared.config import AppConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_FILE", "DEBUG_LOGGING", "SUCCESS_TITLE"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig(_env_file=None)

    assert config.app_env == "development"
    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.debug_logging is False
    assert config.success_title == "FrontEnd Guild"
    assert not config.is_test()


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", " Test ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")

    config = AppConfig(_env_file=None)

    assert config.app_env == "test"
    assert config.is_test()
    assert config.log_level == "DEBUG"
    assert config.debug_logging is True
