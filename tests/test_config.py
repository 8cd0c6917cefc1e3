"""
Тесты настроек приложения.
"""
import pytest
from pydantic import ValidationError

from hotel_ledger.config import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.date_format == "%d/%m/%Y"


def test_from_env(monkeypatch):
    monkeypatch.setenv("HOTEL_LEDGER_LOG_LEVEL", "debug")
    monkeypatch.setenv("HOTEL_LEDGER_DATE_FORMAT", "%Y-%m-%d")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.date_format == "%Y-%m-%d"


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
