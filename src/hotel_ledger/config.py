"""
Настройки приложения.

Значения по умолчанию можно переопределить переменными окружения
с префиксом ``HOTEL_LEDGER_``.
"""

import os
from functools import lru_cache
from typing import Dict

from pydantic import BaseModel, ConfigDict, field_validator

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Поле настроек -> переменная окружения
ENV_VARS: Dict[str, str] = {
    "log_level": "HOTEL_LEDGER_LOG_LEVEL",
    "date_format": "HOTEL_LEDGER_DATE_FORMAT",
    "datetime_format": "HOTEL_LEDGER_DATETIME_FORMAT",
}


class Settings(BaseModel):
    """Настройки журнала бронирований."""

    model_config = ConfigDict(frozen=True)

    log_level: str = "INFO"
    date_format: str = "%d/%m/%Y"
    datetime_format: str = "%d/%m/%Y %H:%M:%S"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Неизвестный уровень логирования: {v}. "
                f"Допустимые значения: {', '.join(_LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        """Собирает настройки из переменных окружения."""
        overrides = {
            field: os.environ[env_var]
            for field, env_var in ENV_VARS.items()
            if env_var in os.environ
        }
        return cls(**overrides)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Возвращает настройки процесса (читаются один раз)."""
    return Settings.from_env()
