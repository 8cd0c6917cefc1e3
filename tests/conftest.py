"""
Конфигурация тестов для pytest.
Добавляет каталог src в PYTHONPATH и предоставляет общие фикстуры.
"""
import sys
from datetime import date
from pathlib import Path
from typing import Any, List, Tuple

import pytest

# Добавляем каталог с исходниками в PYTHONPATH
src_dir = str(Path(__file__).parent.parent / "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from hotel_ledger.reservation.application import ReservationLedger  # noqa: E402


class RecordingLogger:
    """Логгер для тестов, запоминающий сообщения."""

    def __init__(self):
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, kwargs)

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def ledger(logger: RecordingLogger) -> ReservationLedger:
    """Пустой журнал с тестовым логгером."""
    return ReservationLedger(logger=logger)


@pytest.fixture
def check_in() -> date:
    return date(2026, 7, 7)


@pytest.fixture
def check_out() -> date:
    return date(2026, 7, 9)


@pytest.fixture
def invalid_check_out() -> date:
    return date(2026, 7, 6)
