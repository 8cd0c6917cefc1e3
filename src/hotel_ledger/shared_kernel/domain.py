"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..config import get_settings


class RoomType(str, Enum):
    """Типы номеров в отеле."""

    STANDARD = "standard"
    JUNIOR = "junior"
    SUITE = "suite"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: Optional[str]) -> "RoomType":
        """Разбирает тип номера из строки без учета регистра и пробелов."""
        if value is None:
            raise InvalidInputException("Тип номера не может быть пустым")

        normalized = str(value).strip().lower()
        for room_type in cls:
            if room_type.value == normalized:
                return room_type

        valid = ", ".join(room_type.value for room_type in cls)
        raise InvalidInputException(
            f"Неизвестный тип номера: {value}. Допустимые значения: {valid}"
        )


class DateRange(BaseModel):
    """Полуоткрытый диапазон дат [check_in, check_out)."""

    model_config = ConfigDict(frozen=True)

    check_in: date
    check_out: date

    @property
    def nights(self) -> int:
        """Количество ночей в диапазоне."""
        return (self.check_out - self.check_in).days

    @property
    def is_valid(self) -> bool:
        return self.check_in < self.check_out

    def overlaps(self, other: "DateRange") -> bool:
        """Проверяет пересечение с другим диапазоном.

        День выезда одного диапазона может совпадать с днем заезда другого.
        """
        return self.check_in < other.check_out and other.check_in < self.check_out

    def __str__(self) -> str:
        return f"{format_date(self.check_in)} - {format_date(self.check_out)}"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class InvalidInputException(DomainException, ValueError):
    """Некорректные аргументы операции."""

    pass


class InvalidBookingDateException(DomainException):
    """Дата заезда не раньше даты выезда."""

    def __init__(self, check_in: date, check_out: date):
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(
            f"Дата заезда ({format_date(check_in)}) должна быть раньше "
            f"даты выезда ({format_date(check_out)})"
        )


class UserNotFoundException(DomainException):
    """Пользователь не найден."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"Пользователь с ID {user_id} не найден")


class RoomNotFoundException(DomainException):
    """Номер не найден."""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Номер {room_number} не найден")


class RoomNotAvailableException(DomainException):
    """Номер уже забронирован на пересекающиеся даты."""

    def __init__(self, room_number: int, period: DateRange):
        self.room_number = room_number
        self.period = period
        super().__init__(
            f"Номер {room_number} недоступен с {format_date(period.check_in)} "
            f"по {format_date(period.check_out)}"
        )


class InsufficientBalanceException(DomainException):
    """На балансе пользователя недостаточно средств."""

    def __init__(self, user_id: int, required: int, available: int):
        self.user_id = user_id
        self.required = required
        self.available = available
        super().__init__(
            f"Недостаточно средств у пользователя {user_id}. "
            f"Требуется: {required}, доступно: {available}"
        )


class LedgerInvariantError(AssertionError):
    """Нарушен внутренний инвариант журнала. Это дефект, а не доменная ошибка."""

    pass


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now()


def to_calendar_date(value: Any) -> date:
    """Приводит значение к календарной дате, отбрасывая время суток."""
    if value is None:
        raise InvalidInputException("Дата не может быть пустой")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidInputException(
                f"Дата должна быть в формате YYYY-MM-DD: {value}"
            ) from exc
    raise InvalidInputException(f"Неподдерживаемый тип даты: {type(value).__name__}")


def format_date(value: date) -> str:
    return value.strftime(get_settings().date_format)


def format_datetime(value: datetime) -> str:
    return value.strftime(get_settings().datetime_format)
