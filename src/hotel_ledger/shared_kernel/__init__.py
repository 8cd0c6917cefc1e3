"""
Общее ядро (Shared Kernel) для журнала бронирований.

Содержит общие типы данных, исключения и утилиты, используемые
контекстом бронирования и отчетами.
"""

from .domain import (
    DateRange,
    # Исключения
    DomainException,
    InsufficientBalanceException,
    InvalidBookingDateException,
    InvalidInputException,
    LedgerInvariantError,
    RoomNotAvailableException,
    RoomNotFoundException,
    # Перечисления
    RoomType,
    UserNotFoundException,
    format_date,
    format_datetime,
    # Утилиты
    now,
    to_calendar_date,
)

__all__ = [
    # Основные классы
    "DateRange",
    # Перечисления
    "RoomType",
    # Исключения
    "DomainException",
    "InvalidInputException",
    "InvalidBookingDateException",
    "UserNotFoundException",
    "RoomNotFoundException",
    "RoomNotAvailableException",
    "InsufficientBalanceException",
    "LedgerInvariantError",
    # Утилиты
    "now",
    "to_calendar_date",
    "format_date",
    "format_datetime",
]
