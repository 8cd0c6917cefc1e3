"""
Журнал бронирований отеля в памяти.

Учитывает номера, пользователей и бронирования и проверяет
корректность бронирований: порядок дат, существование номера и
пользователя, доступность номера и достаточность баланса.
"""

from .reservation.application import ReservationLedger
from .reservation.domain import Booking, Room, User
from .shared_kernel import (
    DateRange,
    DomainException,
    InsufficientBalanceException,
    InvalidBookingDateException,
    InvalidInputException,
    RoomNotAvailableException,
    RoomNotFoundException,
    RoomType,
    UserNotFoundException,
)

__all__ = [
    "ReservationLedger",
    "Room",
    "User",
    "Booking",
    "RoomType",
    "DateRange",
    "DomainException",
    "InvalidInputException",
    "InvalidBookingDateException",
    "UserNotFoundException",
    "RoomNotFoundException",
    "RoomNotAvailableException",
    "InsufficientBalanceException",
]
