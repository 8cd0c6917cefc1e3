"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев в памяти и адаптер логгера.
Репозитории сохраняют порядок добавления.
"""
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from ..config import get_settings
from ..shared_kernel import DateRange
from . import interfaces as ports
from .domain import Booking, Room, User

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Настраивает логирование процесса один раз."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved_level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, stream=sys.stdout)
    _LOGGING_CONFIGURED = True


class InMemoryRoomRepository(ports.IRoomRepository):
    """Реализация репозитория номеров в памяти."""

    def __init__(self):
        self._rooms: Dict[int, Room] = {}

    def add(self, room: Room) -> None:
        if room.room_number in self._rooms:
            raise ValueError(f"Room {room.room_number} already exists")
        self._rooms[room.room_number] = room

    def get_by_number(self, room_number: int) -> Optional[Room]:
        return self._rooms.get(room_number)

    def list(self) -> List[Room]:
        return list(self._rooms.values())


class InMemoryUserRepository(ports.IUserRepository):
    """Реализация репозитория пользователей в памяти."""

    def __init__(self):
        self._users: Dict[int, User] = {}

    def add(self, user: User) -> None:
        if user.user_id in self._users:
            raise ValueError(f"User with id {user.user_id} already exists")
        self._users[user.user_id] = user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def list(self) -> List[User]:
        return list(self._users.values())


class InMemoryBookingRepository(ports.IBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    def __init__(self):
        self._bookings: List[Booking] = []
        self._ids: set = set()

    def add(self, booking: Booking) -> None:
        if booking.booking_id in self._ids:
            raise ValueError(f"Booking with id {booking.booking_id} already exists")
        self._bookings.append(booking)
        self._ids.add(booking.booking_id)

    def list(self) -> List[Booking]:
        return list(self._bookings)

    def find_by_room(self, room_number: int) -> List[Booking]:
        return [
            booking for booking in self._bookings
            if booking.room_number == room_number
        ]

    def find_by_user(self, user_id: int) -> List[Booking]:
        return [
            booking for booking in self._bookings
            if booking.user_id == user_id
        ]

    def find_overlapping_bookings(
        self, room_number: int, period: DateRange
    ) -> List[Booking]:
        return [
            booking for booking in self.find_by_room(room_number)
            if booking.overlaps(period)
        ]


class ConsoleLogger(ports.ILogger):
    """Логгер, пишущий в консоль через стандартный модуль logging."""

    def __init__(self, name: str = "hotel_ledger"):
        self._logger = logging.getLogger(name)

    @staticmethod
    def _format(message: str, context: Dict[str, Any]) -> str:
        if not context:
            return message
        return f"{message} | {json.dumps(context, default=str, ensure_ascii=False)}"

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))
