"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, List, Protocol

from ..shared_kernel import DateRange
from .domain import Booking, Room, User


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IRoomRepository(Protocol):
    """Интерфейс репозитория для номеров."""

    def add(self, room: Room) -> None: ...
    def get_by_number(self, room_number: int) -> Room | None: ...
    def list(self) -> List[Room]: ...


class IUserRepository(Protocol):
    """Интерфейс репозитория для пользователей."""

    def add(self, user: User) -> None: ...
    def get_by_id(self, user_id: int) -> User | None: ...
    def list(self) -> List[User]: ...


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    def add(self, booking: Booking) -> None: ...
    def list(self) -> List[Booking]: ...
    def find_by_room(self, room_number: int) -> List[Booking]: ...
    def find_by_user(self, user_id: int) -> List[Booking]: ...
    def find_overlapping_bookings(
        self, room_number: int, period: DateRange
    ) -> List[Booking]: ...
