"""
Прикладной слой контекста бронирования.

Содержит журнал бронирований (ReservationLedger), который владеет
номерами, пользователями и бронированиями и проверяет правила
создания бронирований.
"""

from datetime import date
from threading import RLock
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from ..shared_kernel import (
    DateRange,
    DomainException,
    InsufficientBalanceException,
    InvalidBookingDateException,
    InvalidInputException,
    LedgerInvariantError,
    RoomNotAvailableException,
    RoomNotFoundException,
    RoomType,
    UserNotFoundException,
    to_calendar_date,
)
from . import interfaces as ports
from .domain import Booking, Room, User
from .infrastructure import (
    ConsoleLogger,
    InMemoryBookingRepository,
    InMemoryRoomRepository,
    InMemoryUserRepository,
)

# DTO (Data Transfer Objects) для входящих данных


class SetRoomRequest(BaseModel):
    """Запрос на создание или обновление номера."""

    room_number: StrictInt = Field(..., gt=0)
    room_type: RoomType
    price_per_night: StrictInt = Field(..., gt=0)

    @field_validator("room_type", mode="before")
    @classmethod
    def parse_room_type(cls, v: Any) -> RoomType:
        if isinstance(v, RoomType):
            return v
        return RoomType.from_string(v)


class SetUserRequest(BaseModel):
    """Запрос на создание или обновление пользователя."""

    user_id: StrictInt = Field(..., gt=0)
    balance: StrictInt = Field(..., ge=0)


class BookRoomRequest(BaseModel):
    """Запрос на бронирование. Даты приводятся к календарным дням."""

    user_id: StrictInt
    room_number: StrictInt
    check_in: date
    check_out: date

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> date:
        return to_calendar_date(v)

    @property
    def period(self) -> DateRange:
        return DateRange(check_in=self.check_in, check_out=self.check_out)


def _parse(model: type, **data: Any) -> Any:
    """Проверяет входные данные и переводит ошибки pydantic в InvalidInputException."""
    try:
        return model(**data)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidInputException(f"Некорректные данные: {details}") from exc


# Сервисы приложения


class ReservationLedger:
    """Журнал бронирований отеля.

    Все публичные операции выполняются под одной блокировкой, поэтому
    два пересекающихся бронирования одного номера не могут оба пройти.
    """

    def __init__(
        self,
        rooms: Optional[ports.IRoomRepository] = None,
        users: Optional[ports.IUserRepository] = None,
        bookings: Optional[ports.IBookingRepository] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        """Инициализирует журнал."""
        self._rooms = rooms or InMemoryRoomRepository()
        self._users = users or InMemoryUserRepository()
        self._bookings = bookings or InMemoryBookingRepository()
        self._logger = logger or ConsoleLogger()
        self._lock = RLock()
        self._next_booking_id = 1

    def set_room(
        self,
        room_number: int,
        room_type: Union[RoomType, str],
        price_per_night: int,
    ) -> None:
        """Создает номер или обновляет тип и цену существующего.

        Уже созданные бронирования не меняются.
        """
        try:
            request = _parse(
                SetRoomRequest,
                room_number=room_number,
                room_type=room_type,
                price_per_night=price_per_night,
            )
        except InvalidInputException as e:
            self._logger.error(f"Ошибка при сохранении номера: {str(e)}")
            raise

        with self._lock:
            room = self._rooms.get_by_number(request.room_number)
            if room is not None:
                room.update(request.room_type, request.price_per_night)
                self._logger.info(
                    f"Номер {request.room_number} обновлен",
                    room_type=request.room_type.value,
                    price_per_night=request.price_per_night,
                )
                return

            self._rooms.add(
                Room(
                    room_number=request.room_number,
                    room_type=request.room_type,
                    price_per_night=request.price_per_night,
                )
            )
            self._logger.info(
                f"Создан номер {request.room_number}",
                room_type=request.room_type.value,
                price_per_night=request.price_per_night,
            )

    def set_user(self, user_id: int, balance: int) -> None:
        """Создает пользователя или обновляет баланс существующего."""
        try:
            request = _parse(SetUserRequest, user_id=user_id, balance=balance)
        except InvalidInputException as e:
            self._logger.error(f"Ошибка при сохранении пользователя: {str(e)}")
            raise

        with self._lock:
            user = self._users.get_by_id(request.user_id)
            if user is not None:
                user.set_balance(request.balance)
                self._logger.info(
                    f"Баланс пользователя {request.user_id} обновлен",
                    balance=request.balance,
                )
                return

            self._users.add(User(user_id=request.user_id, balance=request.balance))
            self._logger.info(
                f"Создан пользователь {request.user_id}", balance=request.balance
            )

    def book_room(
        self,
        user_id: int,
        room_number: int,
        check_in: Any,
        check_out: Any,
    ) -> Booking:
        """Бронирует номер для пользователя на период [check_in, check_out).

        Проверки выполняются по порядку: даты, пользователь, номер,
        доступность, баланс. При ошибке состояние журнала не меняется.
        """
        try:
            request = _parse(
                BookRoomRequest,
                user_id=user_id,
                room_number=room_number,
                check_in=check_in,
                check_out=check_out,
            )
            with self._lock:
                booking = self._book(request)
        except DomainException as e:
            self._logger.warning(f"Бронирование не выполнено: {str(e)}")
            raise

        self._logger.info(
            f"Номер {booking.room_number} забронирован пользователем {booking.user_id}",
            booking_id=booking.booking_id,
            period=str(booking.period),
            nights=booking.nights,
            total_amount=booking.total_amount,
        )
        return booking

    def _book(self, request: BookRoomRequest) -> Booking:
        period = request.period
        if not period.is_valid:
            raise InvalidBookingDateException(period.check_in, period.check_out)

        user = self._users.get_by_id(request.user_id)
        if user is None:
            raise UserNotFoundException(request.user_id)

        room = self._rooms.get_by_number(request.room_number)
        if room is None:
            raise RoomNotFoundException(request.room_number)

        overlapping = self._bookings.find_overlapping_bookings(room.room_number, period)
        self._logger.debug(
            f"Проверка доступности номера {room.room_number}",
            period=str(period),
            overlapping_ids=[b.booking_id for b in overlapping],
        )
        if overlapping:
            raise RoomNotAvailableException(room.room_number, period)

        total_cost = period.nights * room.price_per_night
        if not user.has_sufficient_balance(total_cost):
            raise InsufficientBalanceException(
                user_id=user.user_id, required=total_cost, available=user.balance
            )

        # Снимок берется до списания средств
        booking = Booking.create(
            booking_id=self._next_booking_id, user=user, room=room, period=period
        )
        try:
            user.deduct(total_cost)
        except DomainException as exc:
            raise LedgerInvariantError(
                f"Списание {total_cost} не прошло после проверки баланса"
            ) from exc

        self._bookings.add(booking)
        self._next_booking_id += 1
        return booking

    # Запросы. Номера и пользователи возвращаются копиями.

    def list_rooms(self) -> List[Room]:
        with self._lock:
            return [room.model_copy() for room in self._rooms.list()]

    def list_users(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users.list()]

    def list_bookings(self) -> List[Booking]:
        with self._lock:
            return self._bookings.list()

    def get_room(self, room_number: int) -> Optional[Room]:
        with self._lock:
            room = self._rooms.get_by_number(room_number)
            return room.model_copy() if room is not None else None

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get_by_id(user_id)
            return user.model_copy() if user is not None else None

    def bookings_for_room(self, room_number: int) -> List[Booking]:
        with self._lock:
            return self._bookings.find_by_room(room_number)

    def bookings_for_user(self, user_id: int) -> List[Booking]:
        with self._lock:
            return self._bookings.find_by_user(user_id)
