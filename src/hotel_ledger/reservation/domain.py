"""
Доменная модель контекста бронирования.

Содержит сущности номера, пользователя и бронирования.
Бронирование хранит копии атрибутов номера и пользователя на момент
создания, а не ссылки на сами объекты, поэтому последующие изменения
номеров и балансов не затрагивают уже созданные бронирования.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..shared_kernel import (
    DateRange,
    InsufficientBalanceException,
    InvalidInputException,
    RoomType,
    now,
)


class Room(BaseModel):
    """Номер в отеле."""

    model_config = ConfigDict(validate_assignment=True)

    room_number: int = Field(..., gt=0, frozen=True)
    room_type: RoomType
    price_per_night: int = Field(..., gt=0)
    created_at: datetime = Field(default_factory=now, frozen=True)

    def update(self, room_type: RoomType, price_per_night: int) -> None:
        """Меняет тип и цену номера. Оба значения проверяются до изменения."""
        if room_type is None:
            raise InvalidInputException("Тип номера не может быть пустым")
        if price_per_night <= 0:
            raise InvalidInputException("Цена за ночь должна быть положительной")

        self.room_type = room_type
        self.price_per_night = price_per_night


class User(BaseModel):
    """Клиент отеля с внутренним балансом."""

    model_config = ConfigDict(validate_assignment=True)

    user_id: int = Field(..., gt=0, frozen=True)
    balance: int = Field(..., ge=0)
    created_at: datetime = Field(default_factory=now, frozen=True)

    def set_balance(self, balance: int) -> None:
        if balance < 0:
            raise InvalidInputException("Баланс пользователя не может быть отрицательным")
        self.balance = balance

    def has_sufficient_balance(self, amount: int) -> bool:
        return self.balance >= amount

    def deduct(self, amount: int) -> None:
        """Списывает сумму с баланса."""
        if amount < 0:
            raise InvalidInputException("Сумма списания не может быть отрицательной")
        if not self.has_sufficient_balance(amount):
            raise InsufficientBalanceException(
                user_id=self.user_id, required=amount, available=self.balance
            )
        self.balance -= amount


class Booking(BaseModel):
    """Бронирование номера со снимком атрибутов номера и пользователя."""

    model_config = ConfigDict(frozen=True)

    booking_id: int = Field(..., gt=0)
    user_id: int
    room_number: int
    check_in: date
    check_out: date
    total_amount: int = Field(..., ge=0)
    booking_datetime: datetime = Field(default_factory=now)

    # Снимок на момент бронирования
    user_balance_at_booking: int
    room_type_at_booking: RoomType
    room_price_per_night_at_booking: int

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "Booking":
        if self.check_out <= self.check_in:
            raise ValueError("Дата выезда должна быть позже даты заезда")
        return self

    @property
    def period(self) -> DateRange:
        return DateRange(check_in=self.check_in, check_out=self.check_out)

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return self.period.nights

    def overlaps(self, period: DateRange) -> bool:
        return self.period.overlaps(period)

    @classmethod
    def create(
        cls,
        booking_id: int,
        user: User,
        room: Room,
        period: DateRange,
    ) -> "Booking":
        """Создает бронирование, копируя текущие значения номера и пользователя."""
        return cls(
            booking_id=booking_id,
            user_id=user.user_id,
            room_number=room.room_number,
            check_in=period.check_in,
            check_out=period.check_out,
            total_amount=period.nights * room.price_per_night,
            user_balance_at_booking=user.balance,
            room_type_at_booking=room.room_type,
            room_price_per_night_at_booking=room.price_per_night,
        )
