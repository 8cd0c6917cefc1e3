"""
Полный сценарий работы журнала и порядок выдачи данных.
"""
from datetime import date

import pytest

from hotel_ledger.reservation.application import ReservationLedger
from hotel_ledger.shared_kernel import (
    InsufficientBalanceException,
    InvalidBookingDateException,
    RoomNotAvailableException,
    RoomType,
)


class TestCompleteScenario:
    """Эталонный сценарий: три номера, два пользователя, пять попыток."""

    def test_complete_scenario(self, ledger: ReservationLedger):
        # Подготовка
        ledger.set_room(1, RoomType.STANDARD, 1000)
        ledger.set_room(2, RoomType.JUNIOR, 2000)
        ledger.set_room(3, RoomType.SUITE, 3000)
        ledger.set_user(1, 5000)
        ledger.set_user(2, 10000)

        # Действие
        with pytest.raises(InsufficientBalanceException):
            ledger.book_room(1, 2, date(2026, 6, 30), date(2026, 7, 7))
        with pytest.raises(InvalidBookingDateException):
            ledger.book_room(1, 2, date(2026, 7, 7), date(2026, 6, 30))
        ledger.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))
        with pytest.raises(RoomNotAvailableException):
            ledger.book_room(2, 1, date(2026, 7, 7), date(2026, 7, 9))
        ledger.book_room(2, 3, date(2026, 7, 7), date(2026, 7, 8))

        ledger.set_room(1, RoomType.SUITE, 10000)

        # Проверка
        assert len(ledger.list_rooms()) == 3
        assert len(ledger.list_users()) == 2
        assert len(ledger.list_bookings()) == 2

        assert ledger.get_user(1).balance == 4000
        assert ledger.get_user(2).balance == 7000

        room1_booking = ledger.bookings_for_room(1)[0]
        assert room1_booking.room_type_at_booking == RoomType.STANDARD
        assert room1_booking.room_price_per_night_at_booking == 1000
        assert room1_booking.total_amount == 1000
        assert ledger.get_room(1).room_type == RoomType.SUITE

        assert [b.room_number for b in ledger.bookings_for_user(2)] == [3]


class TestDataOrdering:
    """Коллекции выдаются в порядке добавления."""

    def test_rooms_keep_creation_order(self, ledger: ReservationLedger):
        ledger.set_room(101, RoomType.STANDARD, 1000)
        ledger.set_room(102, RoomType.JUNIOR, 2000)
        ledger.set_room(103, RoomType.SUITE, 3000)
        ledger.set_room(101, RoomType.SUITE, 9000)

        assert [r.room_number for r in ledger.list_rooms()] == [101, 102, 103]

    def test_users_keep_creation_order(self, ledger: ReservationLedger):
        ledger.set_user(2, 1000)
        ledger.set_user(1, 2000)

        assert [u.user_id for u in ledger.list_users()] == [2, 1]

    def test_bookings_keep_creation_order(self, ledger: ReservationLedger):
        ledger.set_room(101, RoomType.STANDARD, 100)
        ledger.set_user(1, 10000)
        ledger.book_room(1, 101, date(2026, 7, 10), date(2026, 7, 11))
        ledger.book_room(1, 101, date(2026, 7, 1), date(2026, 7, 2))

        assert [b.booking_id for b in ledger.list_bookings()] == [1, 2]

    def test_created_at_is_not_decreasing(self, ledger: ReservationLedger):
        for number in range(1, 6):
            ledger.set_room(number, RoomType.STANDARD, 100)

        stamps = [r.created_at for r in ledger.list_rooms()]
        assert stamps == sorted(stamps)

    def test_listing_returns_new_list(self, ledger: ReservationLedger):
        ledger.set_room(101, RoomType.STANDARD, 100)
        ledger.set_user(1, 1000)
        ledger.book_room(1, 101, date(2026, 7, 1), date(2026, 7, 2))

        ledger.list_bookings().clear()
        ledger.list_rooms().clear()

        assert len(ledger.list_bookings()) == 1
        assert len(ledger.list_rooms()) == 1
