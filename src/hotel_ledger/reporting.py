"""
Текстовые отчеты по журналу бронирований.

Отчеты только читают данные журнала. Записи выводятся от последних
созданных к самым ранним.
"""

from typing import Callable, List, TypeVar

from .reservation.application import ReservationLedger
from .reservation.domain import Booking, Room, User
from .shared_kernel import format_date, format_datetime

T = TypeVar("T")


def latest_first(items: List[T], key: Callable[[T], object]) -> List[T]:
    """Сортирует от новых к старым; при равных отметках сохраняется порядок добавления."""
    return sorted(items, key=key, reverse=True)


class LedgerReportGenerator:
    """Генератор текстовых отчетов по номерам, бронированиям и пользователям."""

    def __init__(self, ledger: ReservationLedger):
        self.ledger = ledger

    def generate_full_report(self) -> str:
        """Отчет по номерам и бронированиям."""
        lines = ["", "=" * 80, "HOTEL RESERVATION SYSTEM - ALL DATA", "=" * 80]

        lines += ["", "ROOMS (Latest to Oldest):", "-" * 50]
        rooms = latest_first(self.ledger.list_rooms(), key=lambda r: r.created_at)
        if not rooms:
            lines.append("No rooms available.")
        lines.extend(self._room_line(room) for room in rooms)

        lines += ["", "BOOKINGS (Latest to Oldest):", "-" * 50]
        bookings = latest_first(
            self.ledger.list_bookings(), key=lambda b: b.booking_datetime
        )
        if not bookings:
            lines.append("No bookings available.")
        for booking in bookings:
            lines.extend(self._booking_lines(booking))

        lines.append("=" * 80)
        return "\n".join(lines)

    def generate_users_report(self) -> str:
        """Отчет по пользователям."""
        lines = ["", "=" * 60, "ALL USERS DATA (Latest to Oldest)", "=" * 60]

        users = latest_first(self.ledger.list_users(), key=lambda u: u.created_at)
        if not users:
            lines.append("No users available.")
        lines.extend(self._user_line(user) for user in users)

        lines.append("=" * 60)
        return "\n".join(lines)

    def print_all(self) -> None:
        print(self.generate_full_report())

    def print_all_users(self) -> None:
        print(self.generate_users_report())

    @staticmethod
    def _room_line(room: Room) -> str:
        return (
            f"Room {room.room_number} | Type: {room.room_type.value:<8} | "
            f"Price/Night: {room.price_per_night:<6} | "
            f"Created: {format_datetime(room.created_at)}"
        )

    @staticmethod
    def _booking_lines(booking: Booking) -> List[str]:
        indent = " " * 16
        return [
            f"Booking ID: {booking.booking_id:<3} | User: {booking.user_id:<3} | "
            f"Room: {booking.room_number:<3} | {format_date(booking.check_in)} to "
            f"{format_date(booking.check_out)} ({booking.nights} nights)",
            f"{indent}Room Type at Booking: {booking.room_type_at_booking.value:<8} | "
            f"Price/Night at Booking: {booking.room_price_per_night_at_booking:<6} | "
            f"Total: {booking.total_amount:<6}",
            f"{indent}User Balance at Booking: {booking.user_balance_at_booking:<6} | "
            f"Booking Date: {format_datetime(booking.booking_datetime)}",
            "",
        ]

    @staticmethod
    def _user_line(user: User) -> str:
        return (
            f"User ID: {user.user_id:<3} | Balance: {user.balance:<8} | "
            f"Created: {format_datetime(user.created_at)}"
        )
