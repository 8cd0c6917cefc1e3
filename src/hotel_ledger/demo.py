"""
Демонстрационный сценарий журнала бронирований.
"""

from datetime import date
from typing import List, Optional, Tuple

from .bootstrap import bootstrap_app
from .reservation.application import ReservationLedger
from .shared_kernel import DomainException, RoomType, format_date

# (пользователь, номер, заезд, выезд)
BOOKING_ATTEMPTS: List[Tuple[int, int, date, date]] = [
    (1, 2, date(2026, 6, 30), date(2026, 7, 7)),
    (1, 2, date(2026, 7, 7), date(2026, 6, 30)),
    (1, 1, date(2026, 7, 7), date(2026, 7, 8)),
    (2, 1, date(2026, 7, 7), date(2026, 7, 9)),
    (2, 3, date(2026, 7, 7), date(2026, 7, 8)),
]


def _section(title: str) -> None:
    print(f"\n{title}")
    print("-" * 40)


def run_demo(app: Optional[dict] = None) -> ReservationLedger:
    """Выполняет сценарий и возвращает журнал."""
    app = app or bootstrap_app()
    ledger = app["ledger"]
    reports = app["reports"]

    _section("1. Creating 3 rooms:")
    ledger.set_room(1, RoomType.STANDARD, 1000)
    ledger.set_room(2, RoomType.JUNIOR, 2000)
    ledger.set_room(3, RoomType.SUITE, 3000)

    _section("2. Creating 2 users:")
    ledger.set_user(1, 5000)
    ledger.set_user(2, 10000)

    _section("3. Executing booking attempts:")
    for attempt, (user_id, room_number, check_in, check_out) in enumerate(
        BOOKING_ATTEMPTS, start=1
    ):
        print(
            f"\nAttempt {attempt}: User {user_id} booking Room {room_number} "
            f"({format_date(check_in)} to {format_date(check_out)}):"
        )
        try:
            booking = ledger.book_room(user_id, room_number, check_in, check_out)
            print(
                f"Booked: #{booking.booking_id}, {booking.nights} nights, "
                f"total {booking.total_amount}"
            )
        except DomainException as e:
            print(f"Booking failed: {e}")

    _section("4. Updating Room 1:")
    ledger.set_room(1, RoomType.SUITE, 10000)

    _section("5. Final Results:")
    reports.print_all()
    reports.print_all_users()
    return ledger


def main() -> None:
    run_demo()
