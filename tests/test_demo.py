"""
Тест демонстрационного сценария.
"""
from hotel_ledger.bootstrap import bootstrap_app
from hotel_ledger.demo import run_demo
from hotel_ledger.reservation.application import ReservationLedger
from hotel_ledger.shared_kernel import RoomType


def test_run_demo(capsys):
    ledger = run_demo(bootstrap_app())
    assert isinstance(ledger, ReservationLedger)

    out = capsys.readouterr().out
    assert out.count("Booking failed:") == 3
    assert "HOTEL RESERVATION SYSTEM - ALL DATA" in out
    assert "ALL USERS DATA (Latest to Oldest)" in out

    assert [b.room_number for b in ledger.list_bookings()] == [1, 3]
    assert ledger.get_user(1).balance == 4000
    assert ledger.get_user(2).balance == 7000
    assert ledger.get_room(1).room_type == RoomType.SUITE
