from typing import Optional

from .reporting import LedgerReportGenerator
from .reservation.application import ReservationLedger
from .reservation.infrastructure import (
    ConsoleLogger,
    InMemoryBookingRepository,
    InMemoryRoomRepository,
    InMemoryUserRepository,
    configure_logging,
)


def bootstrap_app(log_level: Optional[str] = None):
    """Создает и настраивает все компоненты приложения."""
    # 1. Настраиваем логирование до создания логгеров
    configure_logging(log_level)

    # 2. Создаем журнал, передавая ему репозитории и логгер
    ledger = ReservationLedger(
        rooms=InMemoryRoomRepository(),
        users=InMemoryUserRepository(),
        bookings=InMemoryBookingRepository(),
        logger=ConsoleLogger("hotel_ledger.reservation"),
    )

    # 3. Отчеты читают тот же журнал
    reports = LedgerReportGenerator(ledger)

    return {
        "ledger": ledger,
        "reports": reports,
    }
