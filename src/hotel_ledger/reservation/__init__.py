"""
Модуль контекста бронирования (Reservation Context).

Отвечает за учет номеров, пользователей и бронирований, включая:
- Создание и обновление номеров и пользователей
- Проверку доступности номеров на даты
- Создание бронирований со снимком цены, типа номера и баланса
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'interfaces',
]
