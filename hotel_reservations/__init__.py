"""
Управление бронированиями отеля в памяти.

Содержит:
- Доменную модель (клиенты, бронирования, политики ценообразования)
- Сервис приложения для добавления, отмены и просмотра бронирований
- Инфраструктуру (репозиторий в памяти, консольный логгер)
"""

from .application.services import HotelReservationManager
from .config import HotelSettings
from .domain import (
    Client,
    Failure,
    Reservation,
    ReservationErrorKind,
    Result,
    Success,
)

__all__ = [
    "HotelReservationManager",
    "HotelSettings",
    "Client",
    "Reservation",
    "ReservationErrorKind",
    "Result",
    "Success",
    "Failure",
]
