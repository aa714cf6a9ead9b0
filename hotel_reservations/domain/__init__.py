"""
Доменная модель бронирований отеля.
"""

from .client import Client
from .errors import (
    # Исключения
    DomainException,
    NoReservationError,
    RepeatedIdError,
    ReservationError,
    # Перечисления
    ReservationErrorKind,
    UserAlreadyReservedError,
)
from .policies import ReservationPolicy
from .reservation import Reservation
from .results import Failure, Result, Success

__all__ = [
    # Основные классы
    "Client",
    "Reservation",
    "ReservationPolicy",
    # Результаты операций
    "Result",
    "Success",
    "Failure",
    # Перечисления
    "ReservationErrorKind",
    # Исключения
    "DomainException",
    "ReservationError",
    "RepeatedIdError",
    "NoReservationError",
    "UserAlreadyReservedError",
]
