from enum import Enum
from typing import Optional


class ReservationErrorKind(str, Enum):
    """Виды ошибок при работе с бронированиями."""

    REPEATED_ID = "repeated_id"
    NO_RESERVATION = "no_reservation"
    USER_ALREADY_RESERVED = "user_already_reserved"


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ReservationError(DomainException):
    """Базовое исключение для ошибок бронирования.

    Создаются только подклассы, задающие kind.
    """

    kind: ReservationErrorKind
    default_message: str = "Ошибка бронирования"

    def __init__(self, message: Optional[str] = None):
        if getattr(self, "kind", None) is None:
            raise TypeError(
                f"{type(self).__name__} не задает вид ошибки (kind)"
            )
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class RepeatedIdError(ReservationError):
    """Исключение: новый ID уже занят активным бронированием."""

    kind = ReservationErrorKind.REPEATED_ID
    default_message = "ID бронирования уже существует"

    def __init__(self, reservation_id: int):
        super().__init__(f"ID бронирования {reservation_id} уже существует")
        self.reservation_id = reservation_id


class NoReservationError(ReservationError):
    """Исключение: бронирование с указанным ID не найдено."""

    kind = ReservationErrorKind.NO_RESERVATION
    default_message = "Бронирование не найдено"

    def __init__(self, reservation_id: int):
        super().__init__(f"Бронирование с ID {reservation_id} не существует")
        self.reservation_id = reservation_id


class UserAlreadyReservedError(ReservationError):
    """Исключение: клиент уже входит в активное бронирование."""

    kind = ReservationErrorKind.USER_ALREADY_RESERVED
    default_message = "Клиент уже забронирован"
