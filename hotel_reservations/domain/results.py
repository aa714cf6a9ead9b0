"""
Результаты операций менеджера бронирований.

Ожидаемые ошибки (клиент уже забронирован, бронь не найдена и т.п.)
возвращаются как значение Failure, а не выбрасываются наружу.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from hotel_reservations.domain.errors import ReservationError, ReservationErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Успешный результат операции."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or_none(self) -> Optional[T]:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Неуспешный результат операции с видом ошибки."""

    kind: ReservationErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap_or_none(self) -> None:
        return None

    @classmethod
    def from_error(cls, error: ReservationError) -> "Failure":
        return cls(kind=error.kind, message=error.message)


Result = Union[Success[T], Failure]
