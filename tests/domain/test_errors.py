"""
Тесты для исключений бронирования.
"""
import pytest

from hotel_reservations.domain.errors import (
    RepeatedIdError,
    ReservationError,
    ReservationErrorKind,
    UserAlreadyReservedError,
)


def test_base_error_cannot_be_raised_without_kind():
    """Тест: базовое исключение без вида ошибки создать нельзя."""
    with pytest.raises(TypeError, match="kind"):
        ReservationError("Ошибка")


def test_subclasses_carry_kind_and_message():
    error = RepeatedIdError(5)

    assert error.kind == ReservationErrorKind.REPEATED_ID
    assert "5" in error.message
    assert UserAlreadyReservedError().message == "Клиент уже забронирован"
