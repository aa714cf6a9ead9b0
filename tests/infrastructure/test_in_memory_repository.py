"""
Тесты для репозитория бронирований в памяти.
"""
import pytest

from hotel_reservations.domain.client import Client
from hotel_reservations.domain.reservation import Reservation
from hotel_reservations.infrastructure.repositories import (
    InMemoryReservationRepository,
)


def _reservation(reservation_id: int, name: str) -> Reservation:
    return Reservation(
        id=reservation_id,
        hotel_name="Transilvania",
        clients=[Client(name=name, age=1, height=1)],
        days=1,
        price=20.0,
        breakfast=False,
    )


@pytest.fixture
def filled_repository() -> InMemoryReservationRepository:
    repository = InMemoryReservationRepository()
    for reservation_id, name in [(1, "A"), (2, "B"), (3, "C")]:
        repository.add(_reservation(reservation_id, name))
    return repository


def test_list_all_keeps_insertion_order(filled_repository):
    assert [r.id for r in filled_repository.list_all()] == [1, 2, 3]


def test_remove_returns_removed_reservation(filled_repository):
    removed = filled_repository.remove(2)

    assert removed is not None
    assert removed.id == 2
    assert [r.id for r in filled_repository.list_all()] == [1, 3]


def test_remove_unknown_id_returns_none(filled_repository):
    assert filled_repository.remove(99) is None
    assert len(filled_repository.list_all()) == 3


def test_contains_id(filled_repository):
    assert filled_repository.contains_id(1)
    assert not filled_repository.contains_id(99)
