"""
Общие фикстуры для тестов менеджера бронирований.
"""
from typing import Any, Dict, List, Tuple

import pytest

from hotel_reservations.application.services import HotelReservationManager
from hotel_reservations.domain.client import Client
from hotel_reservations.infrastructure.repositories import (
    InMemoryReservationRepository,
)


class RecordingLogger:
    """Логгер, запоминающий сообщения вместо вывода в консоль."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("info", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("error", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("warning", message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("debug", message, kwargs))

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def repository() -> InMemoryReservationRepository:
    return InMemoryReservationRepository()


@pytest.fixture
def manager(
    repository: InMemoryReservationRepository, logger: RecordingLogger
) -> HotelReservationManager:
    """Фикстура, предоставляющая менеджер с чистым репозиторием."""
    return HotelReservationManager(repository=repository, logger=logger)


@pytest.fixture
def marc() -> Client:
    return Client(name="Marc", age=19, height=180)


@pytest.fixture
def laura() -> Client:
    return Client(name="Laura", age=16, height=160)
