from abc import ABC, abstractmethod
from typing import List, Optional

from hotel_reservations.domain.reservation import Reservation


class ReservationRepository(ABC):
    """Абстрактный репозиторий активных бронирований."""

    @abstractmethod
    def add(self, reservation: Reservation) -> None:
        """Добавляет бронирование в конец коллекции."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, reservation_id: int) -> Optional[Reservation]:
        """Удаляет бронирование по ID и возвращает его."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, reservation_id: int) -> Optional[Reservation]:
        """Находит бронирование по ID."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Reservation]:
        """Возвращает бронирования в порядке добавления."""
        raise NotImplementedError

    def contains_id(self, reservation_id: int) -> bool:
        return self.get_by_id(reservation_id) is not None
