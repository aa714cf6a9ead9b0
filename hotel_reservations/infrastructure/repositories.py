from typing import List, Optional

from hotel_reservations.application.repositories import ReservationRepository
from hotel_reservations.domain.reservation import Reservation


class InMemoryReservationRepository(ReservationRepository):
    """Реализация репозитория в памяти с сохранением порядка добавления."""

    def __init__(self) -> None:
        self._reservations: List[Reservation] = []

    def add(self, reservation: Reservation) -> None:
        self._reservations.append(reservation)

    def remove(self, reservation_id: int) -> Optional[Reservation]:
        reservation = self.get_by_id(reservation_id)
        if reservation is not None:
            self._reservations = [
                r for r in self._reservations if r.id != reservation_id
            ]
        return reservation

    def get_by_id(self, reservation_id: int) -> Optional[Reservation]:
        return next((r for r in self._reservations if r.id == reservation_id), None)

    def list_all(self) -> List[Reservation]:
        return list(self._reservations)
