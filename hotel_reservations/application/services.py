"""
Сервис приложения для управления бронированиями отеля.

Координирует доменные политики, репозиторий и логирование.
Ожидаемые ошибки возвращаются вызывающей стороне как Failure.
"""

from typing import List, Optional, Sequence

from hotel_reservations.application.ports import ILogger
from hotel_reservations.application.repositories import ReservationRepository
from hotel_reservations.config import HotelSettings
from hotel_reservations.domain.client import Client
from hotel_reservations.domain.errors import (
    NoReservationError,
    RepeatedIdError,
    ReservationError,
)
from hotel_reservations.domain.policies import ReservationPolicy
from hotel_reservations.domain.reservation import Reservation
from hotel_reservations.domain.results import Failure, Result, Success
from hotel_reservations.infrastructure.logging import ConsoleLogger
from hotel_reservations.infrastructure.repositories import (
    InMemoryReservationRepository,
)


class HotelReservationManager:
    """Менеджер бронирований отеля."""

    def __init__(
        self,
        repository: Optional[ReservationRepository] = None,
        settings: Optional[HotelSettings] = None,
        logger: Optional[ILogger] = None,
    ):
        self._repository = repository or InMemoryReservationRepository()
        self._settings = settings or HotelSettings.fixed()
        self._logger = logger or ConsoleLogger()
        self._counter = 0

    @property
    def hotel_name(self) -> str:
        return self._settings.hotel_name

    def add_reservation(
        self, clients: Sequence[Client], days: int, breakfast: bool
    ) -> Result[Reservation]:
        """Добавляет бронирование.

        Присваивает уникальный ID, рассчитывает цену и указывает
        название отеля. Возвращает Success с созданной бронью или
        Failure с видом ошибки.
        """
        clients = list(clients)
        if not clients:
            raise ValueError("Бронирование должно содержать хотя бы одного клиента.")
        if days < 1:
            raise ValueError("Количество дней должно быть положительным.")

        try:
            ReservationPolicy.check_clients_available(
                clients, self._repository.list_all()
            )
            reservation_id = self._new_id()
        except ReservationError as e:
            self._logger.error(
                f"Ошибка при добавлении бронирования: {e.message}",
                kind=e.kind.value,
                clients=[client.name for client in clients],
            )
            return Failure.from_error(e)

        price = ReservationPolicy.calculate_price(
            len(clients),
            days,
            breakfast,
            price_per_client=self._settings.price_per_client,
            breakfast_multiplier=self._settings.breakfast_multiplier,
        )
        reservation = Reservation(
            id=reservation_id,
            hotel_name=self._settings.hotel_name,
            clients=tuple(clients),
            days=days,
            price=price,
            breakfast=breakfast,
        )
        self._repository.add(reservation)
        self._logger.info(
            f"Создано бронирование #{reservation.id}", price=reservation.price
        )
        return Success(reservation)

    def cancel_reservation(self, reservation_id: int) -> Result[Reservation]:
        """Отменяет бронирование по ID."""
        try:
            self.check_reservation_exists(reservation_id)
        except NoReservationError as e:
            self._logger.error(
                f"Ошибка при отмене бронирования: {e.message}",
                reservation_id=reservation_id,
            )
            return Failure.from_error(e)

        reservation = self._repository.remove(reservation_id)
        self._logger.info(f"Бронирование #{reservation_id} отменено")
        return Success(reservation)

    def get_all_reservations(self) -> List[Reservation]:
        """Возвращает список текущих бронирований."""
        return list(self._repository.list_all())

    def get_reservation(self, reservation_id: int) -> Optional[Reservation]:
        return self._repository.get_by_id(reservation_id)

    def find_reservation_for(self, client: Client) -> Optional[Reservation]:
        """Находит активное бронирование, в которое входит клиент."""
        for reservation in self._repository.list_all():
            if reservation.includes(client):
                return reservation
        return None

    def check_reservation_exists(self, reservation_id: int) -> None:
        """Проверяет, что бронирование существует."""
        if not self._repository.contains_id(reservation_id):
            raise NoReservationError(reservation_id)

    def _new_id(self) -> int:
        # Счетчик не откатывается: занятое значение пропускается навсегда.
        self._counter += 1
        if self._repository.contains_id(self._counter):
            raise RepeatedIdError(self._counter)
        return self._counter
