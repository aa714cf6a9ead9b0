from typing import Iterable, Sequence

from hotel_reservations.domain.client import Client
from hotel_reservations.domain.errors import UserAlreadyReservedError
from hotel_reservations.domain.reservation import Reservation


class ReservationPolicy:
    """Политики и бизнес-правила для бронирований."""

    HOTEL_NAME = "Transilvania"
    PRICE_PER_CLIENT = 20.0
    BREAKFAST_MULTIPLIER = 1.25

    @classmethod
    def calculate_price(
        cls,
        clients_count: int,
        days: int,
        breakfast: bool,
        price_per_client: float = PRICE_PER_CLIENT,
        breakfast_multiplier: float = BREAKFAST_MULTIPLIER,
    ) -> float:
        """Рассчитывает стоимость бронирования.

        Количество клиентов * цена за клиента * дни, умноженное
        на наценку за завтрак, если он включен.
        """
        price = float(clients_count) * price_per_client * float(days)
        return price * (breakfast_multiplier if breakfast else 1.0)

    @classmethod
    def check_clients_available(
        cls,
        clients: Sequence[Client],
        active_reservations: Iterable[Reservation],
    ) -> None:
        """Проверяет, что клиенты не повторяются и еще не забронированы."""
        if len(set(clients)) != len(clients):
            raise UserAlreadyReservedError(
                "Клиент указан в бронировании несколько раз"
            )

        for reservation in active_reservations:
            for client in clients:
                if reservation.includes(client):
                    raise UserAlreadyReservedError(
                        f"Клиент {client.name} уже забронирован "
                        f"(бронь #{reservation.id})"
                    )
