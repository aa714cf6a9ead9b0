from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from hotel_reservations.domain.client import Client


class Reservation(BaseModel):
    """Бронирование группы клиентов в отеле."""

    model_config = ConfigDict(frozen=True)

    id: int
    hotel_name: str
    clients: Tuple[Client, ...] = Field(..., min_length=1)
    days: int = Field(..., gt=0)
    price: float = Field(..., ge=0)
    breakfast: bool

    @property
    def client_count(self) -> int:
        return len(self.clients)

    def includes(self, client: Client) -> bool:
        """Проверяет, входит ли клиент в бронирование."""
        return client in self.clients

    def __str__(self) -> str:
        names = ", ".join(client.name for client in self.clients)
        breakfast = "с завтраком" if self.breakfast else "без завтрака"
        return (
            f"Бронь #{self.id} в {self.hotel_name}: {names}; "
            f"{self.days} дн., {breakfast}, {self.price:.2f}"
        )
