from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hotel_reservations.domain.policies import ReservationPolicy


class HotelSettings(BaseSettings):
    """Настройки отеля (переменные окружения с префиксом HOTEL_).

    Окружение читается только при явном создании HotelSettings();
    менеджер по умолчанию использует HotelSettings.fixed().
    """

    model_config = SettingsConfigDict(env_prefix="HOTEL_")

    hotel_name: str = Field(ReservationPolicy.HOTEL_NAME, min_length=1)
    price_per_client: float = Field(ReservationPolicy.PRICE_PER_CLIENT, gt=0)
    breakfast_multiplier: float = Field(ReservationPolicy.BREAKFAST_MULTIPLIER, ge=1)

    @classmethod
    def fixed(cls) -> "HotelSettings":
        """Фиксированные тарифы отеля без чтения окружения."""
        return cls.model_construct()
