"""
Демонстрация работы менеджера бронирований.

Запуск: python -m hotel_reservations.demo
"""

from hotel_reservations.application.services import HotelReservationManager
from hotel_reservations.domain.client import Client
from hotel_reservations.domain.results import Result


def _describe(result: Result) -> str:
    if result.ok:
        return str(result.value) if result.value is not None else "OK"
    return f"Ошибка ({result.kind.value}): {result.message}"


def main() -> HotelReservationManager:
    print("=== Демонстрация менеджера бронирований отеля ===\n")

    manager = HotelReservationManager()
    marc = Client(name="Marc", age=19, height=180)
    laura = Client(name="Laura", age=16, height=160)

    print(_describe(manager.add_reservation([marc], days=2, breakfast=False)))
    # Marc уже забронирован
    print(_describe(manager.add_reservation([marc], days=5, breakfast=True)))

    print(_describe(manager.cancel_reservation(1)))
    # Брони с ID 3 не существует
    print(_describe(manager.cancel_reservation(3)))

    # После отмены Marc снова свободен
    print(_describe(manager.add_reservation([marc], days=10, breakfast=True)))
    print(_describe(manager.add_reservation([marc, laura], days=5, breakfast=True)))

    print("\nТекущие бронирования:")
    for reservation in manager.get_all_reservations():
        print(f"- {reservation}")

    return manager


if __name__ == "__main__":
    main()
