from __future__ import annotations

from cta_market.domain.car import Car
from cta_market.ports.car_repository import CarRepository


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation for tests.

    - Stores cars in insertion order
    - update() replaces in place, keeping the original position
    """

    def __init__(self, cars: list[Car] | None = None) -> None:
        self._cars: dict[str, Car] = {car.id: car for car in cars or []}

    def list_all(self) -> list[Car]:
        return list(self._cars.values())

    def get_by_id(self, car_id: str) -> Car | None:
        return self._cars.get(car_id)

    def add(self, car: Car) -> Car:
        self._cars[car.id] = car
        return car

    def update(self, car: Car) -> Car:
        if car.id not in self._cars:
            raise KeyError(car.id)
        self._cars[car.id] = car
        return car
