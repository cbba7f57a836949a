from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.car import Car
from cta_market.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class ListCarsResponse:
    cars: list[Car]


class ListCars:
    """Every car in store order."""

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self) -> ListCarsResponse:
        return ListCarsResponse(cars=self._repository.list_all())
