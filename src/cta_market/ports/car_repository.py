from __future__ import annotations

from abc import ABC, abstractmethod

from cta_market.domain.car import Car


class CarRepository(ABC):
    """
    Port for car catalog storage.

    Contract:
        - list_all() returns cars in a stable order (publication order)
        - get_by_id() returns None for unknown or malformed ids
        - inputs are validated by the caller (UseCase); adapters do not re-validate
    """

    @abstractmethod
    def list_all(self) -> list[Car]: ...

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None: ...

    @abstractmethod
    def add(self, car: Car) -> Car: ...

    @abstractmethod
    def update(self, car: Car) -> Car:
        """Persist changes of an existing car (matched by id)."""
        ...
