from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.catalog import DisplayCar
from cta_market.domain.errors import NotFoundError
from cta_market.domain.presentation import CatalogEntry, present
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.offer_repository import OfferRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class GetDisplayCarByIdRequest:
    car_id: str


@dataclass(frozen=True, slots=True)
class GetDisplayCarByIdResponse:
    entry: CatalogEntry


class GetDisplayCarById:
    """One car with all of its offers, available or not."""

    def __init__(self, car_repository: CarRepository, offer_repository: OfferRepository) -> None:
        self._cars = car_repository
        self._offers = offer_repository

    def execute(self, request: GetDisplayCarByIdRequest) -> GetDisplayCarByIdResponse:
        ensure_uuid(request.car_id, "car_id")

        car = self._cars.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        offers = tuple(self._offers.list_by_car(car.id))
        return GetDisplayCarByIdResponse(entry=present(DisplayCar(car=car, offers=offers)))
