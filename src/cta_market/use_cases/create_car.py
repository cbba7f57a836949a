from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from cta_market.domain.car import Car, CarInput
from cta_market.ports.car_repository import CarRepository
from cta_market.use_cases.common import new_id, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateCarRequest:
    car: CarInput


@dataclass(frozen=True, slots=True)
class CreateCarResponse:
    car: Car


class CreateCar:
    """
    Publish a new car in the catalog.

    The year upper bound follows the injected clock, so a car for next
    year's model can be listed before January.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._repository = car_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: CreateCarRequest) -> CreateCarResponse:
        now = self._clock()
        request.car.validate(current_year=now.year)

        car = self._repository.add(request.car.to_car(self._id_factory(), now))
        logger.info("Car created", extra={"car_id": car.id, "car": car.full_name})
        return CreateCarResponse(car=car)
