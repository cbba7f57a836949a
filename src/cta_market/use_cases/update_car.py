from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from cta_market.domain.car import Car, CarInput, CarUpdate
from cta_market.domain.errors import NotFoundError
from cta_market.ports.car_repository import CarRepository
from cta_market.use_cases.common import ensure_uuid, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateCarRequest:
    car_id: str
    changes: CarUpdate


@dataclass(frozen=True, slots=True)
class UpdateCarResponse:
    car: Car


class UpdateCar:
    """
    Partially edit a car.

    The merged record is re-validated with the creation rules, so an edit
    can never produce a car that could not have been created.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = car_repository
        self._clock = clock

    def execute(self, request: UpdateCarRequest) -> UpdateCarResponse:
        ensure_uuid(request.car_id, "car_id")

        car = self._repository.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        changed = request.changes.changed_fields()
        if not changed:
            return UpdateCarResponse(car=car)

        updated = request.changes.apply(car)
        CarInput.from_car(updated).validate(current_year=self._clock().year)

        saved = self._repository.update(updated)
        logger.info("Car updated", extra={"car_id": saved.id, "fields": changed})
        return UpdateCarResponse(car=saved)
