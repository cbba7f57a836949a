"""Get car by ID use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.car import Car
from cta_market.domain.errors import NotFoundError
from cta_market.ports.car_repository import CarRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: str


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Validate car_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if car doesn't exist
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing car_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            ValidationError: If car_id is not a valid UUID format
            NotFoundError: If car with given ID doesn't exist
        """
        ensure_uuid(request.car_id, "car_id")

        car = self._repository.get_by_id(request.car_id)
        if car is None:
            logger.warning("Car not found", extra={"car_id": request.car_id})
            raise NotFoundError(resource="Car", identifier=request.car_id)

        return GetCarByIdResponse(car=car)
