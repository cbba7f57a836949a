from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from cta_market.domain.errors import ConflictError, NotFoundError
from cta_market.domain.offer import Offer, OfferInput
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.ports.offer_repository import OfferRepository
from cta_market.use_cases.common import ensure_uuid, new_id, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateOfferRequest:
    offer: OfferInput


@dataclass(frozen=True, slots=True)
class CreateOfferResponse:
    offer: Offer


class CreateOffer:
    """
    Publish a dealership's price for a car.

    Rules:
    - price is a finite Decimal in [0, MAX_OFFER_PRICE]
    - the car must exist
    - the dealership must exist and be active
    - a dealership holds at most one offer per car

    New offers always start available.
    """

    def __init__(
        self,
        offer_repository: OfferRepository,
        car_repository: CarRepository,
        dealership_repository: DealershipRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._offers = offer_repository
        self._cars = car_repository
        self._dealerships = dealership_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: CreateOfferRequest) -> CreateOfferResponse:
        data = request.offer
        ensure_uuid(data.car_id, "car_id")
        ensure_uuid(data.dealership_id, "dealership_id")
        data.validate()

        if self._cars.get_by_id(data.car_id) is None:
            raise NotFoundError(resource="Car", identifier=data.car_id)

        dealership = self._dealerships.get_by_id(data.dealership_id)
        if dealership is None:
            raise NotFoundError(resource="Dealership", identifier=data.dealership_id)
        if not dealership.active:
            raise ConflictError(
                "Dealership is not active",
                dealership_id=dealership.id,
            )

        if self._offers.find_by_car_and_dealership(data.car_id, data.dealership_id):
            raise ConflictError(
                "Dealership already has an offer for this car",
                car_id=data.car_id,
                dealership_id=data.dealership_id,
            )

        offer = self._offers.add(data.to_offer(self._id_factory(), self._clock()))
        logger.info(
            "Offer created",
            extra={
                "offer_id": offer.id,
                "car_id": offer.car_id,
                "dealership_id": offer.dealership_id,
                "price": str(offer.price),
            },
        )
        return CreateOfferResponse(offer=offer)
