from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from cta_market.domain.errors import ConflictError, NotFoundError
from cta_market.domain.favorite import Favorite, FavoriteInput
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.favorite_repository import FavoriteRepository
from cta_market.use_cases.common import ensure_uuid, new_id, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddFavoriteRequest:
    favorite: FavoriteInput


@dataclass(frozen=True, slots=True)
class AddFavoriteResponse:
    favorite: Favorite


class AddFavorite:
    """Save a car to a buyer's favorites, optionally with a review. One per car."""

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        car_repository: CarRepository,
        buyer_repository: BuyerRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._favorites = favorite_repository
        self._cars = car_repository
        self._buyers = buyer_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: AddFavoriteRequest) -> AddFavoriteResponse:
        data = request.favorite
        ensure_uuid(data.buyer_id, "buyer_id")
        ensure_uuid(data.car_id, "car_id")
        data.validate()

        if self._buyers.get_by_id(data.buyer_id) is None:
            raise NotFoundError(resource="Buyer", identifier=data.buyer_id)
        if self._cars.get_by_id(data.car_id) is None:
            raise NotFoundError(resource="Car", identifier=data.car_id)

        if self._favorites.find_by_buyer_and_car(data.buyer_id, data.car_id) is not None:
            raise ConflictError(
                "Car is already in the buyer's favorites",
                buyer_id=data.buyer_id,
                car_id=data.car_id,
            )

        favorite = self._favorites.add(data.to_favorite(self._id_factory(), self._clock()))
        logger.info(
            "Favorite added",
            extra={"favorite_id": favorite.id, "buyer_id": favorite.buyer_id, "car_id": favorite.car_id},
        )
        return AddFavoriteResponse(favorite=favorite)
