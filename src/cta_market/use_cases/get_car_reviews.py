from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from cta_market.domain.errors import NotFoundError
from cta_market.domain.favorite import Favorite
from cta_market.domain.statistics import average_rating
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.favorite_repository import FavoriteRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class GetCarReviewsRequest:
    car_id: str


@dataclass(frozen=True, slots=True)
class GetCarReviewsResponse:
    reviews: list[Favorite]
    average_rating: Decimal | None


class GetCarReviews:
    """
    Favorites of a car that carry a rating or comment.

    The average only counts rated reviews and is ``None`` when there are none.
    """

    def __init__(
        self, favorite_repository: FavoriteRepository, car_repository: CarRepository
    ) -> None:
        self._favorites = favorite_repository
        self._cars = car_repository

    def execute(self, request: GetCarReviewsRequest) -> GetCarReviewsResponse:
        ensure_uuid(request.car_id, "car_id")

        if self._cars.get_by_id(request.car_id) is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        reviews = [f for f in self._favorites.list_by_car(request.car_id) if f.is_review]
        return GetCarReviewsResponse(reviews=reviews, average_rating=average_rating(reviews))
