from __future__ import annotations

from cta_market.domain.favorite import Favorite, FavoriteInput, ReviewUpdate
from cta_market.entrypoints.http.dtos.favorites import (
    CarReviewsResponseDTO,
    FavoriteCreateDTO,
    FavoriteListResponseDTO,
    FavoriteResponseDTO,
    ReviewUpdateDTO,
)
from cta_market.use_cases.get_car_reviews import GetCarReviewsResponse


class FavoriteMapper:
    @staticmethod
    def to_favorite_input(dto: FavoriteCreateDTO) -> FavoriteInput:
        return FavoriteInput(
            buyer_id=dto.buyer_id,
            car_id=dto.car_id,
            rating=dto.rating,
            comment=dto.comment,
            price_notifications=dto.price_notifications,
        )

    @staticmethod
    def to_review_update(dto: ReviewUpdateDTO) -> ReviewUpdate:
        return ReviewUpdate(rating=dto.rating, comment=dto.comment)

    @staticmethod
    def to_response(favorite: Favorite) -> FavoriteResponseDTO:
        return FavoriteResponseDTO(
            id=favorite.id,
            buyer_id=favorite.buyer_id,
            car_id=favorite.car_id,
            rating=favorite.rating,
            comment=favorite.comment,
            price_notifications=favorite.price_notifications,
            date_added=favorite.date_added,
        )

    @staticmethod
    def to_list_response(favorites: list[Favorite]) -> FavoriteListResponseDTO:
        return FavoriteListResponseDTO(
            favorites=[FavoriteMapper.to_response(f) for f in favorites],
            total=len(favorites),
        )

    @staticmethod
    def to_reviews_response(car_id: str, result: GetCarReviewsResponse) -> CarReviewsResponseDTO:
        return CarReviewsResponseDTO(
            car_id=car_id,
            reviews=[FavoriteMapper.to_response(f) for f in result.reviews],
            total=len(result.reviews),
            average_rating=(
                str(result.average_rating) if result.average_rating is not None else None
            ),
        )
