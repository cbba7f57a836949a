from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.errors import NotFoundError
from cta_market.domain.favorite import Favorite, ReviewUpdate
from cta_market.ports.favorite_repository import FavoriteRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateReviewRequest:
    favorite_id: str
    review: ReviewUpdate


@dataclass(frozen=True, slots=True)
class UpdateReviewResponse:
    favorite: Favorite


class UpdateReview:
    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._repository = favorite_repository

    def execute(self, request: UpdateReviewRequest) -> UpdateReviewResponse:
        ensure_uuid(request.favorite_id, "favorite_id")
        request.review.validate()

        favorite = self._repository.get_by_id(request.favorite_id)
        if favorite is None:
            raise NotFoundError(resource="Favorite", identifier=request.favorite_id)

        saved = self._repository.update(
            favorite.with_review(request.review.rating, request.review.comment)
        )
        logger.info("Review updated", extra={"favorite_id": saved.id, "rating": saved.rating})
        return UpdateReviewResponse(favorite=saved)
