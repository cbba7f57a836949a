from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.errors import NotFoundError
from cta_market.ports.favorite_repository import FavoriteRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemoveFavoriteRequest:
    favorite_id: str


class RemoveFavorite:
    """Hard delete of the favorite; the car and buyer are untouched."""

    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._repository = favorite_repository

    def execute(self, request: RemoveFavoriteRequest) -> None:
        ensure_uuid(request.favorite_id, "favorite_id")

        if self._repository.get_by_id(request.favorite_id) is None:
            raise NotFoundError(resource="Favorite", identifier=request.favorite_id)

        self._repository.delete(request.favorite_id)
        logger.info("Favorite removed", extra={"favorite_id": request.favorite_id})
