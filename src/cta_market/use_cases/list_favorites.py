from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.favorite import Favorite
from cta_market.ports.favorite_repository import FavoriteRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class ListFavoritesRequest:
    buyer_id: str


@dataclass(frozen=True, slots=True)
class ListFavoritesResponse:
    favorites: list[Favorite]


class ListFavorites:
    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._repository = favorite_repository

    def execute(self, request: ListFavoritesRequest) -> ListFavoritesResponse:
        ensure_uuid(request.buyer_id, "buyer_id")
        return ListFavoritesResponse(favorites=self._repository.list_by_buyer(request.buyer_id))
