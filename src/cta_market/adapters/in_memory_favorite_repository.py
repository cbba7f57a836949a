from __future__ import annotations

from cta_market.domain.favorite import Favorite
from cta_market.ports.favorite_repository import FavoriteRepository


class InMemoryFavoriteRepository(FavoriteRepository):
    """Canonical contract implementation for tests (insertion order)."""

    def __init__(self, favorites: list[Favorite] | None = None) -> None:
        self._favorites: dict[str, Favorite] = {f.id: f for f in favorites or []}

    def list_all(self) -> list[Favorite]:
        return list(self._favorites.values())

    def list_by_buyer(self, buyer_id: str) -> list[Favorite]:
        return [f for f in self._favorites.values() if f.buyer_id == buyer_id]

    def list_by_car(self, car_id: str) -> list[Favorite]:
        return [f for f in self._favorites.values() if f.car_id == car_id]

    def get_by_id(self, favorite_id: str) -> Favorite | None:
        return self._favorites.get(favorite_id)

    def find_by_buyer_and_car(self, buyer_id: str, car_id: str) -> Favorite | None:
        for favorite in self._favorites.values():
            if favorite.buyer_id == buyer_id and favorite.car_id == car_id:
                return favorite
        return None

    def add(self, favorite: Favorite) -> Favorite:
        self._favorites[favorite.id] = favorite
        return favorite

    def update(self, favorite: Favorite) -> Favorite:
        if favorite.id not in self._favorites:
            raise KeyError(favorite.id)
        self._favorites[favorite.id] = favorite
        return favorite

    def delete(self, favorite_id: str) -> None:
        self._favorites.pop(favorite_id, None)
