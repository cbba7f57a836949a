from __future__ import annotations

from abc import ABC, abstractmethod

from cta_market.domain.favorite import Favorite


class FavoriteRepository(ABC):
    """Port for buyer favorites (which double as reviews)."""

    @abstractmethod
    def list_all(self) -> list[Favorite]: ...

    @abstractmethod
    def list_by_buyer(self, buyer_id: str) -> list[Favorite]: ...

    @abstractmethod
    def list_by_car(self, car_id: str) -> list[Favorite]: ...

    @abstractmethod
    def get_by_id(self, favorite_id: str) -> Favorite | None: ...

    @abstractmethod
    def find_by_buyer_and_car(self, buyer_id: str, car_id: str) -> Favorite | None: ...

    @abstractmethod
    def add(self, favorite: Favorite) -> Favorite: ...

    @abstractmethod
    def update(self, favorite: Favorite) -> Favorite: ...

    @abstractmethod
    def delete(self, favorite_id: str) -> None: ...
