from __future__ import annotations

from abc import ABC, abstractmethod

from cta_market.domain.purchase import Purchase


class PurchaseRepository(ABC):
    """Port for purchases. Listings are ordered by purchase date."""

    @abstractmethod
    def list_all(self) -> list[Purchase]: ...

    @abstractmethod
    def list_by_buyer(self, buyer_id: str) -> list[Purchase]: ...

    @abstractmethod
    def list_by_dealership(self, dealership_id: str) -> list[Purchase]: ...

    @abstractmethod
    def get_by_id(self, purchase_id: str) -> Purchase | None: ...

    @abstractmethod
    def add(self, purchase: Purchase) -> Purchase: ...

    @abstractmethod
    def update(self, purchase: Purchase) -> Purchase: ...
