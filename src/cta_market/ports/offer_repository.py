from __future__ import annotations

from abc import ABC, abstractmethod

from cta_market.domain.offer import Offer


class OfferRepository(ABC):
    """
    Port for dealership offers.

    Offers are never removed; unavailable offers are still returned by every
    listing except list_available(). All listings keep store order.
    """

    @abstractmethod
    def list_all(self) -> list[Offer]: ...

    @abstractmethod
    def list_available(self) -> list[Offer]: ...

    @abstractmethod
    def list_by_car(self, car_id: str) -> list[Offer]: ...

    @abstractmethod
    def list_by_dealership(self, dealership_id: str) -> list[Offer]: ...

    @abstractmethod
    def get_by_id(self, offer_id: str) -> Offer | None: ...

    @abstractmethod
    def find_by_car_and_dealership(self, car_id: str, dealership_id: str) -> Offer | None: ...

    @abstractmethod
    def add(self, offer: Offer) -> Offer: ...

    @abstractmethod
    def update(self, offer: Offer) -> Offer: ...
