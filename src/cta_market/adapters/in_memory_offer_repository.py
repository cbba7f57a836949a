from __future__ import annotations

from cta_market.domain.offer import Offer
from cta_market.ports.offer_repository import OfferRepository


class InMemoryOfferRepository(OfferRepository):
    """
    Canonical contract implementation for tests.

    - Stores offers in insertion order
    - Listings are filters over that order
    """

    def __init__(self, offers: list[Offer] | None = None) -> None:
        self._offers: dict[str, Offer] = {offer.id: offer for offer in offers or []}

    def list_all(self) -> list[Offer]:
        return list(self._offers.values())

    def list_available(self) -> list[Offer]:
        return [offer for offer in self._offers.values() if offer.available]

    def list_by_car(self, car_id: str) -> list[Offer]:
        return [offer for offer in self._offers.values() if offer.car_id == car_id]

    def list_by_dealership(self, dealership_id: str) -> list[Offer]:
        return [offer for offer in self._offers.values() if offer.dealership_id == dealership_id]

    def get_by_id(self, offer_id: str) -> Offer | None:
        return self._offers.get(offer_id)

    def find_by_car_and_dealership(self, car_id: str, dealership_id: str) -> Offer | None:
        for offer in self._offers.values():
            if offer.car_id == car_id and offer.dealership_id == dealership_id:
                return offer
        return None

    def add(self, offer: Offer) -> Offer:
        self._offers[offer.id] = offer
        return offer

    def update(self, offer: Offer) -> Offer:
        if offer.id not in self._offers:
            raise KeyError(offer.id)
        self._offers[offer.id] = offer
        return offer
