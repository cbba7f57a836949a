from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.offer import Offer
from cta_market.ports.offer_repository import OfferRepository


@dataclass(frozen=True, slots=True)
class ListOffersRequest:
    car_id: str | None = None
    dealership_id: str | None = None
    available_only: bool = False


@dataclass(frozen=True, slots=True)
class ListOffersResponse:
    offers: list[Offer]


class ListOffers:
    """
    List offers, optionally narrowed by car, dealership and availability.

    The most selective store query is used and any remaining criteria are
    applied in memory; store order is preserved.
    """

    def __init__(self, offer_repository: OfferRepository) -> None:
        self._repository = offer_repository

    def execute(self, request: ListOffersRequest) -> ListOffersResponse:
        if request.car_id is not None:
            offers = self._repository.list_by_car(request.car_id)
        elif request.dealership_id is not None:
            offers = self._repository.list_by_dealership(request.dealership_id)
        elif request.available_only:
            offers = self._repository.list_available()
        else:
            offers = self._repository.list_all()

        if request.dealership_id is not None:
            offers = [o for o in offers if o.dealership_id == request.dealership_id]
        if request.available_only:
            offers = [o for o in offers if o.available]

        return ListOffersResponse(offers=offers)
