from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.errors import NotFoundError
from cta_market.domain.offer import Offer
from cta_market.ports.offer_repository import OfferRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class GetOfferByIdRequest:
    offer_id: str


@dataclass(frozen=True, slots=True)
class GetOfferByIdResponse:
    offer: Offer


class GetOfferById:
    def __init__(self, offer_repository: OfferRepository) -> None:
        self._repository = offer_repository

    def execute(self, request: GetOfferByIdRequest) -> GetOfferByIdResponse:
        ensure_uuid(request.offer_id, "offer_id")

        offer = self._repository.get_by_id(request.offer_id)
        if offer is None:
            raise NotFoundError(resource="Offer", identifier=request.offer_id)
        return GetOfferByIdResponse(offer=offer)
