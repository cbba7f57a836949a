from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.errors import NotFoundError
from cta_market.domain.offer import Offer, OfferUpdate
from cta_market.ports.offer_repository import OfferRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateOfferRequest:
    offer_id: str
    changes: OfferUpdate


@dataclass(frozen=True, slots=True)
class UpdateOfferResponse:
    offer: Offer


class UpdateOffer:
    def __init__(self, offer_repository: OfferRepository) -> None:
        self._repository = offer_repository

    def execute(self, request: UpdateOfferRequest) -> UpdateOfferResponse:
        ensure_uuid(request.offer_id, "offer_id")
        request.changes.validate()

        offer = self._repository.get_by_id(request.offer_id)
        if offer is None:
            raise NotFoundError(resource="Offer", identifier=request.offer_id)

        updated = request.changes.apply(offer)
        if updated == offer:
            return UpdateOfferResponse(offer=offer)

        saved = self._repository.update(updated)
        logger.info("Offer updated", extra={"offer_id": saved.id})
        return UpdateOfferResponse(offer=saved)
