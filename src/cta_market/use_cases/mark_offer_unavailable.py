from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.errors import NotFoundError
from cta_market.domain.offer import Offer
from cta_market.ports.offer_repository import OfferRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MarkOfferUnavailableRequest:
    offer_id: str


@dataclass(frozen=True, slots=True)
class MarkOfferUnavailableResponse:
    offer: Offer


class MarkOfferUnavailable:
    """
    Soft delete an offer.

    Idempotent: an offer that is already unavailable is returned unchanged
    and the store is not written.
    """

    def __init__(self, offer_repository: OfferRepository) -> None:
        self._repository = offer_repository

    def execute(self, request: MarkOfferUnavailableRequest) -> MarkOfferUnavailableResponse:
        ensure_uuid(request.offer_id, "offer_id")

        offer = self._repository.get_by_id(request.offer_id)
        if offer is None:
            raise NotFoundError(resource="Offer", identifier=request.offer_id)

        if not offer.available:
            logger.debug("Offer already unavailable", extra={"offer_id": offer.id})
            return MarkOfferUnavailableResponse(offer=offer)

        saved = self._repository.update(offer.mark_unavailable())
        logger.info("Offer marked unavailable", extra={"offer_id": saved.id})
        return MarkOfferUnavailableResponse(offer=saved)
