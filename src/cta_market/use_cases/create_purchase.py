from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from cta_market.domain.errors import ConflictError, NotFoundError
from cta_market.domain.purchase import Purchase, PurchaseInput, PurchaseStatus
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.ports.offer_repository import OfferRepository
from cta_market.ports.purchase_repository import PurchaseRepository
from cta_market.use_cases.common import ensure_uuid, new_id, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreatePurchaseRequest:
    purchase: PurchaseInput


@dataclass(frozen=True, slots=True)
class CreatePurchaseResponse:
    purchase: Purchase


class CreatePurchase:
    """
    Record a buyer purchasing an offer.

    The purchase snapshots the offer's car and dealership, starts PENDING,
    and uses the offer price unless a final price is given. The offer
    itself is left untouched; taking it off the market is a separate call.

    Raises:
        ValidationError: Malformed ids or purchase fields
        NotFoundError: Unknown offer or buyer
        ConflictError: The offer is no longer available
    """

    def __init__(
        self,
        purchase_repository: PurchaseRepository,
        offer_repository: OfferRepository,
        buyer_repository: BuyerRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._purchases = purchase_repository
        self._offers = offer_repository
        self._buyers = buyer_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: CreatePurchaseRequest) -> CreatePurchaseResponse:
        data = request.purchase
        ensure_uuid(data.offer_id, "offer_id")
        ensure_uuid(data.buyer_id, "buyer_id")
        data.validate()

        offer = self._offers.get_by_id(data.offer_id)
        if offer is None:
            raise NotFoundError(resource="Offer", identifier=data.offer_id)
        if not offer.available:
            raise ConflictError("Offer is no longer available", offer_id=offer.id)

        if self._buyers.get_by_id(data.buyer_id) is None:
            raise NotFoundError(resource="Buyer", identifier=data.buyer_id)

        purchase = Purchase(
            id=self._id_factory(),
            offer_id=offer.id,
            buyer_id=data.buyer_id,
            car_id=offer.car_id,
            dealership_id=offer.dealership_id,
            final_price=data.final_price if data.final_price is not None else offer.price,
            payment_method=data.payment_method,
            status=PurchaseStatus.PENDING,
            observations=data.observations,
            purchase_date=self._clock(),
        )
        saved = self._purchases.add(purchase)
        logger.info(
            "Purchase created",
            extra={
                "purchase_id": saved.id,
                "offer_id": saved.offer_id,
                "buyer_id": saved.buyer_id,
                "final_price": str(saved.final_price),
            },
        )
        return CreatePurchaseResponse(purchase=saved)
