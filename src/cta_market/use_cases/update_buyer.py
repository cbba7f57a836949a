from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.buyer import Buyer, BuyerUpdate
from cta_market.domain.errors import ConflictError, NotFoundError
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateBuyerRequest:
    buyer_id: str
    changes: BuyerUpdate


@dataclass(frozen=True, slots=True)
class UpdateBuyerResponse:
    buyer: Buyer


class UpdateBuyer:
    """
    Partially edit a buyer's contact details.

    A new email must not belong to another buyer (compared case-insensitively).
    """

    def __init__(self, buyer_repository: BuyerRepository) -> None:
        self._repository = buyer_repository

    def execute(self, request: UpdateBuyerRequest) -> UpdateBuyerResponse:
        ensure_uuid(request.buyer_id, "buyer_id")
        request.changes.validate()

        buyer = self._repository.get_by_id(request.buyer_id)
        if buyer is None:
            raise NotFoundError(resource="Buyer", identifier=request.buyer_id)

        changed = request.changes.changed_fields()
        if not changed:
            return UpdateBuyerResponse(buyer=buyer)

        updated = request.changes.apply(buyer)
        owner = self._repository.get_by_email(updated.email)
        if owner is not None and owner.id != buyer.id:
            raise ConflictError("A buyer with this email already exists", email=updated.email)

        saved = self._repository.update(updated)
        logger.info("Buyer updated", extra={"buyer_id": saved.id, "fields": changed})
        return UpdateBuyerResponse(buyer=saved)
