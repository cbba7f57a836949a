from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.errors import NotFoundError
from cta_market.domain.purchase import Purchase, PurchaseStatus
from cta_market.ports.purchase_repository import PurchaseRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChangePurchaseStatusRequest:
    purchase_id: str
    status: PurchaseStatus


@dataclass(frozen=True, slots=True)
class ChangePurchaseStatusResponse:
    purchase: Purchase


class ChangePurchaseStatus:
    """
    Move a purchase through its lifecycle.

    Only the moves listed in ALLOWED_TRANSITIONS are accepted; anything
    else raises InvalidTransitionError and nothing is written.
    """

    def __init__(self, purchase_repository: PurchaseRepository) -> None:
        self._repository = purchase_repository

    def execute(self, request: ChangePurchaseStatusRequest) -> ChangePurchaseStatusResponse:
        ensure_uuid(request.purchase_id, "purchase_id")

        purchase = self._repository.get_by_id(request.purchase_id)
        if purchase is None:
            raise NotFoundError(resource="Purchase", identifier=request.purchase_id)

        updated = purchase.transition_to(request.status)
        saved = self._repository.update(updated)
        logger.info(
            "Purchase status changed",
            extra={
                "purchase_id": saved.id,
                "from_status": purchase.status.value,
                "to_status": saved.status.value,
            },
        )
        return ChangePurchaseStatusResponse(purchase=saved)
