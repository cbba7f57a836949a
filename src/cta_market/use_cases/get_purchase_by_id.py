from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.errors import NotFoundError
from cta_market.domain.purchase import Purchase
from cta_market.ports.purchase_repository import PurchaseRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class GetPurchaseByIdRequest:
    purchase_id: str


@dataclass(frozen=True, slots=True)
class GetPurchaseByIdResponse:
    purchase: Purchase


class GetPurchaseById:
    def __init__(self, purchase_repository: PurchaseRepository) -> None:
        self._repository = purchase_repository

    def execute(self, request: GetPurchaseByIdRequest) -> GetPurchaseByIdResponse:
        ensure_uuid(request.purchase_id, "purchase_id")

        purchase = self._repository.get_by_id(request.purchase_id)
        if purchase is None:
            raise NotFoundError(resource="Purchase", identifier=request.purchase_id)
        return GetPurchaseByIdResponse(purchase=purchase)
