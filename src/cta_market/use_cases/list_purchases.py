from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.purchase import Purchase, PurchaseStatus
from cta_market.ports.purchase_repository import PurchaseRepository


@dataclass(frozen=True, slots=True)
class ListPurchasesRequest:
    buyer_id: str | None = None
    dealership_id: str | None = None
    status: PurchaseStatus | None = None


@dataclass(frozen=True, slots=True)
class ListPurchasesResponse:
    purchases: list[Purchase]


class ListPurchases:
    def __init__(self, purchase_repository: PurchaseRepository) -> None:
        self._repository = purchase_repository

    def execute(self, request: ListPurchasesRequest) -> ListPurchasesResponse:
        if request.buyer_id is not None:
            purchases = self._repository.list_by_buyer(request.buyer_id)
        elif request.dealership_id is not None:
            purchases = self._repository.list_by_dealership(request.dealership_id)
        else:
            purchases = self._repository.list_all()

        if request.dealership_id is not None:
            purchases = [p for p in purchases if p.dealership_id == request.dealership_id]
        if request.status is not None:
            purchases = [p for p in purchases if p.status is request.status]

        return ListPurchasesResponse(purchases=purchases)
