from __future__ import annotations

from cta_market.domain.purchase import Purchase
from cta_market.ports.purchase_repository import PurchaseRepository


class InMemoryPurchaseRepository(PurchaseRepository):
    """Canonical contract implementation for tests (insertion order)."""

    def __init__(self, purchases: list[Purchase] | None = None) -> None:
        self._purchases: dict[str, Purchase] = {p.id: p for p in purchases or []}

    def list_all(self) -> list[Purchase]:
        return list(self._purchases.values())

    def list_by_buyer(self, buyer_id: str) -> list[Purchase]:
        return [p for p in self._purchases.values() if p.buyer_id == buyer_id]

    def list_by_dealership(self, dealership_id: str) -> list[Purchase]:
        return [p for p in self._purchases.values() if p.dealership_id == dealership_id]

    def get_by_id(self, purchase_id: str) -> Purchase | None:
        return self._purchases.get(purchase_id)

    def add(self, purchase: Purchase) -> Purchase:
        self._purchases[purchase.id] = purchase
        return purchase

    def update(self, purchase: Purchase) -> Purchase:
        if purchase.id not in self._purchases:
            raise KeyError(purchase.id)
        self._purchases[purchase.id] = purchase
        return purchase
