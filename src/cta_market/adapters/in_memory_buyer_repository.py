from __future__ import annotations

from cta_market.domain.buyer import Buyer
from cta_market.ports.buyer_repository import BuyerRepository


class InMemoryBuyerRepository(BuyerRepository):
    """Canonical contract implementation for tests (insertion order)."""

    def __init__(self, buyers: list[Buyer] | None = None) -> None:
        self._buyers: dict[str, Buyer] = {buyer.id: buyer for buyer in buyers or []}

    def list_all(self) -> list[Buyer]:
        return list(self._buyers.values())

    def get_by_id(self, buyer_id: str) -> Buyer | None:
        return self._buyers.get(buyer_id)

    def get_by_email(self, email: str) -> Buyer | None:
        for buyer in self._buyers.values():
            if buyer.email == email.lower():
                return buyer
        return None

    def add(self, buyer: Buyer) -> Buyer:
        self._buyers[buyer.id] = buyer
        return buyer

    def update(self, buyer: Buyer) -> Buyer:
        if buyer.id not in self._buyers:
            raise KeyError(buyer.id)
        self._buyers[buyer.id] = buyer
        return buyer

    def count(self) -> int:
        return len(self._buyers)
