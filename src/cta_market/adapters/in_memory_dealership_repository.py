from __future__ import annotations

from cta_market.domain.dealership import Dealership
from cta_market.ports.dealership_repository import DealershipRepository


class InMemoryDealershipRepository(DealershipRepository):
    """Canonical contract implementation for tests (insertion order)."""

    def __init__(self, dealerships: list[Dealership] | None = None) -> None:
        self._dealerships: dict[str, Dealership] = {d.id: d for d in dealerships or []}

    def list_all(self) -> list[Dealership]:
        return list(self._dealerships.values())

    def get_by_id(self, dealership_id: str) -> Dealership | None:
        return self._dealerships.get(dealership_id)

    def get_by_tax_id(self, tax_id: str) -> Dealership | None:
        for dealership in self._dealerships.values():
            if dealership.tax_id == tax_id:
                return dealership
        return None

    def add(self, dealership: Dealership) -> Dealership:
        self._dealerships[dealership.id] = dealership
        return dealership

    def update(self, dealership: Dealership) -> Dealership:
        if dealership.id not in self._dealerships:
            raise KeyError(dealership.id)
        self._dealerships[dealership.id] = dealership
        return dealership

    def count(self) -> int:
        return len(self._dealerships)
