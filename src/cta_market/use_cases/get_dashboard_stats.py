from __future__ import annotations

from cta_market.domain.statistics import DashboardStats, total_revenue
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.ports.purchase_repository import PurchaseRepository


class GetDashboardStats:
    """
    Headline numbers for the admin dashboard.

    ``total_purchases`` counts every purchase ever recorded;
    ``total_revenue`` ignores cancelled ones.
    """

    def __init__(
        self,
        buyer_repository: BuyerRepository,
        dealership_repository: DealershipRepository,
        purchase_repository: PurchaseRepository,
    ) -> None:
        self._buyers = buyer_repository
        self._dealerships = dealership_repository
        self._purchases = purchase_repository

    def execute(self) -> DashboardStats:
        purchases = self._purchases.list_all()
        return DashboardStats(
            total_buyers=self._buyers.count(),
            total_dealerships=self._dealerships.count(),
            total_purchases=len(purchases),
            total_revenue=total_revenue(purchases),
        )
