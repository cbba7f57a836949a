from __future__ import annotations

from cta_market.domain.statistics import TopStatistics, highest_rated_cars, rank_by_count
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.ports.favorite_repository import FavoriteRepository
from cta_market.ports.purchase_repository import PurchaseRepository


class GetTopStatistics:
    """
    Top-5 rankings for the admin panel.

    Labels are resolved against the current stores; a record deleted since
    the purchase was made shows up as "Unknown car" (or buyer, dealership).
    """

    def __init__(
        self,
        car_repository: CarRepository,
        buyer_repository: BuyerRepository,
        dealership_repository: DealershipRepository,
        purchase_repository: PurchaseRepository,
        favorite_repository: FavoriteRepository,
    ) -> None:
        self._cars = car_repository
        self._buyers = buyer_repository
        self._dealerships = dealership_repository
        self._purchases = purchase_repository
        self._favorites = favorite_repository

    def execute(self) -> TopStatistics:
        car_names = {car.id: car.full_name for car in self._cars.list_all()}
        buyer_names = {buyer.id: buyer.full_name for buyer in self._buyers.list_all()}
        dealership_names = {d.id: d.display_name for d in self._dealerships.list_all()}
        purchases = self._purchases.list_all()

        return TopStatistics(
            best_selling_cars=rank_by_count(
                purchases,
                key=lambda p: p.car_id,
                label=lambda car_id: car_names.get(car_id, "Unknown car"),
            ),
            top_buyers=rank_by_count(
                purchases,
                key=lambda p: p.buyer_id,
                label=lambda buyer_id: buyer_names.get(buyer_id, "Unknown buyer"),
            ),
            top_dealerships=rank_by_count(
                purchases,
                key=lambda p: p.dealership_id,
                label=lambda dealership_id: dealership_names.get(
                    dealership_id, "Unknown dealership"
                ),
            ),
            highest_rated_cars=highest_rated_cars(
                self._favorites.list_all(),
                label=lambda car_id: car_names.get(car_id, "Unknown car"),
            ),
        )
