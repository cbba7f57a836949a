from __future__ import annotations

from dataclasses import dataclass, field

from cta_market.domain.catalog import CatalogFilters, filter_display_cars, group_offers_by_car
from cta_market.domain.dealership import Dealership
from cta_market.domain.errors import NotFoundError
from cta_market.domain.presentation import CatalogEntry, SortOrder, present_all
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.ports.offer_repository import OfferRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class ListDealershipDisplayCarsRequest:
    dealership_id: str
    filters: CatalogFilters = field(default_factory=CatalogFilters)
    sort: SortOrder = SortOrder.NATURAL


@dataclass(frozen=True, slots=True)
class ListDealershipDisplayCarsResponse:
    dealership: Dealership
    entries: list[CatalogEntry]


class ListDealershipDisplayCars:
    """
    The catalog as seen from one dealership.

    Only cars the dealership has an offer for are included, and each
    DisplayCar carries only that dealership's offers.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        offer_repository: OfferRepository,
        dealership_repository: DealershipRepository,
    ) -> None:
        self._cars = car_repository
        self._offers = offer_repository
        self._dealerships = dealership_repository

    def execute(
        self, request: ListDealershipDisplayCarsRequest
    ) -> ListDealershipDisplayCarsResponse:
        ensure_uuid(request.dealership_id, "dealership_id")

        dealership = self._dealerships.get_by_id(request.dealership_id)
        if dealership is None:
            raise NotFoundError(resource="Dealership", identifier=request.dealership_id)

        display_cars = group_offers_by_car(
            self._cars.list_all(),
            self._offers.list_by_dealership(dealership.id),
            include_cars_without_offers=False,
        )
        if not request.filters.is_empty():
            display_cars = filter_display_cars(display_cars, request.filters)

        return ListDealershipDisplayCarsResponse(
            dealership=dealership,
            entries=present_all(display_cars, request.sort),
        )
