"""Fetch or search the public catalog of display cars."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cta_market.domain.catalog import CatalogFilters, filter_display_cars, group_offers_by_car
from cta_market.domain.presentation import CatalogEntry, SortOrder, present_all
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchDisplayCarsRequest:
    filters: CatalogFilters = field(default_factory=CatalogFilters)
    sort: SortOrder = SortOrder.NATURAL


@dataclass(frozen=True, slots=True)
class SearchDisplayCarsResponse:
    entries: list[CatalogEntry]


class SearchDisplayCars:
    """
    Join every car with its offers, filter, and present.

    With empty filters this is the "fetch all" view: every car appears,
    including cars with no offers at all. Filtering never fails; criteria
    that could not be parsed upstream simply arrive as ``None``.
    """

    def __init__(self, car_repository: CarRepository, offer_repository: OfferRepository) -> None:
        self._cars = car_repository
        self._offers = offer_repository

    def execute(self, request: SearchDisplayCarsRequest) -> SearchDisplayCarsResponse:
        display_cars = group_offers_by_car(self._cars.list_all(), self._offers.list_all())

        if not request.filters.is_empty():
            display_cars = filter_display_cars(display_cars, request.filters)

        logger.debug(
            "Catalog search",
            extra={"results": len(display_cars), "sort": request.sort.value},
        )
        return SearchDisplayCarsResponse(entries=present_all(display_cars, request.sort))
