"""Catalog aggregation: join offers to cars and apply search filters.

Pure functions over already-loaded collections. No I/O, no shared state;
identical inputs always produce identical, identically ordered outputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable

from cta_market.domain.car import Car, FuelType, TransmissionType
from cta_market.domain.offer import Offer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayCar:
    """A car with the offers referencing it (possibly none)."""

    car: Car
    offers: tuple[Offer, ...] = ()

    def __post_init__(self) -> None:
        for offer in self.offers:
            if offer.car_id != self.car.id:
                raise ValueError(
                    f"Offer {offer.id} references car {offer.car_id}, not {self.car.id}"
                )

    @property
    def available_offers(self) -> tuple[Offer, ...]:
        return tuple(offer for offer in self.offers if offer.available)


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    """
    Search criteria, combined with AND semantics.

    Every field is optional; ``None`` means no constraint on that dimension.

    - keyword: case-insensitive substring of brand, model, color or year
    - brand: case-insensitive substring of brand
    - fuel_type / transmission: exact match
    - min_price / max_price: inclusive bounds on available offer prices
    - min_year / max_year: inclusive bounds on car year
    """

    keyword: str | None = None
    brand: str | None = None
    fuel_type: FuelType | None = None
    transmission: TransmissionType | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_year: int | None = None
    max_year: int | None = None

    @property
    def has_price_bounds(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    def is_empty(self) -> bool:
        return self == CatalogFilters()


def group_offers_by_car(
    cars: Iterable[Car],
    offers: Iterable[Offer],
    include_cars_without_offers: bool = True,
) -> list[DisplayCar]:
    """
    Attach to every car the offers that reference it.

    Offers are bucketed in one pass; cars keep their input order and offers
    keep theirs within each bucket. Offers pointing at a car that is not in
    ``cars`` are dropped.

    Args:
        cars: Cars in store order
        offers: Offers in store order (full list or a dealership subset)
        include_cars_without_offers: False restricts the result to cars
            that have at least one offer in ``offers``

    Returns:
        One DisplayCar per car
    """
    cars = list(cars)
    known_ids = {car.id for car in cars}

    offers_by_car: dict[str, list[Offer]] = {}
    for offer in offers:
        if offer.car_id not in known_ids:
            logger.warning(
                "Offer references unknown car",
                extra={"offer_id": offer.id, "car_id": offer.car_id},
            )
            continue
        offers_by_car.setdefault(offer.car_id, []).append(offer)

    return [
        DisplayCar(car=car, offers=tuple(offers_by_car.get(car.id, ())))
        for car in cars
        if include_cars_without_offers or car.id in offers_by_car
    ]


def filter_display_cars(
    display_cars: Iterable[DisplayCar], filters: CatalogFilters
) -> list[DisplayCar]:
    """
    Keep the display cars matching every supplied filter.

    When a price bound is active, only available offers inside the bounds are
    kept on each DisplayCar, and cars left with none are dropped.
    """
    results = []
    for display_car in display_cars:
        if not _car_matches(display_car.car, filters):
            continue

        if filters.has_price_bounds:
            matching = tuple(
                offer for offer in display_car.available_offers if _price_matches(offer, filters)
            )
            if not matching:
                continue
            display_car = replace(display_car, offers=matching)

        results.append(display_car)
    return results


def _car_matches(car: Car, filters: CatalogFilters) -> bool:
    if filters.keyword:
        needle = filters.keyword.lower()
        haystack = (car.brand, car.model, car.color, str(car.year))
        if not any(needle in value.lower() for value in haystack):
            return False
    if filters.brand and filters.brand.lower() not in car.brand.lower():
        return False
    if filters.fuel_type is not None and car.fuel_type != filters.fuel_type:
        return False
    if filters.transmission is not None and car.transmission != filters.transmission:
        return False
    if filters.min_year is not None and car.year < filters.min_year:
        return False
    if filters.max_year is not None and car.year > filters.max_year:
        return False
    return True


def _price_matches(offer: Offer, filters: CatalogFilters) -> bool:
    if filters.min_price is not None and offer.price < filters.min_price:
        return False
    if filters.max_price is not None and offer.price > filters.max_price:
        return False
    return True
