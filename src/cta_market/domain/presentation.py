"""Display-ready records for the catalog.

Derives the price label, availability badge and summary text for each
DisplayCar, and optionally sorts entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable

from cta_market.domain.car import Car
from cta_market.domain.catalog import DisplayCar
from cta_market.domain.offer import Offer


NO_PRICE = "-"


class AvailabilityBadge(str, Enum):
    AVAILABLE = "available"
    NO_OFFERS = "no current offers for this car"
    OFFERS_UNAVAILABLE = "offers no longer available"


class SortOrder(str, Enum):
    NATURAL = "natural"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NEWEST = "newest"


def format_price(amount: Decimal) -> str:
    """``Decimal("20000")`` -> ``"$20,000"``; cents only when non-zero."""
    if amount == amount.to_integral_value():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


@dataclass(frozen=True, slots=True)
class DisplayPrice:
    """
    Price derived from available offers.

    Both bounds ``None``: no price. Equal bounds: a single "from" price.
    Different bounds: a closed range.
    """

    min_price: Decimal | None = None
    max_price: Decimal | None = None

    @property
    def has_price(self) -> bool:
        return self.min_price is not None

    @property
    def is_range(self) -> bool:
        return self.has_price and self.min_price != self.max_price

    @property
    def label(self) -> str:
        if self.min_price is None or self.max_price is None:
            return NO_PRICE
        if self.min_price == self.max_price:
            return f"from {format_price(self.min_price)}"
        return f"{format_price(self.min_price)} - {format_price(self.max_price)}"


def display_price(display_car: DisplayCar) -> DisplayPrice:
    prices = [offer.price for offer in display_car.available_offers]
    if not prices:
        return DisplayPrice()
    return DisplayPrice(min_price=min(prices), max_price=max(prices))


def availability_badge(display_car: DisplayCar) -> AvailabilityBadge:
    if not display_car.offers:
        return AvailabilityBadge.NO_OFFERS
    if not display_car.available_offers:
        return AvailabilityBadge.OFFERS_UNAVAILABLE
    return AvailabilityBadge.AVAILABLE


def offer_summary(offer: Offer, car: Car) -> str | None:
    """Dealership notes win over the car description."""
    return offer.dealership_notes or car.description


def car_summary(display_car: DisplayCar) -> str | None:
    # Available offers first so a stale offer's notes don't shadow a live one.
    ordered = display_car.available_offers + tuple(
        offer for offer in display_car.offers if not offer.available
    )
    for offer in ordered:
        if offer.dealership_notes:
            return offer.dealership_notes
    return display_car.car.description


@dataclass(frozen=True)
class CatalogEntry:
    display_car: DisplayCar
    price: DisplayPrice
    badge: AvailabilityBadge
    summary: str | None

    @property
    def price_label(self) -> str:
        return self.price.label


def present(display_car: DisplayCar) -> CatalogEntry:
    return CatalogEntry(
        display_car=display_car,
        price=display_price(display_car),
        badge=availability_badge(display_car),
        summary=car_summary(display_car),
    )


def present_all(
    display_cars: Iterable[DisplayCar], sort: SortOrder = SortOrder.NATURAL
) -> list[CatalogEntry]:
    entries = [present(display_car) for display_car in display_cars]
    return sort_entries(entries, sort)


def sort_entries(entries: list[CatalogEntry], sort: SortOrder) -> list[CatalogEntry]:
    """Stable sort; entries without a price always go last."""
    if sort is SortOrder.NATURAL:
        return list(entries)

    if sort is SortOrder.NEWEST:
        return sorted(entries, key=lambda entry: -entry.display_car.car.year)

    priced = [entry for entry in entries if entry.price.has_price]
    unpriced = [entry for entry in entries if not entry.price.has_price]
    if sort is SortOrder.PRICE_ASC:
        priced.sort(key=lambda entry: entry.price.min_price)
    else:
        priced.sort(key=lambda entry: entry.price.max_price, reverse=True)
    return priced + unpriced
