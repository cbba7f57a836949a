from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable

from cta_market.domain.favorite import Favorite
from cta_market.domain.purchase import Purchase


TOP_LIMIT = 5


@dataclass(frozen=True, slots=True)
class DashboardStats:
    total_buyers: int
    total_dealerships: int
    total_purchases: int
    total_revenue: Decimal


@dataclass(frozen=True, slots=True)
class RankingEntry:
    id: str
    label: str
    value: Decimal


@dataclass(frozen=True, slots=True)
class TopStatistics:
    best_selling_cars: list[RankingEntry]
    top_buyers: list[RankingEntry]
    top_dealerships: list[RankingEntry]
    highest_rated_cars: list[RankingEntry]


def total_revenue(purchases: Iterable[Purchase]) -> Decimal:
    return sum(
        (purchase.final_price for purchase in purchases if purchase.counts_as_sale),
        Decimal("0"),
    )


def rank_by_count(
    purchases: Iterable[Purchase],
    key: Callable[[Purchase], str],
    label: Callable[[str], str],
    limit: int = TOP_LIMIT,
) -> list[RankingEntry]:
    """
    Count sales per ``key`` and return the top ``limit``.

    Cancelled purchases are ignored. Ties keep first-seen order
    (Counter preserves insertion order and ``sorted`` is stable).
    """
    counts = Counter(key(purchase) for purchase in purchases if purchase.counts_as_sale)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]
    return [
        RankingEntry(id=item_id, label=label(item_id), value=Decimal(count))
        for item_id, count in ranked
    ]


def average_rating(favorites: Iterable[Favorite]) -> Decimal | None:
    ratings = [favorite.rating for favorite in favorites if favorite.rating is not None]
    if not ratings:
        return None
    return (Decimal(sum(ratings)) / Decimal(len(ratings))).quantize(Decimal("0.01"))


def highest_rated_cars(
    favorites: Iterable[Favorite],
    label: Callable[[str], str],
    limit: int = TOP_LIMIT,
) -> list[RankingEntry]:
    by_car: dict[str, list[Favorite]] = {}
    for favorite in favorites:
        by_car.setdefault(favorite.car_id, []).append(favorite)

    averages = []
    for car_id, car_favorites in by_car.items():
        average = average_rating(car_favorites)
        if average is not None:
            averages.append((car_id, average))

    ranked = sorted(averages, key=lambda item: item[1], reverse=True)[:limit]
    return [RankingEntry(id=car_id, label=label(car_id), value=avg) for car_id, avg in ranked]
