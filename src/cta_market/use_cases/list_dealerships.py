from __future__ import annotations

from dataclasses import dataclass, field

from cta_market.domain.dealership import Dealership, DealershipFilters
from cta_market.ports.dealership_repository import DealershipRepository


@dataclass(frozen=True, slots=True)
class ListDealershipsRequest:
    filters: DealershipFilters = field(default_factory=DealershipFilters)


@dataclass(frozen=True, slots=True)
class ListDealershipsResponse:
    dealerships: list[Dealership]


class ListDealerships:
    def __init__(self, dealership_repository: DealershipRepository) -> None:
        self._repository = dealership_repository

    def execute(self, request: ListDealershipsRequest) -> ListDealershipsResponse:
        dealerships = [d for d in self._repository.list_all() if request.filters.matches(d)]
        return ListDealershipsResponse(dealerships=dealerships)
