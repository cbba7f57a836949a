from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.buyer import Buyer
from cta_market.ports.buyer_repository import BuyerRepository


@dataclass(frozen=True, slots=True)
class ListBuyersResponse:
    buyers: list[Buyer]


class ListBuyers:
    def __init__(self, buyer_repository: BuyerRepository) -> None:
        self._repository = buyer_repository

    def execute(self) -> ListBuyersResponse:
        return ListBuyersResponse(buyers=self._repository.list_all())
