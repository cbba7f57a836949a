from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.buyer import Buyer
from cta_market.domain.errors import NotFoundError
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class GetBuyerByIdRequest:
    buyer_id: str


@dataclass(frozen=True, slots=True)
class GetBuyerByIdResponse:
    buyer: Buyer


class GetBuyerById:
    def __init__(self, buyer_repository: BuyerRepository) -> None:
        self._repository = buyer_repository

    def execute(self, request: GetBuyerByIdRequest) -> GetBuyerByIdResponse:
        ensure_uuid(request.buyer_id, "buyer_id")

        buyer = self._repository.get_by_id(request.buyer_id)
        if buyer is None:
            raise NotFoundError(resource="Buyer", identifier=request.buyer_id)
        return GetBuyerByIdResponse(buyer=buyer)
