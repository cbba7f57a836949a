from __future__ import annotations

from dataclasses import dataclass

from cta_market.domain.dealership import Dealership
from cta_market.domain.errors import NotFoundError
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.use_cases.common import ensure_uuid


@dataclass(frozen=True, slots=True)
class GetDealershipByIdRequest:
    dealership_id: str


@dataclass(frozen=True, slots=True)
class GetDealershipByIdResponse:
    dealership: Dealership


class GetDealershipById:
    def __init__(self, dealership_repository: DealershipRepository) -> None:
        self._repository = dealership_repository

    def execute(self, request: GetDealershipByIdRequest) -> GetDealershipByIdResponse:
        ensure_uuid(request.dealership_id, "dealership_id")

        dealership = self._repository.get_by_id(request.dealership_id)
        if dealership is None:
            raise NotFoundError(resource="Dealership", identifier=request.dealership_id)
        return GetDealershipByIdResponse(dealership=dealership)
