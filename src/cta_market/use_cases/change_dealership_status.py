from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.dealership import Dealership
from cta_market.domain.errors import NotFoundError
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChangeDealershipStatusRequest:
    dealership_id: str


@dataclass(frozen=True, slots=True)
class ChangeDealershipStatusResponse:
    dealership: Dealership


class _ChangeDealershipStatus:
    def __init__(self, dealership_repository: DealershipRepository) -> None:
        self._repository = dealership_repository

    def _load(self, dealership_id: str) -> Dealership:
        ensure_uuid(dealership_id, "dealership_id")
        dealership = self._repository.get_by_id(dealership_id)
        if dealership is None:
            raise NotFoundError(resource="Dealership", identifier=dealership_id)
        return dealership


class DeactivateDealership(_ChangeDealershipStatus):
    """
    Take a dealership off the marketplace.

    An inactive dealership cannot publish offers. Deactivating one that is
    already inactive is a conflict, not a no-op.
    """

    def execute(self, request: ChangeDealershipStatusRequest) -> ChangeDealershipStatusResponse:
        dealership = self._load(request.dealership_id)
        saved = self._repository.update(dealership.deactivate())
        logger.info("Dealership deactivated", extra={"dealership_id": saved.id})
        return ChangeDealershipStatusResponse(dealership=saved)


class ActivateDealership(_ChangeDealershipStatus):
    def execute(self, request: ChangeDealershipStatusRequest) -> ChangeDealershipStatusResponse:
        dealership = self._load(request.dealership_id)
        saved = self._repository.update(dealership.activate())
        logger.info("Dealership activated", extra={"dealership_id": saved.id})
        return ChangeDealershipStatusResponse(dealership=saved)
