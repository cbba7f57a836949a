from __future__ import annotations

import logging
from dataclasses import dataclass

from cta_market.domain.dealership import Dealership, DealershipUpdate
from cta_market.domain.errors import NotFoundError
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.use_cases.common import ensure_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateDealershipRequest:
    dealership_id: str
    changes: DealershipUpdate


@dataclass(frozen=True, slots=True)
class UpdateDealershipResponse:
    dealership: Dealership


class UpdateDealership:
    """Partially edit a dealership profile. Text fields are trimmed, the email lowercased."""

    def __init__(self, dealership_repository: DealershipRepository) -> None:
        self._repository = dealership_repository

    def execute(self, request: UpdateDealershipRequest) -> UpdateDealershipResponse:
        ensure_uuid(request.dealership_id, "dealership_id")
        request.changes.validate()

        dealership = self._repository.get_by_id(request.dealership_id)
        if dealership is None:
            raise NotFoundError(resource="Dealership", identifier=request.dealership_id)

        changed = request.changes.changed_fields()
        if not changed:
            return UpdateDealershipResponse(dealership=dealership)

        saved = self._repository.update(request.changes.apply(dealership))
        logger.info("Dealership updated", extra={"dealership_id": saved.id, "fields": changed})
        return UpdateDealershipResponse(dealership=saved)
