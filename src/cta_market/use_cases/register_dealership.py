from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from cta_market.domain.dealership import Dealership, DealershipInput
from cta_market.domain.errors import ConflictError
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.use_cases.common import new_id, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisterDealershipRequest:
    dealership: DealershipInput


@dataclass(frozen=True, slots=True)
class RegisterDealershipResponse:
    dealership: Dealership


class RegisterDealership:
    """Register a dealership. Tax ids are unique; new dealerships start active."""

    def __init__(
        self,
        dealership_repository: DealershipRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._repository = dealership_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: RegisterDealershipRequest) -> RegisterDealershipResponse:
        data = request.dealership
        data.validate()

        if self._repository.get_by_tax_id(data.tax_id.strip()) is not None:
            raise ConflictError("A dealership with this tax id already exists", tax_id=data.tax_id)

        dealership = self._repository.add(data.to_dealership(self._id_factory(), self._clock()))
        logger.info(
            "Dealership registered",
            extra={"dealership_id": dealership.id, "business_name": dealership.business_name},
        )
        return RegisterDealershipResponse(dealership=dealership)
