from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from cta_market.domain.buyer import Buyer, BuyerInput
from cta_market.domain.errors import ConflictError
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.use_cases.common import new_id, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisterBuyerRequest:
    buyer: BuyerInput


@dataclass(frozen=True, slots=True)
class RegisterBuyerResponse:
    buyer: Buyer


class RegisterBuyer:
    """Register a buyer. Emails are unique, compared case-insensitively."""

    def __init__(
        self,
        buyer_repository: BuyerRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._repository = buyer_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: RegisterBuyerRequest) -> RegisterBuyerResponse:
        data = request.buyer
        data.validate()

        if self._repository.get_by_email(data.email.strip().lower()) is not None:
            raise ConflictError("A buyer with this email already exists", email=data.email)

        buyer = self._repository.add(data.to_buyer(self._id_factory(), self._clock()))
        logger.info("Buyer registered", extra={"buyer_id": buyer.id})
        return RegisterBuyerResponse(buyer=buyer)
