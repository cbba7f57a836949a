from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from cta_market.domain.errors import InvalidTransitionError, ValidationError, field_error


MAX_FINAL_PRICE = Decimal("99999999999999.99")
MAX_OBSERVATIONS_LENGTH = 1000


class PaymentMethod(str, Enum):
    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    CHECK = "CHECK"


class PurchaseStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


# Only these moves exist; DELIVERED and CANCELLED are terminal.
ALLOWED_TRANSITIONS: dict[PurchaseStatus, frozenset[PurchaseStatus]] = {
    PurchaseStatus.PENDING: frozenset({PurchaseStatus.CONFIRMED, PurchaseStatus.CANCELLED}),
    PurchaseStatus.CONFIRMED: frozenset({PurchaseStatus.DELIVERED, PurchaseStatus.CANCELLED}),
    PurchaseStatus.DELIVERED: frozenset(),
    PurchaseStatus.CANCELLED: frozenset(),
}


def can_transition(current: PurchaseStatus, target: PurchaseStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


@dataclass(frozen=True)
class Purchase:
    id: str
    offer_id: str
    buyer_id: str
    car_id: str
    dealership_id: str
    final_price: Decimal
    payment_method: PaymentMethod
    status: PurchaseStatus
    observations: str | None
    purchase_date: datetime

    def transition_to(self, target: PurchaseStatus) -> Purchase:
        """
        Move to ``target`` status.

        Raises:
            InvalidTransitionError: If the move is not in ALLOWED_TRANSITIONS
        """
        if not can_transition(self.status, target):
            raise InvalidTransitionError(
                current=self.status.value,
                target=target.value,
                purchase_id=self.id,
            )
        return replace(self, status=target)

    @property
    def counts_as_sale(self) -> bool:
        return self.status is not PurchaseStatus.CANCELLED


@dataclass(frozen=True, slots=True)
class PurchaseInput:
    offer_id: str
    buyer_id: str
    payment_method: PaymentMethod = PaymentMethod.CASH
    final_price: Decimal | None = None  # None means "use the offer price"
    observations: str | None = None

    def validate(self) -> None:
        errors = []

        if self.final_price is not None:
            if not isinstance(self.final_price, Decimal) or not self.final_price.is_finite():
                errors.append(
                    field_error("final_price", "Final price must be a decimal", "INVALID_DECIMAL")
                )
            elif self.final_price <= 0:
                errors.append(
                    field_error("final_price", "Final price must be greater than zero", "OUT_OF_RANGE")
                )
            elif self.final_price > MAX_FINAL_PRICE:
                errors.append(
                    field_error(
                        "final_price", "Final price exceeds maximum allowed value", "OUT_OF_RANGE"
                    )
                )
            elif -self.final_price.as_tuple().exponent > 2:
                errors.append(
                    field_error(
                        "final_price",
                        "Final price cannot have more than 2 decimal places",
                        "INVALID_DECIMAL",
                    )
                )

        if self.observations is not None and len(self.observations) > MAX_OBSERVATIONS_LENGTH:
            errors.append(
                field_error(
                    "observations",
                    f"Observations cannot exceed {MAX_OBSERVATIONS_LENGTH} characters",
                    "TOO_LONG",
                )
            )

        if errors:
            raise ValidationError(errors=errors)
