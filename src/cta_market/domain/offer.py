from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from cta_market.domain.errors import ValidationError, field_error


MAX_OFFER_PRICE = Decimal("99999999.99")
MAX_NOTES_LENGTH = 1000


@dataclass(frozen=True)
class Offer:
    id: str
    car_id: str
    dealership_id: str
    price: Decimal
    available: bool
    dealership_notes: str | None
    offer_date: datetime

    def mark_unavailable(self) -> Offer:
        """Soft delete. Returns ``self`` when already unavailable."""
        if not self.available:
            return self
        return replace(self, available=False)


def _normalize_notes(notes: str | None) -> str | None:
    if notes is None or not notes.strip():
        return None
    return notes


def _price_errors(price: object) -> list[dict[str, str]]:
    # Guardrail: prevent float leakage past the boundary
    if not isinstance(price, Decimal):
        return [field_error("price", "Price must be a Decimal", "INVALID_DECIMAL")]
    if not price.is_finite():
        return [field_error("price", "Price must be a finite number", "INVALID_DECIMAL")]
    if price < 0:
        return [field_error("price", "Price must be greater than or equal to 0", "OUT_OF_RANGE")]
    if price > MAX_OFFER_PRICE:
        return [field_error("price", f"Price cannot exceed {MAX_OFFER_PRICE}", "OUT_OF_RANGE")]
    if -price.as_tuple().exponent > 2:
        return [field_error("price", "Price cannot have more than 2 decimal places", "INVALID_DECIMAL")]
    return []


def _notes_errors(notes: str | None) -> list[dict[str, str]]:
    if notes is not None and len(notes) > MAX_NOTES_LENGTH:
        return [
            field_error(
                "dealership_notes",
                f"Dealership notes cannot exceed {MAX_NOTES_LENGTH} characters",
                "TOO_LONG",
            )
        ]
    return []


@dataclass(frozen=True, slots=True)
class OfferInput:
    car_id: str
    dealership_id: str
    price: Decimal
    dealership_notes: str | None = None

    def validate(self) -> None:
        errors = _price_errors(self.price) + _notes_errors(self.dealership_notes)
        if errors:
            raise ValidationError(errors=errors)

    def to_offer(self, offer_id: str, offer_date: datetime) -> Offer:
        return Offer(
            id=offer_id,
            car_id=self.car_id,
            dealership_id=self.dealership_id,
            price=self.price,
            available=True,
            dealership_notes=_normalize_notes(self.dealership_notes),
            offer_date=offer_date,
        )


@dataclass(frozen=True, slots=True)
class OfferUpdate:
    """Partial offer edit. ``None`` leaves the field untouched."""

    price: Decimal | None = None
    dealership_notes: str | None = None
    available: bool | None = None

    def validate(self) -> None:
        errors = []
        if self.price is not None:
            errors += _price_errors(self.price)
        errors += _notes_errors(self.dealership_notes)
        if errors:
            raise ValidationError(errors=errors)

    def apply(self, offer: Offer) -> Offer:
        updated = offer
        if self.price is not None:
            updated = replace(updated, price=self.price)
        if self.dealership_notes is not None:
            updated = replace(updated, dealership_notes=_normalize_notes(self.dealership_notes))
        if self.available is not None:
            updated = replace(updated, available=self.available)
        return updated
