from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime

from cta_market.domain.errors import ValidationError, field_error


@dataclass(frozen=True)
class Buyer:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    dni: str
    address: str | None
    registration_date: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True, slots=True)
class BuyerInput:
    first_name: str
    last_name: str
    email: str
    dni: str
    phone: str = ""
    address: str | None = None

    def validate(self) -> None:
        errors = []
        if not self.first_name.strip():
            errors.append(field_error("first_name", "First name is required", "REQUIRED"))
        if not self.last_name.strip():
            errors.append(field_error("last_name", "Last name is required", "REQUIRED"))
        if "@" not in self.email:
            errors.append(field_error("email", "Invalid email format", "INVALID_FORMAT"))
        if not self.dni.strip():
            errors.append(field_error("dni", "DNI is required", "REQUIRED"))
        if errors:
            raise ValidationError(errors=errors)

    def to_buyer(self, buyer_id: str, registration_date: datetime) -> Buyer:
        return Buyer(
            id=buyer_id,
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            email=self.email.strip().lower(),
            phone=self.phone,
            dni=self.dni.strip(),
            address=self.address,
            registration_date=registration_date,
        )


@dataclass(frozen=True, slots=True)
class BuyerUpdate:
    """Partial contact edit. Names cannot be changed after registration."""

    email: str | None = None
    phone: str | None = None
    dni: str | None = None
    address: str | None = None

    def changed_fields(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def validate(self) -> None:
        errors = []
        if self.email is not None and "@" not in self.email:
            errors.append(field_error("email", "Invalid email format", "INVALID_FORMAT"))
        if self.dni is not None and not self.dni.strip():
            errors.append(field_error("dni", "DNI cannot be empty", "REQUIRED"))
        if self.address is not None and not self.address.strip():
            errors.append(field_error("address", "Address cannot be empty", "REQUIRED"))
        if errors:
            raise ValidationError(errors=errors)

    def apply(self, buyer: Buyer) -> Buyer:
        changes = {name: getattr(self, name).strip() for name in self.changed_fields()}
        if "email" in changes:
            changes["email"] = changes["email"].lower()
        return replace(buyer, **changes)
