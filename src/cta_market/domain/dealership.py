from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime

from cta_market.domain.errors import ConflictError, ValidationError, field_error


@dataclass(frozen=True)
class Dealership:
    id: str
    business_name: str
    tax_id: str
    email: str
    phone: str
    address: str | None
    city: str | None
    province: str | None
    description: str | None
    active: bool
    registration_date: datetime

    @property
    def display_name(self) -> str:
        return self.business_name

    @property
    def full_address(self) -> str:
        parts = [part for part in (self.address, self.city, self.province) if part]
        if not parts:
            return "Address not specified"
        return ", ".join(parts)

    def deactivate(self) -> Dealership:
        if not self.active:
            raise ConflictError("Dealership is already inactive", dealership_id=self.id)
        return replace(self, active=False)

    def activate(self) -> Dealership:
        if self.active:
            raise ConflictError("Dealership is already active", dealership_id=self.id)
        return replace(self, active=True)


@dataclass(frozen=True, slots=True)
class DealershipInput:
    business_name: str
    tax_id: str
    email: str
    phone: str = ""
    address: str | None = None
    city: str | None = None
    province: str | None = None
    description: str | None = None

    def validate(self) -> None:
        errors = []
        if not self.business_name.strip():
            errors.append(field_error("business_name", "Business name is required", "REQUIRED"))
        if not self.tax_id.strip():
            errors.append(field_error("tax_id", "Tax id is required", "REQUIRED"))
        if "@" not in self.email:
            errors.append(field_error("email", "Invalid email format", "INVALID_FORMAT"))
        if errors:
            raise ValidationError(errors=errors)

    def to_dealership(self, dealership_id: str, registration_date: datetime) -> Dealership:
        return Dealership(
            id=dealership_id,
            business_name=self.business_name.strip(),
            tax_id=self.tax_id.strip(),
            email=self.email.strip().lower(),
            phone=self.phone,
            address=self.address,
            city=self.city,
            province=self.province,
            description=self.description,
            active=True,
            registration_date=registration_date,
        )


def _same_text(left: str | None, right: str) -> bool:
    return left is not None and left.strip().lower() == right.strip().lower()


@dataclass(frozen=True, slots=True)
class DealershipFilters:
    """
    Optional dealership search criteria. ``None`` means no constraint.

    Business name and tax id match on a case-insensitive substring; city
    and province must match exactly, ignoring case.
    """

    business_name: str | None = None
    city: str | None = None
    province: str | None = None
    tax_id: str | None = None
    active_only: bool = False

    def matches(self, dealership: Dealership) -> bool:
        if self.active_only and not dealership.active:
            return False
        name = self.business_name
        if name and name.strip().lower() not in dealership.business_name.lower():
            return False
        if self.city and not _same_text(dealership.city, self.city):
            return False
        if self.province and not _same_text(dealership.province, self.province):
            return False
        if self.tax_id and self.tax_id.strip().lower() not in dealership.tax_id.lower():
            return False
        return True


@dataclass(frozen=True, slots=True)
class DealershipUpdate:
    """
    Partial profile edit. ``None`` leaves the field untouched.

    The tax id is fixed. Status changes go through ``activate``/``deactivate``.
    """

    business_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    province: str | None = None
    description: str | None = None

    def changed_fields(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def validate(self) -> None:
        errors = []
        if self.business_name is not None and not self.business_name.strip():
            errors.append(field_error("business_name", "Business name cannot be empty", "REQUIRED"))
        if self.email is not None and "@" not in self.email:
            errors.append(field_error("email", "Invalid email format", "INVALID_FORMAT"))
        if errors:
            raise ValidationError(errors=errors)

    def apply(self, dealership: Dealership) -> Dealership:
        changes = {name: getattr(self, name).strip() for name in self.changed_fields()}
        if "email" in changes:
            changes["email"] = changes["email"].lower()
        return replace(dealership, **changes)
