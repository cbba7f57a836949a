from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime
from enum import Enum

from cta_market.domain.errors import ValidationError, field_error


MIN_CAR_YEAR = 1900
MAX_DESCRIPTION_LENGTH = 1000


class FuelType(str, Enum):
    GASOLINE = "GASOLINE"
    DIESEL = "DIESEL"
    HYBRID = "HYBRID"
    ELECTRIC = "ELECTRIC"
    GNC = "GNC"


class TransmissionType(str, Enum):
    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"
    SEMI_AUTOMATIC = "SEMI_AUTOMATIC"


@dataclass(frozen=True)
class Car:
    id: str
    brand: str
    model: str
    year: int
    color: str
    fuel_type: FuelType
    transmission: TransmissionType
    description: str | None
    images: tuple[str, ...]
    publication_date: datetime

    @property
    def full_name(self) -> str:
        return f"{self.brand} {self.model} {self.year}"


@dataclass(frozen=True, slots=True)
class CarInput:
    brand: str
    model: str
    year: int
    color: str
    fuel_type: FuelType
    transmission: TransmissionType
    description: str | None = None
    images: tuple[str, ...] = ()

    def validate(self, current_year: int) -> None:
        """
        Validate car fields.

        Args:
            current_year: Calendar year used for the upper year bound (next year allowed)

        Raises:
            ValidationError: With one entry per offending field
        """
        errors = []

        if not self.brand.strip():
            errors.append(field_error("brand", "Brand cannot be empty", "REQUIRED"))
        if not self.model.strip():
            errors.append(field_error("model", "Model cannot be empty", "REQUIRED"))
        if not self.color.strip():
            errors.append(field_error("color", "Color cannot be empty", "REQUIRED"))

        if not MIN_CAR_YEAR <= self.year <= current_year + 1:
            errors.append(
                field_error(
                    "year",
                    f"Year must be between {MIN_CAR_YEAR} and {current_year + 1}",
                    "OUT_OF_RANGE",
                )
            )

        if self.description is not None and len(self.description) > MAX_DESCRIPTION_LENGTH:
            errors.append(
                field_error(
                    "description",
                    f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                    "TOO_LONG",
                )
            )

        if not self.images:
            errors.append(field_error("images", "At least one image URL is required", "REQUIRED"))
        for url in self.images:
            if not url.startswith(("http://", "https://")):
                errors.append(
                    field_error("images", f"Image URL must start with http:// or https://: {url}")
                )

        if errors:
            raise ValidationError(errors=errors)

    def to_car(self, car_id: str, publication_date: datetime) -> Car:
        return Car(
            id=car_id,
            brand=self.brand.strip(),
            model=self.model.strip(),
            year=self.year,
            color=self.color.strip(),
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            description=self.description,
            images=tuple(self.images),
            publication_date=publication_date,
        )

    @classmethod
    def from_car(cls, car: Car) -> CarInput:
        return cls(
            brand=car.brand,
            model=car.model,
            year=car.year,
            color=car.color,
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            description=car.description,
            images=car.images,
        )


@dataclass(frozen=True, slots=True)
class CarUpdate:
    """Partial admin edit. ``None`` leaves the field untouched."""

    brand: str | None = None
    model: str | None = None
    year: int | None = None
    color: str | None = None
    fuel_type: FuelType | None = None
    transmission: TransmissionType | None = None
    description: str | None = None
    images: tuple[str, ...] | None = None

    def changed_fields(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def apply(self, car: Car) -> Car:
        changes = {name: getattr(self, name) for name in self.changed_fields()}
        for name in ("brand", "model", "color"):
            if name in changes:
                changes[name] = changes[name].strip()
        return replace(car, **changes)
