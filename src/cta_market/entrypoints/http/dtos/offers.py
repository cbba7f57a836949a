from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class OfferResponseDTO(BaseModel):
    id: str
    car_id: str
    dealership_id: str
    price: str
    available: bool
    dealership_notes: str | None = None
    offer_date: datetime


class OfferListResponseDTO(BaseModel):
    offers: list[OfferResponseDTO]
    total: int


class OffersQueryDTO(BaseModel):
    """Query parameters for listing offers."""

    car_id: str | None = Field(
        default=None,
        description="Only offers for this car",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )
    dealership_id: str | None = Field(
        default=None,
        description="Only offers published by this dealership",
        examples=["7c9e6679-7425-40de-944b-e07fc1f90ae7"],
    )
    available_only: bool = Field(
        default=False,
        description="Hide offers that were marked unavailable",
    )


class OfferCreateDTO(BaseModel):
    """Request payload for publishing an offer."""

    car_id: str = Field(examples=["550e8400-e29b-41d4-a716-446655440000"])
    dealership_id: str = Field(examples=["7c9e6679-7425-40de-944b-e07fc1f90ae7"])
    price: str = Field(
        description="Offer price as decimal string",
        examples=["20000.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    dealership_notes: str | None = Field(
        default=None,
        description="Notes shown instead of the car description (max 1000 characters)",
        examples=["Includes 1 year warranty"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "car_id": "550e8400-e29b-41d4-a716-446655440000",
                "dealership_id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "price": "20000.00",
                "dealership_notes": "Includes 1 year warranty",
            }
        }
    )


class OfferUpdateDTO(BaseModel):
    """Partial update. Omitted fields are left untouched."""

    price: str | None = Field(
        default=None,
        description="New price as decimal string",
        examples=["19500.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    dealership_notes: str | None = None
    available: bool | None = None
