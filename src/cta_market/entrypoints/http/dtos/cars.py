from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cta_market.domain.car import FuelType, TransmissionType


class CarResponseDTO(BaseModel):
    id: str
    brand: str
    model: str
    year: int
    color: str
    fuel_type: FuelType
    transmission: TransmissionType
    description: str | None = None
    images: list[str]
    publication_date: datetime


class CarListResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    total: int


class CarCreateDTO(BaseModel):
    """Request payload for publishing a car (administrators only)."""

    brand: str = Field(description="Car brand", examples=["Toyota"], min_length=1, max_length=100)
    model: str = Field(description="Car model", examples=["Corolla"], min_length=1, max_length=100)
    year: int = Field(description="Model year (1900 to next year)", examples=[2020])
    color: str = Field(description="Exterior color", examples=["White"], min_length=1, max_length=50)
    fuel_type: FuelType = Field(description="Fuel type", examples=[FuelType.GASOLINE])
    transmission: TransmissionType = Field(
        description="Transmission type", examples=[TransmissionType.AUTOMATIC]
    )
    description: str | None = Field(
        default=None,
        description="Free-text description (max 1000 characters)",
        examples=["Single owner, full service history"],
    )
    images: list[str] = Field(
        description="Image URLs (http/https), at least one",
        examples=[["https://cdn.example.com/cars/corolla-front.jpg"]],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "brand": "Toyota",
                "model": "Corolla",
                "year": 2020,
                "color": "White",
                "fuel_type": "GASOLINE",
                "transmission": "AUTOMATIC",
                "description": "Single owner, full service history",
                "images": ["https://cdn.example.com/cars/corolla-front.jpg"],
            }
        }
    )


class CarUpdateDTO(BaseModel):
    """Partial update. Omitted fields are left untouched."""

    brand: str | None = Field(default=None, examples=["Toyota"])
    model: str | None = Field(default=None, examples=["Corolla"])
    year: int | None = Field(default=None, examples=[2021])
    color: str | None = Field(default=None, examples=["Black"])
    fuel_type: FuelType | None = None
    transmission: TransmissionType | None = None
    description: str | None = None
    images: list[str] | None = None
