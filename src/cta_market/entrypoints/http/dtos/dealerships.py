from datetime import datetime

from pydantic import BaseModel, Field


class DealershipResponseDTO(BaseModel):
    id: str
    business_name: str
    tax_id: str
    email: str
    phone: str
    address: str | None = None
    city: str | None = None
    province: str | None = None
    full_address: str
    description: str | None = None
    active: bool
    registration_date: datetime


class DealershipListResponseDTO(BaseModel):
    dealerships: list[DealershipResponseDTO]
    total: int


class DealershipCreateDTO(BaseModel):
    business_name: str = Field(examples=["Autos del Sur"], min_length=1, max_length=200)
    tax_id: str = Field(description="CUIT", examples=["30-71234567-8"], min_length=1, max_length=20)
    email: str = Field(examples=["ventas@autosdelsur.com"], max_length=254)
    phone: str = Field(default="", examples=["+54 11 5555-0000"], max_length=50)
    address: str | None = Field(default=None, examples=["Av. Rivadavia 1234"])
    city: str | None = Field(default=None, examples=["Buenos Aires"])
    province: str | None = Field(default=None, examples=["CABA"])
    description: str | None = None


class DealershipUpdateDTO(BaseModel):
    """Partial update. Omitted fields are left untouched. Tax id and status cannot change here."""

    business_name: str | None = Field(default=None, examples=["Autos del Sur SRL"], max_length=200)
    email: str | None = Field(default=None, examples=["contacto@autosdelsur.com"], max_length=254)
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None
    city: str | None = None
    province: str | None = None


class DealershipsQueryDTO(BaseModel):
    business_name: str | None = Field(
        default=None, description="Case-insensitive substring of the business name"
    )
    city: str | None = Field(default=None, description="Exact city, ignoring case")
    province: str | None = Field(default=None, description="Exact province, ignoring case")
    tax_id: str | None = Field(default=None, description="Substring of the tax id (CUIT)")
    active_only: bool = Field(default=False, description="Hide deactivated dealerships")
