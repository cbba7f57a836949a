from datetime import datetime

from pydantic import BaseModel, Field


class BuyerResponseDTO(BaseModel):
    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str
    dni: str
    address: str | None = None
    registration_date: datetime


class BuyerListResponseDTO(BaseModel):
    buyers: list[BuyerResponseDTO]
    total: int


class BuyerCreateDTO(BaseModel):
    first_name: str = Field(examples=["Ana"], min_length=1, max_length=100)
    last_name: str = Field(examples=["García"], min_length=1, max_length=100)
    email: str = Field(examples=["ana@example.com"], max_length=254)
    dni: str = Field(description="National id number", examples=["30123456"], max_length=20)
    phone: str = Field(default="", examples=["+54 11 5555-1111"], max_length=50)
    address: str | None = None


class BuyerUpdateDTO(BaseModel):
    """Contact details only. Omitted fields are left untouched."""

    email: str | None = Field(default=None, examples=["ana.garcia@example.com"], max_length=254)
    phone: str | None = Field(default=None, max_length=50)
    dni: str | None = Field(default=None, max_length=20)
    address: str | None = None
