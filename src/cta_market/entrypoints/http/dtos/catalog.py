from pydantic import BaseModel, Field

from cta_market.entrypoints.http.dtos.cars import CarResponseDTO
from cta_market.entrypoints.http.dtos.dealerships import DealershipResponseDTO
from cta_market.entrypoints.http.dtos.offers import OfferResponseDTO


class CatalogQueryDTO(BaseModel):
    """
    Query parameters for searching the catalog.

    Numeric and enum filters are accepted as free text. Values that cannot
    be interpreted (``abc``, ``NaN``, empty) are ignored rather than rejected.
    """

    keyword: str | None = Field(
        default=None,
        description="Case-insensitive match on brand, model, color or year",
        examples=["corolla"],
    )
    brand: str | None = Field(
        default=None,
        description="Case-insensitive substring of the brand",
        examples=["Toyota"],
    )
    fuel_type: str | None = Field(
        default=None,
        description="GASOLINE, DIESEL, HYBRID, ELECTRIC or GNC",
        examples=["GASOLINE"],
    )
    transmission: str | None = Field(
        default=None,
        description="MANUAL, AUTOMATIC or SEMI_AUTOMATIC",
        examples=["AUTOMATIC"],
    )
    min_price: str | None = Field(
        default=None,
        description="Minimum available offer price (inclusive)",
        examples=["15000"],
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum available offer price (inclusive)",
        examples=["30000"],
    )
    min_year: str | None = Field(
        default=None, description="Minimum year (inclusive)", examples=["2018"]
    )
    max_year: str | None = Field(
        default=None, description="Maximum year (inclusive)", examples=["2023"]
    )
    sort: str | None = Field(
        default=None,
        description="natural, price_asc, price_desc or newest",
        examples=["price_asc"],
    )


class CatalogEntryDTO(BaseModel):
    car: CarResponseDTO
    offers: list[OfferResponseDTO]
    price_label: str = Field(examples=["from $20,000", "$20,000 - $22,000", "-"])
    min_price: str | None = None
    max_price: str | None = None
    badge: str = Field(examples=["available"])
    summary: str | None = None


class CatalogResponseDTO(BaseModel):
    cars: list[CatalogEntryDTO]
    total: int


class DealershipCatalogResponseDTO(BaseModel):
    dealership: DealershipResponseDTO
    cars: list[CatalogEntryDTO]
    total: int
