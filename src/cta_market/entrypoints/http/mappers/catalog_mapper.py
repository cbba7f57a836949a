from __future__ import annotations

from cta_market.domain.car import FuelType, TransmissionType
from cta_market.domain.catalog import CatalogFilters
from cta_market.domain.presentation import CatalogEntry, SortOrder
from cta_market.entrypoints.http.dtos.catalog import (
    CatalogEntryDTO,
    CatalogQueryDTO,
    CatalogResponseDTO,
    DealershipCatalogResponseDTO,
)
from cta_market.entrypoints.http.mappers.car_mapper import CarMapper
from cta_market.entrypoints.http.mappers.dealership_mapper import DealershipMapper
from cta_market.entrypoints.http.mappers.offer_mapper import OfferMapper
from cta_market.entrypoints.http.mappers.parsing import (
    lenient_decimal,
    lenient_enum,
    lenient_int,
    lenient_text,
)
from cta_market.use_cases.list_dealership_display_cars import (
    ListDealershipDisplayCarsRequest,
    ListDealershipDisplayCarsResponse,
)
from cta_market.use_cases.search_display_cars import (
    SearchDisplayCarsRequest,
    SearchDisplayCarsResponse,
)


class CatalogMapper:
    """Maps between REST DTOs and domain models for the catalog."""

    @staticmethod
    def to_domain_filters(dto: CatalogQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters.

        Never fails: every value that cannot be parsed becomes ``None``
        and therefore stops constraining the search.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            CatalogFilters: Domain filters with Decimal prices and int years
        """
        return CatalogFilters(
            keyword=lenient_text(dto.keyword),
            brand=lenient_text(dto.brand),
            fuel_type=lenient_enum(FuelType, dto.fuel_type),
            transmission=lenient_enum(TransmissionType, dto.transmission),
            min_price=lenient_decimal(dto.min_price),
            max_price=lenient_decimal(dto.max_price),
            min_year=lenient_int(dto.min_year),
            max_year=lenient_int(dto.max_year),
        )

    @staticmethod
    def to_domain_request(dto: CatalogQueryDTO) -> SearchDisplayCarsRequest:
        return SearchDisplayCarsRequest(
            filters=CatalogMapper.to_domain_filters(dto),
            sort=lenient_enum(SortOrder, dto.sort) or SortOrder.NATURAL,
        )

    @staticmethod
    def to_dealership_request(
        dealership_id: str, dto: CatalogQueryDTO
    ) -> ListDealershipDisplayCarsRequest:
        return ListDealershipDisplayCarsRequest(
            dealership_id=dealership_id,
            filters=CatalogMapper.to_domain_filters(dto),
            sort=lenient_enum(SortOrder, dto.sort) or SortOrder.NATURAL,
        )

    @staticmethod
    def to_entry_response(entry: CatalogEntry) -> CatalogEntryDTO:
        """
        Converts a presented catalog entry to its REST form.

        Decimal bounds become strings; the label keeps its display format.
        """
        price = entry.price
        return CatalogEntryDTO(
            car=CarMapper.to_response(entry.display_car.car),
            offers=[OfferMapper.to_response(offer) for offer in entry.display_car.offers],
            price_label=entry.price_label,
            min_price=str(price.min_price) if price.min_price is not None else None,
            max_price=str(price.max_price) if price.max_price is not None else None,
            badge=entry.badge.value,
            summary=entry.summary,
        )

    @staticmethod
    def to_response(result: SearchDisplayCarsResponse) -> CatalogResponseDTO:
        return CatalogResponseDTO(
            cars=[CatalogMapper.to_entry_response(entry) for entry in result.entries],
            total=len(result.entries),
        )

    @staticmethod
    def to_dealership_response(
        result: ListDealershipDisplayCarsResponse,
    ) -> DealershipCatalogResponseDTO:
        return DealershipCatalogResponseDTO(
            dealership=DealershipMapper.to_response(result.dealership),
            cars=[CatalogMapper.to_entry_response(entry) for entry in result.entries],
            total=len(result.entries),
        )
