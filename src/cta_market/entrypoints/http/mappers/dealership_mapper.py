from __future__ import annotations

from cta_market.domain.dealership import (
    Dealership,
    DealershipFilters,
    DealershipInput,
    DealershipUpdate,
)
from cta_market.entrypoints.http.dtos.dealerships import (
    DealershipCreateDTO,
    DealershipListResponseDTO,
    DealershipResponseDTO,
    DealershipsQueryDTO,
    DealershipUpdateDTO,
)
from cta_market.entrypoints.http.mappers.parsing import lenient_text


class DealershipMapper:
    @staticmethod
    def to_dealership_input(dto: DealershipCreateDTO) -> DealershipInput:
        return DealershipInput(
            business_name=dto.business_name,
            tax_id=dto.tax_id,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
            city=dto.city,
            province=dto.province,
            description=dto.description,
        )

    @staticmethod
    def to_dealership_update(dto: DealershipUpdateDTO) -> DealershipUpdate:
        return DealershipUpdate(
            business_name=dto.business_name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
            city=dto.city,
            province=dto.province,
            description=dto.description,
        )

    @staticmethod
    def to_filters(dto: DealershipsQueryDTO) -> DealershipFilters:
        """Blank query values are ignored."""
        return DealershipFilters(
            business_name=lenient_text(dto.business_name),
            city=lenient_text(dto.city),
            province=lenient_text(dto.province),
            tax_id=lenient_text(dto.tax_id),
            active_only=dto.active_only,
        )

    @staticmethod
    def to_response(dealership: Dealership) -> DealershipResponseDTO:
        return DealershipResponseDTO(
            id=dealership.id,
            business_name=dealership.business_name,
            tax_id=dealership.tax_id,
            email=dealership.email,
            phone=dealership.phone,
            address=dealership.address,
            city=dealership.city,
            province=dealership.province,
            full_address=dealership.full_address,
            description=dealership.description,
            active=dealership.active,
            registration_date=dealership.registration_date,
        )

    @staticmethod
    def to_list_response(dealerships: list[Dealership]) -> DealershipListResponseDTO:
        return DealershipListResponseDTO(
            dealerships=[DealershipMapper.to_response(d) for d in dealerships],
            total=len(dealerships),
        )
