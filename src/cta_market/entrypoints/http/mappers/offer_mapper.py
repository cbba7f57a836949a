from __future__ import annotations

from cta_market.domain.offer import Offer, OfferInput, OfferUpdate
from cta_market.entrypoints.http.dtos.offers import (
    OfferCreateDTO,
    OfferListResponseDTO,
    OfferResponseDTO,
    OffersQueryDTO,
    OfferUpdateDTO,
)
from cta_market.entrypoints.http.mappers.parsing import to_decimal
from cta_market.use_cases.list_offers import ListOffersRequest


class OfferMapper:
    """Maps between REST DTOs and domain models for offers."""

    @staticmethod
    def to_offer_input(dto: OfferCreateDTO) -> OfferInput:
        """
        Converts request DTO to domain OfferInput.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If the price cannot be converted to a Decimal
        """
        return OfferInput(
            car_id=dto.car_id,
            dealership_id=dto.dealership_id,
            price=to_decimal(dto.price, "price"),
            dealership_notes=dto.dealership_notes,
        )

    @staticmethod
    def to_offer_update(dto: OfferUpdateDTO) -> OfferUpdate:
        return OfferUpdate(
            price=to_decimal(dto.price, "price") if dto.price is not None else None,
            dealership_notes=dto.dealership_notes,
            available=dto.available,
        )

    @staticmethod
    def to_list_request(dto: OffersQueryDTO) -> ListOffersRequest:
        return ListOffersRequest(
            car_id=dto.car_id,
            dealership_id=dto.dealership_id,
            available_only=dto.available_only,
        )

    @staticmethod
    def to_response(offer: Offer) -> OfferResponseDTO:
        return OfferResponseDTO(
            id=offer.id,
            car_id=offer.car_id,
            dealership_id=offer.dealership_id,
            price=str(offer.price),  # Decimal → str at boundary
            available=offer.available,
            dealership_notes=offer.dealership_notes,
            offer_date=offer.offer_date,
        )

    @staticmethod
    def to_list_response(offers: list[Offer]) -> OfferListResponseDTO:
        return OfferListResponseDTO(
            offers=[OfferMapper.to_response(offer) for offer in offers],
            total=len(offers),
        )
