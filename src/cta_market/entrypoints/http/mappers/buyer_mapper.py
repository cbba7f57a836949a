from __future__ import annotations

from cta_market.domain.buyer import Buyer, BuyerInput, BuyerUpdate
from cta_market.entrypoints.http.dtos.buyers import (
    BuyerCreateDTO,
    BuyerListResponseDTO,
    BuyerResponseDTO,
    BuyerUpdateDTO,
)


class BuyerMapper:
    @staticmethod
    def to_buyer_input(dto: BuyerCreateDTO) -> BuyerInput:
        return BuyerInput(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            dni=dto.dni,
            phone=dto.phone,
            address=dto.address,
        )

    @staticmethod
    def to_buyer_update(dto: BuyerUpdateDTO) -> BuyerUpdate:
        return BuyerUpdate(email=dto.email, phone=dto.phone, dni=dto.dni, address=dto.address)

    @staticmethod
    def to_response(buyer: Buyer) -> BuyerResponseDTO:
        return BuyerResponseDTO(
            id=buyer.id,
            first_name=buyer.first_name,
            last_name=buyer.last_name,
            full_name=buyer.full_name,
            email=buyer.email,
            phone=buyer.phone,
            dni=buyer.dni,
            address=buyer.address,
            registration_date=buyer.registration_date,
        )

    @staticmethod
    def to_list_response(buyers: list[Buyer]) -> BuyerListResponseDTO:
        return BuyerListResponseDTO(
            buyers=[BuyerMapper.to_response(buyer) for buyer in buyers],
            total=len(buyers),
        )
