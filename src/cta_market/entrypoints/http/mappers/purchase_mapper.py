from __future__ import annotations

from cta_market.domain.purchase import Purchase, PurchaseInput
from cta_market.entrypoints.http.dtos.purchases import (
    PurchaseCreateDTO,
    PurchaseListResponseDTO,
    PurchaseResponseDTO,
    PurchasesQueryDTO,
)
from cta_market.entrypoints.http.mappers.parsing import to_decimal
from cta_market.use_cases.list_purchases import ListPurchasesRequest


class PurchaseMapper:
    @staticmethod
    def to_purchase_input(dto: PurchaseCreateDTO) -> PurchaseInput:
        return PurchaseInput(
            offer_id=dto.offer_id,
            buyer_id=dto.buyer_id,
            payment_method=dto.payment_method,
            final_price=(
                to_decimal(dto.final_price, "final_price") if dto.final_price is not None else None
            ),
            observations=dto.observations,
        )

    @staticmethod
    def to_list_request(dto: PurchasesQueryDTO) -> ListPurchasesRequest:
        return ListPurchasesRequest(
            buyer_id=dto.buyer_id,
            dealership_id=dto.dealership_id,
            status=dto.status,
        )

    @staticmethod
    def to_response(purchase: Purchase) -> PurchaseResponseDTO:
        return PurchaseResponseDTO(
            id=purchase.id,
            offer_id=purchase.offer_id,
            buyer_id=purchase.buyer_id,
            car_id=purchase.car_id,
            dealership_id=purchase.dealership_id,
            final_price=str(purchase.final_price),
            payment_method=purchase.payment_method,
            status=purchase.status,
            observations=purchase.observations,
            purchase_date=purchase.purchase_date,
        )

    @staticmethod
    def to_list_response(purchases: list[Purchase]) -> PurchaseListResponseDTO:
        return PurchaseListResponseDTO(
            purchases=[PurchaseMapper.to_response(p) for p in purchases],
            total=len(purchases),
        )
