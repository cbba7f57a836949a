from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cta_market.domain.purchase import PaymentMethod, PurchaseStatus


class PurchaseResponseDTO(BaseModel):
    id: str
    offer_id: str
    buyer_id: str
    car_id: str
    dealership_id: str
    final_price: str
    payment_method: PaymentMethod
    status: PurchaseStatus
    observations: str | None = None
    purchase_date: datetime


class PurchaseListResponseDTO(BaseModel):
    purchases: list[PurchaseResponseDTO]
    total: int


class PurchasesQueryDTO(BaseModel):
    buyer_id: str | None = Field(default=None, description="Only purchases by this buyer")
    dealership_id: str | None = Field(
        default=None, description="Only purchases of this dealership's offers"
    )
    status: PurchaseStatus | None = Field(default=None, description="Only purchases in this status")


class PurchaseCreateDTO(BaseModel):
    """Request payload for buying an offer."""

    offer_id: str = Field(examples=["9b2e3c4d-1111-4a5b-8c9d-0e1f2a3b4c5d"])
    buyer_id: str = Field(examples=["3f1a2b3c-2222-4d5e-8f90-a1b2c3d4e5f6"])
    payment_method: PaymentMethod = Field(default=PaymentMethod.CASH)
    final_price: str | None = Field(
        default=None,
        description="Agreed price as decimal string. Defaults to the offer price.",
        examples=["19800.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    observations: str | None = Field(default=None, examples=["Pick-up on Saturday"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "offer_id": "9b2e3c4d-1111-4a5b-8c9d-0e1f2a3b4c5d",
                "buyer_id": "3f1a2b3c-2222-4d5e-8f90-a1b2c3d4e5f6",
                "payment_method": "CASH",
            }
        }
    )


class PurchaseStatusChangeDTO(BaseModel):
    status: PurchaseStatus = Field(examples=[PurchaseStatus.CONFIRMED])
