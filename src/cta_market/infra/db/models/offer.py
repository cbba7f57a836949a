from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Numeric, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from cta_market.infra.db.models.base import Base


class OfferRow(Base):
    __tablename__ = "car_offers"
    __table_args__ = (
        UniqueConstraint("car_id", "dealership_id", name="uq_car_offers_car_dealership"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    car_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("cars.id"), nullable=False, index=True
    )
    dealership_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("dealerships.id"), nullable=False, index=True
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2), nullable=False
    )  # up to 9,999,999,999.99
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    dealership_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    offer_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
