from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from cta_market.infra.db.models.base import Base


class FavoriteRow(Base):
    __tablename__ = "favorite_cars"
    __table_args__ = (
        UniqueConstraint("buyer_id", "car_id", name="uq_favorite_cars_buyer_car"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    buyer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("buyers.id"), nullable=False, index=True
    )
    car_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("cars.id"), nullable=False, index=True
    )
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_notifications: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    date_added: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
