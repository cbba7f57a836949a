"""PostgreSQL implementation of OfferRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.orm import Session

from cta_market.adapters.postgres_support import parse_uuid
from cta_market.domain.offer import Offer
from cta_market.infra.db.models.offer import OfferRow
from cta_market.ports.offer_repository import OfferRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresOfferRepository(OfferRepository):
    """
    PostgreSQL implementation of OfferRepository.

    Listings are ordered by offer date, then id. Unknown or malformed ids
    yield empty results rather than errors.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Offer]:
        return self._fetch(self._base_query())

    def list_available(self) -> list[Offer]:
        return self._fetch(self._base_query().where(OfferRow.available.is_(True)))

    def list_by_car(self, car_id: str) -> list[Offer]:
        uuid = parse_uuid(car_id)
        if uuid is None:
            return []
        return self._fetch(self._base_query().where(OfferRow.car_id == uuid))

    def list_by_dealership(self, dealership_id: str) -> list[Offer]:
        uuid = parse_uuid(dealership_id)
        if uuid is None:
            return []
        return self._fetch(self._base_query().where(OfferRow.dealership_id == uuid))

    def get_by_id(self, offer_id: str) -> Offer | None:
        uuid = parse_uuid(offer_id)
        if uuid is None:
            return None
        row = self._session.get(OfferRow, uuid)
        return self._to_domain(row) if row else None

    def find_by_car_and_dealership(self, car_id: str, dealership_id: str) -> Offer | None:
        car_uuid = parse_uuid(car_id)
        dealership_uuid = parse_uuid(dealership_id)
        if car_uuid is None or dealership_uuid is None:
            return None
        query = select(OfferRow).where(
            OfferRow.car_id == car_uuid,
            OfferRow.dealership_id == dealership_uuid,
        )
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def add(self, offer: Offer) -> Offer:
        row = OfferRow(
            id=parse_uuid(offer.id),
            car_id=parse_uuid(offer.car_id),
            dealership_id=parse_uuid(offer.dealership_id),
            offer_date=offer.offer_date,
        )
        self._copy_mutable_fields(offer, row)
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def update(self, offer: Offer) -> Offer:
        row = self._session.get(OfferRow, parse_uuid(offer.id))
        if row is None:
            raise KeyError(offer.id)
        self._copy_mutable_fields(offer, row)
        self._session.flush()
        return self._to_domain(row)

    def _base_query(self) -> Select[tuple[OfferRow]]:
        return select(OfferRow).order_by(OfferRow.offer_date, OfferRow.id)

    def _fetch(self, query: Select[tuple[OfferRow]]) -> list[Offer]:
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _copy_mutable_fields(offer: Offer, row: OfferRow) -> None:
        row.price = offer.price
        row.available = offer.available
        row.dealership_notes = offer.dealership_notes

    @staticmethod
    def _to_domain(row: OfferRow) -> Offer:
        return Offer(
            id=str(row.id),
            car_id=str(row.car_id),
            dealership_id=str(row.dealership_id),
            price=row.price,  # Already Decimal from NUMERIC column
            available=row.available,
            dealership_notes=row.dealership_notes,
            offer_date=row.offer_date,
        )
