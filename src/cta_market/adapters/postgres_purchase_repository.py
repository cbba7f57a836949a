"""PostgreSQL implementation of PurchaseRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.orm import Session

from cta_market.adapters.postgres_support import parse_uuid
from cta_market.domain.purchase import PaymentMethod, Purchase, PurchaseStatus
from cta_market.infra.db.models.purchase import PurchaseRow
from cta_market.ports.purchase_repository import PurchaseRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresPurchaseRepository(PurchaseRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Purchase]:
        return self._fetch(self._base_query())

    def list_by_buyer(self, buyer_id: str) -> list[Purchase]:
        uuid = parse_uuid(buyer_id)
        if uuid is None:
            return []
        return self._fetch(self._base_query().where(PurchaseRow.buyer_id == uuid))

    def list_by_dealership(self, dealership_id: str) -> list[Purchase]:
        uuid = parse_uuid(dealership_id)
        if uuid is None:
            return []
        return self._fetch(self._base_query().where(PurchaseRow.dealership_id == uuid))

    def get_by_id(self, purchase_id: str) -> Purchase | None:
        uuid = parse_uuid(purchase_id)
        if uuid is None:
            return None
        row = self._session.get(PurchaseRow, uuid)
        return self._to_domain(row) if row else None

    def add(self, purchase: Purchase) -> Purchase:
        row = PurchaseRow(
            id=parse_uuid(purchase.id),
            offer_id=parse_uuid(purchase.offer_id),
            buyer_id=parse_uuid(purchase.buyer_id),
            car_id=parse_uuid(purchase.car_id),
            dealership_id=parse_uuid(purchase.dealership_id),
            purchase_date=purchase.purchase_date,
        )
        self._copy_mutable_fields(purchase, row)
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def update(self, purchase: Purchase) -> Purchase:
        row = self._session.get(PurchaseRow, parse_uuid(purchase.id))
        if row is None:
            raise KeyError(purchase.id)
        self._copy_mutable_fields(purchase, row)
        self._session.flush()
        return self._to_domain(row)

    def _base_query(self) -> Select[tuple[PurchaseRow]]:
        return select(PurchaseRow).order_by(PurchaseRow.purchase_date, PurchaseRow.id)

    def _fetch(self, query: Select[tuple[PurchaseRow]]) -> list[Purchase]:
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _copy_mutable_fields(purchase: Purchase, row: PurchaseRow) -> None:
        row.final_price = purchase.final_price
        row.payment_method = purchase.payment_method.value
        row.status = purchase.status.value
        row.observations = purchase.observations

    @staticmethod
    def _to_domain(row: PurchaseRow) -> Purchase:
        return Purchase(
            id=str(row.id),
            offer_id=str(row.offer_id),
            buyer_id=str(row.buyer_id),
            car_id=str(row.car_id),
            dealership_id=str(row.dealership_id),
            final_price=row.final_price,
            payment_method=PaymentMethod(row.payment_method),
            status=PurchaseStatus(row.status),
            observations=row.observations,
            purchase_date=row.purchase_date,
        )
