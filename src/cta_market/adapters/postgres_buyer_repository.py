"""PostgreSQL implementation of BuyerRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cta_market.adapters.postgres_support import parse_uuid
from cta_market.domain.buyer import Buyer
from cta_market.infra.db.models.buyer import BuyerRow
from cta_market.ports.buyer_repository import BuyerRepository


class PostgresBuyerRepository(BuyerRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Buyer]:
        query = select(BuyerRow).order_by(BuyerRow.registration_date, BuyerRow.id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, buyer_id: str) -> Buyer | None:
        uuid = parse_uuid(buyer_id)
        if uuid is None:
            return None
        row = self._session.get(BuyerRow, uuid)
        return self._to_domain(row) if row else None

    def get_by_email(self, email: str) -> Buyer | None:
        query = select(BuyerRow).where(func.lower(BuyerRow.email) == email.lower())
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def add(self, buyer: Buyer) -> Buyer:
        row = BuyerRow(
            id=parse_uuid(buyer.id),
            first_name=buyer.first_name,
            last_name=buyer.last_name,
            email=buyer.email,
            phone=buyer.phone,
            dni=buyer.dni,
            address=buyer.address,
            registration_date=buyer.registration_date,
        )
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def update(self, buyer: Buyer) -> Buyer:
        row = self._session.get(BuyerRow, parse_uuid(buyer.id))
        if row is None:
            raise KeyError(buyer.id)
        # Names and registration date are fixed after sign-up
        row.email = buyer.email
        row.phone = buyer.phone
        row.dni = buyer.dni
        row.address = buyer.address
        self._session.flush()
        return self._to_domain(row)

    def count(self) -> int:
        query = select(func.count()).select_from(BuyerRow)
        return self._session.execute(query).scalar() or 0

    @staticmethod
    def _to_domain(row: BuyerRow) -> Buyer:
        return Buyer(
            id=str(row.id),
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            phone=row.phone,
            dni=row.dni,
            address=row.address,
            registration_date=row.registration_date,
        )
