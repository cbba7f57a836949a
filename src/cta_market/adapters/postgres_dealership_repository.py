"""PostgreSQL implementation of DealershipRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cta_market.adapters.postgres_support import parse_uuid
from cta_market.domain.dealership import Dealership
from cta_market.infra.db.models.dealership import DealershipRow
from cta_market.ports.dealership_repository import DealershipRepository


class PostgresDealershipRepository(DealershipRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Dealership]:
        query = select(DealershipRow).order_by(DealershipRow.registration_date, DealershipRow.id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, dealership_id: str) -> Dealership | None:
        uuid = parse_uuid(dealership_id)
        if uuid is None:
            return None
        row = self._session.get(DealershipRow, uuid)
        return self._to_domain(row) if row else None

    def get_by_tax_id(self, tax_id: str) -> Dealership | None:
        query = select(DealershipRow).where(DealershipRow.tax_id == tax_id)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def add(self, dealership: Dealership) -> Dealership:
        row = DealershipRow(
            id=parse_uuid(dealership.id),
            business_name=dealership.business_name,
            tax_id=dealership.tax_id,
            email=dealership.email,
            phone=dealership.phone,
            address=dealership.address,
            city=dealership.city,
            province=dealership.province,
            description=dealership.description,
            active=dealership.active,
            registration_date=dealership.registration_date,
        )
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def update(self, dealership: Dealership) -> Dealership:
        row = self._session.get(DealershipRow, parse_uuid(dealership.id))
        if row is None:
            raise KeyError(dealership.id)
        row.business_name = dealership.business_name
        row.email = dealership.email
        row.phone = dealership.phone
        row.address = dealership.address
        row.city = dealership.city
        row.province = dealership.province
        row.description = dealership.description
        row.active = dealership.active
        self._session.flush()
        return self._to_domain(row)

    def count(self) -> int:
        query = select(func.count()).select_from(DealershipRow)
        return self._session.execute(query).scalar() or 0

    @staticmethod
    def _to_domain(row: DealershipRow) -> Dealership:
        return Dealership(
            id=str(row.id),
            business_name=row.business_name,
            tax_id=row.tax_id,
            email=row.email,
            phone=row.phone,
            address=row.address,
            city=row.city,
            province=row.province,
            description=row.description,
            active=row.active,
            registration_date=row.registration_date,
        )
