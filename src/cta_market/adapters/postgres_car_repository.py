"""PostgreSQL implementation of CarRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from cta_market.adapters.postgres_support import parse_uuid
from cta_market.domain.car import Car, FuelType, TransmissionType
from cta_market.infra.db.models.car import CarRow
from cta_market.ports.car_repository import CarRepository


class PostgresCarRepository(CarRepository):
    """
    PostgreSQL implementation of CarRepository.

    - Orders by publication date, then id, for a stable store order
    - Converts CarRow (infrastructure) to Car (domain) and back
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Car]:
        query = select(CarRow).order_by(CarRow.publication_date, CarRow.id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, car_id: str) -> Car | None:
        uuid = parse_uuid(car_id)
        if uuid is None:
            return None
        row = self._session.get(CarRow, uuid)
        return self._to_domain(row) if row else None

    def add(self, car: Car) -> Car:
        row = CarRow(id=parse_uuid(car.id))
        self._copy_to_row(car, row)
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def update(self, car: Car) -> Car:
        row = self._session.get(CarRow, parse_uuid(car.id))
        if row is None:
            raise KeyError(car.id)
        self._copy_to_row(car, row)
        self._session.flush()
        return self._to_domain(row)

    @staticmethod
    def _copy_to_row(car: Car, row: CarRow) -> None:
        row.brand = car.brand
        row.model = car.model
        row.year = car.year
        row.color = car.color
        row.fuel_type = car.fuel_type.value
        row.transmission = car.transmission.value
        row.description = car.description
        row.images = list(car.images)
        row.publication_date = car.publication_date

    @staticmethod
    def _to_domain(row: CarRow) -> Car:
        return Car(
            id=str(row.id),  # UUID → str
            brand=row.brand,
            model=row.model,
            year=row.year,
            color=row.color,
            fuel_type=FuelType(row.fuel_type),
            transmission=TransmissionType(row.transmission),
            description=row.description,
            images=tuple(row.images or ()),
            publication_date=row.publication_date,
        )
