"""PostgreSQL implementation of FavoriteRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from cta_market.adapters.postgres_support import parse_uuid
from cta_market.domain.favorite import Favorite
from cta_market.infra.db.models.favorite import FavoriteRow
from cta_market.ports.favorite_repository import FavoriteRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresFavoriteRepository(FavoriteRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Favorite]:
        return self._fetch(self._base_query())

    def list_by_buyer(self, buyer_id: str) -> list[Favorite]:
        uuid = parse_uuid(buyer_id)
        if uuid is None:
            return []
        return self._fetch(self._base_query().where(FavoriteRow.buyer_id == uuid))

    def list_by_car(self, car_id: str) -> list[Favorite]:
        uuid = parse_uuid(car_id)
        if uuid is None:
            return []
        return self._fetch(self._base_query().where(FavoriteRow.car_id == uuid))

    def get_by_id(self, favorite_id: str) -> Favorite | None:
        uuid = parse_uuid(favorite_id)
        if uuid is None:
            return None
        row = self._session.get(FavoriteRow, uuid)
        return self._to_domain(row) if row else None

    def find_by_buyer_and_car(self, buyer_id: str, car_id: str) -> Favorite | None:
        buyer_uuid = parse_uuid(buyer_id)
        car_uuid = parse_uuid(car_id)
        if buyer_uuid is None or car_uuid is None:
            return None
        query = select(FavoriteRow).where(
            FavoriteRow.buyer_id == buyer_uuid,
            FavoriteRow.car_id == car_uuid,
        )
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def add(self, favorite: Favorite) -> Favorite:
        row = FavoriteRow(
            id=parse_uuid(favorite.id),
            buyer_id=parse_uuid(favorite.buyer_id),
            car_id=parse_uuid(favorite.car_id),
            date_added=favorite.date_added,
        )
        self._copy_mutable_fields(favorite, row)
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def update(self, favorite: Favorite) -> Favorite:
        row = self._session.get(FavoriteRow, parse_uuid(favorite.id))
        if row is None:
            raise KeyError(favorite.id)
        self._copy_mutable_fields(favorite, row)
        self._session.flush()
        return self._to_domain(row)

    def delete(self, favorite_id: str) -> None:
        uuid = parse_uuid(favorite_id)
        if uuid is None:
            return
        self._session.execute(delete(FavoriteRow).where(FavoriteRow.id == uuid))

    def _base_query(self) -> Select[tuple[FavoriteRow]]:
        return select(FavoriteRow).order_by(FavoriteRow.date_added, FavoriteRow.id)

    def _fetch(self, query: Select[tuple[FavoriteRow]]) -> list[Favorite]:
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _copy_mutable_fields(favorite: Favorite, row: FavoriteRow) -> None:
        row.rating = favorite.rating
        row.comment = favorite.comment
        row.price_notifications = favorite.price_notifications

    @staticmethod
    def _to_domain(row: FavoriteRow) -> Favorite:
        return Favorite(
            id=str(row.id),
            buyer_id=str(row.buyer_id),
            car_id=str(row.car_id),
            rating=row.rating,
            comment=row.comment,
            price_notifications=row.price_notifications,
            date_added=row.date_added,
        )
