"""
Route test wiring.

Routers are mounted on a bare FastAPI app with the production exception
handlers. Repository factories are overridden with in-memory repositories
so requests run through the real use cases and mappers without a database.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from cta_market.adapters.in_memory_buyer_repository import InMemoryBuyerRepository
from cta_market.adapters.in_memory_car_repository import InMemoryCarRepository
from cta_market.adapters.in_memory_dealership_repository import InMemoryDealershipRepository
from cta_market.adapters.in_memory_favorite_repository import InMemoryFavoriteRepository
from cta_market.adapters.in_memory_offer_repository import InMemoryOfferRepository
from cta_market.adapters.in_memory_purchase_repository import InMemoryPurchaseRepository
from cta_market.entrypoints.http.dependencies import (
    get_buyer_repository,
    get_car_repository,
    get_dealership_repository,
    get_favorite_repository,
    get_offer_repository,
    get_purchase_repository,
)
from cta_market.entrypoints.http.exception_handlers import register_exception_handlers


@dataclass
class Store:
    cars: InMemoryCarRepository = field(default_factory=InMemoryCarRepository)
    offers: InMemoryOfferRepository = field(default_factory=InMemoryOfferRepository)
    dealerships: InMemoryDealershipRepository = field(
        default_factory=InMemoryDealershipRepository
    )
    buyers: InMemoryBuyerRepository = field(default_factory=InMemoryBuyerRepository)
    purchases: InMemoryPurchaseRepository = field(default_factory=InMemoryPurchaseRepository)
    favorites: InMemoryFavoriteRepository = field(default_factory=InMemoryFavoriteRepository)


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def make_app(store: Store) -> Callable[[APIRouter], FastAPI]:
    """Build a test app for one router, backed by ``store``."""

    def _make(router: APIRouter) -> FastAPI:
        app = FastAPI()
        register_exception_handlers(app)
        app.include_router(router, prefix="/v1")
        app.dependency_overrides[get_car_repository] = lambda: store.cars
        app.dependency_overrides[get_offer_repository] = lambda: store.offers
        app.dependency_overrides[get_dealership_repository] = lambda: store.dealerships
        app.dependency_overrides[get_buyer_repository] = lambda: store.buyers
        app.dependency_overrides[get_purchase_repository] = lambda: store.purchases
        app.dependency_overrides[get_favorite_repository] = lambda: store.favorites
        return app

    return _make


@pytest.fixture
def as_role() -> Callable[[str], dict[str, str]]:
    """Session headers for a caller with the given role."""

    def _headers(role: str, user_id: str = "user-1") -> dict[str, str]:
        return {"X-User-Id": user_id, "X-User-Role": role}

    return _headers
