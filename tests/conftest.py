"""Shared builders for domain entities.

Each fixture returns a factory so tests only spell out the fields they care
about.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable
from uuid import uuid4

import pytest

from cta_market.domain.buyer import Buyer
from cta_market.domain.car import Car, FuelType, TransmissionType
from cta_market.domain.dealership import Dealership
from cta_market.domain.favorite import Favorite
from cta_market.domain.offer import Offer
from cta_market.domain.purchase import PaymentMethod, Purchase, PurchaseStatus

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def make_car() -> Callable[..., Car]:
    def _make(**overrides: Any) -> Car:
        fields: dict[str, Any] = {
            "id": str(uuid4()),
            "brand": "Toyota",
            "model": "Corolla",
            "year": 2020,
            "color": "White",
            "fuel_type": FuelType.GASOLINE,
            "transmission": TransmissionType.AUTOMATIC,
            "description": "Single owner",
            "images": ("https://cdn.example.com/cars/1.jpg",),
            "publication_date": NOW,
        }
        fields.update(overrides)
        return Car(**fields)

    return _make


@pytest.fixture()
def make_offer() -> Callable[..., Offer]:
    def _make(car: Car | None = None, **overrides: Any) -> Offer:
        fields: dict[str, Any] = {
            "id": str(uuid4()),
            "car_id": car.id if car else str(uuid4()),
            "dealership_id": str(uuid4()),
            "price": Decimal("20000"),
            "available": True,
            "dealership_notes": None,
            "offer_date": NOW,
        }
        fields.update(overrides)
        return Offer(**fields)

    return _make


@pytest.fixture()
def make_dealership() -> Callable[..., Dealership]:
    def _make(**overrides: Any) -> Dealership:
        fields: dict[str, Any] = {
            "id": str(uuid4()),
            "business_name": "Autos del Sur",
            "tax_id": "30-71234567-8",
            "email": "ventas@autosdelsur.com",
            "phone": "+54 11 5555-0000",
            "address": "Av. Rivadavia 1234",
            "city": "Buenos Aires",
            "province": "CABA",
            "description": None,
            "active": True,
            "registration_date": NOW,
        }
        fields.update(overrides)
        return Dealership(**fields)

    return _make


@pytest.fixture()
def make_buyer() -> Callable[..., Buyer]:
    def _make(**overrides: Any) -> Buyer:
        fields: dict[str, Any] = {
            "id": str(uuid4()),
            "first_name": "Ana",
            "last_name": "García",
            "email": "ana@example.com",
            "phone": "",
            "dni": "30123456",
            "address": None,
            "registration_date": NOW,
        }
        fields.update(overrides)
        return Buyer(**fields)

    return _make


@pytest.fixture()
def make_purchase() -> Callable[..., Purchase]:
    def _make(**overrides: Any) -> Purchase:
        fields: dict[str, Any] = {
            "id": str(uuid4()),
            "offer_id": str(uuid4()),
            "buyer_id": str(uuid4()),
            "car_id": str(uuid4()),
            "dealership_id": str(uuid4()),
            "final_price": Decimal("20000"),
            "payment_method": PaymentMethod.CASH,
            "status": PurchaseStatus.PENDING,
            "observations": None,
            "purchase_date": NOW,
        }
        fields.update(overrides)
        return Purchase(**fields)

    return _make


@pytest.fixture()
def make_favorite() -> Callable[..., Favorite]:
    def _make(**overrides: Any) -> Favorite:
        fields: dict[str, Any] = {
            "id": str(uuid4()),
            "buyer_id": str(uuid4()),
            "car_id": str(uuid4()),
            "rating": None,
            "comment": None,
            "price_notifications": False,
            "date_added": NOW,
        }
        fields.update(overrides)
        return Favorite(**fields)

    return _make
