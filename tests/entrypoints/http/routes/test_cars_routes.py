"""
Test suite for the /v1/cars routes.

Verifies role checks on writes, the creation rules surfacing as 422 field
errors, partial edits and the reviews sub-resource.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cta_market.domain.car import Car
from cta_market.domain.favorite import Favorite
from cta_market.entrypoints.http.routes.cars import router

UNKNOWN_ID = "99999999-9999-9999-9999-999999999999"


@pytest.fixture
def client(make_app: Callable[..., FastAPI]) -> TestClient:
    return TestClient(make_app(router), raise_server_exceptions=False)


@pytest.fixture
def admin(as_role: Callable[..., dict[str, str]]) -> dict[str, str]:
    return as_role("ADMINISTRATOR")


def _payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "color": "White",
        "fuel_type": "GASOLINE",
        "transmission": "AUTOMATIC",
        "description": "Single owner",
        "images": ["https://cdn.example.com/corolla.jpg"],
    }
    payload.update(overrides)
    return payload


# ==============================================================================
# POST /v1/cars
# ==============================================================================


def test_admin_creates_car(client: TestClient, admin: dict[str, str], store) -> None:
    response = client.post("/v1/cars", json=_payload(), headers=admin)

    assert response.status_code == 201
    data = response.json()
    assert data["brand"] == "Toyota"
    assert data["images"] == ["https://cdn.example.com/corolla.jpg"]
    assert store.cars.get_by_id(data["id"]) is not None


def test_create_car_without_session(client: TestClient) -> None:
    response = client.post("/v1/cars", json=_payload())

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


@pytest.mark.parametrize("role", ["BUYER", "DEALERSHIP"])
def test_create_car_forbidden_for_other_roles(
    client: TestClient, as_role: Callable[..., dict[str, str]], role: str
) -> None:
    response = client.post("/v1/cars", json=_payload(), headers=as_role(role))

    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"


def test_create_car_reports_field_errors(client: TestClient, admin: dict[str, str]) -> None:
    response = client.post(
        "/v1/cars",
        json=_payload(year=1899, images=["ftp://cdn.example.com/corolla.jpg"]),
        headers=admin,
    )

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert {error["field"] for error in data["errors"]} == {"year", "images"}


def test_create_car_unknown_fuel_type(client: TestClient, admin: dict[str, str]) -> None:
    response = client.post("/v1/cars", json=_payload(fuel_type="STEAM"), headers=admin)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "fuel_type"


# ==============================================================================
# GET /v1/cars
# ==============================================================================


def test_list_cars(client: TestClient, store, make_car: Callable[..., Car]) -> None:
    store.cars.add(make_car(model="Corolla"))
    store.cars.add(make_car(model="Etios"))

    response = client.get("/v1/cars")

    assert response.status_code == 200
    assert response.json()["total"] == 2
    assert [car["model"] for car in response.json()["cars"]] == ["Corolla", "Etios"]


def test_get_car(client: TestClient, store, make_car: Callable[..., Car]) -> None:
    car = store.cars.add(make_car())

    response = client.get(f"/v1/cars/{car.id}")

    assert response.status_code == 200
    assert response.json()["id"] == car.id
    assert response.json()["fuel_type"] == "GASOLINE"


def test_get_car_not_found(client: TestClient) -> None:
    response = client.get(f"/v1/cars/{UNKNOWN_ID}")

    assert response.status_code == 404
    assert response.json() == {
        "detail": f"Car with identifier '{UNKNOWN_ID}' not found",
        "code": "NOT_FOUND",
    }


def test_get_car_with_malformed_id(client: TestClient) -> None:
    response = client.get("/v1/cars/invalid-uuid")

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "car_id", "message": "Must be a valid UUID format", "code": "INVALID_UUID"}
    ]


# ==============================================================================
# PATCH /v1/cars/{car_id}
# ==============================================================================


def test_update_car(
    client: TestClient, admin: dict[str, str], store, make_car: Callable[..., Car]
) -> None:
    car = store.cars.add(make_car())

    response = client.patch(f"/v1/cars/{car.id}", json={"color": "Red"}, headers=admin)

    assert response.status_code == 200
    assert response.json()["color"] == "Red"
    assert response.json()["model"] == car.model


def test_update_car_trims_text(
    client: TestClient, admin: dict[str, str], store, make_car: Callable[..., Car]
) -> None:
    car = store.cars.add(make_car())

    response = client.patch(f"/v1/cars/{car.id}", json={"brand": "  Ford  "}, headers=admin)

    assert response.status_code == 200
    assert response.json()["brand"] == "Ford"
    assert store.cars.get_by_id(car.id).brand == "Ford"


def test_update_car_cannot_break_rules(
    client: TestClient, admin: dict[str, str], store, make_car: Callable[..., Car]
) -> None:
    car = store.cars.add(make_car())

    response = client.patch(f"/v1/cars/{car.id}", json={"images": []}, headers=admin)

    assert response.status_code == 422
    assert store.cars.get_by_id(car.id) == car


# ==============================================================================
# GET /v1/cars/{car_id}/reviews
# ==============================================================================


def test_car_reviews(
    client: TestClient,
    store,
    make_car: Callable[..., Car],
    make_favorite: Callable[..., Favorite],
) -> None:
    car = store.cars.add(make_car())
    store.favorites.add(make_favorite(car_id=car.id, rating=8, comment="Great"))
    store.favorites.add(make_favorite(car_id=car.id, rating=9))
    store.favorites.add(make_favorite(car_id=car.id))

    response = client.get(f"/v1/cars/{car.id}/reviews")

    assert response.status_code == 200
    data = response.json()
    assert data["car_id"] == car.id
    assert data["total"] == 2
    assert data["average_rating"] == "8.50"
