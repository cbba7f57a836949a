"""Tests for creating, editing and listing cars."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest

from cta_market.adapters.in_memory_car_repository import InMemoryCarRepository
from cta_market.domain.car import Car, CarInput, CarUpdate, FuelType, TransmissionType
from cta_market.domain.errors import NotFoundError, ValidationError
from cta_market.use_cases.create_car import CreateCar, CreateCarRequest
from cta_market.use_cases.list_cars import ListCars
from cta_market.use_cases.update_car import UpdateCar, UpdateCarRequest

NEW_ID = "11111111-1111-1111-1111-111111111111"


def _car_input(**overrides) -> CarInput:
    fields = {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "color": "White",
        "fuel_type": FuelType.GASOLINE,
        "transmission": TransmissionType.AUTOMATIC,
        "images": ("https://cdn.example.com/1.jpg",),
    }
    fields.update(overrides)
    return CarInput(**fields)


@pytest.fixture()
def repository() -> InMemoryCarRepository:
    return InMemoryCarRepository()


# ==============================================================================
# CreateCar
# ==============================================================================


def test_create_car_stores_and_returns_car(
    repository: InMemoryCarRepository, now: datetime
) -> None:
    use_case = CreateCar(repository, clock=lambda: now, id_factory=lambda: NEW_ID)

    result = use_case.execute(CreateCarRequest(car=_car_input(brand="  Toyota ")))

    assert result.car.id == NEW_ID
    assert result.car.brand == "Toyota"
    assert result.car.publication_date == now
    assert repository.get_by_id(NEW_ID) == result.car


def test_create_car_allows_next_model_year(
    repository: InMemoryCarRepository, now: datetime
) -> None:
    use_case = CreateCar(repository, clock=lambda: now)

    result = use_case.execute(CreateCarRequest(car=_car_input(year=now.year + 1)))

    assert result.car.year == now.year + 1


def test_create_car_rejects_invalid_input_without_storing(
    repository: InMemoryCarRepository, now: datetime
) -> None:
    use_case = CreateCar(repository, clock=lambda: now)

    with pytest.raises(ValidationError):
        use_case.execute(CreateCarRequest(car=_car_input(year=now.year + 2)))

    assert repository.list_all() == []


# ==============================================================================
# UpdateCar
# ==============================================================================


def test_update_car_changes_only_given_fields(
    make_car: Callable[..., Car], now: datetime
) -> None:
    car = make_car()
    repository = InMemoryCarRepository([car])

    result = UpdateCar(repository, clock=lambda: now).execute(
        UpdateCarRequest(car_id=car.id, changes=CarUpdate(color="Red"))
    )

    assert result.car.color == "Red"
    assert result.car.brand == car.brand
    assert repository.get_by_id(car.id).color == "Red"


def test_update_car_with_no_changes_returns_car(make_car: Callable[..., Car]) -> None:
    car = make_car()

    result = UpdateCar(InMemoryCarRepository([car])).execute(
        UpdateCarRequest(car_id=car.id, changes=CarUpdate())
    )

    assert result.car == car


def test_update_car_revalidates_merged_car(make_car: Callable[..., Car], now: datetime) -> None:
    car = make_car()
    repository = InMemoryCarRepository([car])

    with pytest.raises(ValidationError) as exc_info:
        UpdateCar(repository, clock=lambda: now).execute(
            UpdateCarRequest(car_id=car.id, changes=CarUpdate(brand="   "))
        )

    assert exc_info.value.errors[0]["field"] == "brand"
    assert repository.get_by_id(car.id) == car


def test_update_unknown_car_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        UpdateCar(InMemoryCarRepository()).execute(
            UpdateCarRequest(car_id=NEW_ID, changes=CarUpdate(color="Red"))
        )


# ==============================================================================
# ListCars
# ==============================================================================


def test_list_cars_in_store_order(make_car: Callable[..., Car]) -> None:
    cars = [make_car(), make_car(), make_car()]

    assert ListCars(InMemoryCarRepository(cars)).execute().cars == cars
