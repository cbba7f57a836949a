"""Tests for Car, CarInput and CarUpdate."""

from __future__ import annotations

from typing import Callable

import pytest

from cta_market.domain.car import Car, CarInput, CarUpdate, FuelType, TransmissionType
from cta_market.domain.errors import ValidationError


CURRENT_YEAR = 2026


def _input(**overrides) -> CarInput:
    fields = {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "color": "White",
        "fuel_type": FuelType.GASOLINE,
        "transmission": TransmissionType.MANUAL,
        "description": None,
        "images": ("https://cdn.example.com/a.jpg",),
    }
    fields.update(overrides)
    return CarInput(**fields)


def _fields(exc: ValidationError) -> list[str]:
    return [error["field"] for error in exc.errors or []]


# ==============================================================================
# CarInput.validate
# ==============================================================================


def test_valid_input_passes() -> None:
    _input().validate(current_year=CURRENT_YEAR)


@pytest.mark.parametrize("year", [1900, CURRENT_YEAR, CURRENT_YEAR + 1])
def test_year_bounds_are_inclusive(year: int) -> None:
    _input(year=year).validate(current_year=CURRENT_YEAR)


@pytest.mark.parametrize("year", [1899, CURRENT_YEAR + 2])
def test_year_out_of_range_is_rejected(year: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        _input(year=year).validate(current_year=CURRENT_YEAR)

    assert _fields(exc_info.value) == ["year"]
    assert exc_info.value.errors[0]["code"] == "OUT_OF_RANGE"


def test_blank_text_fields_are_rejected_together() -> None:
    with pytest.raises(ValidationError) as exc_info:
        _input(brand=" ", model="", color="  ").validate(current_year=CURRENT_YEAR)

    assert _fields(exc_info.value) == ["brand", "model", "color"]


def test_description_limit() -> None:
    _input(description="x" * 1000).validate(current_year=CURRENT_YEAR)

    with pytest.raises(ValidationError) as exc_info:
        _input(description="x" * 1001).validate(current_year=CURRENT_YEAR)

    assert _fields(exc_info.value) == ["description"]


def test_at_least_one_image_is_required() -> None:
    with pytest.raises(ValidationError) as exc_info:
        _input(images=()).validate(current_year=CURRENT_YEAR)

    assert exc_info.value.errors[0]["code"] == "REQUIRED"


def test_image_urls_must_be_http() -> None:
    with pytest.raises(ValidationError) as exc_info:
        _input(images=("https://ok.example.com/a.jpg", "ftp://bad/a.jpg")).validate(
            current_year=CURRENT_YEAR
        )

    assert _fields(exc_info.value) == ["images"]
    assert "ftp://bad/a.jpg" in exc_info.value.errors[0]["message"]


# ==============================================================================
# Conversions
# ==============================================================================


def test_to_car_strips_text_and_sets_identity(now) -> None:
    car = _input(brand=" Toyota ", model="Corolla ").to_car("car-1", now)

    assert car.id == "car-1"
    assert car.brand == "Toyota"
    assert car.model == "Corolla"
    assert car.publication_date == now
    assert car.full_name == "Toyota Corolla 2020"


def test_from_car_round_trips_editable_fields(make_car: Callable[..., Car]) -> None:
    car = make_car()

    data = CarInput.from_car(car)

    assert data.brand == car.brand
    assert data.images == car.images


# ==============================================================================
# CarUpdate
# ==============================================================================


def test_update_changes_only_given_fields(make_car: Callable[..., Car]) -> None:
    car = make_car(color="White", year=2020)

    updated = CarUpdate(color="Black").apply(car)

    assert updated.color == "Black"
    assert updated.year == 2020
    assert updated.id == car.id
    assert car.color == "White"


def test_changed_fields_lists_non_null_fields() -> None:
    update = CarUpdate(year=2021, images=("https://a/b.jpg",))

    assert update.changed_fields() == ["year", "images"]
    assert CarUpdate().changed_fields() == []


def test_update_strips_text_fields(make_car: Callable[..., Car]) -> None:
    car = make_car(brand="Toyota", color="White")

    updated = CarUpdate(brand="  Ford  ", model=" Focus", color="Red ").apply(car)

    assert (updated.brand, updated.model, updated.color) == ("Ford", "Focus", "Red")
