from __future__ import annotations

from cta_market.domain.car import Car, CarInput, CarUpdate
from cta_market.entrypoints.http.dtos.cars import (
    CarCreateDTO,
    CarListResponseDTO,
    CarResponseDTO,
    CarUpdateDTO,
)


class CarMapper:
    """Maps between REST DTOs and domain models for cars."""

    @staticmethod
    def to_car_input(dto: CarCreateDTO) -> CarInput:
        return CarInput(
            brand=dto.brand,
            model=dto.model,
            year=dto.year,
            color=dto.color,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            description=dto.description,
            images=tuple(dto.images),
        )

    @staticmethod
    def to_car_update(dto: CarUpdateDTO) -> CarUpdate:
        return CarUpdate(
            brand=dto.brand,
            model=dto.model,
            year=dto.year,
            color=dto.color,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            description=dto.description,
            images=tuple(dto.images) if dto.images is not None else None,
        )

    @staticmethod
    def to_response(car: Car) -> CarResponseDTO:
        return CarResponseDTO(
            id=car.id,
            brand=car.brand,
            model=car.model,
            year=car.year,
            color=car.color,
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            description=car.description,
            images=list(car.images),
            publication_date=car.publication_date,
        )

    @staticmethod
    def to_list_response(cars: list[Car]) -> CarListResponseDTO:
        return CarListResponseDTO(
            cars=[CarMapper.to_response(car) for car in cars],
            total=len(cars),
        )
