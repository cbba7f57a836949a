from fastapi import APIRouter, Depends, status

from cta_market.entrypoints.http.dependencies import (
    get_car_by_id_use_case,
    get_car_reviews_use_case,
    get_create_car_use_case,
    get_list_cars_use_case,
    get_update_car_use_case,
)
from cta_market.entrypoints.http.dtos.cars import (
    CarCreateDTO,
    CarListResponseDTO,
    CarResponseDTO,
    CarUpdateDTO,
)
from cta_market.entrypoints.http.dtos.favorites import CarReviewsResponseDTO
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.car_mapper import CarMapper
from cta_market.entrypoints.http.mappers.favorite_mapper import FavoriteMapper
from cta_market.entrypoints.http.session import require_admin
from cta_market.use_cases.create_car import CreateCar, CreateCarRequest
from cta_market.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from cta_market.use_cases.get_car_reviews import GetCarReviews, GetCarReviewsRequest
from cta_market.use_cases.list_cars import ListCars
from cta_market.use_cases.update_car import UpdateCar, UpdateCarRequest


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CarListResponseDTO,
    summary="List cars",
    description="Every car in publication order, without offers.",
)
def list_cars(use_case: ListCars = Depends(get_list_cars_use_case)) -> CarListResponseDTO:
    result = use_case.execute()
    return CarMapper.to_list_response(result.cars)


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a car",
    description="""
    Add a car to the catalog. Administrators only.

    ## Rules
    - brand, model and color are required
    - year between 1900 and next calendar year
    - description up to 1000 characters
    - at least one image; every URL must start with http:// or https://
    """,
    responses=error_responses(401, 403, 422),
    dependencies=[Depends(require_admin)],
)
def create_car(
    payload: CarCreateDTO,
    use_case: CreateCar = Depends(get_create_car_use_case),
) -> CarResponseDTO:
    result = use_case.execute(CreateCarRequest(car=CarMapper.to_car_input(payload)))
    return CarMapper.to_response(result.car)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get car by ID",
    responses=error_responses(404, 422),
)
def get_car(
    car_id: str,
    use_case: GetCarById = Depends(get_car_by_id_use_case),
) -> CarResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id))
    return CarMapper.to_response(result.car)


@router.patch(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Edit a car",
    description="Partial update, re-validated with the creation rules. Administrators only.",
    responses=error_responses(401, 403, 404, 422),
    dependencies=[Depends(require_admin)],
)
def update_car(
    car_id: str,
    payload: CarUpdateDTO,
    use_case: UpdateCar = Depends(get_update_car_use_case),
) -> CarResponseDTO:
    request = UpdateCarRequest(car_id=car_id, changes=CarMapper.to_car_update(payload))
    result = use_case.execute(request)
    return CarMapper.to_response(result.car)


@router.get(
    "/cars/{car_id}/reviews",
    response_model=CarReviewsResponseDTO,
    summary="Reviews of a car",
    description="Favorites carrying a rating or comment, with the average rating.",
    responses=error_responses(404, 422),
)
def get_car_reviews(
    car_id: str,
    use_case: GetCarReviews = Depends(get_car_reviews_use_case),
) -> CarReviewsResponseDTO:
    result = use_case.execute(GetCarReviewsRequest(car_id=car_id))
    return FavoriteMapper.to_reviews_response(car_id, result)
