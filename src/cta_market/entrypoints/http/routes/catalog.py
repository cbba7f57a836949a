from fastapi import APIRouter, Depends

from cta_market.entrypoints.http.dependencies import (
    get_display_car_by_id_use_case,
    get_list_dealership_display_cars_use_case,
    get_search_display_cars_use_case,
)
from cta_market.entrypoints.http.dtos.catalog import (
    CatalogEntryDTO,
    CatalogQueryDTO,
    CatalogResponseDTO,
    DealershipCatalogResponseDTO,
)
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from cta_market.use_cases.get_display_car_by_id import GetDisplayCarById, GetDisplayCarByIdRequest
from cta_market.use_cases.list_dealership_display_cars import ListDealershipDisplayCars
from cta_market.use_cases.search_display_cars import SearchDisplayCars


router = APIRouter(tags=["Catalog"])


@router.get(
    "/catalog",
    response_model=CatalogResponseDTO,
    summary="Fetch or search the catalog",
    description="""
    Every car grouped with its offers, ready for display.

    Without filters, every car is listed, including cars with no offers
    (badge `no current offers for this car`) and cars whose offers were all
    withdrawn (badge `offers no longer available`).

    ## Filters
    - All filters use AND semantics
    - keyword: brand, model, color or year (case-insensitive substring)
    - brand: case-insensitive substring
    - fuel_type / transmission: exact match
    - min_price / max_price: inclusive, on *available* offers only; cars
      with no matching offer are dropped and each car keeps only the
      matching offers
    - Unparseable values are ignored, never rejected

    ## Price label
    - `from $20,000` when all available offers share one price
    - `$20,000 - $22,000` for differing prices
    - `-` when there is no available offer

    ## Example
    ```
    GET /v1/catalog?brand=toyota&min_price=20000&sort=price_asc
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "cars": [
                            {
                                "car": {
                                    "id": "550e8400-e29b-41d4-a716-446655440000",
                                    "brand": "Toyota",
                                    "model": "Corolla",
                                    "year": 2020,
                                    "color": "White",
                                    "fuel_type": "GASOLINE",
                                    "transmission": "AUTOMATIC",
                                    "description": None,
                                    "images": ["https://cdn.example.com/corolla.jpg"],
                                    "publication_date": "2025-03-01T12:00:00Z",
                                },
                                "offers": [],
                                "price_label": "from $20,000",
                                "min_price": "20000.00",
                                "max_price": "20000.00",
                                "badge": "available",
                                "summary": "Includes 1 year warranty",
                            }
                        ],
                        "total": 1,
                    }
                }
            },
        },
        **error_responses(422),
    },
)
def search_catalog(
    query: CatalogQueryDTO = Depends(),
    use_case: SearchDisplayCars = Depends(get_search_display_cars_use_case),
) -> CatalogResponseDTO:
    """Search catalog endpoint following parse → execute → map → return pattern."""
    request = CatalogMapper.to_domain_request(query)
    result = use_case.execute(request)
    return CatalogMapper.to_response(result)


@router.get(
    "/catalog/dealerships/{dealership_id}",
    response_model=DealershipCatalogResponseDTO,
    summary="Catalog of one dealership",
    description="""
    Only the cars this dealership offers, each with only this dealership's
    offers. Accepts the same filters and sort as `/v1/catalog`.
    """,
    responses=error_responses(404, 422),
)
def get_dealership_catalog(
    dealership_id: str,
    query: CatalogQueryDTO = Depends(),
    use_case: ListDealershipDisplayCars = Depends(get_list_dealership_display_cars_use_case),
) -> DealershipCatalogResponseDTO:
    request = CatalogMapper.to_dealership_request(dealership_id, query)
    result = use_case.execute(request)
    return CatalogMapper.to_dealership_response(result)


@router.get(
    "/catalog/{car_id}",
    response_model=CatalogEntryDTO,
    summary="One display car",
    description="A single car with all of its offers, available or not.",
    responses=error_responses(404, 422),
)
def get_catalog_car(
    car_id: str,
    use_case: GetDisplayCarById = Depends(get_display_car_by_id_use_case),
) -> CatalogEntryDTO:
    result = use_case.execute(GetDisplayCarByIdRequest(car_id=car_id))
    return CatalogMapper.to_entry_response(result.entry)
