from fastapi import APIRouter, Depends, status

from cta_market.entrypoints.http.dependencies import (
    get_create_offer_use_case,
    get_list_offers_use_case,
    get_mark_offer_unavailable_use_case,
    get_offer_by_id_use_case,
    get_update_offer_use_case,
)
from cta_market.entrypoints.http.dtos.offers import (
    OfferCreateDTO,
    OfferListResponseDTO,
    OfferResponseDTO,
    OffersQueryDTO,
    OfferUpdateDTO,
)
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.offer_mapper import OfferMapper
from cta_market.entrypoints.http.session import require_dealership
from cta_market.use_cases.create_offer import CreateOffer, CreateOfferRequest
from cta_market.use_cases.get_offer_by_id import GetOfferById, GetOfferByIdRequest
from cta_market.use_cases.list_offers import ListOffers, ListOffersRequest
from cta_market.use_cases.mark_offer_unavailable import (
    MarkOfferUnavailable,
    MarkOfferUnavailableRequest,
)
from cta_market.use_cases.update_offer import UpdateOffer, UpdateOfferRequest


router = APIRouter(tags=["Offers"])


@router.get(
    "/offers",
    response_model=OfferListResponseDTO,
    summary="List offers",
    description="""
    All offers in publication order, optionally narrowed.

    ## Example
    ```
    GET /v1/offers?dealership_id=7c9e6679-7425-40de-944b-e07fc1f90ae7&available_only=true
    ```
    """,
)
def list_offers(
    query: OffersQueryDTO = Depends(),
    use_case: ListOffers = Depends(get_list_offers_use_case),
) -> OfferListResponseDTO:
    result = use_case.execute(OfferMapper.to_list_request(query))
    return OfferMapper.to_list_response(result.offers)


@router.get(
    "/offers/available",
    response_model=OfferListResponseDTO,
    summary="List available offers",
)
def list_available_offers(
    use_case: ListOffers = Depends(get_list_offers_use_case),
) -> OfferListResponseDTO:
    result = use_case.execute(ListOffersRequest(available_only=True))
    return OfferMapper.to_list_response(result.offers)


@router.post(
    "/offers",
    response_model=OfferResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Publish an offer",
    description="""
    Publish a dealership's price for a car. Dealerships and administrators.

    ## Rules
    - price is a decimal string, 0 to 99,999,999.99
    - the car must exist; the dealership must exist and be active
    - one offer per dealership and car (409 otherwise)
    """,
    responses=error_responses(401, 403, 404, 409, 422),
    dependencies=[Depends(require_dealership)],
)
def create_offer(
    payload: OfferCreateDTO,
    use_case: CreateOffer = Depends(get_create_offer_use_case),
) -> OfferResponseDTO:
    result = use_case.execute(CreateOfferRequest(offer=OfferMapper.to_offer_input(payload)))
    return OfferMapper.to_response(result.offer)


@router.get(
    "/offers/{offer_id}",
    response_model=OfferResponseDTO,
    summary="Get offer by ID",
    responses=error_responses(404, 422),
)
def get_offer(
    offer_id: str,
    use_case: GetOfferById = Depends(get_offer_by_id_use_case),
) -> OfferResponseDTO:
    result = use_case.execute(GetOfferByIdRequest(offer_id=offer_id))
    return OfferMapper.to_response(result.offer)


@router.patch(
    "/offers/{offer_id}",
    response_model=OfferResponseDTO,
    summary="Edit an offer",
    responses=error_responses(401, 403, 404, 422),
    dependencies=[Depends(require_dealership)],
)
def update_offer(
    offer_id: str,
    payload: OfferUpdateDTO,
    use_case: UpdateOffer = Depends(get_update_offer_use_case),
) -> OfferResponseDTO:
    request = UpdateOfferRequest(offer_id=offer_id, changes=OfferMapper.to_offer_update(payload))
    result = use_case.execute(request)
    return OfferMapper.to_response(result.offer)


@router.patch(
    "/offers/{offer_id}/unavailable",
    response_model=OfferResponseDTO,
    summary="Withdraw an offer",
    description="Soft delete. Calling it on an already withdrawn offer is a no-op.",
    responses=error_responses(401, 403, 404, 422),
    dependencies=[Depends(require_dealership)],
)
def mark_offer_unavailable(
    offer_id: str,
    use_case: MarkOfferUnavailable = Depends(get_mark_offer_unavailable_use_case),
) -> OfferResponseDTO:
    result = use_case.execute(MarkOfferUnavailableRequest(offer_id=offer_id))
    return OfferMapper.to_response(result.offer)
