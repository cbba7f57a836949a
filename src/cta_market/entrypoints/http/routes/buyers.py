from fastapi import APIRouter, Depends, status

from cta_market.entrypoints.http.dependencies import (
    get_buyer_by_id_use_case,
    get_list_buyers_use_case,
    get_register_buyer_use_case,
    get_update_buyer_use_case,
)
from cta_market.entrypoints.http.dtos.buyers import (
    BuyerCreateDTO,
    BuyerListResponseDTO,
    BuyerResponseDTO,
    BuyerUpdateDTO,
)
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.buyer_mapper import BuyerMapper
from cta_market.entrypoints.http.session import require_admin, require_buyer
from cta_market.use_cases.get_buyer_by_id import GetBuyerById, GetBuyerByIdRequest
from cta_market.use_cases.list_buyers import ListBuyers
from cta_market.use_cases.register_buyer import RegisterBuyer, RegisterBuyerRequest
from cta_market.use_cases.update_buyer import UpdateBuyer, UpdateBuyerRequest


router = APIRouter(tags=["Buyers"])


@router.get(
    "/buyers",
    response_model=BuyerListResponseDTO,
    summary="List buyers",
    description="Administrators only.",
    responses=error_responses(401, 403),
    dependencies=[Depends(require_admin)],
)
def list_buyers(use_case: ListBuyers = Depends(get_list_buyers_use_case)) -> BuyerListResponseDTO:
    result = use_case.execute()
    return BuyerMapper.to_list_response(result.buyers)


@router.post(
    "/buyers",
    response_model=BuyerResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a buyer",
    description="Emails are unique, case-insensitively (409 on a duplicate).",
    responses=error_responses(409, 422),
)
def register_buyer(
    payload: BuyerCreateDTO,
    use_case: RegisterBuyer = Depends(get_register_buyer_use_case),
) -> BuyerResponseDTO:
    result = use_case.execute(RegisterBuyerRequest(buyer=BuyerMapper.to_buyer_input(payload)))
    return BuyerMapper.to_response(result.buyer)


@router.get(
    "/buyers/{buyer_id}",
    response_model=BuyerResponseDTO,
    summary="Get buyer by ID",
    responses=error_responses(404, 422),
)
def get_buyer(
    buyer_id: str,
    use_case: GetBuyerById = Depends(get_buyer_by_id_use_case),
) -> BuyerResponseDTO:
    result = use_case.execute(GetBuyerByIdRequest(buyer_id=buyer_id))
    return BuyerMapper.to_response(result.buyer)


@router.patch(
    "/buyers/{buyer_id}",
    response_model=BuyerResponseDTO,
    summary="Edit buyer contact details",
    description="Email, phone, DNI and address. A new email must be unused (409).",
    responses=error_responses(401, 403, 404, 409, 422),
    dependencies=[Depends(require_buyer)],
)
def update_buyer(
    buyer_id: str,
    payload: BuyerUpdateDTO,
    use_case: UpdateBuyer = Depends(get_update_buyer_use_case),
) -> BuyerResponseDTO:
    request = UpdateBuyerRequest(buyer_id=buyer_id, changes=BuyerMapper.to_buyer_update(payload))
    result = use_case.execute(request)
    return BuyerMapper.to_response(result.buyer)
