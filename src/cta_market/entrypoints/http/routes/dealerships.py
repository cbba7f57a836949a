from fastapi import APIRouter, Depends, status

from cta_market.entrypoints.http.dependencies import (
    get_activate_dealership_use_case,
    get_deactivate_dealership_use_case,
    get_dealership_by_id_use_case,
    get_list_dealerships_use_case,
    get_register_dealership_use_case,
    get_update_dealership_use_case,
)
from cta_market.entrypoints.http.dtos.dealerships import (
    DealershipCreateDTO,
    DealershipListResponseDTO,
    DealershipResponseDTO,
    DealershipsQueryDTO,
    DealershipUpdateDTO,
)
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.dealership_mapper import DealershipMapper
from cta_market.entrypoints.http.session import require_admin, require_dealership
from cta_market.use_cases.change_dealership_status import (
    ActivateDealership,
    ChangeDealershipStatusRequest,
    DeactivateDealership,
)
from cta_market.use_cases.get_dealership_by_id import GetDealershipById, GetDealershipByIdRequest
from cta_market.use_cases.list_dealerships import ListDealerships, ListDealershipsRequest
from cta_market.use_cases.register_dealership import RegisterDealership, RegisterDealershipRequest
from cta_market.use_cases.update_dealership import UpdateDealership, UpdateDealershipRequest


router = APIRouter(tags=["Dealerships"])


@router.get(
    "/dealerships",
    response_model=DealershipListResponseDTO,
    summary="List dealerships",
    description="All filters are optional and combine with AND. Blank values are ignored.",
)
def list_dealerships(
    query: DealershipsQueryDTO = Depends(),
    use_case: ListDealerships = Depends(get_list_dealerships_use_case),
) -> DealershipListResponseDTO:
    result = use_case.execute(ListDealershipsRequest(filters=DealershipMapper.to_filters(query)))
    return DealershipMapper.to_list_response(result.dealerships)


@router.post(
    "/dealerships",
    response_model=DealershipResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a dealership",
    description="Tax ids are unique (409 on a duplicate). New dealerships start active.",
    responses=error_responses(409, 422),
)
def register_dealership(
    payload: DealershipCreateDTO,
    use_case: RegisterDealership = Depends(get_register_dealership_use_case),
) -> DealershipResponseDTO:
    request = RegisterDealershipRequest(dealership=DealershipMapper.to_dealership_input(payload))
    result = use_case.execute(request)
    return DealershipMapper.to_response(result.dealership)


@router.get(
    "/dealerships/{dealership_id}",
    response_model=DealershipResponseDTO,
    summary="Get dealership by ID",
    responses=error_responses(404, 422),
)
def get_dealership(
    dealership_id: str,
    use_case: GetDealershipById = Depends(get_dealership_by_id_use_case),
) -> DealershipResponseDTO:
    result = use_case.execute(GetDealershipByIdRequest(dealership_id=dealership_id))
    return DealershipMapper.to_response(result.dealership)


@router.patch(
    "/dealerships/{dealership_id}",
    response_model=DealershipResponseDTO,
    summary="Edit a dealership profile",
    responses=error_responses(401, 403, 404, 422),
    dependencies=[Depends(require_dealership)],
)
def update_dealership(
    dealership_id: str,
    payload: DealershipUpdateDTO,
    use_case: UpdateDealership = Depends(get_update_dealership_use_case),
) -> DealershipResponseDTO:
    request = UpdateDealershipRequest(
        dealership_id=dealership_id, changes=DealershipMapper.to_dealership_update(payload)
    )
    result = use_case.execute(request)
    return DealershipMapper.to_response(result.dealership)


@router.patch(
    "/dealerships/{dealership_id}/deactivate",
    response_model=DealershipResponseDTO,
    summary="Deactivate a dealership",
    description="Inactive dealerships cannot publish offers. 409 when already inactive.",
    responses=error_responses(401, 403, 404, 409, 422),
    dependencies=[Depends(require_admin)],
)
def deactivate_dealership(
    dealership_id: str,
    use_case: DeactivateDealership = Depends(get_deactivate_dealership_use_case),
) -> DealershipResponseDTO:
    result = use_case.execute(ChangeDealershipStatusRequest(dealership_id=dealership_id))
    return DealershipMapper.to_response(result.dealership)


@router.patch(
    "/dealerships/{dealership_id}/activate",
    response_model=DealershipResponseDTO,
    summary="Reactivate a dealership",
    description="409 when already active.",
    responses=error_responses(401, 403, 404, 409, 422),
    dependencies=[Depends(require_admin)],
)
def activate_dealership(
    dealership_id: str,
    use_case: ActivateDealership = Depends(get_activate_dealership_use_case),
) -> DealershipResponseDTO:
    result = use_case.execute(ChangeDealershipStatusRequest(dealership_id=dealership_id))
    return DealershipMapper.to_response(result.dealership)
