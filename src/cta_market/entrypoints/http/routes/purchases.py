from fastapi import APIRouter, Depends, status

from cta_market.entrypoints.http.dependencies import (
    get_change_purchase_status_use_case,
    get_create_purchase_use_case,
    get_list_purchases_use_case,
    get_purchase_by_id_use_case,
)
from cta_market.entrypoints.http.dtos.purchases import (
    PurchaseCreateDTO,
    PurchaseListResponseDTO,
    PurchaseResponseDTO,
    PurchasesQueryDTO,
    PurchaseStatusChangeDTO,
)
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.purchase_mapper import PurchaseMapper
from cta_market.entrypoints.http.session import (
    get_session_context,
    require_buyer,
    require_dealership,
)
from cta_market.use_cases.change_purchase_status import (
    ChangePurchaseStatus,
    ChangePurchaseStatusRequest,
)
from cta_market.use_cases.create_purchase import CreatePurchase, CreatePurchaseRequest
from cta_market.use_cases.get_purchase_by_id import GetPurchaseById, GetPurchaseByIdRequest
from cta_market.use_cases.list_purchases import ListPurchases


router = APIRouter(tags=["Purchases"])


@router.get(
    "/purchases",
    response_model=PurchaseListResponseDTO,
    summary="List purchases",
    responses=error_responses(401),
    dependencies=[Depends(get_session_context)],
)
def list_purchases(
    query: PurchasesQueryDTO = Depends(),
    use_case: ListPurchases = Depends(get_list_purchases_use_case),
) -> PurchaseListResponseDTO:
    result = use_case.execute(PurchaseMapper.to_list_request(query))
    return PurchaseMapper.to_list_response(result.purchases)


@router.post(
    "/purchases",
    response_model=PurchaseResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Buy an offer",
    description="""
    Record a purchase of an available offer. Buyers and administrators.

    The purchase starts `PENDING`, and uses the offer price unless
    `final_price` is given. The offer stays published.
    """,
    responses=error_responses(401, 403, 404, 409, 422),
    dependencies=[Depends(require_buyer)],
)
def create_purchase(
    payload: PurchaseCreateDTO,
    use_case: CreatePurchase = Depends(get_create_purchase_use_case),
) -> PurchaseResponseDTO:
    request = CreatePurchaseRequest(purchase=PurchaseMapper.to_purchase_input(payload))
    result = use_case.execute(request)
    return PurchaseMapper.to_response(result.purchase)


@router.get(
    "/purchases/{purchase_id}",
    response_model=PurchaseResponseDTO,
    summary="Get purchase by ID",
    responses=error_responses(401, 404, 422),
    dependencies=[Depends(get_session_context)],
)
def get_purchase(
    purchase_id: str,
    use_case: GetPurchaseById = Depends(get_purchase_by_id_use_case),
) -> PurchaseResponseDTO:
    result = use_case.execute(GetPurchaseByIdRequest(purchase_id=purchase_id))
    return PurchaseMapper.to_response(result.purchase)


@router.post(
    "/purchases/{purchase_id}/status",
    response_model=PurchaseResponseDTO,
    summary="Change purchase status",
    description="""
    Allowed moves:
    - PENDING → CONFIRMED, PENDING → CANCELLED
    - CONFIRMED → DELIVERED, CONFIRMED → CANCELLED

    DELIVERED and CANCELLED are final. Any other move answers 409 with
    code `INVALID_TRANSITION`.
    """,
    responses=error_responses(401, 403, 404, 409, 422),
    dependencies=[Depends(require_dealership)],
)
def change_purchase_status(
    purchase_id: str,
    payload: PurchaseStatusChangeDTO,
    use_case: ChangePurchaseStatus = Depends(get_change_purchase_status_use_case),
) -> PurchaseResponseDTO:
    request = ChangePurchaseStatusRequest(purchase_id=purchase_id, status=payload.status)
    result = use_case.execute(request)
    return PurchaseMapper.to_response(result.purchase)
