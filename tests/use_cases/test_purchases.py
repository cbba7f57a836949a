"""Tests for recording purchases and moving them through their lifecycle."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable

import pytest

from cta_market.adapters.in_memory_buyer_repository import InMemoryBuyerRepository
from cta_market.adapters.in_memory_offer_repository import InMemoryOfferRepository
from cta_market.adapters.in_memory_purchase_repository import InMemoryPurchaseRepository
from cta_market.domain.buyer import Buyer
from cta_market.domain.errors import (
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from cta_market.domain.offer import Offer
from cta_market.domain.purchase import PaymentMethod, Purchase, PurchaseInput, PurchaseStatus
from cta_market.use_cases.change_purchase_status import (
    ChangePurchaseStatus,
    ChangePurchaseStatusRequest,
)
from cta_market.use_cases.create_purchase import CreatePurchase, CreatePurchaseRequest
from cta_market.use_cases.get_purchase_by_id import GetPurchaseById, GetPurchaseByIdRequest
from cta_market.use_cases.list_purchases import ListPurchases, ListPurchasesRequest

PURCHASE_ID = "22222222-2222-2222-2222-222222222222"


@pytest.fixture()
def offer(make_offer: Callable[..., Offer]) -> Offer:
    return make_offer(price=Decimal("20000"))


@pytest.fixture()
def buyer(make_buyer: Callable[..., Buyer]) -> Buyer:
    return make_buyer()


@pytest.fixture()
def purchases() -> InMemoryPurchaseRepository:
    return InMemoryPurchaseRepository()


@pytest.fixture()
def offers(offer: Offer) -> InMemoryOfferRepository:
    return InMemoryOfferRepository([offer])


@pytest.fixture()
def create_purchase(
    purchases: InMemoryPurchaseRepository,
    offers: InMemoryOfferRepository,
    buyer: Buyer,
    now: datetime,
) -> CreatePurchase:
    return CreatePurchase(
        purchases,
        offers,
        InMemoryBuyerRepository([buyer]),
        clock=lambda: now,
        id_factory=lambda: PURCHASE_ID,
    )


# ==============================================================================
# CreatePurchase
# ==============================================================================


def test_purchase_snapshots_offer_and_starts_pending(
    create_purchase: CreatePurchase, offer: Offer, buyer: Buyer, now: datetime
) -> None:
    data = PurchaseInput(offer_id=offer.id, buyer_id=buyer.id)

    purchase = create_purchase.execute(CreatePurchaseRequest(purchase=data)).purchase

    assert purchase.id == PURCHASE_ID
    assert purchase.status is PurchaseStatus.PENDING
    assert purchase.car_id == offer.car_id
    assert purchase.dealership_id == offer.dealership_id
    assert purchase.final_price == Decimal("20000")
    assert purchase.payment_method is PaymentMethod.CASH
    assert purchase.purchase_date == now


def test_negotiated_final_price_wins(
    create_purchase: CreatePurchase, offer: Offer, buyer: Buyer
) -> None:
    data = PurchaseInput(
        offer_id=offer.id,
        buyer_id=buyer.id,
        final_price=Decimal("19500.00"),
        payment_method=PaymentMethod.CHECK,
    )

    purchase = create_purchase.execute(CreatePurchaseRequest(purchase=data)).purchase

    assert purchase.final_price == Decimal("19500.00")
    assert purchase.payment_method is PaymentMethod.CHECK


def test_purchase_leaves_offer_available(
    create_purchase: CreatePurchase,
    offers: InMemoryOfferRepository,
    offer: Offer,
    buyer: Buyer,
) -> None:
    create_purchase.execute(
        CreatePurchaseRequest(purchase=PurchaseInput(offer_id=offer.id, buyer_id=buyer.id))
    )

    assert offers.get_by_id(offer.id).available is True


def test_unavailable_offer_cannot_be_purchased(
    make_offer: Callable[..., Offer], buyer: Buyer, purchases: InMemoryPurchaseRepository
) -> None:
    offer = make_offer(available=False)
    use_case = CreatePurchase(
        purchases, InMemoryOfferRepository([offer]), InMemoryBuyerRepository([buyer])
    )

    with pytest.raises(ConflictError):
        use_case.execute(
            CreatePurchaseRequest(purchase=PurchaseInput(offer_id=offer.id, buyer_id=buyer.id))
        )
    assert purchases.list_all() == []


def test_unknown_buyer(create_purchase: CreatePurchase, offer: Offer) -> None:
    data = PurchaseInput(offer_id=offer.id, buyer_id=PURCHASE_ID)

    with pytest.raises(NotFoundError) as exc_info:
        create_purchase.execute(CreatePurchaseRequest(purchase=data))
    assert exc_info.value.context["resource"] == "Buyer"


def test_zero_final_price_is_rejected(
    create_purchase: CreatePurchase, offer: Offer, buyer: Buyer
) -> None:
    data = PurchaseInput(offer_id=offer.id, buyer_id=buyer.id, final_price=Decimal("0"))

    with pytest.raises(ValidationError):
        create_purchase.execute(CreatePurchaseRequest(purchase=data))


# ==============================================================================
# ChangePurchaseStatus
# ==============================================================================


def test_full_lifecycle(make_purchase: Callable[..., Purchase]) -> None:
    purchase = make_purchase()
    repository = InMemoryPurchaseRepository([purchase])
    use_case = ChangePurchaseStatus(repository)

    for status in (PurchaseStatus.CONFIRMED, PurchaseStatus.DELIVERED):
        use_case.execute(ChangePurchaseStatusRequest(purchase_id=purchase.id, status=status))

    assert repository.get_by_id(purchase.id).status is PurchaseStatus.DELIVERED


def test_invalid_transition_leaves_purchase_untouched(
    make_purchase: Callable[..., Purchase],
) -> None:
    purchase = make_purchase(status=PurchaseStatus.CANCELLED)
    repository = InMemoryPurchaseRepository([purchase])

    with pytest.raises(InvalidTransitionError):
        ChangePurchaseStatus(repository).execute(
            ChangePurchaseStatusRequest(purchase_id=purchase.id, status=PurchaseStatus.CONFIRMED)
        )

    assert repository.get_by_id(purchase.id) == purchase


def test_change_status_of_unknown_purchase() -> None:
    with pytest.raises(NotFoundError):
        ChangePurchaseStatus(InMemoryPurchaseRepository()).execute(
            ChangePurchaseStatusRequest(purchase_id=PURCHASE_ID, status=PurchaseStatus.CONFIRMED)
        )


# ==============================================================================
# Reads
# ==============================================================================


def test_list_purchases_filters(make_purchase: Callable[..., Purchase]) -> None:
    a = make_purchase(buyer_id="b-1", dealership_id="d-1")
    b = make_purchase(buyer_id="b-1", dealership_id="d-2", status=PurchaseStatus.CONFIRMED)
    c = make_purchase(buyer_id="b-2", dealership_id="d-1")
    use_case = ListPurchases(InMemoryPurchaseRepository([a, b, c]))

    assert use_case.execute(ListPurchasesRequest()).purchases == [a, b, c]
    assert use_case.execute(ListPurchasesRequest(buyer_id="b-1")).purchases == [a, b]
    assert use_case.execute(ListPurchasesRequest(dealership_id="d-1")).purchases == [a, c]
    assert use_case.execute(
        ListPurchasesRequest(buyer_id="b-1", dealership_id="d-2")
    ).purchases == [b]
    assert use_case.execute(
        ListPurchasesRequest(status=PurchaseStatus.PENDING)
    ).purchases == [a, c]


def test_get_purchase_by_id(make_purchase: Callable[..., Purchase]) -> None:
    purchase = make_purchase()
    use_case = GetPurchaseById(InMemoryPurchaseRepository([purchase]))

    assert use_case.execute(GetPurchaseByIdRequest(purchase_id=purchase.id)).purchase == purchase
    with pytest.raises(ValidationError):
        use_case.execute(GetPurchaseByIdRequest(purchase_id="nope"))
