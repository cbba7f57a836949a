"""Tests for the offer use cases."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable
from unittest.mock import Mock

import pytest

from cta_market.adapters.in_memory_car_repository import InMemoryCarRepository
from cta_market.adapters.in_memory_dealership_repository import InMemoryDealershipRepository
from cta_market.adapters.in_memory_offer_repository import InMemoryOfferRepository
from cta_market.domain.car import Car
from cta_market.domain.dealership import Dealership
from cta_market.domain.errors import ConflictError, NotFoundError, ValidationError
from cta_market.domain.offer import Offer, OfferInput, OfferUpdate
from cta_market.ports.offer_repository import OfferRepository
from cta_market.use_cases.create_offer import CreateOffer, CreateOfferRequest
from cta_market.use_cases.get_offer_by_id import GetOfferById, GetOfferByIdRequest
from cta_market.use_cases.list_offers import ListOffers, ListOffersRequest
from cta_market.use_cases.mark_offer_unavailable import (
    MarkOfferUnavailable,
    MarkOfferUnavailableRequest,
)
from cta_market.use_cases.update_offer import UpdateOffer, UpdateOfferRequest

UNKNOWN_ID = "99999999-9999-9999-9999-999999999999"


@pytest.fixture()
def car(make_car: Callable[..., Car]) -> Car:
    return make_car()


@pytest.fixture()
def dealership(make_dealership: Callable[..., Dealership]) -> Dealership:
    return make_dealership()


@pytest.fixture()
def offers() -> InMemoryOfferRepository:
    return InMemoryOfferRepository()


@pytest.fixture()
def create_offer(
    car: Car, dealership: Dealership, offers: InMemoryOfferRepository, now: datetime
) -> CreateOffer:
    return CreateOffer(
        offers,
        InMemoryCarRepository([car]),
        InMemoryDealershipRepository([dealership]),
        clock=lambda: now,
    )


# ==============================================================================
# CreateOffer
# ==============================================================================


def test_create_offer_starts_available(
    create_offer: CreateOffer, car: Car, dealership: Dealership, now: datetime
) -> None:
    data = OfferInput(car_id=car.id, dealership_id=dealership.id, price=Decimal("20000"))

    offer = create_offer.execute(CreateOfferRequest(offer=data)).offer

    assert offer.available is True
    assert offer.price == Decimal("20000")
    assert offer.offer_date == now


def test_create_offer_accepts_zero_price(
    create_offer: CreateOffer, car: Car, dealership: Dealership
) -> None:
    data = OfferInput(car_id=car.id, dealership_id=dealership.id, price=Decimal("0"))

    assert create_offer.execute(CreateOfferRequest(offer=data)).offer.price == Decimal("0")


def test_create_offer_rejects_negative_price(
    create_offer: CreateOffer, car: Car, dealership: Dealership, offers: InMemoryOfferRepository
) -> None:
    data = OfferInput(car_id=car.id, dealership_id=dealership.id, price=Decimal("-1"))

    with pytest.raises(ValidationError):
        create_offer.execute(CreateOfferRequest(offer=data))
    assert offers.list_all() == []


def test_create_offer_for_unknown_car(create_offer: CreateOffer, dealership: Dealership) -> None:
    data = OfferInput(car_id=UNKNOWN_ID, dealership_id=dealership.id, price=Decimal("1"))

    with pytest.raises(NotFoundError) as exc_info:
        create_offer.execute(CreateOfferRequest(offer=data))
    assert exc_info.value.context["resource"] == "Car"


def test_create_offer_for_inactive_dealership(
    car: Car, make_dealership: Callable[..., Dealership]
) -> None:
    inactive = make_dealership(active=False)
    use_case = CreateOffer(
        InMemoryOfferRepository(),
        InMemoryCarRepository([car]),
        InMemoryDealershipRepository([inactive]),
    )
    data = OfferInput(car_id=car.id, dealership_id=inactive.id, price=Decimal("1"))

    with pytest.raises(ConflictError):
        use_case.execute(CreateOfferRequest(offer=data))


def test_second_offer_from_same_dealership_conflicts(
    create_offer: CreateOffer, car: Car, dealership: Dealership
) -> None:
    data = OfferInput(car_id=car.id, dealership_id=dealership.id, price=Decimal("20000"))
    create_offer.execute(CreateOfferRequest(offer=data))

    with pytest.raises(ConflictError):
        create_offer.execute(CreateOfferRequest(offer=data))


# ==============================================================================
# UpdateOffer / MarkOfferUnavailable
# ==============================================================================


def test_update_offer_price(make_offer: Callable[..., Offer]) -> None:
    offer = make_offer()
    repository = InMemoryOfferRepository([offer])

    result = UpdateOffer(repository).execute(
        UpdateOfferRequest(offer_id=offer.id, changes=OfferUpdate(price=Decimal("18000.50")))
    )

    assert result.offer.price == Decimal("18000.50")
    assert repository.get_by_id(offer.id).price == Decimal("18000.50")


def test_update_offer_without_changes_skips_write(make_offer: Callable[..., Offer]) -> None:
    offer = make_offer()
    repository = Mock(spec=OfferRepository)
    repository.get_by_id.return_value = offer

    result = UpdateOffer(repository).execute(
        UpdateOfferRequest(offer_id=offer.id, changes=OfferUpdate(price=offer.price))
    )

    assert result.offer == offer
    repository.update.assert_not_called()


def test_mark_unavailable_is_idempotent(make_offer: Callable[..., Offer]) -> None:
    offer = make_offer()
    repository = InMemoryOfferRepository([offer])
    use_case = MarkOfferUnavailable(repository)

    first = use_case.execute(MarkOfferUnavailableRequest(offer_id=offer.id))
    second = use_case.execute(MarkOfferUnavailableRequest(offer_id=offer.id))

    assert first.offer.available is False
    assert second.offer == first.offer


def test_mark_unavailable_does_not_write_twice(make_offer: Callable[..., Offer]) -> None:
    repository = Mock(spec=OfferRepository)
    repository.get_by_id.return_value = make_offer(available=False)

    MarkOfferUnavailable(repository).execute(
        MarkOfferUnavailableRequest(offer_id=UNKNOWN_ID)
    )

    repository.update.assert_not_called()


def test_mark_unknown_offer_unavailable() -> None:
    with pytest.raises(NotFoundError):
        MarkOfferUnavailable(InMemoryOfferRepository()).execute(
            MarkOfferUnavailableRequest(offer_id=UNKNOWN_ID)
        )


# ==============================================================================
# Reads
# ==============================================================================


def test_list_offers_combines_criteria(
    make_car: Callable[..., Car], make_offer: Callable[..., Offer]
) -> None:
    car = make_car()
    a = make_offer(car, dealership_id="d-1")
    b = make_offer(car, dealership_id="d-2")
    c = make_offer(car, dealership_id="d-1", available=False)
    d = make_offer(dealership_id="d-1")
    use_case = ListOffers(InMemoryOfferRepository([a, b, c, d]))

    assert use_case.execute(ListOffersRequest()).offers == [a, b, c, d]
    assert use_case.execute(ListOffersRequest(available_only=True)).offers == [a, b, d]
    assert use_case.execute(ListOffersRequest(car_id=car.id, dealership_id="d-1")).offers == [a, c]
    assert use_case.execute(
        ListOffersRequest(dealership_id="d-1", available_only=True)
    ).offers == [a, d]


def test_get_offer_by_id(make_offer: Callable[..., Offer]) -> None:
    offer = make_offer()
    use_case = GetOfferById(InMemoryOfferRepository([offer]))

    assert use_case.execute(GetOfferByIdRequest(offer_id=offer.id)).offer == offer
    with pytest.raises(NotFoundError):
        use_case.execute(GetOfferByIdRequest(offer_id=UNKNOWN_ID))
