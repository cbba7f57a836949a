"""Tests for dealership status changes, dealership search and profile edits."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import pytest

from cta_market.adapters.in_memory_buyer_repository import InMemoryBuyerRepository
from cta_market.adapters.in_memory_car_repository import InMemoryCarRepository
from cta_market.adapters.in_memory_dealership_repository import InMemoryDealershipRepository
from cta_market.adapters.in_memory_offer_repository import InMemoryOfferRepository
from cta_market.domain.buyer import Buyer, BuyerUpdate
from cta_market.domain.car import Car
from cta_market.domain.dealership import Dealership, DealershipFilters, DealershipUpdate
from cta_market.domain.errors import ConflictError, NotFoundError, ValidationError
from cta_market.domain.offer import OfferInput
from cta_market.use_cases.change_dealership_status import (
    ActivateDealership,
    ChangeDealershipStatusRequest,
    DeactivateDealership,
)
from cta_market.use_cases.create_offer import CreateOffer, CreateOfferRequest
from cta_market.use_cases.list_dealerships import ListDealerships, ListDealershipsRequest
from cta_market.use_cases.update_buyer import UpdateBuyer, UpdateBuyerRequest
from cta_market.use_cases.update_dealership import UpdateDealership, UpdateDealershipRequest

UNKNOWN_ID = "99999999-9999-9999-9999-999999999999"


# ==============================================================================
# Activate / deactivate
# ==============================================================================


def test_deactivate_dealership(make_dealership: Callable[..., Dealership]) -> None:
    dealership = make_dealership()
    repository = InMemoryDealershipRepository([dealership])

    result = DeactivateDealership(repository).execute(
        ChangeDealershipStatusRequest(dealership_id=dealership.id)
    )

    assert result.dealership.active is False
    assert repository.get_by_id(dealership.id).active is False


def test_deactivate_twice_conflicts(make_dealership: Callable[..., Dealership]) -> None:
    dealership = make_dealership(active=False)
    use_case = DeactivateDealership(InMemoryDealershipRepository([dealership]))

    with pytest.raises(ConflictError) as exc_info:
        use_case.execute(ChangeDealershipStatusRequest(dealership_id=dealership.id))

    assert exc_info.value.context["dealership_id"] == dealership.id


def test_activate_dealership(make_dealership: Callable[..., Dealership]) -> None:
    dealership = make_dealership(active=False)
    repository = InMemoryDealershipRepository([dealership])

    ActivateDealership(repository).execute(
        ChangeDealershipStatusRequest(dealership_id=dealership.id)
    )

    assert repository.get_by_id(dealership.id).active is True
    with pytest.raises(ConflictError):
        ActivateDealership(repository).execute(
            ChangeDealershipStatusRequest(dealership_id=dealership.id)
        )


@pytest.mark.parametrize("use_case_cls", [ActivateDealership, DeactivateDealership])
def test_status_change_of_unknown_dealership(use_case_cls: type) -> None:
    use_case = use_case_cls(InMemoryDealershipRepository())

    with pytest.raises(NotFoundError):
        use_case.execute(ChangeDealershipStatusRequest(dealership_id=UNKNOWN_ID))


def test_deactivated_dealership_cannot_publish_offers(
    make_dealership: Callable[..., Dealership], make_car: Callable[..., Car]
) -> None:
    dealership = make_dealership()
    car = make_car()
    dealerships = InMemoryDealershipRepository([dealership])
    offers = InMemoryOfferRepository()
    create_offer = CreateOffer(
        offer_repository=offers,
        car_repository=InMemoryCarRepository([car]),
        dealership_repository=dealerships,
    )
    DeactivateDealership(dealerships).execute(
        ChangeDealershipStatusRequest(dealership_id=dealership.id)
    )

    with pytest.raises(ConflictError):
        create_offer.execute(
            CreateOfferRequest(
                offer=OfferInput(car_id=car.id, dealership_id=dealership.id, price=Decimal("20000"))
            )
        )

    assert offers.list_all() == []


# ==============================================================================
# Search
# ==============================================================================


def test_list_dealerships_by_city_and_name(make_dealership: Callable[..., Dealership]) -> None:
    south = make_dealership(business_name="Autos del Sur", city="Rosario", province="Santa Fe")
    north = make_dealership(business_name="Autos del Norte", city="Salta", province="Salta")
    other = make_dealership(business_name="Motor Center", city="Rosario", province="Santa Fe")
    use_case = ListDealerships(InMemoryDealershipRepository([south, north, other]))

    by_city = use_case.execute(ListDealershipsRequest(filters=DealershipFilters(city="rosario")))
    by_both = use_case.execute(
        ListDealershipsRequest(filters=DealershipFilters(business_name="AUTOS", city="Rosario"))
    )

    assert by_city.dealerships == [south, other]
    assert by_both.dealerships == [south]


# ==============================================================================
# Dealership profile
# ==============================================================================


def test_update_dealership(make_dealership: Callable[..., Dealership]) -> None:
    dealership = make_dealership()
    repository = InMemoryDealershipRepository([dealership])

    result = UpdateDealership(repository).execute(
        UpdateDealershipRequest(
            dealership_id=dealership.id,
            changes=DealershipUpdate(phone=" +54 341 555 ", city="Rosario"),
        )
    )

    assert result.dealership.phone == "+54 341 555"
    assert result.dealership.city == "Rosario"
    assert repository.get_by_id(dealership.id) == result.dealership


def test_update_dealership_validates_before_lookup() -> None:
    use_case = UpdateDealership(InMemoryDealershipRepository())

    with pytest.raises(ValidationError):
        use_case.execute(
            UpdateDealershipRequest(
                dealership_id=UNKNOWN_ID, changes=DealershipUpdate(business_name=" ")
            )
        )


def test_update_unknown_dealership() -> None:
    with pytest.raises(NotFoundError):
        UpdateDealership(InMemoryDealershipRepository()).execute(
            UpdateDealershipRequest(dealership_id=UNKNOWN_ID, changes=DealershipUpdate(city="X"))
        )


# ==============================================================================
# Buyer profile
# ==============================================================================


def test_update_buyer(make_buyer: Callable[..., Buyer]) -> None:
    buyer = make_buyer()
    repository = InMemoryBuyerRepository([buyer])

    result = UpdateBuyer(repository).execute(
        UpdateBuyerRequest(buyer_id=buyer.id, changes=BuyerUpdate(phone="+54 11 4444", dni="40111222"))
    )

    assert result.buyer.phone == "+54 11 4444"
    assert result.buyer.dni == "40111222"
    assert repository.get_by_id(buyer.id).dni == "40111222"


def test_update_buyer_email_taken_by_other_buyer(make_buyer: Callable[..., Buyer]) -> None:
    ana = make_buyer(email="ana@example.com")
    luis = make_buyer(email="luis@example.com")
    repository = InMemoryBuyerRepository([ana, luis])

    with pytest.raises(ConflictError):
        UpdateBuyer(repository).execute(
            UpdateBuyerRequest(buyer_id=luis.id, changes=BuyerUpdate(email="ANA@example.com"))
        )

    assert repository.get_by_id(luis.id) == luis


def test_update_buyer_keeping_own_email(make_buyer: Callable[..., Buyer]) -> None:
    buyer = make_buyer(email="ana@example.com")
    repository = InMemoryBuyerRepository([buyer])

    result = UpdateBuyer(repository).execute(
        UpdateBuyerRequest(buyer_id=buyer.id, changes=BuyerUpdate(email=" Ana@Example.com "))
    )

    assert result.buyer.email == "ana@example.com"
