"""
Dependency injection for FastAPI routes.

Key principle: database sessions are per-request, never cached. Repositories
and use cases are rebuilt for every request around that session, so tests
can replace any factory through ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from cta_market.adapters.postgres_buyer_repository import PostgresBuyerRepository
from cta_market.adapters.postgres_car_repository import PostgresCarRepository
from cta_market.adapters.postgres_dealership_repository import PostgresDealershipRepository
from cta_market.adapters.postgres_favorite_repository import PostgresFavoriteRepository
from cta_market.adapters.postgres_offer_repository import PostgresOfferRepository
from cta_market.adapters.postgres_purchase_repository import PostgresPurchaseRepository
from cta_market.infra.db.session import get_session
from cta_market.ports.buyer_repository import BuyerRepository
from cta_market.ports.car_repository import CarRepository
from cta_market.ports.dealership_repository import DealershipRepository
from cta_market.ports.favorite_repository import FavoriteRepository
from cta_market.ports.offer_repository import OfferRepository
from cta_market.ports.purchase_repository import PurchaseRepository
from cta_market.use_cases.add_favorite import AddFavorite
from cta_market.use_cases.change_dealership_status import ActivateDealership, DeactivateDealership
from cta_market.use_cases.change_purchase_status import ChangePurchaseStatus
from cta_market.use_cases.create_car import CreateCar
from cta_market.use_cases.create_offer import CreateOffer
from cta_market.use_cases.create_purchase import CreatePurchase
from cta_market.use_cases.get_buyer_by_id import GetBuyerById
from cta_market.use_cases.get_car_by_id import GetCarById
from cta_market.use_cases.get_car_reviews import GetCarReviews
from cta_market.use_cases.get_dashboard_stats import GetDashboardStats
from cta_market.use_cases.get_dealership_by_id import GetDealershipById
from cta_market.use_cases.get_display_car_by_id import GetDisplayCarById
from cta_market.use_cases.get_offer_by_id import GetOfferById
from cta_market.use_cases.get_purchase_by_id import GetPurchaseById
from cta_market.use_cases.get_top_statistics import GetTopStatistics
from cta_market.use_cases.list_buyers import ListBuyers
from cta_market.use_cases.list_cars import ListCars
from cta_market.use_cases.list_dealership_display_cars import ListDealershipDisplayCars
from cta_market.use_cases.list_dealerships import ListDealerships
from cta_market.use_cases.list_favorites import ListFavorites
from cta_market.use_cases.list_offers import ListOffers
from cta_market.use_cases.list_purchases import ListPurchases
from cta_market.use_cases.mark_offer_unavailable import MarkOfferUnavailable
from cta_market.use_cases.register_buyer import RegisterBuyer
from cta_market.use_cases.register_dealership import RegisterDealership
from cta_market.use_cases.remove_favorite import RemoveFavorite
from cta_market.use_cases.search_display_cars import SearchDisplayCars
from cta_market.use_cases.update_buyer import UpdateBuyer
from cta_market.use_cases.update_car import UpdateCar
from cta_market.use_cases.update_dealership import UpdateDealership
from cta_market.use_cases.update_offer import UpdateOffer
from cta_market.use_cases.update_review import UpdateReview


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


# ============================================================================
# Repositories
# ============================================================================


def get_car_repository(db: Session = Depends(get_db)) -> CarRepository:
    return PostgresCarRepository(session=db)


def get_offer_repository(db: Session = Depends(get_db)) -> OfferRepository:
    return PostgresOfferRepository(session=db)


def get_dealership_repository(db: Session = Depends(get_db)) -> DealershipRepository:
    return PostgresDealershipRepository(session=db)


def get_buyer_repository(db: Session = Depends(get_db)) -> BuyerRepository:
    return PostgresBuyerRepository(session=db)


def get_purchase_repository(db: Session = Depends(get_db)) -> PurchaseRepository:
    return PostgresPurchaseRepository(session=db)


def get_favorite_repository(db: Session = Depends(get_db)) -> FavoriteRepository:
    return PostgresFavoriteRepository(session=db)


# ============================================================================
# Catalog
# ============================================================================


def get_search_display_cars_use_case(
    cars: CarRepository = Depends(get_car_repository),
    offers: OfferRepository = Depends(get_offer_repository),
) -> SearchDisplayCars:
    return SearchDisplayCars(car_repository=cars, offer_repository=offers)


def get_display_car_by_id_use_case(
    cars: CarRepository = Depends(get_car_repository),
    offers: OfferRepository = Depends(get_offer_repository),
) -> GetDisplayCarById:
    return GetDisplayCarById(car_repository=cars, offer_repository=offers)


def get_list_dealership_display_cars_use_case(
    cars: CarRepository = Depends(get_car_repository),
    offers: OfferRepository = Depends(get_offer_repository),
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> ListDealershipDisplayCars:
    return ListDealershipDisplayCars(
        car_repository=cars,
        offer_repository=offers,
        dealership_repository=dealerships,
    )


# ============================================================================
# Cars
# ============================================================================


def get_list_cars_use_case(cars: CarRepository = Depends(get_car_repository)) -> ListCars:
    return ListCars(car_repository=cars)


def get_car_by_id_use_case(cars: CarRepository = Depends(get_car_repository)) -> GetCarById:
    return GetCarById(car_repository=cars)


def get_create_car_use_case(cars: CarRepository = Depends(get_car_repository)) -> CreateCar:
    return CreateCar(car_repository=cars)


def get_update_car_use_case(cars: CarRepository = Depends(get_car_repository)) -> UpdateCar:
    return UpdateCar(car_repository=cars)


def get_car_reviews_use_case(
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    cars: CarRepository = Depends(get_car_repository),
) -> GetCarReviews:
    return GetCarReviews(favorite_repository=favorites, car_repository=cars)


# ============================================================================
# Offers
# ============================================================================


def get_list_offers_use_case(
    offers: OfferRepository = Depends(get_offer_repository),
) -> ListOffers:
    return ListOffers(offer_repository=offers)


def get_offer_by_id_use_case(
    offers: OfferRepository = Depends(get_offer_repository),
) -> GetOfferById:
    return GetOfferById(offer_repository=offers)


def get_create_offer_use_case(
    offers: OfferRepository = Depends(get_offer_repository),
    cars: CarRepository = Depends(get_car_repository),
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> CreateOffer:
    return CreateOffer(
        offer_repository=offers,
        car_repository=cars,
        dealership_repository=dealerships,
    )


def get_update_offer_use_case(
    offers: OfferRepository = Depends(get_offer_repository),
) -> UpdateOffer:
    return UpdateOffer(offer_repository=offers)


def get_mark_offer_unavailable_use_case(
    offers: OfferRepository = Depends(get_offer_repository),
) -> MarkOfferUnavailable:
    return MarkOfferUnavailable(offer_repository=offers)


# ============================================================================
# Dealerships & buyers
# ============================================================================


def get_list_dealerships_use_case(
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> ListDealerships:
    return ListDealerships(dealership_repository=dealerships)


def get_dealership_by_id_use_case(
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> GetDealershipById:
    return GetDealershipById(dealership_repository=dealerships)


def get_register_dealership_use_case(
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> RegisterDealership:
    return RegisterDealership(dealership_repository=dealerships)


def get_update_dealership_use_case(
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> UpdateDealership:
    return UpdateDealership(dealership_repository=dealerships)


def get_deactivate_dealership_use_case(
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> DeactivateDealership:
    return DeactivateDealership(dealership_repository=dealerships)


def get_activate_dealership_use_case(
    dealerships: DealershipRepository = Depends(get_dealership_repository),
) -> ActivateDealership:
    return ActivateDealership(dealership_repository=dealerships)


def get_list_buyers_use_case(
    buyers: BuyerRepository = Depends(get_buyer_repository),
) -> ListBuyers:
    return ListBuyers(buyer_repository=buyers)


def get_buyer_by_id_use_case(
    buyers: BuyerRepository = Depends(get_buyer_repository),
) -> GetBuyerById:
    return GetBuyerById(buyer_repository=buyers)


def get_register_buyer_use_case(
    buyers: BuyerRepository = Depends(get_buyer_repository),
) -> RegisterBuyer:
    return RegisterBuyer(buyer_repository=buyers)


def get_update_buyer_use_case(
    buyers: BuyerRepository = Depends(get_buyer_repository),
) -> UpdateBuyer:
    return UpdateBuyer(buyer_repository=buyers)


# ============================================================================
# Purchases
# ============================================================================


def get_list_purchases_use_case(
    purchases: PurchaseRepository = Depends(get_purchase_repository),
) -> ListPurchases:
    return ListPurchases(purchase_repository=purchases)


def get_purchase_by_id_use_case(
    purchases: PurchaseRepository = Depends(get_purchase_repository),
) -> GetPurchaseById:
    return GetPurchaseById(purchase_repository=purchases)


def get_create_purchase_use_case(
    purchases: PurchaseRepository = Depends(get_purchase_repository),
    offers: OfferRepository = Depends(get_offer_repository),
    buyers: BuyerRepository = Depends(get_buyer_repository),
) -> CreatePurchase:
    return CreatePurchase(
        purchase_repository=purchases,
        offer_repository=offers,
        buyer_repository=buyers,
    )


def get_change_purchase_status_use_case(
    purchases: PurchaseRepository = Depends(get_purchase_repository),
) -> ChangePurchaseStatus:
    return ChangePurchaseStatus(purchase_repository=purchases)


# ============================================================================
# Favorites
# ============================================================================


def get_list_favorites_use_case(
    favorites: FavoriteRepository = Depends(get_favorite_repository),
) -> ListFavorites:
    return ListFavorites(favorite_repository=favorites)


def get_add_favorite_use_case(
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    cars: CarRepository = Depends(get_car_repository),
    buyers: BuyerRepository = Depends(get_buyer_repository),
) -> AddFavorite:
    return AddFavorite(favorite_repository=favorites, car_repository=cars, buyer_repository=buyers)


def get_update_review_use_case(
    favorites: FavoriteRepository = Depends(get_favorite_repository),
) -> UpdateReview:
    return UpdateReview(favorite_repository=favorites)


def get_remove_favorite_use_case(
    favorites: FavoriteRepository = Depends(get_favorite_repository),
) -> RemoveFavorite:
    return RemoveFavorite(favorite_repository=favorites)


# ============================================================================
# Admin
# ============================================================================


def get_dashboard_stats_use_case(
    buyers: BuyerRepository = Depends(get_buyer_repository),
    dealerships: DealershipRepository = Depends(get_dealership_repository),
    purchases: PurchaseRepository = Depends(get_purchase_repository),
) -> GetDashboardStats:
    return GetDashboardStats(
        buyer_repository=buyers,
        dealership_repository=dealerships,
        purchase_repository=purchases,
    )


def get_top_statistics_use_case(
    cars: CarRepository = Depends(get_car_repository),
    buyers: BuyerRepository = Depends(get_buyer_repository),
    dealerships: DealershipRepository = Depends(get_dealership_repository),
    purchases: PurchaseRepository = Depends(get_purchase_repository),
    favorites: FavoriteRepository = Depends(get_favorite_repository),
) -> GetTopStatistics:
    return GetTopStatistics(
        car_repository=cars,
        buyer_repository=buyers,
        dealership_repository=dealerships,
        purchase_repository=purchases,
        favorite_repository=favorites,
    )
