from cta_market.infra.db.models.base import Base
from cta_market.infra.db.models.buyer import BuyerRow
from cta_market.infra.db.models.car import CarRow
from cta_market.infra.db.models.dealership import DealershipRow
from cta_market.infra.db.models.favorite import FavoriteRow
from cta_market.infra.db.models.offer import OfferRow
from cta_market.infra.db.models.purchase import PurchaseRow

__all__ = [
    "Base",
    "BuyerRow",
    "CarRow",
    "DealershipRow",
    "FavoriteRow",
    "OfferRow",
    "PurchaseRow",
]
