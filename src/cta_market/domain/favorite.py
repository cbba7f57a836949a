from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from cta_market.domain.errors import ValidationError, field_error


MIN_RATING = 1
MAX_RATING = 10
MAX_COMMENT_LENGTH = 1000


def _normalize_comment(comment: str | None) -> str | None:
    if comment is None or not comment.strip():
        return None
    return comment


def _review_errors(rating: int | None, comment: str | None) -> list[dict[str, str]]:
    errors = []
    if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
        errors.append(
            field_error(
                "rating", f"Rating must be between {MIN_RATING} and {MAX_RATING}", "OUT_OF_RANGE"
            )
        )
    if comment is not None and len(comment) > MAX_COMMENT_LENGTH:
        errors.append(
            field_error(
                "comment", f"Comment cannot exceed {MAX_COMMENT_LENGTH} characters", "TOO_LONG"
            )
        )
    return errors


@dataclass(frozen=True)
class Favorite:
    id: str
    buyer_id: str
    car_id: str
    rating: int | None
    comment: str | None
    price_notifications: bool
    date_added: datetime

    @property
    def is_review(self) -> bool:
        return self.rating is not None or self.comment is not None

    def with_review(self, rating: int | None, comment: str | None) -> Favorite:
        return replace(self, rating=rating, comment=_normalize_comment(comment))


@dataclass(frozen=True, slots=True)
class FavoriteInput:
    buyer_id: str
    car_id: str
    rating: int | None = None
    comment: str | None = None
    price_notifications: bool = False

    def validate(self) -> None:
        errors = _review_errors(self.rating, self.comment)
        if errors:
            raise ValidationError(errors=errors)

    def to_favorite(self, favorite_id: str, date_added: datetime) -> Favorite:
        return Favorite(
            id=favorite_id,
            buyer_id=self.buyer_id,
            car_id=self.car_id,
            rating=self.rating,
            comment=_normalize_comment(self.comment),
            price_notifications=self.price_notifications,
            date_added=date_added,
        )


@dataclass(frozen=True, slots=True)
class ReviewUpdate:
    """Replaces both review fields; ``None`` clears them."""

    rating: int | None = None
    comment: str | None = None

    def validate(self) -> None:
        errors = _review_errors(self.rating, self.comment)
        if errors:
            raise ValidationError(errors=errors)
