from __future__ import annotations

from typing import Callable

import pytest

from cta_market.domain.errors import ValidationError
from cta_market.domain.favorite import Favorite, FavoriteInput, ReviewUpdate


def test_favorite_input_accepts_rating_bounds() -> None:
    FavoriteInput(buyer_id="b", car_id="c", rating=1).validate()
    FavoriteInput(buyer_id="b", car_id="c", rating=10).validate()
    FavoriteInput(buyer_id="b", car_id="c").validate()


@pytest.mark.parametrize("rating", [0, 11, -3])
def test_rating_out_of_range_is_rejected(rating: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        FavoriteInput(buyer_id="b", car_id="c", rating=rating).validate()

    assert exc_info.value.errors[0]["field"] == "rating"
    assert exc_info.value.errors[0]["code"] == "OUT_OF_RANGE"


def test_comment_too_long_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ReviewUpdate(rating=5, comment="x" * 1001).validate()

    assert exc_info.value.errors == [
        {"field": "comment", "message": "Comment cannot exceed 1000 characters", "code": "TOO_LONG"}
    ]


def test_blank_comment_is_stored_as_none(now) -> None:
    favorite = FavoriteInput(buyer_id="b", car_id="c", comment="   ").to_favorite("f-1", now)

    assert favorite.comment is None
    assert not favorite.is_review
    assert favorite.date_added == now


def test_with_review_replaces_both_fields(make_favorite: Callable[..., Favorite]) -> None:
    favorite = make_favorite(rating=3, comment="meh")

    updated = favorite.with_review(rating=9, comment=None)

    assert updated.rating == 9
    assert updated.comment is None
    assert updated.is_review
    assert favorite.rating == 3
