from fastapi import APIRouter, Depends, status

from cta_market.entrypoints.http.dependencies import (
    get_add_favorite_use_case,
    get_list_favorites_use_case,
    get_remove_favorite_use_case,
    get_update_review_use_case,
)
from cta_market.entrypoints.http.dtos.favorites import (
    FavoriteCreateDTO,
    FavoriteListResponseDTO,
    FavoriteResponseDTO,
    FavoritesQueryDTO,
    ReviewUpdateDTO,
)
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.favorite_mapper import FavoriteMapper
from cta_market.entrypoints.http.session import get_session_context, require_buyer
from cta_market.use_cases.add_favorite import AddFavorite, AddFavoriteRequest
from cta_market.use_cases.list_favorites import ListFavorites, ListFavoritesRequest
from cta_market.use_cases.remove_favorite import RemoveFavorite, RemoveFavoriteRequest
from cta_market.use_cases.update_review import UpdateReview, UpdateReviewRequest


router = APIRouter(tags=["Favorites"])


@router.get(
    "/favorites",
    response_model=FavoriteListResponseDTO,
    summary="List a buyer's favorites",
    responses=error_responses(401, 422),
    dependencies=[Depends(get_session_context)],
)
def list_favorites(
    query: FavoritesQueryDTO = Depends(),
    use_case: ListFavorites = Depends(get_list_favorites_use_case),
) -> FavoriteListResponseDTO:
    result = use_case.execute(ListFavoritesRequest(buyer_id=query.buyer_id))
    return FavoriteMapper.to_list_response(result.favorites)


@router.post(
    "/favorites",
    response_model=FavoriteResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a favorite",
    description="""
    Save a car to a buyer's favorites, optionally with a review.

    - rating: 1 to 10
    - comment: up to 1000 characters
    - a buyer can favorite a car only once (409 otherwise)
    """,
    responses=error_responses(401, 403, 404, 409, 422),
    dependencies=[Depends(require_buyer)],
)
def add_favorite(
    payload: FavoriteCreateDTO,
    use_case: AddFavorite = Depends(get_add_favorite_use_case),
) -> FavoriteResponseDTO:
    result = use_case.execute(AddFavoriteRequest(favorite=FavoriteMapper.to_favorite_input(payload)))
    return FavoriteMapper.to_response(result.favorite)


@router.patch(
    "/favorites/{favorite_id}",
    response_model=FavoriteResponseDTO,
    summary="Update review",
    responses=error_responses(401, 403, 404, 422),
    dependencies=[Depends(require_buyer)],
)
def update_review(
    favorite_id: str,
    payload: ReviewUpdateDTO,
    use_case: UpdateReview = Depends(get_update_review_use_case),
) -> FavoriteResponseDTO:
    request = UpdateReviewRequest(
        favorite_id=favorite_id, review=FavoriteMapper.to_review_update(payload)
    )
    result = use_case.execute(request)
    return FavoriteMapper.to_response(result.favorite)


@router.delete(
    "/favorites/{favorite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a favorite",
    responses=error_responses(401, 403, 404, 422),
    dependencies=[Depends(require_buyer)],
)
def remove_favorite(
    favorite_id: str,
    use_case: RemoveFavorite = Depends(get_remove_favorite_use_case),
) -> None:
    use_case.execute(RemoveFavoriteRequest(favorite_id=favorite_id))
