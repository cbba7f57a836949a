from datetime import datetime

from pydantic import BaseModel, Field


class FavoriteResponseDTO(BaseModel):
    id: str
    buyer_id: str
    car_id: str
    rating: int | None = None
    comment: str | None = None
    price_notifications: bool
    date_added: datetime


class FavoriteListResponseDTO(BaseModel):
    favorites: list[FavoriteResponseDTO]
    total: int


class FavoritesQueryDTO(BaseModel):
    buyer_id: str = Field(description="Buyer whose favorites are listed")


class FavoriteCreateDTO(BaseModel):
    buyer_id: str
    car_id: str
    rating: int | None = Field(default=None, description="Rating from 1 to 10", examples=[8])
    comment: str | None = Field(default=None, examples=["Comfortable and economical"])
    price_notifications: bool = False


class ReviewUpdateDTO(BaseModel):
    """Replaces the review; null clears a field."""

    rating: int | None = Field(default=None, examples=[9])
    comment: str | None = Field(default=None, examples=["Even better after a test drive"])


class CarReviewsResponseDTO(BaseModel):
    car_id: str
    reviews: list[FavoriteResponseDTO]
    total: int
    average_rating: str | None = Field(default=None, examples=["8.50"])
