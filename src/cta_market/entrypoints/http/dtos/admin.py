from pydantic import BaseModel, Field


class DashboardResponseDTO(BaseModel):
    total_buyers: int
    total_dealerships: int
    total_purchases: int
    total_revenue: str = Field(examples=["125000.00"])


class RankingEntryDTO(BaseModel):
    id: str
    label: str = Field(examples=["Toyota Corolla 2020"])
    value: str = Field(description="Sales count or average rating", examples=["3"])


class TopStatisticsResponseDTO(BaseModel):
    best_selling_cars: list[RankingEntryDTO]
    top_buyers: list[RankingEntryDTO]
    top_dealerships: list[RankingEntryDTO]
    highest_rated_cars: list[RankingEntryDTO]
