from __future__ import annotations

from cta_market.domain.statistics import DashboardStats, RankingEntry, TopStatistics
from cta_market.entrypoints.http.dtos.admin import (
    DashboardResponseDTO,
    RankingEntryDTO,
    TopStatisticsResponseDTO,
)


class AdminMapper:
    @staticmethod
    def to_dashboard_response(stats: DashboardStats) -> DashboardResponseDTO:
        return DashboardResponseDTO(
            total_buyers=stats.total_buyers,
            total_dealerships=stats.total_dealerships,
            total_purchases=stats.total_purchases,
            total_revenue=str(stats.total_revenue),
        )

    @staticmethod
    def to_ranking(entries: list[RankingEntry]) -> list[RankingEntryDTO]:
        return [RankingEntryDTO(id=e.id, label=e.label, value=str(e.value)) for e in entries]

    @staticmethod
    def to_top_response(stats: TopStatistics) -> TopStatisticsResponseDTO:
        return TopStatisticsResponseDTO(
            best_selling_cars=AdminMapper.to_ranking(stats.best_selling_cars),
            top_buyers=AdminMapper.to_ranking(stats.top_buyers),
            top_dealerships=AdminMapper.to_ranking(stats.top_dealerships),
            highest_rated_cars=AdminMapper.to_ranking(stats.highest_rated_cars),
        )
