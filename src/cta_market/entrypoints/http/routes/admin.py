from fastapi import APIRouter, Depends

from cta_market.entrypoints.http.dependencies import (
    get_dashboard_stats_use_case,
    get_top_statistics_use_case,
)
from cta_market.entrypoints.http.dtos.admin import DashboardResponseDTO, TopStatisticsResponseDTO
from cta_market.entrypoints.http.error_responses import error_responses
from cta_market.entrypoints.http.mappers.admin_mapper import AdminMapper
from cta_market.entrypoints.http.session import require_admin
from cta_market.use_cases.get_dashboard_stats import GetDashboardStats
from cta_market.use_cases.get_top_statistics import GetTopStatistics


router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
    responses=error_responses(401, 403),
)


@router.get(
    "/dashboard",
    response_model=DashboardResponseDTO,
    summary="Dashboard totals",
    description="Buyers, dealerships, purchases and revenue. Cancelled purchases add no revenue.",
)
def get_dashboard(
    use_case: GetDashboardStats = Depends(get_dashboard_stats_use_case),
) -> DashboardResponseDTO:
    return AdminMapper.to_dashboard_response(use_case.execute())


@router.get(
    "/top",
    response_model=TopStatisticsResponseDTO,
    summary="Top-5 rankings",
    description="""
    Best-selling cars, top buyers and top dealerships by number of
    non-cancelled purchases, and highest average-rated cars. Ties keep the
    order in which items were first seen.
    """,
)
def get_top(
    use_case: GetTopStatistics = Depends(get_top_statistics_use_case),
) -> TopStatisticsResponseDTO:
    return AdminMapper.to_top_response(use_case.execute())
