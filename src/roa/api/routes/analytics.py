from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from roa.api.dependencies import get_store_engine
from roa.api.query_params import date_range_params, order_bounds_params
from roa.application.dto.responses import (
    AnalyticsResponse,
    DashboardStatsResponse,
    RestaurantWithStatsResponse,
)
from roa.application.use_cases.dashboard_stats import GetDashboardStats
from roa.application.use_cases.restaurant_analytics import GetRestaurantAnalytics
from roa.application.use_cases.top_restaurants import GetTopRestaurants
from roa.domain.analytics.filters import DEFAULT_TOP_LIMIT, MAX_LIMIT, DateRange, OrderFilter
from roa.domain.common.ids import RestaurantId
from roa.infrastructure.db.repositories.analytics_repo import SqlAlchemyAnalyticsRepository

router = APIRouter(tags=["analytics"])


@router.get("/api/restaurants/{restaurant_id}/analytics", response_model=AnalyticsResponse)
def get_restaurant_analytics(
    restaurant_id: str,
    order_filter: OrderFilter = Depends(order_bounds_params),
    engine: Engine = Depends(get_store_engine),
) -> AnalyticsResponse:
    use_case = GetRestaurantAnalytics(analytics_repository=SqlAlchemyAnalyticsRepository(engine))
    return use_case.execute(restaurant_id=RestaurantId(restaurant_id), order_filter=order_filter)


@router.get(
    "/api/analytics/top-restaurants",
    response_model=list[RestaurantWithStatsResponse],
)
def get_top_restaurants(
    date_range: DateRange = Depends(date_range_params),
    limit: int = Query(default=DEFAULT_TOP_LIMIT, ge=1, le=MAX_LIMIT),
    engine: Engine = Depends(get_store_engine),
) -> list[RestaurantWithStatsResponse]:
    use_case = GetTopRestaurants(analytics_repository=SqlAlchemyAnalyticsRepository(engine))
    return use_case.execute(date_range=date_range, limit=limit)


@router.get("/api/dashboard/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(engine: Engine = Depends(get_store_engine)) -> DashboardStatsResponse:
    use_case = GetDashboardStats(analytics_repository=SqlAlchemyAnalyticsRepository(engine))
    return use_case.execute()
