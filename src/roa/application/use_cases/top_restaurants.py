from __future__ import annotations

from roa.application.dto.responses import RestaurantWithStatsResponse
from roa.application.mappers.restaurant_mapper import to_restaurant_with_stats_response
from roa.application.metrics.analytics import record_analytics_query
from roa.application.ports.repositories import AnalyticsRepository
from roa.domain.analytics.filters import DEFAULT_TOP_LIMIT, DateRange, Page


class GetTopRestaurants:
    def __init__(self, analytics_repository: AnalyticsRepository) -> None:
        self._analytics_repository = analytics_repository

    def execute(
        self,
        date_range: DateRange,
        limit: int = DEFAULT_TOP_LIMIT,
    ) -> list[RestaurantWithStatsResponse]:
        page = Page(limit=limit)
        rows = self._analytics_repository.top_restaurants(date_range=date_range, limit=page.limit)
        record_analytics_query("top_restaurants")
        return [to_restaurant_with_stats_response(row) for row in rows]
