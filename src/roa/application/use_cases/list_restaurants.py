from __future__ import annotations

from roa.application.dto.responses import RestaurantWithStatsResponse
from roa.application.mappers.restaurant_mapper import to_restaurant_with_stats_response
from roa.application.metrics.analytics import record_analytics_query
from roa.application.ports.repositories import AnalyticsRepository
from roa.domain.analytics.filters import Page, RestaurantFilter


class ListRestaurants:
    def __init__(self, analytics_repository: AnalyticsRepository) -> None:
        self._analytics_repository = analytics_repository

    def execute(
        self,
        restaurant_filter: RestaurantFilter,
        page: Page,
    ) -> list[RestaurantWithStatsResponse]:
        rows = self._analytics_repository.list_restaurants_with_stats(
            restaurant_filter=restaurant_filter,
            page=page,
        )
        record_analytics_query("restaurants")
        return [to_restaurant_with_stats_response(row) for row in rows]
