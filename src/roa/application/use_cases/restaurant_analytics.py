from __future__ import annotations

from roa.application.dto.responses import AnalyticsResponse
from roa.application.mappers.analytics_mapper import to_analytics_response
from roa.application.metrics.analytics import record_analytics_query
from roa.application.ports.repositories import AnalyticsRepository
from roa.domain.analytics.filters import OrderFilter
from roa.domain.common.ids import RestaurantId


class GetRestaurantAnalytics:
    def __init__(self, analytics_repository: AnalyticsRepository) -> None:
        self._analytics_repository = analytics_repository

    def execute(self, restaurant_id: RestaurantId, order_filter: OrderFilter) -> AnalyticsResponse:
        analytics = self._analytics_repository.restaurant_analytics(
            restaurant_id=restaurant_id,
            order_filter=order_filter.for_restaurant(restaurant_id),
        )
        record_analytics_query("restaurant_analytics")
        return to_analytics_response(analytics)
