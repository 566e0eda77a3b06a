from __future__ import annotations

from roa.application.dto.responses import OrderWithRestaurantResponse
from roa.application.mappers.order_mapper import to_order_with_restaurant_response
from roa.application.metrics.analytics import record_analytics_query
from roa.application.ports.repositories import AnalyticsRepository
from roa.domain.analytics.filters import OrderFilter, Page


class ListOrders:
    def __init__(self, analytics_repository: AnalyticsRepository) -> None:
        self._analytics_repository = analytics_repository

    def execute(self, order_filter: OrderFilter, page: Page) -> list[OrderWithRestaurantResponse]:
        rows = self._analytics_repository.list_orders(order_filter=order_filter, page=page)
        record_analytics_query("orders")
        return [to_order_with_restaurant_response(row) for row in rows]
