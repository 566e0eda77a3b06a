from __future__ import annotations

from typing import Protocol

from roa.domain.analytics.filters import (
    DateRange,
    OrderFilter,
    Page,
    RestaurantFilter,
)
from roa.domain.analytics.stats import (
    DashboardTotals,
    OrderWithRestaurant,
    RestaurantAnalytics,
    RestaurantStats,
)
from roa.domain.common.ids import RestaurantId
from roa.domain.order.entities import Order
from roa.domain.restaurant.entities import Restaurant


class RestaurantRepository(Protocol):
    def add(self, restaurant: Restaurant) -> None: ...

    def get(self, restaurant_id: RestaurantId) -> Restaurant | None: ...

    def exists(self, restaurant_id: RestaurantId) -> bool: ...

    def has_orders(self, restaurant_id: RestaurantId) -> bool: ...

    def delete(self, restaurant_id: RestaurantId) -> bool: ...


class OrderRepository(Protocol):
    def add(self, order: Order) -> Order: ...


class AnalyticsRepository(Protocol):
    def list_restaurants_with_stats(
        self,
        restaurant_filter: RestaurantFilter,
        page: Page,
    ) -> list[RestaurantStats]: ...

    def list_orders(self, order_filter: OrderFilter, page: Page) -> list[OrderWithRestaurant]: ...

    def restaurant_analytics(
        self,
        restaurant_id: RestaurantId,
        order_filter: OrderFilter,
    ) -> RestaurantAnalytics: ...

    def top_restaurants(self, date_range: DateRange, limit: int) -> list[RestaurantStats]: ...

    def dashboard_totals(self) -> DashboardTotals: ...


class DatasetRepository(Protocol):
    def replace_all(self, restaurants: list[Restaurant], orders: list[Order]) -> None: ...


class StoreError(Exception):
    pass


class UnknownRestaurantReferenceError(Exception):
    pass


class RestaurantInUseError(Exception):
    pass
