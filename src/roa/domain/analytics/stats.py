from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from roa.domain.common.money import format_average, format_total
from roa.domain.order.entities import Order
from roa.domain.restaurant.entities import Restaurant


@dataclass(frozen=True)
class RevenueRollup:
    total_cents: int = 0
    order_count: int = 0

    def __post_init__(self) -> None:
        if self.order_count < 0 or self.total_cents < 0:
            raise ValueError("rollup values must be >= 0")
        if self.order_count == 0 and self.total_cents != 0:
            raise ValueError("empty rollup cannot carry revenue")

    @property
    def total_revenue(self) -> str:
        return format_total(self.total_cents, self.order_count)

    @property
    def avg_order_value(self) -> str:
        return format_average(self.total_cents, self.order_count)


@dataclass(frozen=True)
class RestaurantStats:
    restaurant: Restaurant
    rollup: RevenueRollup


@dataclass(frozen=True)
class OrderWithRestaurant:
    order: Order
    restaurant: Restaurant


@dataclass(frozen=True)
class DailyBucket:
    day: date
    order_count: int
    revenue_cents: int


@dataclass(frozen=True)
class HourBucket:
    hour: int
    order_count: int


@dataclass(frozen=True)
class RestaurantAnalytics:
    daily: list[DailyBucket] = field(default_factory=list)
    rollup: RevenueRollup = field(default_factory=RevenueRollup)
    peak_hours: list[HourBucket] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardTotals:
    rollup: RevenueRollup
    active_restaurants: int
