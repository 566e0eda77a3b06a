from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from roa.domain.common.ids import RestaurantId
from roa.domain.common.money import cents_lower_bound, cents_upper_bound
from roa.domain.order.entities import MAX_AMOUNT_CENTS, Order
from roa.domain.restaurant.entities import Restaurant

DEFAULT_LIST_LIMIT = 50
DEFAULT_TOP_LIMIT = 3
MAX_LIMIT = 500


@dataclass(frozen=True)
class Page:
    limit: int = DEFAULT_LIST_LIMIT
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1 or self.limit > MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}")
        if self.offset < 0:
            raise ValueError("offset must be >= 0")


@dataclass(frozen=True)
class HourWindow:
    start_hour: int
    end_hour: int

    def __post_init__(self) -> None:
        for value in (self.start_hour, self.end_hour):
            if value < 0 or value > 23:
                raise ValueError("hour must be between 0 and 23")

    def contains(self, hour: int) -> bool:
        # start_hour > end_hour is an empty window, not a wrap past midnight
        return self.start_hour <= hour <= self.end_hour


@dataclass(frozen=True)
class RestaurantFilter:
    search: str | None = None
    cuisine: str | None = None
    location: str | None = None

    def matches(self, restaurant: Restaurant) -> bool:
        """In-memory form of the store query predicate."""
        if self.search and self.search.casefold() not in restaurant.name.casefold():
            return False
        if self.cuisine and restaurant.cuisine != self.cuisine:
            return False
        if self.location and restaurant.location != self.location:
            return False
        return True


@dataclass(frozen=True)
class OrderFilter:
    """Conjunctive predicate over orders.

    Date bounds are inclusive and must be expressed on the same clock as the
    order timestamps they are compared against. The hour bounds only apply
    when both are given.
    """

    restaurant_id: RestaurantId | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    start_hour: int | None = None
    end_hour: int | None = None

    @property
    def hour_window(self) -> HourWindow | None:
        if self.start_hour is None or self.end_hour is None:
            return None
        return HourWindow(start_hour=self.start_hour, end_hour=self.end_hour)

    @property
    def min_amount_cents(self) -> int | None:
        if self.min_amount is None:
            return None
        # clamped so the bound stays a storable integer
        return min(max(cents_lower_bound(self.min_amount), 0), MAX_AMOUNT_CENTS + 1)

    @property
    def max_amount_cents(self) -> int | None:
        if self.max_amount is None:
            return None
        return min(max(cents_upper_bound(self.max_amount), -1), MAX_AMOUNT_CENTS + 1)

    def for_restaurant(self, restaurant_id: RestaurantId) -> OrderFilter:
        return replace(self, restaurant_id=restaurant_id)

    def matches(self, order: Order) -> bool:
        """In-memory form of the store query predicate, used to check query results."""
        if self.restaurant_id is not None and order.restaurant_id != self.restaurant_id:
            return False
        if self.start_date is not None and order.timestamp < self.start_date:
            return False
        if self.end_date is not None and order.timestamp > self.end_date:
            return False
        min_cents = self.min_amount_cents
        if min_cents is not None and order.amount.amount_cents < min_cents:
            return False
        max_cents = self.max_amount_cents
        if max_cents is not None and order.amount.amount_cents > max_cents:
            return False
        window = self.hour_window
        if window is not None and not window.contains(order.hour_of_day):
            return False
        return True


@dataclass(frozen=True)
class DateRange:
    start_date: datetime | None = None
    end_date: datetime | None = None

    def as_order_filter(self) -> OrderFilter:
        return OrderFilter(start_date=self.start_date, end_date=self.end_date)
