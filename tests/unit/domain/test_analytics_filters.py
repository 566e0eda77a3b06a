from __future__ import annotations

import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from roa.domain.analytics.filters import HourWindow, OrderFilter, Page, RestaurantFilter
from roa.domain.analytics.stats import RevenueRollup
from roa.domain.common.ids import OrderId, RestaurantId
from roa.domain.common.money import Money
from roa.domain.order.entities import MAX_AMOUNT_CENTS, Order, create_order
from roa.domain.restaurant.entities import Restaurant, create_restaurant

NOW = datetime(2024, 1, 2, tzinfo=timezone.utc)


def _order(amount: str, timestamp: datetime, restaurant_id: str = "rst_1") -> Order:
    return create_order(
        order_id=OrderId("ord_1"),
        restaurant_id=RestaurantId(restaurant_id),
        amount=Money.parse(amount),
        timestamp=timestamp,
        now=NOW,
    )


def test_restaurant_requires_non_blank_fields() -> None:
    with pytest.raises(ValueError):
        Restaurant(
            restaurant_id=RestaurantId("rst_1"),
            name="  ",
            cuisine="italian",
            location="Downtown",
            created_at=NOW,
        )


def test_create_restaurant_strips_whitespace() -> None:
    restaurant = create_restaurant(
        restaurant_id=RestaurantId("rst_1"),
        name=" Sakura Sushi ",
        cuisine="japanese ",
        location=" Midtown",
        now=NOW,
    )
    assert (restaurant.name, restaurant.cuisine, restaurant.location) == (
        "Sakura Sushi",
        "japanese",
        "Midtown",
    )


def test_order_requires_positive_amount() -> None:
    with pytest.raises(ValueError):
        _order("0", datetime(2024, 1, 1, 9))


def test_page_bounds() -> None:
    assert Page().limit == 50
    with pytest.raises(ValueError):
        Page(limit=0)
    with pytest.raises(ValueError):
        Page(limit=501)
    with pytest.raises(ValueError):
        Page(offset=-1)


def test_hour_window_is_inclusive_and_does_not_wrap() -> None:
    window = HourWindow(start_hour=9, end_hour=11)
    assert window.contains(9)
    assert window.contains(11)
    assert not window.contains(12)

    inverted = HourWindow(start_hour=22, end_hour=2)
    assert not any(inverted.contains(hour) for hour in range(24))


def test_single_hour_bound_is_ignored() -> None:
    order = _order("10.00", datetime(2024, 1, 1, 21))
    assert OrderFilter(start_hour=22).hour_window is None
    assert OrderFilter(start_hour=22).matches(order)
    assert OrderFilter(end_hour=3).matches(order)
    assert not OrderFilter(start_hour=22, end_hour=23).matches(order)


def test_amount_bounds_are_inclusive() -> None:
    order = _order("20.00", datetime(2024, 1, 1, 9))
    assert OrderFilter(min_amount=Decimal("20"), max_amount=Decimal("20.00")).matches(order)
    assert not OrderFilter(min_amount=Decimal("20.01")).matches(order)
    assert not OrderFilter(max_amount=Decimal("19.99")).matches(order)


def test_amount_bounds_are_clamped_to_the_storable_range() -> None:
    order = _order("20.00", datetime(2024, 1, 1, 9))
    huge = OrderFilter(min_amount=Decimal("100000000000000000000"), max_amount=Decimal("1e30"))
    assert huge.min_amount_cents == MAX_AMOUNT_CENTS + 1
    assert huge.max_amount_cents == MAX_AMOUNT_CENTS + 1
    assert not huge.matches(order)

    negative = OrderFilter(min_amount=Decimal("-1e30"), max_amount=Decimal("-1e30"))
    assert negative.min_amount_cents == 0
    assert negative.max_amount_cents == -1
    assert OrderFilter(min_amount=Decimal("-1e30"), max_amount=Decimal("1e30")).matches(order)
    assert not negative.matches(order)


def test_date_bounds_and_restaurant_are_conjunctive() -> None:
    order = _order("10.00", datetime(2024, 1, 1, 9), restaurant_id="rst_2")
    order_filter = OrderFilter(
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 1, 1, 23, 59),
    )
    assert order_filter.matches(order)
    assert not order_filter.for_restaurant(RestaurantId("rst_1")).matches(order)
    assert not OrderFilter(start_date=datetime(2024, 1, 1, 10)).matches(order)


def test_restaurant_filter_search_is_case_insensitive_substring() -> None:
    restaurant = create_restaurant(
        restaurant_id=RestaurantId("rst_1"),
        name="Golden Dragon",
        cuisine="chinese",
        location="Downtown",
        now=NOW,
    )
    assert RestaurantFilter(search="dRAG").matches(restaurant)
    assert not RestaurantFilter(search="dragon", cuisine="Chinese").matches(restaurant)
    assert RestaurantFilter(location="Downtown").matches(restaurant)


def test_revenue_rollup_formatting() -> None:
    assert RevenueRollup().total_revenue == "0"
    assert RevenueRollup().avg_order_value == "0"
    rollup = RevenueRollup(total_cents=3000, order_count=2)
    assert rollup.total_revenue == "30.00"
    assert rollup.avg_order_value == "15"
