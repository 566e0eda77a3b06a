from __future__ import annotations

import concurrent.futures
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from roa.application.dto.requests import CreateOrderRequest, CreateRestaurantRequest
from roa.application.use_cases.create_order import CreateOrder
from roa.application.use_cases.create_restaurant import CreateRestaurant
from roa.application.use_cases.restaurant_analytics import GetRestaurantAnalytics
from roa.domain.analytics.filters import OrderFilter
from roa.domain.common.ids import RestaurantId
from roa.infrastructure.db.repositories.analytics_repo import SqlAlchemyAnalyticsRepository
from roa.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository
from roa.infrastructure.db.repositories.restaurant_repo import SqlAlchemyRestaurantRepository


def test_concurrent_order_creation_keeps_aggregates_exact() -> None:
    restaurant = CreateRestaurant(SqlAlchemyRestaurantRepository()).execute(
        CreateRestaurantRequest(name="Concurrency Cafe", cuisine="coffee", location="Campus")
    )
    create_order = CreateOrder(
        restaurant_repository=SqlAlchemyRestaurantRepository(),
        order_repository=SqlAlchemyOrderRepository(),
    )

    def _place(index: int) -> str:
        response = create_order.execute(
            CreateOrderRequest(
                restaurant_id=restaurant.id,
                amount="0.10",
                timestamp=f"2024-02-01T{8 + index % 4:02d}:00:00Z",
            )
        )
        return response.id

    with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
        order_ids = list(executor.map(_place, range(40)))

    assert len(set(order_ids)) == 40

    analytics = GetRestaurantAnalytics(SqlAlchemyAnalyticsRepository()).execute(
        restaurant_id=RestaurantId(restaurant.id),
        order_filter=OrderFilter(),
    )
    assert [(point.date, point.count) for point in analytics.dailyOrders] == [("2024-02-01", 40)]
    assert [point.revenue for point in analytics.dailyRevenue] == ["4.00"]
    assert analytics.avgOrderValue == "0.1"
    assert [(point.hour, point.count) for point in analytics.peakHours] == [
        (8, 10),
        (9, 10),
        (10, 10),
        (11, 10),
    ]
