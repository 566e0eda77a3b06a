from __future__ import annotations

from roa.application.dto.responses import RestaurantResponse, RestaurantWithStatsResponse
from roa.domain.analytics.stats import RestaurantStats
from roa.domain.restaurant.entities import Restaurant


def to_restaurant_response(restaurant: Restaurant) -> RestaurantResponse:
    return RestaurantResponse(
        id=str(restaurant.restaurant_id),
        name=restaurant.name,
        cuisine=restaurant.cuisine,
        location=restaurant.location,
        createdAt=restaurant.created_at,
    )


def to_restaurant_with_stats_response(stats: RestaurantStats) -> RestaurantWithStatsResponse:
    restaurant = stats.restaurant
    return RestaurantWithStatsResponse(
        id=str(restaurant.restaurant_id),
        name=restaurant.name,
        cuisine=restaurant.cuisine,
        location=restaurant.location,
        createdAt=restaurant.created_at,
        totalRevenue=stats.rollup.total_revenue,
        totalOrders=stats.rollup.order_count,
        avgOrderValue=stats.rollup.avg_order_value,
    )
