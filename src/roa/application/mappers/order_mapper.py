from __future__ import annotations

from roa.application.dto.responses import OrderResponse, OrderWithRestaurantResponse
from roa.application.mappers.restaurant_mapper import to_restaurant_response
from roa.domain.analytics.stats import OrderWithRestaurant
from roa.domain.order.entities import Order


def to_order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=str(order.order_id),
        restaurantId=str(order.restaurant_id),
        amount=order.amount.to_decimal_string(),
        timestamp=order.timestamp,
        createdAt=order.created_at,
    )


def to_order_with_restaurant_response(row: OrderWithRestaurant) -> OrderWithRestaurantResponse:
    order = row.order
    return OrderWithRestaurantResponse(
        id=str(order.order_id),
        restaurantId=str(order.restaurant_id),
        amount=order.amount.to_decimal_string(),
        timestamp=order.timestamp,
        createdAt=order.created_at,
        restaurant=to_restaurant_response(row.restaurant),
    )
