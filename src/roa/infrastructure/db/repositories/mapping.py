from __future__ import annotations

from roa.domain.common.ids import OrderId, RestaurantId
from roa.domain.common.money import Money
from roa.domain.order.entities import Order
from roa.domain.restaurant.entities import Restaurant
from roa.infrastructure.db.models.order import OrderModel
from roa.infrastructure.db.models.restaurant import RestaurantModel
from roa.infrastructure.db.store_time import as_utc, from_store_wall_time, to_store_wall_time


def restaurant_to_domain(model: RestaurantModel) -> Restaurant:
    return Restaurant(
        restaurant_id=RestaurantId(model.id),
        name=model.name,
        cuisine=model.cuisine,
        location=model.location,
        created_at=as_utc(model.created_at),
    )


def restaurant_to_row(restaurant: Restaurant) -> dict[str, object]:
    return {
        "id": str(restaurant.restaurant_id),
        "name": restaurant.name,
        "cuisine": restaurant.cuisine,
        "location": restaurant.location,
        "created_at": restaurant.created_at,
    }


def order_to_domain(model: OrderModel) -> Order:
    return Order(
        order_id=OrderId(model.id),
        restaurant_id=RestaurantId(model.restaurant_id),
        amount=Money(amount_cents=int(model.amount_cents)),
        timestamp=from_store_wall_time(model.timestamp),
        created_at=as_utc(model.created_at),
    )


def order_to_row(order: Order) -> dict[str, object]:
    return {
        "id": str(order.order_id),
        "restaurant_id": str(order.restaurant_id),
        "amount_cents": order.amount.amount_cents,
        "timestamp": to_store_wall_time(order.timestamp),
        "created_at": order.created_at,
    }
