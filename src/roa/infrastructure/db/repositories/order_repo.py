from __future__ import annotations

from dataclasses import replace

from sqlalchemy import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roa.application.ports.repositories import (
    OrderRepository,
    UnknownRestaurantReferenceError,
)
from roa.domain.order.entities import Order
from roa.infrastructure.db.models.order import OrderModel
from roa.infrastructure.db.repositories.errors import store_errors
from roa.infrastructure.db.repositories.mapping import order_to_row
from roa.infrastructure.db.session import get_engine
from roa.infrastructure.db.store_time import from_store_wall_time


class SqlAlchemyOrderRepository(OrderRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, order: Order) -> Order:
        row = order_to_row(order)
        with store_errors("order_add"), Session(self._engine) as session:
            session.add(OrderModel(**row))
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise UnknownRestaurantReferenceError(
                    f"restaurant {order.restaurant_id} does not exist"
                ) from exc

        return replace(order, timestamp=from_store_wall_time(row["timestamp"]))
