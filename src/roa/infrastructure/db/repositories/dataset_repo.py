from __future__ import annotations

from sqlalchemy import Engine, delete, insert
from sqlalchemy.orm import Session

from roa.application.ports.repositories import DatasetRepository
from roa.domain.order.entities import Order
from roa.domain.restaurant.entities import Restaurant
from roa.infrastructure.db.models.order import OrderModel
from roa.infrastructure.db.models.restaurant import RestaurantModel
from roa.infrastructure.db.repositories.errors import store_errors
from roa.infrastructure.db.repositories.mapping import order_to_row, restaurant_to_row
from roa.infrastructure.db.session import get_engine

INSERT_BATCH_SIZE = 100


class SqlAlchemyDatasetRepository(DatasetRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def replace_all(self, restaurants: list[Restaurant], orders: list[Order]) -> None:
        order_rows = [order_to_row(order) for order in orders]
        with store_errors("dataset_replace"), Session(self._engine) as session:
            with session.begin():
                session.execute(delete(OrderModel))
                session.execute(delete(RestaurantModel))
                if restaurants:
                    session.execute(
                        insert(RestaurantModel),
                        [restaurant_to_row(restaurant) for restaurant in restaurants],
                    )
                for start in range(0, len(order_rows), INSERT_BATCH_SIZE):
                    session.execute(
                        insert(OrderModel),
                        order_rows[start : start + INSERT_BATCH_SIZE],
                    )
