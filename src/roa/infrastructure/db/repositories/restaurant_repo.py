from __future__ import annotations

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roa.application.ports.repositories import RestaurantInUseError, RestaurantRepository
from roa.domain.common.ids import RestaurantId
from roa.domain.restaurant.entities import Restaurant
from roa.infrastructure.db.models.order import OrderModel
from roa.infrastructure.db.models.restaurant import RestaurantModel
from roa.infrastructure.db.repositories.errors import store_errors
from roa.infrastructure.db.repositories.mapping import restaurant_to_domain, restaurant_to_row
from roa.infrastructure.db.session import get_engine


class SqlAlchemyRestaurantRepository(RestaurantRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, restaurant: Restaurant) -> None:
        with store_errors("restaurant_add"), Session(self._engine) as session:
            session.add(RestaurantModel(**restaurant_to_row(restaurant)))
            session.commit()

    def get(self, restaurant_id: RestaurantId) -> Restaurant | None:
        statement = select(RestaurantModel).where(RestaurantModel.id == str(restaurant_id))
        with store_errors("restaurant_get"), Session(self._engine) as session:
            model = session.execute(statement).scalar_one_or_none()
            if model is None:
                return None
            return restaurant_to_domain(model)

    def exists(self, restaurant_id: RestaurantId) -> bool:
        statement = (
            select(RestaurantModel.id).where(RestaurantModel.id == str(restaurant_id)).limit(1)
        )
        with store_errors("restaurant_exists"), Session(self._engine) as session:
            value = session.execute(statement).scalar_one_or_none()
        return value is not None

    def has_orders(self, restaurant_id: RestaurantId) -> bool:
        statement = (
            select(OrderModel.id).where(OrderModel.restaurant_id == str(restaurant_id)).limit(1)
        )
        with store_errors("restaurant_has_orders"), Session(self._engine) as session:
            value = session.execute(statement).scalar_one_or_none()
        return value is not None

    def delete(self, restaurant_id: RestaurantId) -> bool:
        statement = delete(RestaurantModel).where(RestaurantModel.id == str(restaurant_id))
        with store_errors("restaurant_delete"), Session(self._engine) as session:
            try:
                result = session.execute(statement)
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise RestaurantInUseError(f"restaurant {restaurant_id} is referenced") from exc
        return result.rowcount == 1
