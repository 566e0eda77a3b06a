from __future__ import annotations

from datetime import date, datetime
from typing import Any

from sqlalchemy import Engine, Integer, Select, and_, cast, extract, func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from roa.application.ports.repositories import AnalyticsRepository
from roa.domain.analytics.filters import DateRange, OrderFilter, Page, RestaurantFilter
from roa.domain.analytics.stats import (
    DailyBucket,
    DashboardTotals,
    HourBucket,
    OrderWithRestaurant,
    RestaurantAnalytics,
    RestaurantStats,
    RevenueRollup,
)
from roa.domain.common.ids import RestaurantId
from roa.infrastructure.db.models.order import OrderModel
from roa.infrastructure.db.models.restaurant import RestaurantModel
from roa.infrastructure.db.repositories.errors import store_errors
from roa.infrastructure.db.repositories.mapping import order_to_domain, restaurant_to_domain
from roa.infrastructure.db.session import get_engine
from roa.infrastructure.db.store_time import to_store_wall_time


def order_hour() -> ColumnElement[int]:
    return cast(extract("hour", OrderModel.timestamp), Integer)


def order_day() -> ColumnElement[Any]:
    return func.date(OrderModel.timestamp)


def restaurant_conditions(restaurant_filter: RestaurantFilter) -> list[ColumnElement[bool]]:
    conditions: list[ColumnElement[bool]] = []
    if restaurant_filter.search:
        conditions.append(RestaurantModel.name.icontains(restaurant_filter.search, autoescape=True))
    if restaurant_filter.cuisine:
        conditions.append(RestaurantModel.cuisine == restaurant_filter.cuisine)
    if restaurant_filter.location:
        conditions.append(RestaurantModel.location == restaurant_filter.location)
    return conditions


def order_conditions(order_filter: OrderFilter) -> list[ColumnElement[bool]]:
    conditions: list[ColumnElement[bool]] = []
    if order_filter.restaurant_id is not None:
        conditions.append(OrderModel.restaurant_id == str(order_filter.restaurant_id))
    if order_filter.start_date is not None:
        conditions.append(OrderModel.timestamp >= to_store_wall_time(order_filter.start_date))
    if order_filter.end_date is not None:
        conditions.append(OrderModel.timestamp <= to_store_wall_time(order_filter.end_date))

    min_cents = order_filter.min_amount_cents
    if min_cents is not None:
        conditions.append(OrderModel.amount_cents >= min_cents)
    max_cents = order_filter.max_amount_cents
    if max_cents is not None:
        conditions.append(OrderModel.amount_cents <= max_cents)

    window = order_filter.hour_window
    if window is not None:
        conditions.append(order_hour() >= window.start_hour)
        conditions.append(order_hour() <= window.end_hour)
    return conditions


class SqlAlchemyAnalyticsRepository(AnalyticsRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def list_restaurants_with_stats(
        self,
        restaurant_filter: RestaurantFilter,
        page: Page,
    ) -> list[RestaurantStats]:
        statement = (
            _restaurant_stats_statement(join_conditions=[])
            .where(*restaurant_conditions(restaurant_filter))
            .limit(page.limit)
            .offset(page.offset)
        )
        return self._load_restaurant_stats(statement, operation="list_restaurants")

    def top_restaurants(self, date_range: DateRange, limit: int) -> list[RestaurantStats]:
        # date bounds narrow the joined orders, not the restaurants
        statement = _restaurant_stats_statement(
            join_conditions=order_conditions(date_range.as_order_filter())
        ).limit(limit)
        return self._load_restaurant_stats(statement, operation="top_restaurants")

    def list_orders(self, order_filter: OrderFilter, page: Page) -> list[OrderWithRestaurant]:
        statement = (
            select(OrderModel, RestaurantModel)
            .join(RestaurantModel, OrderModel.restaurant_id == RestaurantModel.id)
            .where(*order_conditions(order_filter))
            .order_by(OrderModel.timestamp.desc(), OrderModel.id.desc())
            .limit(page.limit)
            .offset(page.offset)
        )
        with store_errors("list_orders"), Session(self._engine) as session:
            return [
                OrderWithRestaurant(
                    order=order_to_domain(order_model),
                    restaurant=restaurant_to_domain(restaurant_model),
                )
                for order_model, restaurant_model in session.execute(statement).all()
            ]

    def restaurant_analytics(
        self,
        restaurant_id: RestaurantId,
        order_filter: OrderFilter,
    ) -> RestaurantAnalytics:
        conditions = order_conditions(order_filter.for_restaurant(restaurant_id))

        day = order_day().label("day")
        daily_statement = (
            select(
                day,
                func.count(OrderModel.id).label("order_count"),
                func.coalesce(func.sum(OrderModel.amount_cents), 0).label("revenue_cents"),
            )
            .where(*conditions)
            .group_by(day)
            .order_by(day)
        )

        hour = order_hour().label("hour")
        hourly_statement = (
            select(hour, func.count(OrderModel.id).label("order_count"))
            .where(*conditions)
            .group_by(hour)
            .order_by(hour)
        )

        totals_statement = select(
            func.count(OrderModel.id),
            func.coalesce(func.sum(OrderModel.amount_cents), 0),
        ).where(*conditions)

        with store_errors("restaurant_analytics"), Session(self._engine) as session:
            daily = [
                DailyBucket(
                    day=_as_date(row.day),
                    order_count=int(row.order_count),
                    revenue_cents=int(row.revenue_cents),
                )
                for row in session.execute(daily_statement)
            ]
            peak_hours = [
                HourBucket(hour=int(row.hour), order_count=int(row.order_count))
                for row in session.execute(hourly_statement)
            ]
            order_count, total_cents = session.execute(totals_statement).one()

        return RestaurantAnalytics(
            daily=daily,
            rollup=RevenueRollup(total_cents=int(total_cents), order_count=int(order_count)),
            peak_hours=peak_hours,
        )

    def dashboard_totals(self) -> DashboardTotals:
        orders_statement = select(
            func.count(OrderModel.id),
            func.coalesce(func.sum(OrderModel.amount_cents), 0),
        )
        restaurants_statement = select(func.count(RestaurantModel.id))

        with store_errors("dashboard_totals"), Session(self._engine) as session:
            order_count, total_cents = session.execute(orders_statement).one()
            restaurant_count = session.execute(restaurants_statement).scalar_one()

        return DashboardTotals(
            rollup=RevenueRollup(total_cents=int(total_cents), order_count=int(order_count)),
            active_restaurants=int(restaurant_count),
        )

    def _load_restaurant_stats(
        self,
        statement: Select[Any],
        operation: str,
    ) -> list[RestaurantStats]:
        with store_errors(operation), Session(self._engine) as session:
            return [
                RestaurantStats(
                    restaurant=restaurant_to_domain(row.RestaurantModel),
                    rollup=RevenueRollup(
                        total_cents=int(row.total_cents),
                        order_count=int(row.order_count),
                    ),
                )
                for row in session.execute(statement)
            ]


def _restaurant_stats_statement(join_conditions: list[ColumnElement[bool]]) -> Select[Any]:
    """Restaurants outer-joined to their orders, ranked by revenue.

    Ties on revenue fall back to creation time, then id.
    """
    total_cents = func.coalesce(func.sum(OrderModel.amount_cents), 0).label("total_cents")
    order_count = func.count(OrderModel.id).label("order_count")
    return (
        select(RestaurantModel, total_cents, order_count)
        .outerjoin(
            OrderModel,
            and_(OrderModel.restaurant_id == RestaurantModel.id, *join_conditions),
        )
        .group_by(RestaurantModel.id)
        .order_by(
            total_cents.desc(),
            RestaurantModel.created_at.asc(),
            RestaurantModel.id.asc(),
        )
    )


def _as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))
