from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.engine import Engine

from roa.api.dependencies import get_store_engine
from roa.api.query_params import order_bounds_params, page_params
from roa.application.dto.requests import CreateOrderRequest
from roa.application.dto.responses import OrderResponse, OrderWithRestaurantResponse
from roa.application.use_cases.create_order import CreateOrder
from roa.application.use_cases.list_orders import ListOrders
from roa.domain.analytics.filters import OrderFilter, Page
from roa.domain.common.ids import RestaurantId
from roa.infrastructure.db.repositories.analytics_repo import SqlAlchemyAnalyticsRepository
from roa.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository
from roa.infrastructure.db.repositories.restaurant_repo import SqlAlchemyRestaurantRepository

router = APIRouter(prefix="/api/orders", tags=["orders"])


def _list_orders_use_case(engine: Engine) -> ListOrders:
    return ListOrders(analytics_repository=SqlAlchemyAnalyticsRepository(engine))


def _create_order_use_case(engine: Engine) -> CreateOrder:
    return CreateOrder(
        restaurant_repository=SqlAlchemyRestaurantRepository(engine),
        order_repository=SqlAlchemyOrderRepository(engine),
    )


@router.get("", response_model=list[OrderWithRestaurantResponse])
def list_orders(
    restaurant_id: str | None = Query(default=None, alias="restaurantId"),
    order_filter: OrderFilter = Depends(order_bounds_params),
    page: Page = Depends(page_params),
    engine: Engine = Depends(get_store_engine),
) -> list[OrderWithRestaurantResponse]:
    if restaurant_id and restaurant_id.strip():
        order_filter = replace(order_filter, restaurant_id=RestaurantId(restaurant_id.strip()))
    return _list_orders_use_case(engine).execute(order_filter=order_filter, page=page)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    request_dto: CreateOrderRequest,
    engine: Engine = Depends(get_store_engine),
) -> OrderResponse:
    return _create_order_use_case(engine).execute(request_dto=request_dto)
