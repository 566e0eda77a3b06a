from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.engine import Engine

from roa.api.dependencies import get_store_engine
from roa.api.query_params import page_params, restaurant_filter_params
from roa.application.dto.requests import CreateRestaurantRequest
from roa.application.dto.responses import RestaurantResponse, RestaurantWithStatsResponse
from roa.application.use_cases.create_restaurant import CreateRestaurant
from roa.application.use_cases.delete_restaurant import DeleteRestaurant
from roa.application.use_cases.get_restaurant import GetRestaurant
from roa.application.use_cases.list_restaurants import ListRestaurants
from roa.domain.analytics.filters import Page, RestaurantFilter
from roa.domain.common.ids import RestaurantId
from roa.infrastructure.db.repositories.analytics_repo import SqlAlchemyAnalyticsRepository
from roa.infrastructure.db.repositories.restaurant_repo import SqlAlchemyRestaurantRepository

router = APIRouter(prefix="/api/restaurants", tags=["restaurants"])


def _list_restaurants_use_case(engine: Engine) -> ListRestaurants:
    return ListRestaurants(analytics_repository=SqlAlchemyAnalyticsRepository(engine))


def _get_restaurant_use_case(engine: Engine) -> GetRestaurant:
    return GetRestaurant(restaurant_repository=SqlAlchemyRestaurantRepository(engine))


def _create_restaurant_use_case(engine: Engine) -> CreateRestaurant:
    return CreateRestaurant(restaurant_repository=SqlAlchemyRestaurantRepository(engine))


def _delete_restaurant_use_case(engine: Engine) -> DeleteRestaurant:
    return DeleteRestaurant(restaurant_repository=SqlAlchemyRestaurantRepository(engine))


@router.get("", response_model=list[RestaurantWithStatsResponse])
def list_restaurants(
    restaurant_filter: RestaurantFilter = Depends(restaurant_filter_params),
    page: Page = Depends(page_params),
    engine: Engine = Depends(get_store_engine),
) -> list[RestaurantWithStatsResponse]:
    return _list_restaurants_use_case(engine).execute(
        restaurant_filter=restaurant_filter,
        page=page,
    )


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
def get_restaurant(
    restaurant_id: str,
    engine: Engine = Depends(get_store_engine),
) -> RestaurantResponse:
    return _get_restaurant_use_case(engine).execute(restaurant_id=RestaurantId(restaurant_id))


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(
    request_dto: CreateRestaurantRequest,
    engine: Engine = Depends(get_store_engine),
) -> RestaurantResponse:
    return _create_restaurant_use_case(engine).execute(request_dto=request_dto)


@router.delete(
    "/{restaurant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_restaurant(
    restaurant_id: str,
    engine: Engine = Depends(get_store_engine),
) -> Response:
    _delete_restaurant_use_case(engine).execute(restaurant_id=RestaurantId(restaurant_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
