from __future__ import annotations

from roa.application.dto.responses import RestaurantResponse
from roa.application.errors import RestaurantNotFoundError
from roa.application.mappers.restaurant_mapper import to_restaurant_response
from roa.application.ports.repositories import RestaurantRepository
from roa.domain.common.ids import RestaurantId


class GetRestaurant:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, restaurant_id: RestaurantId) -> RestaurantResponse:
        restaurant = self._restaurant_repository.get(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(f"restaurant {restaurant_id} not found")
        return to_restaurant_response(restaurant)
