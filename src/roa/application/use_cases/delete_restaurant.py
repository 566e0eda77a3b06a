from __future__ import annotations

import logging

from roa.application.errors import RestaurantHasOrdersError, RestaurantNotFoundError
from roa.application.metrics.analytics import (
    record_restaurant_delete_blocked,
    record_restaurant_deleted,
)
from roa.application.ports.repositories import RestaurantInUseError, RestaurantRepository
from roa.domain.common.ids import RestaurantId

logger = logging.getLogger(__name__)


class DeleteRestaurant:
    """Deletes a restaurant that has no recorded orders."""

    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, restaurant_id: RestaurantId) -> None:
        if not self._restaurant_repository.exists(restaurant_id):
            raise RestaurantNotFoundError(f"restaurant {restaurant_id} not found")

        if self._restaurant_repository.has_orders(restaurant_id):
            raise self._blocked(restaurant_id)

        try:
            deleted = self._restaurant_repository.delete(restaurant_id)
        except RestaurantInUseError as exc:
            # an order landed between the check and the delete
            raise self._blocked(restaurant_id) from exc

        if not deleted:
            raise RestaurantNotFoundError(f"restaurant {restaurant_id} not found")

        record_restaurant_deleted()
        logger.info("restaurant_deleted", extra={"restaurant_id": str(restaurant_id)})

    def _blocked(self, restaurant_id: RestaurantId) -> RestaurantHasOrdersError:
        record_restaurant_delete_blocked(reason="has_orders")
        logger.info("restaurant_delete_blocked", extra={"restaurant_id": str(restaurant_id)})
        return RestaurantHasOrdersError(
            f"restaurant {restaurant_id} has orders and cannot be deleted"
        )
