from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from roa.application.dto.requests import CreateRestaurantRequest
from roa.application.dto.responses import RestaurantResponse
from roa.application.errors import ValidationError
from roa.application.mappers.restaurant_mapper import to_restaurant_response
from roa.application.metrics.analytics import record_restaurant_created
from roa.application.ports.repositories import RestaurantRepository
from roa.domain.common.ids import RestaurantId
from roa.domain.restaurant.entities import create_restaurant

logger = logging.getLogger(__name__)


class CreateRestaurant:
    def __init__(
        self,
        restaurant_repository: RestaurantRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._restaurant_repository = restaurant_repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self, request_dto: CreateRestaurantRequest) -> RestaurantResponse:
        invalid_fields = [
            field_name
            for field_name in ("name", "cuisine", "location")
            if not getattr(request_dto, field_name).strip()
        ]
        if invalid_fields:
            raise ValidationError(invalid_fields)

        restaurant = create_restaurant(
            restaurant_id=RestaurantId(f"rst_{uuid4().hex}"),
            name=request_dto.name,
            cuisine=request_dto.cuisine,
            location=request_dto.location,
            now=self._clock(),
        )
        self._restaurant_repository.add(restaurant)

        record_restaurant_created()
        logger.info("restaurant_created", extra={"restaurant_id": str(restaurant.restaurant_id)})
        return to_restaurant_response(restaurant)
