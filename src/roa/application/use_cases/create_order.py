from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from roa.application.dto.requests import CreateOrderRequest
from roa.application.dto.responses import OrderResponse
from roa.application.errors import ValidationError
from roa.application.mappers.order_mapper import to_order_response
from roa.application.metrics.analytics import record_order_created
from roa.application.parsing import parse_timestamp
from roa.application.ports.repositories import (
    OrderRepository,
    RestaurantRepository,
    UnknownRestaurantReferenceError,
)
from roa.domain.common.ids import OrderId, RestaurantId
from roa.domain.common.money import Money
from roa.domain.order.entities import MAX_AMOUNT_CENTS, create_order

logger = logging.getLogger(__name__)


class CreateOrder:
    def __init__(
        self,
        restaurant_repository: RestaurantRepository,
        order_repository: OrderRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._restaurant_repository = restaurant_repository
        self._order_repository = order_repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self, request_dto: CreateOrderRequest) -> OrderResponse:
        invalid_fields: list[str] = []

        restaurant_id = RestaurantId(request_dto.restaurant_id.strip())
        if not restaurant_id:
            invalid_fields.append("restaurantId")

        amount: Money | None = None
        try:
            amount = Money.parse(request_dto.amount)
        except ValueError:
            invalid_fields.append("amount")
        else:
            if amount.amount_cents <= 0 or amount.amount_cents > MAX_AMOUNT_CENTS:
                invalid_fields.append("amount")

        timestamp: datetime | None = None
        try:
            timestamp = parse_timestamp(request_dto.timestamp)
        except (ValueError, OverflowError):
            invalid_fields.append("timestamp")

        if invalid_fields or amount is None or timestamp is None:
            raise ValidationError(invalid_fields)

        if not self._restaurant_repository.exists(restaurant_id):
            raise ValidationError(
                ["restaurantId"], message=f"restaurant {restaurant_id} does not exist"
            )

        order = create_order(
            order_id=OrderId(f"ord_{uuid4().hex}"),
            restaurant_id=restaurant_id,
            amount=amount,
            timestamp=timestamp,
            now=self._clock(),
        )
        try:
            order = self._order_repository.add(order)
        except UnknownRestaurantReferenceError as exc:
            raise ValidationError(
                ["restaurantId"], message=f"restaurant {restaurant_id} does not exist"
            ) from exc

        record_order_created(order)
        logger.info(
            "order_created",
            extra={"order_id": str(order.order_id), "restaurant_id": str(restaurant_id)},
        )
        return to_order_response(order)
