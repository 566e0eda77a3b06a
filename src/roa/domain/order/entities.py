from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from roa.domain.common.ids import OrderId, RestaurantId
from roa.domain.common.money import Money

# numeric(10, 2)
MAX_AMOUNT_CENTS = 9_999_999_999


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    restaurant_id: RestaurantId
    amount: Money
    timestamp: datetime
    created_at: datetime

    def __post_init__(self) -> None:
        if self.amount.amount_cents <= 0:
            raise ValueError("amount must be positive")
        if self.amount.amount_cents > MAX_AMOUNT_CENTS:
            raise ValueError("amount exceeds the supported range")

    @property
    def hour_of_day(self) -> int:
        return self.timestamp.hour


def create_order(
    order_id: OrderId,
    restaurant_id: RestaurantId,
    amount: Money,
    timestamp: datetime,
    now: datetime,
) -> Order:
    return Order(
        order_id=order_id,
        restaurant_id=restaurant_id,
        amount=amount,
        timestamp=timestamp,
        created_at=now,
    )
