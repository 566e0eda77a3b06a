from __future__ import annotations

import logging
import random
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Callable
from uuid import uuid4

from roa.application.dto.responses import SeedCountsResponse, SeedResponse
from roa.application.metrics.analytics import record_seed_run
from roa.application.ports.repositories import DatasetRepository
from roa.domain.common.ids import OrderId, RestaurantId
from roa.domain.common.money import Money
from roa.domain.order.entities import Order, create_order
from roa.domain.restaurant.entities import Restaurant, create_restaurant

logger = logging.getLogger(__name__)

SAMPLE_RESTAURANTS: list[tuple[str, str, str]] = [
    ("Mario's Pizza Palace", "italian", "Downtown"),
    ("Sakura Sushi", "japanese", "Midtown"),
    ("El Taco Loco", "mexican", "South Side"),
    ("Burger Haven", "american", "Uptown"),
    ("Golden Dragon", "chinese", "Downtown"),
    ("Spice Garden", "indian", "Midtown"),
]

SEED_DAYS = 30
MIN_ORDERS_PER_DAY = 5
MAX_ORDERS_PER_DAY = 15
FIRST_HOUR = 8
LAST_HOUR = 23
MIN_AMOUNT_CENTS = 1_000
MAX_AMOUNT_CENTS = 15_000


class SeedDatabase:
    """Replaces the whole dataset with randomized demo fixtures."""

    def __init__(
        self,
        dataset_repository: DatasetRepository,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        store_zone: tzinfo | None = None,
    ) -> None:
        self._dataset_repository = dataset_repository
        self._rng = rng or random.Random()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._store_zone = store_zone or timezone.utc

    def execute(self) -> SeedResponse:
        now = self._clock()
        restaurants = [
            create_restaurant(
                restaurant_id=RestaurantId(f"rst_{uuid4().hex}"),
                name=name,
                cuisine=cuisine,
                location=location,
                now=now,
            )
            for name, cuisine, location in SAMPLE_RESTAURANTS
        ]
        orders = self._sample_orders(restaurants, now)

        self._dataset_repository.replace_all(restaurants=restaurants, orders=orders)

        record_seed_run()
        logger.info(
            "seed_complete",
            extra={"restaurants": len(restaurants), "orders": len(orders)},
        )
        return SeedResponse(
            message="Database seeded successfully",
            data=SeedCountsResponse(restaurants=len(restaurants), orders=len(orders)),
        )

    def _sample_orders(self, restaurants: list[Restaurant], now: datetime) -> list[Order]:
        # naive timestamps are wall-clock time in the store zone, never after now
        local_now = now.astimezone(self._store_zone).replace(tzinfo=None)
        latest_day = local_now.date()
        if local_now.hour < FIRST_HOUR:
            latest_day -= timedelta(days=1)

        orders: list[Order] = []
        for day in range(SEED_DAYS):
            business_day = latest_day - timedelta(days=day)
            for _ in range(self._rng.randint(MIN_ORDERS_PER_DAY, MAX_ORDERS_PER_DAY)):
                restaurant = self._rng.choice(restaurants)
                orders.append(
                    create_order(
                        order_id=OrderId(f"ord_{uuid4().hex}"),
                        restaurant_id=restaurant.restaurant_id,
                        amount=Money(
                            amount_cents=self._rng.randint(MIN_AMOUNT_CENTS, MAX_AMOUNT_CENTS)
                        ),
                        timestamp=self._sample_time(business_day, local_now),
                        now=now,
                    )
                )
        return orders

    def _sample_time(self, business_day: date, local_now: datetime) -> datetime:
        last_hour = LAST_HOUR
        if business_day == local_now.date():
            last_hour = min(LAST_HOUR, local_now.hour)
        hour = self._rng.randint(FIRST_HOUR, last_hour)
        last_minute = 59
        if business_day == local_now.date() and hour == local_now.hour:
            last_minute = local_now.minute
        return datetime.combine(business_day, time(hour, self._rng.randint(0, last_minute)))
