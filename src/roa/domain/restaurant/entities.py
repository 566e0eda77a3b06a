from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from roa.domain.common.ids import RestaurantId


@dataclass(frozen=True)
class Restaurant:
    restaurant_id: RestaurantId
    name: str
    cuisine: str
    location: str
    created_at: datetime

    def __post_init__(self) -> None:
        for field_name in ("name", "cuisine", "location"):
            if not getattr(self, field_name).strip():
                raise ValueError(f"{field_name} must not be empty")


def create_restaurant(
    restaurant_id: RestaurantId,
    name: str,
    cuisine: str,
    location: str,
    now: datetime,
) -> Restaurant:
    return Restaurant(
        restaurant_id=restaurant_id,
        name=name.strip(),
        cuisine=cuisine.strip(),
        location=location.strip(),
        created_at=now,
    )
