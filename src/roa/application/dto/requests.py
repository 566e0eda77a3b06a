from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class CreateRestaurantRequest(CamelBaseModel):
    name: str
    cuisine: str
    location: str


class CreateOrderRequest(CamelBaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    restaurant_id: str
    amount: str
    timestamp: str
