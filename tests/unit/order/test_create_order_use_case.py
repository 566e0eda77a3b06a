from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from roa.application.dto.requests import CreateOrderRequest
from roa.application.errors import ValidationError
from roa.application.ports.repositories import UnknownRestaurantReferenceError
from roa.application.use_cases.create_order import CreateOrder
from roa.domain.common.ids import RestaurantId
from roa.domain.order.entities import Order

NOW = datetime(2024, 1, 2, tzinfo=timezone.utc)


class FakeRestaurantRepository:
    def __init__(self, known: set[str]) -> None:
        self._known = known

    def exists(self, restaurant_id: RestaurantId) -> bool:
        return str(restaurant_id) in self._known


class FakeOrderRepository:
    def __init__(self, fail_reference: bool = False) -> None:
        self.saved: list[Order] = []
        self._fail_reference = fail_reference

    def add(self, order: Order) -> Order:
        if self._fail_reference:
            raise UnknownRestaurantReferenceError(str(order.restaurant_id))
        self.saved.append(order)
        return order


def _use_case(order_repository: FakeOrderRepository | None = None) -> CreateOrder:
    return CreateOrder(
        restaurant_repository=FakeRestaurantRepository({"rst_1"}),
        order_repository=order_repository or FakeOrderRepository(),
        clock=lambda: NOW,
    )


def test_create_order_happy_path() -> None:
    order_repository = FakeOrderRepository()

    response = _use_case(order_repository).execute(
        CreateOrderRequest(
            restaurant_id="rst_1", amount="49.99", timestamp="2024-01-01T09:00:00Z"
        )
    )

    assert response.id.startswith("ord_")
    assert response.amount == "49.99"
    assert response.timestamp == datetime(2024, 1, 1, 9, tzinfo=timezone.utc)
    assert response.createdAt == NOW
    assert order_repository.saved[0].amount.amount_cents == 4999


def test_create_order_accepts_numeric_amount_and_offset_timestamp() -> None:
    request = CreateOrderRequest.model_validate(
        {"restaurantId": "rst_1", "amount": 12.5, "timestamp": "2024-01-01T09:00:00+02:00"}
    )

    response = _use_case().execute(request)

    assert response.amount == "12.50"
    assert response.timestamp.utcoffset() == timedelta(hours=2)


@pytest.mark.parametrize(
    ("payload", "fields"),
    [
        ({"restaurantId": "rst_1", "amount": "abc", "timestamp": "2024-01-01T09:00:00Z"}, ["amount"]),
        ({"restaurantId": "rst_1", "amount": "0", "timestamp": "2024-01-01T09:00:00Z"}, ["amount"]),
        ({"restaurantId": "rst_1", "amount": "-3", "timestamp": "2024-01-01T09:00:00Z"}, ["amount"]),
        ({"restaurantId": "rst_1", "amount": "1.999", "timestamp": "2024-01-01T09:00:00Z"}, ["amount"]),
        ({"restaurantId": "rst_1", "amount": "10", "timestamp": "yesterday"}, ["timestamp"]),
        (
            {"restaurantId": "rst_1", "amount": "10", "timestamp": "0001-01-01T00:00:00+01:00"},
            ["timestamp"],
        ),
        ({"restaurantId": " ", "amount": "x", "timestamp": ""}, ["restaurantId", "amount", "timestamp"]),
    ],
)
def test_create_order_reports_invalid_fields(payload: dict[str, str], fields: list[str]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        _use_case().execute(CreateOrderRequest.model_validate(payload))
    assert exc_info.value.fields == fields


def test_create_order_unknown_restaurant_is_validation_error() -> None:
    order_repository = FakeOrderRepository()
    with pytest.raises(ValidationError) as exc_info:
        _use_case(order_repository).execute(
            CreateOrderRequest(
                restaurant_id="rst_missing", amount="10.00", timestamp="2024-01-01T09:00:00Z"
            )
        )
    assert exc_info.value.fields == ["restaurantId"]
    assert order_repository.saved == []


def test_create_order_restaurant_removed_before_insert() -> None:
    with pytest.raises(ValidationError) as exc_info:
        _use_case(FakeOrderRepository(fail_reference=True)).execute(
            CreateOrderRequest(
                restaurant_id="rst_1", amount="10.00", timestamp="2024-01-01T09:00:00Z"
            )
        )
    assert exc_info.value.fields == ["restaurantId"]
