from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


def _restaurant(client: TestClient, name: str = "Mario's Pizza Palace") -> str:
    response = client.post(
        "/api/restaurants",
        json={"name": name, "cuisine": "italian", "location": "Downtown"},
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _order(client: TestClient, restaurant_id: str, amount: str, timestamp: str) -> dict:
    response = client.post(
        "/api/orders",
        json={"restaurantId": restaurant_id, "amount": amount, "timestamp": timestamp},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def r1(api_client: TestClient) -> str:
    restaurant_id = _restaurant(api_client)
    _order(api_client, restaurant_id, "10.00", "2024-01-01T09:00:00Z")
    _order(api_client, restaurant_id, "20.00", "2024-01-01T21:00:00Z")
    return restaurant_id


def test_create_order_returns_stored_amount(api_client: TestClient) -> None:
    restaurant_id = _restaurant(api_client)

    created = _order(api_client, restaurant_id, "49.99", "2024-01-01T12:30:00Z")

    assert created["id"].startswith("ord_")
    assert created["restaurantId"] == restaurant_id
    assert created["amount"] == "49.99"
    assert datetime.fromisoformat(created["timestamp"]).hour == 12

    listed = api_client.get("/api/orders", params={"restaurantId": restaurant_id}).json()
    assert [item["amount"] for item in listed] == ["49.99"]
    assert listed[0]["restaurant"]["id"] == restaurant_id


def test_create_order_for_unknown_restaurant_is_400(api_client: TestClient) -> None:
    response = api_client.post(
        "/api/orders",
        json={"restaurantId": "rst_missing", "amount": "10.00", "timestamp": "2024-01-01T09:00:00Z"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"fields": ["restaurantId"]}


def test_create_order_bad_amount_is_400(api_client: TestClient) -> None:
    restaurant_id = _restaurant(api_client)
    response = api_client.post(
        "/api/orders",
        json={"restaurantId": restaurant_id, "amount": "abc", "timestamp": "2024-01-01T09:00:00Z"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["details"]["fields"] == ["amount"]


def test_list_orders_applies_every_filter(api_client: TestClient, r1: str) -> None:
    other = _restaurant(api_client, "Burger Haven")
    _order(api_client, other, "15.00", "2024-01-01T09:30:00Z")

    morning = api_client.get(
        "/api/orders", params={"restaurantId": r1, "startHour": 8, "endHour": 10}
    ).json()
    assert [item["amount"] for item in morning] == ["10.00"]

    pricey = api_client.get("/api/orders", params={"minAmount": "15"}).json()
    assert [item["amount"] for item in pricey] == ["20.00", "15.00"]

    dated = api_client.get(
        "/api/orders",
        params={"startDate": "2024-01-01T09:15:00Z", "endDate": "2024-01-01"},
    ).json()
    assert [item["amount"] for item in dated] == ["20.00", "15.00"]

    paged = api_client.get("/api/orders", params={"limit": 1, "offset": 1}).json()
    assert len(paged) == 1


def test_list_orders_rejects_bad_filters(api_client: TestClient) -> None:
    bad_date = api_client.get("/api/orders", params={"startDate": "not-a-date"})
    assert bad_date.status_code == 400
    assert bad_date.json()["error"]["details"] == {"fields": ["startDate"]}

    bad_amount = api_client.get("/api/orders", params={"maxAmount": "ten"})
    assert bad_amount.status_code == 400
    assert bad_amount.json()["error"]["details"] == {"fields": ["maxAmount"]}

    bad_hour = api_client.get("/api/orders", params={"startHour": 24, "endHour": 2})
    assert bad_hour.status_code == 400


def test_out_of_range_inputs_are_handled(api_client: TestClient, r1: str) -> None:
    huge_min = api_client.get("/api/orders", params={"minAmount": "100000000000000000000"})
    assert huge_min.status_code == 200
    assert huge_min.json() == []

    huge_max = api_client.get(f"/api/restaurants/{r1}/analytics", params={"maxAmount": "1e30"})
    assert huge_max.status_code == 200
    assert huge_max.json()["avgOrderValue"] == "15"

    far_past = api_client.get("/api/orders", params={"startDate": "0001-01-01T00:00:00+01:00"})
    assert far_past.status_code == 400
    assert far_past.json()["error"]["details"] == {"fields": ["startDate"]}

    response = api_client.post(
        "/api/orders",
        json={"restaurantId": r1, "amount": "10.00", "timestamp": "0001-01-01T00:00:00+01:00"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"fields": ["timestamp"]}


def test_restaurant_analytics_scenario(api_client: TestClient, r1: str) -> None:
    response = api_client.get(f"/api/restaurants/{r1}/analytics")

    assert response.status_code == 200
    assert response.json() == {
        "dailyOrders": [{"date": "2024-01-01", "count": 2}],
        "dailyRevenue": [{"date": "2024-01-01", "revenue": "30.00"}],
        "avgOrderValue": "15",
        "peakHours": [{"hour": 9, "count": 1}, {"hour": 21, "count": 1}],
    }


def test_restaurant_analytics_empty_hour_window(api_client: TestClient, r1: str) -> None:
    response = api_client.get(
        f"/api/restaurants/{r1}/analytics", params={"startHour": 22, "endHour": 23}
    )

    assert response.json() == {
        "dailyOrders": [],
        "dailyRevenue": [],
        "avgOrderValue": "0",
        "peakHours": [],
    }


def test_restaurant_analytics_ignores_single_hour_bound(api_client: TestClient, r1: str) -> None:
    unfiltered = api_client.get(f"/api/restaurants/{r1}/analytics").json()
    start_only = api_client.get(
        f"/api/restaurants/{r1}/analytics", params={"startHour": 22}
    ).json()
    assert start_only == unfiltered


def test_top_restaurants_and_dashboard(api_client: TestClient, r1: str) -> None:
    idle = _restaurant(api_client, "Golden Dragon")

    top = api_client.get("/api/analytics/top-restaurants").json()
    assert [item["id"] for item in top] == [r1, idle]
    assert top[0]["totalRevenue"] == "30.00"
    assert top[0]["totalOrders"] == 2
    assert top[0]["avgOrderValue"] == "15"
    assert (top[1]["totalRevenue"], top[1]["totalOrders"], top[1]["avgOrderValue"]) == (
        "0",
        0,
        "0",
    )

    assert len(api_client.get("/api/analytics/top-restaurants", params={"limit": 1}).json()) == 1
    assert api_client.get("/api/analytics/top-restaurants", params={"limit": 0}).status_code == 400

    stats = api_client.get("/api/dashboard/stats").json()
    assert stats == {
        "totalRevenue": "30.00",
        "totalOrders": 2,
        "avgOrderValue": "15",
        "activeRestaurants": 2,
    }


def test_seed_endpoint_replaces_the_dataset(api_client: TestClient, r1: str) -> None:
    response = api_client.post("/api/seed")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Database seeded successfully"
    assert body["data"]["restaurants"] == 6

    stats = api_client.get("/api/dashboard/stats").json()
    assert stats["activeRestaurants"] == 6
    assert stats["totalOrders"] == body["data"]["orders"]
    assert api_client.get(f"/api/restaurants/{r1}").status_code == 404


def test_unknown_route_and_method_use_error_envelope(api_client: TestClient) -> None:
    missing = api_client.get("/api/nothing-here")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"

    wrong_method = api_client.put("/api/orders")
    assert wrong_method.status_code == 405
    assert wrong_method.json()["error"]["code"] == "METHOD_NOT_ALLOWED"
