from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

from roa.application.dto.responses import (
    AnalyticsResponse,
    DashboardStatsResponse,
    OrderResponse,
    OrderWithRestaurantResponse,
    RestaurantResponse,
    RestaurantWithStatsResponse,
    SeedResponse,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_TIMEOUT_SECONDS = 10.0

_RESTAURANTS_WITH_STATS = TypeAdapter(list[RestaurantWithStatsResponse])
_ORDERS_WITH_RESTAURANT = TypeAdapter(list[OrderWithRestaurantResponse])


class ApiRequestError(RuntimeError):
    """Raised for any non-2xx answer from the analytics API."""

    def __init__(self, status_code: int, code: str, message: str) -> None:
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message


def _query(**values: Any) -> dict[str, str]:
    # only supplied filters reach the query string
    return {key: str(value) for key, value in values.items() if value is not None}


class OrderTrendsClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout_seconds)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> OrderTrendsClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def get_restaurants(
        self,
        search: str | None = None,
        cuisine: str | None = None,
        location: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[RestaurantWithStatsResponse]:
        params = _query(
            search=search, cuisine=cuisine, location=location, limit=limit, offset=offset
        )
        return _RESTAURANTS_WITH_STATS.validate_python(
            self._request("GET", "/api/restaurants", params=params)
        )

    def get_restaurant(self, restaurant_id: str) -> RestaurantResponse:
        return self._model(RestaurantResponse, "GET", f"/api/restaurants/{restaurant_id}")

    def create_restaurant(self, name: str, cuisine: str, location: str) -> RestaurantResponse:
        return self._model(
            RestaurantResponse,
            "POST",
            "/api/restaurants",
            json={"name": name, "cuisine": cuisine, "location": location},
        )

    def delete_restaurant(self, restaurant_id: str) -> None:
        self._request("DELETE", f"/api/restaurants/{restaurant_id}")

    def get_orders(
        self,
        restaurant_id: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        min_amount: str | None = None,
        max_amount: str | None = None,
        start_hour: int | None = None,
        end_hour: int | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[OrderWithRestaurantResponse]:
        params = _query(
            restaurantId=restaurant_id,
            startDate=start_date,
            endDate=end_date,
            minAmount=min_amount,
            maxAmount=max_amount,
            startHour=start_hour,
            endHour=end_hour,
            limit=limit,
            offset=offset,
        )
        return _ORDERS_WITH_RESTAURANT.validate_python(
            self._request("GET", "/api/orders", params=params)
        )

    def create_order(self, restaurant_id: str, amount: str, timestamp: str) -> OrderResponse:
        return self._model(
            OrderResponse,
            "POST",
            "/api/orders",
            json={"restaurantId": restaurant_id, "amount": amount, "timestamp": timestamp},
        )

    def get_restaurant_analytics(
        self,
        restaurant_id: str,
        start_date: str | None = None,
        end_date: str | None = None,
        min_amount: str | None = None,
        max_amount: str | None = None,
        start_hour: int | None = None,
        end_hour: int | None = None,
    ) -> AnalyticsResponse:
        params = _query(
            startDate=start_date,
            endDate=end_date,
            minAmount=min_amount,
            maxAmount=max_amount,
            startHour=start_hour,
            endHour=end_hour,
        )
        return self._model(
            AnalyticsResponse,
            "GET",
            f"/api/restaurants/{restaurant_id}/analytics",
            params=params,
        )

    def get_top_restaurants(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int | None = None,
    ) -> list[RestaurantWithStatsResponse]:
        params = _query(startDate=start_date, endDate=end_date, limit=limit)
        return _RESTAURANTS_WITH_STATS.validate_python(
            self._request("GET", "/api/analytics/top-restaurants", params=params)
        )

    def get_dashboard_stats(self) -> DashboardStatsResponse:
        return self._model(DashboardStatsResponse, "GET", "/api/dashboard/stats")

    def seed(self) -> SeedResponse:
        return self._model(SeedResponse, "POST", "/api/seed")

    def _model(self, model: type[ModelT], method: str, path: str, **kwargs: Any) -> ModelT:
        return model.model_validate(self._request(method, path, **kwargs))

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("api_unreachable", extra={"method": method, "path": path})
            raise ApiRequestError(0, "UNREACHABLE", str(exc)) from exc

        if response.is_success:
            if response.status_code == 204 or not response.content:
                return None
            return response.json()

        code, message = "HTTP_ERROR", response.reason_phrase or "request failed"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            code = str(body["error"].get("code") or code)
            message = str(body["error"].get("message") or message)
        raise ApiRequestError(response.status_code, code, message)
