from __future__ import annotations

import logging
import os
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram
from sqlalchemy.engine import Engine
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from roa.api.error_handling import register_exception_handlers
from roa.api.middleware.request_id import RequestIDMiddleware
from roa.api.routes.analytics import router as analytics_router
from roa.api.routes.health import router as health_router
from roa.api.routes.metrics import router as metrics_router
from roa.api.routes.orders import router as orders_router
from roa.api.routes.restaurants import router as restaurants_router
from roa.api.routes.seed import router as seed_router
from roa.infrastructure.observability.logging_config import configure_logging
from roa.infrastructure.observability.otel import configure_otel, instrument_store

logger = logging.getLogger("roa.api.access")

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "route", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "route"],
)


def _cors_allow_origins() -> list[str]:
    env = os.getenv("APP_ENV", "dev").lower()

    # Dev/test: unblock everything (no credentials allowed)
    if env in {"dev", "test"}:
        return ["*"]

    default_value = "http://localhost:5173"
    raw_value = os.getenv("CORS_ALLOW_ORIGINS", default_value)
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


def _route_template(request: Request) -> str:
    # label by template so restaurant ids do not explode metric cardinality
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - started) * 1000
            route = _route_template(request)
            REQUEST_COUNT.labels(method=method, route=route, status_code="500").inc()
            REQUEST_LATENCY.labels(method=method, route=route).observe(duration_ms / 1000)
            logger.exception(
                "request_error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000
        route = _route_template(request)
        REQUEST_COUNT.labels(
            method=method,
            route=route,
            status_code=str(response.status_code),
        ).inc()
        REQUEST_LATENCY.labels(method=method, route=route).observe(duration_ms / 1000)
        logger.info(
            "request_complete",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response


def create_app(engine: Engine | None = None) -> FastAPI:
    """Build the API around a store engine; without one it is built from DATABASE_URL."""
    configure_logging()

    app = FastAPI(title="Restaurant Order Analytics", version="0.1.0")
    app.state.engine = engine
    if engine is not None:
        instrument_store(engine)

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(restaurants_router)
    app.include_router(analytics_router)
    app.include_router(orders_router)
    app.include_router(seed_router)

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_allow_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    configure_otel(app)
    return app


app = create_app()
