from __future__ import annotations

from prometheus_client import Counter, Histogram

from roa.domain.order.entities import Order

RESTAURANTS_CREATED_TOTAL = Counter(
    "roa_restaurants_created_total",
    "Total number of restaurants created.",
)

RESTAURANTS_DELETED_TOTAL = Counter(
    "roa_restaurants_deleted_total",
    "Total number of restaurants deleted.",
)

RESTAURANT_DELETE_BLOCKED_TOTAL = Counter(
    "roa_restaurant_delete_blocked_total",
    "Total number of restaurant deletions rejected.",
    ["reason"],
)

ORDERS_CREATED_TOTAL = Counter(
    "roa_orders_created_total",
    "Total number of orders recorded.",
    ["restaurant_id"],
)

ORDER_AMOUNT_DOLLARS = Histogram(
    "roa_order_amount_dollars",
    "Distribution of recorded order amounts.",
    buckets=(5, 10, 25, 50, 75, 100, 150, 250, 500, 1000),
)

ANALYTICS_QUERIES_TOTAL = Counter(
    "roa_analytics_queries_total",
    "Total number of analytics queries served.",
    ["query"],
)

SEED_RUNS_TOTAL = Counter(
    "roa_seed_runs_total",
    "Total number of fixture seed runs.",
)


def record_restaurant_created() -> None:
    RESTAURANTS_CREATED_TOTAL.inc()


def record_restaurant_deleted() -> None:
    RESTAURANTS_DELETED_TOTAL.inc()


def record_restaurant_delete_blocked(reason: str) -> None:
    RESTAURANT_DELETE_BLOCKED_TOTAL.labels(reason=reason).inc()


def record_order_created(order: Order) -> None:
    ORDERS_CREATED_TOTAL.labels(restaurant_id=str(order.restaurant_id)).inc()
    ORDER_AMOUNT_DOLLARS.observe(order.amount.amount_cents / 100)


def record_analytics_query(query: str) -> None:
    ANALYTICS_QUERIES_TOTAL.labels(query=query).inc()


def record_seed_run() -> None:
    SEED_RUNS_TOTAL.inc()
