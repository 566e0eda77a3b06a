from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from roa.application.dto.responses import (
    AnalyticsResponse,
    DashboardStatsResponse,
    RestaurantWithStatsResponse,
)
from roa.client.api_client import ApiRequestError, OrderTrendsClient

DEFAULT_API_URL = "http://localhost:8000"


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print dashboard totals, top restaurants and per-restaurant analytics."
    )
    parser.add_argument(
        "--base-url",
        default=os.getenv("ROA_API_URL", DEFAULT_API_URL),
        help="API base URL. Defaults to $ROA_API_URL or http://localhost:8000.",
    )
    parser.add_argument("--restaurant-id", help="Show analytics for this restaurant.")
    parser.add_argument("--start-date")
    parser.add_argument("--end-date")
    parser.add_argument("--min-amount")
    parser.add_argument("--max-amount")
    parser.add_argument("--start-hour", type=int)
    parser.add_argument("--end-hour", type=int)
    parser.add_argument("--top", type=int, default=3, help="Number of top restaurants.")
    return parser.parse_args(argv)


def render_dashboard(stats: DashboardStatsResponse, top: list[RestaurantWithStatsResponse]) -> str:
    lines = [
        "Dashboard",
        f"  total revenue      {stats.totalRevenue}",
        f"  total orders       {stats.totalOrders}",
        f"  avg order value    {stats.avgOrderValue}",
        f"  active restaurants {stats.activeRestaurants}",
        "",
        "Top restaurants",
    ]
    if not top:
        lines.append("  (none)")
    for rank, restaurant in enumerate(top, start=1):
        lines.append(
            f"  {rank}. {restaurant.name} ({restaurant.cuisine}, {restaurant.location})"
            f"  revenue={restaurant.totalRevenue} orders={restaurant.totalOrders}"
            f" avg={restaurant.avgOrderValue}"
        )
    return "\n".join(lines)


def render_analytics(restaurant_id: str, analytics: AnalyticsResponse) -> str:
    revenue_by_date = {point.date: point.revenue for point in analytics.dailyRevenue}
    lines = [f"Analytics for {restaurant_id}", f"  avg order value {analytics.avgOrderValue}", ""]
    lines.append("  date        orders  revenue")
    if not analytics.dailyOrders:
        lines.append("  (no orders)")
    for point in analytics.dailyOrders:
        lines.append(f"  {point.date}  {point.count:>6}  {revenue_by_date.get(point.date, '0')}")

    lines.extend(["", "  peak hours"])
    busiest = max((point.count for point in analytics.peakHours), default=0)
    for point in analytics.peakHours:
        bar = "#" * round(20 * point.count / busiest) if busiest else ""
        lines.append(f"  {point.hour:02d}:00 {point.count:>5} {bar}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None, client: OrderTrendsClient | None = None) -> int:
    args = _parse_args(argv)
    api = client or OrderTrendsClient(base_url=args.base_url)
    try:
        if args.restaurant_id:
            analytics = api.get_restaurant_analytics(
                args.restaurant_id,
                start_date=args.start_date,
                end_date=args.end_date,
                min_amount=args.min_amount,
                max_amount=args.max_amount,
                start_hour=args.start_hour,
                end_hour=args.end_hour,
            )
            print(render_analytics(args.restaurant_id, analytics))
        else:
            stats = api.get_dashboard_stats()
            top = api.get_top_restaurants(
                start_date=args.start_date,
                end_date=args.end_date,
                limit=args.top,
            )
            print(render_dashboard(stats, top))
    except ApiRequestError as exc:
        print(f"request failed: {exc}", file=sys.stderr)
        return 1
    finally:
        if client is None:
            api.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
