from __future__ import annotations

from roa.application.dto.responses import (
    AnalyticsResponse,
    DailyOrdersPoint,
    DailyRevenuePoint,
    DashboardStatsResponse,
    PeakHourPoint,
)
from roa.domain.analytics.stats import DashboardTotals, RestaurantAnalytics
from roa.domain.common.money import format_total


def to_analytics_response(analytics: RestaurantAnalytics) -> AnalyticsResponse:
    days = sorted(analytics.daily, key=lambda bucket: bucket.day)
    return AnalyticsResponse(
        dailyOrders=[
            DailyOrdersPoint(date=bucket.day.isoformat(), count=bucket.order_count)
            for bucket in days
        ],
        dailyRevenue=[
            DailyRevenuePoint(
                date=bucket.day.isoformat(),
                revenue=format_total(bucket.revenue_cents, bucket.order_count),
            )
            for bucket in days
        ],
        avgOrderValue=analytics.rollup.avg_order_value,
        peakHours=[
            PeakHourPoint(hour=bucket.hour, count=bucket.order_count)
            for bucket in sorted(analytics.peak_hours, key=lambda bucket: bucket.hour)
        ],
    )


def to_dashboard_stats_response(totals: DashboardTotals) -> DashboardStatsResponse:
    return DashboardStatsResponse(
        totalRevenue=totals.rollup.total_revenue,
        totalOrders=totals.rollup.order_count,
        avgOrderValue=totals.rollup.avg_order_value,
        activeRestaurants=totals.active_restaurants,
    )
