from __future__ import annotations

from roa.application.dto.responses import DashboardStatsResponse
from roa.application.mappers.analytics_mapper import to_dashboard_stats_response
from roa.application.metrics.analytics import record_analytics_query
from roa.application.ports.repositories import AnalyticsRepository


class GetDashboardStats:
    def __init__(self, analytics_repository: AnalyticsRepository) -> None:
        self._analytics_repository = analytics_repository

    def execute(self) -> DashboardStatsResponse:
        totals = self._analytics_repository.dashboard_totals()
        record_analytics_query("dashboard")
        return to_dashboard_stats_response(totals)
