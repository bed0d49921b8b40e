from __future__ import annotations

from typing import Any

from shortlink_client.endpoints import EndpointRegistry
from shortlink_client.http import HttpClient
from shortlink_client.models import DashboardStats, LinkStats
from shortlink_client.results import CallResult


class AnalyticsApi:
    def __init__(self, endpoints: EndpointRegistry, http_client: HttpClient):
        self._endpoints = endpoints
        self._http_client = http_client

    def dashboard(self, days: int | None = None) -> CallResult[DashboardStats]:
        result = self._http_client.get(self._endpoints.dashboard_stats, params={"days": days})
        return result.map(DashboardStats.from_dict)

    def link_stats(self, link_id: int, days: int | None = None) -> CallResult[LinkStats]:
        result = self._http_client.get(self._endpoints.link_stats(link_id), params={"days": days})
        return result.map(LinkStats.from_dict)

    def realtime_clicks(self, link_id: int) -> CallResult[Any]:
        return self._http_client.get(self._endpoints.link_realtime_clicks(link_id))
