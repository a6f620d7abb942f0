# -*- coding: utf-8 -*-
"""Dashboard REST API contracts: schemas, request builders and envelope parsing (no transport)."""

from perp_bet_hedging.clients.dashboard_api.pagination import Page, parse_page, unwrap_response
from perp_bet_hedging.clients.dashboard_api.queries import (
    AGGREGATED_SWEEPS_PATH,
    DAILY_METRICS_PATH,
    SWEEPS_PATH,
    USERS_DAILY_METRICS_PATH,
    DashboardApiRequest,
    aggregated_sweeps_request,
    daily_metrics_request,
    sweeps_request,
    user_daily_metrics_path,
    user_daily_metrics_request,
    users_daily_metrics_request,
)
from perp_bet_hedging.clients.dashboard_api.schema import (
    DailyMetricSchema,
    SweepAggregatedSchema,
    SweepSchema,
    UserDailyMetricSchema,
)

__all__ = [
    "AGGREGATED_SWEEPS_PATH",
    "DAILY_METRICS_PATH",
    "SWEEPS_PATH",
    "USERS_DAILY_METRICS_PATH",
    "DailyMetricSchema",
    "DashboardApiRequest",
    "Page",
    "SweepAggregatedSchema",
    "SweepSchema",
    "UserDailyMetricSchema",
    "aggregated_sweeps_request",
    "daily_metrics_request",
    "parse_page",
    "sweeps_request",
    "unwrap_response",
    "user_daily_metrics_path",
    "user_daily_metrics_request",
    "users_daily_metrics_request",
]
