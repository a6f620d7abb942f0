# -*- coding: utf-8 -*-
"""Request builders for the dashboard REST API.

Pure: each builder validates filters and returns the path and query parameters,
with the same defaults the dashboard uses. Sending the request is up to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, get_args
from urllib.parse import urlencode

from perp_bet_hedging.clients.dashboard_api.schema import (
    AggregationPeriod,
    MarketType,
    SortDirection,
    SweepSortField,
)
from perp_bet_hedging.exceptions import DashboardApiError
from perp_bet_hedging.utils.validation import is_hex_address

SWEEPS_PATH = "/api/sweeps"
AGGREGATED_SWEEPS_PATH = "/api/sweeps/aggregated"
DAILY_METRICS_PATH = "/api/sweeps/daily-metrics"
USERS_DAILY_METRICS_PATH = "/api/users/daily-metrics"


def user_daily_metrics_path(address: str) -> str:
    return f"/api/users/{address}/daily-metrics"


@dataclass(frozen=True)
class DashboardApiRequest:
    """GET request: path relative to the API base URL plus ordered query parameters."""

    path: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    def url(self, base_url: str) -> str:
        """Full URL against base_url (trailing slash tolerated)."""
        url = f"{base_url.rstrip('/')}{self.path}"
        return f"{url}?{self.query_string}" if self.params else url


def _check_choice(name: str, value: Optional[str], choices: tuple[str, ...], path: str) -> None:
    if value is not None and value not in choices:
        raise DashboardApiError(
            f"{name}={value!r} is not one of {', '.join(choices)}",
            path=path,
        )


def _paging(limit: int, offset: int, path: str) -> dict[str, str]:
    if limit < 1:
        raise DashboardApiError(f"limit must be >= 1 (got {limit})", path=path)
    if offset < 0:
        raise DashboardApiError(f"offset must be >= 0 (got {offset})", path=path)
    return {"limit": str(limit), "offset": str(offset)}


def _check_address(address: str, path: str) -> str:
    address = address.strip() if isinstance(address, str) else address
    if not is_hex_address(address):
        raise DashboardApiError(f"invalid wallet address {address!r}", path=path)
    return address


def sweeps_request(
    *,
    limit: int = 50,
    offset: int = 0,
    market_slug: Optional[str] = None,
    market_question: Optional[str] = None,
    market_type: Optional[MarketType] = None,
    sort_field: SweepSortField = "created_at",
    sort_direction: SortDirection = "desc",
) -> DashboardApiRequest:
    """Paginated, sortable, filterable sweep history."""
    _check_choice("sort_field", sort_field, get_args(SweepSortField), SWEEPS_PATH)
    _check_choice("sort_direction", sort_direction, get_args(SortDirection), SWEEPS_PATH)
    _check_choice("market_type", market_type, get_args(MarketType), SWEEPS_PATH)
    params = _paging(limit, offset, SWEEPS_PATH)
    params["sort_field"] = sort_field
    params["sort_direction"] = sort_direction
    if market_slug:
        params["market_slug"] = market_slug
    if market_question:
        params["market_question"] = market_question
    if market_type:
        params["market_type"] = market_type
    return DashboardApiRequest(path=SWEEPS_PATH, params=params)


def aggregated_sweeps_request(
    *,
    period: AggregationPeriod = "all",
    market_type: Optional[MarketType] = None,
) -> DashboardApiRequest:
    """Sweep totals over a period."""
    _check_choice("period", period, get_args(AggregationPeriod), AGGREGATED_SWEEPS_PATH)
    _check_choice("market_type", market_type, get_args(MarketType), AGGREGATED_SWEEPS_PATH)
    params = {"period": period}
    if market_type:
        params["market_type"] = market_type
    return DashboardApiRequest(path=AGGREGATED_SWEEPS_PATH, params=params)


def daily_metrics_request(*, limit: int = 30, offset: int = 0) -> DashboardApiRequest:
    """Daily sweep metrics."""
    return DashboardApiRequest(
        path=DAILY_METRICS_PATH,
        params=_paging(limit, offset, DAILY_METRICS_PATH),
    )


def user_daily_metrics_request(
    address: str,
    *,
    limit: int = 50,
    offset: int = 0,
) -> DashboardApiRequest:
    """Daily trading metrics of one wallet."""
    path = user_daily_metrics_path(_check_address(address, "/api/users/{address}/daily-metrics"))
    return DashboardApiRequest(path=path, params=_paging(limit, offset, path))


def users_daily_metrics_request(
    addresses: list[str],
    *,
    limit: int = 50,
    offset: int = 0,
) -> DashboardApiRequest:
    """Daily trading metrics aggregated over several wallets."""
    if not addresses:
        raise DashboardApiError("at least one address is required", path=USERS_DAILY_METRICS_PATH)
    checked = [_check_address(a, USERS_DAILY_METRICS_PATH) for a in addresses]
    params = {"addresses": ",".join(checked)}
    params.update(_paging(limit, offset, USERS_DAILY_METRICS_PATH))
    return DashboardApiRequest(path=USERS_DAILY_METRICS_PATH, params=params)
