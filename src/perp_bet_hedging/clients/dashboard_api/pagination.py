# -*- coding: utf-8 -*-
"""Unwrap the dashboard API envelope {success, data: {data, total, limit, offset, hasMore}}."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar

import structlog

from perp_bet_hedging.exceptions import DashboardApiError

T = TypeVar("T")

_logger = structlog.get_logger(__name__)

_PAGE_INT_FIELDS = ("total", "limit", "offset")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items plus the server's pagination metadata."""

    items: list[T]
    total: int
    limit: int
    offset: int
    has_more: bool

    @property
    def next_offset(self) -> Optional[int]:
        """Offset of the next page, or None on the last page."""
        return self.offset + self.limit if self.has_more else None

    @property
    def page_number(self) -> int:
        """1-based page index."""
        return self.offset // self.limit + 1 if self.limit > 0 else 1

    @property
    def page_count(self) -> int:
        if self.limit <= 0:
            return 1
        return max(1, -(-self.total // self.limit))


def unwrap_response(payload: Any, *, path: Optional[str] = None) -> Any:
    """Return payload['data'] if the envelope reports success.

    Raises:
        DashboardApiError: If payload is not a mapping, success is not true, or data is missing.
    """
    if not isinstance(payload, Mapping):
        raise DashboardApiError("response is not a JSON object", path=path)
    if payload.get("success") is not True:
        detail = payload.get("error") or payload.get("message") or "success=false"
        _logger.warning("dashboard_api_response_rejected", path=path, detail=detail)
        raise DashboardApiError(f"dashboard API error: {detail}", path=path, status="error")
    if "data" not in payload:
        raise DashboardApiError("response has no data", path=path)
    return payload["data"]


def parse_page(payload: Any, *, path: Optional[str] = None) -> Page[Any]:
    """Parse a paginated response into a Page.

    Raises:
        DashboardApiError: If the envelope or pagination block is malformed.
    """
    data = unwrap_response(payload, path=path)
    if not isinstance(data, Mapping):
        raise DashboardApiError("pagination block is not an object", path=path)
    items = data.get("data")
    if not isinstance(items, list):
        raise DashboardApiError("pagination block has no data list", path=path)
    meta: dict[str, int] = {}
    for name in _PAGE_INT_FIELDS:
        value = data.get(name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise DashboardApiError(f"pagination field {name!r} is invalid: {value!r}", path=path)
        meta[name] = value
    has_more = data.get("hasMore")
    if not isinstance(has_more, bool):
        raise DashboardApiError(f"pagination field 'hasMore' is invalid: {has_more!r}", path=path)
    return Page(
        items=list(items),
        total=meta["total"],
        limit=meta["limit"],
        offset=meta["offset"],
        has_more=has_more,
    )
