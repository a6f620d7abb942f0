"""Custom exceptions for the hedging engine and dashboard API contracts."""

from __future__ import annotations


class HedgingError(Exception):
    """Base exception for perp-bet-hedging errors."""

    pass


class InvalidStrategyParametersError(HedgingError, ValueError):
    """Raised when StrategyParameters violate the short-hedge contract."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidPriceDomainError(HedgingError, ValueError):
    """Raised when a price domain or sampling grid cannot be built."""

    pass


class DashboardApiError(HedgingError):
    """Raised when a dashboard API request or response does not match its contract."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        status: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.status = status
