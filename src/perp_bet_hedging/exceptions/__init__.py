"""Exceptions subpackage."""

from perp_bet_hedging.exceptions.exceptions import (
    DashboardApiError,
    HedgingError,
    InvalidPriceDomainError,
    InvalidStrategyParametersError,
)

__all__ = [
    "DashboardApiError",
    "HedgingError",
    "InvalidPriceDomainError",
    "InvalidStrategyParametersError",
]
