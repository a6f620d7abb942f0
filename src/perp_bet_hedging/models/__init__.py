# -*- coding: utf-8 -*-
"""Domain models."""

from perp_bet_hedging.models.pnl_series import PnLPoint, PnLSeries
from perp_bet_hedging.models.price_domain import MAX_SAMPLE_POINTS, PriceDomain
from perp_bet_hedging.models.strategy_parameters import StrategyParameters

__all__ = [
    "MAX_SAMPLE_POINTS",
    "PnLPoint",
    "PnLSeries",
    "PriceDomain",
    "StrategyParameters",
]
