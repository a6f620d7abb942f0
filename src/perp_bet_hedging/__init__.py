"""Perp bet hedging: P&L simulation of a Polymarket bet hedged with a Perpdex short."""

from perp_bet_hedging.config import get_settings
from perp_bet_hedging.DI import Container
from perp_bet_hedging.models import PnLPoint, PnLSeries, PriceDomain, StrategyParameters
from perp_bet_hedging.services import HedgingChartBuilder, HedgingPnLEngine

__version__ = "0.1.0"
__all__ = [
    "Container",
    "HedgingChartBuilder",
    "HedgingPnLEngine",
    "PnLPoint",
    "PnLSeries",
    "PriceDomain",
    "StrategyParameters",
    "get_settings",
]
