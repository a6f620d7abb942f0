"""Services: hedging P&L engine and chart builder."""

from perp_bet_hedging.services.chart import HedgingChart, HedgingChartBuilder
from perp_bet_hedging.services.pnl import HedgingPnLEngine, PnLBreakdown

__all__ = [
    "HedgingChart",
    "HedgingChartBuilder",
    "HedgingPnLEngine",
    "PnLBreakdown",
]
