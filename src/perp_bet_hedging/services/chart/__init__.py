# -*- coding: utf-8 -*-
"""Multi-odd chart data for the hedging strategy."""

from perp_bet_hedging.services.chart.chart_builder import (
    DEFAULT_CHART_ODDS,
    ChartLine,
    HedgingChart,
    HedgingChartBuilder,
    ReferenceLine,
    line_key,
)

__all__ = [
    "DEFAULT_CHART_ODDS",
    "ChartLine",
    "HedgingChart",
    "HedgingChartBuilder",
    "ReferenceLine",
    "line_key",
]
