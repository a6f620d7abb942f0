# -*- coding: utf-8 -*-
"""Hedging P&L engine (sync, pure)."""

from perp_bet_hedging.services.pnl.pnl_engine import (
    POLYMARKET_PNL_SENTINEL,
    HedgingPnLEngine,
    PnLBreakdown,
    combined_pnl,
    generate_series,
    perp_exit_price,
    perp_leg_pnl,
    polymarket_leg_pnl,
    resolve_odd_at,
    sample_domain,
    sample_prices,
)

__all__ = [
    "POLYMARKET_PNL_SENTINEL",
    "HedgingPnLEngine",
    "PnLBreakdown",
    "combined_pnl",
    "generate_series",
    "perp_exit_price",
    "perp_leg_pnl",
    "polymarket_leg_pnl",
    "resolve_odd_at",
    "sample_domain",
    "sample_prices",
]
