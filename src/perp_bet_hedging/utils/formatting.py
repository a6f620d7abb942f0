# -*- coding: utf-8 -*-
"""Display helpers for chart labels and the parameter summary."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from perp_bet_hedging.models.strategy_parameters import StrategyParameters

AUTO_RESOLVE_LABEL = "Auto (Based on Final Price)"


def format_usd(value: float) -> str:
    """Format value as en-US whole-dollar currency: 5000 -> '$5,000', -7283.7 -> '-$7,284'."""
    rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "$0"
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_odd(odd: float) -> str:
    """Format an odd with two decimals and its percentage: 0.5 -> '0.50 (50%)'."""
    pct = Decimal(str(odd * 100)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{odd:.2f} ({pct}%)"


def describe_parameters(params: StrategyParameters) -> list[tuple[str, str]]:
    """Return the ordered (label, value) pairs shown under 'Current Strategy Parameters'."""
    rows: list[tuple[str, str]] = [
        ("Polymarket Capital", format_usd(params.capital_polymarket)),
        ("Perpdex Position Size (After Leverage)", format_usd(params.position_size_perp)),
        ("Perp Entry Price", format_usd(params.perp_entry_price)),
        ("Polymarket Condition", format_usd(params.condition_price)),
        ("Entry Odd", f"{params.entry_odd:.2f}"),
        (
            "Resolve Odd",
            AUTO_RESOLVE_LABEL if params.resolve_odd is None else f"{params.resolve_odd:.2f}",
        ),
    ]
    if params.stop_loss_price is not None:
        rows.append(("Stop Loss", format_usd(params.stop_loss_price)))
    if params.take_profit_price is not None:
        rows.append(("Take Profit", format_usd(params.take_profit_price)))
    return rows
