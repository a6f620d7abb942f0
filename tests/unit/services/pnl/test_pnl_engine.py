# -*- coding: utf-8 -*-
"""Unit tests for the hedging P&L leg functions and HedgingPnLEngine."""

from __future__ import annotations

import math
from collections.abc import Callable

import pytest

from perp_bet_hedging.models.price_domain import PriceDomain
from perp_bet_hedging.models.strategy_parameters import StrategyParameters
from perp_bet_hedging.services.pnl import (
    POLYMARKET_PNL_SENTINEL,
    HedgingPnLEngine,
    combined_pnl,
    generate_series,
    perp_exit_price,
    perp_leg_pnl,
    polymarket_leg_pnl,
    resolve_odd_at,
)


@pytest.mark.parametrize("capital", [1.0, 1000.0, 5000.0, 20000.0])
def test_polymarket_leg_breaks_even_when_bought_and_resolved_at_one(capital: float) -> None:
    assert polymarket_leg_pnl(120000.0, 1.0, 1.0, capital) == 0


@pytest.mark.parametrize("resolve_odd", [0.0, 0.5, 1.0])
@pytest.mark.parametrize("entry_odd", [0.0, -0.1])
def test_polymarket_leg_returns_finite_sentinel_for_non_positive_entry_odd(
    entry_odd: float,
    resolve_odd: float,
) -> None:
    pnl = polymarket_leg_pnl(100000.0, entry_odd, resolve_odd, 5000.0)

    assert pnl == POLYMARKET_PNL_SENTINEL
    assert math.isfinite(pnl)


def test_polymarket_leg_win_and_loss_at_half_odd() -> None:
    # shares = 5000 / 0.5 = 10000; win pays 1.0 per share, loss pays 0
    assert polymarket_leg_pnl(0.0, 0.5, 1.0, 5000.0) == pytest.approx(5000.0)
    assert polymarket_leg_pnl(0.0, 0.5, 0.0, 5000.0) == pytest.approx(-5000.0)


def test_polymarket_leg_early_sale_ignores_final_price() -> None:
    low = polymarket_leg_pnl(85000.0, 0.4, 0.6, 1000.0)
    high = polymarket_leg_pnl(130000.0, 0.4, 0.6, 1000.0)

    assert low == high == pytest.approx(500.0)


@pytest.mark.parametrize("size, entry", [(50000.0, 104370.0), (10000.0, 90000.0), (1.0, 1.0)])
def test_perp_leg_is_zero_when_price_does_not_move(size: float, entry: float) -> None:
    assert perp_leg_pnl(entry, size, entry, None, None) == 0


def test_perp_leg_short_profits_when_price_falls_and_loses_when_it_rises() -> None:
    assert perp_leg_pnl(90000.0, 10000.0, 100000.0) == pytest.approx(1000.0)
    assert perp_leg_pnl(110000.0, 10000.0, 100000.0) == pytest.approx(-1000.0)


def test_stop_loss_takes_precedence_when_both_triggers_match() -> None:
    # take_profit above stop_loss only happens when called directly; both conditions hold at 105000
    assert perp_exit_price(105000.0, stop_loss=101000.0, take_profit=106000.0) == 101000.0
    assert perp_leg_pnl(105000.0, 10000.0, 100000.0, 101000.0, 106000.0) == pytest.approx(-100.0)


def test_stop_loss_caps_loss_above_trigger() -> None:
    assert perp_exit_price(130000.0, stop_loss=110000.0) == 110000.0
    assert perp_exit_price(110000.0, stop_loss=110000.0) == 110000.0
    assert perp_leg_pnl(130000.0, 50000.0, 100000.0, 110000.0) == pytest.approx(-5000.0)


def test_take_profit_caps_gain_below_trigger() -> None:
    assert perp_exit_price(80000.0, take_profit=95000.0) == 95000.0
    assert perp_exit_price(95000.0, take_profit=95000.0) == 95000.0
    assert perp_leg_pnl(80000.0, 50000.0, 100000.0, None, 95000.0) == pytest.approx(2500.0)


def test_exit_price_is_final_price_between_triggers() -> None:
    assert perp_exit_price(100500.0, stop_loss=110000.0, take_profit=95000.0) == 100500.0


def test_resolve_odd_tie_resolves_to_loss() -> None:
    assert resolve_odd_at(104000.0, 104000.0, None) == 0.0
    assert resolve_odd_at(104000.01, 104000.0, None) == 1.0
    assert resolve_odd_at(103999.99, 104000.0, None) == 0.0


@pytest.mark.parametrize("explicit", [0.0, 0.37, 1.0])
def test_resolve_odd_explicit_value_is_returned_unchanged(explicit: float) -> None:
    assert resolve_odd_at(85000.0, 104000.0, explicit) == explicit
    assert resolve_odd_at(130000.0, 104000.0, explicit) == explicit


def test_combined_pnl_at_upper_domain_bound(params: StrategyParameters) -> None:
    resolve = resolve_odd_at(130000.0, params.condition_price, params.resolve_odd)
    expected_perp = 50000.0 * (104370.0 - 130000.0) / 104370.0

    assert resolve == 1.0
    assert combined_pnl(130000.0, 0.5, resolve, params) == pytest.approx(5000.0 + expected_perp)
    assert combined_pnl(130000.0, 0.5, resolve, params) == pytest.approx(-7278.43, abs=0.01)


def test_combined_pnl_at_lower_domain_bound(params: StrategyParameters) -> None:
    resolve = resolve_odd_at(85000.0, params.condition_price, params.resolve_odd)
    expected_perp = 50000.0 * (104370.0 - 85000.0) / 104370.0

    assert resolve == 0.0
    assert combined_pnl(85000.0, 0.5, resolve, params) == pytest.approx(-5000.0 + expected_perp)
    assert combined_pnl(85000.0, 0.5, resolve, params) == pytest.approx(4279.49, abs=0.01)


def test_combined_pnl_applies_stop_loss_from_params(
    params_factory: Callable[..., StrategyParameters],
) -> None:
    params = params_factory(stop_loss_price=110000.0)

    pnl = combined_pnl(130000.0, 0.5, 1.0, params)

    assert pnl == pytest.approx(5000.0 + 50000.0 * (104370.0 - 110000.0) / 104370.0)


def test_generate_series_is_ascending_and_matches_combined_pnl(
    params: StrategyParameters,
    domain: PriceDomain,
) -> None:
    series = generate_series(params, domain)

    prices = series.prices
    assert list(prices) == sorted(prices)
    assert prices[0] == 85000.0
    assert prices[-1] == 130000.0
    assert series.entry_odd == 0.5
    for point in series:
        resolve = resolve_odd_at(point.price, params.condition_price, None)
        assert point.net_pnl == combined_pnl(point.price, 0.5, resolve, params)


def test_generate_series_captures_resolution_cliff(
    params: StrategyParameters,
    domain: PriceDomain,
) -> None:
    series = generate_series(params, domain)

    below = series.at(103999.99)
    at_condition = series.at(104000.0)
    above = series.at(104000.01)

    # Polymarket leg jumps from -5000 to +5000 across the condition price
    assert above - below == pytest.approx(10000.0, abs=1.0)
    assert at_condition == pytest.approx(below, abs=1.0)


def test_generate_series_is_deterministic(params: StrategyParameters, domain: PriceDomain) -> None:
    assert generate_series(params, domain) == generate_series(params, domain)


def test_generate_series_with_zero_entry_odd_has_no_nan_or_infinity(
    params_factory: Callable[..., StrategyParameters],
    domain: PriceDomain,
) -> None:
    series = generate_series(params_factory(entry_odd=0.0), domain)

    assert all(math.isfinite(v) for v in series.values)
    assert series.at(104000.0) == pytest.approx(
        POLYMARKET_PNL_SENTINEL + 50000.0 * (104370.0 - 104000.0) / 104370.0
    )


def test_generate_series_with_explicit_resolve_odd_has_no_cliff(
    params_factory: Callable[..., StrategyParameters],
    domain: PriceDomain,
) -> None:
    params = params_factory(resolve_odd=0.6)
    series = generate_series(params, domain)

    # Only the perp leg varies: the jump across 104000 is just 0.02 of price movement
    assert series.at(104000.01) - series.at(103999.99) == pytest.approx(
        -50000.0 * 0.02 / 104370.0
    )


def test_engine_evaluate_returns_leg_breakdown(
    engine: HedgingPnLEngine,
    params: StrategyParameters,
) -> None:
    breakdown = engine.evaluate(params, 130000.0)

    assert breakdown.resolve_odd == 1.0
    assert breakdown.perp_exit_price == 130000.0
    assert breakdown.polymarket_pnl == pytest.approx(5000.0)
    assert breakdown.perp_pnl == pytest.approx(-12278.43, abs=0.01)
    assert breakdown.net_pnl == pytest.approx(breakdown.polymarket_pnl + breakdown.perp_pnl)


def test_engine_evaluate_reports_stop_loss_exit(
    engine: HedgingPnLEngine,
    params_factory: Callable[..., StrategyParameters],
) -> None:
    breakdown = engine.evaluate(params_factory(stop_loss_price=108000.0), 120000.0)

    assert breakdown.perp_exit_price == 108000.0


def test_engine_generate_series_uses_default_domain_and_override(
    engine: HedgingPnLEngine,
    params: StrategyParameters,
) -> None:
    default_series = engine.generate_series(params)
    narrow = engine.generate_series(params, PriceDomain(min_price=100000.0, max_price=110000.0))

    assert default_series.prices[0] == 85000.0
    assert narrow.prices[0] == 100000.0
    assert narrow.prices[-1] == 110000.0
