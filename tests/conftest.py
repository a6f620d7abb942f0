# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from perp_bet_hedging.config import get_settings
from perp_bet_hedging.models.price_domain import PriceDomain
from perp_bet_hedging.models.strategy_parameters import StrategyParameters
from perp_bet_hedging.services.chart import HedgingChartBuilder
from perp_bet_hedging.services.pnl import HedgingPnLEngine


@pytest.fixture
def params_factory() -> Callable[..., StrategyParameters]:
    """Build StrategyParameters with the reference deployment defaults and easy overrides."""

    def _build(**overrides: Any) -> StrategyParameters:
        return StrategyParameters.create(
            capital_polymarket=overrides.pop("capital_polymarket", 5000.0),
            position_size_perp=overrides.pop("position_size_perp", 50000.0),
            perp_entry_price=overrides.pop("perp_entry_price", 104370.0),
            condition_price=overrides.pop("condition_price", 104000.0),
            entry_odd=overrides.pop("entry_odd", 0.50),
            resolve_odd=overrides.pop("resolve_odd", None),
            stop_loss_price=overrides.pop("stop_loss_price", None),
            take_profit_price=overrides.pop("take_profit_price", None),
        )

    return _build


@pytest.fixture
def params(params_factory: Callable[..., StrategyParameters]) -> StrategyParameters:
    """Reference parameters: 5000 capital, 50000 short at 104370, condition 104000, odd 0.50."""
    return params_factory()


@pytest.fixture
def domain() -> PriceDomain:
    """Default 85,000 - 130,000 domain."""
    return PriceDomain()


@pytest.fixture
def engine(domain: PriceDomain) -> HedgingPnLEngine:
    return HedgingPnLEngine(domain=domain)


@pytest.fixture
def chart_builder(engine: HedgingPnLEngine) -> HedgingChartBuilder:
    return HedgingChartBuilder(engine=engine)


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Clear the cached Settings before and after a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
