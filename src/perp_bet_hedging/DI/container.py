# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from perp_bet_hedging.config import Settings, get_settings
from perp_bet_hedging.models.price_domain import PriceDomain
from perp_bet_hedging.services.chart import HedgingChartBuilder
from perp_bet_hedging.services.pnl import HedgingPnLEngine


def _build_domain(settings: Settings) -> PriceDomain:
    """Default price domain from SAMPLING__* settings."""
    return settings.sampling.to_domain()


def _build_chart_odds(settings: Settings) -> tuple[float, ...]:
    return tuple(settings.hedging.chart_odds)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, price domain, P&L engine and chart builder."""

    config = providers.Callable(get_settings)

    price_domain = providers.Singleton(_build_domain, config)

    pnl_engine = providers.Singleton(
        HedgingPnLEngine,
        domain=price_domain,
    )

    chart_builder = providers.Singleton(
        HedgingChartBuilder,
        engine=pnl_engine,
        default_odds=providers.Callable(_build_chart_odds, config),
    )
