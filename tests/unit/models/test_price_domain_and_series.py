# -*- coding: utf-8 -*-
"""Unit tests for PriceDomain and PnLSeries."""

from __future__ import annotations

import pytest

from perp_bet_hedging.exceptions import InvalidPriceDomainError
from perp_bet_hedging.models import MAX_SAMPLE_POINTS, PnLPoint, PnLSeries, PriceDomain


def test_default_domain_matches_reference_deployment() -> None:
    domain = PriceDomain()

    assert (domain.min_price, domain.max_price) == (85000.0, 130000.0)
    assert (domain.step, domain.band_half_width, domain.band_step, domain.epsilon) == (
        500.0,
        500.0,
        50.0,
        0.01,
    )


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_price": 130000.0, "max_price": 85000.0},
        {"step": 0.0},
        {"band_step": -5.0},
        {"band_half_width": -1.0},
        {"epsilon": 0.0},
        {"max_price": float("inf")},
    ],
)
def test_invalid_domain_raises(overrides: dict[str, float]) -> None:
    with pytest.raises(InvalidPriceDomainError):
        PriceDomain(**overrides)


@pytest.mark.parametrize(
    "overrides",
    [
        {"step": 45000.0 / (MAX_SAMPLE_POINTS + 1)},
        {"step": 1e-4},
        {"band_half_width": 500.0, "band_step": 1000.0 / (MAX_SAMPLE_POINTS + 1)},
    ],
)
def test_domain_with_too_many_points_raises(overrides: dict[str, float]) -> None:
    with pytest.raises(InvalidPriceDomainError):
        PriceDomain(**overrides)


def test_domain_at_point_cap_is_accepted() -> None:
    domain = PriceDomain(min_price=0.0, max_price=float(MAX_SAMPLE_POINTS), step=1.0)

    assert domain.step == 1.0


def test_contains_is_inclusive() -> None:
    domain = PriceDomain(min_price=10.0, max_price=20.0)

    assert domain.contains(10.0)
    assert domain.contains(20.0)
    assert not domain.contains(20.01)


def test_series_accessors() -> None:
    series = PnLSeries(
        entry_odd=0.5,
        points=(PnLPoint(price=1.0, net_pnl=-2.0), PnLPoint(price=2.0, net_pnl=3.0)),
    )

    assert len(series) == 2
    assert series.prices == (1.0, 2.0)
    assert series.values == (-2.0, 3.0)
    assert series.at(2.0) == 3.0
    assert series.to_pairs() == [(1.0, -2.0), (2.0, 3.0)]
    assert [p.price for p in series] == [1.0, 2.0]


def test_series_at_unsampled_price_raises() -> None:
    series = PnLSeries(entry_odd=0.5, points=(PnLPoint(price=1.0, net_pnl=0.0),))

    with pytest.raises(KeyError):
        series.at(1.5)
