# -*- coding: utf-8 -*-
"""Hedging P&L engine: pure computation of the Polymarket leg, the Perpdex short leg and their sum.

No I/O, no shared state. Identical inputs always produce identical outputs.

Polymarket leg: buy shares at entry_odd, exit at resolve_odd.
    shares = capital / entry_odd
    pnl = (resolve_odd - entry_odd) * shares = capital * (resolve_odd / entry_odd - 1)
Perpdex leg: short of position_size (leverage already applied) entered at entry_price.
    pnl = position_size * (entry_price - exit_price) / entry_price
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import structlog

from perp_bet_hedging.exceptions import InvalidPriceDomainError
from perp_bet_hedging.models.pnl_series import PnLPoint, PnLSeries
from perp_bet_hedging.models.price_domain import (
    DEFAULT_BAND_HALF_WIDTH,
    DEFAULT_BAND_STEP,
    DEFAULT_EPSILON,
    PriceDomain,
)
from perp_bet_hedging.utils.validation import is_finite_number

if TYPE_CHECKING:
    from perp_bet_hedging.models.strategy_parameters import StrategyParameters

POLYMARKET_PNL_SENTINEL = 1_000_000.0
"""Returned by the Polymarket leg when entry_odd <= 0. Finite so charts can still render it."""

# Grid points this close to a kept point are duplicates produced by float arithmetic.
_DEDUP_REL_TOL = 1e-12
_DEDUP_ABS_TOL = 1e-12

_logger = structlog.get_logger(__name__)


def polymarket_leg_pnl(
    final_price: float,
    entry_odd: float,
    resolve_odd: float,
    capital: float,
) -> float:
    """P&L of the binary-outcome leg. final_price is unused: resolve_odd already encodes the outcome."""
    if entry_odd <= 0:
        return POLYMARKET_PNL_SENTINEL
    return capital * (resolve_odd / entry_odd - 1)


def perp_exit_price(
    final_price: float,
    stop_loss: Optional[float] = None,
    take_profit: Optional[float] = None,
) -> float:
    """Exit price of the short. Stop-loss is checked before take-profit."""
    if stop_loss is not None and final_price >= stop_loss:
        return stop_loss
    if take_profit is not None and final_price <= take_profit:
        return take_profit
    return final_price


def perp_leg_pnl(
    final_price: float,
    position_size: float,
    entry_price: float,
    stop_loss: Optional[float] = None,
    take_profit: Optional[float] = None,
) -> float:
    """P&L of the Perpdex short, exiting at the stop-loss/take-profit adjusted price."""
    exit_price = perp_exit_price(final_price, stop_loss, take_profit)
    return position_size * (entry_price - exit_price) / entry_price


def combined_pnl(
    final_price: float,
    entry_odd: float,
    resolve_odd: float,
    params: StrategyParameters,
) -> float:
    """Net P&L of the hedge: the two legs summed independently."""
    return polymarket_leg_pnl(
        final_price, entry_odd, resolve_odd, params.capital_polymarket
    ) + perp_leg_pnl(
        final_price,
        params.position_size_perp,
        params.perp_entry_price,
        params.stop_loss_price,
        params.take_profit_price,
    )


def resolve_odd_at(
    final_price: float,
    condition_price: float,
    explicit_resolve_odd: Optional[float] = None,
) -> float:
    """Exit price per share at final_price.

    An explicit resolve odd (early sale) is returned unchanged. Otherwise the market
    resolves YES (1.0) only when final_price is strictly above condition_price; a tie
    resolves NO (0.0).
    """
    if explicit_resolve_odd is not None:
        return explicit_resolve_odd
    return 1.0 if final_price > condition_price else 0.0


def _grid(start: float, stop: float, step: float) -> list[float]:
    """Uniform grid start, start+step, ... <= stop. Built by index to avoid accumulated drift."""
    n = int(math.floor((stop - start) / step + 1e-9))
    return [min(start + i * step, stop) for i in range(n + 1)]


def _merge_points(anchors: list[float], candidates: list[float]) -> list[float]:
    """Sorted union of anchors and candidates with near-duplicates collapsed.

    Anchors are kept with their exact values; a candidate is dropped when it is within
    tolerance of an already kept point, or replaced by an anchor that lands on it.
    """
    tagged = sorted([(p, True) for p in set(anchors)] + [(p, False) for p in candidates])
    merged: list[float] = []
    pinned: list[bool] = []
    for price, is_anchor in tagged:
        if merged and math.isclose(
            price, merged[-1], rel_tol=_DEDUP_REL_TOL, abs_tol=_DEDUP_ABS_TOL
        ):
            if is_anchor and not pinned[-1]:
                merged[-1], pinned[-1] = price, True
                continue
            if not (is_anchor and price != merged[-1]):
                continue
        merged.append(price)
        pinned.append(is_anchor)
    return merged


def sample_prices(
    min_price: float,
    max_price: float,
    condition_price: float,
    step: float,
    *,
    band_half_width: float = DEFAULT_BAND_HALF_WIDTH,
    band_step: float = DEFAULT_BAND_STEP,
    epsilon: float = DEFAULT_EPSILON,
) -> tuple[float, ...]:
    """Strictly ascending, deduplicated sample prices over [min_price, max_price].

    Contains the domain endpoints, a uniform grid at `step`, a denser grid at `band_step`
    over condition_price +/- band_half_width, and condition_price +/- epsilon so the
    resolution cliff is captured. Points outside the domain are dropped.

    Raises:
        InvalidPriceDomainError: If the bounds, steps or epsilon are invalid.
    """
    if not is_finite_number(condition_price):
        raise InvalidPriceDomainError(f"condition_price must be finite (got {condition_price!r})")
    domain = PriceDomain(
        min_price=min_price,
        max_price=max_price,
        step=step,
        band_half_width=band_half_width,
        band_step=band_step,
        epsilon=epsilon,
    )
    if condition_price + domain.epsilon == condition_price:
        raise InvalidPriceDomainError(
            f"epsilon={domain.epsilon} is below the float resolution at {condition_price}"
        )
    anchors = [domain.min_price, domain.max_price]
    anchors.extend(
        p
        for p in (condition_price - domain.epsilon, condition_price + domain.epsilon)
        if domain.contains(p)
    )
    candidates = _grid(domain.min_price, domain.max_price, domain.step)
    candidates.extend(
        _grid(
            condition_price - domain.band_half_width,
            condition_price + domain.band_half_width,
            domain.band_step,
        )
    )
    return tuple(_merge_points(anchors, [p for p in candidates if domain.contains(p)]))


def sample_domain(domain: PriceDomain, condition_price: float) -> tuple[float, ...]:
    """sample_prices() over an already validated PriceDomain."""
    return sample_prices(
        domain.min_price,
        domain.max_price,
        condition_price,
        domain.step,
        band_half_width=domain.band_half_width,
        band_step=domain.band_step,
        epsilon=domain.epsilon,
    )


def generate_series(params: StrategyParameters, domain: PriceDomain) -> PnLSeries:
    """Evaluate the hedge at every sampled price, ascending by price."""
    points = []
    for price in sample_domain(domain, params.condition_price):
        resolve_odd = resolve_odd_at(price, params.condition_price, params.resolve_odd)
        points.append(
            PnLPoint(
                price=price,
                net_pnl=combined_pnl(price, params.entry_odd, resolve_odd, params),
            )
        )
    return PnLSeries(entry_odd=params.entry_odd, points=tuple(points))


@dataclass(frozen=True)
class PnLBreakdown:
    """Both legs of the hedge evaluated at one final price."""

    final_price: float
    resolve_odd: float
    """Exit price per share used for the Polymarket leg."""
    perp_exit_price: float
    """Exit price of the short after stop-loss/take-profit."""
    polymarket_pnl: float
    perp_pnl: float

    @property
    def net_pnl(self) -> float:
        return self.polymarket_pnl + self.perp_pnl


class HedgingPnLEngine:
    """Sync, pure service wrapping the leg functions for callers that want logging and breakdowns."""

    def __init__(self, domain: Optional[PriceDomain] = None) -> None:
        self._domain = domain or PriceDomain()
        self._logger = _logger

    @property
    def domain(self) -> PriceDomain:
        return self._domain

    def evaluate(self, params: StrategyParameters, final_price: float) -> PnLBreakdown:
        """Evaluate both legs at final_price."""
        resolve_odd = resolve_odd_at(final_price, params.condition_price, params.resolve_odd)
        return PnLBreakdown(
            final_price=final_price,
            resolve_odd=resolve_odd,
            perp_exit_price=perp_exit_price(
                final_price, params.stop_loss_price, params.take_profit_price
            ),
            polymarket_pnl=polymarket_leg_pnl(
                final_price, params.entry_odd, resolve_odd, params.capital_polymarket
            ),
            perp_pnl=perp_leg_pnl(
                final_price,
                params.position_size_perp,
                params.perp_entry_price,
                params.stop_loss_price,
                params.take_profit_price,
            ),
        )

    def generate_series(
        self,
        params: StrategyParameters,
        domain: Optional[PriceDomain] = None,
    ) -> PnLSeries:
        """Build the P&L curve for params.entry_odd over domain (engine default if None)."""
        series = generate_series(params, domain or self._domain)
        if params.entry_odd <= 0:
            self._logger.warning(
                "hedging_entry_odd_degenerate",
                entry_odd=params.entry_odd,
                sentinel=POLYMARKET_PNL_SENTINEL,
            )
        self._logger.debug(
            "hedging_series_generated",
            entry_odd=params.entry_odd,
            points=len(series),
            resolve_mode="explicit" if params.resolve_odd is not None else "final_price",
        )
        return series
