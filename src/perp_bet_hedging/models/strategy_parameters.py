# -*- coding: utf-8 -*-
"""StrategyParameters: inputs of one hedge evaluation (Polymarket bet + Perpdex short).

Immutable; validated on construction so the engine never computes on a malformed hedge.
The perp leg is always a short: loss when price rises, profit when price falls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from perp_bet_hedging.exceptions import InvalidStrategyParametersError
from perp_bet_hedging.utils.validation import is_finite_number, is_probability


@dataclass(frozen=True, slots=True)
class StrategyParameters:
    """Parameters of the Polymarket + Perpdex-short hedge.

    Amounts are in the deployment's currency units (USD in the reference deployment).
    """

    capital_polymarket: float
    """Capital spent on the binary-outcome leg."""
    position_size_perp: float
    """Perp short notional, already leverage-adjusted."""
    perp_entry_price: float
    condition_price: float
    """Reference price at which the binary market resolves."""
    entry_odd: float
    """Price paid per share, in [0, 1]. 0 is accepted and handled by the engine's sentinel."""
    resolve_odd: Optional[float] = None
    """Fixed exit price per share (early sale). None: resolve against condition_price."""
    stop_loss_price: Optional[float] = None
    """Must be >= perp_entry_price when set."""
    take_profit_price: Optional[float] = None
    """Must be <= perp_entry_price when set."""

    def __post_init__(self) -> None:
        for name in ("capital_polymarket", "position_size_perp", "perp_entry_price", "condition_price"):
            value = getattr(self, name)
            if not is_finite_number(value) or value <= 0:
                raise InvalidStrategyParametersError(
                    f"{name} must be a finite number > 0 (got {value!r})", field=name
                )
        if not is_probability(self.entry_odd):
            raise InvalidStrategyParametersError(
                f"entry_odd must be in [0, 1] (got {self.entry_odd!r})", field="entry_odd"
            )
        if self.resolve_odd is not None and not is_probability(self.resolve_odd):
            raise InvalidStrategyParametersError(
                f"resolve_odd must be None or in [0, 1] (got {self.resolve_odd!r})",
                field="resolve_odd",
            )
        if self.stop_loss_price is not None:
            if not is_finite_number(self.stop_loss_price):
                raise InvalidStrategyParametersError(
                    f"stop_loss_price must be finite (got {self.stop_loss_price!r})",
                    field="stop_loss_price",
                )
            if self.stop_loss_price < self.perp_entry_price:
                raise InvalidStrategyParametersError(
                    f"stop_loss_price={self.stop_loss_price} is below "
                    f"perp_entry_price={self.perp_entry_price} for a short",
                    field="stop_loss_price",
                )
        if self.take_profit_price is not None:
            if not is_finite_number(self.take_profit_price):
                raise InvalidStrategyParametersError(
                    f"take_profit_price must be finite (got {self.take_profit_price!r})",
                    field="take_profit_price",
                )
            if self.take_profit_price > self.perp_entry_price:
                raise InvalidStrategyParametersError(
                    f"take_profit_price={self.take_profit_price} is above "
                    f"perp_entry_price={self.perp_entry_price} for a short",
                    field="take_profit_price",
                )

    def with_entry_odd(self, entry_odd: float) -> StrategyParameters:
        """Return a copy evaluated at another entry odd (one chart line per odd)."""
        return StrategyParameters(
            capital_polymarket=self.capital_polymarket,
            position_size_perp=self.position_size_perp,
            perp_entry_price=self.perp_entry_price,
            condition_price=self.condition_price,
            entry_odd=entry_odd,
            resolve_odd=self.resolve_odd,
            stop_loss_price=self.stop_loss_price,
            take_profit_price=self.take_profit_price,
        )

    @classmethod
    def create(
        cls,
        capital_polymarket: float,
        position_size_perp: float,
        perp_entry_price: float,
        condition_price: float,
        entry_odd: float,
        *,
        resolve_odd: Optional[float] = None,
        stop_loss_price: Optional[float] = None,
        take_profit_price: Optional[float] = None,
    ) -> StrategyParameters:
        """Create validated parameters; int amounts are normalized to float.

        Raises:
            InvalidStrategyParametersError: If any value is non-finite or out of range,
                or stop-loss/take-profit sit on the wrong side of the entry for a short.
        """

        def _f(value: Optional[float]) -> Optional[float]:
            if value is None or isinstance(value, bool) or not isinstance(value, int):
                return value
            return float(value)

        return cls(
            capital_polymarket=_f(capital_polymarket),  # type: ignore[arg-type]
            position_size_perp=_f(position_size_perp),  # type: ignore[arg-type]
            perp_entry_price=_f(perp_entry_price),  # type: ignore[arg-type]
            condition_price=_f(condition_price),  # type: ignore[arg-type]
            entry_odd=_f(entry_odd),  # type: ignore[arg-type]
            resolve_odd=_f(resolve_odd),
            stop_loss_price=_f(stop_loss_price),
            take_profit_price=_f(take_profit_price),
        )
