# -*- coding: utf-8 -*-
"""PnLSeries: the (price, net P&L) curve for one entry odd."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class PnLPoint:
    """Net P&L of the hedge at one sampled final price."""

    price: float
    net_pnl: float


@dataclass(frozen=True, slots=True)
class PnLSeries:
    """Ascending-by-price P&L points for one entry odd. Built fresh per computation."""

    entry_odd: float
    points: tuple[PnLPoint, ...]

    def __iter__(self) -> Iterator[PnLPoint]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def prices(self) -> tuple[float, ...]:
        return tuple(p.price for p in self.points)

    @property
    def values(self) -> tuple[float, ...]:
        return tuple(p.net_pnl for p in self.points)

    def at(self, price: float) -> float:
        """Return the net P&L sampled at exactly `price`.

        Raises:
            KeyError: If price was not sampled.
        """
        for point in self.points:
            if point.price == price:
                return point.net_pnl
        raise KeyError(price)

    def to_pairs(self) -> list[tuple[float, float]]:
        return [(p.price, p.net_pnl) for p in self.points]
