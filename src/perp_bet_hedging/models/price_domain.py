# -*- coding: utf-8 -*-
"""PriceDomain: the final-price range a P&L curve is sampled over."""

from __future__ import annotations

from dataclasses import dataclass

from perp_bet_hedging.exceptions import InvalidPriceDomainError
from perp_bet_hedging.utils.validation import is_finite_number

DEFAULT_MIN_PRICE = 85_000.0
DEFAULT_MAX_PRICE = 130_000.0
DEFAULT_STEP = 500.0
DEFAULT_BAND_HALF_WIDTH = 500.0
DEFAULT_BAND_STEP = 50.0
DEFAULT_EPSILON = 0.01

# Upper bound on the points of either grid (uniform or dense band).
MAX_SAMPLE_POINTS = 100_000


@dataclass(frozen=True, slots=True)
class PriceDomain:
    """Bounds and sampling density of a price sweep.

    The uniform grid covers [min_price, max_price] at `step`; a denser grid at `band_step`
    covers condition_price +/- band_half_width; `epsilon` places the two points straddling
    the resolution cliff.
    """

    min_price: float = DEFAULT_MIN_PRICE
    max_price: float = DEFAULT_MAX_PRICE
    step: float = DEFAULT_STEP
    band_half_width: float = DEFAULT_BAND_HALF_WIDTH
    band_step: float = DEFAULT_BAND_STEP
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        for name in ("min_price", "max_price", "step", "band_half_width", "band_step", "epsilon"):
            if not is_finite_number(getattr(self, name)):
                raise InvalidPriceDomainError(f"{name} must be finite (got {getattr(self, name)!r})")
        if self.min_price >= self.max_price:
            raise InvalidPriceDomainError(
                f"min_price={self.min_price} must be < max_price={self.max_price}"
            )
        if self.step <= 0 or self.band_step <= 0:
            raise InvalidPriceDomainError("step and band_step must be > 0")
        if self.band_half_width < 0 or self.epsilon <= 0:
            raise InvalidPriceDomainError("band_half_width must be >= 0 and epsilon > 0")
        if (self.max_price - self.min_price) / self.step > MAX_SAMPLE_POINTS:
            raise InvalidPriceDomainError(
                f"step={self.step} yields more than {MAX_SAMPLE_POINTS} points "
                f"over [{self.min_price}, {self.max_price}]"
            )
        if 2 * self.band_half_width / self.band_step > MAX_SAMPLE_POINTS:
            raise InvalidPriceDomainError(
                f"band_step={self.band_step} yields more than {MAX_SAMPLE_POINTS} band points"
            )

    def contains(self, price: float) -> bool:
        return self.min_price <= price <= self.max_price
