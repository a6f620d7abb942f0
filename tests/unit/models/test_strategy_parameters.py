# -*- coding: utf-8 -*-
"""Unit tests for StrategyParameters validation."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

import pytest

from perp_bet_hedging.exceptions import HedgingError, InvalidStrategyParametersError
from perp_bet_hedging.models.strategy_parameters import StrategyParameters


def test_create_normalizes_int_amounts_to_float(
    params_factory: Callable[..., StrategyParameters],
) -> None:
    params = params_factory(capital_polymarket=5000, perp_entry_price=104370, entry_odd=1)

    assert isinstance(params.capital_polymarket, float)
    assert isinstance(params.perp_entry_price, float)
    assert params.entry_odd == 1.0
    assert params.resolve_odd is None


def test_parameters_are_immutable(params: StrategyParameters) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.entry_odd = 0.7  # type: ignore[misc]


@pytest.mark.parametrize(
    "field",
    ["capital_polymarket", "position_size_perp", "perp_entry_price", "condition_price"],
)
@pytest.mark.parametrize("value", [0.0, -1.0, float("nan"), float("inf")])
def test_amounts_must_be_positive_and_finite(
    field: str,
    value: float,
    params_factory: Callable[..., StrategyParameters],
) -> None:
    with pytest.raises(InvalidStrategyParametersError) as exc_info:
        params_factory(**{field: value})

    assert exc_info.value.field == field


@pytest.mark.parametrize("entry_odd", [-0.01, 1.01, float("nan")])
def test_entry_odd_must_be_probability(
    entry_odd: float,
    params_factory: Callable[..., StrategyParameters],
) -> None:
    with pytest.raises(InvalidStrategyParametersError):
        params_factory(entry_odd=entry_odd)


def test_zero_entry_odd_is_accepted(params_factory: Callable[..., StrategyParameters]) -> None:
    assert params_factory(entry_odd=0.0).entry_odd == 0.0


@pytest.mark.parametrize("resolve_odd", [-0.5, 2.0])
def test_resolve_odd_must_be_probability_when_set(
    resolve_odd: float,
    params_factory: Callable[..., StrategyParameters],
) -> None:
    with pytest.raises(InvalidStrategyParametersError) as exc_info:
        params_factory(resolve_odd=resolve_odd)

    assert exc_info.value.field == "resolve_odd"


def test_stop_loss_below_entry_is_rejected(
    params_factory: Callable[..., StrategyParameters],
) -> None:
    with pytest.raises(InvalidStrategyParametersError, match="below perp_entry_price"):
        params_factory(stop_loss_price=104000.0)


def test_take_profit_above_entry_is_rejected(
    params_factory: Callable[..., StrategyParameters],
) -> None:
    with pytest.raises(InvalidStrategyParametersError, match="above perp_entry_price"):
        params_factory(take_profit_price=105000.0)


def test_stop_loss_and_take_profit_at_entry_are_accepted(
    params_factory: Callable[..., StrategyParameters],
) -> None:
    params = params_factory(stop_loss_price=104370.0, take_profit_price=104370.0)

    assert params.stop_loss_price == params.take_profit_price == 104370.0


def test_validation_error_is_value_error_and_hedging_error(
    params_factory: Callable[..., StrategyParameters],
) -> None:
    with pytest.raises(ValueError):
        params_factory(take_profit_price=200000.0)
    with pytest.raises(HedgingError):
        params_factory(take_profit_price=200000.0)


def test_direct_construction_is_validated() -> None:
    with pytest.raises(InvalidStrategyParametersError):
        StrategyParameters(
            capital_polymarket=5000.0,
            position_size_perp=50000.0,
            perp_entry_price=104370.0,
            condition_price=104000.0,
            entry_odd=0.5,
            stop_loss_price=90000.0,
        )


def test_with_entry_odd_keeps_other_fields(
    params_factory: Callable[..., StrategyParameters],
) -> None:
    params = params_factory(resolve_odd=0.4, stop_loss_price=110000.0, take_profit_price=95000.0)

    copy = params.with_entry_odd(0.8)

    assert copy.entry_odd == 0.8
    assert copy == dataclasses.replace(params, entry_odd=0.8)
    assert params.entry_odd == 0.5


def test_with_entry_odd_validates(params: StrategyParameters) -> None:
    with pytest.raises(InvalidStrategyParametersError):
        params.with_entry_odd(1.2)
