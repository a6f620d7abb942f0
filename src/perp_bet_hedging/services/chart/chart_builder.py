# -*- coding: utf-8 -*-
"""HedgingChartBuilder: chart-ready P&L data for several entry odds at once.

One line per "Yes" entry odd (a default set plus the selected odd), one row per sampled
price, and the reference lines drawn over the chart. Rendering is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Optional

import structlog

from perp_bet_hedging.models.pnl_series import PnLSeries
from perp_bet_hedging.models.price_domain import PriceDomain
from perp_bet_hedging.models.strategy_parameters import StrategyParameters
from perp_bet_hedging.services.pnl.pnl_engine import HedgingPnLEngine

DEFAULT_CHART_ODDS: tuple[float, ...] = (0.30, 0.50, 0.63, 0.80)

# A default odd within this distance of the selected odd is drawn highlighted.
HIGHLIGHT_TOLERANCE = 0.01


def _odd_text(entry_odd: float) -> str:
    """Compact text that reads back as entry_odd: 0.3 -> '0.3', 0.5000001 -> '0.5000001'."""
    text = f"{entry_odd:g}"
    return text if float(text) == entry_odd else repr(entry_odd)


def line_key(entry_odd: float) -> str:
    """Row key of the line for entry_odd: 0.3 -> 'odd_0.3', 0.63 -> 'odd_0.63'.

    Distinct odds always get distinct keys.
    """
    return f"odd_{_odd_text(entry_odd)}"


@dataclass(frozen=True)
class ChartLine:
    """One plotted P&L line."""

    key: str
    entry_odd: float
    highlighted: bool

    @property
    def label(self) -> str:
        return f"Entry {_odd_text(self.entry_odd)}"


@dataclass(frozen=True)
class ReferenceLine:
    """A dashed marker line: vertical (axis='x') at a price or horizontal (axis='y') at a P&L."""

    label: str
    axis: Literal["x", "y"]
    value: float


@dataclass(frozen=True)
class HedgingChart:
    """Chart data for one parameter set."""

    params: StrategyParameters
    domain: PriceDomain
    lines: tuple[ChartLine, ...]
    rows: tuple[dict[str, float], ...]
    reference_lines: tuple[ReferenceLine, ...]
    series: dict[str, PnLSeries] = field(repr=False)

    def series_for(self, key: str) -> PnLSeries:
        """Return the PnLSeries behind line `key` (e.g. 'odd_0.5').

        Raises:
            KeyError: If no line has that key.
        """
        return self.series[key]

    @property
    def highlighted(self) -> tuple[ChartLine, ...]:
        return tuple(line for line in self.lines if line.highlighted)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable form (camelCase keys follow the dashboard's chart props)."""
        return {
            "domain": [self.domain.min_price, self.domain.max_price],
            "lines": [
                {
                    "dataKey": line.key,
                    "name": line.label,
                    "entryOdd": line.entry_odd,
                    "highlighted": line.highlighted,
                }
                for line in self.lines
            ],
            "referenceLines": [
                {"label": ref.label, "axis": ref.axis, "value": ref.value}
                for ref in self.reference_lines
            ],
            "data": [dict(row) for row in self.rows],
        }


class HedgingChartBuilder:
    """Builds HedgingChart from strategy parameters using a HedgingPnLEngine."""

    def __init__(
        self,
        engine: HedgingPnLEngine,
        default_odds: Iterable[float] = DEFAULT_CHART_ODDS,
    ) -> None:
        self._engine = engine
        self._default_odds = tuple(default_odds)
        self._logger = structlog.get_logger(__name__)

    def plotted_odds(
        self,
        selected_odd: float,
        odds: Optional[Iterable[float]] = None,
    ) -> list[tuple[float, bool]]:
        """Return (entry_odd, highlighted) per line: the default set, then the selected odd if missing."""
        base = tuple(odds) if odds is not None else self._default_odds
        plotted = [(odd, abs(odd - selected_odd) < HIGHLIGHT_TOLERANCE) for odd in base]
        if selected_odd not in base:
            plotted.append((selected_odd, True))
        return plotted

    def build(
        self,
        params: StrategyParameters,
        domain: Optional[PriceDomain] = None,
        odds: Optional[Iterable[float]] = None,
    ) -> HedgingChart:
        """Evaluate every plotted odd over the domain and assemble chart rows.

        All lines share the same sample prices (they depend only on the domain and the
        condition price), so rows are zipped by index.
        """
        domain = domain or self._engine.domain
        lines: list[ChartLine] = []
        series: dict[str, PnLSeries] = {}
        for odd, highlighted in self.plotted_odds(params.entry_odd, odds):
            key = line_key(odd)
            if key in series:  # same odd listed twice
                continue
            series[key] = self._engine.generate_series(params.with_entry_odd(odd), domain)
            lines.append(ChartLine(key=key, entry_odd=odd, highlighted=highlighted))

        first = next(iter(series.values()))
        rows = []
        for i, price in enumerate(first.prices):
            row: dict[str, float] = {"price": price}
            for key, s in series.items():
                row[key] = s.points[i].net_pnl
            rows.append(row)

        reference_lines = (
            ReferenceLine(label="Polymarket Cliff", axis="x", value=params.condition_price),
            ReferenceLine(label="Perp Entry", axis="x", value=params.perp_entry_price),
            ReferenceLine(label="Break-Even", axis="y", value=0.0),
        )
        self._logger.info(
            "hedging_chart_built",
            lines=[line.key for line in lines],
            rows=len(rows),
            entry_odd=params.entry_odd,
            min_price=domain.min_price,
            max_price=domain.max_price,
        )
        return HedgingChart(
            params=params,
            domain=domain,
            lines=tuple(lines),
            rows=tuple(rows),
            reference_lines=reference_lines,
            series=series,
        )
