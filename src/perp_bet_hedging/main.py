# -*- coding: utf-8 -*-
"""
Entry point for the hedging P&L simulator.

Orchestrates: logging, settings, container, chart builder; writes the result to stdout.

Run with: python -m perp_bet_hedging.main [chart|api-url] ...

Examples:
    perp-bet-hedging chart --entry-odd 0.55 --stop-loss 110000 --format json
    perp-bet-hedging chart --at 130000
    perp-bet-hedging api-url sweeps --limit 20
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional, TextIO

import structlog

from perp_bet_hedging.DI import Container
from perp_bet_hedging.clients.dashboard_api import (
    DashboardApiRequest,
    aggregated_sweeps_request,
    daily_metrics_request,
    sweeps_request,
    user_daily_metrics_request,
    users_daily_metrics_request,
)
from perp_bet_hedging.config import get_settings
from perp_bet_hedging.exceptions import HedgingError, InvalidStrategyParametersError
from perp_bet_hedging.logging.config import configure_logging
from perp_bet_hedging.services.chart import HedgingChart
from perp_bet_hedging.services.pnl import PnLBreakdown
from perp_bet_hedging.utils import describe_parameters, format_usd, mask_address

EXIT_INVALID_INPUT = 2

_API_ENDPOINTS = ("sweeps", "aggregated", "daily-metrics", "user-daily-metrics", "users-daily-metrics")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perp-bet-hedging",
        description="P&L of a Polymarket bet hedged with a Perpdex short, across final BTC prices.",
    )
    subparsers = parser.add_subparsers(dest="command")

    chart = subparsers.add_parser("chart", help="Print the P&L chart data (default).")
    chart.add_argument("--capital", type=float, help="Polymarket capital.")
    chart.add_argument("--position-size", type=float, help="Perpdex position size after leverage.")
    chart.add_argument("--entry-price", type=float, help="Perpdex short entry price.")
    chart.add_argument("--condition-price", type=float, help="Polymarket condition price.")
    chart.add_argument("--entry-odd", type=float, help="Yes odd paid per share (0-1).")
    chart.add_argument(
        "--resolve-odd",
        type=float,
        help="Early-sale odd (0-1). Omit to resolve on final price.",
    )
    chart.add_argument("--stop-loss", type=float, help="Stop-loss price of the short.")
    chart.add_argument("--take-profit", type=float, help="Take-profit price of the short.")
    chart.add_argument("--min-price", type=float, help="Lowest final price sampled.")
    chart.add_argument("--max-price", type=float, help="Highest final price sampled.")
    chart.add_argument("--step", type=float, help="Uniform sampling interval.")
    chart.add_argument(
        "--odds",
        type=str,
        help="Comma-separated entry odds to plot (default from HEDGING__CHART_ODDS).",
    )
    chart.add_argument(
        "--at",
        type=float,
        help="Print the leg-by-leg breakdown at this final price instead of the chart.",
    )
    chart.add_argument("--format", choices=("table", "json"), default="table")

    api = subparsers.add_parser("api-url", help="Print a dashboard API request URL.")
    api.add_argument("endpoint", choices=_API_ENDPOINTS)
    api.add_argument("--limit", type=int)
    api.add_argument("--offset", type=int, default=0)
    api.add_argument("--address", action="append", default=[], help="Wallet address (repeatable).")
    api.add_argument("--market-type")
    api.add_argument("--market-slug")
    api.add_argument("--market-question")
    api.add_argument("--sort-field", default="created_at")
    api.add_argument("--sort-direction", default="desc")
    api.add_argument("--period", default="all")
    return parser


def _parse_odds(raw: Optional[str]) -> Optional[list[float]]:
    if raw is None:
        return None
    try:
        return [float(s.strip()) for s in raw.split(",") if s.strip()]
    except ValueError as e:
        raise InvalidStrategyParametersError(f"invalid --odds value: {e}", field="odds") from e


def _render_table(chart: HedgingChart, out: TextIO) -> None:
    for label, value in describe_parameters(chart.params):
        out.write(f"{label}: {value}\n")
    out.write("\n")
    header = ["Final BTC Price"] + [
        f"{line.label}{' *' if line.highlighted else ''}" for line in chart.lines
    ]
    out.write("\t".join(header) + "\n")
    for row in chart.rows:
        cells = [format_usd(row["price"])] + [format_usd(row[line.key]) for line in chart.lines]
        out.write("\t".join(cells) + "\n")


def _render_breakdown(breakdown: PnLBreakdown, fmt: str, out: TextIO) -> None:
    data = {
        "finalPrice": breakdown.final_price,
        "resolveOdd": breakdown.resolve_odd,
        "perpExitPrice": breakdown.perp_exit_price,
        "polymarketPnl": breakdown.polymarket_pnl,
        "perpPnl": breakdown.perp_pnl,
        "netPnl": breakdown.net_pnl,
    }
    if fmt == "json":
        out.write(json.dumps(data) + "\n")
        return
    out.write(f"Final BTC Price: {format_usd(breakdown.final_price)}\n")
    out.write(f"Resolve Odd: {breakdown.resolve_odd:.2f}\n")
    out.write(f"Perp Exit Price: {format_usd(breakdown.perp_exit_price)}\n")
    out.write(f"Polymarket P&L: {format_usd(breakdown.polymarket_pnl)}\n")
    out.write(f"Perpdex P&L: {format_usd(breakdown.perp_pnl)}\n")
    out.write(f"Total Net P&L: {format_usd(breakdown.net_pnl)}\n")


def _run_chart(args: argparse.Namespace, container: Container, out: TextIO) -> None:
    settings = get_settings()
    params = settings.hedging.to_parameters(
        capital_polymarket=args.capital,
        position_size_perp=args.position_size,
        perp_entry_price=args.entry_price,
        condition_price=args.condition_price,
        entry_odd=args.entry_odd,
        resolve_odd=args.resolve_odd,
        stop_loss_price=args.stop_loss,
        take_profit_price=args.take_profit,
    )
    if args.at is not None:
        _render_breakdown(container.pnl_engine().evaluate(params, args.at), args.format, out)
        return

    domain = settings.sampling.to_domain(
        min_price=args.min_price,
        max_price=args.max_price,
        step=args.step,
    )
    chart = container.chart_builder().build(params, domain, odds=_parse_odds(args.odds))
    if args.format == "json":
        payload: dict[str, Any] = chart.to_dict()
        payload["parameters"] = dict(describe_parameters(params))
        out.write(json.dumps(payload) + "\n")
    else:
        _render_table(chart, out)


def _build_api_request(args: argparse.Namespace) -> DashboardApiRequest:
    paging: dict[str, int] = {"offset": args.offset}
    if args.limit is not None:
        paging["limit"] = args.limit
    if args.endpoint == "sweeps":
        return sweeps_request(
            market_slug=args.market_slug,
            market_question=args.market_question,
            market_type=args.market_type,
            sort_field=args.sort_field,
            sort_direction=args.sort_direction,
            **paging,
        )
    if args.endpoint == "aggregated":
        return aggregated_sweeps_request(period=args.period, market_type=args.market_type)
    if args.endpoint == "daily-metrics":
        return daily_metrics_request(**paging)
    if args.endpoint == "user-daily-metrics":
        address = args.address[0] if args.address else ""
        return user_daily_metrics_request(address, **paging)
    return users_daily_metrics_request(args.address, **paging)


def run(argv: Optional[list[str]] = None, out: Optional[TextIO] = None) -> int:
    """Run the CLI; returns the process exit status."""
    configure_logging()
    logger = structlog.get_logger("main")
    out = out or sys.stdout

    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["chart"])

    container = Container()
    try:
        if args.command == "api-url":
            request = _build_api_request(args)
            out.write(request.url(get_settings().dashboard_api.base_url) + "\n")
            logger.debug(
                "main_api_url_built",
                endpoint=args.endpoint,
                addresses=[mask_address(a) for a in args.address],
            )
        else:
            _run_chart(args, container, out)
    except HedgingError as e:
        logger.error("main_invalid_input", error=str(e), error_type=type(e).__name__)
        return EXIT_INVALID_INPUT
    return 0


def main() -> None:
    sys.exit(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
